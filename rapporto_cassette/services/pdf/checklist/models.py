"""Data models for the checklist PDF renderer."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from rapporto_cassette.core.models import Section


class ReportOptions(BaseModel):
    """Header metadata and optional assets of a checklist report."""

    site: str
    operator: str
    revision: str = ""
    report_date: date = Field(default_factory=date.today)
    generated_at: datetime = Field(default_factory=datetime.now)
    company_name: str | None = None
    logo_path: Path | None = None
    signature_path: Path | None = None

    @field_validator("logo_path", "signature_path", mode="before")
    @classmethod
    def _empty_path_as_none(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value


class PlacementState(str, Enum):
    ON_PAGE_HAS_ROOM = "on_page_has_room"
    NEEDS_OTHER_COLUMN = "needs_other_column"
    NEEDS_NEW_PAGE = "needs_new_page"


LEFT_COLUMN = 0
RIGHT_COLUMN = 1


@dataclass(frozen=True)
class Placement:
    page_index: int
    column: int
    y: float
    height: float
    state: PlacementState

    @property
    def bottom(self) -> float:
        return self.y - self.height


@dataclass
class PlannedSection:
    section: Section
    placement: Placement


@dataclass
class PagePlan:
    index: int
    sections: list[PlannedSection] = field(default_factory=list)

    @property
    def number(self) -> int:
        return self.index + 1


@dataclass
class DocumentPlan:
    pages: list[PagePlan] = field(default_factory=list)

    def __iter__(self):
        return iter(self.pages)

    def __len__(self):
        return len(self.pages)

    def page(self, index: int) -> PagePlan:
        while len(self.pages) <= index:
            self.pages.append(PagePlan(index=len(self.pages)))
        return self.pages[index]

    def placements(self) -> list[Placement]:
        return [planned.placement for page in self.pages for planned in page.sections]
