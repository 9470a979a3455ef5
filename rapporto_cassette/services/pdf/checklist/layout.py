"""Two-column flow of kit sections across fixed-size pages."""
from __future__ import annotations

import logging
from typing import Callable, Iterable, Sequence

from rapporto_cassette.core.models import Section
from .measure import estimate_section_height
from .models import (
    LEFT_COLUMN,
    RIGHT_COLUMN,
    DocumentPlan,
    Placement,
    PlacementState,
    PlannedSection,
)
from .style import ChecklistStyle, DEFAULT_STYLE

logger = logging.getLogger(__name__)


class LayoutError(ValueError):
    """Raised when a single section cannot fit on an empty page."""


class ColumnLayoutPlanner:
    """Single forward pass placing blocks in two independent columns.

    Each column owns a cursor (next free Y, consumed top-down). A cursor is only
    compared with the shared bottom boundary, never with the other column, and
    only the chosen column advances.
    """

    def __init__(
        self,
        *,
        top: float,
        bottom: float,
        min_slack: float,
        spacing: float,
        safety_pad: float,
        on_new_page: Callable[[int], None] | None = None,
    ) -> None:
        if top <= bottom:
            raise ValueError("L'area utile della pagina è vuota")
        self.top = top
        self.bottom = bottom
        self.min_slack = min_slack
        self.spacing = spacing
        self.safety_pad = safety_pad
        self.on_new_page = on_new_page
        self.page_index = 0
        self.cursors = [top, top]
        self.preferred_column = LEFT_COLUMN

    @classmethod
    def for_style(cls, style: ChecklistStyle = DEFAULT_STYLE, **kwargs) -> "ColumnLayoutPlanner":
        return cls(
            top=style.content_top,
            bottom=style.content_bottom,
            min_slack=style.min_section_height,
            spacing=style.section_spacing,
            safety_pad=style.safety_pad,
            **kwargs,
        )

    @property
    def page_capacity(self) -> float:
        return self.top - self.bottom

    @property
    def page_count(self) -> int:
        return self.page_index + 1

    def available(self, column: int) -> float:
        return self.cursors[column] - self.bottom

    def fits(self, column: int, height: float) -> bool:
        return self.available(column) >= height + self.min_slack

    def _candidate_column(self) -> int:
        # The left column keeps the preference until a section overflows it.
        if self.preferred_column == LEFT_COLUMN or self.cursors[LEFT_COLUMN] >= self.cursors[RIGHT_COLUMN]:
            return LEFT_COLUMN
        return RIGHT_COLUMN

    def _open_page(self) -> None:
        self.page_index += 1
        self.cursors = [self.top, self.top]
        self.preferred_column = LEFT_COLUMN
        if self.on_new_page is not None:
            self.on_new_page(self.page_index)

    def _commit(self, column: int, height: float, state: PlacementState) -> Placement:
        placement = Placement(
            page_index=self.page_index,
            column=column,
            y=self.cursors[column],
            height=height,
            state=state,
        )
        self.cursors[column] -= height + self.spacing + self.safety_pad
        self.preferred_column = column
        return placement

    def place(self, height: float, *, label: str = "") -> Placement:
        if height < 0:
            raise ValueError("L'altezza di una sezione non può essere negativa")
        candidate = self._candidate_column()
        if self.fits(candidate, height):
            return self._commit(candidate, height, PlacementState.ON_PAGE_HAS_ROOM)

        other = RIGHT_COLUMN if candidate == LEFT_COLUMN else LEFT_COLUMN
        if self.fits(other, height):
            return self._commit(other, height, PlacementState.NEEDS_OTHER_COLUMN)

        if height + self.min_slack > self.page_capacity:
            raise LayoutError(
                f"La sezione {label or '?'} ({height:.1f} pt) non entra in una pagina vuota "
                f"({self.page_capacity - self.min_slack:.1f} pt disponibili)"
            )
        self._open_page()
        return self._commit(self._candidate_column(), height, PlacementState.NEEDS_NEW_PAGE)

    def plan(self, heights: Iterable[float]) -> list[Placement]:
        return [self.place(height) for height in heights]


def build_plan(
    sections: Sequence[Section],
    *,
    style: ChecklistStyle = DEFAULT_STYLE,
    estimate: Callable[[Section, ChecklistStyle], float] = estimate_section_height,
) -> DocumentPlan:
    """Assign every section to a page and column; the first page always exists."""

    planner = ColumnLayoutPlanner.for_style(style)
    plan = DocumentPlan()
    plan.page(0)
    for section in sections:
        height = estimate(section, style)
        placement = planner.place(height, label=section.title)
        logger.debug(
            "[checklist_pdf] collocata %r pagina=%s colonna=%s y=%.1f altezza=%.1f stato=%s",
            section.title,
            placement.page_index + 1,
            placement.column,
            placement.y,
            height,
            placement.state.value,
        )
        plan.page(placement.page_index).sections.append(PlannedSection(section=section, placement=placement))
    return plan
