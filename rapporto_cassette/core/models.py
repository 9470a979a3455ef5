"""Inventory models for first-aid kit checklists.

Derived values (days to expiry, status, FEFO order, completeness) are never
stored: they are computed on read from the fields an operator can change, so
toggling a quarantine or recall flag can never leave a stale status behind.
"""
from __future__ import annotations

from datetime import date, datetime
from enum import Enum
from typing import Iterable

from pydantic import BaseModel, Field, field_validator

from rapporto_cassette.core.config import settings

EXPIRY_DATE_FORMAT = "%d/%m/%Y"
NOT_APPLICABLE = "N/D"
UNKNOWN_DAYS = -1
NAME_DISPLAY_BUDGET = 20
ELLIPSIS = "..."


class ItemStatus(str, Enum):
    QUARANTINE = "QUARANTENA"
    RECALL = "RICHIAMO"
    EXPIRED = "SCADUTO"
    EXPIRING = "IN_SCADENZA"
    NOT_APPLICABLE = "N/D"
    OK = "OK"


ALERT_STATUSES = frozenset({ItemStatus.EXPIRED, ItemStatus.QUARANTINE, ItemStatus.RECALL})


def parse_expiry(value: str | None) -> date | None:
    """Parse a ``dd/mm/YYYY`` expiry; anything else means "unknown"."""

    if not value:
        return None
    text = str(value).strip()
    if not text or text == NOT_APPLICABLE:
        return None
    try:
        return datetime.strptime(text, EXPIRY_DATE_FORMAT).date()
    except ValueError:
        return None


def classify_status(
    *,
    quarantine: bool,
    recall: bool,
    days_to_expiry: int | None,
    not_applicable: bool,
    warning_days: int = 30,
) -> ItemStatus:
    """Return the status of an item, first matching rule wins.

    ``days_to_expiry`` is ``None`` when the expiry is unknown.
    """

    if quarantine:
        return ItemStatus.QUARANTINE
    if recall:
        return ItemStatus.RECALL
    if days_to_expiry is not None:
        if days_to_expiry <= 0:
            return ItemStatus.EXPIRED
        if days_to_expiry <= warning_days:
            return ItemStatus.EXPIRING
        return ItemStatus.OK
    if not_applicable:
        return ItemStatus.NOT_APPLICABLE
    return ItemStatus.OK


def truncate_text(value: str, budget: int) -> str:
    if budget <= len(ELLIPSIS) or len(value) <= budget:
        return value
    return value[: budget - len(ELLIPSIS)] + ELLIPSIS


class Item(BaseModel):
    code: str = ""
    name: str
    lot: str = ""
    serial: str = ""
    quantity: int = 0
    max_quantity: int = 0
    min_threshold: int = 0
    expiry: str = ""
    note: str = ""
    quarantine: bool = False
    recall: bool = False
    reference_date: date = Field(default_factory=date.today, exclude=True, repr=False)
    warning_days: int = Field(default_factory=lambda: settings.EXPIRY_WARNING_DAYS, exclude=True, repr=False)

    @field_validator("code", "lot", "serial", "expiry", "note", mode="before")
    @classmethod
    def _none_as_empty(cls, value: object) -> object:
        if value is None:
            return ""
        if isinstance(value, str):
            return value.strip()
        return value

    @property
    def expiry_date(self) -> date | None:
        return parse_expiry(self.expiry)

    @property
    def has_known_expiry(self) -> bool:
        return self.expiry_date is not None

    @property
    def expiry_not_applicable(self) -> bool:
        return self.expiry == NOT_APPLICABLE

    @property
    def days_to_expiry(self) -> int:
        """Days left before expiry, ``UNKNOWN_DAYS`` when the expiry is unknown.

        A known expiry may legitimately yield negative values, use
        ``has_known_expiry`` to tell them apart from the sentinel.
        """

        expiry = self.expiry_date
        if expiry is None:
            return UNKNOWN_DAYS
        return (expiry - self.reference_date).days

    @property
    def status(self) -> ItemStatus:
        return classify_status(
            quarantine=self.quarantine,
            recall=self.recall,
            days_to_expiry=self.days_to_expiry if self.has_known_expiry else None,
            not_applicable=self.expiry_not_applicable,
            warning_days=self.warning_days,
        )

    @property
    def is_blocked(self) -> bool:
        return self.quarantine or self.recall

    def set_quarantine(self, flag: bool) -> ItemStatus:
        self.quarantine = bool(flag)
        return self.status

    def set_recall(self, flag: bool) -> ItemStatus:
        self.recall = bool(flag)
        return self.status

    def is_complete(self) -> bool:
        return self.quantity >= self.max_quantity

    def is_excess(self) -> bool:
        return self.quantity > self.max_quantity

    def is_below_threshold(self) -> bool:
        return self.quantity < self.min_threshold

    def display_label(self) -> str:
        if self.quantity < self.max_quantity:
            return f"{self.name} [INCOMPLETO: {self.quantity}/{self.max_quantity}]"
        if self.quantity > self.max_quantity:
            return f"{self.name} [ECCESSO: {self.quantity}/{self.max_quantity}]"
        return self.name

    def table_values(self, *, name_budget: int = NAME_DISPLAY_BUDGET) -> tuple[str, ...]:
        """Row projection used by the PDF table, truncation is display only."""

        return (
            self.code or NOT_APPLICABLE,
            truncate_text(self.name, name_budget),
            self.lot or self.serial or NOT_APPLICABLE,
            self.expiry or NOT_APPLICABLE,
            str(self.days_to_expiry) if self.has_known_expiry else NOT_APPLICABLE,
            str(self.quantity),
            str(self.min_threshold),
            str(self.max_quantity),
            self.status.value,
        )

    def text_row(self) -> str:
        code, name, lot, expiry, days, quantity, minimum, maximum, status = self.table_values(name_budget=25)
        return (
            f"{code:<10} | {name:<25} | {lot:<12} | {expiry:<12} | {days:<12} | "
            f"{quantity:>3} | {minimum:>3} | {maximum:>3} | {status:<12}"
        )


def fefo_sort_key(item: Item) -> tuple[int, int, str]:
    if item.has_known_expiry:
        return 0, item.days_to_expiry, ""
    return 1, 0, item.name


class Section(BaseModel):
    title: str
    location: str = ""
    responsible: str = ""
    items: list[Item] = Field(default_factory=list)

    @field_validator("location", "responsible", mode="before")
    @classmethod
    def _none_as_empty(cls, value: object) -> object:
        return "" if value is None else value

    def add_item(self, item: Item) -> None:
        self.items.append(item)

    def extend(self, items: Iterable[Item]) -> None:
        self.items.extend(items)

    def completeness_percentage(self) -> float:
        if not self.items:
            return 0.0
        complete = sum(1 for item in self.items if item.is_complete())
        return complete / len(self.items) * 100.0

    def fefo_items(self) -> list[Item]:
        """Items shown in the main table: blocked ones removed, first-expired first."""

        return sorted((item for item in self.items if not item.is_blocked), key=fefo_sort_key)

    def blocked_items(self) -> list[Item]:
        return [item for item in self.items if item.is_blocked]

    def caption(self) -> str:
        parts = [f"Kit: {self.title}"]
        if self.location:
            parts.append(f"Ubicazione: {self.location}")
        if self.responsible:
            parts.append(f"Responsabile: {self.responsible}")
        parts.append(f"Completezza: {self.completeness_percentage():.1f}%")
        return " | ".join(parts)

    def display_lines(self) -> list[str]:
        return [item.display_label() for item in self.fefo_items() + self.blocked_items()]


__all__ = [
    "ALERT_STATUSES",
    "Item",
    "ItemStatus",
    "NOT_APPLICABLE",
    "Section",
    "UNKNOWN_DAYS",
    "classify_status",
    "fefo_sort_key",
    "parse_expiry",
    "truncate_text",
]
