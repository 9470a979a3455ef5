"""Utility helpers for checklist PDF generation."""
from __future__ import annotations

from datetime import date, datetime

_WEEKDAYS = ("lunedì", "martedì", "mercoledì", "giovedì", "venerdì", "sabato", "domenica")
_MONTHS = (
    "gennaio",
    "febbraio",
    "marzo",
    "aprile",
    "maggio",
    "giugno",
    "luglio",
    "agosto",
    "settembre",
    "ottobre",
    "novembre",
    "dicembre",
)


def format_long_date(value: date) -> str:
    """``Lunedì 19 ottobre 2026``, independent from the process locale."""

    label = f"{_WEEKDAYS[value.weekday()]} {value.day} {_MONTHS[value.month - 1]} {value.year}"
    return label[:1].upper() + label[1:]


def format_timestamp(value: datetime) -> str:
    return value.strftime("%d/%m/%Y %H:%M")


def scaled_dimensions(width: float, height: float, max_width: float, max_height: float) -> tuple[float, float]:
    if width <= 0 or height <= 0:
        return 0.0, 0.0
    scale = min(max_width / width, max_height / height)
    return width * scale, height * scale


class PageCounter:
    def __init__(self, total_pages: int) -> None:
        self.total_pages = total_pages
        self.current_page = 1

    def advance(self) -> tuple[int, int]:
        page = self.current_page
        self.current_page += 1
        return page, self.total_pages
