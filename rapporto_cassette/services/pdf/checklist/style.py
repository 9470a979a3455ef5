"""Styling primitives for the first-aid checklist PDF."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4


@dataclass(frozen=True)
class TableColumn:
    label: str
    ratio: float


# ratios are relative to the column width
TABLE_COLUMNS: tuple[TableColumn, ...] = (
    TableColumn("Codice", 0.10),
    TableColumn("Nome", 0.21),
    TableColumn("Lotto/Ser.", 0.13),
    TableColumn("Scadenza", 0.13),
    TableColumn("Gg.", 0.07),
    TableColumn("Qta", 0.06),
    TableColumn("Min", 0.06),
    TableColumn("Max", 0.06),
    TableColumn("Stato", 0.18),
)


@dataclass(frozen=True)
class ThemeTokens:
    fonts: Mapping[str, tuple[str, float]]
    colors: Mapping[str, colors.Color]


_DEFAULT_TOKENS = ThemeTokens(
    fonts={
        "title": ("Helvetica-Bold", 14),
        "header": ("Helvetica", 10),
        "subtitle": ("Helvetica", 9),
        "caption": ("Helvetica-Bold", 10),
        "body": ("Helvetica", 10),
        "table_header": ("Helvetica-Bold", 5.5),
        "table": ("Helvetica", 5.5),
        "small": ("Helvetica", 8),
    },
    colors={
        "text": colors.black,
        "placeholder": colors.lightgrey,
        "rule": colors.black,
        "container_border": colors.Color(200 / 255, 200 / 255, 200 / 255),
        "container_fill": colors.Color(248 / 255, 248 / 255, 248 / 255),
        "table_header": colors.lightgrey,
        "grid": colors.black,
        "row_alert": colors.Color(1, 200 / 255, 200 / 255),
        "row_warning": colors.Color(1, 1, 200 / 255),
        "row_neutral": colors.white,
        "attention": colors.red,
    },
)


@dataclass(frozen=True)
class ChecklistStyle:
    """Page geometry, spacing and typography of the checklist report."""

    page_size: tuple[float, float] = A4
    margin: float = 40
    header_height: float = 100
    footer_height: float = 90
    column_gutter: float = 24
    logo_max: tuple[float, float] = (120, 40)
    signature_max: tuple[float, float] = (180, 60)

    section_spacing: float = 8
    item_spacing: float = 14
    title_spacing: float = 20
    bullet_indent: float = 15
    min_section_height: float = 40
    safety_pad: float = 5
    wrap_safety_margin: float = 15

    caption_line_height: float = 14
    table_row_height: float = 12
    blocked_line_height: float = 12
    container_inset: float = 8

    tokens: ThemeTokens = field(default=_DEFAULT_TOKENS)

    @property
    def page_width(self) -> float:
        return self.page_size[0]

    @property
    def page_height(self) -> float:
        return self.page_size[1]

    @property
    def content_width(self) -> float:
        return self.page_width - 2 * self.margin

    @property
    def column_width(self) -> float:
        return (self.content_width - self.column_gutter) / 2

    @property
    def wrap_width(self) -> float:
        return self.column_width - self.bullet_indent - 20

    @property
    def content_top(self) -> float:
        """First usable Y below the fixed header."""

        return self.page_height - self.margin - self.header_height - self.section_spacing

    @property
    def content_bottom(self) -> float:
        return self.margin + self.footer_height

    def column_x(self, column: int) -> float:
        return self.margin + column * (self.column_width + self.column_gutter)

    def column_widths(self) -> list[float]:
        return [column.ratio * self.column_width for column in TABLE_COLUMNS]

    def font(self, role: str) -> tuple[str, float]:
        return self.tokens.fonts.get(role, self.tokens.fonts["body"])

    def color(self, name: str) -> colors.Color:
        return self.tokens.colors.get(name, self.tokens.colors["text"])


DEFAULT_STYLE = ChecklistStyle()
