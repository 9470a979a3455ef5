"""Kit section rendering: bordered container, caption, FEFO table and blocked items."""
from __future__ import annotations

from rapporto_cassette.core.models import ALERT_STATUSES, Item, ItemStatus, Section
from .measure import BLOCKED_HEADING, caption_lines, fit_to_width
from .models import Placement
from .style import ChecklistStyle, TABLE_COLUMNS

CELL_PADDING = 2
BLOCKED_INDENT = 10


def row_color_name(item: Item) -> str:
    status = item.status
    if status in ALERT_STATUSES:
        return "row_alert"
    if status is ItemStatus.EXPIRING:
        return "row_warning"
    return "row_neutral"


def _fit_cells(values, style: ChecklistStyle, role: str) -> list[str]:
    font_name, font_size = style.font(role)
    return [
        fit_to_width(value, cell_width - 2 * CELL_PADDING, font_name, font_size)
        for value, cell_width in zip(values, style.column_widths())
    ]


def _header_values(style: ChecklistStyle) -> list[str]:
    return _fit_cells([column.label for column in TABLE_COLUMNS], style, "table_header")


def _cell_values(item: Item, style: ChecklistStyle) -> list[str]:
    return _fit_cells(item.table_values(), style, "table")


def _blocked_line(item: Item, style: ChecklistStyle) -> str:
    return fit_to_width(
        f"• {item.name} - {item.status.value}",
        style.column_width - BLOCKED_INDENT,
        *style.font("table"),
    )


def _draw_row(canvas, *, x: float, top: float, values: list[str], style: ChecklistStyle, fill_color) -> None:
    row_height = style.table_row_height
    widths = style.column_widths()
    bottom = top - row_height

    canvas.setFillColor(fill_color)
    canvas.rect(x, bottom, style.column_width, row_height, stroke=0, fill=1)

    canvas.setFillColor(style.color("text"))
    cell_x = x
    for value, cell_width in zip(values, widths):
        canvas.drawString(cell_x + CELL_PADDING, bottom + 4, value)
        cell_x += cell_width

    canvas.setStrokeColor(style.color("grid"))
    cell_x = x
    for cell_width in [0.0, *widths]:
        cell_x += cell_width
        canvas.line(cell_x, top, cell_x, bottom)
    canvas.line(x, top, x + style.column_width, top)
    canvas.line(x, bottom, x + style.column_width, bottom)


def draw_section(canvas, *, section: Section, placement: Placement, style: ChecklistStyle) -> None:
    """Draw ``section`` inside the footprint reserved by ``placement``."""

    x = style.column_x(placement.column)
    y = placement.y
    inset = style.container_inset
    height = placement.height

    canvas.saveState()
    canvas.setLineWidth(0.8)
    canvas.setStrokeColor(style.color("container_border"))
    canvas.setFillColor(style.color("container_fill"))
    canvas.rect(x - inset, y - height + inset, style.column_width + 2 * inset, height - 2 * inset, stroke=1, fill=1)

    cursor = y - inset - 2
    lines = caption_lines(section, style)
    band_height = len(lines) * style.caption_line_height + 4
    canvas.setLineWidth(1)
    canvas.setStrokeColor(style.color("rule"))
    canvas.rect(x, cursor - band_height, style.column_width, band_height, stroke=1, fill=0)
    canvas.setFillColor(style.color("text"))
    canvas.setFont(*style.font("caption"))
    for index, line in enumerate(lines):
        canvas.drawString(x + 5, cursor - 11 - index * style.caption_line_height, line)
    cursor -= band_height + 4

    canvas.setLineWidth(0.5)
    canvas.setFont(*style.font("table_header"))
    _draw_row(
        canvas,
        x=x,
        top=cursor,
        values=_header_values(style),
        style=style,
        fill_color=style.color("table_header"),
    )
    cursor -= style.table_row_height

    canvas.setFont(*style.font("table"))
    for item in section.fefo_items():
        _draw_row(
            canvas,
            x=x,
            top=cursor,
            values=_cell_values(item, style),
            style=style,
            fill_color=style.color(row_color_name(item)),
        )
        cursor -= style.table_row_height

    blocked = section.blocked_items()
    if blocked:
        cursor -= 8
        canvas.setFillColor(style.color("attention"))
        canvas.setFont(*style.font("table_header"))
        cursor -= style.blocked_line_height
        canvas.drawString(x, cursor + 3, BLOCKED_HEADING)
        canvas.setFont(*style.font("table"))
        for item in blocked:
            cursor -= style.blocked_line_height
            canvas.drawString(x + BLOCKED_INDENT, cursor + 3, _blocked_line(item, style))
    canvas.restoreState()
