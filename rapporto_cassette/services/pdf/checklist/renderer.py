"""Render the first-aid kit checklist PDF."""
from __future__ import annotations

from contextlib import contextmanager
from io import BytesIO
from typing import Iterator, Sequence
import logging

from reportlab.pdfgen.canvas import Canvas

from rapporto_cassette.core.config import settings
from rapporto_cassette.core.models import Section
from .layout import build_plan
from .models import DocumentPlan, PagePlan, ReportOptions
from .page import (
    HeaderContent,
    draw_header,
    draw_page_stamp,
    draw_signature_footer,
    load_image,
)
from .style import ChecklistStyle, DEFAULT_STYLE
from .table import draw_section
from .utils import PageCounter, format_long_date

logger = logging.getLogger(__name__)

DOCUMENT_TITLE = "Verifica cassette di primo soccorso"


class PdfBuffer(BytesIO):
    """In-memory PDF buffer that builds a ReportLab canvas."""

    def build_canvas(self, style: ChecklistStyle) -> Canvas:
        canvas = Canvas(self, pagesize=style.page_size)
        canvas.setTitle(DOCUMENT_TITLE)
        return canvas


@contextmanager
def _page_surface(canvas: Canvas, page: PagePlan) -> Iterator[Canvas]:
    """Scope one page; it is finalized exactly once, in creation order."""

    logger.debug("[checklist_pdf] apertura pagina %s", page.number)
    try:
        yield canvas
    finally:
        canvas.showPage()


def _header_content(options: ReportOptions) -> HeaderContent:
    return HeaderContent(
        site=options.site,
        date_label=format_long_date(options.report_date),
        operator=options.operator,
        revision=options.revision or settings.DEFAULT_REVISION,
        company=options.company_name or settings.COMPANY_NAME,
    )


def _log_plan(plan: DocumentPlan) -> None:
    for page in plan:
        for planned in page.sections:
            logger.debug("[checklist_pdf] pagina %s: %s", page.number, planned.section.caption())
            for item in planned.section.items:
                logger.debug("[checklist_pdf]   %s", item.text_row())


def render_checklist_pdf(
    sections: Sequence[Section],
    options: ReportOptions,
    *,
    style: ChecklistStyle = DEFAULT_STYLE,
) -> bytes:
    """Public entry point for checklist rendering, returns the PDF bytes."""

    plan = build_plan(sections, style=style)
    if settings.REPORT_DEBUG:
        _log_plan(plan)

    logo = load_image(options.logo_path)
    signature = load_image(options.signature_path)
    header = _header_content(options)

    buffer = PdfBuffer()
    canvas = buffer.build_canvas(style)
    counter = PageCounter(len(plan))
    last_index = len(plan) - 1

    for page in plan:
        with _page_surface(canvas, page):
            draw_header(canvas, style=style, content=header, logo=logo)
            for planned in page.sections:
                draw_section(canvas, section=planned.section, placement=planned.placement, style=style)
            if page.index == last_index:
                draw_signature_footer(canvas, style=style, operator=options.operator, signature=signature)
            page_number, page_count = counter.advance()
            draw_page_stamp(
                canvas,
                style=style,
                page_number=page_number,
                page_count=page_count,
                generated_at=options.generated_at,
            )

    canvas.save()
    logger.info(
        "[checklist_pdf] %s sezione/i disegnate su %s pagina/e",
        len(sections),
        len(plan),
    )
    return buffer.getvalue()
