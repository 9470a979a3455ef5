"""Fixed page furniture: header, signature footer and page stamps."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
import logging

from PIL import Image, ImageOps
from reportlab.lib.utils import ImageReader

from .style import ChecklistStyle
from .utils import format_timestamp, scaled_dimensions

logger = logging.getLogger(__name__)

TITLE_LINES = ("CHECK VERIFICA CONTENUTO MINIMO", "CASSETTA DI PRIMO SOCCORSO")
SUBTITLE_TEMPLATE = (
    "Il presente modulo è utilizzato per verificare il contenuto minimo delle cassette di primo soccorso,",
    "come indicato dal D.M. 388/2003, installate presso l'azienda {company}.",
)
SIGNATURE_LABEL = "Firma operatore:"


@dataclass(frozen=True)
class LoadedImage:
    reader: ImageReader
    width: float
    height: float


def load_image(path: Path | None) -> LoadedImage | None:
    """Load an optional image; a missing file yields ``None``, a broken one raises."""

    if path is None:
        return None
    image_path = Path(path)
    if not image_path.exists():
        logger.info("[checklist_pdf] immagine assente, sostituita da un segnaposto: %s", image_path)
        return None
    with Image.open(image_path) as img:
        oriented = ImageOps.exif_transpose(img)
        copy = oriented.copy()
    return LoadedImage(reader=ImageReader(copy), width=copy.width, height=copy.height)


@dataclass(frozen=True)
class HeaderContent:
    site: str
    date_label: str
    operator: str
    revision: str
    company: str


def draw_header(canvas, *, style: ChecklistStyle, content: HeaderContent, logo: LoadedImage | None) -> float:
    """Draw the fixed page header and return the first usable Y below it."""

    width = style.page_width
    margin = style.margin
    top = style.page_height - margin
    logo_w, logo_h = style.logo_max

    canvas.saveState()
    if logo is not None:
        drawn_w, drawn_h = scaled_dimensions(logo.width, logo.height, logo_w, logo_h)
        canvas.drawImage(logo.reader, margin, top - drawn_h, width=drawn_w, height=drawn_h, mask="auto")
    else:
        canvas.setStrokeColor(style.color("placeholder"))
        canvas.rect(margin, top - logo_h, logo_w, logo_h, stroke=1, fill=0)

    canvas.setFillColor(style.color("text"))
    header_font = style.font("header")
    if content.revision:
        canvas.setFont(*header_font)
        canvas.drawRightString(width - margin, top - 10, content.revision)

    canvas.setFont(*style.font("title"))
    canvas.drawCentredString(width / 2, top - 18, TITLE_LINES[0])
    canvas.drawCentredString(width / 2, top - 36, TITLE_LINES[1])

    canvas.setFont(*style.font("subtitle"))
    canvas.drawCentredString(width / 2, top - 50, SUBTITLE_TEMPLATE[0])
    canvas.drawCentredString(width / 2, top - 62, SUBTITLE_TEMPLATE[1].format(company=content.company))

    canvas.setFont(*header_font)
    info_x = width - margin - 150
    for offset, line in enumerate(
        (f"Sede: {content.site}", f"Data: {content.date_label}", f"Operatore: {content.operator}")
    ):
        canvas.drawString(info_x, top - 74 - offset * 11, line)

    canvas.setStrokeColor(style.color("rule"))
    canvas.line(margin, top - style.header_height, width - margin, top - style.header_height)
    canvas.restoreState()
    return style.content_top


def draw_signature_footer(canvas, *, style: ChecklistStyle, operator: str, signature: LoadedImage | None) -> None:
    footer_y = style.margin + style.footer_height
    right_x = style.page_width - style.margin - 200

    canvas.saveState()
    canvas.setFillColor(style.color("text"))
    canvas.setFont(*style.font("body"))
    canvas.drawString(right_x, footer_y, SIGNATURE_LABEL)
    if signature is not None:
        sig_w, sig_h = style.signature_max
        drawn_w, drawn_h = scaled_dimensions(signature.width, signature.height, sig_w, sig_h)
        canvas.drawImage(signature.reader, right_x, footer_y - 50, width=drawn_w, height=drawn_h, mask="auto")
    else:
        canvas.setStrokeColor(style.color("rule"))
        canvas.line(right_x, footer_y - 30, right_x + 150, footer_y - 30)
    canvas.drawString(right_x, footer_y - 65, operator)
    canvas.restoreState()


def draw_page_stamp(
    canvas,
    *,
    style: ChecklistStyle,
    page_number: int,
    page_count: int,
    generated_at: datetime,
) -> None:
    baseline = style.margin / 2
    canvas.saveState()
    canvas.setFillColor(style.color("text"))
    canvas.setFont(*style.font("body"))
    canvas.drawCentredString(style.page_width / 2, baseline, f"Pagina {page_number} di {page_count}")
    canvas.drawString(style.margin, baseline, f"Generato: {format_timestamp(generated_at)}")
    canvas.restoreState()
