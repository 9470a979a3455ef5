"""Report generation services."""
from __future__ import annotations

import logging
from datetime import date, datetime
from pathlib import Path
from typing import Sequence

from rapporto_cassette.core.config import settings
from rapporto_cassette.core.kits_parser import parse_kits_data
from rapporto_cassette.core.models import Section
from rapporto_cassette.services.pdf.checklist import ReportOptions, render_checklist_pdf

logger = logging.getLogger(__name__)


def write_atomically(path: Path, payload: bytes) -> Path:
    """Write ``payload`` next to ``path`` then move it in place.

    A failure leaves neither a partial report nor the temporary file behind.
    """

    target = Path(path)
    temp_path = target.with_name(f"{target.name}.tmp")
    try:
        temp_path.write_bytes(payload)
        temp_path.replace(target)
    except OSError:
        temp_path.unlink(missing_ok=True)
        raise
    return target


def generate_checklist_report(
    output_path: Path | str,
    sections: Sequence[Section],
    options: ReportOptions,
) -> Path:
    """Render ``sections`` and write the finished PDF to ``output_path``."""

    logger.info(
        "Generazione del rapporto: %s kit, sede=%s, operatore=%s",
        len(sections),
        options.site,
        options.operator,
    )
    pdf_bytes = render_checklist_pdf(sections, options)
    target = write_atomically(Path(output_path), pdf_bytes)
    logger.info("Rapporto scritto: %s (%s byte)", target, len(pdf_bytes))
    return target


def generate_from_kits_data(
    *,
    operator: str,
    kits_data: str,
    site: str,
    revision: str,
    signature_path: str | Path | None = None,
    logo_path: str | Path | None = None,
    output_path: Path | str | None = None,
    report_date: date | None = None,
) -> Path:
    today = report_date or date.today()
    sections = parse_kits_data(kits_data, reference_date=today)
    options = ReportOptions(
        site=site,
        operator=operator,
        revision=revision or settings.DEFAULT_REVISION,
        report_date=today,
        generated_at=datetime.now(),
        logo_path=logo_path or None,
        signature_path=signature_path or None,
    )
    return generate_checklist_report(output_path or settings.OUTPUT_PATH, sections, options)
