"""Command-line surface of the checklist generator."""
from __future__ import annotations

import logging
import sys
import traceback

from rapporto_cassette.core.config import settings
from rapporto_cassette.core.logging_config import configure_logging
from rapporto_cassette.core.services import generate_from_kits_data

logger = logging.getLogger(__name__)

USAGE = (
    "❌ Parametri insufficienti. Uso: rapporto-cassette "
    "<operatore> <kits> <sede> <revisione> [<firma>] [<logo>]"
)


def main(argv=None) -> int:
    """Generate the checklist report from positional arguments, return the exit code."""

    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) < 4:
        print(USAGE, file=sys.stderr)
        return 1

    operator, kits_data, site, revision = args[:4]
    signature_path = args[4] if len(args) > 4 else ""
    logo_path = args[5] if len(args) > 5 else ""

    try:
        configure_logging()
        logger.info("Avvio della generazione con %s argomento/i", len(args))
        output = generate_from_kits_data(
            operator=operator,
            kits_data=kits_data,
            site=site,
            revision=revision,
            signature_path=signature_path,
            logo_path=logo_path,
            output_path=settings.OUTPUT_PATH,
        )
    except Exception as exc:
        logger.exception("Generazione del rapporto fallita")
        print(f"❌ Errore durante la generazione del rapporto: {exc}", file=sys.stderr)
        print(traceback.format_exc(), file=sys.stderr)
        return 1

    print(f"✅ Rapporto generato con successo: {output}")
    return 0
