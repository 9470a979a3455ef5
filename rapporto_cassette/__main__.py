"""Entry point for ``python -m rapporto_cassette``."""

from rapporto_cassette.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
