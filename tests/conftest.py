from __future__ import annotations

import sys
from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from rapporto_cassette.core.models import Item, Section

from tests.helpers import TODAY, in_days


@pytest.fixture()
def make_item():
    def _make_item(name: str = "Guanti", *, days: int | None = None, expiry: str | None = None, **kwargs) -> Item:
        if expiry is None:
            expiry = in_days(days) if days is not None else ""
        kwargs.setdefault("quantity", 2)
        kwargs.setdefault("max_quantity", 2)
        return Item(name=name, expiry=expiry, reference_date=TODAY, **kwargs)

    return _make_item


@pytest.fixture()
def make_section(make_item):
    def _make_section(title: str = "K1", count: int = 3, **kwargs) -> Section:
        items = [make_item(f"Articolo {index}", days=10 * (index + 1)) for index in range(count)]
        return Section(title=title, items=items, **kwargs)

    return _make_section
