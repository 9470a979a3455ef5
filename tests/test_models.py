from __future__ import annotations

import itertools

import pytest

from rapporto_cassette.core.models import (
    NOT_APPLICABLE,
    UNKNOWN_DAYS,
    Item,
    ItemStatus,
    Section,
    classify_status,
    parse_expiry,
    truncate_text,
)
from tests.helpers import TODAY, in_days


@pytest.mark.parametrize(
    ("quarantine", "recall", "days", "not_applicable", "expected"),
    [
        (True, True, -3, False, ItemStatus.QUARANTINE),
        (True, False, 200, True, ItemStatus.QUARANTINE),
        (False, True, 0, False, ItemStatus.RECALL),
        (False, False, 0, False, ItemStatus.EXPIRED),
        (False, False, -12, False, ItemStatus.EXPIRED),
        (False, False, 1, False, ItemStatus.EXPIRING),
        (False, False, 30, False, ItemStatus.EXPIRING),
        (False, False, 31, False, ItemStatus.OK),
        (False, False, None, True, ItemStatus.NOT_APPLICABLE),
        (False, False, None, False, ItemStatus.OK),
    ],
)
def test_classify_status_priority(quarantine, recall, days, not_applicable, expected):
    assert (
        classify_status(
            quarantine=quarantine,
            recall=recall,
            days_to_expiry=days,
            not_applicable=not_applicable,
        )
        is expected
    )


def test_item_status_matches_pure_classification(make_item):
    for quarantine, recall, days in itertools.product((False, True), (False, True), (-5, 0, 10, 45, None)):
        item = make_item(days=days, quarantine=quarantine, recall=recall)
        expected = classify_status(
            quarantine=quarantine,
            recall=recall,
            days_to_expiry=days,
            not_applicable=False,
        )
        assert item.status is expected


def test_expiry_scenarios(make_item):
    assert make_item(days=10).status is ItemStatus.EXPIRING
    assert make_item(days=0).status is ItemStatus.EXPIRED
    assert make_item(days=-1).status is ItemStatus.EXPIRED
    assert make_item(days=90).status is ItemStatus.OK


def test_quarantine_wins_over_expired(make_item):
    item = make_item(days=-4)
    assert item.status is ItemStatus.EXPIRED
    assert item.set_quarantine(True) is ItemStatus.QUARANTINE
    assert item.status is ItemStatus.QUARANTINE
    assert item.set_quarantine(False) is ItemStatus.EXPIRED


def test_toggling_flags_is_idempotent(make_item):
    item = make_item(days=15)
    first = item.set_recall(True)
    second = item.set_recall(True)
    assert first is second is ItemStatus.RECALL
    assert item.status is ItemStatus.RECALL


def test_days_to_expiry_and_unknown_sentinel(make_item):
    assert make_item(days=12).days_to_expiry == 12
    expired = make_item(days=-1)
    assert expired.days_to_expiry == -1
    assert expired.has_known_expiry

    unknown = make_item(expiry="31-12-2026")
    assert unknown.days_to_expiry == UNKNOWN_DAYS
    assert not unknown.has_known_expiry
    assert unknown.status is ItemStatus.OK


def test_not_applicable_marker(make_item):
    item = make_item(expiry=NOT_APPLICABLE)
    assert item.days_to_expiry == UNKNOWN_DAYS
    assert item.status is ItemStatus.NOT_APPLICABLE


@pytest.mark.parametrize("value", ["", None, "N/D", "2026-10-19", "32/01/2026", "domani"])
def test_parse_expiry_degrades_silently(value):
    assert parse_expiry(value) is None


def test_parse_expiry_accepts_day_month_year():
    assert parse_expiry(" 19/10/2026 ") == TODAY


def test_quantity_predicates(make_item):
    item = make_item(quantity=1, max_quantity=3, min_threshold=2)
    assert not item.is_complete()
    assert not item.is_excess()
    assert item.is_below_threshold()
    assert item.display_label() == "Guanti [INCOMPLETO: 1/3]"

    excess = make_item(quantity=5, max_quantity=3)
    assert excess.is_complete() and excess.is_excess()
    assert excess.display_label() == "Guanti [ECCESSO: 5/3]"
    assert make_item(quantity=3, max_quantity=3).display_label() == "Guanti"


def test_table_values_fall_back_and_truncate(make_item):
    item = make_item("Benda elastica autoadesiva grande", days=5, serial="SN-9", quantity=1, max_quantity=4)
    code, name, lot, expiry, days, quantity, minimum, maximum, status = item.table_values()
    assert code == NOT_APPLICABLE
    assert name == "Benda elastica au..."
    assert len(name) == 20
    assert lot == "SN-9"
    assert expiry == in_days(5)
    assert days == "5"
    assert (quantity, minimum, maximum) == ("1", "0", "4")
    assert status == "IN_SCADENZA"
    assert item.name == "Benda elastica autoadesiva grande"
    assert "IN_SCADENZA" in item.text_row()


def test_truncate_text_keeps_short_values():
    assert truncate_text("Garza", 20) == "Garza"
    assert truncate_text("x" * 21, 20) == "x" * 17 + "..."


def test_completeness_percentage(make_item):
    assert Section(title="Vuoto").completeness_percentage() == 0.0
    section = Section(
        title="K1",
        items=[
            make_item("A", quantity=2, max_quantity=2),
            make_item("B", quantity=3, max_quantity=2),
            make_item("C", quantity=0, max_quantity=2),
            make_item("D", quantity=1, max_quantity=2),
        ],
    )
    assert section.completeness_percentage() == 50.0
    section.add_item(make_item("E", quantity=4, max_quantity=4))
    assert section.completeness_percentage() == 60.0


def test_caption_lists_optional_labels(make_item):
    section = Section(title="K7", location="Magazzino", items=[make_item()])
    assert section.caption() == "Kit: K7 | Ubicazione: Magazzino | Completezza: 100.0%"
    section.responsible = "M. Rossi"
    assert section.caption() == "Kit: K7 | Ubicazione: Magazzino | Responsabile: M. Rossi | Completezza: 100.0%"


def test_fefo_order_excludes_blocked_and_sorts(make_item):
    items = [
        make_item("Zeta"),
        make_item("Cerotti", days=40),
        make_item("Alfa"),
        make_item("Ghiaccio", days=-2),
        make_item("Bloccato", days=1, quarantine=True),
        make_item("Richiamato", days=3, recall=True),
        make_item("Garza", days=40),
        make_item("Soluzione", days=5),
    ]
    section = Section(title="K1", items=items)
    ordered = [item.name for item in section.fefo_items()]
    assert ordered == ["Ghiaccio", "Soluzione", "Cerotti", "Garza", "Alfa", "Zeta"]
    assert [item.name for item in section.blocked_items()] == ["Bloccato", "Richiamato"]
    assert [item.name for item in section.items][:2] == ["Zeta", "Cerotti"]


def test_fefo_is_rederived_after_mutation(make_item):
    first = make_item("Primo", days=5)
    second = make_item("Secondo", days=8)
    section = Section(title="K1", items=[first, second])
    assert [item.name for item in section.fefo_items()] == ["Primo", "Secondo"]

    first.set_quarantine(True)
    section.add_item(make_item("Terzo", days=2))
    assert [item.name for item in section.fefo_items()] == ["Terzo", "Secondo"]
    assert section.blocked_items() == [first]


def test_fefo_invariants_hold_for_mixed_items(make_item):
    days_pool = [None, -3, 0, 7, 7, 30, 120, None]
    items = [make_item(f"N{index:02d}", days=days) for index, days in enumerate(days_pool * 3)]
    ordered = Section(title="K", items=items).fefo_items()

    known = [item for item in ordered if item.has_known_expiry]
    unknown = [item for item in ordered if not item.has_known_expiry]
    assert ordered == known + unknown
    assert [item.days_to_expiry for item in known] == sorted(item.days_to_expiry for item in known)
    assert len(ordered) == len(items)


def test_items_accept_missing_optional_text():
    item = Item(name="Forbici", code=None, lot=None, expiry=None, reference_date=TODAY)
    assert item.code == "" and item.lot == "" and item.expiry == ""
    assert item.status is ItemStatus.OK
