"""Adapter for the delimiter based kit format accepted on the command line.

Format: kits separated by ``|``, items by ``;``, each item being
``kitCode,location,itemCode,description,quantity,expiryDate,status``.
The quirks of this format (quantity fallback to zero, synthesized maximum and
threshold) stay in this module and never reach the model classes.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date

from rapporto_cassette.core.models import Item, Section

logger = logging.getLogger(__name__)

KIT_SEPARATOR = "|"
ITEM_SEPARATOR = ";"
FIELD_SEPARATOR = ","
RECORD_FIELDS = 7
MAX_QUANTITY_MARGIN = 2
DEFAULT_MIN_THRESHOLD = 1
DEFAULT_KIT_TITLE = "Kit Primo Soccorso"

_FLAG_STATUSES = {"QUARANTENA": "quarantine", "RICHIAMO": "recall"}


@dataclass(frozen=True)
class KitRecord:
    kit_code: str
    location: str
    item_code: str
    description: str
    quantity: int
    expiry: str
    declared_status: str


@dataclass(frozen=True)
class MalformedRecord:
    raw: str
    reason: str


def _parse_quantity(value: str) -> int:
    try:
        return int(value.strip())
    except ValueError:
        return 0


def parse_item_record(raw: str) -> KitRecord | MalformedRecord:
    parts = raw.split(FIELD_SEPARATOR)
    if len(parts) < RECORD_FIELDS:
        return MalformedRecord(raw=raw, reason=f"{len(parts)} campi invece di {RECORD_FIELDS}")
    kit_code, location, item_code, description, quantity, expiry, status = parts[:RECORD_FIELDS]
    return KitRecord(
        kit_code=kit_code.strip(),
        location=location.strip(),
        item_code=item_code.strip(),
        description=description.strip(),
        quantity=_parse_quantity(quantity),
        expiry=expiry.strip(),
        declared_status=status.strip(),
    )


def record_to_item(record: KitRecord, *, reference_date: date | None = None) -> Item:
    flags = {}
    flag = _FLAG_STATUSES.get(record.declared_status.upper())
    if flag:
        flags[flag] = True
    extra = {"reference_date": reference_date} if reference_date is not None else {}
    return Item(
        code=record.item_code,
        name=record.description,
        quantity=record.quantity,
        max_quantity=record.quantity + MAX_QUANTITY_MARGIN,
        min_threshold=DEFAULT_MIN_THRESHOLD,
        expiry=record.expiry,
        **flags,
        **extra,
    )


def parse_kit(kit_data: str, *, reference_date: date | None = None) -> Section | None:
    title = DEFAULT_KIT_TITLE
    location = ""
    items: list[Item] = []
    for raw in kit_data.split(ITEM_SEPARATOR):
        if not raw.strip():
            continue
        record = parse_item_record(raw)
        if isinstance(record, MalformedRecord):
            logger.debug("Record ignorato (%s): %r", record.reason, record.raw)
            continue
        if not items:
            title = f"Kit {record.kit_code}"
            location = record.location
        items.append(record_to_item(record, reference_date=reference_date))
    if not items:
        return None
    return Section(title=title, location=location, items=items)


def parse_kits_data(kits_data: str | None, *, reference_date: date | None = None) -> list[Section]:
    """Build the kit sections described by ``kits_data``; empty kits are dropped."""

    if not kits_data or not kits_data.strip():
        return []
    sections: list[Section] = []
    for kit_data in kits_data.split(KIT_SEPARATOR):
        if not kit_data.strip():
            continue
        section = parse_kit(kit_data, reference_date=reference_date)
        if section is None:
            logger.info("Kit senza articoli validi ignorato: %r", kit_data)
            continue
        sections.append(section)
    return sections


__all__ = [
    "KitRecord",
    "MalformedRecord",
    "parse_item_record",
    "parse_kit",
    "parse_kits_data",
    "record_to_item",
]
