"""Structured export: lossless JSON rendering of a ticket record."""

from __future__ import annotations

import json

from mailticket.domain.entities.ticket import TicketRecord
from mailticket.domain.errors import InvalidInput


def to_json(record: TicketRecord) -> str:
    return json.dumps(record.to_dict(), indent=2, ensure_ascii=False)


def from_json(raw: str) -> TicketRecord:
    """Parse a structured export back into a TicketRecord.

    Raises:
        InvalidInput: if *raw* is not a JSON object holding every record field.
    """
    try:
        parsed = json.loads(raw)
    except json.JSONDecodeError as e:
        raise InvalidInput(f"Ticket export is not valid JSON: {e.msg}") from e

    if not isinstance(parsed, dict):
        raise InvalidInput("Ticket export must be a JSON object")
    return TicketRecord.from_dict(parsed)
