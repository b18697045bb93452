"""Ticket record: the structured result of parsing one support email."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from mailticket.domain.errors import InvalidInput
from mailticket.domain.value_objects.enums import Priority

# Wire name -> attribute name, in export order
FIELD_NAMES: dict[str, str] = {
    "ticketId": "ticket_id",
    "from": "sender",
    "subject": "subject",
    "body": "body",
    "category": "category",
    "categoryLabel": "category_label",
    "priority": "priority",
    "confidence": "confidence",
    "timestamp": "timestamp",
    "insights": "insights",
}

TEXT_FIELDS = tuple(name for name in FIELD_NAMES if name not in ("priority", "confidence"))


@dataclass(frozen=True)
class TicketRecord:
    ticket_id: str
    sender: str
    subject: str
    body: str
    category: str
    category_label: str
    priority: Priority
    confidence: float
    timestamp: str
    insights: str

    def to_dict(self) -> dict[str, Any]:
        """Return the record keyed by wire names, in a stable order."""
        data: dict[str, Any] = {}
        for wire_name, attr in FIELD_NAMES.items():
            value = getattr(self, attr)
            data[wire_name] = value.value if isinstance(value, Priority) else value
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TicketRecord:
        """Rebuild a record from its wire mapping.

        Raises:
            InvalidInput: if a field is missing or mistyped, the priority is
                unknown, or the confidence is not a number in [0, 1].
        """
        missing = [name for name in FIELD_NAMES if name not in data]
        if missing:
            raise InvalidInput(f"Ticket record is missing fields: {', '.join(missing)}")

        not_text = [name for name in TEXT_FIELDS if not isinstance(data[name], str)]
        if not_text:
            raise InvalidInput(f"Ticket record fields must be strings: {', '.join(not_text)}")

        try:
            priority = Priority(data["priority"])
        except ValueError:
            raise InvalidInput(f"Unknown priority: {data['priority']!r}") from None

        raw_confidence = data["confidence"]
        if isinstance(raw_confidence, bool):
            raise InvalidInput(f"Invalid confidence: {raw_confidence!r}")
        try:
            confidence = float(raw_confidence)
        except (TypeError, ValueError):
            raise InvalidInput(f"Invalid confidence: {raw_confidence!r}") from None
        if not 0.0 <= confidence <= 1.0:
            raise InvalidInput(f"Confidence out of range [0, 1]: {confidence}")

        values = {attr: data[wire_name] for wire_name, attr in FIELD_NAMES.items()}
        values["priority"] = priority
        values["confidence"] = confidence
        return cls(**values)
