"""Plain-text export: fixed-layout ticket report."""

from __future__ import annotations

from datetime import datetime, timezone

from mailticket.domain.entities.ticket import TicketRecord

# Upper bounds per field; ordinary emails never reach them
MAX_TICKET_ID = 100
MAX_SENDER = 200
MAX_SUBJECT = 500
MAX_CATEGORY_LABEL = 100
MAX_PRIORITY = 20
MAX_BODY = 10_000
MAX_INSIGHTS = 2_000

REPORT_TEMPLATE = """\
TICKET INFORMATION
==================

Ticket ID:    {ticket_id}
From:         {sender}
Subject:      {subject}
Category:     {category_label}
Priority:     {priority}
Confidence:   {confidence}%
Created:      {created}

DESCRIPTION
-----------
{body}

INSIGHTS
--------
{insights}"""


def _cap(value, limit: int) -> str:
    return str(value or "")[:limit]


def format_created(timestamp: str | None) -> str:
    """Render an ISO timestamp as ``YYYY-MM-DD HH:MM:SS UTC``, or ``Unknown``."""
    if not timestamp:
        return "Unknown"
    try:
        parsed = datetime.fromisoformat(timestamp.replace("Z", "+00:00"))
    except ValueError:
        return "Unknown"
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc).strftime("%Y-%m-%d %H:%M:%S UTC")


def to_text(record: TicketRecord) -> str:
    priority = record.priority.value if record.priority else "medium"
    confidence = round(max(0.0, min(1.0, record.confidence or 0.0)) * 100)
    return REPORT_TEMPLATE.format(
        ticket_id=_cap(record.ticket_id, MAX_TICKET_ID),
        sender=_cap(record.sender, MAX_SENDER),
        subject=_cap(record.subject, MAX_SUBJECT),
        category_label=_cap(record.category_label, MAX_CATEGORY_LABEL),
        priority=_cap(priority, MAX_PRIORITY).upper(),
        confidence=confidence,
        created=format_created(record.timestamp),
        body=_cap(record.body, MAX_BODY),
        insights=_cap(record.insights, MAX_INSIGHTS),
    ).strip()
