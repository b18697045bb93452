"""Ticket assembly: id generation, display label, insights, final record."""

from __future__ import annotations

import html
import logging
import random
import secrets
from datetime import datetime, timezone
from types import MappingProxyType

from mailticket.domain.entities.classification import ClassificationResult
from mailticket.domain.entities.ticket import TicketRecord
from mailticket.domain.value_objects.enums import Priority

logger = logging.getLogger(__name__)

TICKET_ID_PREFIX = "TKT"
RANDOM_SUFFIX_LENGTH = 6

BRIEF_BODY_CHARS = 50
DETAILED_BODY_CHARS = 500

NO_INSIGHTS = "No additional insights available"

# Only these category keys ever produce suggestion text
SUGGESTIONS = MappingProxyType({
    "password_reset": "💡 Suggestion: This can often be auto-resolved with a password reset link",
    "software_install": "💡 Suggestion: Check if user has admin rights before proceeding",
    "network_issue": "💡 Suggestion: Ask user to check physical connections and restart router",
})

_BASE36_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


def to_base36(value: int) -> str:
    if value < 0:
        raise ValueError("base36 encoding requires a non-negative integer")
    if value == 0:
        return "0"
    digits = []
    while value:
        value, rem = divmod(value, 36)
        digits.append(_BASE36_DIGITS[rem])
    return "".join(reversed(digits))


def _random_bits() -> int:
    try:
        return secrets.randbits(32)
    except NotImplementedError:
        logger.warning("No OS randomness source available, using non-cryptographic fallback")
        return random.getrandbits(32)


def generate_ticket_id(now: datetime | None = None) -> str:
    """Build an id like ``TKT-<base36 ms time>-<base36 random>``."""
    now = now or datetime.now(timezone.utc)
    millis = int(now.timestamp() * 1000)
    stamp = to_base36(millis).upper()
    suffix = to_base36(_random_bits())[:RANDOM_SUFFIX_LENGTH].upper()
    return f"{TICKET_ID_PREFIX}-{stamp}-{suffix}"


def format_category_label(name: str) -> str:
    """Turn ``password_reset`` into ``Password Reset``, HTML-escaped."""
    words = str(name).split("_")
    label = " ".join(w[:1].upper() + w[1:] for w in words)
    return html.escape(label, quote=True)


def format_timestamp(now: datetime) -> str:
    """ISO-8601 UTC with millisecond precision, e.g. ``2024-05-01T09:30:00.000Z``."""
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def confidence_percent(confidence: float) -> int:
    return int(round(max(0.0, min(100.0, confidence * 100))))


def build_insights(
    classification: ClassificationResult, priority: Priority, body: str
) -> str:
    """Derive newline-joined hints for a human triager."""
    insights: list[str] = []

    if not classification.is_other():
        label = format_category_label(classification.name)
        percent = confidence_percent(classification.confidence)
        insights.append(f'✓ Automatically categorized as "{label}" with {percent}% confidence')

    if priority == Priority.URGENT:
        insights.append("⚠️ Marked as URGENT - detected urgency indicators in message")

    body_length = len(body) if isinstance(body, str) else 0
    if body_length < BRIEF_BODY_CHARS:
        insights.append("ℹ️ Very brief message - may need follow-up for more details")
    elif body_length > DETAILED_BODY_CHARS:
        insights.append("ℹ️ Detailed message - user provided comprehensive information")

    suggestion = SUGGESTIONS.get(classification.name)
    if suggestion:
        insights.append(suggestion)

    return "\n".join(insights) if insights else NO_INSIGHTS


def assemble(
    sender: str,
    subject: str,
    body: str,
    classification: ClassificationResult,
    priority: Priority,
    now: datetime | None = None,
) -> TicketRecord:
    """Compose the final ticket record for one parsed email."""
    now = now or datetime.now(timezone.utc)
    return TicketRecord(
        ticket_id=generate_ticket_id(now),
        sender=sender,
        subject=subject,
        body=body,
        category=classification.name,
        category_label=format_category_label(classification.name),
        priority=priority,
        confidence=classification.confidence,
        timestamp=format_timestamp(now),
        insights=build_insights(classification, priority, body),
    )
