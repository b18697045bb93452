"""Priority resolution: urgency keywords override the category default."""

from __future__ import annotations

from mailticket.domain.entities.classification import ClassificationResult
from mailticket.domain.policies.categories import URGENCY_KEYWORDS
from mailticket.domain.value_objects.enums import Priority


def has_urgency(text: str, keywords: tuple[str, ...] = URGENCY_KEYWORDS) -> bool:
    """Return True if any urgency keyword appears as a substring of *text*."""
    t = (text or "").lower()
    return any(k in t for k in keywords)


def determine_priority(text: str, classification: ClassificationResult) -> Priority:
    if has_urgency(text):
        return Priority.URGENT
    return classification.priority or Priority.MEDIUM
