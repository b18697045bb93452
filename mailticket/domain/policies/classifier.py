"""Keyword classifier: scores text against the category table."""

from __future__ import annotations

from mailticket.domain.entities.category import CategoryDefinition
from mailticket.domain.entities.classification import OTHER_CATEGORY, ClassificationResult
from mailticket.domain.policies.categories import CATEGORIES
from mailticket.domain.value_objects.enums import Priority

MAX_CLASSIFY_CHARS = 5000

CONFIDENCE_PER_MATCH = 0.15
MIN_CONFIDENCE = 0.25

# A single incidental keyword hit must not read as a confident classification
FALLBACK = ClassificationResult(name=OTHER_CATEGORY, confidence=0.15, priority=Priority.MEDIUM)


def confidence_for(matches: int) -> float:
    """Saturating confidence for a keyword-match count."""
    return min(matches * CONFIDENCE_PER_MATCH, 1.0)


def classify(
    text: str,
    categories: tuple[CategoryDefinition, ...] = CATEGORIES,
) -> ClassificationResult:
    """Pick the category whose keywords appear most often in *text*.

    1. Lower-case the first 5000 characters.
    2. Score each category by the number of its keywords found as substrings.
    3. The strictly highest score wins; ties keep the earlier category.
    4. Results under the minimum confidence collapse to ``other``.

    Args:
        text: subject and body, joined.
        categories: category table, in tie-break order.

    Returns:
        ClassificationResult for the winning category or the ``other`` fallback.
    """
    if not isinstance(text, str) or not text:
        return FALLBACK

    lowered = text[:MAX_CLASSIFY_CHARS].lower()

    best: ClassificationResult | None = None
    best_score = 0
    for category in categories:
        score = category.count_matches(lowered)
        if score > best_score:
            best_score = score
            best = ClassificationResult(
                name=category.name,
                confidence=confidence_for(score),
                priority=category.priority or Priority.MEDIUM,
            )

    if best is None or best.confidence < MIN_CONFIDENCE:
        return FALLBACK
    return best
