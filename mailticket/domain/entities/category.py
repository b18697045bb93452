"""Category definition: a named bucket of keywords with a default priority."""

from dataclasses import dataclass

from mailticket.domain.value_objects.enums import Priority


@dataclass(frozen=True)
class CategoryDefinition:
    name: str
    keywords: tuple[str, ...]
    priority: Priority = Priority.MEDIUM

    def count_matches(self, lowered_text: str) -> int:
        """Count keywords contained in *lowered_text* (substring, not word match)."""
        return sum(1 for keyword in self.keywords if keyword.lower() in lowered_text)
