"""Classification result: output of keyword scoring for one email."""

from dataclasses import dataclass

from mailticket.domain.value_objects.enums import Priority

OTHER_CATEGORY = "other"


@dataclass(frozen=True)
class ClassificationResult:
    name: str
    confidence: float
    priority: Priority = Priority.MEDIUM

    def is_other(self) -> bool:
        return self.name == OTHER_CATEGORY
