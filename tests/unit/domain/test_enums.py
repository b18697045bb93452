"""Tests for domain enums."""

from mailticket.domain.value_objects.enums import Priority


def test_priority_levels_count():
    assert len(Priority) == 4


def test_priority_values():
    assert Priority.LOW.value == "low"
    assert Priority.MEDIUM.value == "medium"
    assert Priority.HIGH.value == "high"
    assert Priority.URGENT.value == "urgent"


def test_priority_is_str():
    assert Priority("urgent") is Priority.URGENT
    assert Priority.HIGH == "high"
