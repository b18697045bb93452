"""Category table and urgency keywords.

The table order is the tie-break order used by the classifier: when two
categories score the same, the one listed first wins.
"""

from __future__ import annotations

from mailticket.domain.entities.category import CategoryDefinition
from mailticket.domain.value_objects.enums import Priority

CATEGORIES: tuple[CategoryDefinition, ...] = (
    CategoryDefinition(
        name="password_reset",
        keywords=("password", "forgot", "reset", "unlock", "locked out", "can't login", "cannot login"),
        priority=Priority.HIGH,
    ),
    CategoryDefinition(
        name="email_issue",
        keywords=("email", "outlook", "can't send", "cannot receive", "inbox", "spam"),
        priority=Priority.MEDIUM,
    ),
    CategoryDefinition(
        name="printer_issue",
        keywords=("printer", "print", "printing", "queue", "spooler", "jam", "toner"),
        priority=Priority.MEDIUM,
    ),
    CategoryDefinition(
        name="network_issue",
        keywords=("network", "internet", "wifi", "vpn", "connection", "ethernet", "offline"),
        priority=Priority.HIGH,
    ),
    CategoryDefinition(
        name="software_install",
        keywords=("install", "software", "application", "program", "download", "setup"),
        priority=Priority.LOW,
    ),
    CategoryDefinition(
        name="access_request",
        keywords=("access", "permission", "share", "folder", "drive", "cannot access", "denied"),
        priority=Priority.MEDIUM,
    ),
    CategoryDefinition(
        name="hardware_issue",
        keywords=("laptop", "computer", "monitor", "keyboard", "mouse", "broken", "not working"),
        priority=Priority.MEDIUM,
    ),
    CategoryDefinition(
        name="performance_issue",
        keywords=("slow", "frozen", "crash", "not responding", "hang", "lag", "freeze"),
        priority=Priority.MEDIUM,
    ),
)

URGENCY_KEYWORDS: tuple[str, ...] = (
    "urgent", "asap", "emergency", "critical", "immediately", "right now",
    "down", "broken", "can't work", "cannot work", "production",
)


def category_names() -> list[str]:
    return [c.name for c in CATEGORIES]
