"""Header extraction: sender and subject from raw email text.

Every quantifier that runs over caller text has an explicit upper bound, and
the sender scan only looks at the first few thousand characters.
"""

from __future__ import annotations

import re

UNKNOWN_SENDER = "Unknown Sender"
NO_SUBJECT = "No Subject"

SENDER_SCAN_CHARS = 2000

_FLAGS = re.IGNORECASE | re.MULTILINE

SENDER_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"^[ \t]{0,10}From:[ \t]{0,20}([^\n<]{1,500}(?:<[^>\n]{1,320}>)?)", _FLAGS),
    re.compile(r"^[ \t]{0,10}Sender:[ \t]{0,20}([^\n<]{1,500}(?:<[^>\n]{1,320}>)?)", _FLAGS),
    # local-part 1-64 chars, at most 10 domain labels of 1-63 chars
    re.compile(
        r"([a-zA-Z0-9.!#$%&'*+/=?^_`{|}~-]{1,64}"
        r"@[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
        r"(?:\.[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?){0,9})"
    ),
)

SUBJECT_RE = re.compile(r"^[ \t]{0,10}Subject:[ \t]{0,20}([^\n]+)", _FLAGS)

# Lines that look like headers never double as a subject
HEADER_LINE_RE = re.compile(r"^(from|to|subject|sender|date):", re.IGNORECASE)


def extract_sender(text: str) -> str:
    """Return the sender from ``From:``, ``Sender:`` or a bare address, in that order."""
    limited = text[:SENDER_SCAN_CHARS]
    for pattern in SENDER_PATTERNS:
        match = pattern.search(limited)
        if match:
            value = match.group(1).strip()
            if value:
                return value
    return UNKNOWN_SENDER


def extract_subject(text: str) -> str:
    """Return the ``Subject:`` header, else a non-header first line, else a sentinel."""
    match = SUBJECT_RE.search(text)
    if match:
        value = match.group(1).strip()
        if value:
            return value

    for line in text.split("\n"):
        first_line = line.strip()
        if not first_line:
            continue
        if HEADER_LINE_RE.match(first_line):
            break
        return first_line

    return NO_SUBJECT
