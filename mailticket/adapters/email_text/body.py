"""Body extraction: drop header lines and trailing signature blocks."""

from __future__ import annotations

import re

HEADER_PREFIX_RE = re.compile(r"^(from|to|subject|sender|date|cc|bcc):", re.IGNORECASE)

SIGNATURE_DELIMITER = "--"

# Each sign-off may only consume a short window at the very end of the body
SIGN_OFF_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"Best regards[^\n]{0,100}\n[\s\S]{0,300}\Z", re.IGNORECASE),
    re.compile(r"Thanks[^\n]{0,100}\n[\s\S]{0,300}\Z", re.IGNORECASE),
    re.compile(r"Sent from my [^\n]{0,100}\Z", re.IGNORECASE),
    re.compile(r"Regards[^\n]{0,100}\n[\s\S]{0,200}\Z", re.IGNORECASE),
)


def find_body_start(lines: list[str]) -> int:
    """Index of the first non-empty, non-header line (0 if there is none)."""
    for i, line in enumerate(lines):
        stripped = line.strip()
        if not stripped or HEADER_PREFIX_RE.match(stripped):
            continue
        return i
    return 0


def strip_signature(body: str) -> str:
    """Cut at the first ``--`` line, then drop trailing sign-off blocks."""
    if body.startswith(SIGNATURE_DELIMITER):
        stripped = ""
    else:
        marker = body.find("\n" + SIGNATURE_DELIMITER)
        stripped = body[:marker] if marker != -1 else body

    for pattern in SIGN_OFF_PATTERNS:
        stripped = pattern.sub("", stripped, count=1)

    return stripped.strip()


def extract_body(text: str) -> str:
    """Return the signature-stripped body, or the raw body if stripping empties it."""
    lines = text.split("\n")
    start = find_body_start(lines)
    raw_body = "\n".join(lines[start:]).strip()
    return strip_signature(raw_body) or raw_body
