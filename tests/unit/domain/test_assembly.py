"""Tests for ticket assembly: ids, labels, insights."""

import re
import secrets
from datetime import datetime, timezone

import pytest

from mailticket.domain.entities.classification import ClassificationResult
from mailticket.domain.policies.assembly import (
    NO_INSIGHTS,
    assemble,
    build_insights,
    confidence_percent,
    format_category_label,
    format_timestamp,
    generate_ticket_id,
    to_base36,
)
from mailticket.domain.value_objects.enums import Priority

FIXED_NOW = datetime(2024, 5, 1, 9, 30, tzinfo=timezone.utc)
TICKET_ID_RE = re.compile(r"^TKT-[0-9A-Z]+-[0-9A-Z]{1,6}$")

# ─── Ticket ids ─────────────────────────────────────────────────────


def test_to_base36():
    assert to_base36(0) == "0"
    assert to_base36(35) == "z"
    assert to_base36(36) == "10"
    assert to_base36(1295) == "zz"


def test_to_base36_rejects_negative():
    with pytest.raises(ValueError):
        to_base36(-1)


def test_ticket_id_format():
    assert TICKET_ID_RE.match(generate_ticket_id())


def test_ticket_id_time_part():
    ticket_id = generate_ticket_id(FIXED_NOW)
    millis = int(FIXED_NOW.timestamp() * 1000)
    assert ticket_id.split("-")[1] == to_base36(millis).upper()


def test_ticket_ids_are_unique():
    ids = {generate_ticket_id(FIXED_NOW) for _ in range(200)}
    assert len(ids) == 200


def test_ticket_id_without_os_randomness(monkeypatch):
    def unavailable(k):
        raise NotImplementedError

    monkeypatch.setattr(secrets, "randbits", unavailable)
    assert TICKET_ID_RE.match(generate_ticket_id(FIXED_NOW))


# ─── Category label ─────────────────────────────────────────────────


def test_format_category_label():
    assert format_category_label("password_reset") == "Password Reset"
    assert format_category_label("other") == "Other"


def test_format_category_label_escapes_html():
    assert format_category_label("<script>_x") == "&lt;script&gt; X"
    assert format_category_label("a&b") == "A&amp;b"
    assert format_category_label("it's_\"q\"") == "It&#x27;s &quot;q&quot;"


# ─── Timestamp ──────────────────────────────────────────────────────


def test_format_timestamp_is_utc_iso():
    assert format_timestamp(FIXED_NOW) == "2024-05-01T09:30:00.000Z"


# ─── Insights ───────────────────────────────────────────────────────


def test_confidence_percent_rounds_and_clamps():
    assert confidence_percent(3 * 0.15) == 45
    assert confidence_percent(1.5) == 100
    assert confidence_percent(-0.2) == 0


def test_insights_full_set():
    classification = ClassificationResult("password_reset", 0.3, Priority.HIGH)
    lines = build_insights(classification, Priority.URGENT, "short").split("\n")
    assert lines == [
        '✓ Automatically categorized as "Password Reset" with 30% confidence',
        "⚠️ Marked as URGENT - detected urgency indicators in message",
        "ℹ️ Very brief message - may need follow-up for more details",
        "💡 Suggestion: This can often be auto-resolved with a password reset link",
    ]


def test_insights_detailed_body():
    classification = ClassificationResult("network_issue", 0.45, Priority.HIGH)
    insights = build_insights(classification, Priority.HIGH, "x" * 501)
    assert "Detailed message" in insights
    assert "restart router" in insights
    assert "URGENT" not in insights


def test_insights_body_length_boundaries():
    other = ClassificationResult("other", 0.15, Priority.MEDIUM)
    assert build_insights(other, Priority.MEDIUM, "x" * 50) == NO_INSIGHTS
    assert build_insights(other, Priority.MEDIUM, "x" * 500) == NO_INSIGHTS
    assert "Very brief" in build_insights(other, Priority.MEDIUM, "x" * 49)


def test_insights_no_suggestion_outside_allow_list():
    classification = ClassificationResult("email_issue", 0.3, Priority.MEDIUM)
    insights = build_insights(classification, Priority.MEDIUM, "x" * 100)
    assert insights == '✓ Automatically categorized as "Email Issue" with 30% confidence'


def test_insights_other_category_not_announced():
    other = ClassificationResult("other", 0.15, Priority.MEDIUM)
    insights = build_insights(other, Priority.URGENT, "x" * 100)
    assert insights == "⚠️ Marked as URGENT - detected urgency indicators in message"


# ─── assemble ───────────────────────────────────────────────────────


def test_assemble_record():
    classification = ClassificationResult("software_install", 0.3, Priority.LOW)
    record = assemble(
        "a@b.com", "Need Slack", "Please install Slack software for me.",
        classification, Priority.LOW, now=FIXED_NOW,
    )
    assert TICKET_ID_RE.match(record.ticket_id)
    assert record.sender == "a@b.com"
    assert record.subject == "Need Slack"
    assert record.category == "software_install"
    assert record.category_label == "Software Install"
    assert record.priority == Priority.LOW
    assert record.confidence == 0.3
    assert record.timestamp == "2024-05-01T09:30:00.000Z"
    assert "admin rights" in record.insights
