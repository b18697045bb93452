"""ParseEmailUseCase: headers → body → classify → priority → record."""

from __future__ import annotations

import logging
from datetime import datetime

from mailticket.adapters.email_text.body import extract_body
from mailticket.adapters.email_text.headers import extract_sender, extract_subject
from mailticket.config import settings
from mailticket.domain.entities.ticket import TicketRecord
from mailticket.domain.errors import (
    GENERIC_ERROR_MESSAGE,
    EmailParseError,
    ExtractionFailure,
    InvalidInput,
    sanitize_message,
)
from mailticket.domain.policies.assembly import assemble
from mailticket.domain.policies.classifier import classify
from mailticket.domain.policies.priority import determine_priority

logger = logging.getLogger(__name__)


class ParseEmailUseCase:
    """Turns one raw support email into a TicketRecord."""

    def __init__(self, max_input_chars: int | None = None):
        self._max_input_chars = max_input_chars or settings.max_input_chars

    def execute(self, email_text: str, now: datetime | None = None) -> TicketRecord:
        """Parse a single email end-to-end.

        Pipeline:
        1. Validate input (type, blank, size)
        2. Extract sender, subject and body
        3. Classify subject + body by keywords
        4. Resolve priority (urgency keywords win)
        5. Assemble the record with id, label and insights

        Raises:
            InvalidInput: the input fails validation.
            ExtractionFailure: no body could be extracted.
            EmailParseError: any other failure, with a sanitized message.
        """
        try:
            text = self._validate(email_text)
            return self._run(text, now)
        except EmailParseError as e:
            logger.warning("Email parse failed: %s", e)
            message = sanitize_message(str(e))
            if message != str(e):
                raise type(e)(message) from None
            raise
        except Exception as e:
            logger.exception("Unexpected error while parsing email")
            raise EmailParseError(sanitize_message(str(e)) or GENERIC_ERROR_MESSAGE) from e

    def _validate(self, email_text) -> str:
        if not isinstance(email_text, str):
            raise InvalidInput("Email text must be a non-empty string")
        trimmed = email_text.strip()
        if not trimmed:
            raise InvalidInput("Email text cannot be empty")
        if len(trimmed) > self._max_input_chars:
            raise InvalidInput(f"Email text too large (max {self._max_input_chars} characters)")
        return trimmed.replace("\r\n", "\n")

    def _run(self, text: str, now: datetime | None) -> TicketRecord:
        sender = extract_sender(text)
        subject = extract_subject(text)
        body = extract_body(text)
        if not body:
            raise ExtractionFailure("Could not extract email body")

        combined = f"{subject} {body}"
        classification = classify(combined)
        priority = determine_priority(combined, classification)
        record = assemble(sender, subject, body, classification, priority, now=now)

        logger.info(
            "Ticket %s: category=%s, priority=%s, confidence=%.2f",
            record.ticket_id, record.category, record.priority.value, record.confidence,
        )
        return record


def parse(email_text: str) -> TicketRecord:
    """Parse *email_text* with the default settings."""
    return ParseEmailUseCase().execute(email_text)
