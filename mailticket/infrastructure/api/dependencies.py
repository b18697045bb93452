"""FastAPI dependency injection."""

from __future__ import annotations

from mailticket.application.use_cases.parse_email import ParseEmailUseCase
from mailticket.config import settings


def get_parse_email_uc() -> ParseEmailUseCase:
    return ParseEmailUseCase(max_input_chars=settings.max_input_chars)
