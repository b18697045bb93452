"""Parse errors surfaced to callers of the email pipeline."""

# Longer messages are replaced before they reach a display surface
MAX_ERROR_MESSAGE_LENGTH = 200
GENERIC_ERROR_MESSAGE = "invalid format"


class EmailParseError(Exception):
    """Base class for every failure raised by the parse pipeline."""


class InvalidInput(EmailParseError):
    """Input is missing, not text, blank, or over the size limit."""


class ExtractionFailure(EmailParseError):
    """No usable body could be extracted from the email."""


def sanitize_message(message: str) -> str:
    if len(message) > MAX_ERROR_MESSAGE_LENGTH:
        return GENERIC_ERROR_MESSAGE
    return message
