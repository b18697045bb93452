"""Parse a support email from a file or stdin and print the ticket.

Usage:
    python -m mailticket.tools.parse_email message.txt
    python -m mailticket.tools.parse_email --format text < message.txt
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from mailticket.adapters.export.json_exporter import to_json
from mailticket.adapters.export.text_exporter import to_text
from mailticket.application.use_cases.parse_email import ParseEmailUseCase
from mailticket.config import settings
from mailticket.domain.errors import EmailParseError

logger = logging.getLogger(__name__)

EXPORTERS = {"json": to_json, "text": to_text}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Convert a support email into a ticket")
    parser.add_argument(
        "path", nargs="?", type=str, default=None,
        help="File containing the raw email (default: read stdin)",
    )
    parser.add_argument(
        "--format", choices=sorted(EXPORTERS), default="json",
        help="Output format (default: json)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(level=settings.log_level, format="%(levelname)s | %(message)s")
    args = build_parser().parse_args(argv)

    if args.path:
        path = Path(args.path)
        if not path.is_file():
            logger.error("Email file not found: %s", path)
            return 1
        email_text = path.read_text(encoding="utf-8")
    else:
        email_text = sys.stdin.read()

    try:
        record = ParseEmailUseCase().execute(email_text)
    except EmailParseError as e:
        logger.error("Error parsing email: %s", e)
        return 1

    print(EXPORTERS[args.format](record))
    return 0


if __name__ == "__main__":
    sys.exit(main())
