"""Ticket endpoints: parse an email, export a parsed record."""

from fastapi import APIRouter, Depends, HTTPException, Request

from mailticket.adapters.export.json_exporter import to_json
from mailticket.adapters.export.text_exporter import to_text
from mailticket.application.use_cases.parse_email import ParseEmailUseCase
from mailticket.domain.entities.ticket import TicketRecord
from mailticket.domain.errors import EmailParseError
from mailticket.infrastructure.api.dependencies import get_parse_email_uc
from mailticket.infrastructure.api.rate_limit import limiter, parse_rate_limit
from mailticket.infrastructure.api.schemas import (
    ExportResponse,
    ParseEmailRequest,
    TicketRecordPayload,
)

router = APIRouter(prefix="/tickets", tags=["tickets"])

EXAMPLE_EMAIL = """From: sarah.johnson@techcorp.com
Subject: URGENT - Cannot access shared drive

Hi Support Team,

I'm unable to access the shared marketing drive this morning. I keep getting an "Access Denied" error when I try to open it.

This is critical as I need to pull client files for a presentation in 2 hours.

I've tried:
- Restarting my computer
- Disconnecting and reconnecting to VPN
- Checking my network connection

Nothing seems to work. Can you please help ASAP?

Thanks,
Sarah Johnson
Marketing Manager"""


@router.get("/example")
async def example_email():
    """Sample support email for trying out the parser."""
    return {"email_text": EXAMPLE_EMAIL}


@router.post("/parse")
@limiter.limit(parse_rate_limit)
def parse_email(
    request: Request,
    payload: ParseEmailRequest,
    parse_uc: ParseEmailUseCase = Depends(get_parse_email_uc),
):
    """Parse one raw email into a ticket record."""
    try:
        record = parse_uc.execute(payload.email_text)
    except EmailParseError as e:
        raise HTTPException(status_code=400, detail=f"Error parsing email: {e}")
    return record.to_dict()


@router.post("/export/json", response_model=ExportResponse)
async def export_json(payload: TicketRecordPayload):
    """Render a parsed record as structured JSON."""
    return ExportResponse(format="json", content=to_json(_to_record(payload)))


@router.post("/export/text", response_model=ExportResponse)
async def export_text(payload: TicketRecordPayload):
    """Render a parsed record as a plain-text report."""
    return ExportResponse(format="text", content=to_text(_to_record(payload)))


def _to_record(payload: TicketRecordPayload) -> TicketRecord:
    try:
        return payload.to_record()
    except EmailParseError as e:
        raise HTTPException(status_code=400, detail=str(e))
