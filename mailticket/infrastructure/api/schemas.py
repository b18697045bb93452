"""Request / response models for the ticket API."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from mailticket.domain.entities.ticket import TicketRecord
from mailticket.domain.value_objects.enums import Priority


class ParseEmailRequest(BaseModel):
    email_text: str


class TicketRecordPayload(BaseModel):
    """A ticket record as sent back by clients for export."""

    model_config = ConfigDict(populate_by_name=True)

    ticket_id: str = Field(alias="ticketId")
    sender: str = Field(alias="from")
    subject: str
    body: str
    category: str
    category_label: str = Field(alias="categoryLabel")
    priority: Priority
    confidence: float = Field(ge=0.0, le=1.0)
    timestamp: str
    insights: str

    def to_record(self) -> TicketRecord:
        return TicketRecord.from_dict(self.model_dump(by_alias=True, mode="json"))


class ExportResponse(BaseModel):
    format: str
    content: str
