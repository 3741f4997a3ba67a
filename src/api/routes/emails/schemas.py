"""Modelos de resposta da API de emails."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from app.domain.message import Message


class EmailResponse(BaseModel):
    """Email capturado, no formato JSON da API.

    O campo do remetente é exposto como `from` (palavra reservada em Python).
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str
    sender: str = Field(alias="from")
    to: list[str]
    subject: str
    body: str
    html: bool
    timestamp: datetime | None

    @classmethod
    def from_message(cls, message: Message) -> EmailResponse:
        return cls.model_validate(message.to_dict())


class ClearResponse(BaseModel):
    status: str = "ok"
