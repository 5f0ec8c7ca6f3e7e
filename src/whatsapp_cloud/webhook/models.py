"""Modelos de eventos inbound extraídos do webhook."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class InboundMessage(BaseModel):
    """Mensagem recebida, já achatada por tipo."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    message_id: str = Field(..., description="wamid da mensagem.")
    from_number: str | None = Field(default=None, description="Número do remetente.")
    timestamp: str | None = Field(default=None, description="Epoch em string, como enviado pela Meta.")
    message_type: str = Field(default="unknown", description="Tipo declarado no payload.")
    whatsapp_name: str | None = Field(default=None, description="Nome do perfil do remetente.")
    phone_number_id: str | None = Field(default=None, description="Número do negócio que recebeu.")

    text: str | None = None
    media_id: str | None = None
    media_mime_type: str | None = None
    media_caption: str | None = None
    media_filename: str | None = None
    location_latitude: float | None = None
    location_longitude: float | None = None
    location_name: str | None = None
    location_address: str | None = None
    contacts: list[dict[str, Any]] = Field(default_factory=list)
    interactive_type: str | None = None
    interactive_reply_id: str | None = None
    interactive_reply_title: str | None = None
    reaction_message_id: str | None = None
    reaction_emoji: str | None = None
    context_message_id: str | None = Field(default=None, description="Mensagem respondida, se houver.")


class MessageStatus(BaseModel):
    """Atualização de status de uma mensagem enviada (sent/delivered/read/failed)."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    message_id: str
    status: str
    recipient_id: str | None = None
    timestamp: str | None = None
    errors: list[dict[str, Any]] = Field(default_factory=list)


class ParsedWebhook(BaseModel):
    """Evento normalizado de um POST de webhook."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    messages: list[InboundMessage] = Field(default_factory=list)
    statuses: list[MessageStatus] = Field(default_factory=list)

    @property
    def is_message(self) -> bool:
        return bool(self.messages)

    @property
    def is_status(self) -> bool:
        return bool(self.statuses)
