"""Validador de mensagens de texto."""

from __future__ import annotations

from typing import TYPE_CHECKING

from whatsapp_cloud.errors import ValidationError
from whatsapp_cloud.validators.common import require, require_recipient
from whatsapp_cloud.validators.limits import MAX_TEXT_LENGTH

if TYPE_CHECKING:
    from whatsapp_cloud.models import TextMessage


def validate_text_message(message: TextMessage) -> None:
    """Valida mensagem de texto.

    Raises:
        ValidationError: Se destinatário/texto ausente ou texto excede limite
    """
    require_recipient(message.to)
    require("message", message.body)

    if len(message.body) > MAX_TEXT_LENGTH:
        raise ValidationError(
            "message",
            f"exceeds maximum length of {MAX_TEXT_LENGTH} characters",
            message.body,
        )
