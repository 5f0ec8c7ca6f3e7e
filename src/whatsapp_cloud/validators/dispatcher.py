"""Dispatcher de validação: um validador declarativo por variante."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from whatsapp_cloud.models import (
    ButtonsMessage,
    ContactMessage,
    DocumentMessage,
    ImageMessage,
    ListMessage,
    LocationMessage,
    TextMessage,
)
from whatsapp_cloud.validators.interactive import (
    validate_buttons_message,
    validate_list_message,
)
from whatsapp_cloud.validators.location import (
    validate_contact_message,
    validate_location_message,
)
from whatsapp_cloud.validators.media import (
    validate_document_message,
    validate_image_message,
)
from whatsapp_cloud.validators.text import validate_text_message

if TYPE_CHECKING:
    from collections.abc import Callable

    from whatsapp_cloud.models import OutboundMessage

_VALIDATORS: dict[type, Callable[[Any], None]] = {
    TextMessage: validate_text_message,
    ButtonsMessage: validate_buttons_message,
    ListMessage: validate_list_message,
    ImageMessage: validate_image_message,
    DocumentMessage: validate_document_message,
    LocationMessage: validate_location_message,
    ContactMessage: validate_contact_message,
}


class WhatsAppMessageValidator:
    """Valida mensagens outbound antes de qualquer chamada de rede."""

    def validate_outbound_message(self, message: OutboundMessage) -> None:
        """Aplica o validador da variante.

        Raises:
            ValidationError: Campo ausente ou fora dos limites
            TypeError: Variante desconhecida
        """
        validator = _VALIDATORS.get(type(message))
        if validator is None:
            raise TypeError(f"Unsupported outbound message: {type(message).__name__}")
        validator(message)
