"""Factory para obter o builder correto por variante de mensagem."""

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
from whatsapp_cloud.payload_builders.base import PayloadBuilder, build_base_payload
from whatsapp_cloud.payload_builders.contact import ContactPayloadBuilder
from whatsapp_cloud.payload_builders.interactive import InteractivePayloadBuilder
from whatsapp_cloud.payload_builders.location import LocationPayloadBuilder
from whatsapp_cloud.payload_builders.media import DocumentPayloadBuilder, ImagePayloadBuilder
from whatsapp_cloud.payload_builders.text import TextPayloadBuilder

if TYPE_CHECKING:
    from whatsapp_cloud.models import OutboundMessage, ResolvedMedia

_INTERACTIVE_BUILDER = InteractivePayloadBuilder()

_BUILDERS: dict[type, PayloadBuilder] = {
    TextMessage: TextPayloadBuilder(),
    ButtonsMessage: _INTERACTIVE_BUILDER,
    ListMessage: _INTERACTIVE_BUILDER,
    ImageMessage: ImagePayloadBuilder(),
    DocumentMessage: DocumentPayloadBuilder(),
    LocationMessage: LocationPayloadBuilder(),
    ContactMessage: ContactPayloadBuilder(),
}

# Corpo de texto e de contato não leva recipient_type
_WITHOUT_RECIPIENT_TYPE = (TextMessage, ContactMessage)


def get_payload_builder(message: OutboundMessage) -> PayloadBuilder | None:
    """Retorna o builder da variante ou None se não suportada."""
    return _BUILDERS.get(type(message))


def build_full_payload(
    message: OutboundMessage,
    media: ResolvedMedia | None = None,
) -> dict[str, Any]:
    """Constrói o corpo completo para POST {baseUrl}/messages.

    Args:
        message: Mensagem já validada
        media: Mídia resolvida pelo upload, quando a origem é arquivo local

    Raises:
        ValueError: Se variante não suportada
    """
    builder = get_payload_builder(message)
    if builder is None:
        raise ValueError(f"Unsupported outbound message: {type(message).__name__}")

    payload = build_base_payload(
        message,
        recipient_type=not isinstance(message, _WITHOUT_RECIPIENT_TYPE),
    )
    payload.update(builder.build(message, media))
    return payload
