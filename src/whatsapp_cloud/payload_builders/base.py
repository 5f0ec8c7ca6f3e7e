"""Base dos builders de payload para a API Meta/WhatsApp."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

from whatsapp_cloud.constants import MESSAGING_PRODUCT, RECIPIENT_TYPE_INDIVIDUAL

if TYPE_CHECKING:
    from whatsapp_cloud.models import OutboundMessage, ResolvedMedia


class PayloadBuilder(Protocol):
    """Contrato de builder: devolve só o bloco específico do tipo."""

    def build(
        self,
        message: OutboundMessage,
        media: ResolvedMedia | None = None,
    ) -> dict[str, Any]: ...


def build_base_payload(message: OutboundMessage, *, recipient_type: bool = True) -> dict[str, Any]:
    """Campos comuns a todo corpo de mensagem.

    Args:
        message: Mensagem outbound já validada
        recipient_type: Inclui ``recipient_type: individual``
    """
    payload: dict[str, Any] = {"messaging_product": MESSAGING_PRODUCT}
    if recipient_type:
        payload["recipient_type"] = RECIPIENT_TYPE_INDIVIDUAL
    payload["to"] = message.to
    payload["type"] = str(message.message_type)
    return payload
