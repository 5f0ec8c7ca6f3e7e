"""Builder para mensagens de texto."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from whatsapp_cloud.models import ResolvedMedia, TextMessage


class TextPayloadBuilder:
    """Builder para mensagens de texto simples."""

    def build(self, message: TextMessage, media: ResolvedMedia | None = None) -> dict[str, Any]:
        return {
            "text": {
                "preview_url": message.preview_url,
                "body": message.body,
            }
        }
