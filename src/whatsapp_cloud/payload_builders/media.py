"""Builders para mensagens de mídia (imagem e documento).

Recebem a mídia já resolvida pelo MediaUploader quando a origem é um
arquivo local; com URL remota, a URL é usada literalmente.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from whatsapp_cloud.models import DocumentMessage, ImageMessage, ResolvedMedia


class ImagePayloadBuilder:
    """Imagem sempre por ``link``: URL remota ou URL resolvida do upload."""

    def build(self, message: ImageMessage, media: ResolvedMedia | None = None) -> dict[str, Any]:
        link = media.link if media is not None else message.url
        image: dict[str, Any] = {"link": link}
        if message.caption is not None:
            image["caption"] = message.caption
        return {"image": image}


class DocumentPayloadBuilder:
    """Documento por ``id`` + ``filename`` (upload) ou por ``link``."""

    def build(
        self,
        message: DocumentMessage,
        media: ResolvedMedia | None = None,
    ) -> dict[str, Any]:
        document: dict[str, Any] = {"caption": message.caption or ""}
        if media is not None:
            document["id"] = media.media_id
            document["filename"] = media.filename or ""
        else:
            document["link"] = message.url
        return {"document": document}
