"""Orquestração de mídia: upload -> media_id -> URL temporária.

Fluxo de duas etapas sequenciais, disparado apenas quando o chamador passa
um arquivo local:

1. ``upload``: POST multipart em {baseUrl}/media (messaging_product, type,
   file) e extração do ``id`` retornado.
2. ``resolve``: GET em {apiRoot}/{media_id} e extração da ``url``.

O arquivo local fica aberto só durante o upload. Nada é cacheado entre
chamadas.
"""

from __future__ import annotations

import logging
import mimetypes
from pathlib import Path
from typing import TYPE_CHECKING

from whatsapp_cloud.connectors.normalizer import normalize_response
from whatsapp_cloud.connectors.transport import RequestEnvelope
from whatsapp_cloud.constants import MESSAGING_PRODUCT, MessageType
from whatsapp_cloud.errors import MediaDownloadError, ResolutionError, UploadError
from whatsapp_cloud.models import ResolvedMedia, UploadedMedia

if TYPE_CHECKING:
    from collections.abc import Mapping

    from whatsapp_cloud.connectors.transport import WhatsAppTransport

logger = logging.getLogger(__name__)

# MIME usado quando a extensão do arquivo não é reconhecida
_FALLBACK_MIME_TYPES: dict[str, str] = {
    MessageType.IMAGE: "image/jpeg",
    MessageType.DOCUMENT: "application/octet-stream",
}


def guess_mime_type(file_path: str, kind: str) -> str:
    """Deduz o MIME pelo nome do arquivo, com fallback por tipo de mensagem."""
    mime_type, _ = mimetypes.guess_type(file_path)
    return mime_type or _FALLBACK_MIME_TYPES.get(kind, "application/octet-stream")


def _declared_size(headers: Mapping[str, str]) -> int:
    """Content-Length declarado; 0 se ausente ou malformado."""
    try:
        return int(headers.get("content-length") or 0)
    except ValueError:
        return 0


class MediaUploader:
    """Upload e resolução de mídia na Graph API.

    Args:
        transport: Adapter compartilhado com o envio de mensagens
    """

    def __init__(self, transport: WhatsAppTransport) -> None:
        self._transport = transport
        self._settings = transport.settings

    async def upload(
        self,
        file_path: str,
        *,
        kind: str = MessageType.IMAGE,
        file_name: str | None = None,
    ) -> UploadedMedia:
        """Envia o arquivo local e devolve o media_id.

        Raises:
            UploadError: Falha de transporte/Meta ou resposta sem ``id``
        """
        path = Path(file_path)
        mime_type = guess_mime_type(path.name, kind)

        try:
            with path.open("rb") as stream:
                envelope = RequestEnvelope(
                    path="/media",
                    method="POST",
                    base_url=self._settings.base_url,
                    form={"messaging_product": MESSAGING_PRODUCT, "type": mime_type},
                    files={"file": (file_name or path.name, stream, mime_type)},
                )
                outcome = await self._transport.send(
                    envelope,
                    timeout=self._settings.media_upload_timeout_seconds,
                )
        except OSError as exc:
            logger.warning("whatsapp_media_file_unreadable", extra={"error_type": type(exc).__name__})
            raise UploadError(str(exc)) from exc

        result = normalize_response(outcome, operation="media_upload")
        if not result.ok:
            raise UploadError(result.message or "Media upload failed", result=result)

        media_id = result.data.get("id") if isinstance(result.data, dict) else None
        if not media_id:
            raise UploadError("Media upload response has no media id", result=result)

        logger.info("whatsapp_media_uploaded", extra={"kind": str(kind), "mime_type": mime_type})
        return UploadedMedia(media_id=str(media_id), file_name=file_name)

    async def resolve(self, media_id: str) -> ResolvedMedia:
        """Troca o media_id por uma URL temporária.

        Raises:
            ResolutionError: Falha de transporte/Meta ou resposta sem ``url``
        """
        envelope = RequestEnvelope(
            path=f"/{media_id}",
            method="GET",
            base_url=self._settings.api_endpoint,
        )
        outcome = await self._transport.send(envelope)
        result = normalize_response(outcome, operation="media_resolve")
        if not result.ok:
            raise ResolutionError(result.message or "Media lookup failed", result=result)

        data = result.data if isinstance(result.data, dict) else {}
        url = data.get("url")
        if not url:
            raise ResolutionError("Media lookup response has no url", result=result)

        logger.info("whatsapp_media_resolved", extra={"mime_type": data.get("mime_type")})
        return ResolvedMedia(media_id=media_id, link=url, mime_type=data.get("mime_type"))

    async def upload_and_resolve(
        self,
        file_path: str,
        *,
        kind: str = MessageType.IMAGE,
        file_name: str | None = None,
    ) -> ResolvedMedia:
        """Upload seguido de resolução; a resolução só começa após o upload."""
        uploaded = await self.upload(file_path, kind=kind, file_name=file_name)
        resolved = await self.resolve(uploaded.media_id)
        return ResolvedMedia(
            media_id=resolved.media_id,
            link=resolved.link,
            filename=uploaded.file_name,
            mime_type=resolved.mime_type,
        )

    async def download(self, media_url: str) -> bytes:
        """Baixa os bytes de uma URL de mídia resolvida.

        Raises:
            MediaDownloadError: Falha de transporte/Meta ou mídia acima de
                ``media_max_size_bytes``
        """
        if not media_url:
            raise MediaDownloadError("missing_media_reference")

        envelope = RequestEnvelope(
            path=media_url,
            method="GET",
            base_url="",
            params={"access_token": self._settings.access_token},
        )
        outcome = await self._transport.send(envelope)
        if not outcome.ok:
            result = normalize_response(outcome, operation="media_download")
            raise MediaDownloadError(result.message or "download_failed", result=result)

        if _declared_size(outcome.headers) > self._settings.media_max_size_bytes or (
            len(outcome.content) > self._settings.media_max_size_bytes
        ):
            raise MediaDownloadError("media_too_large")
        return outcome.content
