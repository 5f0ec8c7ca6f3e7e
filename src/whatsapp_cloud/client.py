"""Fachada do cliente WhatsApp Cloud: uma operação por tipo de mensagem.

Cada envio segue a mesma máquina de estados, sem retry e sem voltar atrás:

    validação -> (mídia local: upload -> resolução) -> corpo -> envio -> normalização

Erros de validação são lançados antes de qualquer IO. Falhas de transporte
ou da Meta voltam como NormalizedResult com status "failed".

Uso:
    client = WhatsAppCloudClient(access_token="...", sender_phone_number_id="...")
    result = await client.send_text(message="Hello World", recipient_number="551198989898")
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import TYPE_CHECKING, Any

from whatsapp_cloud.config.settings import (
    GRAPH_API_VERSION,
    WhatsAppSettings,
    get_whatsapp_settings,
)
from whatsapp_cloud.connectors.media import MediaUploader
from whatsapp_cloud.connectors.normalizer import NormalizedResult, normalize_response
from whatsapp_cloud.connectors.transport import RequestEnvelope, WhatsAppTransport
from whatsapp_cloud.constants import MESSAGING_PRODUCT, MessageType, QRImageFormat
from whatsapp_cloud.errors import ConfigurationError, ValidationError
from whatsapp_cloud.models import (
    ButtonsMessage,
    ContactMessage,
    DocumentMessage,
    ImageMessage,
    ListMessage,
    LocalFile,
    LocationMessage,
    ResolvedMedia,
    TextMessage,
    to_buttons,
    to_sections,
)
from whatsapp_cloud.payload_builders import build_full_payload
from whatsapp_cloud.validators import WhatsAppMessageValidator
from whatsapp_cloud.validators.common import require
from whatsapp_cloud.webhook import ParsedWebhook, parse_message

if TYPE_CHECKING:
    import httpx

    from whatsapp_cloud.models import Button, ListSection, OutboundMessage

logger: logging.Logger = logging.getLogger(__name__)

MESSAGES_PATH = "/messages"
QR_CODES_PATH = "/message_qrdls"


class WhatsAppCloudClient:
    """Cliente assíncrono da WhatsApp Cloud API.

    Sem estado entre chamadas além da configuração imutável; envios
    concorrentes não compartilham nada mutável.

    Args:
        access_token: Token da Graph API (obrigatório)
        sender_phone_number_id: ID do número remetente (obrigatório)
        graph_api_version: Versão da Graph API; diferente do padrão só gera aviso
        business_account_id: WABA, usado apenas por ``parse_message``
        settings: Settings completas; campos explícitos acima têm prioridade
        http_client: httpx.AsyncClient reutilizado por todas as chamadas

    Raises:
        ConfigurationError: Se token ou número remetente ausentes
    """

    def __init__(
        self,
        access_token: str | None = None,
        sender_phone_number_id: str | None = None,
        graph_api_version: str | None = None,
        business_account_id: str | None = None,
        *,
        settings: WhatsAppSettings | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        base = settings or WhatsAppSettings()
        self._settings = WhatsAppSettings(
            access_token=access_token or base.access_token,
            phone_number_id=sender_phone_number_id or base.phone_number_id,
            business_account_id=business_account_id or base.business_account_id,
            api_version=graph_api_version or base.api_version,
            api_base_url=base.api_base_url,
            request_timeout_seconds=base.request_timeout_seconds,
            media_upload_timeout_seconds=base.media_upload_timeout_seconds,
            media_max_size_bytes=base.media_max_size_bytes,
        )

        errors = self._settings.validate()
        if errors:
            raise ConfigurationError(errors[0])

        if not self._settings.uses_default_api_version:
            logger.warning(
                "Default graph_api_version is %s; using %s may result in quirky behavior",
                GRAPH_API_VERSION,
                self._settings.api_version,
                extra={"api_version": self._settings.api_version},
            )

        self._transport = WhatsAppTransport(self._settings, http_client=http_client)
        self._media = MediaUploader(self._transport)
        self._validator = WhatsAppMessageValidator()

    @classmethod
    def from_env(cls, http_client: httpx.AsyncClient | None = None) -> WhatsAppCloudClient:
        """Cria cliente com settings de ambiente (WHATSAPP_*)."""
        return cls(settings=get_whatsapp_settings(), http_client=http_client)

    @property
    def settings(self) -> WhatsAppSettings:
        return self._settings

    # ------------------------------------------------------------------
    # Núcleo de envio
    # ------------------------------------------------------------------

    async def send(self, message: OutboundMessage) -> NormalizedResult:
        """Valida, resolve mídia local se necessário, monta e envia a mensagem.

        Raises:
            ValidationError: Campo ausente/fora dos limites (antes de IO)
            UploadError/ResolutionError: Falha no fluxo de mídia local
        """
        self._validator.validate_outbound_message(message)
        media = await self._prepare_media(message)
        payload = build_full_payload(message, media)
        return await self._dispatch(payload, operation=f"send_{message.message_type}")

    async def _prepare_media(self, message: OutboundMessage) -> ResolvedMedia | None:
        if not isinstance(message, (ImageMessage, DocumentMessage)):
            return None
        source = message.media
        if not isinstance(source, LocalFile):
            return None

        if isinstance(message, ImageMessage):
            return await self._media.upload_and_resolve(
                source.path, kind=MessageType.IMAGE, file_name=source.display_name
            )

        uploaded = await self._media.upload(
            source.path, kind=MessageType.DOCUMENT, file_name=source.display_name
        )
        return ResolvedMedia(media_id=uploaded.media_id, filename=uploaded.file_name)

    async def _dispatch(self, payload: dict[str, Any], operation: str) -> NormalizedResult:
        envelope = RequestEnvelope(path=MESSAGES_PATH, method="POST", body=payload)
        outcome = await self._transport.send(envelope)
        return normalize_response(outcome, operation=operation).with_request_body(payload)

    # ------------------------------------------------------------------
    # Operações por tipo
    # ------------------------------------------------------------------

    async def send_text(
        self,
        *,
        message: str,
        recipient_number: str,
        preview_url: bool = False,
    ) -> NormalizedResult:
        """Envia mensagem de texto (preview de link desligado por padrão)."""
        return await self.send(
            TextMessage(to=recipient_number, body=message, preview_url=preview_url)
        )

    async def send_buttons(
        self,
        *,
        recipient_number: str,
        message: str,
        list_of_buttons: list[Button | dict[str, Any]],
    ) -> NormalizedResult:
        """Envia mensagem com botões de resposta; um botão inválido falha tudo."""
        return await self.send(
            ButtonsMessage(
                to=recipient_number,
                body=message,
                buttons=to_buttons(list_of_buttons),
            )
        )

    async def send_list(
        self,
        *,
        recipient_number: str,
        header_text: str,
        body_text: str,
        footer_text: str,
        list_of_sections: list[ListSection | dict[str, Any]],
        button_text: str | None = None,
    ) -> NormalizedResult:
        """Envia lista interativa (no máximo 10 linhas somando todas as seções)."""
        message = ListMessage(
            to=recipient_number,
            header=header_text,
            body=body_text,
            footer=footer_text,
            sections=to_sections(list_of_sections),
        )
        if button_text is not None:
            message = replace(message, button_text=button_text)
        return await self.send(message)

    async def send_image(
        self,
        *,
        recipient_number: str,
        message: str | None = None,
        file_path: str | None = None,
        url: str | None = None,
    ) -> NormalizedResult:
        """Envia imagem de ``file_path`` (upload + URL resolvida) ou de ``url``."""
        return await self.send(
            ImageMessage(to=recipient_number, file_path=file_path, url=url, caption=message)
        )

    async def send_document(
        self,
        *,
        recipient_number: str,
        caption: str | None = None,
        file_path: str | None = None,
        url: str | None = None,
        file_name: str | None = None,
    ) -> NormalizedResult:
        """Envia documento de ``file_path`` (upload, por id) ou de ``url``."""
        return await self.send(
            DocumentMessage(
                to=recipient_number,
                file_path=file_path,
                url=url,
                file_name=file_name,
                caption=caption or "",
            )
        )

    async def send_location(
        self,
        *,
        recipient_number: str,
        latitude: float | None,
        longitude: float | None,
        name: str | None,
        address: str | None,
    ) -> NormalizedResult:
        """Envia cartão de localização; os quatro campos são obrigatórios."""
        return await self.send(
            LocationMessage(
                to=recipient_number,
                latitude=latitude,
                longitude=longitude,
                name=name,
                address=address,
            )
        )

    async def send_contact(self, *, recipient_number: str) -> NormalizedResult:
        """Envia o cartão de contato de exemplo (conteúdo fixo)."""
        return await self.send(ContactMessage(to=recipient_number))

    async def mark_message_as_read(self, *, message_id: str) -> NormalizedResult:
        """Marca mensagem como lida; sempre retorna sucesso.

        Falhas são ignoradas: mensagem já lida ou apagada não é acionável e
        não há como distinguir isso de um erro não retentável.
        """
        require("messageId", message_id)
        payload = {
            "messaging_product": MESSAGING_PRODUCT,
            "status": "read",
            "message_id": message_id,
        }
        result = await self._dispatch(payload, operation="mark_as_read")
        if not result.ok:
            logger.info(
                "whatsapp_mark_as_read_ignored_failure",
                extra={"status_code": result.status_code},
            )
        return NormalizedResult.success()

    async def create_qr_code(
        self,
        *,
        message: str,
        image_type: str = QRImageFormat.PNG,
    ) -> NormalizedResult:
        """Cria QR code com mensagem pré-preenchida.

        Raises:
            ValidationError: Mensagem ausente ou ``image_type`` fora de png/svg
        """
        require("message", message)
        if image_type not in set(QRImageFormat):
            raise ValidationError("imageType", 'must be either "png" or "svg"', image_type)

        envelope = RequestEnvelope(
            path=QR_CODES_PATH,
            method="POST",
            body={},
            params={"prefilled_message": message, "generate_qr_image": str(image_type)},
        )
        outcome = await self._transport.send(envelope)
        return normalize_response(outcome, operation="create_qr_code")

    # ------------------------------------------------------------------
    # Mídia e webhook
    # ------------------------------------------------------------------

    async def upload_media(
        self,
        *,
        file_path: str,
        file_name: str | None = None,
        kind: str = MessageType.IMAGE,
    ) -> str:
        """Faz upload de arquivo local e devolve o media_id."""
        require("file_path", file_path)
        uploaded = await self._media.upload(file_path, kind=kind, file_name=file_name)
        return uploaded.media_id

    async def retrieve_media_url(self, *, media_id: str) -> ResolvedMedia:
        """Resolve media_id em URL temporária."""
        require("media_id", media_id)
        return await self._media.resolve(media_id)

    async def download_media(self, *, media_url: str) -> bytes:
        """Baixa bytes de uma URL de mídia resolvida."""
        require("media_url", media_url)
        return await self._media.download(media_url)

    def parse_message(self, payload: dict[str, Any]) -> ParsedWebhook:
        """Extrai eventos do webhook, filtrando pelo WABA configurado."""
        return parse_message(payload, self._settings.business_account_id or None)

    # ------------------------------------------------------------------
    # Capacidades não implementadas
    # ------------------------------------------------------------------

    async def send_video(self, **kwargs: Any) -> NormalizedResult:
        raise NotImplementedError("send_video is not supported")

    async def send_audio(self, **kwargs: Any) -> NormalizedResult:
        raise NotImplementedError("send_audio is not supported")

    async def send_sticker(self, **kwargs: Any) -> NormalizedResult:
        raise NotImplementedError("send_sticker is not supported")

    async def send_chat_action(self, **kwargs: Any) -> NormalizedResult:
        raise NotImplementedError("send_chat_action is not supported")

    async def get_user_profile(self, **kwargs: Any) -> NormalizedResult:
        raise NotImplementedError("get_user_profile is not supported")

    async def get_user_status(self, **kwargs: Any) -> NormalizedResult:
        raise NotImplementedError("get_user_status is not supported")

    async def get_user_profile_picture(self, **kwargs: Any) -> NormalizedResult:
        raise NotImplementedError("get_user_profile_picture is not supported")

    async def get_user_status_picture(self, **kwargs: Any) -> NormalizedResult:
        raise NotImplementedError("get_user_status_picture is not supported")
