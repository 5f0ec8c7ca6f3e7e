"""Settings do cliente WhatsApp Cloud.

Configuração imutável (credenciais, versão da Graph API, IDs) criada uma vez
e compartilhada somente leitura por todas as operações do cliente.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

# Constantes do Graph API
GRAPH_API_VERSION: str = "v13.0"
GRAPH_API_BASE_URL: str = "https://graph.facebook.com"


@dataclass(frozen=True)
class WhatsAppSettings:
    """Configurações do cliente WhatsApp.

    Attributes:
        access_token: Bearer token do app na Graph API
        phone_number_id: ID do número remetente no Meta Business
        business_account_id: ID da conta de negócios (WABA), usado só no webhook
        api_version: Versão da Graph API (ex: v13.0)
        api_base_url: Host da Graph API (sem versão)
        request_timeout_seconds: Timeout repassado ao httpx
        media_upload_timeout_seconds: Timeout repassado ao httpx no upload
        media_max_size_bytes: Limite de tamanho no download de mídia
    """

    # Credenciais
    access_token: str = ""
    phone_number_id: str = ""
    business_account_id: str = ""

    # API
    api_version: str = GRAPH_API_VERSION
    api_base_url: str = GRAPH_API_BASE_URL

    # Timeouts (pass-through, sem retry)
    request_timeout_seconds: float = 30.0
    media_upload_timeout_seconds: float = 120.0

    # Media download
    media_max_size_bytes: int = 16 * 1024 * 1024

    @property
    def api_endpoint(self) -> str:
        """Raiz versionada: {host}/{version}."""
        return f"{self.api_base_url}/{self.api_version}"

    @property
    def base_url(self) -> str:
        """URL base do número remetente: .../{version}/{phone_number_id}."""
        return f"{self.api_endpoint}/{self.phone_number_id}"

    @property
    def messages_endpoint(self) -> str:
        """URL de envio de mensagens."""
        return f"{self.base_url}/messages"

    @property
    def media_endpoint(self) -> str:
        """URL de upload de mídia."""
        return f"{self.base_url}/media"

    @property
    def uses_default_api_version(self) -> bool:
        return self.api_version == GRAPH_API_VERSION

    def validate(self) -> list[str]:
        """Valida configurações mínimas.

        Returns:
            Mensagens de erro; lista vazia quando a configuração é utilizável.
        """
        errors: list[str] = []

        if not self.access_token or not self.access_token.strip():
            errors.append('Missing "accessToken"')

        if not self.phone_number_id or not self.phone_number_id.strip():
            errors.append('Missing "senderPhoneNumberId"')

        if not self.api_version:
            errors.append('"graphAPIVersion" must not be empty')

        if self.request_timeout_seconds <= 0:
            errors.append("request_timeout_seconds must be > 0")

        if self.media_upload_timeout_seconds <= 0:
            errors.append("media_upload_timeout_seconds must be > 0")

        return errors


ENV_PREFIX = "WHATSAPP_"


def _env(name: str, default: str = "") -> str:
    return os.environ.get(f"{ENV_PREFIX}{name}", default)


def load_settings_from_env() -> WhatsAppSettings:
    """Monta WhatsAppSettings a partir de WHATSAPP_* (ausentes usam o padrão).

    Raises:
        ValueError: Se um timeout/limite numérico não for número
    """
    defaults = WhatsAppSettings()
    return WhatsAppSettings(
        access_token=_env("ACCESS_TOKEN"),
        phone_number_id=_env("PHONE_NUMBER_ID"),
        business_account_id=_env("BUSINESS_ACCOUNT_ID"),
        api_version=_env("API_VERSION", defaults.api_version),
        api_base_url=_env("API_BASE_URL", defaults.api_base_url),
        request_timeout_seconds=float(
            _env("REQUEST_TIMEOUT_SECONDS", str(defaults.request_timeout_seconds))
        ),
        media_upload_timeout_seconds=float(
            _env("MEDIA_UPLOAD_TIMEOUT_SECONDS", str(defaults.media_upload_timeout_seconds))
        ),
        media_max_size_bytes=int(
            _env("MEDIA_MAX_SIZE_BYTES", str(defaults.media_max_size_bytes))
        ),
    )


@lru_cache(maxsize=1)
def get_whatsapp_settings() -> WhatsAppSettings:
    """Settings do ambiente, lidas uma única vez por processo."""
    return load_settings_from_env()
