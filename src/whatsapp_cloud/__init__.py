"""Cliente assíncrono para a WhatsApp Cloud API (Meta Graph API).

Monta, valida e envia mensagens (texto, botões, listas, imagem, documento,
localização, contato) e orquestra o upload de mídia local.
"""

from whatsapp_cloud.client import WhatsAppCloudClient
from whatsapp_cloud.config.settings import WhatsAppSettings
from whatsapp_cloud.connectors.normalizer import NormalizedResult
from whatsapp_cloud.errors import (
    ConfigurationError,
    MediaDownloadError,
    MediaError,
    ResolutionError,
    UploadError,
    ValidationError,
    WhatsAppCloudError,
)
from whatsapp_cloud.models import Button, ListRow, ListSection

__all__ = [
    "Button",
    "ConfigurationError",
    "ListRow",
    "ListSection",
    "MediaDownloadError",
    "MediaError",
    "NormalizedResult",
    "ResolutionError",
    "UploadError",
    "ValidationError",
    "WhatsAppCloudClient",
    "WhatsAppCloudError",
    "WhatsAppSettings",
]
