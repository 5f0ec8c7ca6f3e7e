"""Exceções do cliente WhatsApp Cloud.

Dois níveis:
- ValidationError/ConfigurationError: erros do chamador, lançados antes de IO
- MediaError e derivadas: falhas no fluxo de upload/resolução de mídia

Falhas de envio (transporte/Meta) não viram exceção: retornam como
NormalizedResult com status "failed".
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from whatsapp_cloud.connectors.normalizer import NormalizedResult


class WhatsAppCloudError(Exception):
    """Base para todos os erros do pacote."""


class ConfigurationError(WhatsAppCloudError, ValueError):
    """Configuração obrigatória ausente ou inválida."""


class ValidationError(WhatsAppCloudError, ValueError):
    """Campo de mensagem ausente ou fora dos limites da API Meta.

    Attributes:
        field: Nome do campo ofendido (ex: "recipientNumber", "row.title")
        constraint: Restrição violada, em texto curto
        value: Valor recebido (nunca logado)
    """

    def __init__(self, field: str, constraint: str, value: Any = None) -> None:
        super().__init__(f'"{field}" {constraint}')
        self.field = field
        self.constraint = constraint
        self.value = value


class MediaError(WhatsAppCloudError):
    """Falha no fluxo de mídia."""

    def __init__(self, message: str, result: NormalizedResult | None = None) -> None:
        super().__init__(message)
        self.result = result


class UploadError(MediaError):
    """Upload falhou ou a Meta não devolveu media_id."""


class ResolutionError(MediaError):
    """Lookup do media_id falhou ou não trouxe URL."""


class MediaDownloadError(MediaError):
    """Download de mídia falhou."""
