"""Conector da Graph API: único ponto de IO do cliente.

Responsabilidades:
- Transporte HTTP (httpx) com headers padrão e Bearer token
- Normalização de respostas em NormalizedResult
- Parsing/log de erros Meta
- Upload, resolução e download de mídia
"""

from whatsapp_cloud.connectors.media import MediaUploader
from whatsapp_cloud.connectors.meta_errors import (
    MetaApiError,
    is_transient_failure,
    parse_meta_error,
)
from whatsapp_cloud.connectors.normalizer import NormalizedResult, normalize_response
from whatsapp_cloud.connectors.transport import (
    RawOutcome,
    RequestEnvelope,
    WhatsAppTransport,
    default_headers,
    merge_headers,
)

__all__ = [
    "MediaUploader",
    "NormalizedResult",
    "RawOutcome",
    "RequestEnvelope",
    "MetaApiError",
    "WhatsAppTransport",
    "default_headers",
    "is_transient_failure",
    "merge_headers",
    "normalize_response",
    "parse_meta_error",
]
