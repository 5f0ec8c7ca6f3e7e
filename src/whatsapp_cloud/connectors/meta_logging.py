"""Helpers de logging para API Meta/WhatsApp (sem PII)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .meta_errors import MetaApiError

logger = logging.getLogger(__name__)


def log_meta_error(
    meta_error: MetaApiError,
    operation: str,
    status_code: int | None,
) -> None:
    """Loga erro estruturado da Meta sem expor dados sensíveis."""
    logger.warning(
        "whatsapp_meta_error",
        extra={
            "operation": operation,
            "status_code": status_code,
            "error_type": meta_error.type,
            "error_code": meta_error.code,
            "error_subcode": meta_error.subcode,
            "is_permanent": meta_error.is_permanent,
        },
    )


def log_unstructured_failure(operation: str, status_code: int | None) -> None:
    """Loga falha sem corpo de erro reconhecível (ex: HTML, timeout)."""
    logger.warning(
        "whatsapp_unstructured_failure",
        extra={"operation": operation, "status_code": status_code},
    )


def log_success(operation: str, status_code: int | None) -> None:
    """Loga sucesso sem expor dados sensíveis."""
    logger.debug(
        "whatsapp_request_succeeded",
        extra={"operation": operation, "status_code": status_code},
    )
