"""Normalização de RawOutcome em NormalizedResult.

Único ponto onde a heterogeneidade do formato de erro da Meta é absorvida:
todas as operações de envio devolvem o mesmo contrato de falha.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Literal

from whatsapp_cloud.connectors.meta_errors import parse_meta_error
from whatsapp_cloud.connectors.meta_logging import (
    log_meta_error,
    log_success,
    log_unstructured_failure,
)

if TYPE_CHECKING:
    from whatsapp_cloud.connectors.transport import RawOutcome

STATUS_SUCCESS = "success"
STATUS_FAILED = "failed"


@dataclass(frozen=True)
class NormalizedResult:
    """Resultado uniforme de uma operação.

    Attributes:
        status: "success" ou "failed"
        data: Corpo de sucesso da Meta (None em falha)
        error: Campos de erro da Meta espalhados, ou ``{"error": <texto>}``
        status_code: Status HTTP, quando houve resposta
        request_body: Corpo enviado (útil para auditoria de mídia)
    """

    status: Literal["success", "failed"]
    data: Any = None
    error: dict[str, Any] = field(default_factory=dict)
    status_code: int | None = None
    request_body: dict[str, Any] | None = None

    @classmethod
    def success(cls, data: Any = None, **kwargs: Any) -> NormalizedResult:
        return cls(status=STATUS_SUCCESS, data=data, **kwargs)

    @classmethod
    def failure(cls, error: dict[str, Any], **kwargs: Any) -> NormalizedResult:
        return cls(status=STATUS_FAILED, error=dict(error), **kwargs)

    @property
    def ok(self) -> bool:
        return self.status == STATUS_SUCCESS

    @property
    def message(self) -> str | None:
        """Mensagem de erro legível, se houver."""
        value = self.error.get("message") or self.error.get("error")
        return value if isinstance(value, str) else None

    def with_request_body(self, body: dict[str, Any]) -> NormalizedResult:
        return NormalizedResult(
            status=self.status,
            data=self.data,
            error=self.error,
            status_code=self.status_code,
            request_body=body,
        )

    def to_dict(self) -> dict[str, Any]:
        """Formato plano: ``{"status": "success", "data": ...}`` ou
        ``{"status": "failed", **campos_de_erro}``."""
        if self.ok:
            return {"status": STATUS_SUCCESS, "data": self.data}
        return {**self.error, "status": STATUS_FAILED}


def extract_error_fields(outcome: RawOutcome) -> dict[str, Any]:
    """Extrai campos de erro do corpo, com fallback para o texto bruto.

    Ordem: objeto ``error`` do corpo JSON; senão o próprio corpo se o texto
    for um objeto JSON; senão ``{"error": raw_body}``.
    """
    body = outcome.body
    if isinstance(body, dict) and isinstance(body.get("error"), dict):
        return dict(body["error"])

    try:
        parsed = json.loads(outcome.raw_body)
    except (json.JSONDecodeError, TypeError):
        return {"error": outcome.raw_body}

    if isinstance(parsed, dict):
        return parsed
    return {"error": outcome.raw_body}


def normalize_response(outcome: RawOutcome, operation: str = "request") -> NormalizedResult:
    """Converte o resultado bruto do transporte em NormalizedResult."""
    if outcome.ok:
        log_success(operation, outcome.status_code)
        return NormalizedResult.success(outcome.body, status_code=outcome.status_code)

    meta_error = parse_meta_error(outcome.body, outcome.status_code)
    if meta_error is not None:
        log_meta_error(meta_error, operation, outcome.status_code)
    else:
        log_unstructured_failure(operation, outcome.status_code)

    return NormalizedResult.failure(
        extract_error_fields(outcome),
        status_code=outcome.status_code,
    )
