"""Parsing do objeto ``error`` devolvido pela Graph API."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

# Códigos de throttling/capacidade da Meta (retentáveis)
THROTTLING_ERROR_CODES = frozenset({4, 80007, 130429, 131048, 131056})


@dataclass(frozen=True)
class MetaApiError:
    """Erro estruturado da Meta, usado para log e classificação."""

    code: int
    type: str
    message: str
    status_code: int | None = None
    subcode: int | None = None
    fbtrace_id: str | None = None
    transient_hint: bool | None = None

    @property
    def is_permanent(self) -> bool:
        return not is_transient_failure(self.status_code, self.code, self.transient_hint)


def is_transient_failure(
    status_code: int | None,
    error_code: int = 0,
    transient_hint: bool | None = None,
) -> bool:
    """Indica se vale a pena repetir a requisição.

    O cliente não faz retry; a classificação só alimenta os logs e quem
    envolver o transporte com uma política própria. ``status_code`` None
    significa que a requisição não chegou à Meta.
    """
    if transient_hint is not None:
        return transient_hint
    if error_code in THROTTLING_ERROR_CODES:
        return True
    if status_code is None:
        return True
    return status_code == 429 or status_code >= 500


def parse_meta_error(body: Any, status_code: int | None = None) -> MetaApiError | None:
    """Lê ``body["error"]``; None se o corpo não trouxer erro estruturado."""
    if not isinstance(body, dict):
        return None
    error = body.get("error")
    if not isinstance(error, dict):
        return None

    code = error.get("code")
    hint = error.get("is_transient")
    return MetaApiError(
        code=code if isinstance(code, int) else 0,
        type=str(error.get("type") or "unknown"),
        message=str(error.get("message") or "Unknown error"),
        status_code=status_code,
        subcode=error.get("error_subcode"),
        fbtrace_id=error.get("fbtrace_id"),
        transient_hint=hint if isinstance(hint, bool) else None,
    )
