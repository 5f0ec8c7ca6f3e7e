"""Adapter de transporte HTTP para a Graph API.

Único ponto de IO de rede do cliente. Recebe um RequestEnvelope completo,
aplica os headers padrão e devolve um RawOutcome. Nunca lança por falha de
transporte ou da Meta: a falha vira RawOutcome(ok=False). Sem retry; o
timeout é o do httpx, configurado pelas settings.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

import httpx

if TYPE_CHECKING:
    from collections.abc import Mapping

    from whatsapp_cloud.config.settings import WhatsAppSettings

logger: logging.Logger = logging.getLogger(__name__)

DEFAULT_METHOD = "GET"


@dataclass(frozen=True)
class RequestEnvelope:
    """Requisição completa para a Graph API.

    ``body`` é enviado como JSON; ``form``/``files`` como multipart.
    """

    path: str
    method: str = DEFAULT_METHOD
    base_url: str | None = None
    headers: Mapping[str, str] = field(default_factory=dict)
    body: Any = None
    form: Mapping[str, str] | None = None
    files: Mapping[str, Any] | None = None
    params: Mapping[str, str] | None = None

    @property
    def is_multipart(self) -> bool:
        return self.files is not None


@dataclass(frozen=True)
class RawOutcome:
    """Resultado bruto do transporte, antes da normalização.

    ``status_code`` é None quando a requisição nem chegou à Meta.
    """

    ok: bool
    status_code: int | None
    body: Any
    raw_body: str
    headers: Mapping[str, str] = field(default_factory=dict)
    content: bytes = b""


def merge_headers(
    defaults: Mapping[str, str],
    overrides: Mapping[str, str] | None = None,
) -> Mapping[str, str]:
    """Combina headers: ``overrides`` vencem ``defaults``.

    Nenhuma entrada é mutada; o resultado é somente leitura.
    """
    merged = {**defaults, **(overrides or {})}
    return MappingProxyType(merged)


def default_headers(access_token: str, *, json_body: bool = True) -> Mapping[str, str]:
    """Headers padrão da Graph API com Bearer token.

    Multipart não leva Content-Type fixo: o httpx define o boundary.
    """
    headers: dict[str, str] = {}
    if json_body:
        headers["Content-Type"] = "application/json"
    headers["Accept-Language"] = "en_US"
    headers["Accept"] = "application/json"
    if access_token:
        headers["Authorization"] = f"Bearer {access_token}"
    return MappingProxyType(headers)


def _decode_body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return None


class WhatsAppTransport:
    """Executa RequestEnvelopes contra a Graph API via httpx.

    Args:
        settings: Configuração imutável do cliente
        http_client: AsyncClient injetado (reutilizado e nunca fechado aqui).
            Se None, abre um cliente por chamada.
    """

    def __init__(
        self,
        settings: WhatsAppSettings,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._settings = settings
        self._http_client = http_client

    @property
    def settings(self) -> WhatsAppSettings:
        return self._settings

    def build_request(self, envelope: RequestEnvelope) -> tuple[str, str, Mapping[str, str]]:
        """Resolve método, URL completa e headers efetivos do envelope.

        Raises:
            ValueError: Se ``path`` vazio
        """
        if not envelope.path:
            raise ValueError('"url" is required in making a request')

        method = (envelope.method or DEFAULT_METHOD).upper()
        base_url = self._settings.base_url if envelope.base_url is None else envelope.base_url
        headers = merge_headers(
            default_headers(self._settings.access_token, json_body=not envelope.is_multipart),
            envelope.headers,
        )
        return method, f"{base_url}{envelope.path}", headers

    async def send(
        self,
        envelope: RequestEnvelope,
        *,
        timeout: float | None = None,
    ) -> RawOutcome:
        """Envia o envelope e devolve o resultado bruto.

        Falha de rede ou URL malformada vira RawOutcome(ok=False); nunca lança.
        """
        method, url, headers = self.build_request(envelope)
        request_kwargs = self._request_kwargs(envelope, method)
        effective_timeout = timeout or self._settings.request_timeout_seconds

        try:
            if self._http_client is not None:
                response = await self._http_client.request(
                    method, url, headers=dict(headers), timeout=effective_timeout, **request_kwargs
                )
            else:
                async with httpx.AsyncClient(timeout=effective_timeout) as client:
                    response = await client.request(
                        method, url, headers=dict(headers), **request_kwargs
                    )
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.warning(
                "whatsapp_transport_error",
                extra={
                    "method": method,
                    "path": envelope.path,
                    "error_type": type(exc).__name__,
                },
            )
            return RawOutcome(ok=False, status_code=None, body=None, raw_body=str(exc))

        logger.debug(
            "whatsapp_request_sent",
            extra={"method": method, "path": envelope.path, "status_code": response.status_code},
        )
        return RawOutcome(
            ok=response.is_success,
            status_code=response.status_code,
            body=_decode_body(response),
            raw_body=response.text,
            headers=dict(response.headers),
            content=response.content,
        )

    @staticmethod
    def _request_kwargs(envelope: RequestEnvelope, method: str) -> dict[str, Any]:
        kwargs: dict[str, Any] = {}
        if envelope.params:
            kwargs["params"] = dict(envelope.params)
        if envelope.is_multipart:
            kwargs["data"] = dict(envelope.form or {})
            kwargs["files"] = dict(envelope.files or {})
            return kwargs
        if method == "POST" and envelope.body is None:
            logger.debug("whatsapp_request_empty_body", extra={"path": envelope.path})
            kwargs["content"] = json.dumps({})
        elif envelope.body is not None:
            kwargs["content"] = json.dumps(envelope.body)
        return kwargs
