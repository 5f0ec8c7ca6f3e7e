"""Logging estruturado JSON para aplicações que usam o cliente.

A biblioteca só chama ``logging.getLogger(__name__)``; quem embute o cliente
decide se instala o handler JSON abaixo.

Uso:
    from whatsapp_cloud.config.logging import configure_logging

    configure_logging(level="INFO", service_name="meu_bot")
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pythonjsonlogger.json import JsonFormatter

if TYPE_CHECKING:
    from collections.abc import Callable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "whatsapp_cloud"

# Ordem dos campos na linha JSON
REQUIRED_LOG_FIELDS = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}

# Chaves de `extra` que podem carregar PII/credenciais
SENSITIVE_FIELDS = frozenset({"access_token", "authorization", "to", "recipient", "file_path"})

REDACTED = "***"


class ContextFilter(logging.Filter):
    """Injeta service/correlation_id e mascara campos sensíveis do record.

    Se correlation_id já foi passado via ``extra``, preserva o valor.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._correlation_id_getter = correlation_id_getter

    def filter(self, record: logging.LogRecord) -> bool:
        if not getattr(record, "correlation_id", None):
            getter = self._correlation_id_getter
            record.correlation_id = getter() if getter else ""
        record.service = self._service_name
        for key in SENSITIVE_FIELDS:
            if getattr(record, key, None):
                setattr(record, key, REDACTED)
        return True


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON com os campos padronizados."""
    format_string = " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS)
    return JsonFormatter(format_string, rename_fields=FIELD_RENAME_MAP)


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
) -> logging.Handler:
    """Instala um único handler JSON (stderr) no root logger.

    Args:
        level: DEBUG, INFO, WARNING, ERROR ou CRITICAL (sem distinção de caixa)
        service_name: Valor do campo ``service`` em cada linha
        correlation_id_getter: Callable que devolve o correlation_id corrente,
            tipicamente lido de uma ContextVar da aplicação

    Returns:
        O handler instalado.

    Raises:
        ValueError: Nível desconhecido
    """
    normalized = level.upper()
    if normalized not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Invalid log level: {level}. "
            f"Valid: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler()
    handler.setLevel(normalized)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(ContextFilter(service_name, correlation_id_getter))

    root = logging.getLogger()
    root.setLevel(normalized)
    root.handlers = [handler]
    return handler


def get_logger(name: str) -> logging.Logger:
    """Retorna logger para o módulo especificado."""
    return logging.getLogger(name)
