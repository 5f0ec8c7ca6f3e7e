"""Regras compartilhadas pelos validadores de cada tipo de mensagem."""

from __future__ import annotations

from typing import Any

from whatsapp_cloud.errors import ValidationError


def require(field: str, value: Any) -> None:
    """Falha se o valor estiver ausente ou vazio."""
    if value is None or value == "" or (isinstance(value, (list, tuple)) and not value):
        raise ValidationError(field, "is required in making a request", value)


def require_length(field: str, value: str | None, max_length: int, min_length: int = 1) -> None:
    """Falha se ``value`` não tiver entre ``min_length`` e ``max_length`` caracteres."""
    if not isinstance(value, str) or not min_length <= len(value) <= max_length:
        raise ValidationError(
            field,
            f"is required and must be between {min_length} and {max_length} characters long",
            value,
        )


def require_recipient(to: str | None) -> None:
    require("recipientNumber", to)
