"""Validadores de localização e contato."""

from __future__ import annotations

from numbers import Real
from typing import TYPE_CHECKING

from whatsapp_cloud.errors import ValidationError
from whatsapp_cloud.validators.common import require_recipient
from whatsapp_cloud.validators.limits import (
    MAX_LATITUDE,
    MAX_LONGITUDE,
    MIN_LATITUDE,
    MIN_LONGITUDE,
)

if TYPE_CHECKING:
    from whatsapp_cloud.models import ContactMessage, LocationMessage


def _check_coordinate(field: str, value: object, lower: float, upper: float) -> None:
    # bool é subclasse de int; não é coordenada
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ValidationError(field, "must be a number", value)
    if not lower <= value <= upper:
        raise ValidationError(field, f"must be between {lower} and {upper}", value)


def validate_location_message(message: LocationMessage) -> None:
    """Valida cartão de localização: os quatro campos são obrigatórios.

    Coordenada 0.0 é válida; só None conta como ausente.
    """
    require_recipient(message.to)

    if message.latitude is None or message.longitude is None:
        raise ValidationError(
            "latitude",
            'and "longitude" are required in making a request',
            (message.latitude, message.longitude),
        )
    _check_coordinate("latitude", message.latitude, MIN_LATITUDE, MAX_LATITUDE)
    _check_coordinate("longitude", message.longitude, MIN_LONGITUDE, MAX_LONGITUDE)

    if not message.name or not message.address:
        raise ValidationError(
            "name",
            'and "address" are required in making a request',
            (message.name, message.address),
        )


def validate_contact_message(message: ContactMessage) -> None:
    require_recipient(message.to)
