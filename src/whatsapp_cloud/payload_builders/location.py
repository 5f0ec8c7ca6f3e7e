"""Builder para mensagens de localização."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from whatsapp_cloud.models import LocationMessage, ResolvedMedia


class LocationPayloadBuilder:
    """Builder para cartão de localização."""

    def build(self, message: LocationMessage, media: ResolvedMedia | None = None) -> dict[str, Any]:
        return {
            "location": {
                "latitude": message.latitude,
                "longitude": message.longitude,
                "name": message.name,
                "address": message.address,
            }
        }
