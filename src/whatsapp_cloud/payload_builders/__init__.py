"""Builders de payload para a API Meta/WhatsApp, um por tipo de mensagem."""

from whatsapp_cloud.payload_builders.base import PayloadBuilder, build_base_payload
from whatsapp_cloud.payload_builders.factory import build_full_payload, get_payload_builder

__all__ = [
    "PayloadBuilder",
    "build_base_payload",
    "build_full_payload",
    "get_payload_builder",
]
