"""Configuração do cliente: settings e logging estruturado."""

from whatsapp_cloud.config.settings import (
    GRAPH_API_BASE_URL,
    GRAPH_API_VERSION,
    WhatsAppSettings,
    get_whatsapp_settings,
    load_settings_from_env,
)

__all__ = [
    "GRAPH_API_BASE_URL",
    "GRAPH_API_VERSION",
    "WhatsAppSettings",
    "get_whatsapp_settings",
    "load_settings_from_env",
]
