"""Enums e constantes de domínio da API Meta/WhatsApp."""

from __future__ import annotations

from enum import StrEnum

MESSAGING_PRODUCT: str = "whatsapp"
RECIPIENT_TYPE_INDIVIDUAL: str = "individual"


class MessageType(StrEnum):
    """Tipos de conteúdo outbound suportados pelo cliente."""

    TEXT = "text"
    IMAGE = "image"
    DOCUMENT = "document"
    LOCATION = "location"
    CONTACTS = "contacts"
    INTERACTIVE = "interactive"


class InteractiveType(StrEnum):
    """Tipos de mensagens interativas suportadas."""

    BUTTON = "button"
    LIST = "list"


class QRImageFormat(StrEnum):
    """Formatos aceitos para imagem de QR code."""

    PNG = "png"
    SVG = "svg"
