"""Validadores de conformidade para mensagens WhatsApp/Meta.

Uso:
    from whatsapp_cloud.validators import WhatsAppMessageValidator

    validator = WhatsAppMessageValidator()
    validator.validate_outbound_message(message)
"""

from whatsapp_cloud.errors import ValidationError
from whatsapp_cloud.validators.dispatcher import WhatsAppMessageValidator
from whatsapp_cloud.validators.limits import (
    MAX_BUTTON_ID_LENGTH,
    MAX_BUTTON_TITLE_LENGTH,
    MAX_LIST_ROW_DESCRIPTION_LENGTH,
    MAX_LIST_ROW_ID_LENGTH,
    MAX_LIST_ROW_TITLE_LENGTH,
    MAX_LIST_ROWS_TOTAL,
    MAX_TEXT_LENGTH,
)

__all__ = [
    "MAX_BUTTON_ID_LENGTH",
    "MAX_BUTTON_TITLE_LENGTH",
    "MAX_LIST_ROWS_TOTAL",
    "MAX_LIST_ROW_DESCRIPTION_LENGTH",
    "MAX_LIST_ROW_ID_LENGTH",
    "MAX_LIST_ROW_TITLE_LENGTH",
    "MAX_TEXT_LENGTH",
    "ValidationError",
    "WhatsAppMessageValidator",
]
