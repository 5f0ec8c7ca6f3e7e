"""Limites da API Meta/WhatsApp para mensagens outbound."""

from __future__ import annotations

MAX_TEXT_LENGTH: int = 4096

MAX_BUTTON_TITLE_LENGTH: int = 20
MAX_BUTTON_ID_LENGTH: int = 256

MAX_LIST_ROW_ID_LENGTH: int = 200
MAX_LIST_ROW_TITLE_LENGTH: int = 24
MAX_LIST_ROW_DESCRIPTION_LENGTH: int = 72
MAX_LIST_ROWS_TOTAL: int = 10
MAX_LIST_BUTTON_TEXT_LENGTH: int = 20

MIN_LATITUDE: float = -90.0
MAX_LATITUDE: float = 90.0
MIN_LONGITUDE: float = -180.0
MAX_LONGITUDE: float = 180.0
