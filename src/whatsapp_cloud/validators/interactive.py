"""Validadores de mensagens interativas (botões e listas).

Qualquer item inválido falha a chamada inteira; nada é descartado em
silêncio.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from whatsapp_cloud.errors import ValidationError
from whatsapp_cloud.validators.common import require, require_length, require_recipient
from whatsapp_cloud.validators.limits import (
    MAX_BUTTON_ID_LENGTH,
    MAX_BUTTON_TITLE_LENGTH,
    MAX_LIST_BUTTON_TEXT_LENGTH,
    MAX_LIST_ROW_DESCRIPTION_LENGTH,
    MAX_LIST_ROW_ID_LENGTH,
    MAX_LIST_ROW_TITLE_LENGTH,
    MAX_LIST_ROWS_TOTAL,
)

if TYPE_CHECKING:
    from whatsapp_cloud.models import Button, ButtonsMessage, ListMessage, ListRow, ListSection


def validate_button(button: Button) -> None:
    require_length("title", button.title, MAX_BUTTON_TITLE_LENGTH)
    require_length("id", button.id, MAX_BUTTON_ID_LENGTH)


def validate_buttons_message(message: ButtonsMessage) -> None:
    """Valida mensagem com botões de resposta.

    Raises:
        ValidationError: Se corpo/destinatário ausente, lista vazia ou algum
            botão fora dos limites
    """
    require("message", message.body)
    require_recipient(message.to)
    for button in message.buttons:
        validate_button(button)
    require("listOfButtons", message.buttons)


def validate_list_row(row: ListRow) -> None:
    require_length("row.id", row.id, MAX_LIST_ROW_ID_LENGTH)
    require_length("row.title", row.title, MAX_LIST_ROW_TITLE_LENGTH)
    require_length("row.description", row.description, MAX_LIST_ROW_DESCRIPTION_LENGTH)


def validate_list_section(section: ListSection) -> None:
    for row in section.rows:
        validate_list_row(row)
    require("section.title", section.title)
    require("section.rows", section.rows)


def validate_list_message(message: ListMessage) -> None:
    """Valida mensagem de lista.

    Raises:
        ValidationError: Se header/body/footer ausentes, seção inválida ou
            total de linhas acima de MAX_LIST_ROWS_TOTAL
    """
    require_recipient(message.to)
    require("bodyText", message.body)
    require("headerText", message.header)
    require("footerText", message.footer)
    require_length("buttonText", message.button_text, MAX_LIST_BUTTON_TEXT_LENGTH)

    for section in message.sections:
        validate_list_section(section)

    total = message.total_rows
    if total > MAX_LIST_ROWS_TOTAL:
        raise ValidationError(
            "listOfSections",
            f"total number of rows must be equal or less than {MAX_LIST_ROWS_TOTAL}",
            total,
        )

    require("listOfSections", message.sections)
