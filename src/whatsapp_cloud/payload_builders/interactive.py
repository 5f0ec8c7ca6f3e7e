"""Builder para mensagens interativas (botões de resposta e listas)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from whatsapp_cloud.constants import InteractiveType

if TYPE_CHECKING:
    from whatsapp_cloud.models import ButtonsMessage, ListMessage, ResolvedMedia


def _build_button_action(message: ButtonsMessage) -> dict[str, Any]:
    return {
        "buttons": [
            {"type": "reply", "reply": {"title": button.title, "id": button.id}}
            for button in message.buttons
        ]
    }


def _build_list_action(message: ListMessage) -> dict[str, Any]:
    return {
        "button": message.button_text,
        "sections": [
            {
                "title": section.title,
                "rows": [
                    {"id": row.id, "title": row.title, "description": row.description}
                    for row in section.rows
                ],
            }
            for section in message.sections
        ],
    }


class InteractivePayloadBuilder:
    """Builder para mensagens interativas."""

    def build(
        self,
        message: ButtonsMessage | ListMessage,
        media: ResolvedMedia | None = None,
    ) -> dict[str, Any]:
        """Constrói bloco ``interactive`` conforme o subtipo da mensagem.

        Raises:
            ValueError: Se subtipo interativo não suportado
        """
        interactive_type = message.interactive_type
        interactive: dict[str, Any] = {"type": str(interactive_type)}

        if interactive_type == InteractiveType.BUTTON:
            interactive["body"] = {"text": message.body}
            interactive["action"] = _build_button_action(message)
        elif interactive_type == InteractiveType.LIST:
            interactive["header"] = {"type": "text", "text": message.header}
            interactive["body"] = {"text": message.body}
            interactive["footer"] = {"text": message.footer}
            interactive["action"] = _build_list_action(message)
        else:
            raise ValueError(f"Unsupported interactive type: {interactive_type}")

        return {"interactive": interactive}
