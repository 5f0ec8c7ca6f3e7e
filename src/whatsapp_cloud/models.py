"""Modelos outbound: uma variante por tipo de mensagem.

Cada variante carrega apenas os campos legais para o seu tipo e exatamente
um destinatário. São criadas por chamada e nunca persistidas. Validação de
limites fica em ``whatsapp_cloud.validators``; aqui só há estrutura.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from whatsapp_cloud.constants import InteractiveType, MessageType

DEFAULT_LIST_BUTTON_TEXT = "Select a product"


@dataclass(frozen=True, slots=True)
class Button:
    """Botão de resposta rápida."""

    title: str
    id: str


@dataclass(frozen=True, slots=True)
class ListRow:
    """Item selecionável de uma seção de lista."""

    id: str
    title: str
    description: str


@dataclass(frozen=True, slots=True)
class ListSection:
    """Seção de lista interativa."""

    title: str
    rows: tuple[ListRow, ...] = ()


@dataclass(frozen=True, slots=True)
class LocalFile:
    """Arquivo local a ser enviado via upload antes da mensagem."""

    path: str
    display_name: str | None = None


@dataclass(frozen=True, slots=True)
class RemoteLink:
    """Mídia já hospedada em URL pública; usada literalmente."""

    url: str


MediaReference = Union[LocalFile, RemoteLink]


@dataclass(frozen=True, slots=True)
class TextMessage:
    to: str
    body: str
    preview_url: bool = False

    message_type = MessageType.TEXT


@dataclass(frozen=True, slots=True)
class ButtonsMessage:
    to: str
    body: str
    buttons: tuple[Button, ...] = ()

    message_type = MessageType.INTERACTIVE
    interactive_type = InteractiveType.BUTTON


@dataclass(frozen=True, slots=True)
class ListMessage:
    to: str
    header: str
    body: str
    footer: str
    sections: tuple[ListSection, ...] = ()
    button_text: str = DEFAULT_LIST_BUTTON_TEXT

    message_type = MessageType.INTERACTIVE
    interactive_type = InteractiveType.LIST

    @property
    def total_rows(self) -> int:
        return sum(len(section.rows) for section in self.sections)


@dataclass(frozen=True, slots=True)
class _MediaMessage:
    """Base de mensagens com mídia: ``file_path`` XOR ``url``."""

    to: str
    file_path: str | None = None
    url: str | None = None
    file_name: str | None = None

    @property
    def media(self) -> MediaReference | None:
        """Referência de mídia; None se ambos ou nenhum campo informado."""
        if self.file_path and not self.url:
            return LocalFile(path=self.file_path, display_name=self.file_name)
        if self.url and not self.file_path:
            return RemoteLink(url=self.url)
        return None


@dataclass(frozen=True, slots=True)
class ImageMessage(_MediaMessage):
    caption: str | None = None

    message_type = MessageType.IMAGE


@dataclass(frozen=True, slots=True)
class DocumentMessage(_MediaMessage):
    caption: str = ""

    message_type = MessageType.DOCUMENT


@dataclass(frozen=True, slots=True)
class LocationMessage:
    to: str
    latitude: float | None = None
    longitude: float | None = None
    name: str | None = None
    address: str | None = None

    message_type = MessageType.LOCATION


@dataclass(frozen=True, slots=True)
class ContactMessage:
    """Cartão de contato de demonstração; só o destinatário vem do chamador."""

    to: str

    message_type = MessageType.CONTACTS


OutboundMessage = Union[
    TextMessage,
    ButtonsMessage,
    ListMessage,
    ImageMessage,
    DocumentMessage,
    LocationMessage,
    ContactMessage,
]


def to_buttons(raw: list[Button | dict[str, Any]] | None) -> tuple[Button, ...]:
    """Aceita Button ou dicts ``{"title", "id"}`` vindos do chamador."""
    buttons: list[Button] = []
    for item in raw or []:
        if isinstance(item, Button):
            buttons.append(item)
        else:
            buttons.append(Button(title=item.get("title") or "", id=item.get("id") or ""))
    return tuple(buttons)


def _to_row(raw: ListRow | dict[str, Any]) -> ListRow:
    if isinstance(raw, ListRow):
        return raw
    return ListRow(
        id=raw.get("id") or "",
        title=raw.get("title") or "",
        description=raw.get("description") or "",
    )


def to_sections(raw: list[ListSection | dict[str, Any]] | None) -> tuple[ListSection, ...]:
    """Aceita ListSection ou dicts ``{"title", "rows": [...]}``."""
    sections: list[ListSection] = []
    for item in raw or []:
        if isinstance(item, ListSection):
            sections.append(item)
            continue
        rows = tuple(_to_row(row) for row in item.get("rows") or [])
        sections.append(ListSection(title=item.get("title") or "", rows=rows))
    return tuple(sections)


@dataclass(frozen=True, slots=True)
class UploadedMedia:
    """Mídia enviada à Meta, identificada pelo media_id."""

    media_id: str
    file_name: str | None = None


@dataclass(frozen=True, slots=True)
class ResolvedMedia:
    """Mídia pronta para referência no corpo da mensagem.

    Imagem usa ``link`` (URL temporária da resolução); documento usa
    ``media_id`` + ``filename`` do upload.
    """

    media_id: str
    link: str | None = None
    filename: str | None = None
    mime_type: str | None = None
