"""Validadores de mensagens de mídia (imagem e documento)."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from whatsapp_cloud.errors import ValidationError
from whatsapp_cloud.validators.common import require_recipient

if TYPE_CHECKING:
    from whatsapp_cloud.models import DocumentMessage, ImageMessage


def validate_media_source(message: ImageMessage | DocumentMessage, kind: str) -> None:
    """Exige exatamente um entre ``file_path`` e ``url``.

    Raises:
        ValidationError: Se ambos/nenhum informados ou se o arquivo local não existe
    """
    if message.file_path and message.url:
        raise ValidationError(
            "file_path",
            f'and "url" are mutually exclusive: send the {kind} from your '
            '"file_path" or from a publicly available "url", not both',
        )

    if not message.file_path and not message.url:
        raise ValidationError(
            "file_path",
            f'or "url" is required: send the {kind} from your "file_path" '
            'or from a publicly available "url"',
        )

    if message.file_path and not Path(message.file_path).is_file():
        raise ValidationError("file_path", "must point to an existing file", message.file_path)


def validate_image_message(message: ImageMessage) -> None:
    require_recipient(message.to)
    validate_media_source(message, "image")


def validate_document_message(message: DocumentMessage) -> None:
    require_recipient(message.to)
    validate_media_source(message, "document")
