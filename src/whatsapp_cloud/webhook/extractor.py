"""Extrator de payloads de webhook WhatsApp Business API.

Converte o payload bruto em ParsedWebhook. Apenas extração estrutural, sem
regra de negócio. Entradas de outra conta (WABA) são ignoradas quando o
business_account_id está configurado.
"""

from __future__ import annotations

import logging
from typing import Any

from whatsapp_cloud.webhook.models import InboundMessage, MessageStatus, ParsedWebhook

logger = logging.getLogger(__name__)

MEDIA_TYPES = frozenset({"image", "video", "audio", "document", "sticker"})


def _as_str(value: Any) -> str | None:
    return None if value is None else str(value)


def _block(msg: dict[str, Any], key: str) -> dict[str, Any]:
    value = msg.get(key)
    return value if isinstance(value, dict) else {}


def _media_fields(msg: dict[str, Any], media_type: str) -> dict[str, Any]:
    media = _block(msg, media_type)
    return {
        "media_id": media.get("id"),
        "media_mime_type": media.get("mime_type"),
        "media_caption": media.get("caption"),
        "media_filename": media.get("filename"),
    }


def _interactive_fields(msg: dict[str, Any]) -> dict[str, Any]:
    interactive = _block(msg, "interactive")
    interactive_type = interactive.get("type")
    reply = _block(interactive, "button_reply") or _block(interactive, "list_reply")
    return {
        "interactive_type": interactive_type,
        "interactive_reply_id": reply.get("id"),
        "interactive_reply_title": reply.get("title"),
    }


def _fields_by_type(msg: dict[str, Any], message_type: str | None) -> dict[str, Any]:
    if message_type == "text":
        return {"text": _block(msg, "text").get("body")}
    if message_type in MEDIA_TYPES:
        return _media_fields(msg, message_type)
    if message_type == "location":
        location = _block(msg, "location")
        return {
            "location_latitude": location.get("latitude"),
            "location_longitude": location.get("longitude"),
            "location_name": location.get("name"),
            "location_address": location.get("address"),
        }
    if message_type == "contacts":
        contacts = msg.get("contacts")
        return {"contacts": [c for c in contacts if isinstance(c, dict)] if isinstance(contacts, list) else []}
    if message_type == "interactive":
        return _interactive_fields(msg)
    if message_type == "button":
        # resposta a botão de template
        button = _block(msg, "button")
        return {"interactive_reply_id": button.get("payload"), "interactive_reply_title": button.get("text")}
    if message_type == "reaction":
        reaction = _block(msg, "reaction")
        return {"reaction_message_id": reaction.get("message_id"), "reaction_emoji": reaction.get("emoji")}
    logger.info("unsupported_message_type_received", extra={"message_type": message_type})
    return {}


def _whatsapp_name(value: dict[str, Any]) -> str | None:
    contacts = value.get("contacts") or []
    if contacts and isinstance(contacts[0], dict):
        profile = contacts[0].get("profile") or {}
        if isinstance(profile, dict):
            return profile.get("name")
    return None


def _extract_messages(value: dict[str, Any]) -> list[InboundMessage]:
    phone_number_id = _block(value, "metadata").get("phone_number_id")
    whatsapp_name = _whatsapp_name(value)
    messages: list[InboundMessage] = []
    for msg in value.get("messages") or []:
        if not isinstance(msg, dict) or not msg.get("id"):
            continue
        message_type = msg.get("type")
        messages.append(
            InboundMessage(
                message_id=msg["id"],
                from_number=_as_str(msg.get("from")),
                timestamp=_as_str(msg.get("timestamp")),
                message_type=message_type or "unknown",
                whatsapp_name=whatsapp_name,
                phone_number_id=phone_number_id,
                context_message_id=_block(msg, "context").get("id"),
                **_fields_by_type(msg, message_type),
            )
        )
    return messages


def _extract_statuses(value: dict[str, Any]) -> list[MessageStatus]:
    statuses: list[MessageStatus] = []
    for item in value.get("statuses") or []:
        if not isinstance(item, dict) or not item.get("id") or not item.get("status"):
            continue
        statuses.append(
            MessageStatus(
                message_id=item["id"],
                status=item["status"],
                recipient_id=_as_str(item.get("recipient_id")),
                timestamp=_as_str(item.get("timestamp")),
                errors=[e for e in item.get("errors") or [] if isinstance(e, dict)],
            )
        )
    return statuses


def parse_message(
    payload: dict[str, Any],
    business_account_id: str | None = None,
) -> ParsedWebhook:
    """Extrai mensagens e status do payload bruto do webhook.

    Args:
        payload: Corpo JSON do webhook
        business_account_id: WABA esperado; entradas com outro id são ignoradas
    """
    messages: list[InboundMessage] = []
    statuses: list[MessageStatus] = []
    if not isinstance(payload, dict):
        return ParsedWebhook()

    for entry in payload.get("entry") or []:
        if not isinstance(entry, dict):
            continue
        if business_account_id and entry.get("id") != business_account_id:
            logger.info("webhook_entry_other_account_ignored")
            continue
        for change in entry.get("changes") or []:
            value = change.get("value") if isinstance(change, dict) else None
            if not isinstance(value, dict):
                continue
            messages.extend(_extract_messages(value))
            statuses.extend(_extract_statuses(value))

    return ParsedWebhook(messages=messages, statuses=statuses)
