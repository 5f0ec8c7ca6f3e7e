"""Testes para parse_message (extração de eventos do webhook)."""

from __future__ import annotations

from typing import Any

import pytest
from pydantic import ValidationError as PydanticValidationError

from whatsapp_cloud.client import WhatsAppCloudClient
from whatsapp_cloud.config.settings import WhatsAppSettings
from whatsapp_cloud.webhook import parse_message


def _payload(value: dict[str, Any], entry_id: str = "WABA_1") -> dict[str, Any]:
    return {
        "object": "whatsapp_business_account",
        "entry": [{"id": entry_id, "changes": [{"field": "messages", "value": value}]}],
    }


def _value(*messages: dict[str, Any]) -> dict[str, Any]:
    return {
        "messaging_product": "whatsapp",
        "metadata": {"display_phone_number": "5511999999999", "phone_number_id": "1234567890"},
        "contacts": [{"profile": {"name": "Maria"}, "wa_id": "5511988887777"}],
        "messages": list(messages),
    }


class TestParseMessages:
    def test_text_message(self) -> None:
        parsed = parse_message(
            _payload(
                _value(
                    {
                        "from": "5511988887777",
                        "id": "wamid.A",
                        "timestamp": 1700000000,
                        "type": "text",
                        "text": {"body": "Oi"},
                    }
                )
            )
        )

        assert parsed.is_message is True
        message = parsed.messages[0]
        assert message.message_id == "wamid.A"
        assert message.from_number == "5511988887777"
        assert message.timestamp == "1700000000"
        assert message.text == "Oi"
        assert message.whatsapp_name == "Maria"
        assert message.phone_number_id == "1234567890"

    def test_image_message(self) -> None:
        parsed = parse_message(
            _payload(
                _value(
                    {
                        "id": "wamid.B",
                        "type": "image",
                        "image": {"id": "media-1", "mime_type": "image/jpeg", "caption": "foto"},
                    }
                )
            )
        )

        message = parsed.messages[0]
        assert message.media_id == "media-1"
        assert message.media_mime_type == "image/jpeg"
        assert message.media_caption == "foto"

    @pytest.mark.parametrize("reply_key", ["button_reply", "list_reply"])
    def test_interactive_reply(self, reply_key: str) -> None:
        parsed = parse_message(
            _payload(
                _value(
                    {
                        "id": "wamid.C",
                        "type": "interactive",
                        "interactive": {"type": reply_key, reply_key: {"id": "yes", "title": "Sim"}},
                        "context": {"id": "wamid.original"},
                    }
                )
            )
        )

        message = parsed.messages[0]
        assert message.interactive_type == reply_key
        assert message.interactive_reply_id == "yes"
        assert message.interactive_reply_title == "Sim"
        assert message.context_message_id == "wamid.original"

    def test_location_message(self) -> None:
        parsed = parse_message(
            _payload(
                _value(
                    {
                        "id": "wamid.D",
                        "type": "location",
                        "location": {"latitude": 0, "longitude": -46.6, "name": "Praça"},
                    }
                )
            )
        )

        message = parsed.messages[0]
        assert message.location_latitude == 0
        assert message.location_longitude == -46.6
        assert message.location_name == "Praça"

    def test_unknown_type_keeps_envelope(self) -> None:
        parsed = parse_message(_payload(_value({"id": "wamid.E", "type": "order", "order": {}})))

        assert parsed.messages[0].message_type == "order"
        assert parsed.messages[0].text is None

    def test_messages_without_id_are_skipped(self) -> None:
        parsed = parse_message(_payload(_value({"type": "text", "text": {"body": "x"}})))
        assert parsed.messages == []


class TestParseStatuses:
    def test_status_update(self) -> None:
        value = {
            "metadata": {"phone_number_id": "1234567890"},
            "statuses": [
                {"id": "wamid.A", "status": "delivered", "recipient_id": 5511988887777, "timestamp": "1"}
            ],
        }

        parsed = parse_message(_payload(value))

        assert parsed.is_status is True
        assert parsed.is_message is False
        status = parsed.statuses[0]
        assert status.status == "delivered"
        assert status.recipient_id == "5511988887777"


class TestAccountFiltering:
    def test_other_account_is_ignored(self) -> None:
        payload = _payload(_value({"id": "wamid.A", "type": "text", "text": {"body": "Oi"}}), "WABA_2")

        parsed = parse_message(payload, business_account_id="WABA_1")

        assert parsed.messages == []

    def test_client_uses_configured_account(self) -> None:
        client = WhatsAppCloudClient(
            settings=WhatsAppSettings(
                access_token="tok", phone_number_id="1", business_account_id="WABA_1"
            )
        )
        ours = _payload(_value({"id": "wamid.A", "type": "text", "text": {"body": "Oi"}}), "WABA_1")
        theirs = _payload(_value({"id": "wamid.B", "type": "text", "text": {"body": "Oi"}}), "WABA_2")

        assert len(client.parse_message(ours).messages) == 1
        assert client.parse_message(theirs).messages == []


class TestMalformedPayloads:
    @pytest.mark.parametrize("payload", [{}, {"entry": None}, {"entry": ["x"]}, "not a dict"])
    def test_returns_empty(self, payload: Any) -> None:
        parsed = parse_message(payload)
        assert parsed.messages == []
        assert parsed.statuses == []

    def test_models_are_frozen(self) -> None:
        parsed = parse_message(_payload(_value({"id": "wamid.A", "type": "text", "text": {"body": "Oi"}})))
        with pytest.raises(PydanticValidationError):
            parsed.messages[0].text = "changed"
