"""Parsing de webhooks inbound do WhatsApp."""

from whatsapp_cloud.webhook.extractor import parse_message
from whatsapp_cloud.webhook.models import InboundMessage, MessageStatus, ParsedWebhook

__all__ = ["InboundMessage", "MessageStatus", "ParsedWebhook", "parse_message"]
