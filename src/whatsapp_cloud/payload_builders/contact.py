"""Builder para cartão de contato.

O conteúdo é fixo: um contato de exemplo da documentação Meta. Apenas o
destinatário vem do chamador.
"""

from __future__ import annotations

import copy
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from whatsapp_cloud.models import ContactMessage, ResolvedMedia

SAMPLE_CONTACT: dict[str, Any] = {
    "addresses": [
        {
            "street": "1 Hacker Way",
            "city": "Menlo Park",
            "state": "CA",
            "zip": "94025",
            "country": "United States",
            "country_code": "us",
            "type": "HOME",
        },
        {
            "street": "200 Jefferson Dr",
            "city": "Menlo Park",
            "state": "CA",
            "zip": "94025",
            "country": "United States",
            "country_code": "us",
            "type": "WORK",
        },
    ],
    "birthday": "2012-08-18",
    "emails": [
        {"email": "test@fb.com", "type": "WORK"},
        {"email": "test@whatsapp.com", "type": "HOME"},
    ],
    "name": {
        "formatted_name": "John Smith",
        "first_name": "John",
        "last_name": "Smith",
        "middle_name": "D.",
        "suffix": "Jr",
        "prefix": "Dr",
    },
    "org": {"company": "WhatsApp", "department": "Design", "title": "Manager"},
    "phones": [
        {"phone": "+1 (940) 555-1234", "type": "HOME"},
        {"phone": "+1 (650) 555-1234", "type": "WORK", "wa_id": "16505551234"},
    ],
    "urls": [
        {"url": "https://www.facebook.com", "type": "WORK"},
        {"url": "https://www.whatsapp.com", "type": "HOME"},
    ],
}


class ContactPayloadBuilder:
    """Builder para o cartão de contato de exemplo."""

    def build(self, message: ContactMessage, media: ResolvedMedia | None = None) -> dict[str, Any]:
        # cópia: SAMPLE_CONTACT não pode vazar para o chamador
        return {"contacts": [copy.deepcopy(SAMPLE_CONTACT)]}
