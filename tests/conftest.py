"""Configuração do pytest e fixtures compartilhadas do cliente WhatsApp."""

import json
import sys
from collections.abc import Callable
from pathlib import Path

import httpx
import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from whatsapp_cloud.client import WhatsAppCloudClient  # noqa: E402
from whatsapp_cloud.config.settings import WhatsAppSettings  # noqa: E402

ACCESS_TOKEN = "test-token"
PHONE_NUMBER_ID = "1234567890"
BASE_URL = f"https://graph.facebook.com/v13.0/{PHONE_NUMBER_ID}"
API_ROOT = "https://graph.facebook.com/v13.0"


class RecordingHandler:
    """Handler para httpx.MockTransport que grava requests e responde por rota."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._routes: dict[tuple[str, str], Callable[[httpx.Request], httpx.Response]] = {}

    def on(
        self,
        method: str,
        url: str,
        response: httpx.Response | Callable[[httpx.Request], httpx.Response],
    ) -> None:
        handler = response if callable(response) else (lambda _request: response)
        self._routes[(method.upper(), url)] = handler

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        key = (request.method, str(request.url.copy_with(query=None)))
        handler = self._routes.get(key)
        if handler is None:
            return httpx.Response(404, json={"error": {"message": f"no route {key}"}})
        return handler(request)

    def json_bodies(self, url: str) -> list[dict]:
        return [
            json.loads(r.content)
            for r in self.requests
            if str(r.url.copy_with(query=None)) == url
        ]


@pytest.fixture
def settings() -> WhatsAppSettings:
    return WhatsAppSettings(access_token=ACCESS_TOKEN, phone_number_id=PHONE_NUMBER_ID)


@pytest.fixture
def handler() -> RecordingHandler:
    return RecordingHandler()


@pytest.fixture
def http_client(handler: RecordingHandler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


@pytest.fixture
def client(settings: WhatsAppSettings, http_client: httpx.AsyncClient) -> WhatsAppCloudClient:
    return WhatsAppCloudClient(settings=settings, http_client=http_client)


@pytest.fixture
def base_url() -> str:
    return BASE_URL


@pytest.fixture
def api_root() -> str:
    return API_ROOT
