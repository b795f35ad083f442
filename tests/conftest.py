"""Pytest fixtures for the contract gateway tests."""

from typing import Any, Callable, List, Optional

import httpx
import pytest
from fastapi.testclient import TestClient

from src.integrations.clients.real_http.webhook import WebhookClient
from src.integrations.policy.contract_gateway import ContractGateway
from src.utils.config_loader import WebhookConfig

WEBHOOK_URL = "https://hooks.example.test/webhook/consultar-cotizacion"


class StubWebhook:
    """Stands in for the automation webhook; records every request it receives."""

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.responder: Callable[[httpx.Request], httpx.Response] = lambda request: httpx.Response(200, json={})

    @property
    def call_count(self) -> int:
        return len(self.requests)

    def reply_json(self, payload: Any, status_code: int = 200) -> None:
        self.responder = lambda request: httpx.Response(status_code, json=payload)

    def reply_raw(self, content: bytes, status_code: int = 200, content_type: Optional[str] = None) -> None:
        headers = {"content-type": content_type} if content_type else {}
        self.responder = lambda request: httpx.Response(status_code, content=content, headers=headers)

    def raise_error(self, exc_type: type, message: str = "boom") -> None:
        def _raise(request):
            raise exc_type(message, request=request)

        self.responder = _raise

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.responder(request)


@pytest.fixture
def stub_webhook():
    return StubWebhook()


@pytest.fixture
def webhook_config():
    return WebhookConfig(url=WEBHOOK_URL, fetch_timeout_seconds=10, submit_timeout_seconds=15)


@pytest.fixture
def webhook_client(stub_webhook, webhook_config):
    return WebhookClient(webhook_config, transport=httpx.MockTransport(stub_webhook.handler))


@pytest.fixture
def gateway(webhook_client):
    return ContractGateway(webhook_client)


@pytest.fixture
def client(gateway):
    """TestClient with the gateway dependency pointed at the stub webhook."""
    from src.api.dependencies import get_gateway
    from src.api.main import app

    app.dependency_overrides[get_gateway] = lambda: gateway
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
