"""Pytest fixtures for the relay endpoints."""

import pytest
from fastapi.testclient import TestClient

from src.api.main import create_app
from src.utils.config_loader import RelaySettings
from tests.fakes import FakeGateway, FakeNotifier


@pytest.fixture
def static_dir(tmp_path):
    root = tmp_path / "public"
    (root / "assets").mkdir(parents=True)
    (root / "index.html").write_text("<html><body>entry</body></html>", encoding="utf-8")
    (root / "assets" / "app.js").write_text("console.log('app');", encoding="utf-8")
    (tmp_path / "secret.txt").write_text("do not serve", encoding="utf-8")
    return root


@pytest.fixture
def settings(static_dir):
    return RelaySettings(
        paystack_public_key="pk_test_123",
        paystack_secret_key="sk_test_456",
        telegram_bot_token="bot-token",
        telegram_chat_id="C1",
        static_dir=static_dir,
    )


@pytest.fixture
def gateway():
    return FakeGateway()


@pytest.fixture
def notifier():
    return FakeNotifier()


@pytest.fixture
def make_client(settings):
    def _make(gateway=None, notifier=None, **overrides):
        cfg = settings.model_copy(update=overrides) if overrides else settings
        app = create_app(cfg, gateway=gateway or FakeGateway(), notifier=notifier or FakeNotifier())
        return TestClient(app)

    return _make


@pytest.fixture
def client(make_client, gateway, notifier):
    return make_client(gateway=gateway, notifier=notifier)
