import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings, get_settings
from app.main import app
from app.models.response import SendResult
from app.routes import quote_router as quote_routes


def make_settings(**overrides) -> Settings:
    values = {
        "MJ_API_KEY": "public-key",
        "MJ_API_SECRET": "secret-key",
        "MAIL_FROM_EMAIL": "no-reply@mrclean.test",
        "MAIL_FROM_NAME": "MrClean",
        "RECIPIENT_EMAIL": "devis@mrclean.test",
        "REPLY_TO": "contact@mrclean.test",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def settings():
    return make_settings()


@pytest.fixture
def client(settings):
    app.dependency_overrides[get_settings] = lambda: settings
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


class FakeSender:
    """Stands in for the Mailjet call and records what would have been sent."""

    def __init__(self, result: SendResult):
        self.result = result
        self.calls = []

    async def __call__(self, payload, settings, client=None):
        self.calls.append(payload)
        return self.result


@pytest.fixture
def sender(monkeypatch):
    fake = FakeSender(SendResult(ok=True))
    monkeypatch.setattr(quote_routes, "send_mailjet_message", fake)
    return fake
