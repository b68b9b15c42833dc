from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.main import create_app
from app.services.twilio_gateway import ExternalAPIError, PlacedCall, VoiceToken


class FakeGateway:
    def __init__(self) -> None:
        self.placed: list[str] = []
        self.ended: list[str] = []
        self.call_sid = "CA123"
        self.error: str | None = None

    def place_call(self, number: str) -> PlacedCall:
        if self.error:
            raise ExternalAPIError(self.error)
        self.placed.append(number)
        return PlacedCall(call_sid=self.call_sid, call_id="local-1")

    def end_call(self, call_sid: str) -> None:
        if self.error:
            raise ExternalAPIError(self.error)
        self.ended.append(call_sid)

    def mint_token(self, identity: str | None = None) -> VoiceToken:
        if self.error:
            raise ExternalAPIError(self.error)
        return VoiceToken(identity=identity or "hacker_42", token="header.payload.signature")


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        twilio_account_sid="AC" + "a" * 32,
        twilio_auth_token="auth-token",
        twilio_from_number="+15005550006",
        twilio_api_key_sid="SK" + "b" * 32,
        twilio_api_key_secret="api-secret-0123456789abcdef0123456789",
        twilio_twiml_app_sid="AP" + "c" * 32,
        webhook_base_url="https://hooks.example.test/",
    )


@pytest.fixture
def gateway() -> FakeGateway:
    return FakeGateway()


@pytest.fixture
def client(settings: Settings, gateway: FakeGateway) -> TestClient:
    return TestClient(create_app(settings=settings, gateway=gateway))
