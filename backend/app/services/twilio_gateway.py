from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from urllib.parse import urlencode
from uuid import uuid4

from twilio.base.exceptions import TwilioRestException
from twilio.jwt.access_token import AccessToken
from twilio.jwt.access_token.grants import VoiceGrant
from twilio.rest import Client

from app.core.config import Settings


logger = logging.getLogger(__name__)

STATUS_CALLBACK_EVENTS = ["initiated", "ringing", "answered", "completed"]
IDENTITY_PREFIX = "hacker_"


class ExternalAPIError(Exception):
    """Twilio rejected or failed a request made on behalf of a handler."""


class TokenConfigError(ExternalAPIError):
    pass


@dataclass
class PlacedCall:
    call_sid: str
    call_id: str


@dataclass
class VoiceToken:
    identity: str
    token: str


def _error_message(exc: Exception) -> str:
    if isinstance(exc, TwilioRestException):
        return exc.msg or f"Twilio request failed with status {exc.status}"
    return str(exc) or exc.__class__.__name__


def new_identity() -> str:
    return f"{IDENTITY_PREFIX}{random.randint(0, 99998)}"


class TwilioGateway:
    """Single long-lived wrapper around the Twilio REST client and token minting."""

    def __init__(self, settings: Settings, client: Client | None = None) -> None:
        self._settings = settings
        self._client = client or Client(settings.twilio_account_sid, settings.twilio_auth_token)

    def twiml_url(self, number: str, call_id: str) -> str:
        query = urlencode({"to": number, "callId": call_id})
        return f"{self._settings.webhook_base_url}/twiml?{query}"

    def status_callback_url(self) -> str:
        return f"{self._settings.webhook_base_url}/twilio/status"

    def place_call(self, number: str) -> PlacedCall:
        call_id = uuid4().hex
        try:
            call = self._client.calls.create(
                to=number,
                from_=self._settings.twilio_from_number,
                url=self.twiml_url(number, call_id),
                method="GET",
                status_callback=self.status_callback_url(),
                status_callback_method="POST",
                status_callback_event=STATUS_CALLBACK_EVENTS,
            )
        except Exception as exc:
            logger.error("call_create_failed to=%s call_id=%s error=%s", number, call_id, _error_message(exc))
            raise ExternalAPIError(_error_message(exc)) from exc
        logger.info("call_created call_sid=%s call_id=%s to=%s", call.sid, call_id, number)
        return PlacedCall(call_sid=call.sid, call_id=call_id)

    def end_call(self, call_sid: str) -> None:
        try:
            self._client.calls(call_sid).update(status="completed")
        except Exception as exc:
            logger.error("call_hangup_failed call_sid=%s error=%s", call_sid, _error_message(exc))
            raise ExternalAPIError(_error_message(exc)) from exc
        logger.info("call_hangup call_sid=%s", call_sid)

    def mint_token(self, identity: str | None = None) -> VoiceToken:
        settings = self._settings
        if not settings.token_configured:
            raise TokenConfigError(
                "TWILIO_API_KEY_SID, TWILIO_API_KEY_SECRET and TWILIO_TWIML_APP_SID are required for tokens"
            )
        identity = identity or new_identity()
        try:
            token = AccessToken(
                settings.twilio_account_sid,
                settings.twilio_api_key_sid,
                settings.twilio_api_key_secret,
                identity=identity,
            )
            token.add_grant(
                VoiceGrant(
                    outgoing_application_sid=settings.twilio_twiml_app_sid,
                    incoming_allow=False,
                )
            )
            encoded = token.to_jwt()
        except Exception as exc:
            raise ExternalAPIError(str(exc)) from exc
        if isinstance(encoded, bytes):
            encoded = encoded.decode("utf-8")
        logger.info("token_issued identity=%s", identity)
        return VoiceToken(identity=identity, token=encoded)
