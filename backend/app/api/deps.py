from fastapi import Request

from app.core.config import Settings
from app.services.twilio_gateway import TwilioGateway


def get_gateway(request: Request) -> TwilioGateway:
    return request.app.state.gateway


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings
