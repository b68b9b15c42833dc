import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.api.deps import get_gateway
from app.schemas.token import TokenError, TokenRead
from app.services.twilio_gateway import ExternalAPIError, TwilioGateway

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/token", response_model=TokenRead)
def issue_token(gateway: TwilioGateway = Depends(get_gateway)) -> JSONResponse:
    try:
        voice_token = gateway.mint_token()
    except ExternalAPIError as exc:
        logger.error("token_create_failed error=%s", exc)
        return JSONResponse(status_code=500, content=TokenError(error="Failed to create token").model_dump())
    return JSONResponse(content=TokenRead(token=voice_token.token, identity=voice_token.identity).model_dump())
