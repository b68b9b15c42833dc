import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.api.deps import get_gateway
from app.core.phone import PhoneNumberError, validate_phone_number
from app.schemas.call import CallCreate, CallCreated, CallError, HangupResult
from app.services.twilio_gateway import ExternalAPIError, TwilioGateway

router = APIRouter()
logger = logging.getLogger(__name__)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=CallError(error=message).model_dump())


@router.post("/call")
def place_call(
    payload: CallCreate | None = None,
    gateway: TwilioGateway = Depends(get_gateway),
) -> JSONResponse:
    raw_number = payload.number if payload else None
    logger.info("call_requested raw_number=%r", raw_number)

    try:
        number = validate_phone_number(raw_number)
    except PhoneNumberError as exc:
        logger.warning("call_rejected raw_number=%r error=%s", raw_number, exc)
        return _error(400, str(exc))

    try:
        placed = gateway.place_call(number)
    except ExternalAPIError as exc:
        return _error(500, str(exc))

    body = CallCreated(callSid=placed.call_sid, callId=placed.call_id)
    return JSONResponse(content=body.model_dump(by_alias=True, exclude_none=True))


@router.delete("/hangup/{call_sid}")
def hangup_call(call_sid: str, gateway: TwilioGateway = Depends(get_gateway)) -> JSONResponse:
    call_sid = call_sid.strip()
    if not call_sid:
        return _error(400, "callSid is required")

    try:
        gateway.end_call(call_sid)
    except ExternalAPIError as exc:
        return _error(500, str(exc))

    return JSONResponse(content=HangupResult().model_dump())
