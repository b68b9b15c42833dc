import logging

from fastapi import APIRouter, Depends, Form, Query, Response

from app.api.deps import get_app_settings
from app.core.config import Settings
from app.core.phone import PhoneNumberError, validate_phone_number
from app.core.twiml import dial_number, say_and_hangup

router = APIRouter()
logger = logging.getLogger(__name__)

NO_NUMBER_MESSAGE = "No number provided, cannot place call."
BAD_NUMBER_MESSAGE = "The number provided is not valid, cannot place call."


def _bridge_twiml(to: str | None, call_id: str | None, settings: Settings) -> Response:
    # Always a 200 with a document, even for bad input.
    if not to:
        logger.warning("twiml_missing_number call_id=%s", call_id)
        twiml = say_and_hangup(NO_NUMBER_MESSAGE)
    else:
        try:
            number = validate_phone_number(to)
        except PhoneNumberError:
            logger.warning("twiml_invalid_number to=%r call_id=%s", to, call_id)
            twiml = say_and_hangup(BAD_NUMBER_MESSAGE)
        else:
            logger.info("twiml_dial to=%s call_id=%s", number, call_id)
            twiml = dial_number(number, caller_id=settings.twilio_from_number)
    return Response(content=twiml, media_type="application/xml")


@router.get("/twiml")
def twiml_for_call(
    to: str | None = Query(None),
    call_id: str | None = Query(None, alias="callId"),
    settings: Settings = Depends(get_app_settings),
) -> Response:
    """TwiML for calls placed through /call.

    The leading `+` of `to` must arrive percent-encoded (`%2B`); a bare `+`
    in a query string decodes to a space and the number is rejected.
    """
    return _bridge_twiml(to, call_id, settings)


@router.post("/twiml")
def twiml_for_client(
    To: str | None = Form(None),
    CallSid: str | None = Form(None),
    settings: Settings = Depends(get_app_settings),
) -> Response:
    return _bridge_twiml(To, CallSid, settings)
