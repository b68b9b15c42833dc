import logging
from typing import Any

from fastapi import APIRouter, Request, Response

from app.schemas.call import CallStatusEvent

router = APIRouter()
logger = logging.getLogger(__name__)


async def _read_payload(request: Request) -> dict[str, Any]:
    if "json" in request.headers.get("content-type", ""):
        data = await request.json()
        return data if isinstance(data, dict) else {"payload": data}
    return dict(await request.form())


@router.post("/twilio/status")
async def call_status(request: Request) -> Response:
    try:
        payload = await _read_payload(request)
        event = CallStatusEvent.model_validate(payload)
        logger.info(
            "call_status call_sid=%s status=%s from=%s to=%s payload=%s",
            event.CallSid,
            event.CallStatus,
            event.From,
            event.To,
            payload,
        )
    except Exception as exc:
        # Always acknowledged.
        logger.warning("call_status_ingest_failed error=%s", exc)
    return Response(status_code=200)
