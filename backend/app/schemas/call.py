from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class CallCreate(BaseModel):
    # Left untyped so the handler can tell a non-string apart from a bad format.
    number: Any = None


class CallCreated(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    call_sid: str = Field(alias="callSid")
    call_id: str | None = Field(default=None, alias="callId")


class HangupResult(BaseModel):
    success: bool = True


class CallError(BaseModel):
    success: bool = False
    error: str


class CallStatusEvent(BaseModel):
    """Status callback posted by Twilio; unknown fields are kept for logging."""

    model_config = ConfigDict(extra="allow")

    CallSid: str | None = None
    CallStatus: str | None = None
    From: str | None = None
    To: str | None = None
    Direction: str | None = None
    Timestamp: str | None = None
    SequenceNumber: str | None = None
    CallDuration: str | None = None
