from app.schemas.call import CallCreate, CallCreated, CallError, CallStatusEvent, HangupResult
from app.schemas.token import TokenError, TokenRead

__all__ = [
    "CallCreate",
    "CallCreated",
    "CallError",
    "CallStatusEvent",
    "HangupResult",
    "TokenError",
    "TokenRead",
]
