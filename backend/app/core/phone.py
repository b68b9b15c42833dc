from __future__ import annotations

import re
from typing import Any


E164_PATTERN = re.compile(r"\+[1-9]\d{7,14}")


class PhoneNumberError(ValueError):
    """Base error for phone numbers rejected by the validator."""


class NotAStringError(PhoneNumberError):
    def __init__(self) -> None:
        super().__init__("Invalid payload: number must be a string")


class InvalidFormatError(PhoneNumberError):
    def __init__(self) -> None:
        super().__init__("Invalid E.164 format. Use +919876543210")


def validate_phone_number(raw: Any) -> str:
    """Return ``raw`` with surrounding whitespace trimmed if it is an E.164 number.

    Nothing inside the number is rewritten: spaces or dashes between digits
    make it invalid rather than being stripped.
    """
    if not isinstance(raw, str):
        raise NotAStringError()
    number = raw.strip()
    if not E164_PATTERN.fullmatch(number):
        raise InvalidFormatError()
    return number


def is_valid_phone_number(raw: Any) -> bool:
    try:
        validate_phone_number(raw)
    except PhoneNumberError:
        return False
    return True
