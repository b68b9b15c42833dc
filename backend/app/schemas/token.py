from pydantic import BaseModel


class TokenRead(BaseModel):
    token: str
    identity: str


class TokenError(BaseModel):
    error: str
