from functools import lru_cache
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


ENV_PATH = Path(__file__).resolve().parents[2] / ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=str(ENV_PATH), extra="ignore")

    app_name: str = "Hacker Call Backend"

    # Twilio, must come from .env
    twilio_account_sid: str
    twilio_auth_token: str
    twilio_from_number: str

    # Browser voice tokens
    twilio_api_key_sid: str | None = None
    twilio_api_key_secret: str | None = None
    twilio_twiml_app_sid: str | None = None

    # Externally reachable base URL Twilio calls back into
    webhook_base_url: str = "http://localhost:3000"

    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"
    cors_origins: str = "*"

    @field_validator("webhook_base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.strip().rstrip("/")

    @property
    def cors_origin_list(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    @property
    def token_configured(self) -> bool:
        return bool(self.twilio_api_key_sid and self.twilio_api_key_secret and self.twilio_twiml_app_sid)


@lru_cache
def get_settings() -> Settings:
    return Settings()
