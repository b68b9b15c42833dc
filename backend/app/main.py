import logging
import sys

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import ValidationError

from app.api.routes import calls, status, token, twiml
from app.core.config import Settings, get_settings
from app.core.logging import configure_logging
from app.core.phone import NotAStringError
from app.schemas.call import CallError
from app.services.twilio_gateway import TwilioGateway

logger = logging.getLogger(__name__)

BANNER = "Hacker Call Backend (Twilio Connected)"


def create_app(settings: Settings | None = None, gateway: TwilioGateway | None = None) -> FastAPI:
    settings = settings or get_settings()
    app = FastAPI(title=settings.app_name)

    # One Twilio client for the life of the process, handed to handlers via deps.
    app.state.settings = settings
    app.state.gateway = gateway or TwilioGateway(settings)

    origins = settings.cors_origin_list
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials="*" not in origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def invalid_payload(request: Request, exc: RequestValidationError) -> JSONResponse:
        # Non-object bodies carry no string number.
        logger.warning("invalid_payload path=%s errors=%s", request.url.path, exc.errors())
        return JSONResponse(status_code=400, content=CallError(error=str(NotAStringError())).model_dump())

    @app.exception_handler(Exception)
    async def unhandled_error(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("unhandled_error path=%s", request.url.path)
        return JSONResponse(status_code=500, content={"success": False, "error": "Internal server error"})

    # Routers
    app.include_router(calls.router, tags=["calls"])
    app.include_router(twiml.router, tags=["twiml"])
    app.include_router(status.router, tags=["twilio"])
    app.include_router(token.router, tags=["token"])

    @app.get("/", response_class=PlainTextResponse)
    def root() -> str:
        return BANNER

    @app.get("/user")
    def user() -> dict:
        return {"user": "Hacker Terminal"}

    @app.get("/healthz")
    def healthz() -> dict:
        return {"status": "ok"}

    return app


def main() -> None:
    import uvicorn

    configure_logging()
    try:
        settings = get_settings()
    except ValidationError as exc:
        missing = ", ".join(str(err["loc"][0]).upper() for err in exc.errors())
        logger.error("Missing or invalid Twilio environment variables: %s", missing)
        logger.error("Required: TWILIO_ACCOUNT_SID, TWILIO_AUTH_TOKEN, TWILIO_FROM_NUMBER")
        sys.exit(1)

    configure_logging(settings.log_level)
    app = create_app(settings)
    logger.info("Hacker Call Server running on port %s", settings.port)
    logger.info("Webhook base: %s", settings.webhook_base_url)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
