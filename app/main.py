import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.api.v1.chat import router as chat_router
from app.api.v1.reservations import router as reservations_router
from app.api.v1.schemas import HealthSchema
from app.core.config import Settings, settings as default_settings
from app.wiring.dependencies import Container, build_container

LOG_CONTEXT_KEYS = ("conversation_id", "step", "intent", "reservation_id", "reason", "error")


class ContextFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        extras = []
        for key in LOG_CONTEXT_KEYS:
            value = getattr(record, key, None)
            if value not in (None, ""):
                extras.append(f"{key}={value}")
        base = super().format(record)
        if extras:
            return f"{base} | " + " ".join(extras)
        return base


def configure_logging(level: str) -> None:
    handler = logging.StreamHandler()
    handler.setFormatter(ContextFormatter("%(levelname)s:%(name)s:%(message)s"))

    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    root.handlers.clear()
    root.addHandler(handler)


def create_app(settings: Settings | None = None, container: Container | None = None) -> FastAPI:
    """
    Build the application with its own stores and use cases.

    Raises ValueError when the NLU provider is misconfigured (e.g. NLU_PROVIDER=openai
    without OPENAI_API_KEY), so the server refuses to start.
    """
    settings = settings or (container.settings if container else default_settings)
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(title="Restaurant Reservation Assistant", version="1.0.0")
    app.state.container = container or build_container(settings)

    app.include_router(reservations_router, prefix="/api/reservations", tags=["reservations"])
    app.include_router(chat_router, prefix="/api/chat", tags=["chat"])

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": "Invalid request body"})

    @app.get("/health", response_model=HealthSchema)
    def health() -> HealthSchema:
        return HealthSchema(ok=True, message="API is running")

    logging.getLogger(__name__).info("Application ready", extra={"reason": f"env={settings.ENV}"})
    return app


def run() -> None:
    uvicorn.run(
        "app.main:create_app",
        factory=True,
        host=default_settings.HOST,
        port=default_settings.PORT,
        log_level=default_settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    run()
