"""
FastAPI application - Main entry point
"""

from dotenv import load_dotenv

load_dotenv()

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from src.api.endpoints.contact import router as contact_router
from src.api.endpoints.payments import payments_api
from src.api.static import register_static
from src.error_handler import ErrorHandler, RelayError
from src.integrations.clients.mocks.payments import MockPaystackClient
from src.integrations.clients.real_http.payments import PaystackClient
from src.integrations.telegram.telegram_notifier import TelegramNotifier
from src.utils.config_loader import RelaySettings, load_settings

# Setup logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

error_handler = ErrorHandler()


# ============================================================================
# DEPENDENCY INJECTION
# ============================================================================


def build_gateway(settings: RelaySettings):
    """The mock vs real gateway decision happens here and nowhere else."""
    if settings.use_mock_gateway:
        logger.warning("INTEGRATIONS_MODE=%s: using mock Paystack client", settings.integrations_mode)
        return MockPaystackClient()
    return PaystackClient(
        secret_key=settings.paystack_secret_key,
        base_url=settings.paystack_base_url,
        timeout_seconds=settings.http_timeout_seconds,
    )


def build_notifier(settings: RelaySettings) -> TelegramNotifier:
    return TelegramNotifier(
        token=settings.telegram_bot_token,
        chat_id=settings.telegram_chat_id,
        api_url=settings.telegram_api_url,
        timeout_seconds=settings.http_timeout_seconds,
    )


def create_app(settings: Optional[RelaySettings] = None, gateway=None, notifier=None) -> FastAPI:
    settings = settings or load_settings()
    logging.getLogger().setLevel(settings.log_level)

    app = FastAPI(
        title="Payment & Contact Relay API",
        description="Verifies Paystack payments and relays notifications to Telegram",
        version="1.0.0",
    )
    app.state.settings = settings
    app.state.gateway = gateway if gateway is not None else build_gateway(settings)
    app.state.notifier = notifier if notifier is not None else build_notifier(settings)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.frontend_url],
        allow_methods=["GET", "POST"],
        allow_headers=["Content-Type", "Authorization"],
    )

    @app.exception_handler(RelayError)
    async def relay_error_handler(request: Request, exc: RelayError):
        return JSONResponse(status_code=exc.status_code, content=exc.to_payload())

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        payload = error_handler.handle_exception(exc, context={"path": request.url.path})
        return JSONResponse(status_code=500, content=payload)

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    app.include_router(payments_api, prefix="/api")
    app.include_router(contact_router, prefix="/api")

    # Catch-all, so it goes last
    register_static(app, settings.static_dir)

    return app


app = create_app()
