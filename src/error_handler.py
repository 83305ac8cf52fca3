"""Error taxonomy and JSON error shaping for the relay endpoints."""
from typing import Any, Dict, Optional
import logging

logger = logging.getLogger(__name__)


class RelayError(Exception):
    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: Optional[str] = None, *, detail: Any = None) -> None:
        super().__init__(message or self.default_message)
        self.message = message or self.default_message
        self.detail = detail

    def to_payload(self) -> Dict[str, Any]:
        return {"status": False, "message": self.message}


class ValidationError(RelayError):
    """Required input fields are missing."""

    status_code = 400
    default_message = "Missing required fields"


class GatewayDeclinedError(RelayError):
    """The gateway answered, but did not report a successful transaction."""

    status_code = 400
    default_message = "Payment verification failed at gateway"


class TransportError(RelayError):
    """Network failure, non-2xx reply or malformed body from an external call."""

    status_code = 500
    default_message = "Internal server error during verification"


class ErrorHandler:
    def handle_exception(self, exc: Exception, context: Dict[str, Any] = None) -> Dict[str, Any]:
        logger.error("Unhandled exception in relay: %s (context=%s)", exc, context or {}, exc_info=exc)
        return {
            "status": False,
            "message": "An internal error occurred while processing your request. Please try again later.",
        }
