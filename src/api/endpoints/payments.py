import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError

from src.api.dependencies import get_gateway, get_notifier, get_settings, read_body
from src.error_handler import GatewayDeclinedError, TransportError, ValidationError
from src.integrations.contracts.notifications import NotificationResult, payment_received_text
from src.integrations.contracts.payments import VerificationResult, format_amount, missing_fields
from src.utils.config_loader import RelaySettings

logger = logging.getLogger(__name__)

api = APIRouter()
payments_api = api


class VerifyPaymentRequest(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True, str_strip_whitespace=True)

    reference: str
    email: str
    name: Optional[str] = None
    # Accepted from the widget in any shape; the gateway amount is authoritative.
    amount: Optional[Any] = None


@api.get("/config", tags=["Payments"])
async def get_config(settings: RelaySettings = Depends(get_settings)):
    return {"key": settings.paystack_public_key}


@api.post("/verify", tags=["Payments"])
async def verify_payment(
    payload: Dict[str, Any] = Depends(read_body),
    settings: RelaySettings = Depends(get_settings),
    gateway=Depends(get_gateway),
    notifier=Depends(get_notifier),
):
    missing = missing_fields(payload, "reference", "email")
    if missing:
        logger.warning("Verification request missing fields: %s", missing)
        raise ValidationError("Missing transaction reference or email", detail=missing)

    try:
        request = VerifyPaymentRequest(**payload)
    except PydanticValidationError as e:
        raise ValidationError("Invalid verification request", detail=e.errors()) from e

    result = await _verify_with_gateway(gateway, request.reference)

    if not result.is_successful:
        logger.warning(
            "Gateway declined %s: status=%s transaction_status=%s",
            request.reference,
            result.status,
            result.transaction_status,
        )
        raise GatewayDeclinedError(detail=result.raw)

    text = payment_received_text(
        identifier=settings.notification_identifier,
        name=request.name,
        email=request.email,
        amount=format_amount(result.display_amount),
        reference=request.reference,
    )
    notification = await _notify_best_effort(notifier, text, settings.telegram_chat_id)
    if not notification.ok:
        # Payment is confirmed at this point; a lost notification only gets logged.
        logger.warning("Payment %s verified but notification failed: %s", request.reference, notification.error)

    return {"status": True, "message": "Payment verified and notification sent"}


async def _verify_with_gateway(gateway, reference: str) -> VerificationResult:
    try:
        return await gateway.verify_transaction(reference)
    except TransportError:
        raise
    except Exception as e:
        logger.error("Verification error for %s: %s", reference, e, exc_info=True)
        raise TransportError(detail=str(e)) from e


async def _notify_best_effort(notifier, text: str, chat_id: str) -> NotificationResult:
    try:
        return await notifier.notify(text, chat_id)
    except Exception as e:
        logger.error("Notifier raised unexpectedly: %s", e, exc_info=True)
        return NotificationResult.failure(type(e).__name__, detail=str(e))
