import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError

from src.api.dependencies import get_notifier, get_settings, read_body
from src.error_handler import ValidationError
from src.integrations.contracts.notifications import NotificationResult, contact_inquiry_text
from src.integrations.contracts.payments import missing_fields
from src.utils.config_loader import RelaySettings

logger = logging.getLogger(__name__)

router = APIRouter()


class ContactRequest(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    name: str
    email: str
    message: str


@router.post("/contact", tags=["Contact"])
async def contact(
    payload: Dict[str, Any] = Depends(read_body),
    settings: RelaySettings = Depends(get_settings),
    notifier=Depends(get_notifier),
):
    """
    Relay a contact-form submission to the operator chat.
    Here the notification is the whole point, so a failed send is a 500.
    """
    missing = missing_fields(payload, "name", "email", "message")
    if missing:
        raise ValidationError("All fields are required", detail=missing)

    try:
        form = ContactRequest(**payload)
    except PydanticValidationError as e:
        raise ValidationError("All fields are required", detail=e.errors()) from e

    text = contact_inquiry_text(name=form.name, email=form.email, message=form.message)
    try:
        result = await notifier.notify(text, settings.telegram_chat_id)
    except Exception as e:
        logger.error("Notifier raised unexpectedly: %s", e, exc_info=True)
        result = NotificationResult.failure(type(e).__name__, detail=str(e))

    if not result.ok:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"status": False, "message": "Failed to send message. Please try again later."},
        )

    logger.info("Contact form notification sent")
    return {"status": True, "message": "Message sent successfully"}
