import json
import logging
from typing import Any, Dict
from urllib.parse import parse_qs

from fastapi import Request

from src.error_handler import ValidationError
from src.utils.config_loader import RelaySettings

logger = logging.getLogger(__name__)

_FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


def get_settings(request: Request) -> RelaySettings:
    return request.app.state.settings


def get_gateway(request: Request):
    return request.app.state.gateway


def get_notifier(request: Request):
    return request.app.state.notifier


async def read_body(request: Request) -> Dict[str, Any]:
    """
    Accept either a JSON object or a urlencoded form and return it as a dict.
    An empty body reads as {} so the handler reports the missing fields.
    """
    raw_body = await request.body()
    if not raw_body.strip():
        return {}

    content_type = request.headers.get("content-type", "").split(";")[0].strip().lower()
    if content_type == _FORM_CONTENT_TYPE:
        parsed = parse_qs(raw_body.decode("utf-8", errors="replace"))
        # Flatten: {'email': ['a@b.com']} -> {'email': 'a@b.com'}
        return {k: v[0] for k, v in parsed.items() if v}

    try:
        payload = json.loads(raw_body)
    except (json.JSONDecodeError, UnicodeDecodeError):
        logger.warning("Request body is not valid JSON: %s", raw_body[:200])
        raise ValidationError("Request body must be valid JSON")

    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object")
    return payload
