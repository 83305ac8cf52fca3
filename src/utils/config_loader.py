"""
Configuration loader for the relay service
"""

import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from dotenv import load_dotenv
import logging

logger = logging.getLogger(__name__)

DEFAULT_STATIC_DIR = Path(__file__).parent.parent.parent / "public"

# Environment variable -> settings field
_ENV_FIELDS = {
    "PORT": "port",
    "FRONTEND_URL": "frontend_url",
    "PAYSTACK_PUBLIC_KEY": "paystack_public_key",
    "PAYSTACK_SECRET_KEY": "paystack_secret_key",
    "PAYSTACK_BASE_URL": "paystack_base_url",
    "TELEGRAM_BOT_TOKEN": "telegram_bot_token",
    "TELEGRAM_CHAT_ID": "telegram_chat_id",
    "TELEGRAM_API_URL": "telegram_api_url",
    "NOTIFICATION_IDENTIFIER": "notification_identifier",
    "STATIC_DIR": "static_dir",
    "HTTP_TIMEOUT_SECONDS": "http_timeout_seconds",
    "INTEGRATIONS_MODE": "integrations_mode",
    "LOG_LEVEL": "log_level",
}


class RelaySettings(BaseModel):
    """Process-wide settings, read once at startup and never mutated"""

    model_config = ConfigDict(frozen=True)

    port: int = Field(default=3000, ge=1, le=65535)
    frontend_url: str = "*"
    paystack_public_key: Optional[str] = None
    paystack_secret_key: str = ""
    paystack_base_url: str = "https://api.paystack.co"
    telegram_bot_token: str = ""
    telegram_chat_id: str = ""
    telegram_api_url: str = "https://api.telegram.org"
    notification_identifier: str = "PAYMENT_RECEIVED"
    static_dir: Path = DEFAULT_STATIC_DIR
    http_timeout_seconds: float = Field(default=20.0, gt=0)
    integrations_mode: str = "real"
    log_level: str = "INFO"

    @field_validator("integrations_mode", "log_level")
    @classmethod
    def _normalize_keyword(cls, value: str) -> str:
        return value.strip()

    @field_validator("integrations_mode")
    @classmethod
    def _check_mode(cls, value: str) -> str:
        mode = value.lower()
        if mode not in {"real", "live", "mock", "test"}:
            raise ValueError(f"Unsupported INTEGRATIONS_MODE '{value}'")
        return mode

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        level = value.upper() or "INFO"
        if level not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}:
            raise ValueError(f"Unsupported LOG_LEVEL '{value}'")
        return level

    @property
    def use_mock_gateway(self) -> bool:
        return self.integrations_mode in {"mock", "test"}


def load_settings(environ: Optional[Mapping[str, str]] = None, dotenv_path: Optional[Path] = None) -> RelaySettings:
    """
    Build validated settings from the process environment

    Args:
        environ: Mapping to read from. Defaults to os.environ after .env is loaded
        dotenv_path: Optional explicit .env file

    Returns:
        Frozen RelaySettings object

    Raises:
        ValidationError: If a variable has an invalid value (e.g. non-numeric PORT)
    """
    if environ is None:
        load_dotenv(dotenv_path)
        environ = os.environ

    values: Dict[str, Any] = {}
    for env_name, field_name in _ENV_FIELDS.items():
        raw = environ.get(env_name)
        if raw is None or not raw.strip():
            continue
        values[field_name] = raw.strip()

    try:
        settings = RelaySettings(**values)
    except ValidationError as e:
        logger.error(f"Settings validation failed: {e}")
        raise

    logger.info(
        "Settings loaded: port=%s mode=%s static_dir=%s",
        settings.port,
        settings.integrations_mode,
        settings.static_dir,
    )
    return settings
