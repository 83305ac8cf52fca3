import logging
from typing import Any, Optional

import httpx

from src.integrations.contracts.notifications import NotificationMessage, NotificationResult

logger = logging.getLogger(__name__)


class TelegramNotifier:
    def __init__(
        self,
        token: str,
        chat_id: str,
        api_url: str = "https://api.telegram.org",
        timeout_seconds: float = 20.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.token = token
        self.chat_id = chat_id
        self.api_url = api_url.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self._transport = transport

    def _send_url(self) -> str:
        return f"{self.api_url}/bot{self.token}/sendMessage"

    async def notify(self, text: str, chat_id: Optional[str] = None) -> NotificationResult:
        """
        Post one message to the chat. Never raises; a failed send comes back
        as NotificationResult(ok=False) and the caller decides what it means.
        """
        message = NotificationMessage(text=text, chat_id=chat_id or self.chat_id)
        try:
            async with httpx.AsyncClient(timeout=self.timeout_seconds, transport=self._transport) as client:
                response = await client.post(self._send_url(), json=message.to_payload())
                response.raise_for_status()
                data = response.json() if response.content else {}
        except httpx.HTTPStatusError as e:
            detail = self._extract_telegram_error(e.response)
            logger.error("Telegram notification failed: %s", detail)
            return NotificationResult.failure(f"telegram_http_{e.response.status_code}", detail=detail)
        except (httpx.HTTPError, ValueError) as e:
            logger.error("Telegram notification failed: %s", e)
            return NotificationResult.failure(type(e).__name__, detail=str(e))

        if isinstance(data, dict) and data.get("ok") is False:
            logger.error("Telegram notification failed: %s", data)
            return NotificationResult.failure(str(data.get("description", "telegram_not_ok")), detail=data)

        logger.info("Telegram notification sent to chat %s", message.chat_id)
        return NotificationResult.success(detail=data)

    @staticmethod
    def _extract_telegram_error(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError:
            return response.text[:500]
