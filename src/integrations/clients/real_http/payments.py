"""
Real Paystack HTTP Client.

Used when INTEGRATIONS_MODE is real/live (the default).
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional
from urllib.parse import quote

import httpx

from src.error_handler import TransportError
from src.integrations.contracts.payments import VerificationResult
from src.integrations.policy.response_wrappers import IntegrationResponseError, normalize_verification_response

logger = logging.getLogger(__name__)


class PaystackClient:
    def __init__(
        self,
        secret_key: str,
        base_url: str = "https://api.paystack.co",
        verify_path: str = "/transaction/verify",
        timeout_seconds: float = 20.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.secret_key = secret_key
        self.base_url = base_url.rstrip("/")
        self.verify_path = verify_path
        self.timeout_seconds = timeout_seconds
        self._transport = transport

    def _headers(self) -> Dict[str, str]:
        return {"Authorization": f"Bearer {self.secret_key}"}

    async def verify_transaction(self, reference: str) -> VerificationResult:
        """Look up one transaction by reference.

        Raises TransportError for network failures, non-2xx replies and bodies
        that are not a well-formed verification reply.
        """
        url = f"{self.base_url}{self.verify_path}/{quote(reference, safe='')}"
        try:
            async with httpx.AsyncClient(timeout=self.timeout_seconds, transport=self._transport) as client:
                response = await client.get(url, headers=self._headers())
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPStatusError as e:
            body = _response_detail(e.response)
            logger.error("Paystack verification returned %s: %s", e.response.status_code, body)
            raise TransportError(detail=body) from e
        except httpx.HTTPError as e:
            logger.error("Paystack verification request failed: %s", e)
            raise TransportError(detail=str(e)) from e
        except ValueError as e:
            logger.error("Paystack verification body is not JSON: %s", e)
            raise TransportError(detail=str(e)) from e

        try:
            result = normalize_verification_response(data)
        except IntegrationResponseError as e:
            logger.error("Paystack verification reply malformed: %s", e)
            raise TransportError(detail=e.payload) from e

        logger.info(
            "Paystack verification for %s: status=%s transaction_status=%s",
            reference,
            result.status,
            result.transaction_status,
        )
        return result


def _response_detail(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text[:500]
