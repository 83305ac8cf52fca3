"""
Mock Paystack Client.

Purpose:
- Stands in for the real gateway during local frontend work
- Does NOT make any network calls
- Returns deterministic verification replies

Behavior:
- references starting with "fail" are declined at the gateway
- references starting with "error" raise TransportError
- anything else verifies as a successful payment of `default_amount` kobo

Swap:
Selected in src/api/main.py when INTEGRATIONS_MODE is mock/test.
"""

import logging

from src.error_handler import TransportError
from src.integrations.contracts.payments import VerificationResult
from src.integrations.policy.response_wrappers import normalize_verification_response

logger = logging.getLogger(__name__)


class MockPaystackClient:
    def __init__(self, default_amount: int = 500000, currency: str = "NGN") -> None:
        self.default_amount = default_amount
        self.currency = currency

    async def verify_transaction(self, reference: str) -> VerificationResult:
        key = reference.strip().lower()
        logger.info("Mock gateway verifying reference %s", reference)

        if key.startswith("error"):
            raise TransportError(detail={"mock": True, "reference": reference})

        if key.startswith("fail"):
            raw = {
                "status": True,
                "message": "Verification successful",
                "data": {"status": "failed", "amount": self.default_amount, "reference": reference, "currency": self.currency},
            }
        else:
            raw = {
                "status": True,
                "message": "Verification successful",
                "data": {"status": "success", "amount": self.default_amount, "reference": reference, "currency": self.currency},
            }
        return normalize_verification_response(raw)
