from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, ValidationError

from src.integrations.contracts.payments import VerificationResult


class IntegrationResponseError(ValueError):
    def __init__(self, message: str, *, payload: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.payload = payload or {}


class GatewayTransactionModel(BaseModel):
    status: str = ""
    amount: Optional[int] = None
    reference: Optional[str] = None
    currency: Optional[str] = None


class GatewayVerificationModel(BaseModel):
    status: bool = Field(..., strict=True)
    message: Optional[str] = None
    data: Optional[GatewayTransactionModel] = None


def normalize_verification_response(raw: Any) -> VerificationResult:
    """Turn a Paystack /transaction/verify body into a VerificationResult.

    Only a declined reply (``status`` false) may come back without ``data``;
    a reply that claims success must carry an amount.
    """
    if not isinstance(raw, dict):
        raise IntegrationResponseError(f"Expected a JSON object from gateway, got {type(raw).__name__}.")

    model = _build_model(GatewayVerificationModel, raw, raw)
    if model.status and model.data is None:
        raise IntegrationResponseError("Gateway reported status=true without transaction data.", payload=raw)
    transaction = model.data or GatewayTransactionModel()

    if model.status and transaction.status == "success":
        if transaction.amount is None:
            raise IntegrationResponseError("Gateway reported success without an amount.", payload=raw)
        if transaction.amount < 0:
            raise IntegrationResponseError(f"Gateway amount must be >= 0; got {transaction.amount}.", payload=raw)

    return VerificationResult(
        status=model.status,
        transaction_status=transaction.status,
        amount=transaction.amount or 0,
        reference=transaction.reference,
        currency=transaction.currency,
        message=model.message,
        raw=raw,
    )


def _build_model(model_type, payload: Dict[str, Any], raw: Dict[str, Any]):
    try:
        return model_type(**payload)
    except ValidationError as exc:
        raise IntegrationResponseError(f"Response validation failed: {exc}", payload=raw) from exc
