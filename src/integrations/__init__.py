"""
Integrations layer.
This package contains all code used to communicate with external systems:
- the payment gateway (Paystack transaction verification)
- the operator notifier (Telegram bot sendMessage)

Key rule:
- Endpoints MUST NOT call external APIs directly.
- Endpoints call integration clients injected through app.state.
- The mock gateway is used when INTEGRATIONS_MODE=mock, the real HTTP client otherwise.

Switching implementations:
- The selection of mock vs real clients happens in ONE place (src/api/main.py).
"""

from .contracts.notifications import (
    NotificationMessage,
    NotificationResult,
    contact_inquiry_text,
    payment_received_text,
)
from .contracts.payments import (
    VerificationResult,
    format_amount,
    missing_fields,
    to_display_amount,
)

__all__ = [
    # notifications
    "NotificationMessage", "NotificationResult",
    "contact_inquiry_text", "payment_received_text",
    # payments
    "VerificationResult", "format_amount", "missing_fields", "to_display_amount",
]
