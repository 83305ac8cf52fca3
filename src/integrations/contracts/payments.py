from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

"""
Payment contracts.

Defines the shape of a gateway transaction-verification reply as the relay
sees it, independent of which client (real Paystack or mock) produced it.

Both of these must return VerificationResult:
- clients/real_http/payments.py
- clients/mocks/payments.py
"""

# Gateway amounts are in minor currency units (kobo).
MINOR_UNITS_PER_MAJOR = 100
SUCCESS_STATUS = "success"


@dataclass(frozen=True)
class VerificationResult:
    """A normalized gateway reply for one transaction reference."""
    status: bool                         # top-level gateway flag
    transaction_status: str              # nested data.status
    amount: int                          # minor units
    reference: Optional[str] = None
    currency: Optional[str] = None
    message: Optional[str] = None
    raw: Dict[str, Any] = field(default_factory=dict)

    @property
    def is_successful(self) -> bool:
        return self.status is True and self.transaction_status == SUCCESS_STATUS

    @property
    def display_amount(self) -> float:
        return to_display_amount(self.amount)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def to_display_amount(minor_amount: int) -> float:
    return minor_amount / MINOR_UNITS_PER_MAJOR


def format_amount(amount: float) -> str:
    """Render 5000.0 as '5000' and 5000.5 as '5000.5'."""
    if float(amount).is_integer():
        return str(int(amount))
    return str(amount)


def missing_fields(payload: Dict[str, Any], *names: str) -> List[str]:
    """
    Return the names whose values are absent or blank.
    Empty list means every field is present.
    """
    missing: List[str] = []
    for name in names:
        value = payload.get(name)
        if value is None:
            missing.append(name)
        elif isinstance(value, str) and not value.strip():
            missing.append(name)
    return missing
