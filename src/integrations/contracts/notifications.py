"""
Notification contracts: the message the notifier sends and the result it
hands back, plus the two operator-facing templates.
"""

from dataclasses import dataclass, field
from typing import Any, Optional

PARSE_MODE_MARKDOWN = "Markdown"
DEFAULT_NAME = "N/A"


@dataclass(frozen=True)
class NotificationMessage:
    text: str
    chat_id: str
    parse_mode: str = PARSE_MODE_MARKDOWN

    def to_payload(self) -> dict:
        return {"chat_id": self.chat_id, "text": self.text, "parse_mode": self.parse_mode}


@dataclass(frozen=True)
class NotificationResult:
    """Outcome of one send attempt. Callers decide whether a failure matters."""
    ok: bool
    error: Optional[str] = None
    detail: Any = field(default=None, compare=False)

    @classmethod
    def success(cls, detail: Any = None) -> "NotificationResult":
        return cls(ok=True, detail=detail)

    @classmethod
    def failure(cls, error: str, detail: Any = None) -> "NotificationResult":
        return cls(ok=False, error=error, detail=detail)


def payment_received_text(
    *,
    identifier: str,
    name: Optional[str],
    email: str,
    amount: str,
    reference: str,
) -> str:
    return "\n".join(
        [
            "✅ *NEW PAYMENT RECEIVED*",
            "",
            f"🆔 *Identifier:* {identifier}",
            f"👤 *Name:* {name or DEFAULT_NAME}",
            f"📧 *Email:* {email}",
            f"💰 *Amount:* ₦{amount}",
            f"REF: `{reference}`",
            "",
            "_Please check your dashboard._",
        ]
    )


def contact_inquiry_text(*, name: str, email: str, message: str) -> str:
    return "\n".join(
        [
            "📩 *NEW CONTACT INQUIRY*",
            "",
            f"👤 *Name:* {name}",
            f"📧 *Email:* {email}",
            "",
            "📝 *Message:*",
            message,
        ]
    ).rstrip()
