"""
Contracts (data models).

This folder defines the request/response shapes for external integrations:
- Paystack verification replies (payments.py)
- Telegram messages and send results (notifications.py)

Both mock and real HTTP clients return these contracts, so endpoints never
read raw gateway dicts.
"""
