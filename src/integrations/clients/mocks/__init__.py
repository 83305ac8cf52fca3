"""
Mock integration clients.

These clients return fake (but realistic) responses without calling any external API.
They are used when:
- Paystack test keys are not at hand
- We want to exercise the frontend checkout flow end-to-end offline

Important:
- Mock clients must follow the SAME interface as real HTTP clients.
- Mock clients return data shaped according to src/integrations/contracts/*
"""
