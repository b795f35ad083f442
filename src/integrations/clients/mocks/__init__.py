"""
Mock integration clients.

These clients return fake (but realistically shaped) webhook responses without
calling any external API. They are used when:
- INTEGRATIONS_MODE=mock is set for local development
- We want to exercise the acceptance pages end-to-end without the webhook

Important:
- Mock clients must follow the SAME interface as the real HTTP client.
"""
