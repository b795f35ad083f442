"""
Contracts (data models).

This folder defines the request/response shapes for the contract webhook:
- Contract quote fields shown on the acceptance pages
- Acceptance records posted back to the webhook

Why this exists:
- Keeps the placeholder fallbacks and upstream key names in one place
- Ensures the mock and real webhook clients agree on field names

Both mock and real HTTP clients should use these contracts.
"""

from .quote import (
    ACCEPTED_STATUS,
    AcceptanceRecord,
    ContractQuote,
    QUOTE_FIELD_SOURCES,
    form_value,
    iso_timestamp,
    to_form_fields,
)

__all__ = [
    "ACCEPTED_STATUS",
    "AcceptanceRecord",
    "ContractQuote",
    "QUOTE_FIELD_SOURCES",
    "form_value",
    "iso_timestamp",
    "to_form_fields",
]
