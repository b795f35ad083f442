"""
Integrations layer.
This package contains all code used to communicate with the contract automation webhook:
- Looking up contract quote records by record id
- Posting acceptance submissions

Key rule:
- Pages and endpoints MUST NOT call the webhook directly.
- They go through the ContractGateway (policy/contract_gateway.py), which owns
  id validation and response normalization.
- We use the MOCK client during development and the REAL_HTTP client otherwise.

Switching implementations:
- The selection of mock vs real clients happens in ONE place (src/api/dependencies.py).
"""

from .contracts.quote import AcceptanceRecord, ContractQuote
from .policy.contract_gateway import ContractGateway
from .policy.response_wrappers import ResponseShape, normalize_webhook_response

__all__ = [
    "AcceptanceRecord",
    "ContractGateway",
    "ContractQuote",
    "ResponseShape",
    "normalize_webhook_response",
]
