"""
Real HTTP integration clients.

These clients communicate with the contract automation webhook over HTTP.

Important:
- Must expose the same methods as the mock clients (fetch_contract, submit_acceptance)
- Must hand back raw webhook payloads; normalization lives in policy/response_wrappers.py

Switching:
The selection of mock vs real clients happens in src/api/dependencies.py only.
"""
