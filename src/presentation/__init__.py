"""
Presentation layer for the contract acceptance pages.

- acceptance_flow: per-visitor state machine (loading -> loaded -> submitting -> submitted)
- templates: one HTML rendering per flow state plus the full agreement page
- legal_text: static agreement copy
"""
