"""
Acceptance flow state machine.

Tracks one visitor's pass through the acceptance pages:

    LOADING --fetch ok--> LOADED --submit--> SUBMITTING --ok--> SUBMITTED
       |                                         ^   |
       +--fetch failed--> ERROR --submit---------+   +--failed--> LOADED (alert)

A failed fetch leaves the placeholders on screen but still lets a visitor
with a record id accept.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Tuple

from src.integrations.contracts.quote import AcceptanceRecord, ContractQuote

MISSING_ID_MESSAGE = "No record ID found in URL."
FETCH_ERROR_MESSAGE = "Could not load contract details. Please try again later."
SUBMIT_ERROR_MESSAGE = "There was an error submitting your acceptance. Please try again."
CONFIRMATION_REQUIRED_MESSAGE = "Please confirm both statements before accepting the agreement."


class FlowState(str, Enum):
    LOADING = "loading"
    LOADED = "loaded"
    ERROR = "error"
    SUBMITTING = "submitting"
    SUBMITTED = "submitted"


class FlowEvent(str, Enum):
    FETCH_SUCCEEDED = "fetch_succeeded"
    FETCH_FAILED = "fetch_failed"
    SUBMIT_REQUESTED = "submit_requested"
    SUBMIT_SUCCEEDED = "submit_succeeded"
    SUBMIT_FAILED = "submit_failed"


TRANSITIONS: Dict[Tuple[FlowState, FlowEvent], FlowState] = {
    (FlowState.LOADING, FlowEvent.FETCH_SUCCEEDED): FlowState.LOADED,
    (FlowState.LOADING, FlowEvent.FETCH_FAILED): FlowState.ERROR,
    (FlowState.LOADED, FlowEvent.SUBMIT_REQUESTED): FlowState.SUBMITTING,
    (FlowState.ERROR, FlowEvent.SUBMIT_REQUESTED): FlowState.SUBMITTING,
    (FlowState.SUBMITTING, FlowEvent.SUBMIT_SUCCEEDED): FlowState.SUBMITTED,
    (FlowState.SUBMITTING, FlowEvent.SUBMIT_FAILED): FlowState.LOADED,
}


class InvalidTransitionError(ValueError):
    def __init__(self, state: FlowState, event: FlowEvent) -> None:
        super().__init__(f"Cannot apply {event.value} while {state.value}")
        self.state = state
        self.event = event


class ConfirmationRequiredError(ValueError):
    pass


@dataclass
class AcceptanceFlow:
    record_id: Optional[str] = None
    state: FlowState = FlowState.LOADING
    quote: ContractQuote = field(default_factory=ContractQuote.placeholder)
    error: Optional[str] = None
    alert: Optional[str] = None

    @classmethod
    def resume(cls, record_id: str) -> "AcceptanceFlow":
        """Flow for a visitor whose overview page already loaded."""
        return cls(record_id=record_id, state=FlowState.LOADED)

    def _apply(self, event: FlowEvent) -> FlowState:
        try:
            self.state = TRANSITIONS[(self.state, event)]
        except KeyError:
            raise InvalidTransitionError(self.state, event) from None
        return self.state

    @property
    def can_submit(self) -> bool:
        return self.state in (FlowState.LOADED, FlowState.ERROR) and bool(self.record_id)

    def fetch_succeeded(self, quote: ContractQuote) -> FlowState:
        self._apply(FlowEvent.FETCH_SUCCEEDED)
        self.quote = quote
        self.error = None
        return self.state

    def fetch_failed(self, message: str = FETCH_ERROR_MESSAGE) -> FlowState:
        self._apply(FlowEvent.FETCH_FAILED)
        self.error = message
        return self.state

    def request_submit(self, accepted_terms: bool, authorized: bool) -> AcceptanceRecord:
        if not (accepted_terms and authorized):
            raise ConfirmationRequiredError(CONFIRMATION_REQUIRED_MESSAGE)
        if not self.record_id:
            raise InvalidTransitionError(self.state, FlowEvent.SUBMIT_REQUESTED)
        self._apply(FlowEvent.SUBMIT_REQUESTED)
        self.alert = None
        return AcceptanceRecord(airtable_record_id=self.record_id)

    def submit_succeeded(self) -> FlowState:
        return self._apply(FlowEvent.SUBMIT_SUCCEEDED)

    def submit_failed(self, message: str = SUBMIT_ERROR_MESSAGE) -> FlowState:
        self._apply(FlowEvent.SUBMIT_FAILED)
        self.alert = message
        return self.state
