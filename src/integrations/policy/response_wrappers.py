"""
Normalization of contract webhook responses.

The automation behind the webhook answers in several shapes depending on the
workflow version: a bare record, a list of records, or a record wrapped under
``body``, ``fields`` (Airtable) or ``data``. Every shape is reduced to a flat
field mapping by walking an ordered unwrap table.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Tuple

from pydantic import BaseModel, Field


class ResponseShape(str, Enum):
    SEQUENCE = "sequence"
    BODY_WRAPPED = "body_wrapped"
    FIELDS_WRAPPED = "fields_wrapped"
    DATA_WRAPPED = "data_wrapped"
    FLAT_MAPPING = "flat_mapping"
    EMPTY = "empty"


class NormalizedWebhookResponse(BaseModel):
    shape: ResponseShape
    fields: Dict[str, Any] = Field(default_factory=dict)
    unwrapped: List[ResponseShape] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return self.shape == ResponseShape.EMPTY


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def _has_value(value: Any) -> bool:
    # Missing, null, false, zero and "" never count as a wrapper; empty containers do.
    if value is None or isinstance(value, bool):
        return bool(value)
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, str):
        return value != ""
    return True


def _matches(shape: ResponseShape, value: Any) -> bool:
    if shape == ResponseShape.SEQUENCE:
        return _is_sequence(value)
    if not isinstance(value, Mapping):
        return False
    if shape == ResponseShape.BODY_WRAPPED:
        return _has_value(value.get("body"))
    if shape == ResponseShape.FIELDS_WRAPPED:
        return _has_value(value.get("fields"))
    if shape == ResponseShape.DATA_WRAPPED:
        return isinstance(value.get("data"), Mapping) and not _has_value(value.get("fields"))
    if shape == ResponseShape.FLAT_MAPPING:
        return len(value) > 0
    return False


def _first_element(value: Sequence[Any]) -> Any:
    return value[0] if len(value) else None


# Applied in order; each step runs at most once and only when its shape matches.
UNWRAP_STEPS: Tuple[Tuple[ResponseShape, Callable[[Any], Any]], ...] = (
    (ResponseShape.SEQUENCE, _first_element),
    (ResponseShape.BODY_WRAPPED, lambda value: value["body"]),
    (ResponseShape.FIELDS_WRAPPED, lambda value: value["fields"]),
    (ResponseShape.DATA_WRAPPED, lambda value: value["data"]),
    (ResponseShape.SEQUENCE, _first_element),
)


def classify_shape(value: Any) -> ResponseShape:
    """Outermost shape of ``value``, following the unwrap table's precedence."""
    for shape in (
        ResponseShape.SEQUENCE,
        ResponseShape.BODY_WRAPPED,
        ResponseShape.FIELDS_WRAPPED,
        ResponseShape.DATA_WRAPPED,
        ResponseShape.FLAT_MAPPING,
    ):
        if _matches(shape, value):
            return shape
    return ResponseShape.EMPTY


def normalize_webhook_response(raw: Any) -> NormalizedWebhookResponse:
    value = raw
    unwrapped: List[ResponseShape] = []
    for shape, unwrap in UNWRAP_STEPS:
        if _matches(shape, value):
            value = unwrap(value)
            unwrapped.append(shape)

    if not _matches(ResponseShape.FLAT_MAPPING, value):
        return NormalizedWebhookResponse(shape=ResponseShape.EMPTY, unwrapped=unwrapped)

    return NormalizedWebhookResponse(
        shape=classify_shape(raw),
        fields=dict(value),
        unwrapped=unwrapped,
    )


def extract_error_message(payload: Any, default: Optional[str] = None) -> Optional[str]:
    """Pull a human readable ``message`` out of an upstream error body."""
    if isinstance(payload, Mapping):
        message = payload.get("message")
        if isinstance(message, str) and message.strip():
            return message.strip()
    return default
