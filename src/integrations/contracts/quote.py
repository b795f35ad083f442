"""
Contract quote and acceptance contracts.

Defines the shapes exchanged with the contract webhook:
- ContractQuote: the display fields of a waste-collection quote, built from the
  flattened mapping returned by the gateway fetch path
- AcceptanceRecord: the acceptance submitted back to the webhook when the
  client confirms the agreement

Both are transient: built per request, never stored.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field


# upstream key -> placeholder shown when the webhook did not send a value
QUOTE_FIELD_SOURCES: Dict[str, tuple] = {
    "client_name": ("nombre_cliente", "[Client Pending]"),
    "property_label": ("propiedad", "[Property Pending]"),
    "unit_count": ("unidades", "0"),
    "monthly_rate": ("precio_mensual", "$0.00"),
    "service_summary": ("detalle_servicio", "Service details as specified."),
}

ACCEPTED_STATUS = "accepted"


class ContractQuote(BaseModel):
    """Contract fields rendered on the acceptance pages."""

    model_config = ConfigDict(frozen=True)

    client_name: str
    property_label: str
    unit_count: str
    monthly_rate: str
    service_summary: str

    @classmethod
    def from_fields(cls, fields: Optional[Mapping[str, Any]]) -> "ContractQuote":
        fields = fields or {}
        values: Dict[str, str] = {}
        for name, (source_key, placeholder) in QUOTE_FIELD_SOURCES.items():
            raw = fields.get(source_key)
            if raw is None or raw is False or (isinstance(raw, str) and not raw.strip()):
                values[name] = placeholder
            else:
                values[name] = str(raw)
        return cls(**values)

    @classmethod
    def placeholder(cls) -> "ContractQuote":
        return cls.from_fields({})


def iso_timestamp(moment: Optional[datetime] = None) -> str:
    """UTC ISO-8601 with millisecond precision, e.g. 2024-01-01T00:00:00.000Z."""
    moment = moment or datetime.now(timezone.utc)
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class AcceptanceRecord(BaseModel):
    airtable_record_id: str = Field(..., min_length=1)
    accepted_at: str = Field(default_factory=iso_timestamp)
    status: str = ACCEPTED_STATUS

    def to_form(self) -> Dict[str, str]:
        return {
            "airtable_record_id": self.airtable_record_id,
            "accepted_at": self.accepted_at,
            "status": self.status,
        }


def form_value(value: Any) -> str:
    """Render one submission field the way an HTML form would post it."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list, tuple)):
        return json.dumps(value, separators=(",", ":"))
    return str(value)


def to_form_fields(payload: Mapping[str, Any]) -> Dict[str, str]:
    return {str(key): form_value(value) for key, value in payload.items()}
