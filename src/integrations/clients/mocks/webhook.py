"""
Mock Contract Webhook Client.

Purpose:
- Stands in for the automation webhook during development/testing.
- Does NOT make network calls.
- Answers lookups in the same wrapped shapes the real webhook produces, so the
  gateway's normalization is exercised end-to-end.

Usage:
- Wired in src/api/dependencies.py when INTEGRATIONS_MODE=mock
- Seed extra records with add_record(record_id, raw_payload)

Swap:
Replace with the real HTTP client in clients/real_http/webhook.py (the default).
"""

from __future__ import annotations

import json
import logging
from collections import deque
from typing import Any, Deque, Dict, Mapping, Optional

from src.integrations.clients.real_http.webhook import UpstreamReply
from src.integrations.contracts.quote import to_form_fields

logger = logging.getLogger(__name__)

MAX_RECORDED_SUBMISSIONS = 500


DEMO_RECORDS: Dict[str, Any] = {
    # n8n list of Airtable records
    "recDEMO0001": [
        {
            "id": "recDEMO0001",
            "fields": {
                "nombre_cliente": "Palm Grove Condominium Association",
                "propiedad": "1200 Palm Grove Blvd, Orlando, FL 32801",
                "unidades": 184,
                "precio_mensual": "$1,840.00",
                "detalle_servicio": "Door-to-door pickup five nights per week, Sunday through Thursday.",
            },
        }
    ],
    # Webhook node wrapping the record under body/data
    "recDEMO0002": {
        "body": {
            "data": {
                "nombre_cliente": "Lakeside Villas HOA",
                "propiedad": "45 Lakeside Dr, Tampa, FL 33602",
                "unidades": "96",
                "precio_mensual": "$1,104.00",
                "detalle_servicio": "Pickup three nights per week with recycling on Fridays.",
            }
        }
    },
}


class MockWebhookClient:
    def __init__(
        self,
        records: Optional[Mapping[str, Any]] = None,
        max_submissions: int = MAX_RECORDED_SUBMISSIONS,
    ) -> None:
        self.records: Dict[str, Any] = dict(DEMO_RECORDS if records is None else records)
        # Oldest submissions drop off once the cap is reached.
        self.submissions: Deque[Dict[str, str]] = deque(maxlen=max_submissions)

    def add_record(self, record_id: str, raw_payload: Any) -> None:
        self.records[record_id] = raw_payload

    async def fetch_contract(self, record_id: str) -> Any:
        logger.info("Mock webhook lookup for id=%s", record_id)
        # Unknown ids get the empty list the real automation returns.
        return self.records.get(record_id, [])

    async def submit_acceptance(self, payload: Mapping[str, Any]) -> UpstreamReply:
        form = to_form_fields(payload)
        self.submissions.append(form)
        logger.info("Mock webhook recorded submission for id=%s", form.get("airtable_record_id"))
        body = json.dumps({"message": "Workflow was started"}).encode("utf-8")
        return UpstreamReply(200, body, "application/json")
