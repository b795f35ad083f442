"""
Contract Gateway

Mediates between the acceptance pages and the contract webhook:
- validates the inbound record id
- fetches and normalizes the webhook's answer into a flat field mapping
- relays acceptance submissions unchanged
"""

import logging
from typing import Any, Dict, Mapping, Optional

from src.error_handler import InvalidRequestError, NotFoundError
from src.integrations.clients.real_http.webhook import UpstreamReply
from src.integrations.policy.response_wrappers import normalize_webhook_response

logger = logging.getLogger(__name__)


def clean_record_id(record_id: Optional[str]) -> str:
    cleaned = (record_id or "").strip()
    if not cleaned:
        raise InvalidRequestError("Missing ID")
    return cleaned


class ContractGateway:
    def __init__(self, client) -> None:
        # client is a WebhookClient or MockWebhookClient
        self.client = client

    async def fetch_contract(self, record_id: Optional[str]) -> Dict[str, Any]:
        record_id = clean_record_id(record_id)
        raw = await self.client.fetch_contract(record_id)
        logger.info("Webhook raw response for id=%s: %s", record_id, raw)

        normalized = normalize_webhook_response(raw)
        logger.debug(
            "Normalized webhook response for id=%s: shape=%s unwrapped=%s",
            record_id,
            normalized.shape.value,
            [s.value for s in normalized.unwrapped],
        )
        if normalized.is_empty:
            raise NotFoundError(
                "No contract data found for this ID",
                context={"record_id": record_id, "upstream_payload": raw},
            )
        return normalized.fields

    async def submit_acceptance(self, payload: Mapping[str, Any]) -> UpstreamReply:
        if not isinstance(payload, Mapping):
            raise InvalidRequestError("Submission body must be a flat mapping of form fields")
        # Forwarded as-is; duplicate acceptances for one record are not deduplicated.
        return await self.client.submit_acceptance(payload)
