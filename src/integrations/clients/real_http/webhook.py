"""
Real contract webhook HTTP client.

Purpose:
- Looks up contract quote records on the automation webhook by record id
- Posts acceptance submissions back to the same webhook

Implementation notes:
- Uses httpx for async requests, one client per call with a bounded timeout
- The record id is sent in the query string AND under every body key the
  automation has been seen to match on
- Submissions are form-urlencoded; the webhook's form handler does not read JSON
- Transport failures and non-2xx answers are raised as UpstreamError

Important:
- Keep this client as the ONLY place where webhook HTTP calls are made.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional

import httpx

from src.error_handler import UpstreamError
from src.integrations.contracts.quote import to_form_fields
from src.integrations.policy.response_wrappers import extract_error_message
from src.utils.config_loader import WebhookConfig

logger = logging.getLogger(__name__)

RECORD_ID_BODY_KEYS = ("id", "Property ID", "recordId", "airtable_record_id")


class UpstreamReply:
    """Raw upstream answer relayed back to the caller unchanged."""

    def __init__(self, status_code: int, content: bytes, media_type: Optional[str] = None) -> None:
        self.status_code = status_code
        self.content = content
        self.media_type = media_type

    @classmethod
    def from_response(cls, response: httpx.Response) -> "UpstreamReply":
        return cls(response.status_code, response.content, response.headers.get("content-type"))


class WebhookClient:
    def __init__(self, config: Optional[WebhookConfig] = None, transport: Optional[httpx.AsyncBaseTransport] = None) -> None:
        self.config = config or WebhookConfig()
        self.url = self.config.url
        # Injected in tests to stub the webhook without network access.
        self._transport = transport

    def _client(self, timeout_seconds: float) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=timeout_seconds, follow_redirects=True, transport=self._transport)

    def build_lookup_body(self, record_id: str) -> Dict[str, str]:
        return {key: record_id for key in RECORD_ID_BODY_KEYS}

    async def fetch_contract(self, record_id: str) -> Any:
        """
        Look up a record and return the decoded response body as-is.
        Returns None when the webhook answered 2xx with an empty or non-JSON body.
        """
        headers = {"User-Agent": self.config.user_agent, "Content-Type": "application/json"}
        timeout = self.config.fetch_timeout_seconds
        logger.info("Proxying contract fetch for id=%s", record_id)
        try:
            async with self._client(timeout) as client:
                response = await client.post(
                    self.url,
                    params={"id": record_id},
                    json=self.build_lookup_body(record_id),
                    headers=headers,
                )
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise self._status_error(e.response, "Failed to fetch contract from webhook", record_id=record_id) from e
        except httpx.TimeoutException as e:
            logger.error("Webhook fetch timed out after %ss for id=%s", timeout, record_id)
            raise UpstreamError(f"Webhook request timed out after {timeout:g}s", context={"record_id": record_id}) from e
        except httpx.RequestError as e:
            logger.error("Request error connecting to webhook for id=%s: %s", record_id, e)
            raise UpstreamError(str(e) or "Failed to fetch contract from webhook", context={"record_id": record_id}) from e

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            logger.warning("Webhook returned a non-JSON body for id=%s: %r", record_id, response.text[:500])
            return None

    async def submit_acceptance(self, payload: Mapping[str, Any]) -> UpstreamReply:
        form = to_form_fields(payload)
        headers = {"Content-Type": "application/x-www-form-urlencoded"}
        timeout = self.config.submit_timeout_seconds
        record_id = form.get("airtable_record_id")
        logger.info("Forwarding acceptance submission for id=%s (%d fields)", record_id, len(form))
        try:
            async with self._client(timeout) as client:
                response = await client.post(self.url, data=form, headers=headers)
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise self._status_error(e.response, "Failed to submit acceptance to webhook", record_id=record_id, use_upstream_message=False) from e
        except httpx.TimeoutException as e:
            logger.error("Webhook submission timed out after %ss for id=%s", timeout, record_id)
            raise UpstreamError("Failed to submit acceptance to webhook", context={"record_id": record_id}) from e
        except httpx.RequestError as e:
            logger.error("Request error submitting to webhook for id=%s: %s", record_id, e)
            raise UpstreamError("Failed to submit acceptance to webhook", context={"record_id": record_id}) from e

        logger.info("Webhook accepted submission for id=%s: status=%s", record_id, response.status_code)
        return UpstreamReply.from_response(response)

    @staticmethod
    def _status_error(
        response: httpx.Response,
        default_message: str,
        *,
        record_id: Optional[str],
        use_upstream_message: bool = True,
    ) -> UpstreamError:
        try:
            payload = response.json()
        except ValueError:
            payload = response.text
        message = default_message
        if use_upstream_message:
            message = extract_error_message(payload, default=f"Webhook responded with status {response.status_code}")
        logger.error("HTTP error from webhook: %s %s", response.status_code, response.text[:500])
        return UpstreamError(
            message,
            status_code=response.status_code,
            context={"record_id": record_id, "upstream_payload": payload},
        )
