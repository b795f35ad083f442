"""
Contract proxy endpoints: look up contract fields and relay acceptance
submissions to the contract webhook.
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import Response

from src.api.dependencies import get_gateway
from src.error_handler import InvalidRequestError
from src.integrations.policy.contract_gateway import ContractGateway

router = APIRouter()

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


@router.get("/contract", tags=["Contract"])
async def get_contract(
    id: Optional[str] = Query(default=None, description="Contract record id"),
    gateway: ContractGateway = Depends(get_gateway),
) -> Dict[str, Any]:
    """
    Fetch the contract fields for a record id, flattened from whatever
    shape the webhook answered with.
    """
    return await gateway.fetch_contract(id)


@router.post("/submit", tags=["Contract"])
async def submit_acceptance(request: Request, gateway: ContractGateway = Depends(get_gateway)):
    """
    Forward an acceptance (JSON object or form body) to the webhook as
    form-urlencoded fields and relay the webhook's answer verbatim.
    """
    payload = await _read_flat_payload(request)
    reply = await gateway.submit_acceptance(payload)
    return Response(content=reply.content, status_code=reply.status_code, media_type=reply.media_type)


async def _read_flat_payload(request: Request) -> Dict[str, Any]:
    content_type = request.headers.get("content-type", "")
    if any(ct in content_type for ct in FORM_CONTENT_TYPES):
        form = await request.form()
        fields: Dict[str, Any] = {}
        for key, value in form.items():
            if not isinstance(value, str):
                raise InvalidRequestError(f"Form field '{key}' must be text, not a file upload")
            fields[key] = value
        return fields

    try:
        payload = await request.json()
    except ValueError as e:
        raise InvalidRequestError("Submission body must be a JSON object") from e
    if not isinstance(payload, dict):
        raise InvalidRequestError("Submission body must be a flat mapping of form fields")
    return payload
