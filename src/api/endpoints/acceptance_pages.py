"""
Server-rendered acceptance pages: overview with the two confirmations,
the full Master Service Agreement, and the acceptance form handler.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Form, Query, status
from fastapi.responses import HTMLResponse

from src.api.dependencies import get_gateway
from src.error_handler import GatewayError
from src.integrations.contracts.quote import ContractQuote
from src.integrations.policy.contract_gateway import ContractGateway
from src.presentation.acceptance_flow import (
    MISSING_ID_MESSAGE,
    AcceptanceFlow,
    ConfirmationRequiredError,
)
from src.presentation.templates import render_flow, render_terms

logger = logging.getLogger(__name__)

router = APIRouter()


async def load_flow(record_id: Optional[str], gateway: ContractGateway) -> AcceptanceFlow:
    record_id = (record_id or "").strip() or None
    flow = AcceptanceFlow(record_id=record_id)
    if not record_id:
        flow.fetch_failed(MISSING_ID_MESSAGE)
        return flow

    try:
        fields = await gateway.fetch_contract(record_id)
    except GatewayError as e:
        logger.error("Data fetch error for id=%s: %s", record_id, e.message)
        flow.fetch_failed()
        return flow

    flow.fetch_succeeded(ContractQuote.from_fields(fields))
    return flow


def _is_checked(value: Optional[str]) -> bool:
    return (value or "").strip().lower() in {"on", "true", "1", "yes"}


@router.get("/", response_class=HTMLResponse, tags=["Pages"])
async def overview_page(id: Optional[str] = Query(default=None), gateway: ContractGateway = Depends(get_gateway)):
    flow = await load_flow(id, gateway)
    return HTMLResponse(render_flow(flow))


@router.get("/terms", response_class=HTMLResponse, tags=["Pages"])
async def terms_page(id: Optional[str] = Query(default=None), gateway: ContractGateway = Depends(get_gateway)):
    flow = await load_flow(id, gateway)
    return HTMLResponse(render_terms(flow))


@router.post("/accept", response_class=HTMLResponse, tags=["Pages"])
async def accept_agreement(
    record_id: str = Form(default=""),
    accepted_terms: Optional[str] = Form(default=None),
    authorized: Optional[str] = Form(default=None),
    gateway: ContractGateway = Depends(get_gateway),
):
    record_id = record_id.strip()
    if not record_id:
        flow = AcceptanceFlow()
        flow.fetch_failed(MISSING_ID_MESSAGE)
        return HTMLResponse(render_flow(flow), status_code=status.HTTP_400_BAD_REQUEST)

    flow = AcceptanceFlow.resume(record_id)
    try:
        record = flow.request_submit(_is_checked(accepted_terms), _is_checked(authorized))
    except ConfirmationRequiredError as e:
        flow.error = str(e)
        return HTMLResponse(render_flow(flow), status_code=status.HTTP_400_BAD_REQUEST)

    try:
        await gateway.submit_acceptance(record.to_form())
    except GatewayError as e:
        logger.error("Submission error for id=%s: %s", record_id, e.message)
        flow.submit_failed()
        return HTMLResponse(render_flow(flow), status_code=status.HTTP_502_BAD_GATEWAY)

    flow.submit_succeeded()
    logger.info("Acceptance recorded for id=%s at %s", record_id, record.accepted_at)
    return HTMLResponse(render_flow(flow))
