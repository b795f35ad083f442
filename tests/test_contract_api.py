"""Tests for the /contract and /submit proxy endpoints."""

import json
from urllib.parse import parse_qsl

import httpx
import pytest

RECORD = {
    "nombre_cliente": "Palm Grove HOA",
    "propiedad": "1200 Palm Grove Blvd",
    "unidades": 184,
    "precio_mensual": "$1,840.00",
    "detalle_servicio": "Five nights per week.",
}


@pytest.mark.parametrize("path", ["/contract", "/api/contract"])
def test_fetch_returns_flattened_mapping(client, stub_webhook, path):
    stub_webhook.reply_json([{"id": "rec123", "fields": RECORD}])

    response = client.get(path, params={"id": "rec123"})

    assert response.status_code == 200
    assert response.json() == RECORD
    assert stub_webhook.call_count == 1


def test_fetch_without_id_is_400_and_never_calls_upstream(client, stub_webhook):
    response = client.get("/api/contract")

    assert response.status_code == 400
    assert response.json() == {"error": "Missing ID"}
    assert stub_webhook.call_count == 0


def test_fetch_with_blank_id_is_400(client, stub_webhook):
    response = client.get("/contract", params={"id": "   "})

    assert response.status_code == 400
    assert stub_webhook.call_count == 0


@pytest.mark.parametrize("payload", [{}, [], None, [{}], {"data": {}}])
def test_fetch_empty_upstream_data_is_404(client, stub_webhook, payload):
    stub_webhook.reply_json(payload)

    response = client.get("/contract", params={"id": "rec123"})

    assert response.status_code == 404
    assert "error" in response.json()


def test_fetch_empty_upstream_body_is_404(client, stub_webhook):
    stub_webhook.reply_raw(b"")

    response = client.get("/contract", params={"id": "rec123"})

    assert response.status_code == 404


def test_fetch_relays_upstream_status_and_message(client, stub_webhook):
    stub_webhook.reply_json({"message": "Workflow not active"}, status_code=503)

    response = client.get("/contract", params={"id": "rec123"})

    assert response.status_code == 503
    assert response.json() == {"error": "Workflow not active"}


def test_fetch_timeout_is_500(client, stub_webhook):
    stub_webhook.raise_error(httpx.ReadTimeout, "timed out")

    response = client.get("/contract", params={"id": "rec123"})

    assert response.status_code == 500
    assert "timed out" in response.json()["error"]


def test_submit_json_is_forwarded_as_form_and_reply_relayed(client, stub_webhook):
    stub_webhook.reply_raw(b'{"message":"Workflow was started"}', status_code=200, content_type="application/json")
    payload = {
        "airtable_record_id": "rec123",
        "accepted_at": "2024-01-01T00:00:00.000Z",
        "status": "accepted",
    }

    response = client.post("/api/submit", json=payload)

    assert response.status_code == 200
    assert response.json() == {"message": "Workflow was started"}
    request = stub_webhook.requests[0]
    assert request.headers["content-type"] == "application/x-www-form-urlencoded"
    assert sorted(parse_qsl(request.content.decode())) == sorted(payload.items())


def test_submit_relays_non_json_success_body(client, stub_webhook):
    stub_webhook.reply_raw(b"Accepted", status_code=202, content_type="text/plain")

    response = client.post("/submit", json={"airtable_record_id": "rec123"})

    assert response.status_code == 202
    assert response.text == "Accepted"


def test_submit_accepts_form_bodies(client, stub_webhook):
    response = client.post("/submit", data={"airtable_record_id": "rec123", "status": "accepted"})

    assert response.status_code == 200
    forwarded = dict(parse_qsl(stub_webhook.requests[0].content.decode()))
    assert forwarded == {"airtable_record_id": "rec123", "status": "accepted"}


def test_submit_rejects_file_uploads(client, stub_webhook):
    response = client.post(
        "/submit",
        data={"airtable_record_id": "rec123"},
        files={"contract": ("contract.pdf", b"%PDF-1.4", "application/pdf")},
    )

    assert response.status_code == 400
    assert response.json() == {"error": "Form field 'contract' must be text, not a file upload"}
    assert stub_webhook.call_count == 0


def test_submit_rejects_non_mapping_body(client, stub_webhook):
    response = client.post("/submit", content=json.dumps(["rec123"]), headers={"content-type": "application/json"})

    assert response.status_code == 400
    assert stub_webhook.call_count == 0


def test_submit_upstream_failure_relays_status(client, stub_webhook):
    stub_webhook.reply_json({"message": "bad"}, status_code=400)

    response = client.post("/submit", json={"airtable_record_id": "rec123"})

    assert response.status_code == 400
    assert response.json() == {"error": "Failed to submit acceptance to webhook"}


def test_submit_connection_failure_is_500(client, stub_webhook):
    stub_webhook.raise_error(httpx.ConnectError, "refused")

    response = client.post("/submit", json={"airtable_record_id": "rec123"})

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to submit acceptance to webhook"}


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
