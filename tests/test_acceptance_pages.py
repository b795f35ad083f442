from urllib.parse import parse_qsl

import httpx

RECORD = {
    "nombre_cliente": "Palm Grove <HOA>",
    "propiedad": "1200 Palm Grove Blvd",
    "unidades": 184,
    "precio_mensual": "$1,840.00",
    "detalle_servicio": "Five nights per week.",
}


def test_overview_without_id_shows_inline_error(client, stub_webhook):
    response = client.get("/")

    assert response.status_code == 200
    assert "No record ID found in URL." in response.text
    assert "disabled" in response.text
    assert stub_webhook.call_count == 0


def test_overview_with_loaded_contract_enables_form(client, stub_webhook):
    stub_webhook.reply_json({"fields": RECORD})

    response = client.get("/", params={"id": "rec123"})

    assert response.status_code == 200
    assert "Service Acceptance Protocol" in response.text
    assert 'name="record_id" value="rec123"' in response.text
    assert "/terms?id=rec123" in response.text
    assert "Accept &amp; Continue" in response.text
    assert 'class="primary" >' in response.text


def test_overview_fetch_failure_shows_static_message(client, stub_webhook):
    stub_webhook.raise_error(httpx.ConnectError, "refused")

    response = client.get("/", params={"id": "rec123"})

    assert response.status_code == 200
    assert "Could not load contract details. Please try again later." in response.text
    assert 'name="record_id" value="rec123"' in response.text
    assert 'class="primary" >' in response.text


def test_terms_page_renders_quote_fields_escaped(client, stub_webhook):
    stub_webhook.reply_json([{"fields": RECORD}])

    response = client.get("/terms", params={"id": "rec123"})

    assert response.status_code == 200
    assert "MASTER SERVICE AGREEMENT FOR DOOR-TO-DOOR WASTE COLLECTION" in response.text
    assert "Palm Grove &lt;HOA&gt;" in response.text
    assert "<b>184 residential units</b>" in response.text
    assert "<b>$1,840.00</b>" in response.text
    assert "<i>Five nights per week.</i>" in response.text
    assert 'href="/?id=rec123"' in response.text


def test_terms_page_uses_placeholders_for_missing_fields(client, stub_webhook):
    stub_webhook.reply_json({"nombre_cliente": "Palm Grove HOA"})

    response = client.get("/terms", params={"id": "rec123"})

    assert "[Property Pending]" in response.text
    assert "<b>0 residential units</b>" in response.text
    assert "$0.00" in response.text
    assert "Service details as specified." in response.text


def test_accept_requires_both_confirmations(client, stub_webhook):
    response = client.post("/accept", data={"record_id": "rec123", "accepted_terms": "on"})

    assert response.status_code == 400
    assert "Please confirm both statements" in response.text
    assert stub_webhook.call_count == 0


def test_accept_without_record_id_is_rejected(client, stub_webhook):
    response = client.post("/accept", data={"accepted_terms": "on", "authorized": "on"})

    assert response.status_code == 400
    assert "No record ID found in URL." in response.text
    assert stub_webhook.call_count == 0


def test_accept_submits_record_and_shows_confirmation(client, stub_webhook):
    stub_webhook.reply_json({"message": "Workflow was started"})

    response = client.post("/accept", data={"record_id": "rec123", "accepted_terms": "on", "authorized": "on"})

    assert response.status_code == 200
    assert "Agreement Accepted" in response.text
    forwarded = dict(parse_qsl(stub_webhook.requests[0].content.decode()))
    assert forwarded["airtable_record_id"] == "rec123"
    assert forwarded["status"] == "accepted"
    assert forwarded["accepted_at"].endswith("Z")


def test_accept_upstream_failure_shows_blocking_alert(client, stub_webhook):
    stub_webhook.reply_json({"message": "down"}, status_code=500)

    response = client.post("/accept", data={"record_id": "rec123", "accepted_terms": "on", "authorized": "on"})

    assert response.status_code == 502
    assert "There was an error submitting your acceptance. Please try again." in response.text
    assert "alert(" in response.text
    assert "Agreement Accepted" not in response.text
