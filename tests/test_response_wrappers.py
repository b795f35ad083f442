"""Tests for webhook response normalization."""

import pytest

from src.integrations.policy.response_wrappers import (
    ResponseShape,
    classify_shape,
    extract_error_message,
    normalize_webhook_response,
)

RECORD = {"nombre_cliente": "Palm Grove HOA", "unidades": 120}


@pytest.mark.parametrize(
    "raw, expected_shape",
    [
        ([RECORD], ResponseShape.SEQUENCE),
        ({"body": RECORD}, ResponseShape.BODY_WRAPPED),
        ({"fields": RECORD}, ResponseShape.FIELDS_WRAPPED),
        ({"data": RECORD}, ResponseShape.DATA_WRAPPED),
        (RECORD, ResponseShape.FLAT_MAPPING),
        ({}, ResponseShape.EMPTY),
        (None, ResponseShape.EMPTY),
        ("plain text", ResponseShape.EMPTY),
    ],
)
def test_classify_shape(raw, expected_shape):
    assert classify_shape(raw) == expected_shape


def test_one_element_sequence_yields_its_mapping():
    out = normalize_webhook_response([RECORD])
    assert out.fields == RECORD
    assert out.unwrapped == [ResponseShape.SEQUENCE]


def test_extra_sequence_elements_are_discarded():
    out = normalize_webhook_response([RECORD, {"nombre_cliente": "Other"}])
    assert out.fields == RECORD


def test_airtable_list_of_records_unwraps_fields():
    raw = [{"id": "rec123", "createdTime": "2024-01-01T00:00:00.000Z", "fields": RECORD}]
    out = normalize_webhook_response(raw)
    assert out.fields == RECORD
    assert out.unwrapped == [ResponseShape.SEQUENCE, ResponseShape.FIELDS_WRAPPED]


def test_body_then_fields_both_unwrap():
    out = normalize_webhook_response({"body": {"fields": RECORD}})
    assert out.fields == RECORD
    assert out.unwrapped == [ResponseShape.BODY_WRAPPED, ResponseShape.FIELDS_WRAPPED]


def test_body_is_unwrapped_before_sibling_fields():
    # Step order decides: a sibling body is taken before fields is looked at.
    out = normalize_webhook_response({"body": {"ping": "pong"}, "fields": {"nombre_cliente": "X"}})
    assert out.fields == {"ping": "pong"}
    assert out.unwrapped == [ResponseShape.BODY_WRAPPED]


def test_fields_wins_over_data():
    raw = {"fields": RECORD, "data": {"nombre_cliente": "Wrong"}}
    assert normalize_webhook_response(raw).fields == RECORD


def test_data_mapping_without_fields_unwraps():
    out = normalize_webhook_response({"data": RECORD, "success": True})
    assert out.fields == RECORD
    assert out.shape == ResponseShape.DATA_WRAPPED


def test_data_that_is_not_a_mapping_is_left_alone():
    raw = {"data": "rec123", "nombre_cliente": "Palm Grove HOA"}
    assert normalize_webhook_response(raw).fields == raw


def test_data_list_is_not_unwrapped():
    raw = {"data": [RECORD]}
    assert normalize_webhook_response(raw).fields == raw


def test_sequence_after_unwrapping_takes_first():
    out = normalize_webhook_response({"body": [RECORD]})
    assert out.fields == RECORD
    assert out.unwrapped == [ResponseShape.BODY_WRAPPED, ResponseShape.SEQUENCE]


def test_falsy_body_does_not_unwrap():
    raw = {"body": "", "nombre_cliente": "Palm Grove HOA"}
    assert normalize_webhook_response(raw).fields == raw


def test_flat_mapping_is_returned_verbatim():
    out = normalize_webhook_response(RECORD)
    assert out.fields == RECORD
    assert out.unwrapped == []
    assert out.is_empty is False


@pytest.mark.parametrize(
    "raw",
    [
        {},
        [],
        None,
        [{}],
        {"body": {}},
        {"data": {}},
        {"fields": []},
        [[]],
        42,
    ],
)
def test_empty_results_are_flagged(raw):
    out = normalize_webhook_response(raw)
    assert out.is_empty is True
    assert out.fields == {}


def test_extract_error_message():
    assert extract_error_message({"message": "Workflow could not be started"}) == "Workflow could not be started"
    assert extract_error_message({"message": "  "}, default="fallback") == "fallback"
    assert extract_error_message("Bad Gateway", default="fallback") == "fallback"
