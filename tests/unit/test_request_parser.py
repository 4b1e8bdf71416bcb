"""Unit tests for API request parsing helpers."""

from __future__ import annotations

import pytest
from flask import Flask, request
from werkzeug.exceptions import BadRequest

from translation_exclusions.backend.services.request_parser import (
    optional_string,
    parse_json_payload,
    resolve_request_locale,
)


def test_resolve_locale_prefers_query_parameter(app: Flask) -> None:
    with app.test_request_context("/?locale=el", headers={"Accept-Language": "en-US"}):
        assert resolve_request_locale(request) == "el"


def test_resolve_locale_uses_accept_language(app: Flask) -> None:
    with app.test_request_context("/", headers={"Accept-Language": "el-GR;q=0.9, en;q=0.8"}):
        assert resolve_request_locale(request) == "el"


def test_resolve_locale_defaults_to_english(app: Flask) -> None:
    with app.test_request_context("/"):
        assert resolve_request_locale(request) == "en"


def test_parse_payload_rejects_non_object(app: Flask) -> None:
    with app.test_request_context("/", method="POST", json=["not", "an", "object"]):
        with pytest.raises(BadRequest):
            parse_json_payload(request)


def test_parse_payload_rejects_invalid_json(app: Flask) -> None:
    with app.test_request_context(
        "/", method="POST", data="{broken", content_type="application/json"
    ):
        with pytest.raises(BadRequest):
            parse_json_payload(request)


def test_optional_string() -> None:
    assert optional_string({"entity_id": 10}, "entity_id") == "10"
    assert optional_string({"entity_id": "  "}, "entity_id") is None
    assert optional_string({}, "entity_id") is None
    with pytest.raises(BadRequest):
        optional_string({"entity_id": True}, "entity_id")
    with pytest.raises(BadRequest):
        optional_string({"entity_id": ["10"]}, "entity_id")
