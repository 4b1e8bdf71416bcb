"""Helpers for normalising incoming API requests."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from flask import Request
from werkzeug.exceptions import BadRequest

from translation_exclusions.backend.app.localization import normalise_locale


def resolve_request_locale(req: Request) -> str:
    """Pick the admin locale from ``?locale=`` or the ``Accept-Language`` header."""

    locale_param = req.args.get("locale")
    if locale_param:
        return normalise_locale(locale_param)

    accept_language = req.headers.get("Accept-Language")
    if accept_language:
        primary = accept_language.split(",")[0].split(";")[0].strip()
        if primary:
            return normalise_locale(primary)

    return normalise_locale(None)


def parse_json_payload(req: Request) -> dict[str, Any]:
    """Extract a JSON object from ``req``."""

    data = req.get_json(silent=True)
    if data is None:
        raise BadRequest("Request body must be valid JSON")
    if not isinstance(data, Mapping):
        raise BadRequest("Request JSON must be an object")

    return dict(data)


def optional_string(payload: Mapping[str, Any], field: str) -> str | None:
    """Return ``payload[field]`` when it is a non-empty string or number."""

    value = payload.get(field)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        raise BadRequest(f"'{field}' must be a string")
    text = str(value).strip()
    return text or None
