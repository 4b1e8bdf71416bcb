"""Expose the admin message catalogues."""

from __future__ import annotations

from typing import Any

from flask import Blueprint, jsonify, request

from translation_exclusions.backend.app.localization import load_translations
from translation_exclusions.backend.services import resolve_request_locale

blueprint = Blueprint("translations", __name__, url_prefix="/api/v1/translations")


@blueprint.get("/")
def get_negotiated_translations() -> tuple[Any, int]:
    """Return the catalogue for ``?locale=`` or the browser's preferred language."""

    return jsonify(load_translations(resolve_request_locale(request))), 200


@blueprint.get("/<locale>")
def get_locale_translations(locale: str) -> tuple[Any, int]:
    return jsonify(load_translations(locale)), 200
