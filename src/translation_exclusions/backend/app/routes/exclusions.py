"""JSON endpoints for reading and replacing the exclusion list."""

from __future__ import annotations

from typing import Any

from flask import Blueprint, jsonify, request

from translation_exclusions.backend.app.context import ExclusionContext, get_context
from translation_exclusions.backend.app.security import MANAGE_OPTIONS, require_capability
from translation_exclusions.backend.app.services.admin_form import handle_submit
from translation_exclusions.backend.app.services.settings_store import ExclusionSet
from translation_exclusions.backend.services import parse_json_payload

blueprint = Blueprint("exclusions", __name__, url_prefix="/api/v1")


def _serialise(context: ExclusionContext, exclusions: ExclusionSet) -> dict[str, Any]:
    return {
        "option": context.config.option_key,
        "categories": exclusions.as_list(),
        "catalog": list(context.registry.list_registered_categories()),
    }


@blueprint.get("/exclusions")
@require_capability(MANAGE_OPTIONS)
def get_exclusions() -> tuple[Any, int]:
    """Return the stored exclusion list alongside the registered catalog."""

    context = get_context()
    return jsonify(_serialise(context, context.store.load())), 200


@blueprint.put("/exclusions")
@require_capability(MANAGE_OPTIONS)
def replace_exclusions() -> tuple[Any, int]:
    """Replace the exclusion list; unknown categories are dropped silently."""

    payload = parse_json_payload(request)
    context = get_context()
    exclusions = handle_submit(context.store, payload.get("categories"))
    return jsonify(_serialise(context, exclusions)), 200


@blueprint.get("/categories")
def list_categories() -> tuple[Any, int]:
    """Expose the categories registered by the host site."""

    context = get_context()
    return jsonify({"categories": list(context.registry.list_registered_categories())}), 200


__all__ = ["blueprint"]
