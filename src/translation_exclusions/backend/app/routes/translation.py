"""Extension points consulted by the translation service on each request."""

from __future__ import annotations

from typing import Any

from flask import Blueprint, jsonify, request
from werkzeug.exceptions import BadRequest

from translation_exclusions.backend.app.context import ExclusionContext, get_context
from translation_exclusions.backend.app.hooks import BEFORE_PROCESS_FILTER, ELIGIBLE_URL_FILTER
from translation_exclusions.backend.app.services.gatekeeper import CONTINUE, RedirectDirective
from translation_exclusions.backend.app.services.language import resolve_language_state
from translation_exclusions.backend.services import optional_string, parse_json_payload

blueprint = Blueprint("translation", __name__, url_prefix="/api/v1/translation")


def _resolve_entity_id(context: ExclusionContext, payload: dict[str, Any]) -> str | None:
    entity_id = optional_string(payload, "entity_id")
    if entity_id is not None:
        return entity_id

    url = optional_string(payload, "url")
    if url is None:
        return None
    return context.registry.resolve_entity_from_url(url)


@blueprint.post("/eligibility")
def check_eligibility() -> tuple[Any, int]:
    """Run the URL eligibility filter for the requested entity."""

    payload = parse_json_payload(request)
    eligible = payload.get("eligible", True)
    if not isinstance(eligible, bool):
        raise BadRequest("'eligible' must be a boolean")

    context = get_context()
    entity_id = _resolve_entity_id(context, payload)
    result = context.hooks.apply_filters(ELIGIBLE_URL_FILTER, eligible, entity_id)

    return jsonify({"entity_id": entity_id, "eligible": bool(result)}), 200


@blueprint.post("/check")
def check_page() -> tuple[Any, int]:
    """Run the pre-process filter before a translated page is rendered."""

    payload = parse_json_payload(request)
    url = optional_string(payload, "url")
    if url is None:
        raise BadRequest("'url' is required")

    context = get_context()
    entity_id = _resolve_entity_id(context, payload)
    language_state = resolve_language_state(url, context.config.languages)
    decision = context.hooks.apply_filters(
        BEFORE_PROCESS_FILTER, CONTINUE, entity_id, language_state
    )

    response: dict[str, Any] = {
        "entity_id": entity_id,
        "current_language": language_state.current_language,
        "original_language": language_state.original_language,
    }
    if isinstance(decision, RedirectDirective):
        response.update(
            {"action": "redirect", "location": decision.location, "status": decision.status}
        )
    else:
        response["action"] = "continue"
    return jsonify(response), 200


__all__ = ["blueprint"]
