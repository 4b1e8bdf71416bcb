"""Admin settings page and the generic option-handling endpoint."""

from __future__ import annotations

import logging
from http import HTTPStatus

from flask import Blueprint, Response, redirect, request, url_for
from werkzeug.exceptions import BadRequest

from translation_exclusions.backend.app.context import get_context
from translation_exclusions.backend.app.http import problem_response
from translation_exclusions.backend.app.localization import get_translator
from translation_exclusions.backend.app.security import (
    MANAGE_OPTIONS,
    create_nonce,
    require_capability,
    verify_nonce,
)
from translation_exclusions.backend.app.services.admin_form import (
    NONCE_FIELD,
    OPTION_PAGE_FIELD,
    AdminNotice,
    checkbox_field_name,
    handle_submit,
    render_admin_page,
)
from translation_exclusions.backend.services import resolve_request_locale

blueprint = Blueprint("admin", __name__, url_prefix="/admin")

logger = logging.getLogger(__name__)

SETTINGS_UPDATED_PARAM = "settings-updated"


@blueprint.get("/settings/exclude-post-types")
@require_capability(MANAGE_OPTIONS)
def settings_page() -> Response:
    """Render the exclusion settings form."""

    context = get_context()
    translator = get_translator(resolve_request_locale(request))

    notices: list[AdminNotice] = []
    if context.dependency_notice is not None:
        notices.append(context.dependency_notice)
    if request.args.get(SETTINGS_UPDATED_PARAM) == "true":
        notices.append(AdminNotice(level="success", message_key="notice.settings_saved"))

    html = render_admin_page(
        current=context.store.load(),
        catalog=context.registry.list_registered_categories(),
        option_key=context.config.option_key,
        option_group=context.config.option_group,
        action=url_for("admin.update_options"),
        nonce=create_nonce(context.config.option_group),
        translator=translator,
        notices=notices,
    )
    return Response(html, mimetype="text/html")


@blueprint.post("/options")
@require_capability(MANAGE_OPTIONS)
def update_options():
    """Persist a settings form submission and return to the settings page."""

    context = get_context()
    option_group = context.config.option_group

    if request.form.get(OPTION_PAGE_FIELD) != option_group:
        raise BadRequest("Unknown option page")

    if not verify_nonce(request.form.get(NONCE_FIELD), option_group):
        return problem_response(
            "invalid_nonce",
            status=HTTPStatus.FORBIDDEN,
            message="The link you followed has expired",
        ).to_response()

    field = checkbox_field_name(context.config.option_key)
    # Browsers omit the field entirely when every checkbox is cleared.
    raw_input = request.form.getlist(field) if field in request.form else None

    exclusions = handle_submit(context.store, raw_input)
    logger.info("Exclusion settings updated: %s", ", ".join(exclusions) or "(none)")

    target = url_for("admin.settings_page", **{SETTINGS_UPDATED_PARAM: "true"})
    return redirect(target, code=HTTPStatus.SEE_OTHER)


__all__ = ["blueprint"]
