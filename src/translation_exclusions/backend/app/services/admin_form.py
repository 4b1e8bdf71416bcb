"""Rendering and submission handling for the exclusion settings page."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Sequence

from markupsafe import escape

from translation_exclusions.backend.app.localization import Translator

from .settings_store import ExclusionSet, SettingsStore

NONCE_FIELD = "_nonce"
OPTION_PAGE_FIELD = "option_page"


@dataclass(frozen=True)
class AdminNotice:
    """Message shown at the top of admin pages."""

    level: str
    message_key: str
    params: Mapping[str, Any] = field(default_factory=dict)

    def message(self, translator: Translator) -> str:
        return translator(self.message_key, **self.params)


def checkbox_field_name(option_key: str) -> str:
    """Name of the repeated form field carrying the selected categories."""

    return f"{option_key}[]"


def _render_notices(notices: Iterable[AdminNotice], translator: Translator) -> str:
    return "".join(
        f'<div class="notice notice-{escape(notice.level)}">'
        f"<p>{escape(notice.message(translator))}</p></div>"
        for notice in notices
    )


def _render_checkboxes(
    current: ExclusionSet,
    catalog: Sequence[str],
    option_key: str,
    translator: Translator,
) -> str:
    if not catalog:
        return f"<p>{escape(translator('admin.no_categories'))}</p>"

    name = escape(checkbox_field_name(option_key))
    rows = []
    for category in catalog:
        checked = ' checked="checked"' if category in current else ""
        rows.append(
            f'<label><input type="checkbox" name="{name}" value="{escape(category)}"{checked}> '
            f"{escape(category)}</label><br>"
        )
    return "\n".join(rows)


def render_admin_page(
    *,
    current: ExclusionSet,
    catalog: Sequence[str],
    option_key: str,
    option_group: str,
    action: str,
    nonce: str,
    translator: Translator,
    notices: Sequence[AdminNotice] = (),
) -> str:
    """Return the settings page markup with one checkbox per catalog entry."""

    checkboxes = _render_checkboxes(current, catalog, option_key, translator)

    return f"""<!DOCTYPE html>
<html lang="{escape(translator.locale)}">
  <head>
    <meta charset="utf-8" />
    <title>{escape(translator('admin.page_title'))}</title>
  </head>
  <body>
    <div class="wrap">
      <h2>{escape(translator('admin.heading'))}</h2>
      {_render_notices(notices, translator)}
      <form method="post" action="{escape(action)}">
        <input type="hidden" name="{OPTION_PAGE_FIELD}" value="{escape(option_group)}">
        <input type="hidden" name="{NONCE_FIELD}" value="{escape(nonce)}">
        <table class="form-table">
          <tr valign="top">
            <th scope="row">{escape(translator('admin.excluded_label'))}</th>
            <td>
{checkboxes}
            </td>
          </tr>
        </table>
        <p class="submit"><input type="submit" name="submit" class="button button-primary" value="{escape(translator('admin.submit'))}"></p>
      </form>
    </div>
  </body>
</html>"""


def handle_submit(store: SettingsStore, raw_input: Any) -> ExclusionSet:
    """Persist a submitted selection; sanitising is left to the store."""

    return store.save(raw_input)


__all__ = [
    "AdminNotice",
    "NONCE_FIELD",
    "OPTION_PAGE_FIELD",
    "checkbox_field_name",
    "handle_submit",
    "render_admin_page",
]
