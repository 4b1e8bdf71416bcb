"""Request helpers shared by the API blueprints."""

from .request_parser import optional_string, parse_json_payload, resolve_request_locale

__all__ = [
    "optional_string",
    "parse_json_payload",
    "resolve_request_locale",
]
