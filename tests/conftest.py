"""Test configuration utilities and shared fixtures."""

import base64
import sys
from pathlib import Path

# Ensure the ``src`` directory is importable when tests are executed without an
# editable install.
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

import pytest  # noqa: E402
from flask import Flask  # noqa: E402
from flask.testing import FlaskClient  # noqa: E402

from translation_exclusions.backend.app import create_app  # noqa: E402
from translation_exclusions.backend.app.services.options import InMemoryOptionStore  # noqa: E402
from translation_exclusions.backend.config.schema import SiteConfiguration  # noqa: E402

ADMIN_TOKEN = "test-admin-token"

SITE_CONFIG = {
    "option_key": "exclude_post_types",
    "option_group": "exclude_post_types",
    "legacy_option_keys": ["weglot_exclude_post_types", "udwlept_post_types"],
    "categories": ["post", "page", "product"],
    "content": [
        {"id": 1, "category": "post", "path": "/hello-world"},
        {"id": 2, "category": "page", "path": "/about"},
        {"id": 10, "category": "product", "path": "/shop/espresso-cup"},
        {"id": 99, "category": "revision", "path": "/drafts/old"},
    ],
    "languages": {"original": "en", "destinations": ["fr", "de"]},
    "translation_service": {"name": "Weglot", "active": True},
}


@pytest.fixture()
def site_config() -> SiteConfiguration:
    """Return a small, deterministic site configuration."""

    return SiteConfiguration.model_validate(SITE_CONFIG)


@pytest.fixture()
def options() -> InMemoryOptionStore:
    return InMemoryOptionStore()


@pytest.fixture()
def app(site_config: SiteConfiguration, options: InMemoryOptionStore) -> Flask:
    """Return a configured Flask application for integration tests."""

    application = create_app(site_config, options)
    application.config.update(TESTING=True, ADMIN_TOKEN=ADMIN_TOKEN)
    return application


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    """Provide a test client bound to the configured Flask app."""

    return app.test_client()


@pytest.fixture()
def admin_headers() -> dict[str, str]:
    """Bearer credentials granting the admin capability."""

    return {"Authorization": f"Bearer {ADMIN_TOKEN}"}


@pytest.fixture()
def basic_admin_headers() -> dict[str, str]:
    """Basic-auth credentials as a browser would send them."""

    encoded = base64.b64encode(f"admin:{ADMIN_TOKEN}".encode()).decode()
    return {"Authorization": f"Basic {encoded}"}
