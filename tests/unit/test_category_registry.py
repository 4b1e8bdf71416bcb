"""Unit coverage for category lookups and language resolution."""

from __future__ import annotations

import pytest

from translation_exclusions.backend.app.services.category_registry import (
    ConfiguredCategoryRegistry,
)
from translation_exclusions.backend.app.services.language import (
    resolve_language_state,
    split_language_prefix,
)
from translation_exclusions.backend.config.schema import SiteConfiguration


@pytest.fixture()
def registry(site_config: SiteConfiguration) -> ConfiguredCategoryRegistry:
    return ConfiguredCategoryRegistry.from_configuration(site_config)


def test_catalog_keeps_configured_order(registry: ConfiguredCategoryRegistry) -> None:
    assert registry.list_registered_categories() == ("post", "page", "product")


def test_catalog_drops_duplicate_categories() -> None:
    registry = ConfiguredCategoryRegistry(["post", "page", "post"])

    assert registry.list_registered_categories() == ("post", "page")


def test_resolve_category_of(registry: ConfiguredCategoryRegistry) -> None:
    assert registry.resolve_category_of("10") == "product"
    assert registry.resolve_category_of("99") == "revision"
    assert registry.resolve_category_of("12345") is None


@pytest.mark.parametrize(
    ("url", "expected"),
    [
        ("https://example.test/about", "2"),
        ("https://example.test/about/", "2"),
        ("https://example.test/fr/about", "2"),
        ("https://example.test/de/shop/espresso-cup?ref=mail", "10"),
        ("/hello-world", "1"),
        ("https://example.test/es/about", None),
        ("https://example.test/", None),
    ],
)
def test_resolve_entity_from_url(
    registry: ConfiguredCategoryRegistry, url: str, expected: str | None
) -> None:
    assert registry.resolve_entity_from_url(url) == expected


def test_split_language_prefix() -> None:
    assert split_language_prefix("/fr/about", ["fr"]) == ("fr", "/about")
    assert split_language_prefix("/FR", ["fr"]) == ("fr", "/")
    assert split_language_prefix("/about", ["fr"]) == (None, "/about")
    assert split_language_prefix("/france", ["fr"]) == (None, "/france")
    assert split_language_prefix("", ["fr"]) == (None, "/")


def test_resolve_language_state_for_translated_url(site_config: SiteConfiguration) -> None:
    state = resolve_language_state(
        "https://example.test/fr/shop/espresso-cup?ref=mail", site_config.languages
    )

    assert state.current_language == "fr"
    assert state.original_language == "en"
    assert state.original_url == "https://example.test/shop/espresso-cup?ref=mail"
    assert not state.is_original


def test_resolve_language_state_for_original_url(site_config: SiteConfiguration) -> None:
    state = resolve_language_state("https://example.test/about", site_config.languages)

    assert state.current_language == "en"
    assert state.is_original
    assert state.original_url == "https://example.test/about"


def test_resolve_entity_from_malformed_url(registry: ConfiguredCategoryRegistry) -> None:
    assert registry.resolve_entity_from_url("http://[broken/fr/about") is None


def test_resolve_language_state_for_malformed_url(site_config: SiteConfiguration) -> None:
    state = resolve_language_state("http://[broken/fr/about", site_config.languages)

    assert state.is_original
    assert state.original_url == "http://[broken/fr/about"
