"""Integration tests for the translation service extension points."""

from __future__ import annotations

from http import HTTPStatus

import pytest
from flask.testing import FlaskClient

from translation_exclusions.backend.app.services.options import InMemoryOptionStore


@pytest.fixture()
def exclude_products(options: InMemoryOptionStore, client: FlaskClient) -> None:
    # The app fixture registers the sanitiser, so this write is filtered too.
    options.set("exclude_post_types", ["product"])


@pytest.mark.usefixtures("exclude_products")
def test_excluded_translation_redirects_to_original_url(client: FlaskClient) -> None:
    response = client.post(
        "/api/v1/translation/check",
        json={"url": "https://shop.test/fr/shop/espresso-cup?ref=mail"},
    )

    assert response.status_code == HTTPStatus.OK
    assert response.get_json() == {
        "entity_id": "10",
        "current_language": "fr",
        "original_language": "en",
        "action": "redirect",
        "location": "https://shop.test/shop/espresso-cup?ref=mail",
        "status": 302,
    }


@pytest.mark.usefixtures("exclude_products")
def test_excluded_content_in_original_language_continues(client: FlaskClient) -> None:
    response = client.post(
        "/api/v1/translation/check", json={"url": "https://shop.test/shop/espresso-cup"}
    )

    assert response.get_json()["action"] == "continue"


@pytest.mark.usefixtures("exclude_products")
def test_other_categories_continue_and_stay_eligible(client: FlaskClient) -> None:
    check = client.post("/api/v1/translation/check", json={"url": "https://shop.test/de/about"})
    assert check.get_json()["action"] == "continue"

    eligibility = client.post(
        "/api/v1/translation/eligibility",
        json={"url": "https://shop.test/de/about", "eligible": True},
    )
    assert eligibility.get_json() == {"entity_id": "2", "eligible": True}


@pytest.mark.usefixtures("exclude_products")
def test_excluded_category_is_not_eligible(client: FlaskClient) -> None:
    by_url = client.post(
        "/api/v1/translation/eligibility", json={"url": "https://shop.test/shop/espresso-cup"}
    )
    by_id = client.post("/api/v1/translation/eligibility", json={"entity_id": 10, "eligible": True})

    assert by_url.get_json()["eligible"] is False
    assert by_id.get_json()["eligible"] is False


@pytest.mark.usefixtures("exclude_products")
def test_eligibility_never_widens(client: FlaskClient) -> None:
    response = client.post(
        "/api/v1/translation/eligibility", json={"entity_id": "2", "eligible": False}
    )

    assert response.get_json()["eligible"] is False


@pytest.mark.usefixtures("exclude_products")
def test_unknown_entities_fail_open(client: FlaskClient) -> None:
    eligibility = client.post(
        "/api/v1/translation/eligibility", json={"url": "https://shop.test/fr/no-such-page"}
    )
    check = client.post(
        "/api/v1/translation/check", json={"url": "https://shop.test/fr/no-such-page"}
    )

    assert eligibility.get_json() == {"entity_id": None, "eligible": True}
    assert check.get_json()["action"] == "continue"


def test_fresh_install_is_pass_through(client: FlaskClient) -> None:
    for url in ("https://shop.test/fr/hello-world", "https://shop.test/fr/shop/espresso-cup"):
        check = client.post("/api/v1/translation/check", json={"url": url})
        eligibility = client.post("/api/v1/translation/eligibility", json={"url": url})

        assert check.get_json()["action"] == "continue"
        assert eligibility.get_json()["eligible"] is True


def test_check_requires_url(client: FlaskClient) -> None:
    response = client.post("/api/v1/translation/check", json={"entity_id": "10"})

    assert response.status_code == HTTPStatus.BAD_REQUEST
    assert response.get_json()["message"] == "'url' is required"


def test_eligibility_rejects_non_boolean_flags(client: FlaskClient) -> None:
    response = client.post(
        "/api/v1/translation/eligibility", json={"entity_id": "10", "eligible": "yes"}
    )

    assert response.status_code == HTTPStatus.BAD_REQUEST


def test_endpoints_reject_non_json_bodies(client: FlaskClient) -> None:
    response = client.post("/api/v1/translation/check", data="url=/fr/about")

    assert response.status_code == HTTPStatus.BAD_REQUEST
    assert response.get_json()["error"] == "bad_request"


@pytest.mark.usefixtures("exclude_products")
def test_malformed_urls_pass_through(client: FlaskClient) -> None:
    url = "http://[broken/fr/shop/espresso-cup"

    eligibility = client.post(
        "/api/v1/translation/eligibility", json={"url": url, "eligible": True}
    )
    check = client.post("/api/v1/translation/check", json={"url": url})

    assert eligibility.status_code == HTTPStatus.OK
    assert eligibility.get_json() == {"entity_id": None, "eligible": True}
    assert check.status_code == HTTPStatus.OK
    assert check.get_json() == {
        "entity_id": None,
        "current_language": "en",
        "original_language": "en",
        "action": "continue",
    }


@pytest.mark.usefixtures("exclude_products")
def test_malformed_url_with_explicit_entity_still_continues(client: FlaskClient) -> None:
    response = client.post(
        "/api/v1/translation/check",
        json={"url": "http://[broken/fr/shop/espresso-cup", "entity_id": "10"},
    )

    assert response.status_code == HTTPStatus.OK
    assert response.get_json()["action"] == "continue"
