"""Utilities for validating site configuration data and surfacing issues."""

from __future__ import annotations

import argparse
from collections import Counter
from typing import Sequence

from .site_config import (
    ConfigurationError,
    ContentEntry,
    LanguageConfig,
    SiteConfiguration,
    load_site_configuration,
)


def _format_scope(scope: str, message: str) -> str:
    return f"{scope}: {message}"


def _duplicates(values: Sequence[str]) -> list[str]:
    return sorted(value for value, count in Counter(values).items() if count > 1)


def _validate_categories(categories: Sequence[str]) -> list[str]:
    errors: list[str] = []

    if not categories:
        errors.append(_format_scope("categories", "no categories registered"))
        return errors

    duplicates = _duplicates(categories)
    if duplicates:
        errors.append(
            _format_scope("categories", f"duplicate categories detected: {duplicates}")
        )

    return errors


def _validate_content(
    content: Sequence[ContentEntry], categories: Sequence[str]
) -> list[str]:
    errors: list[str] = []
    registered = set(categories)

    duplicate_ids = _duplicates([entry.id for entry in content])
    if duplicate_ids:
        errors.append(_format_scope("content", f"duplicate content ids: {duplicate_ids}"))

    duplicate_paths = _duplicates([entry.path for entry in content])
    if duplicate_paths:
        errors.append(
            _format_scope("content", f"duplicate content paths: {duplicate_paths}")
        )

    for entry in content:
        if entry.category not in registered:
            errors.append(
                _format_scope(
                    f"content[{entry.id}]",
                    f"category '{entry.category}' is not registered",
                )
            )

    return errors


def _validate_languages(languages: LanguageConfig) -> list[str]:
    errors: list[str] = []

    if languages.original in languages.destinations:
        errors.append(
            _format_scope(
                "languages",
                "the original language must not be listed as a destination",
            )
        )

    duplicates = _duplicates(languages.destinations)
    if duplicates:
        errors.append(
            _format_scope("languages", f"duplicate destination languages: {duplicates}")
        )

    return errors


def validate_site_configuration(config: SiteConfiguration) -> list[str]:
    """Return a list of human-readable validation errors for ``config``."""

    errors: list[str] = []

    errors.extend(_validate_categories(config.categories))
    errors.extend(_validate_content(config.content, config.categories))
    errors.extend(_validate_languages(config.languages))

    return errors


def _build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Validate the site configuration and report issues helpful to operators."
    )
    parser.add_argument(
        "paths",
        nargs="*",
        help="Configuration files to validate (defaults to the active configuration)",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for running validations from the command line."""

    parser = _build_argument_parser()
    args = parser.parse_args(argv)
    targets: list[str | None] = list(args.paths) or [None]

    exit_code = 0

    for target in targets:
        label = target or "active configuration"
        try:
            config = load_site_configuration(target)
        except (FileNotFoundError, ConfigurationError) as error:
            print(f"[{label}] failed to load configuration: {error}")
            exit_code = 1
            continue

        issues = validate_site_configuration(config)
        if issues:
            exit_code = 1
            print(f"[{label}] {len(issues)} issue(s) detected:")
            for issue in issues:
                print(f"  - {issue}")
        else:
            print(f"[{label}] OK")

    return exit_code


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    raise SystemExit(main())
