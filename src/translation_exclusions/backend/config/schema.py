"""Pydantic models describing the site configuration schema."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from typing_extensions import Self


class ConfigurationError(ValueError):
    """Raised when configuration values violate schema expectations."""


class ImmutableModel(BaseModel):
    """Base class that freezes instances and rejects unknown fields."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)


def _normalise_identifier(value: Any, *, label: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{label} must be a string")
    normalised = value.strip()
    if not normalised:
        raise ConfigurationError(f"{label} must not be empty")
    return normalised


class ContentEntry(ImmutableModel):
    """A published content entity and the category it belongs to."""

    id: str
    category: str
    path: str

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> str:
        # YAML happily parses ``id: 42`` as an integer.
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return _normalise_identifier(value, label="Content ids")

    @field_validator("category", mode="before")
    @classmethod
    def _validate_category(cls, value: Any) -> str:
        return _normalise_identifier(value, label="Content categories")

    @field_validator("path", mode="before")
    @classmethod
    def _normalise_path(cls, value: Any) -> str:
        path = _normalise_identifier(value, label="Content paths")
        if not path.startswith("/"):
            path = f"/{path}"
        if len(path) > 1:
            path = path.rstrip("/")
        return path


class LanguageConfig(ImmutableModel):
    """Original language of the site plus the translated destinations."""

    original: str
    destinations: tuple[str, ...] = ()

    @field_validator("original", mode="before")
    @classmethod
    def _normalise_original(cls, value: Any) -> str:
        return _normalise_identifier(value, label="Original language").lower()

    @field_validator("destinations", mode="before")
    @classmethod
    def _normalise_destinations(cls, value: Any) -> tuple[str, ...]:
        if value is None:
            return ()
        if not isinstance(value, (list, tuple)):
            raise ConfigurationError("Destination languages must be a list")
        return tuple(
            _normalise_identifier(item, label="Destination languages").lower()
            for item in value
        )


class TranslationServiceConfig(ImmutableModel):
    """Describes the translation service whose extension points are filtered."""

    name: str = "Weglot"
    module: str | None = None
    active: bool = True


class SiteConfiguration(ImmutableModel):
    """Top-level configuration for the exclusion service."""

    option_key: str = "exclude_post_types"
    legacy_option_keys: tuple[str, ...] = ()
    option_group: str = "exclude_post_types"
    categories: tuple[str, ...] = Field(default_factory=tuple)
    content: tuple[ContentEntry, ...] = ()
    languages: LanguageConfig
    translation_service: TranslationServiceConfig = Field(
        default_factory=TranslationServiceConfig
    )

    @field_validator("option_key", "option_group", mode="before")
    @classmethod
    def _validate_option_names(cls, value: Any) -> str:
        return _normalise_identifier(value, label="Option names")

    @field_validator("categories", "legacy_option_keys", mode="before")
    @classmethod
    def _coerce_identifier_lists(cls, value: Any) -> tuple[str, ...]:
        if value is None:
            return ()
        if not isinstance(value, (list, tuple)):
            raise ConfigurationError("Identifier lists must be sequences")
        return tuple(_normalise_identifier(item, label="Identifiers") for item in value)

    @model_validator(mode="after")
    def _validate_option_keys(self) -> Self:
        if self.option_key in self.legacy_option_keys:
            raise ConfigurationError(
                "The primary option key must not also be listed as a legacy key"
            )
        return self


__all__ = [
    "ConfigurationError",
    "ContentEntry",
    "ImmutableModel",
    "LanguageConfig",
    "SiteConfiguration",
    "TranslationServiceConfig",
]
