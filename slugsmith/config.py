"""Configuration model and loaders for slugsmith.

Responsibilities:
- Define slug binding settings as a typed dataclass.
- Provide loader entry points for YAML- and environment-based configuration.

Key types:
- `SlugConfig`: which fields to bind and whether uniqueness is enforced.
- `ConfigLoader`: static construction helpers for `SlugConfig`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from .parsing import (
    normalize_optional_string,
    parse_permissive_boolean,
    parse_positive_int,
)


_DEFAULT_FROM_FIELD = "title"
_DEFAULT_TO_FIELD = "alias"


@dataclass(slots=True)
class SlugConfig:
    """Settings for one slug binding.

    Attributes:
        from_field: Record field holding the human-readable source text.
        to_field: Record field receiving the slug.
        validate_unique: Whether collisions are resolved with a `-N` suffix.
        max_attempts: Optional bound on taken candidates before failing.
        extra: Additional metadata for integrations.
    """

    from_field: str = _DEFAULT_FROM_FIELD
    to_field: str = _DEFAULT_TO_FIELD
    validate_unique: bool = True
    max_attempts: int | None = None
    extra: dict[str, str] = field(default_factory=dict)

    def validate(self) -> None:
        """Validate field names and the optional attempt bound."""

        self._require_field_name(self.from_field, "from_field")
        self._require_field_name(self.to_field, "to_field")
        if self.from_field == self.to_field:
            raise ValueError("`from_field` and `to_field` must name different fields.")
        if self.max_attempts is not None:
            parse_positive_int(self.max_attempts, "max_attempts")

    @staticmethod
    def _require_field_name(value: str, field_name: str) -> None:
        """Validate that a field name is a usable Python identifier."""

        if not isinstance(value, str) or not value.isidentifier():
            raise ValueError(f"`{field_name}` must be a valid field name, got `{value}`.")


class ConfigLoader:
    """Factory methods for creating `SlugConfig` from external sources."""

    _SUPPORTED_YAML_KEYS = frozenset(
        {
            "from_field",
            "to_field",
            "validate_unique",
            "max_attempts",
            "extra",
        }
    )
    ENV_KEYS = frozenset(
        {
            "SLUGSMITH_FROM_FIELD",
            "SLUGSMITH_TO_FIELD",
            "SLUGSMITH_VALIDATE_UNIQUE",
            "SLUGSMITH_MAX_ATTEMPTS",
        }
    )

    @staticmethod
    def from_yaml(path: Path) -> SlugConfig:
        """Create a validated config from a YAML file."""

        path_text = path.read_text(encoding="utf-8")
        payload = ConfigLoader._parse_yaml_payload(path_text, path)
        return ConfigLoader._build_config_from_mapping(payload, source_label=f"YAML `{path}`")

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> SlugConfig:
        """Create a validated config from environment variables."""

        env_map: Mapping[str, str] = os.environ if env is None else env

        from_field = (
            ConfigLoader._optional_env_string(env_map, "SLUGSMITH_FROM_FIELD")
            or _DEFAULT_FROM_FIELD
        )
        to_field = (
            ConfigLoader._optional_env_string(env_map, "SLUGSMITH_TO_FIELD")
            or _DEFAULT_TO_FIELD
        )
        validate_unique = ConfigLoader._optional_env_boolean(
            env_map, "SLUGSMITH_VALIDATE_UNIQUE"
        )
        max_attempts_raw = ConfigLoader._optional_env_string(env_map, "SLUGSMITH_MAX_ATTEMPTS")
        max_attempts = None
        if max_attempts_raw is not None:
            try:
                max_attempts = parse_positive_int(max_attempts_raw, "max_attempts")
            except ValueError as exc:
                raise ValueError(
                    "Environment variable `SLUGSMITH_MAX_ATTEMPTS` must be a positive integer."
                ) from exc

        config = SlugConfig(
            from_field=from_field,
            to_field=to_field,
            validate_unique=True if validate_unique is None else validate_unique,
            max_attempts=max_attempts,
        )
        config.validate()
        return config

    @staticmethod
    def merge_env(config: SlugConfig, env: Mapping[str, str] | None = None) -> SlugConfig:
        """Overlay explicitly set environment values onto an existing config."""

        env_map: Mapping[str, str] = os.environ if env is None else env
        if not any(key in env_map for key in ConfigLoader.ENV_KEYS):
            return config

        overlay = ConfigLoader.from_env(env_map)
        merged = SlugConfig(
            from_field=overlay.from_field if "SLUGSMITH_FROM_FIELD" in env_map else config.from_field,
            to_field=overlay.to_field if "SLUGSMITH_TO_FIELD" in env_map else config.to_field,
            validate_unique=(
                overlay.validate_unique
                if "SLUGSMITH_VALIDATE_UNIQUE" in env_map
                else config.validate_unique
            ),
            max_attempts=(
                overlay.max_attempts
                if "SLUGSMITH_MAX_ATTEMPTS" in env_map
                else config.max_attempts
            ),
            extra=dict(config.extra),
        )
        merged.validate()
        return merged

    @staticmethod
    def _parse_yaml_payload(raw_text: str, path: Path) -> Mapping[str, Any]:
        """Parse YAML text and enforce a mapping root payload."""

        payload = yaml.safe_load(raw_text)
        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"YAML config `{path}` must contain a top-level mapping/object.")
        return payload

    @staticmethod
    def _build_config_from_mapping(payload: Mapping[str, Any], source_label: str) -> SlugConfig:
        """Build a validated config from a normalized mapping payload."""

        unknown = sorted(set(payload).difference(ConfigLoader._SUPPORTED_YAML_KEYS))
        if unknown:
            key_list = ", ".join(str(key) for key in unknown)
            raise ValueError(f"{source_label} includes unsupported key(s): {key_list}.")

        from_field = (
            ConfigLoader._optional_non_empty_string(payload, "from_field") or _DEFAULT_FROM_FIELD
        )
        to_field = ConfigLoader._optional_non_empty_string(payload, "to_field") or _DEFAULT_TO_FIELD
        validate_unique = ConfigLoader._optional_boolean(
            payload,
            "validate_unique",
            source_label,
            default=True,
        )
        max_attempts = ConfigLoader._optional_positive_int(payload, "max_attempts", source_label)
        extra = ConfigLoader._optional_string_map(payload, "extra", source_label)

        config = SlugConfig(
            from_field=from_field,
            to_field=to_field,
            validate_unique=validate_unique,
            max_attempts=max_attempts,
            extra=extra,
        )
        config.validate()
        return config

    @staticmethod
    def _optional_non_empty_string(payload: Mapping[str, Any], key: str) -> str | None:
        """Read an optional string field and normalize blank values to `None`."""

        if key not in payload:
            return None
        return normalize_optional_string(payload[key])

    @staticmethod
    def _optional_positive_int(
        payload: Mapping[str, Any], key: str, source_label: str
    ) -> int | None:
        """Read an optional positive integer field; blank or null means unset."""

        if key not in payload:
            return None
        raw_value = payload[key]
        if raw_value is None or (
            not isinstance(raw_value, (bool, int)) and normalize_optional_string(raw_value) is None
        ):
            return None
        try:
            return parse_positive_int(raw_value, key)
        except ValueError as exc:
            raise ValueError(
                f"{source_label} field `{key}` must be a positive integer."
            ) from exc

    @staticmethod
    def _optional_boolean(
        payload: Mapping[str, Any], key: str, source_label: str, default: bool
    ) -> bool:
        """Read and validate a boolean field from a payload."""

        if key not in payload:
            return default

        parsed = parse_permissive_boolean(payload[key])
        if parsed is None:
            raise ValueError(
                f"{source_label} field `{key}` must be a boolean value "
                "(`true`/`false`, `1`/`0`, `yes`/`no`)."
            )
        return parsed

    @staticmethod
    def _optional_string_map(
        payload: Mapping[str, Any], key: str, source_label: str
    ) -> dict[str, str]:
        """Read an optional mapping with non-empty string keys and values."""

        if key not in payload:
            return {}

        raw = payload[key]
        if raw is None:
            return {}
        if not isinstance(raw, Mapping):
            raise ValueError(f"{source_label} field `{key}` must be a mapping/object.")

        normalized: dict[str, str] = {}
        for raw_key, raw_value in raw.items():
            key_value = normalize_optional_string(raw_key)
            value_value = normalize_optional_string(raw_value)
            if key_value is None:
                raise ValueError(f"{source_label} field `{key}` contains a blank key.")
            if value_value is None:
                raise ValueError(
                    f"{source_label} field `{key}` contains blank value for `{key_value}`."
                )
            normalized[key_value] = value_value
        return normalized

    @staticmethod
    def _optional_env_string(env: Mapping[str, str], key: str) -> str | None:
        """Read and normalize optional string environment variable values."""

        if key not in env:
            return None
        return normalize_optional_string(env.get(key))

    @staticmethod
    def _optional_env_boolean(env: Mapping[str, str], key: str) -> bool | None:
        """Read an optional boolean from environment mapping."""

        if key not in env:
            return None
        parsed = parse_permissive_boolean(env.get(key))
        if parsed is None:
            raise ValueError(
                f"Environment variable `{key}` must be a boolean value "
                "(`true`/`false`, `1`/`0`, `yes`/`no`)."
            )
        return parsed
