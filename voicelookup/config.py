"""Configuration model and loaders for voicelookup.

Responsibilities:
- Define runtime configuration as a typed dataclass.
- Provide loader entry points for file- and environment-based configuration.
- Resolve the effective locale profile for a deployment.

Key types:
- `LookupConfig`: normalized runtime settings for catalog lookups.
- `ConfigLoader`: static construction helpers for `LookupConfig`.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from .parsing import normalize_optional_string, parse_glyph_list, parse_permissive_boolean
from .text.locales import DEFAULT_LOCALE, LocaleProfile, get_locale_profile


@dataclass(slots=True)
class LookupConfig:
    """Runtime configuration for catalog lookups.

    Attributes:
        catalog_path: JSON catalog path, or `None` for the bundled catalog.
        locale: Locale code selecting normalization and morphology rules.
        doubled_glyphs: Optional per-deployment override of collapsed glyphs.
        log_stages: Whether CLI commands emit stage log lines.
    """

    catalog_path: Path | None = None
    locale: str = DEFAULT_LOCALE
    doubled_glyphs: tuple[str, ...] | None = None
    log_stages: bool = True

    def validate(self) -> None:
        """Validate runtime configuration values before any lookup."""

        self.locale_profile().normalizer()

    def locale_profile(self) -> LocaleProfile:
        """Return the registered locale profile with deployment overrides applied."""

        profile = get_locale_profile(self.locale)
        if self.doubled_glyphs is not None:
            return profile.with_doubled_glyphs(self.doubled_glyphs)
        return profile


class ConfigLoader:
    """Factory methods for creating `LookupConfig` from external sources."""

    _SUPPORTED_YAML_KEYS = frozenset(
        {
            "catalog_path",
            "locale",
            "doubled_glyphs",
            "log_stages",
        }
    )

    @staticmethod
    def from_yaml(path: Path) -> LookupConfig:
        """Create a validated config from a YAML file.

        Relative `catalog_path` values resolve against the config file directory.
        """

        path_text = path.read_text(encoding="utf-8")
        payload = ConfigLoader._parse_yaml_payload(path_text, path)
        config = ConfigLoader._build_config_from_mapping(payload, source_label=f"YAML `{path}`")
        if config.catalog_path is not None and not config.catalog_path.is_absolute():
            config.catalog_path = path.parent / config.catalog_path
        return config

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> LookupConfig:
        """Create a validated config from environment variables."""

        env_map: Mapping[str, str] = os.environ if env is None else env

        catalog_value = ConfigLoader._optional_env_string(env_map, "VOICELOOKUP_CATALOG")
        locale = ConfigLoader._optional_env_string(env_map, "VOICELOOKUP_LOCALE") or DEFAULT_LOCALE
        glyph_value = ConfigLoader._optional_env_string(env_map, "VOICELOOKUP_DOUBLED_GLYPHS")
        log_stages = ConfigLoader._optional_env_boolean(env_map, "VOICELOOKUP_LOG_STAGES")

        try:
            doubled_glyphs = parse_glyph_list(glyph_value) if glyph_value is not None else None
        except ValueError as exc:
            raise ValueError(f"Environment variable `VOICELOOKUP_DOUBLED_GLYPHS`: {exc}") from exc

        config = LookupConfig(
            catalog_path=Path(catalog_value) if catalog_value is not None else None,
            locale=locale.lower(),
            doubled_glyphs=doubled_glyphs,
            log_stages=True if log_stages is None else log_stages,
        )
        config.validate()
        return config

    @staticmethod
    def _parse_yaml_payload(raw_text: str, path: Path) -> Mapping[str, Any]:
        """Parse YAML text and enforce a mapping root payload."""

        try:
            payload = yaml.safe_load(raw_text)
        except yaml.YAMLError as exc:
            raise ValueError(f"YAML config `{path}` could not be parsed: {exc}") from exc

        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"YAML config `{path}` must contain a top-level mapping/object.")
        return payload

    @staticmethod
    def _build_config_from_mapping(payload: Mapping[str, Any], source_label: str) -> LookupConfig:
        """Build a validated config from a normalized mapping payload."""

        ConfigLoader._validate_yaml_keys(payload, source_label)

        catalog_value = normalize_optional_string(payload.get("catalog_path"))
        locale = normalize_optional_string(payload.get("locale")) or DEFAULT_LOCALE
        doubled_glyphs = ConfigLoader._optional_glyphs(payload, "doubled_glyphs", source_label)
        log_stages = ConfigLoader._optional_boolean(
            payload, "log_stages", source_label, default=True
        )

        config = LookupConfig(
            catalog_path=Path(catalog_value) if catalog_value is not None else None,
            locale=locale.lower(),
            doubled_glyphs=doubled_glyphs,
            log_stages=log_stages,
        )
        try:
            config.validate()
        except ValueError as exc:
            raise ValueError(f"{source_label}: {exc}") from exc
        return config

    @staticmethod
    def _validate_yaml_keys(payload: Mapping[str, Any], source_label: str) -> None:
        """Reject unknown keys so typos do not silently fall back to defaults."""

        unknown = sorted(str(key) for key in payload if key not in ConfigLoader._SUPPORTED_YAML_KEYS)
        if unknown:
            key_list = ", ".join(unknown)
            raise ValueError(f"{source_label} includes unsupported key(s): {key_list}.")

    @staticmethod
    def _optional_glyphs(
        payload: Mapping[str, Any], key: str, source_label: str
    ) -> tuple[str, ...] | None:
        """Read an optional glyph list given as a sequence or comma-separated string."""

        raw = payload.get(key)
        if raw is None:
            return None
        try:
            return parse_glyph_list(raw)
        except ValueError as exc:
            raise ValueError(f"{source_label} field `{key}`: {exc}") from exc

    @staticmethod
    def _optional_boolean(
        payload: Mapping[str, Any], key: str, source_label: str, *, default: bool
    ) -> bool:
        """Read an optional boolean field with permissive textual tokens."""

        if key not in payload or payload.get(key) is None:
            return default
        parsed = parse_permissive_boolean(payload.get(key))
        if parsed is None:
            raise ValueError(
                f"{source_label} field `{key}` must be a boolean value "
                "(`true`/`false`, `1`/`0`, `yes`/`no`)."
            )
        return parsed

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
