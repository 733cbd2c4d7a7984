"""Configuration model and loaders for rfcreader.

Responsibilities:
- Define runtime configuration as a typed dataclass.
- Provide loader entry points for file- and environment-based configuration.

Key types:
- `ReaderConfig`: normalized runtime settings for one fetch-and-normalize run.
- `ConfigLoader`: static construction helpers for `ReaderConfig`.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from .io.archive_client import DEFAULT_ARCHIVE_URL_TEMPLATE, DEFAULT_TIMEOUT_SECONDS
from .parsing import (
    normalize_optional_string,
    parse_permissive_boolean,
    parse_positive_float,
    parse_positive_int,
)

DEFAULT_RFC_NUMBER = 5246


@dataclass(slots=True)
class ReaderConfig:
    """Runtime configuration for one pipeline run.

    Attributes:
        rfc_number: RFC document number to fetch.
        archive_url_template: Archive URL with a `{number}` placeholder.
        timeout_seconds: Fetch timeout in seconds.
        output_dir: Optional directory for written text artifacts.
        save_raw: Whether the unmodified fetched text is stored next to the output.
    """

    rfc_number: int = DEFAULT_RFC_NUMBER
    archive_url_template: str = DEFAULT_ARCHIVE_URL_TEMPLATE
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    output_dir: Path | None = None
    save_raw: bool = False

    def validate(self) -> None:
        """Validate runtime configuration values before pipeline execution."""

        if isinstance(self.rfc_number, bool) or self.rfc_number <= 0:
            raise ValueError("`rfc_number` must be a positive integer.")
        if self.timeout_seconds <= 0:
            raise ValueError("`timeout_seconds` must be a positive number.")
        if "{number}" not in self.archive_url_template:
            raise ValueError("`archive_url_template` must contain a `{number}` placeholder.")


class ConfigLoader:
    """Factory methods for creating `ReaderConfig` from external sources."""

    _SUPPORTED_YAML_KEYS = frozenset(
        {
            "rfc_number",
            "archive_url_template",
            "timeout_seconds",
            "output_dir",
            "save_raw",
        }
    )

    @staticmethod
    def from_yaml(path: Path) -> ReaderConfig:
        """Create a validated config from a YAML file."""

        path_text = path.read_text(encoding="utf-8")
        payload = ConfigLoader._parse_yaml_payload(path_text, path)

        return ConfigLoader._build_config_from_mapping(payload, source_label=f"YAML `{path}`")

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> ReaderConfig:
        """Create a validated config from environment variables."""

        env_map: Mapping[str, str] = os.environ if env is None else env

        rfc_number = ConfigLoader._optional_env_value(
            env_map, "RFCREADER_NUMBER", parse_positive_int
        ) or DEFAULT_RFC_NUMBER
        archive_url_template = (
            normalize_optional_string(env_map.get("RFCREADER_ARCHIVE_URL"))
            or DEFAULT_ARCHIVE_URL_TEMPLATE
        )
        timeout_seconds = ConfigLoader._optional_env_value(
            env_map, "RFCREADER_TIMEOUT_SECONDS", parse_positive_float
        ) or DEFAULT_TIMEOUT_SECONDS
        output_dir_value = normalize_optional_string(env_map.get("RFCREADER_OUTPUT_DIR"))
        save_raw = ConfigLoader._optional_env_boolean(env_map, "RFCREADER_SAVE_RAW") or False

        config = ReaderConfig(
            rfc_number=rfc_number,
            archive_url_template=archive_url_template,
            timeout_seconds=timeout_seconds,
            output_dir=Path(output_dir_value) if output_dir_value is not None else None,
            save_raw=save_raw,
        )
        config.validate()
        return config

    @staticmethod
    def _parse_yaml_payload(raw_text: str, path: Path) -> Mapping[str, Any]:
        """Parse YAML text and enforce a mapping root payload."""

        try:
            payload = yaml.safe_load(raw_text)
        except yaml.YAMLError as exc:
            raise ValueError(f"YAML config `{path}` is not valid YAML: {exc}") from exc

        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"YAML config `{path}` must contain a top-level mapping/object.")
        return payload

    @staticmethod
    def _build_config_from_mapping(payload: Mapping[str, Any], source_label: str) -> ReaderConfig:
        """Build a validated config from a normalized mapping payload."""

        unknown = sorted(
            str(key) for key in set(payload).difference(ConfigLoader._SUPPORTED_YAML_KEYS)
        )
        if unknown:
            key_list = ", ".join(unknown)
            raise ValueError(f"{source_label} includes unsupported key(s): {key_list}.")

        rfc_number = ConfigLoader._optional_field(
            payload, "rfc_number", source_label, parse_positive_int
        ) or DEFAULT_RFC_NUMBER
        archive_url_template = (
            normalize_optional_string(payload.get("archive_url_template"))
            or DEFAULT_ARCHIVE_URL_TEMPLATE
        )
        timeout_seconds = ConfigLoader._optional_field(
            payload, "timeout_seconds", source_label, parse_positive_float
        ) or DEFAULT_TIMEOUT_SECONDS
        output_dir_value = normalize_optional_string(payload.get("output_dir"))
        save_raw = ConfigLoader._optional_boolean(payload, "save_raw", source_label, default=False)

        config = ReaderConfig(
            rfc_number=rfc_number,
            archive_url_template=archive_url_template,
            timeout_seconds=timeout_seconds,
            output_dir=Path(output_dir_value) if output_dir_value is not None else None,
            save_raw=save_raw,
        )
        config.validate()
        return config

    @staticmethod
    def _optional_field(
        payload: Mapping[str, Any], key: str, source_label: str, parser: Any
    ) -> Any:
        """Parse an optional payload field, treating blank values as absent."""

        if normalize_optional_string(payload.get(key)) is None:
            return None
        try:
            return parser(payload[key], key)
        except ValueError as exc:
            raise ValueError(f"{source_label} field {exc}") from exc

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
    def _optional_env_value(env: Mapping[str, str], key: str, parser: Any) -> Any:
        """Parse an optional environment value, treating blank values as absent."""

        if normalize_optional_string(env.get(key)) is None:
            return None
        try:
            return parser(env[key], key)
        except ValueError as exc:
            raise ValueError(f"Environment variable {exc}") from exc

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
