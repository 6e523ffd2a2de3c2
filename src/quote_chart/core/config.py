"""Configuration loading, validation, and access."""

from __future__ import annotations

import os
from collections.abc import Mapping
from datetime import date
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from quote_chart.core.exceptions import ConfigError
from quote_chart.core.models import DateRange


class ProviderConfig(BaseModel):
    """Quote provider access configuration."""

    model_config = ConfigDict(frozen=True)

    base_url: str = "https://query1.finance.yahoo.com/v7/finance/download"
    user_agent: str = "Mozilla/5.0 (compatible; quote-chart/0.1)"
    # None keeps the transport default
    request_timeout: float | None = None

    @field_validator("base_url")
    @classmethod
    def base_url_is_http(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError("base_url must start with http:// or https://")
        return v.rstrip("/")

    @field_validator("request_timeout")
    @classmethod
    def timeout_positive(cls, v: float | None) -> float | None:
        if v is not None and v <= 0:
            raise ValueError("request_timeout must be > 0")
        return v


class RangeConfig(BaseModel):
    """Default request window used when the caller gives none."""

    model_config = ConfigDict(frozen=True)

    start: date = date(2021, 1, 1)
    end: date = date(2021, 12, 31)

    def to_date_range(self, start: date | None = None, end: date | None = None) -> DateRange:
        """The configured window, with either bound replaced when given."""
        return DateRange(start=start or self.start, end=end or self.end)


class APIConfig(BaseModel):
    """HTTP server configuration."""

    model_config = ConfigDict(frozen=True)

    host: str = "0.0.0.0"
    port: int = 8080
    plotly_url: str = "https://cdn.plot.ly/plotly-2.8.3.min.js"

    @field_validator("port")
    @classmethod
    def port_in_range(cls, v: int) -> int:
        if v < 1 or v > 65535:
            raise ValueError("port must be between 1 and 65535")
        return v


class QuoteChartConfig(BaseModel):
    """Root configuration for quote-chart."""

    model_config = ConfigDict(frozen=True)

    provider: ProviderConfig = ProviderConfig()
    range: RangeConfig = RangeConfig()
    api: APIConfig = APIConfig()


CONFIG_ENV_VAR = "QUOTE_CHART_CONFIG"
DEFAULT_CONFIG_FILES = ("quote-chart.yml", "quote-chart.yaml")


def load_config(
    config_path: str | None = None,
    env_prefix: str = "QUOTE_CHART_",
) -> QuoteChartConfig:
    """Load configuration from environment + YAML file + defaults.

    Resolution order (highest priority first):
    1. Environment variables (QUOTE_CHART_PROVIDER__BASE_URL, etc.)
    2. YAML file: ``config_path``, else ``$QUOTE_CHART_CONFIG``, else
       ``quote-chart.yml`` / ``quote-chart.yaml`` in the working directory
    3. Built-in defaults

    Nested keys use double-underscore in env vars:
        QUOTE_CHART_RANGE__START=2020-01-01  ->  range.start = 2020-01-01

    Env values stay strings; pydantic converts them per field, so a
    numeric-looking User-Agent is not turned into an int.
    """
    path = _resolve_config_path(config_path)
    file_values = _load_yaml(path) if path is not None else {}
    env_values = _env_overrides(os.environ, env_prefix)

    try:
        return QuoteChartConfig.model_validate(_deep_merge(file_values, env_values))
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(p) for p in first["loc"])
        raise ConfigError(
            f"Invalid configuration: {e}",
            context={"field": field, "value": first.get("input"), "source": str(path or "env")},
        ) from e


def _resolve_config_path(explicit: str | None) -> Path | None:
    """Pick the YAML file to read, if any."""
    if explicit is not None:
        candidate, origin = Path(explicit), "config_path"
    elif os.environ.get(CONFIG_ENV_VAR):
        candidate, origin = Path(os.environ[CONFIG_ENV_VAR]), CONFIG_ENV_VAR
    else:
        return next((p for p in map(Path, DEFAULT_CONFIG_FILES) if p.exists()), None)

    if not candidate.exists():
        raise ConfigError(
            f"Config file not found: {candidate}",
            context={"field": origin, "value": str(candidate)},
        )
    return candidate


def _load_yaml(path: Path) -> dict:
    """Read a YAML mapping; an empty file is an empty mapping."""
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(
            f"Failed to parse YAML config: {e}",
            context={"field": "config_file", "value": str(path)},
        ) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(
            f"YAML config must be a mapping, got {type(data).__name__}",
            context={"field": "config_file", "value": str(path)},
        )
    return data


def _env_overrides(environ: Mapping[str, str], prefix: str) -> dict:
    """Nested dict of settings from ``PREFIX_SECTION__KEY=value`` variables."""
    overrides: dict = {}
    for key, value in environ.items():
        if not key.startswith(prefix) or key == CONFIG_ENV_VAR:
            continue

        *sections, leaf = key[len(prefix) :].lower().split("__")
        target = overrides
        for section in sections:
            if not isinstance(target.get(section), dict):
                target[section] = {}
            target = target[section]
        target[leaf] = value
    return overrides


def _deep_merge(base: dict, override: dict) -> dict:
    """Return ``base`` updated by ``override``, recursing into sections."""
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged
