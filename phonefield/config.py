"""
Configuration loader.

Design goals:
- One validated model per concern: catalog construction, rendering, widget behaviour.
- Support `.env` for local development.
- Support YAML for per-deployment catalogs (masks, filters, localization).
- Validate configuration with pydantic.

Precedence (highest to lowest):
1. OS environment variables
2. `.env` values
3. YAML config file values
4. Code defaults
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Literal

import yaml
from dotenv import dotenv_values
from pydantic import BaseModel, Field, ValidationInfo, field_validator
from pydantic import ConfigDict as PydanticConfigDict

from phonefield.errors import InvalidDigitCapError

logger = logging.getLogger(__name__)

DEFAULT_MASK = "... ... ... ... .."

OrderKey = Literal["only_countries", "preferred_countries"]


class CatalogConfig(BaseModel):
    """Everything `build_catalog` needs; a change here means a rebuild."""

    model_config = PydanticConfigDict(extra="ignore", frozen=True)

    # True enables every country's area codes; a list enables only those iso2 codes.
    enable_area_codes: bool | list[str] = False
    enable_territories: bool = False
    regions: str | list[str] | None = None

    only_countries: list[str] = Field(default_factory=list)
    preferred_countries: list[str] = Field(default_factory=list)
    exclude_countries: list[str] = Field(default_factory=list)
    preserve_order: list[OrderKey] = Field(default_factory=list)

    masks: dict[str, str] = Field(default_factory=dict)
    priorities: dict[str, int] = Field(default_factory=dict)
    area_codes: dict[str, list[str]] = Field(default_factory=dict)
    localization: dict[str, str] = Field(default_factory=dict)

    prefix: str = "+"
    default_mask: str = DEFAULT_MASK
    always_default_mask: bool = False

    # Raise on catalog integrity problems instead of logging and degrading.
    strict: bool = False

    @field_validator("only_countries", "preferred_countries", "exclude_countries")
    @classmethod
    def _lower_iso2(cls, value: list[str]) -> list[str]:
        return [v.strip().lower() for v in value if v.strip()]

    def preserves(self, key: OrderKey) -> bool:
        return key in self.preserve_order


class RenderOptions(BaseModel):
    model_config = PydanticConfigDict(extra="ignore", frozen=True)

    strict: bool = False
    disable_country_code: bool = False
    # False, True, or a cap on the total number of digits.
    enable_long_numbers: bool | int = False
    auto_format: bool = True
    prefix: str = "+"

    @field_validator("enable_long_numbers", mode="before")
    @classmethod
    def _check_digit_cap(cls, value: Any, info: ValidationInfo) -> bool | int:
        if isinstance(value, bool):
            return value
        if isinstance(value, int) and value >= 0:
            return value
        if isinstance(value, str):
            lowered = value.strip().lower()
            if lowered in ("true", "false"):
                return lowered == "true"
            if lowered.isdigit():
                return int(lowered)

        if info.data.get("strict"):
            raise InvalidDigitCapError(f"Invalid digit cap for long numbers: {value!r}")
        logger.warning("Ignoring invalid digit cap for long numbers: %r", value)
        return False


class PhoneFieldSettings(BaseModel):
    model_config = PydanticConfigDict(extra="ignore")

    # General
    log_level: str = "INFO"
    json_logging: bool = False

    # Input behaviour
    default_country: str | None = "us"
    value: str = ""
    country_code_editable: bool = True
    disable_country_guess: bool = False
    disable_initial_country_guess: bool = False
    max_digits: int = 15
    # Only this many leading digits are used to guess the country.
    guess_prefix_length: int = 6

    catalog: CatalogConfig = Field(default_factory=CatalogConfig)
    render: RenderOptions = Field(default_factory=RenderOptions)


_ENV_MAP: dict[str, str] = {
    "PHONEFIELD_LOG_LEVEL": "log_level",
    "PHONEFIELD_JSON_LOGGING": "json_logging",
    "PHONEFIELD_DEFAULT_COUNTRY": "default_country",
    "PHONEFIELD_COUNTRY_CODE_EDITABLE": "country_code_editable",
    "PHONEFIELD_DISABLE_COUNTRY_GUESS": "disable_country_guess",
    "PHONEFIELD_MAX_DIGITS": "max_digits",
    "PHONEFIELD_GUESS_PREFIX_LENGTH": "guess_prefix_length",
    # JSON objects: {"only_countries": ["fr", "us"], ...}
    "PHONEFIELD_CATALOG": "catalog",
    "PHONEFIELD_RENDER": "render",
}

_JSON_FIELDS = {"catalog", "render"}


def _read_yaml(path: Path) -> dict[str, Any]:
    raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    return raw if isinstance(raw, dict) else {}


def _read_dotenv(path: Path) -> dict[str, str]:
    values = dotenv_values(path)
    out: dict[str, str] = {}
    for k, v in values.items():
        if isinstance(k, str) and isinstance(v, str):
            out[k] = v
    return out


def _overlay_env(target: dict[str, Any], env: dict[str, str]) -> None:
    for env_key, field_name in _ENV_MAP.items():
        if env_key not in env:
            continue
        raw = env[env_key]
        if field_name in _JSON_FIELDS:
            try:
                parsed = json.loads(raw)
            except json.JSONDecodeError:
                logger.warning("Ignoring %s: not valid JSON", env_key)
                continue
            if isinstance(parsed, dict):
                base = target.get(field_name)
                merged = dict(base) if isinstance(base, dict) else {}
                merged.update(parsed)
                target[field_name] = merged
        else:
            target[field_name] = raw


def load_settings(
    *, yaml_path: Path | None = None, env_path: Path | None = None
) -> PhoneFieldSettings:
    """
    Load settings from YAML and .env, with OS env overrides.

    Args:
        yaml_path: Optional YAML config path.
        env_path: Optional .env path (default: `.env` if present).
    """

    data: dict[str, Any] = {}

    if env_path is None:
        maybe = Path(".env")
        env_path = maybe if maybe.exists() else None

    dotenv = _read_dotenv(env_path) if env_path is not None and env_path.exists() else {}

    # YAML path resolution:
    # - explicit yaml_path wins
    # - else PHONEFIELD_CONFIG from OS env wins
    # - else PHONEFIELD_CONFIG from .env
    if yaml_path is None:
        cfg = os.environ.get("PHONEFIELD_CONFIG") or dotenv.get("PHONEFIELD_CONFIG")
        if cfg:
            yaml_path = Path(cfg)

    if yaml_path is not None and yaml_path.exists():
        data.update(_read_yaml(yaml_path))

    if dotenv:
        _overlay_env(data, dotenv)

    os_env: dict[str, str] = {k: v for k, v in os.environ.items() if k in _ENV_MAP}
    _overlay_env(data, os_env)

    return PhoneFieldSettings.model_validate(data)
