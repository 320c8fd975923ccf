"""Verifier configuration loading.

Loads optional verifier settings from a YAML file. A missing file silently
applies all defaults. Invalid YAML or schema raises ConfigError.

Precedence (low → high):
  built-in defaults < config file < env vars < explicit arguments to a check
"""

from __future__ import annotations

import contextlib
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError

from regcheck.constants import DEFAULT_TOO_LONG_PADDING


class VerifierConfig(BaseModel):
    """Settings shared by the contract checks.

    All fields are optional. Instances are immutable; use model_copy(update=...)
    to derive a variant.
    """

    model_config = {"extra": "forbid", "frozen": True}

    reraise_baseline_errors: bool = Field(
        default=True,
        description="Re-raise the subject's exception when the baseline read fails",
    )
    seed: int | None = Field(
        default=None,
        ge=0,
        description="Seed for the perturbation generator (None = fresh entropy per check)",
    )
    too_long_padding: int = Field(
        default=DEFAULT_TOO_LONG_PADDING,
        ge=1,
        description="How many elements past num_parameters() the too-long probe uses",
    )
    log_failures: bool = Field(
        default=True, description="Log each contract failure through loguru"
    )


_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


def _parse_bool(value: str) -> bool | None:
    lowered = value.strip().lower()
    if lowered in _TRUTHY:
        return True
    if lowered in _FALSY:
        return False
    return None


def _apply_env_overrides(config: VerifierConfig) -> VerifierConfig:
    """Apply REGCHECK_* environment variable overrides to the config.

    Unparseable values are ignored and the file/default value is kept.
    """
    updates: dict[str, Any] = {}

    if val := os.environ.get("REGCHECK_RERAISE"):
        parsed = _parse_bool(val)
        if parsed is not None:
            updates["reraise_baseline_errors"] = parsed
    if val := os.environ.get("REGCHECK_SEED"):
        with contextlib.suppress(ValueError):
            seed = int(val)
            if seed >= 0:
                updates["seed"] = seed
    if val := os.environ.get("REGCHECK_LOG_FAILURES"):
        parsed = _parse_bool(val)
        if parsed is not None:
            updates["log_failures"] = parsed

    if updates:
        return config.model_copy(update=updates)
    return config


def load_verifier_config(config_path: Path | None = None) -> VerifierConfig:
    """Load verifier configuration.

    Missing file (or no path): applies all defaults, no error.
    Invalid YAML: raises ConfigError with parse error detail.
    Invalid schema: raises ConfigError with field path context.

    Args:
        config_path: Optional YAML file with VerifierConfig fields.

    Returns:
        VerifierConfig with file values merged over defaults, env vars applied on top.
    """
    from regcheck.exceptions import ConfigError

    if config_path is None or not config_path.exists():
        return _apply_env_overrides(VerifierConfig())

    try:
        data = yaml.safe_load(config_path.read_text()) or {}
        if not isinstance(data, dict):
            raise ConfigError(f"Verifier config must be a YAML mapping: {config_path}")
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in verifier config {config_path}: {e}") from e

    try:
        config = VerifierConfig.model_validate(data)
    except ValidationError as e:
        errors = [f"  {err['loc']}: {err['msg']}" for err in e.errors()]
        raise ConfigError(f"Invalid verifier config {config_path}:\n" + "\n".join(errors)) from e

    return _apply_env_overrides(config)


__all__ = ["VerifierConfig", "load_verifier_config"]
