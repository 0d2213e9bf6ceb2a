"""
Application configuration management.

Load order (each layer overrides the previous):
  1. ``config/default.toml``      — committed static defaults
  2. ``config/local.toml``        — optional local overrides (gitignored)
  3. ``.env``                     — local env overrides (gitignored)
  4. Environment variables        — ``PICKLIST_ADVISOR_*`` prefix

Entry point: ``load_config(config_path=None) -> AppConfig``

The analysis functions never read configuration themselves.  Callers pass a
``ScoringPolicy`` (usually ``config.scoring``) or omit it to get the default
policy, which reproduces the historical blend weights exactly.
"""

from __future__ import annotations

import math
import os
import tomllib
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, field_validator, model_validator

# ── Sub-config models ─────────────────────────────────────────────────────────


class LoggingConfig(BaseModel):
    """Logging output settings."""

    model_config = ConfigDict(frozen=True)

    level: str = "INFO"
    log_file: str = ""
    json_format: bool = False

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid:
            raise ValueError(f"Log level must be one of {sorted(valid)}, got '{v}'.")
        return v.upper()


class ScoringPolicy(BaseModel):
    """Blend weights and limits used by the pick advisor.

    These are tuning constants with no derivation behind them; the defaults
    are the values the advisor has always shipped with.

    Blends
    ------
    confidence      = w_reliability * reliability
                    + w_consistency * consistency_factor
                    + w_compatibility * compatibility
    strategic_value = w_overall * overall/100
                    + w_specialization * specialization
                    + w_compatibility * compatibility
    reliability     = w_match_count * consistency_factor
                    + w_volatility * consistency_score/100
    compatibility   = base + gap_weight * filled/normalizer
                           - redundancy_weight * redundant/normalizer
    """

    model_config = ConfigDict(frozen=True)

    confidence_reliability_weight: float = 0.4
    confidence_consistency_weight: float = 0.3
    confidence_compatibility_weight: float = 0.3

    strategic_overall_weight: float = 0.4
    strategic_specialization_weight: float = 0.3
    strategic_compatibility_weight: float = 0.3

    reliability_match_count_weight: float = 0.6
    reliability_volatility_weight: float = 0.4

    compatibility_base: float = 0.5
    gap_fill_weight: float = 0.3
    redundancy_weight: float = 0.2
    trait_normalizer: float = 5.0

    top_n: int = 10
    target_roster_size: int = 3
    min_balanced_score: float = 60.0

    @field_validator("top_n", "target_roster_size")
    @classmethod
    def validate_positive_int(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"must be >= 1, got {v}.")
        return v

    @field_validator("trait_normalizer")
    @classmethod
    def validate_normalizer(cls, v: float) -> float:
        if v <= 0:
            raise ValueError(f"trait_normalizer must be positive, got {v}.")
        return v

    @field_validator("compatibility_base")
    @classmethod
    def validate_base(cls, v: float) -> float:
        if not 0.0 <= v <= 1.0:
            raise ValueError(f"compatibility_base must be in [0.0, 1.0], got {v}.")
        return v

    @model_validator(mode="after")
    def validate_blends_sum_to_one(self) -> "ScoringPolicy":
        blends = {
            "confidence": (
                self.confidence_reliability_weight,
                self.confidence_consistency_weight,
                self.confidence_compatibility_weight,
            ),
            "strategic": (
                self.strategic_overall_weight,
                self.strategic_specialization_weight,
                self.strategic_compatibility_weight,
            ),
            "reliability": (
                self.reliability_match_count_weight,
                self.reliability_volatility_weight,
            ),
        }
        for name, weights in blends.items():
            if any(w < 0 for w in weights):
                raise ValueError(f"{name} weights must be non-negative, got {weights}.")
            if not math.isclose(sum(weights), 1.0, abs_tol=1e-9):
                raise ValueError(
                    f"{name} weights must sum to 1.0, got {sum(weights):.4f}."
                )
        return self


class AppConfig(BaseModel):
    """Complete application configuration — the single source of truth.

    Constructed by ``load_config()`` which merges TOML + .env.
    """

    model_config = ConfigDict(frozen=True)

    logging: LoggingConfig = LoggingConfig()
    scoring: ScoringPolicy = ScoringPolicy()
    debug: bool = False


DEFAULT_POLICY = ScoringPolicy()

# ── Loader ────────────────────────────────────────────────────────────────────

_PROJECT_ROOT = Path(__file__).parent.parent


def _find_project_root() -> Path:
    """Walk up from this file to find the project root (contains pyproject.toml)."""
    candidate = Path(__file__).parent
    for _ in range(5):
        if (candidate / "pyproject.toml").exists():
            return candidate
        candidate = candidate.parent
    return _PROJECT_ROOT


def load_config(config_path: Optional[Path] = None) -> AppConfig:
    """Load and merge application configuration.

    Args:
        config_path: Explicit path to a TOML config file. Defaults to
            ``<project_root>/config/default.toml``.

    Returns:
        Fully validated ``AppConfig`` instance.

    Raises:
        FileNotFoundError: If the specified ``config_path`` does not exist.
        pydantic.ValidationError: If merged config values fail validation.
    """
    root = _find_project_root()

    # 1. Load .env file (silently skip if missing)
    load_dotenv(dotenv_path=root / ".env", override=False)

    # 2. Load TOML config
    if config_path is None:
        config_path = root / "config" / "default.toml"

    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(
            f"Config file not found: {config_path}\n"
            "Create config/default.toml or pass --config."
        )

    with open(config_path, "rb") as f:
        raw: dict[str, Any] = tomllib.load(f)

    local_config_path = config_path.parent / "local.toml"
    if local_config_path.exists():
        with open(local_config_path, "rb") as f:
            local_raw: dict[str, Any] = tomllib.load(f)
        raw = _deep_merge(raw, local_raw)

    # 3. Apply PICKLIST_ADVISOR_* environment variable overrides
    raw = _apply_env_overrides(raw)

    # 4. Build and validate AppConfig
    return _build_app_config(raw)


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge ``override`` into ``base``."""
    result = dict(base)
    for key, val in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(val, dict):
            result[key] = _deep_merge(result[key], val)
        else:
            result[key] = val
    return result


def _apply_env_overrides(raw: dict[str, Any]) -> dict[str, Any]:
    """Apply PICKLIST_ADVISOR_* env vars to the raw config dict.

    Supported overrides:
      PICKLIST_ADVISOR_LOG_LEVEL  → raw["logging"]["level"]
      PICKLIST_ADVISOR_TOP_N      → raw["scoring"]["top_n"]
      PICKLIST_ADVISOR_DEBUG      → raw["debug"]
    """
    if log_level := os.environ.get("PICKLIST_ADVISOR_LOG_LEVEL"):
        raw.setdefault("logging", {})["level"] = log_level

    if top_n := os.environ.get("PICKLIST_ADVISOR_TOP_N"):
        raw.setdefault("scoring", {})["top_n"] = int(top_n)

    if debug := os.environ.get("PICKLIST_ADVISOR_DEBUG"):
        raw["debug"] = debug.lower() in ("1", "true", "yes")

    return raw


def _build_app_config(raw: dict[str, Any]) -> AppConfig:
    """Map raw TOML dict to ``AppConfig`` model structure."""
    project = raw.pop("project", {})

    return AppConfig(
        logging=LoggingConfig(**raw.get("logging", {})),
        scoring=ScoringPolicy(**raw.get("scoring", {})),
        debug=raw.get("debug", project.get("debug", False)),
    )
