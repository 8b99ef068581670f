from __future__ import annotations

"""Configuration utilities for tseries.

The :class:`Settings` container groups the few knobs the library exposes:
how a moving average treats a window longer than the series and how the
package logger is set up.  Instances can be populated from environment
variables (``TSERIES_`` prefix, ``__`` between nested keys) or from
YAML/JSON files with matching nested keys.
"""

import json
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

try:  # pragma: no cover - optional dependency
    import yaml  # type: ignore
except Exception:  # pragma: no cover
    yaml = None


class SectionModel(BaseModel):
    """Base model for configuration subsections that ignores unknown fields."""

    model_config = ConfigDict(extra="ignore")


# ---------------------------------------------------------------------------
# Settings schema
# ---------------------------------------------------------------------------


class MovingAverageSettings(SectionModel):
    """Behaviour of :meth:`Timeseries.moving_average`."""

    oversized_window: Literal["empty", "raise"] = "empty"

    @field_validator("oversized_window", mode="before")
    @classmethod
    def _normalise(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower()
        return value


class LoggingSettings(SectionModel):
    """Level and format applied by :func:`tseries.utils.configure_logging`."""

    level: str = "INFO"
    format: str = "%(levelname)s:%(name)s:%(message)s"


class Settings(BaseSettings):
    """Container for all runtime configuration sections."""

    moving_average: MovingAverageSettings = Field(default_factory=MovingAverageSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = SettingsConfigDict(
        env_prefix="TSERIES_",
        env_nested_delimiter="__",
        extra="ignore",
    )


# ---------------------------------------------------------------------------
# Loading utilities
# ---------------------------------------------------------------------------


def load_settings(path: str | Path) -> Settings:
    """Load settings from a JSON or YAML file."""

    p = Path(path)
    text = p.read_text()
    if p.suffix.lower() in {".yaml", ".yml"}:
        if yaml is None:
            raise RuntimeError("PyYAML is required to load YAML files")
        data = yaml.safe_load(text) or {}
    else:
        data = json.loads(text)
    if not isinstance(data, dict):
        raise TypeError("Configuration file must define a mapping")
    return Settings.model_validate(data)


__all__ = [
    "MovingAverageSettings",
    "LoggingSettings",
    "Settings",
    "load_settings",
]
