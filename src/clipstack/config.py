"""
Startup configuration.

Values come from defaults, then ``CLIPSTACK_*`` environment variables (a
``.env`` file is loaded first if present), then command-line overrides.
They are read once; nothing here changes while the app runs.
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

from clipstack.errors import InvalidConfiguration

ENV_PREFIX = "CLIPSTACK_"


def _to_bool(value: Optional[str], default: bool = True) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


class Settings(BaseModel):
    model_config = {"frozen": True}

    max_entries: int = Field(default=50, gt=0)
    poll_interval: float = Field(default=0.5, gt=0)
    window_width: int = Field(default=600, gt=0)
    window_height: int = Field(default=700, gt=0)
    min_width: int = Field(default=400, gt=0)
    min_height: int = Field(default=300, gt=0)
    start_monitoring: bool = True
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level {value!r}")
        return level

    @classmethod
    def build(cls, **values: Any) -> "Settings":
        try:
            return cls(**values)
        except ValidationError as e:
            raise InvalidConfiguration(str(e)) from e

    @classmethod
    def from_env(cls, *, env_path: Optional[Path] = None) -> "Settings":
        load_dotenv(dotenv_path=env_path or find_dotenv(usecwd=True))

        values: Dict[str, Any] = {}
        for name in ("max_entries", "poll_interval", "window_width",
                     "window_height", "min_width", "min_height", "log_level"):
            raw = os.getenv(f"{ENV_PREFIX}{name.upper()}")
            if raw:
                values[name] = raw.strip()

        monitoring = os.getenv(f"{ENV_PREFIX}START_MONITORING")
        if monitoring is not None:
            values["start_monitoring"] = _to_bool(monitoring)

        return cls.build(**values)

    def with_overrides(self, **overrides: Any) -> "Settings":
        values = self.model_dump()
        values.update({k: v for k, v in overrides.items() if v is not None})
        return self.build(**values)
