import json
import os
from pathlib import Path
from typing import Optional
from pydantic import BaseModel, Field, field_validator

from lystrym.core.enums import ListenerErrorPolicy

DEFAULT_CONFIG_PATH = Path().home() / ".lystrym.json"

# Environment variable -> config file key
_ENV_OVERRIDES = {
    "LYSTRYM_LOG_LEVEL": "log_level",
    "LYSTRYM_LISTENER_ERRORS": "listener_errors",
}


class Settings(BaseModel):
    LOG_LEVEL: str = "INFO"
    LISTENER_ERRORS: ListenerErrorPolicy = ListenerErrorPolicy.PROPAGATE
    CONFIG_PATH: Path = Field(default_factory=lambda: DEFAULT_CONFIG_PATH)

    @field_validator("LOG_LEVEL")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unsupported log level '{value}'")
        return level

    @field_validator("LISTENER_ERRORS", mode="before")
    @classmethod
    def _parse_policy(cls, value):
        return ListenerErrorPolicy.parse(value)

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "Settings":
        """Load settings from an optional JSON file, then the environment.

        Environment variables win over the file. A missing file is fine.
        """
        config_path = Path(path) if path is not None else DEFAULT_CONFIG_PATH

        values = {}
        if config_path.exists():
            with open(config_path, "r") as f:
                try:
                    values = json.load(f)
                except json.JSONDecodeError as e:
                    raise ValueError(
                        f"Config file at {config_path} is not valid JSON: {e}"
                    ) from e
            if not isinstance(values, dict):
                raise ValueError(f"Config file at {config_path} must hold an object")

        for env_var, key in _ENV_OVERRIDES.items():
            if env_var in os.environ:
                values[key] = os.environ[env_var]

        kwargs = {"CONFIG_PATH": config_path}
        if "log_level" in values:
            kwargs["LOG_LEVEL"] = values["log_level"]
        if "listener_errors" in values:
            kwargs["LISTENER_ERRORS"] = values["listener_errors"]
        return cls(**kwargs)


settings = Settings.load()
