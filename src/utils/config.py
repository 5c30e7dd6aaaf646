"""Configuration helpers for gluestack-catalog."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml
from pydantic import BaseModel, Field, model_validator

TRUE_VALUE = "true"

ENV_OVERRIDES = {
    "GLUESTACK_PATH": "gluestack_path",
    "GITHUB_TOKEN": "github_token",
    "USE_GITHUB_MODE": "remote",
    "LOG_LEVEL": "log_level",
}


class AppConfig(BaseModel):
    """Application level configuration."""

    gluestack_path: Path = Field(default=Path("../gluestack-ui"))
    github_token: Optional[str] = None
    remote: Optional[bool] = None
    log_level: str = "INFO"

    @model_validator(mode="after")
    def _default_remote_from_token(self) -> "AppConfig":
        if self.remote is None:
            self.remote = bool(self.github_token)
        return self

    @property
    def source_mode(self) -> str:
        return "github" if self.remote else "local"


def load_config(path: Optional[Path] = None, environ: Optional[Mapping[str, str]] = None) -> AppConfig:
    """Load configuration from an optional YAML file, then apply environment overrides."""

    data: Dict[str, Any] = {}
    if path is not None and path.exists():
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    env = os.environ if environ is None else environ
    for variable, field in ENV_OVERRIDES.items():
        value = env.get(variable)
        if not value:
            continue
        # Only the literal "true" enables remote mode; any other value disables it.
        data[field] = value.strip().lower() == TRUE_VALUE if field == "remote" else value
    return AppConfig(**data)
