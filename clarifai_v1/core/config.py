"""Client configuration (Pydantic v2). Load from clarifai_config.yml with optional env override."""

import os
from pathlib import Path
from typing import Any, Mapping

import yaml
from pydantic import BaseModel, field_validator


DEFAULT_API_ROOT = "https://api.clarifai.com/v1"
DEFAULT_CONFIG_ENV_VAR = "CLARIFAI_CONFIG"
DEFAULT_CONFIG_FILENAME = "clarifai_config.yml"
API_ROOT_ENV_VAR = "CLARIFAI_API_ROOT"
ACCESS_TOKEN_ENV_VAR = "CLARIFAI_ACCESS_TOKEN"


class Settings(BaseModel):
    """
    Client config loaded from YAML.

    When loading the default config, api_root and access_token may be overridden by
    CLARIFAI_API_ROOT and CLARIFAI_ACCESS_TOKEN (but not when an explicit config_path is provided).
    """

    model_config = {"extra": "ignore"}

    api_root: str = DEFAULT_API_ROOT
    access_token: str | None = None
    timeout_seconds: float = 120.0
    log_level: str = "INFO"

    @field_validator("api_root", mode="before")
    @classmethod
    def strip_api_root(cls, v: Any) -> str:
        if v is None or str(v).strip() == "":
            return DEFAULT_API_ROOT
        return str(v).strip().rstrip("/")

    @field_validator("access_token", mode="before")
    @classmethod
    def blank_token_is_none(cls, v: Any) -> str | None:
        if v is not None and str(v).strip() != "":
            return str(v).strip()
        return None


_config: Settings | None = None


class ConfigLoader:
    """
    Helper responsible for loading Settings from YAML and environment.

    - load_from_yaml(path, apply_env_override): read a YAML file and optionally apply env overrides.
    - load_default(): resolve the default config path from CLARIFAI_CONFIG / clarifai_config.yml and
      apply CLARIFAI_API_ROOT / CLARIFAI_ACCESS_TOKEN overrides when present.
    """

    def __init__(self, env: Mapping[str, str] | None = None) -> None:
        self._env: Mapping[str, str] = env if env is not None else os.environ

    def _env_overrides(self) -> dict[str, str]:
        overrides: dict[str, str] = {}
        if self._env.get(API_ROOT_ENV_VAR):
            overrides["api_root"] = self._env[API_ROOT_ENV_VAR]
        if self._env.get(ACCESS_TOKEN_ENV_VAR):
            overrides["access_token"] = self._env[ACCESS_TOKEN_ENV_VAR]
        return overrides

    def load_from_yaml(self, path: Path, apply_env_override: bool) -> Settings:
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
        with open(path) as f:
            data = yaml.safe_load(f)
        if not data:
            data = {}
        if apply_env_override:
            data.update(self._env_overrides())
        return Settings.model_validate(data)

    def load_default(self) -> Settings:
        """
        Load the default Settings, using CLARIFAI_CONFIG or clarifai_config.yml.

        Environment overrides win over the YAML values and the built-in defaults, so
        credentials can be injected at deploy time without editing the file.
        """
        path_str = self._env.get(DEFAULT_CONFIG_ENV_VAR) or DEFAULT_CONFIG_FILENAME
        path = Path(path_str)
        if path.exists():
            return self.load_from_yaml(path, apply_env_override=True)
        return Settings.model_validate(self._env_overrides())


_loader = ConfigLoader()


def get_config(config_path: str | Path | None = None) -> Settings:
    """
    Return singleton config.

    - If config_path is given, load from it (without env overrides) and update the cache.
    - Otherwise, return the cached config if available, or load via ConfigLoader.load_default().
    """
    global _config
    if config_path is not None:
        _config = _loader.load_from_yaml(Path(config_path), apply_env_override=False)
        return _config
    if _config is not None:
        return _config
    _config = _loader.load_default()
    return _config


def reset_config() -> None:
    """Clear cached config (for tests)."""
    global _config
    _config = None
