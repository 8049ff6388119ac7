import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

import yaml

from core.errors import ConfigError

API_KEY_ENV = "BATCHDATA_API_KEY"
API_URL_ENV = "BATCHDATA_API_URL"
TIMEOUT_ENV = "BATCHDATA_TIMEOUT"

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent.parent / "config.yaml"


@dataclass(frozen=True)
class Settings:
    """Process-wide configuration, built once at startup and passed explicitly."""

    api_key: str
    api_url: str = "https://api.batchdata.com/api/v1"
    request_timeout: float = 30.0
    server_name: str = "BatchData Property Server"
    log_dir: Optional[str] = None
    log_level: str = "INFO"

    def __repr__(self) -> str:
        # keep the credential out of logs and tracebacks
        return (
            f"Settings(api_url={self.api_url!r}, request_timeout={self.request_timeout!r}, "
            f"server_name={self.server_name!r}, log_level={self.log_level!r})"
        )


def _read_yaml(config_path: Path) -> dict:
    """
    Load the YAML configuration file into a dictionary.
    A missing file yields an empty mapping so defaults apply.
    """
    if not config_path.is_file():
        return {}
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a mapping at the top of {config_path}")
    return data


def load_settings(
    config_path: Optional[str | Path] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Settings:
    """
    Build the Settings from config.yaml plus environment overrides.

    The API key is only ever taken from the environment (BATCHDATA_API_KEY).
    BATCHDATA_API_URL and BATCHDATA_TIMEOUT override the YAML values when set.
    Raises ConfigError when the key is missing or a value is invalid.
    """
    env = os.environ if environ is None else environ
    path = Path(config_path) if config_path is not None else DEFAULT_CONFIG_PATH
    cfg = _read_yaml(path)

    api_key = (env.get(API_KEY_ENV) or "").strip()
    if not api_key:
        raise ConfigError(f"{API_KEY_ENV} environment variable is required")

    api_url = (env.get(API_URL_ENV) or cfg.get("batchdata_api_url") or Settings.api_url).rstrip("/")

    raw_timeout = env.get(TIMEOUT_ENV) or cfg.get("request_timeout_seconds", Settings.request_timeout)
    try:
        timeout = float(raw_timeout)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Request timeout must be a number, got {raw_timeout!r}") from e
    if timeout <= 0:
        raise ConfigError(f"Request timeout must be positive, got {timeout}")

    return Settings(
        api_key=api_key,
        api_url=api_url,
        request_timeout=timeout,
        server_name=cfg.get("server_name") or Settings.server_name,
        log_dir=cfg.get("log_dir"),
        log_level=str(cfg.get("log_level") or Settings.log_level).upper(),
    )
