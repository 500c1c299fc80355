"""Service configuration.

Read once at cold start, then passed into the handler explicitly.

Sources, later wins:
1) built-in defaults
2) YAML file: config_path arg, else $CHATRELAY_CONFIG, else src/configs/chatrelay.yaml
3) environment: MISTRAL_API_KEY, MISTRAL_MODEL, MISTRAL_ENDPOINT, MISTRAL_TIMEOUT

chatrelay.yaml supports:
    model: mistral-large-latest
    endpoint: https://api.mistral.ai/v1/chat/completions
    timeout: 30
    default_max_tokens: 1000

The API key is only taken from the environment.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from .errors import ConfigError
from .logging_util import get_logger

logger = get_logger(__name__)

DEMO_API_KEY = "demo-key"
DEFAULT_MODEL = "mistral-large-latest"
DEFAULT_ENDPOINT = "https://api.mistral.ai/v1/chat/completions"
DEFAULT_MAX_TOKENS = 1000

_BUNDLED_CONFIG = Path(__file__).resolve().parents[1] / "configs" / "chatrelay.yaml"

def sanitize_api_key(raw: Optional[str]) -> str:
    # Copy/paste from consoles tends to carry quotes and smart quotes along.
    k = (raw or "").strip()
    k = k.strip(' "\'`')
    k = k.strip("“”‘’")
    return k

@dataclass(frozen=True)
class Settings:
    api_key: str = ""
    model: str = DEFAULT_MODEL
    endpoint: str = DEFAULT_ENDPOINT
    timeout: int = 30
    default_max_tokens: int = DEFAULT_MAX_TOKENS

    @property
    def demo(self) -> bool:
        key = sanitize_api_key(self.api_key)
        return not key or key == DEMO_API_KEY

def _load_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        return {}
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Failed to load config: {path} ({e})")
    if not isinstance(data, dict):
        raise ConfigError(f"Config must be a mapping: {path}")
    return data

def _to_int(name: str, v: Any, default: int) -> int:
    if v is None or v == "":
        return default
    try:
        n = int(v)
    except (TypeError, ValueError):
        raise ConfigError(f"{name} must be an integer, got {v!r}")
    if n <= 0:
        raise ConfigError(f"{name} must be positive, got {n}")
    return n

def _to_str(name: str, v: Any, default: str) -> str:
    if v is None or v == "":
        return default
    if not isinstance(v, str):
        raise ConfigError(f"{name} must be a string, got {v!r}")
    return v.strip() or default

def load_settings(
    environ: Optional[Mapping[str, str]] = None,
    config_path: Optional[Path] = None,
) -> Settings:
    env = os.environ if environ is None else environ

    if config_path is None:
        override = (env.get("CHATRELAY_CONFIG") or "").strip()
        config_path = Path(override) if override else _BUNDLED_CONFIG

    file_cfg = _load_yaml(Path(config_path))
    logger.debug("Loaded config file %s: %s", config_path, file_cfg)

    model = _to_str("model", env.get("MISTRAL_MODEL") or file_cfg.get("model"), DEFAULT_MODEL)
    endpoint = _to_str("endpoint", env.get("MISTRAL_ENDPOINT") or file_cfg.get("endpoint"), DEFAULT_ENDPOINT)
    timeout = _to_int("timeout", env.get("MISTRAL_TIMEOUT") or file_cfg.get("timeout"), 30)
    max_tokens = _to_int("default_max_tokens", file_cfg.get("default_max_tokens"), DEFAULT_MAX_TOKENS)

    return Settings(
        api_key=sanitize_api_key(env.get("MISTRAL_API_KEY")),
        model=model,
        endpoint=endpoint,
        timeout=timeout,
        default_max_tokens=max_tokens,
    )
