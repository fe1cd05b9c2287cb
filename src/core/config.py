from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any, Dict

import yaml
from dotenv import load_dotenv

DEFAULT_ENV_PREFIX = "DEFAULT_"


@dataclass(frozen=True)
class Settings:
    env: str
    log_level: str
    chart_height: int

    # input overrides keyed by ProjectionInput attribute (snake_case)
    defaults: Dict[str, Any] = field(default_factory=dict)


def _deep_get(d: Dict[str, Any], path: str, default=None):
    cur = d
    for part in path.split("."):
        if not isinstance(cur, dict) or part not in cur:
            return default
        cur = cur[part]
    return cur


def load_settings(config_path: str = "config.yaml") -> Settings:
    """
    Loads config.yaml + overrides from .env/environment variables.
    """
    load_dotenv()  # loads .env into env vars

    cfg: Dict[str, Any] = {}
    if os.path.exists(config_path):
        with open(config_path, "r", encoding="utf-8") as f:
            cfg = yaml.safe_load(f) or {}

    # Empty env vars count as "not set".
    def _env_or_cfg(key: str, cfg_path: str, default):
        v = os.getenv(key)
        if v is None:
            return _deep_get(cfg, cfg_path, default)
        v = v.strip()
        return _deep_get(cfg, cfg_path, default) if v == "" else v

    env = _env_or_cfg("APP_ENV", "app.env", "dev")
    log_level = _env_or_cfg("LOG_LEVEL", "app.log_level", "INFO")
    chart_height = int(_env_or_cfg("CHART_HEIGHT", "ui.chart_height", 400))

    defaults: Dict[str, Any] = dict(_deep_get(cfg, "defaults", {}) or {})
    for key, value in os.environ.items():
        if key.startswith(DEFAULT_ENV_PREFIX) and value.strip() != "":
            defaults[key[len(DEFAULT_ENV_PREFIX):].lower()] = value.strip()

    return Settings(
        env=env,
        log_level=str(log_level).upper(),
        chart_height=chart_height,
        defaults=defaults,
    )


# Optional convenience singleton
SETTINGS = load_settings()
