from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv


_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class EngineSettings:
    log_level: str = "INFO"
    log_json: bool = False


def get_engine_settings() -> EngineSettings:
    """
    Load process-level settings from environment variables (and `.env`).

    Reads:
      VALIDATION_ENGINE_LOG_LEVEL (default INFO)
      VALIDATION_ENGINE_LOG_JSON (default false)
    """
    load_dotenv()
    return EngineSettings(
        log_level=_log_level_from_env("VALIDATION_ENGINE_LOG_LEVEL"),
        log_json=_bool_from_env("VALIDATION_ENGINE_LOG_JSON"),
    )


def _log_level_from_env(name: str) -> str:
    value = os.getenv(name, "INFO").strip().upper()
    if value not in _LOG_LEVELS:
        raise ValueError(f"{name} must be one of {', '.join(_LOG_LEVELS)}.")
    return value


def _bool_from_env(name: str) -> bool:
    value = os.getenv(name, "").strip().lower()
    if value in ("", "0", "false", "no", "off"):
        return False
    if value in ("1", "true", "yes", "on"):
        return True
    raise ValueError(f"{name} must be a boolean (true/false).")
