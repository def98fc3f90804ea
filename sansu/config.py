"""Engine configuration

Settings are read from ``SANSU_*`` environment variables on first use and
cached for the life of the process. ``reset_settings`` drops the cache.
"""

import os
from dataclasses import dataclass
from typing import Optional

_ENV_PREFIX = "SANSU"

DEFAULT_MAX_LENGTH = 10000
DEFAULT_MAX_DEPTH = 100


@dataclass(frozen=True)
class Settings:
    max_length: int = DEFAULT_MAX_LENGTH
    max_depth: int = DEFAULT_MAX_DEPTH
    log_level: str = "WARNING"
    log_json: bool = False


_settings: Optional[Settings] = None


def _env(name: str) -> Optional[str]:
    return os.environ.get(f"{_ENV_PREFIX}_{name}")


def _positive_int(name: str, default: int) -> int:
    raw = _env(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{_ENV_PREFIX}_{name} must be an integer, got {raw!r}") from None
    if value <= 0:
        raise ValueError(f"{_ENV_PREFIX}_{name} must be positive, got {value}")
    return value


def load_settings() -> Settings:
    return Settings(
        max_length=_positive_int("MAX_LENGTH", DEFAULT_MAX_LENGTH),
        max_depth=_positive_int("MAX_DEPTH", DEFAULT_MAX_DEPTH),
        log_level=(_env("LOG_LEVEL") or "WARNING").upper(),
        log_json=(_env("LOG_JSON") or "false").lower() == "true",
    )


def get_settings(reload: bool = False) -> Settings:
    global _settings
    if _settings is None or reload:
        _settings = load_settings()
    return _settings


def reset_settings() -> None:
    global _settings
    _settings = None
