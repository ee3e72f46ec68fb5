from __future__ import annotations

import logging
import os
from enum import Enum
from functools import lru_cache
from pathlib import Path

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field

from appcommon_core.logging import get_logger

logger = logging.getLogger(__name__)

CONFIG_PATH_ENV = "APPCOMMON_CONFIG_PATH"
TIME_SOURCE_ENV = "APPCOMMON_TIME_SOURCE"
TIME_SCALE_ENV = "APPCOMMON_TIME_SCALE"


class TimeSourceKind(str, Enum):
    REAL = "real"
    MOCK = "mock"


class AppCommonSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    time_source: TimeSourceKind = TimeSourceKind.REAL
    time_scale: float = Field(default=1.0, gt=0)
    mock_now: AwareDatetime | None = None
    locale_dir: str | None = None
    text_domain: str = Field(default="messages", min_length=1)


def _default_config_path() -> Path:
    module_path = Path(__file__).resolve()
    candidates = [
        Path.cwd() / "config" / "appcommon.json",
        module_path.parents[2] / "config" / "appcommon.json",
    ]
    for candidate in candidates:
        if candidate.exists():
            return candidate
    return candidates[0]


def _read_time_source_env(default: TimeSourceKind) -> TimeSourceKind:
    raw = os.getenv(TIME_SOURCE_ENV)
    if raw is None or not raw.strip():
        return default
    try:
        return TimeSourceKind(raw.strip().lower())
    except ValueError:
        logger.warning(
            "invalid time source for %s: %s (using default=%s)",
            TIME_SOURCE_ENV,
            raw,
            default.value,
        )
        return default


def _read_scale_env(default: float) -> float:
    raw = os.getenv(TIME_SCALE_ENV)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("invalid float for %s: %s (using default=%s)", TIME_SCALE_ENV, raw, default)
        return default
    if value <= 0:
        logger.warning("non-positive %s: %s (using default=%s)", TIME_SCALE_ENV, raw, default)
        return default
    return value


def reset_settings_cache() -> None:
    get_settings.cache_clear()


@lru_cache(maxsize=1)
def get_settings() -> AppCommonSettings:
    path = Path(os.getenv(CONFIG_PATH_ENV, str(_default_config_path())))
    if path.exists():
        settings = AppCommonSettings.model_validate_json(path.read_text(encoding="utf-8"))
        source = str(path)
    else:
        settings = AppCommonSettings()
        source = "defaults"
    settings = settings.model_copy(
        update={
            "time_source": _read_time_source_env(settings.time_source),
            "time_scale": _read_scale_env(settings.time_scale),
        }
    )
    get_logger("appcommon.config").info(
        "settings_loaded",
        source=source,
        time_source=settings.time_source.value,
        time_scale=settings.time_scale,
    )
    return settings

