"""Runtime settings for the converter."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional

from .engine import MAGNITUDE_WARNING_THRESHOLD
from .storage import MAX_FAVORITES, MAX_HISTORY

ENV_PREFIX = "UNIT_CONVERTER_"


@dataclass
class ConverterConfig:
    """File locations and limits. ``None`` paths disable persistence."""

    history_path: Optional[Path] = Path("conversion_history.txt")
    favorites_path: Optional[Path] = Path("favorites.txt")
    csv_path: Path = Path("conversion_history.csv")
    max_history: int = MAX_HISTORY
    max_favorites: int = MAX_FAVORITES
    max_attempts: int = 3
    magnitude_threshold: float = MAGNITUDE_WARNING_THRESHOLD
    clear_screen: bool = False
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, environ=None) -> "ConverterConfig":
        """Build a config from ``UNIT_CONVERTER_*`` variables, keeping defaults for the rest."""

        env = os.environ if environ is None else environ
        config = cls()
        data_dir = env.get(f"{ENV_PREFIX}DATA_DIR")
        if data_dir:
            base = Path(data_dir).expanduser()
            config = replace(
                config,
                history_path=base / "conversion_history.txt",
                favorites_path=base / "favorites.txt",
                csv_path=base / "conversion_history.csv",
            )
        return replace(
            config,
            history_path=_env_path(env, "HISTORY_FILE", config.history_path),
            favorites_path=_env_path(env, "FAVORITES_FILE", config.favorites_path),
            csv_path=_env_path(env, "CSV_FILE", config.csv_path),
            max_history=_env_int(env, "MAX_HISTORY", config.max_history),
            max_favorites=_env_int(env, "MAX_FAVORITES", config.max_favorites),
            max_attempts=_env_int(env, "MAX_ATTEMPTS", config.max_attempts),
            clear_screen=_env_bool(env, "CLEAR_SCREEN", config.clear_screen),
            log_level=env.get(f"{ENV_PREFIX}LOG_LEVEL", config.log_level).upper(),
        )


def _env_path(env, name: str, default):
    raw = env.get(f"{ENV_PREFIX}{name}")
    if raw is None:
        return default
    return Path(raw).expanduser() if raw.strip() else None


def _env_int(env, name: str, default: int) -> int:
    raw = env.get(f"{ENV_PREFIX}{name}")
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value > 0 else default


def _env_bool(env, name: str, default: bool) -> bool:
    raw = env.get(f"{ENV_PREFIX}{name}")
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


__all__ = ["ConverterConfig", "ENV_PREFIX"]
