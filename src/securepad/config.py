"""Runtime configuration assembled from ``SECUREPAD_*`` environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from securepad.runtime.autosave import DEFAULT_AUTOSAVE_INTERVAL
from securepad.runtime.loop import DEFAULT_POLL_INTERVAL
from securepad.storage import DEFAULT_NOTES_FILE, DEFAULT_PASSWORD_FILE

ENV_PREFIX = "SECUREPAD_"
UI_CHOICES = ("textual", "curses")
LOG_PRESETS = ("development", "production")


def _env_float(env: Mapping[str, str], key: str, fallback: float) -> float:
    value = env.get(f"{ENV_PREFIX}{key}")
    if value is None:
        return fallback
    try:
        parsed = float(value)
    except ValueError:
        return fallback
    return parsed if parsed > 0 else fallback


@dataclass(slots=True)
class SecurePadConfig:
    notes_path: str = DEFAULT_NOTES_FILE
    password_path: str = DEFAULT_PASSWORD_FILE
    autosave_interval: float = DEFAULT_AUTOSAVE_INTERVAL
    poll_interval: float = DEFAULT_POLL_INTERVAL
    ui: str = "textual"
    log_preset: Optional[str] = None

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "SecurePadConfig":
        env = os.environ if env is None else env
        ui = env.get(f"{ENV_PREFIX}UI", "textual").lower()
        preset = (env.get(f"{ENV_PREFIX}LOG_PRESET") or "").lower()
        return cls(
            notes_path=env.get(f"{ENV_PREFIX}NOTES_FILE", DEFAULT_NOTES_FILE),
            password_path=env.get(f"{ENV_PREFIX}PASSWORD_FILE", DEFAULT_PASSWORD_FILE),
            autosave_interval=_env_float(
                env, "AUTOSAVE_INTERVAL", DEFAULT_AUTOSAVE_INTERVAL
            ),
            poll_interval=_env_float(env, "POLL_INTERVAL", DEFAULT_POLL_INTERVAL),
            ui=ui if ui in UI_CHOICES else "textual",
            log_preset=preset if preset in LOG_PRESETS else None,
        )


__all__ = ["SecurePadConfig", "ENV_PREFIX", "UI_CHOICES", "LOG_PRESETS"]
