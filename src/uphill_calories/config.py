from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

from .texts import Lang, check_lang

_TRUTHY = {"1", "true", "yes", "on"}


def _flag(value: str | None) -> bool:
    return value is not None and value.strip().lower() in _TRUTHY


@dataclass(frozen=True)
class Settings:
    lang: Lang = "fr"
    verbose: bool = False
    log_json: bool = False


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Read settings from UPHILL_CALORIES_* environment variables."""
    env = os.environ if environ is None else environ
    return Settings(
        lang=check_lang(env.get("UPHILL_CALORIES_LANG", "fr")),
        verbose=_flag(env.get("UPHILL_CALORIES_VERBOSE")),
        log_json=_flag(env.get("UPHILL_CALORIES_LOG_JSON")),
    )
