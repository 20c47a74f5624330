from __future__ import annotations
import os
from pathlib import Path
from typing import List


_TRUTHY = {"1", "true", "yes", "on"}

# Defaults
DEFAULT_PROMPT = "Lisp > "
DEFAULT_LOG_LEVEL = "WARNING"


def flag_from_env(var: str, default: bool = False) -> bool:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in _TRUTHY


def paths_from_env(var: str) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return []
    return [Path(p.strip()) for p in raw.split(os.pathsep) if p.strip()]


def get_prompt() -> str:
    return os.environ.get("SKATE_PROMPT", DEFAULT_PROMPT)


def get_strict() -> bool:
    return flag_from_env("SKATE_STRICT")


def get_log_level() -> str:
    return os.environ.get("SKATE_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()


def get_load_paths() -> List[Path]:
    return paths_from_env("SKATE_LOAD_PATH")
