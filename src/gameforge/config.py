from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from dotenv import load_dotenv

from .builder import known_variants
from .schemas import LABELS

ROOT = Path(__file__).resolve().parents[2]
DEFAULT_VARIANTS = ["aaa", "indie"]


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in {"1", "true", "yes", "on"}:
        return True
    if value in {"0", "false", "no", "off"}:
        return False
    return default


def _env_list(name: str, default: List[str]) -> List[str]:
    raw = os.getenv(name)
    if raw is None:
        return list(default)
    items = [item.strip().lower() for item in raw.split(",")]
    return [item for item in items if item]


@dataclass(frozen=True)
class Settings:
    variants: List[str] = field(default_factory=lambda: list(DEFAULT_VARIANTS))
    locale: str = "en"
    verbose: bool = False


def load_settings(env_file: Path | None = None) -> Settings:
    """读取 .env 与环境变量；非法值回退到默认值"""
    load_dotenv(env_file or ROOT / ".env")

    known = set(known_variants())
    variants = [v for v in _env_list("GAMEFORGE_VARIANTS", DEFAULT_VARIANTS) if v in known]
    if not variants:
        variants = list(DEFAULT_VARIANTS)

    locale = os.getenv("GAMEFORGE_LOCALE", "en").strip().lower()
    if locale not in LABELS:
        locale = "en"

    return Settings(
        variants=variants,
        locale=locale,
        verbose=_env_bool("GAMEFORGE_VERBOSE", False),
    )
