"""Environment-based settings and logging set-up."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv

from core.models import BagOption, CardType

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_DAILY_TRIPS = 4
DEFAULT_STAY_DAYS = 4

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    """Front-end defaults and logging level."""

    log_level: str = DEFAULT_LOG_LEVEL
    default_daily_trips: int = DEFAULT_DAILY_TRIPS
    default_bag_option: BagOption = BagOption.BACKPACK_CARRIER
    default_card_type: CardType = CardType.MOBILE
    default_stay_days: int = DEFAULT_STAY_DAYS


def _int_env(name: str, default: int, low: int, high: int) -> int:
    raw = os.getenv(name, "")
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if low <= value <= high else default


def _enum_env(name: str, enum_cls, default):
    raw = os.getenv(name, "")
    try:
        return enum_cls(raw) if raw else default
    except ValueError:
        return default


@lru_cache(maxsize=1)
def get_settings(dotenv_path: Optional[str] = None) -> Settings:
    """Return cached settings; the .env file never overrides real environment variables."""
    load_dotenv(dotenv_path=dotenv_path, override=False)
    level = os.getenv("PLANNER_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
    if level not in _LEVELS:
        level = DEFAULT_LOG_LEVEL
    return Settings(
        log_level=level,
        default_daily_trips=_int_env("PLANNER_DEFAULT_TRIPS", DEFAULT_DAILY_TRIPS, 0, 10),
        default_bag_option=_enum_env("PLANNER_DEFAULT_BAGS", BagOption, BagOption.BACKPACK_CARRIER),
        default_card_type=_enum_env("PLANNER_DEFAULT_CARD", CardType, CardType.MOBILE),
        default_stay_days=_int_env("PLANNER_DEFAULT_STAY_DAYS", DEFAULT_STAY_DAYS, 0, 365),
    )


def configure_logging(level: Optional[str] = None) -> None:
    logging.basicConfig(
        level=level or get_settings().log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
