# core/models.py

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional, Tuple


class BagOption(str, Enum):
    BACKPACK = "Backpack"
    BACKPACK_CARRIER = "Backpack+Carrier"
    MULTI_CARRIER = "MultiCarrier"  # 2+ suitcases → taxi to/from the airport


class CardType(str, Enum):
    MOBILE = "Mobile"
    PHYSICAL = "Physical"


class StrategyKind(str, Enum):
    """Declaration order is the tie-break priority when costs are equal."""
    SINGLE_TICKETS = "single_tickets"
    DAY_PASS = "day_pass"
    HYBRID = "hybrid"


@dataclass(frozen=True)
class TravelInput:
    arrival_date: date
    departure_date: date
    bag_option: BagOption = BagOption.BACKPACK_CARRIER
    daily_trips: int = 4
    card_type: CardType = CardType.MOBILE

    def __post_init__(self):
        if self.daily_trips < 0:
            raise ValueError(f"daily_trips must be >= 0, got {self.daily_trips}")

    @property
    def uses_taxi(self) -> bool:
        return self.bag_option is BagOption.MULTI_CARRIER

    @property
    def is_physical(self) -> bool:
        return self.card_type is CardType.PHYSICAL


@dataclass(frozen=True)
class DailyDetail:
    date: date
    pass_type: str
    cost: Decimal

    @property
    def month_day(self) -> str:
        return self.date.strftime("%m/%d")

    def to_dict(self) -> dict:
        return {
            "date": self.date.isoformat(),
            "month_day": self.month_day,
            "pass_type": self.pass_type,
            "cost": float(self.cost),
        }


@dataclass(frozen=True)
class Strategy:
    kind: StrategyKind
    name: str
    total_cost: Decimal
    description: str
    daily_breakdown: Tuple[DailyDetail, ...] = field(default_factory=tuple)
    card_name: Optional[str] = None
    card_fee: Decimal = Decimal("0.00")
    is_recommended: bool = False

    def to_dict(self) -> dict:
        return {
            "kind": self.kind.value,
            "name": self.name,
            "total_cost": float(self.total_cost),
            "description": self.description,
            "card_name": self.card_name,
            "card_fee": float(self.card_fee),
            "is_recommended": self.is_recommended,
            "daily_breakdown": [d.to_dict() for d in self.daily_breakdown],
        }
