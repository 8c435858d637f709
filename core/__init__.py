from .fares import FARES, FareTable
from .models import BagOption, CardType, DailyDetail, Strategy, StrategyKind, TravelInput

__all__ = [
    "FARES",
    "FareTable",
    "BagOption",
    "CardType",
    "DailyDetail",
    "Strategy",
    "StrategyKind",
    "TravelInput",
]
