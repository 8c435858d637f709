# core/fares.py

from __future__ import annotations

from dataclasses import asdict, dataclass
from decimal import Decimal


@dataclass(frozen=True)
class FareTable:
    """
    Paris (Île-de-France Mobilités) fares in euros.
    Card fees are one-time issuance costs; the mobile card is free.
    """
    single: Decimal = Decimal("2.55")
    day_pass: Decimal = Decimal("12.30")       # Navigo Jour
    week_pass: Decimal = Decimal("32.40")      # Navigo Semaine, Monday → Sunday
    airport_rer: Decimal = Decimal("14.00")
    airport_taxi: Decimal = Decimal("55.00")
    easy_card: Decimal = Decimal("2.00")       # Navigo Easy: tickets, day passes
    decouverte_card: Decimal = Decimal("5.00")  # Navigo Découverte: required for week passes
    mobile_card: Decimal = Decimal("0.00")

    def to_dict(self) -> dict:
        return {k: float(v) for k, v in asdict(self).items()}


FARES = FareTable()
