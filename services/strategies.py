"""
services/strategies.py
----------------------
Ticketing strategies for a stay in Paris.
- Single tickets: every ride paid individually
- Day passes: a Navigo Jour on every in-city day
- Hybrid: a Navigo Semaine for the weeks where it beats day-by-day fares
Airport days (first and last day of the stay) always carry the transfer
fare, RER or taxi depending on luggage.
"""

from __future__ import annotations

import datetime as dt
import logging
from dataclasses import replace
from decimal import Decimal
from typing import List, Tuple

from core.fares import FARES, FareTable
from core.models import CardType, DailyDetail, Strategy, StrategyKind, TravelInput
from services.dates import split_weeks, trip_days, weekday, weekday_name

logger = logging.getLogger(__name__)

ZERO = Decimal("0.00")

# Latest arrival weekday (Monday = 0) for which a week pass is still offered
# in the arrival week. The physical card needs a first-day trip to the
# airport office before the pass can be loaded, hence one day less.
ARRIVAL_WEEK_CUTOFF = {
    CardType.MOBILE: 3,    # Thursday
    CardType.PHYSICAL: 2,  # Wednesday
}

MOBILE_CARD_NAME = "Navigo mobile"
EASY_CARD_NAME = "Navigo Easy"
DECOUVERTE_CARD_NAME = "Navigo Découverte"


# ──────────────────────────────────────────────────────────────────────────────
# Per-day pricing
# ──────────────────────────────────────────────────────────────────────────────
def _transfer(travel: TravelInput, fares: FareTable) -> Tuple[str, Decimal]:
    """Airport transfer mode and fare for one way."""
    if travel.uses_taxi:
        return "taxi", fares.airport_taxi
    return "RER", fares.airport_rer


def _airport_day(day: dt.date, travel: TravelInput, fares: FareTable) -> DailyDetail:
    mode, cost = _transfer(travel, fares)
    return DailyDetail(date=day, pass_type=f"Airport {mode}", cost=cost)


def _tickets_day(day: dt.date, travel: TravelInput, fares: FareTable) -> DailyDetail:
    return DailyDetail(
        date=day,
        pass_type=f"Single tickets x{travel.daily_trips}",
        cost=fares.single * travel.daily_trips,
    )


def _day_pass_day(day: dt.date, travel: TravelInput, fares: FareTable) -> DailyDetail:
    return DailyDetail(date=day, pass_type="Day pass (Jour)", cost=fares.day_pass)


def _cheapest_day(day: dt.date, travel: TravelInput, fares: FareTable) -> DailyDetail:
    """Single tickets or a day pass, whichever is cheaper (tickets on a tie)."""
    tickets = _tickets_day(day, travel, fares)
    if fares.day_pass < tickets.cost:
        return _day_pass_day(day, travel, fares)
    return tickets


def _price_days(days: List[dt.date], airport_days, travel: TravelInput, fares: FareTable, in_city) -> List[DailyDetail]:
    return [
        _airport_day(day, travel, fares) if day in airport_days else in_city(day, travel, fares)
        for day in days
    ]


def _total(breakdown, card_fee: Decimal) -> Decimal:
    return sum((d.cost for d in breakdown), ZERO) + card_fee


def _flat_card(travel: TravelInput, fares: FareTable) -> Tuple[str, Decimal]:
    if travel.is_physical:
        return EASY_CARD_NAME, fares.easy_card
    return MOBILE_CARD_NAME, fares.mobile_card


# ──────────────────────────────────────────────────────────────────────────────
# Strategies
# ──────────────────────────────────────────────────────────────────────────────
def _single_tickets(days: List[dt.date], travel: TravelInput, fares: FareTable) -> Strategy:
    breakdown = _price_days(days, {days[0], days[-1]}, travel, fares, _tickets_day)
    card_name, card_fee = _flat_card(travel, fares)
    mode, _ = _transfer(travel, fares)
    return Strategy(
        kind=StrategyKind.SINGLE_TICKETS,
        name="Single tickets",
        total_cost=_total(breakdown, card_fee),
        description=f"Airport round trip by {mode}, single tickets for every ride in town.",
        daily_breakdown=tuple(breakdown),
        card_name=card_name,
        card_fee=card_fee,
    )


def _day_passes(days: List[dt.date], travel: TravelInput, fares: FareTable) -> Strategy:
    breakdown = _price_days(days, {days[0], days[-1]}, travel, fares, _day_pass_day)
    card_name, card_fee = _flat_card(travel, fares)
    mode, _ = _transfer(travel, fares)
    return Strategy(
        kind=StrategyKind.DAY_PASS,
        name="Day passes",
        total_cost=_total(breakdown, card_fee),
        description=f"Airport round trip by {mode}, a day pass for every day in town.",
        daily_breakdown=tuple(breakdown),
        card_name=card_name,
        card_fee=card_fee,
    )


def _week_pass_week(week: List[dt.date], airport_days, travel: TravelInput, fares: FareTable) -> List[DailyDetail]:
    """Full pass price on the first day of the span, zero afterwards; transfers stay on top."""
    mode, transfer_cost = _transfer(travel, fares)
    details = []
    for i, day in enumerate(week):
        shown = fares.week_pass if i == 0 else ZERO
        if day in airport_days:
            details.append(DailyDetail(date=day, pass_type=f"Week pass + airport {mode}", cost=shown + transfer_cost))
        else:
            details.append(DailyDetail(date=day, pass_type="Week pass (Semaine)", cost=shown))
    return details


def _hybrid(days: List[dt.date], travel: TravelInput, fares: FareTable) -> Strategy:
    airport_days = {days[0], days[-1]}
    cutoff = ARRIVAL_WEEK_CUTOFF[travel.card_type]

    breakdown: List[DailyDetail] = []
    passes_bought = 0
    per_day_in_city = False

    for idx, week in enumerate(split_weeks(days)):
        per_day = _price_days(week, airport_days, travel, fares, _cheapest_day)
        # transfers are paid either way, so only in-city days enter the comparison
        per_day_cost = sum((d.cost for d in per_day if d.date not in airport_days), ZERO)

        pass_cost = fares.week_pass
        if travel.is_physical and passes_bought == 0:
            pass_cost += fares.decouverte_card

        eligible = idx > 0 or weekday(week[0]) <= cutoff
        buy = eligible and pass_cost < per_day_cost
        logger.debug(
            "week %d (%s %s, %d days): eligible=%s pass=%s per-day=%s → %s",
            idx, weekday_name(week[0]), week[0].isoformat(), len(week),
            eligible, pass_cost, per_day_cost, "week pass" if buy else "per day",
        )

        if buy:
            breakdown.extend(_week_pass_week(week, airport_days, travel, fares))
            passes_bought += 1
        else:
            breakdown.extend(per_day)
            per_day_in_city = per_day_in_city or any(d not in airport_days for d in week)

    week_pass_used = passes_bought > 0
    if travel.is_physical:
        # Standard card for in-city days paid by ticket or day pass (or a stay with no pass at all),
        # upgraded card for the pass weeks; both may be needed. Airport transfers alone need neither.
        names, card_fee = [], ZERO
        if per_day_in_city or not week_pass_used:
            names.append(EASY_CARD_NAME)
            card_fee += fares.easy_card
        if week_pass_used:
            names.append(DECOUVERTE_CARD_NAME)
            card_fee += fares.decouverte_card
        card_name = " + ".join(names)
    else:
        card_name, card_fee = MOBILE_CARD_NAME, fares.mobile_card

    if week_pass_used:
        description = (
            f"Uses {passes_bought} Navigo week pass{'es' if passes_bought > 1 else ''} (Semaine) "
            "for the weeks where it beats day-by-day fares, single tickets or day passes elsewhere."
        )
    else:
        description = (
            "Stay too short or too close to the weekend for a week pass: "
            "the cheapest of single tickets and day passes, day by day."
        )

    return Strategy(
        kind=StrategyKind.HYBRID,
        name="Optimal hybrid",
        total_cost=_total(breakdown, card_fee),
        description=description,
        daily_breakdown=tuple(breakdown),
        card_name=card_name,
        card_fee=card_fee,
    )


# ──────────────────────────────────────────────────────────────────────────────
# Public function
# ──────────────────────────────────────────────────────────────────────────────
def compute_strategies(travel: TravelInput, fares: FareTable = FARES) -> List[Strategy]:
    """
    Return the three strategies, cheapest first, the first one flagged as
    recommended. Equal totals keep the order single tickets → day passes →
    hybrid. An empty list when the departure precedes the arrival.
    """
    days = trip_days(travel.arrival_date, travel.departure_date)
    if not days:
        logger.info(
            "departure %s before arrival %s: no strategy",
            travel.departure_date.isoformat(), travel.arrival_date.isoformat(),
        )
        return []

    candidates = [
        _single_tickets(days, travel, fares),
        _day_passes(days, travel, fares),
        _hybrid(days, travel, fares),
    ]
    ranked = sorted(candidates, key=lambda s: s.total_cost)
    result = [replace(s, is_recommended=(i == 0)) for i, s in enumerate(ranked)]

    logger.info(
        "%d-day stay, %d trips/day, %s, %s card → %s at %s €",
        len(days), travel.daily_trips, travel.bag_option.value, travel.card_type.value,
        result[0].name, result[0].total_cost,
    )
    return result
