import argparse, datetime, logging
from dotenv import load_dotenv

load_dotenv()

from rich import print
from rich.table import Table

from config import configure_logging, get_settings
from core.models import BagOption, CardType, TravelInput
from services.dates import SATURDAY, SUNDAY, weekday_name
from services.strategies import compute_strategies

log = logging.getLogger("run")


def _iso_date(value: str) -> datetime.date:
    try:
        return datetime.date.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a YYYY-MM-DD date: {value!r}")


def _trips(value: str) -> int:
    n = int(value)
    if not 0 <= n <= 10:
        raise argparse.ArgumentTypeError("trips per day must be between 0 and 10")
    return n


def build_parser(settings) -> argparse.ArgumentParser:
    today = datetime.date.today()
    p = argparse.ArgumentParser(description="Cheapest Paris transit tickets for your stay.")
    p.add_argument("--arrival", type=_iso_date, default=today)  # YYYY-MM-DD
    p.add_argument("--departure", type=_iso_date,
                   default=today + datetime.timedelta(days=settings.default_stay_days))
    p.add_argument("--bags", choices=[b.value for b in BagOption],
                   default=settings.default_bag_option.value)
    p.add_argument("--trips", type=_trips, default=settings.default_daily_trips)
    p.add_argument("--card", choices=[c.value for c in CardType],
                   default=settings.default_card_type.value)
    p.add_argument("--verbose", "-v", action="store_true")
    return p


def breakdown_table(strategy) -> Table:
    t = Table(title=f"{strategy.name}: {strategy.total_cost} €", show_lines=False)
    t.add_column("Date")
    t.add_column("Day")
    t.add_column("Ticket")
    t.add_column("Cost (€)", justify="right")
    for d in strategy.daily_breakdown:
        day = weekday_name(d.date)
        wd = d.date.weekday()
        style = "red" if wd == SUNDAY else "blue" if wd == SATURDAY else None
        t.add_row(d.month_day, day, d.pass_type, f"{d.cost:.2f}", style=style)
    if strategy.card_fee:
        t.add_row("", "", f"Card: {strategy.card_name}", f"{strategy.card_fee:.2f}")
    return t


def main(argv=None):
    settings = get_settings()
    p = build_parser(settings)
    args = p.parse_args(argv)
    configure_logging("DEBUG" if args.verbose else None)

    if args.departure < args.arrival:
        p.error("departure date must not be before arrival date")

    travel = TravelInput(
        arrival_date=args.arrival,
        departure_date=args.departure,
        bag_option=BagOption(args.bags),
        daily_trips=args.trips,
        card_type=CardType(args.card),
    )
    log.debug("input: %s", travel)

    strategies = compute_strategies(travel)

    print(f"[cyan]→ {args.arrival} → {args.departure}, {args.trips} trips/day, "
          f"{args.bags}, {args.card} card[/]")
    for s in strategies:
        mark = "[bold green]★ recommended[/]" if s.is_recommended else ""
        print(f"[yellow]{s.name}[/] : {s.total_cost} € ({s.card_name}) {mark}")
        print(f"  [dim]{s.description}[/]")

    for s in strategies:
        print(breakdown_table(s))
    return strategies


if __name__ == "__main__":
    main()
