# app.py

import datetime
from dotenv import load_dotenv

load_dotenv()  # ← Must precede any import depending on .env

import streamlit as st
import pandas as pd

from config import configure_logging, get_settings
from core.models import BagOption, CardType, TravelInput
from services.dates import SATURDAY, SUNDAY, weekday_name
from services.strategies import compute_strategies

configure_logging()
settings = get_settings()

BAG_LABELS = {
    BagOption.BACKPACK: "Backpack",
    BagOption.BACKPACK_CARRIER: "Backpack + 1 suitcase",
    BagOption.MULTI_CARRIER: "2+ suitcases",
}

# ──────────────────────────────────────────────────────────────────────────────
# 0. Streamlit configuration
# ──────────────────────────────────────────────────────────────────────────────
st.set_page_config(page_title="Paris Transit Pass Planner", layout="wide")

# ──────────────────────────────────────────────────────────────────────────────
# 1. Input form
# ──────────────────────────────────────────────────────────────────────────────
today = datetime.date.today()
st.markdown("## 🚇 Paris transit pass planner")
st.caption("Enter your stay and the cheapest way to ride is computed on the fly.")

col_in, col_out = st.columns(2)
arrival = col_in.date_input("Paris in", today, key="arrival")
departure = col_out.date_input(
    "Paris out", today + datetime.timedelta(days=settings.default_stay_days), key="departure"
)

bag_option = st.radio(
    "Luggage",
    list(BagOption),
    index=list(BagOption).index(settings.default_bag_option),
    format_func=BAG_LABELS.get,
    horizontal=True,
)
if bag_option is BagOption.MULTI_CARRIER:
    st.caption("With two or more suitcases a taxi to and from the airport is recommended.")
else:
    st.caption("Light enough luggage for the RER.")

daily_trips = st.slider("Average rides per day", 0, 10, settings.default_daily_trips)
card_type = st.radio(
    "Card",
    list(CardType),
    index=list(CardType).index(settings.default_card_type),
    format_func=lambda c: "Navigo on phone" if c is CardType.MOBILE else "Physical Navigo card",
    horizontal=True,
)

# ──────────────────────────────────────────────────────────────────────────────
# 2. Date validation (blocking)
# ──────────────────────────────────────────────────────────────────────────────
if departure < arrival:
    st.error("🛑 Departure date must be on or after the arrival date.")
    st.stop()

# ──────────────────────────────────────────────────────────────────────────────
# 3. Computation (re-run on every change)
# ──────────────────────────────────────────────────────────────────────────────
strategies = compute_strategies(
    TravelInput(
        arrival_date=arrival,
        departure_date=departure,
        bag_option=bag_option,
        daily_trips=daily_trips,
        card_type=card_type,
    )
)


def _day_style(row):
    wd = row["_weekday"]
    colour = "color: red" if wd == SUNDAY else "color: blue" if wd == SATURDAY else ""
    return [colour] * len(row)


def breakdown_frame(strategy) -> pd.DataFrame:
    return pd.DataFrame(
        [
            {
                "Date": d.month_day,
                "Day": weekday_name(d.date),
                "Ticket": d.pass_type,
                "Cost (€)": float(d.cost),
                "_weekday": d.date.weekday(),
            }
            for d in strategy.daily_breakdown
        ]
    )


# ──────────────────────────────────────────────────────────────────────────────
# 4. Results, cheapest first
# ──────────────────────────────────────────────────────────────────────────────
st.markdown("---")
st.subheader("💶 Strategies")
for s in strategies:
    title = f"{'⭐ ' if s.is_recommended else ''}{s.name}: {s.total_cost:.2f} €"
    with st.expander(title, expanded=s.is_recommended):
        if s.is_recommended:
            st.success("Recommended: cheapest option for your stay.")
        st.write(s.description)
        if s.card_name:
            st.write(f"**Card:** {s.card_name} ({s.card_fee:.2f} €)")
        df = breakdown_frame(s)
        st.dataframe(
            df.style.apply(_day_style, axis=1).format({"Cost (€)": "{:.2f}"}),
            column_config={"_weekday": None},
            hide_index=True,
            use_container_width=True,
        )
