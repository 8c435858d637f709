# main.py

import datetime
import logging

from fastapi import FastAPI
from pydantic import BaseModel, Field
from dotenv import load_dotenv

from config import configure_logging
from core.fares import FARES
from core.models import BagOption, CardType, TravelInput
from services.strategies import compute_strategies

# Load environment variables (.env)
load_dotenv()
configure_logging()

log = logging.getLogger(__name__)

app = FastAPI(title="Paris Transit Pass Planner")


# Request schema for the strategy computation
class StrategyRequest(BaseModel):
    arrival_date: datetime.date
    departure_date: datetime.date
    bag_option: BagOption = BagOption.BACKPACK_CARRIER
    daily_trips: int = Field(4, ge=0, le=10)
    card_type: CardType = CardType.MOBILE


@app.post("/api/strategies", response_model=dict)
def strategies_endpoint(req: StrategyRequest):
    # Inverted dates yield an empty list, not an error
    travel = TravelInput(
        arrival_date=req.arrival_date,
        departure_date=req.departure_date,
        bag_option=req.bag_option,
        daily_trips=req.daily_trips,
        card_type=req.card_type,
    )
    strategies = compute_strategies(travel)
    log.info("%d strategies for %s → %s", len(strategies), req.arrival_date, req.departure_date)
    return {"strategies": [s.to_dict() for s in strategies]}


@app.get("/api/fares", response_model=dict)
def fares_endpoint():
    return FARES.to_dict()
