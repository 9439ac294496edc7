import json

import pytest

from bytebloom.events import GameEvent, GameEventKind
from bytebloom.pests import PestType


def test_unit_event_serializes_as_name():
    assert GameEvent(GameEventKind.BLIGHT_SPOTTED).to_dict() == "BlightSpotted"


def test_infestation_serializes_with_payload():
    event = GameEvent(GameEventKind.PEST_INFESTATION, PestType.APHIDS)
    assert event.to_dict() == {"PestInfestation": "Aphids"}


@pytest.mark.parametrize(
    "event",
    [
        GameEvent(GameEventKind.BLIGHT_SPOTTED),
        GameEvent(GameEventKind.MARKET_CRASH),
        GameEvent(GameEventKind.BUMPER_HARVEST),
        GameEvent(GameEventKind.PEST_INFESTATION, PestType.WHITEFLIES),
    ],
)
def test_round_trip_through_json(event):
    restored = GameEvent.from_dict(json.loads(json.dumps(event.to_dict())))
    assert restored == event


def test_infestation_requires_pest_type():
    with pytest.raises(ValueError):
        GameEvent(GameEventKind.PEST_INFESTATION)


def test_unit_event_rejects_pest_type():
    with pytest.raises(ValueError):
        GameEvent(GameEventKind.MARKET_CRASH, PestType.APHIDS)


def test_malformed_data_rejected():
    with pytest.raises(ValueError):
        GameEvent.from_dict({"PestInfestation": "Aphids", "MarketCrash": None})