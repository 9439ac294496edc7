import random

import pytest

from bytebloom.economy import (
    Market,
    MarketError,
    buy_item,
    get_market_price,
    sell_item,
    update_market_prices,
    view_market,
)


def test_default_market_prices():
    market = Market()
    assert market.items == {"tomato": 10.0, "potato": 5.0, "corn": 15.0}
    assert market.supply_demand == {}


def test_sell_item_updates_inventory_wallet_and_demand():
    market = Market()
    inventory = {"tomato": 8}
    wallet = sell_item(inventory, 0.0, market, "tomato", 3)
    assert inventory["tomato"] == 5
    assert wallet == pytest.approx(market.items["tomato"] * 3)
    assert market.supply_demand["tomato"] < 1.0


def test_repeated_sales_lower_demand_further():
    market = Market()
    inventory = {"corn": 10}
    sell_item(inventory, 0.0, market, "corn", 2)
    first = market.supply_demand["corn"]
    sell_item(inventory, 0.0, market, "corn", 2)
    assert market.supply_demand["corn"] < first


def test_sell_unknown_market_item():
    with pytest.raises(MarketError, match="Item not found in market."):
        sell_item({"rose": 1}, 0.0, Market(), "rose", 1)


def test_sell_item_missing_from_inventory():
    with pytest.raises(MarketError, match="Item not found in inventory."):
        sell_item({}, 0.0, Market(), "tomato", 1)


def test_sell_more_than_available():
    inventory = {"potato": 1}
    with pytest.raises(MarketError, match="Not enough items to sell."):
        sell_item(inventory, 0.0, Market(), "potato", 2)
    assert inventory == {"potato": 1}


def test_buy_item_adds_to_inventory():
    market = Market()
    inventory = {}
    wallet = buy_item(inventory, 100.0, market, "potato", 4)
    assert inventory == {"potato": 4}
    assert wallet == pytest.approx(100.0 - market.items["potato"] * 4)


def test_buy_then_sell_round_trip_restores_wallet():
    market = Market()
    inventory = {}
    wallet = buy_item(inventory, 100.0, market, "corn", 2)
    wallet = sell_item(inventory, wallet, market, "corn", 2)
    assert wallet == pytest.approx(100.0)
    assert inventory["corn"] == 0


def test_buy_without_enough_cash():
    inventory = {}
    with pytest.raises(MarketError, match="Not enough cash to buy."):
        buy_item(inventory, 1.0, Market(), "corn", 1)
    assert inventory == {}


def test_buy_unknown_item():
    with pytest.raises(MarketError, match="Item not found in market."):
        buy_item({}, 100.0, Market(), "rose", 1)


def test_update_prices_stays_within_jitter():
    market = Market()
    before = dict(market.items)
    update_market_prices(market, random.Random(7))
    for item, price in market.items.items():
        assert before[item] * 0.95 <= price < before[item] * 1.05


def test_update_prices_respects_floor():
    market = Market(items={"weed": 0.1}, supply_demand={"weed": 0.0})
    update_market_prices(market, random.Random(1))
    assert market.items["weed"] == pytest.approx(0.1)


def test_update_prices_recovers_demand_up_to_one():
    market = Market(items={"corn": 15.0}, supply_demand={"corn": 0.999})
    update_market_prices(market, random.Random(3))
    assert market.supply_demand["corn"] == 1.0


def test_update_prices_leaves_untracked_demand_alone():
    market = Market()
    update_market_prices(market, random.Random(5))
    assert market.supply_demand == {}


def test_get_market_price_is_flat():
    assert get_market_price("corn") == 10.0
    assert get_market_price("anything") == get_market_price("corn")


def test_view_market_lists_every_item():
    text = view_market(Market())
    assert text.startswith("Item\t\tPrice\n")
    assert "tomato\t\t10\n" in text
    assert len(text.splitlines()) == 4


def test_market_dict_round_trip():
    market = Market(items={"tomato": 12.5}, supply_demand={"tomato": 0.75})
    assert Market.from_dict(market.to_dict()) == market