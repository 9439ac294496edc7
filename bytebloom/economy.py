"""The produce market: prices, buying and selling."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Any, Optional

_MIN_PRICE = 0.1
_PRICE_JITTER = 0.05
_DEMAND_RECOVERY = 0.005
_REFERENCE_PRICE = 10.0


class MarketError(Exception):
    """A trade that the market or the player cannot carry out."""


def _default_prices() -> dict[str, float]:
    return {"tomato": 10.0, "potato": 5.0, "corn": 15.0}


@dataclass
class Market:
    """Current prices and the supply/demand factor of each item."""

    items: dict[str, float] = field(default_factory=_default_prices)
    supply_demand: dict[str, float] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "items": dict(self.items),
            "supply_demand": dict(self.supply_demand),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Market:
        return cls(
            items={name: float(price) for name, price in data["items"].items()},
            supply_demand={
                name: float(effect) for name, effect in data["supply_demand"].items()
            },
        )


def sell_item(
    inventory: dict[str, int],
    wallet: float,
    market: Market,
    item_name: str,
    quantity: int,
) -> float:
    """Sell from the inventory and return the new wallet balance.

    Selling lowers the item's supply/demand factor by one hundredth per unit.
    """
    price = market.items.get(item_name)
    if price is None:
        raise MarketError("Item not found in market.")
    available = inventory.get(item_name)
    if available is None:
        raise MarketError("Item not found in inventory.")
    if available < quantity:
        raise MarketError("Not enough items to sell.")

    inventory[item_name] = available - quantity
    effect = market.supply_demand.get(item_name, 1.0)
    market.supply_demand[item_name] = effect - quantity / 100.0
    return wallet + price * quantity


def buy_item(
    inventory: dict[str, int],
    wallet: float,
    market: Market,
    item_name: str,
    quantity: int,
) -> float:
    """Buy into the inventory and return the new wallet balance."""
    price = market.items.get(item_name)
    if price is None:
        raise MarketError("Item not found in market.")
    cost = price * quantity
    if wallet < cost:
        raise MarketError("Not enough cash to buy.")
    inventory[item_name] = inventory.get(item_name, 0) + quantity
    return wallet - cost


def update_market_prices(market: Market, rng: Optional[random.Random] = None) -> None:
    """Drift every price randomly, scaled by its supply/demand factor."""
    source = rng or random
    for item, price in market.items.items():
        change = -_PRICE_JITTER + 2 * _PRICE_JITTER * source.random()
        effect = market.supply_demand.get(item, 1.0)
        market.items[item] = max(price * (change + effect), _MIN_PRICE)

        if item in market.supply_demand:
            market.supply_demand[item] = min(effect + _DEMAND_RECOVERY, 1.0)


def get_market_price(item: str) -> float:
    """A flat reference price, the same for every item."""
    reference = dict.fromkeys(_default_prices(), _REFERENCE_PRICE)
    return reference.get(item, _REFERENCE_PRICE)


def _format_price(price: float) -> str:
    if price == int(price):
        return str(int(price))
    return repr(price)


def view_market(market: Market) -> str:
    """A tab-separated table of items and their prices."""
    lines = ["Item\t\tPrice\n"]
    lines.extend(
        f"{item}\t\t{_format_price(price)}\n" for item, price in market.items.items()
    )
    return "".join(lines)