"""Marginal pricing of quantity transitions in minor currency units."""

from dataclasses import dataclass
from decimal import ROUND_DOWN, Decimal
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import PricedItem

WEIGHT_UNIT_SCALE = 100


@dataclass(frozen=True)
class PriceTransition:
    """Rounded price change for moving an item between two quantities."""

    name: str
    before: int
    after: int
    amount: int


def to_minor_units(value: Decimal) -> int:
    """Add one half and truncate toward zero, giving whole minor currency units."""
    return int((value + Decimal("0.5")).to_integral_value(rounding=ROUND_DOWN))


def price_transition(item: "PricedItem", before: int, after: int) -> PriceTransition:
    """
    Price the move from ``before`` to ``after`` as a single rounded amount.

    The amount is always measured from the lower to the higher quantity, so a
    removal reverses exactly what the matching scan added.
    """
    if before < 0 or after < 0:
        raise ValueError("quantities cannot be negative")

    low, high = sorted((before, after))
    amount = to_minor_units(item.cost_at_quantity(high) - item.cost_at_quantity(low))

    return PriceTransition(name=item.name, before=before, after=after, amount=amount)
