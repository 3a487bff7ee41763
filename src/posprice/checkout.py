"""Checkout register: scanning, removal and the running total."""

import logging
from typing import Optional

from .catalog import Catalog
from .models import CheckoutSummary, PricedItem
from .pricing import price_transition

logger = logging.getLogger(__name__)


def _is_valid_weight(weight: Optional[int]) -> bool:
    return isinstance(weight, int) and not isinstance(weight, bool) and weight > 0


class Checkout:
    """
    Single checkout session against a shared catalog.

    Every operation either updates both the quantity ledger and the total or
    changes nothing and returns ``False``.
    """

    def __init__(self) -> None:
        self._catalog: Optional[Catalog] = None
        self._quantities: dict[str, int] = {}
        self._total = 0

    def assign_inventory(self, catalog: Catalog) -> None:
        """Use ``catalog`` for future lookups. The ledger and total are kept."""
        self._catalog = catalog

    def get_inventory(self) -> Optional[Catalog]:
        return self._catalog

    def get_quantity(self, name: str) -> int:
        return self._quantities.get(name, 0)

    def get_total(self) -> int:
        return self._total

    def scan_item(self, name: str, weight: Optional[int] = None) -> bool:
        """
        Add one unit, or ``weight`` weight-units for a weight-priced item.

        Args:
            name: Catalog name of the item
            weight: Weight scanned; required for weight-priced items, ignored otherwise

        Returns:
            True if the item was added
        """
        item = self._lookup(name)
        if item is None:
            return False

        if item.by_weight:
            if not _is_valid_weight(weight):
                logger.debug("Scan of %s rejected: invalid weight %r", name, weight)
                return False
            delta = weight
        else:
            delta = 1

        before = self.get_quantity(name)
        change = price_transition(item, before, before + delta)

        self._quantities[name] = change.after
        self._total += change.amount
        logger.debug("Scanned %s: %d -> %d, +%d", name, before, change.after, change.amount)
        return True

    def remove_item(self, name: str, weight: Optional[int] = None) -> bool:
        """
        Remove one unit, or ``weight`` weight-units for a weight-priced item.

        Removal subtracts exactly the marginal cost of the quantity leaving the
        ledger, so promotions that no longer apply are taken back.
        """
        item = self._lookup(name)
        if item is None:
            return False

        before = self.get_quantity(name)
        if item.by_weight:
            if not _is_valid_weight(weight) or weight > before:
                logger.debug(
                    "Removal of %s rejected: weight %r with %d held", name, weight, before
                )
                return False
            delta = weight
        else:
            if before == 0:
                logger.debug("Removal of %s rejected: nothing held", name)
                return False
            delta = 1

        change = price_transition(item, before, before - delta)

        self._quantities[name] = change.after
        self._total -= change.amount
        logger.debug("Removed %s: %d -> %d, -%d", name, before, change.after, change.amount)
        return True

    def summary(self) -> CheckoutSummary:
        """Snapshot of the current ledger and total."""
        return CheckoutSummary(quantities=dict(self._quantities), total=self._total)

    def _lookup(self, name: str) -> Optional[PricedItem]:
        if self._catalog is None:
            logger.warning("No catalog assigned, cannot price %s", name)
            return None

        item = self._catalog.retrieve(name)
        if item is None:
            logger.warning("Unknown item: %s", name)
        return item
