"""Pydantic data models for catalog items and checkout snapshots."""

import logging
from decimal import Decimal
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from .pricing import WEIGHT_UNIT_SCALE
from .promotions import Promotion

logger = logging.getLogger(__name__)


class PricedItem(BaseModel):
    """Catalog entry with price, markdown and an optional promotion."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    name: str = Field(..., min_length=1, description="Unique name within a catalog")
    unit_price: int = Field(
        ...,
        ge=0,
        description="Minor units per unit, or per 100 weight-units when by_weight",
    )
    by_weight: bool = Field(False, description="Priced by weight instead of count")
    markdown: int = Field(0, ge=0, description="Amount taken off the unit price")
    promotion: Optional[Promotion] = Field(None, description="Attached promotion")

    @model_validator(mode="after")
    def claim_promotion(self) -> "PricedItem":
        """Attach the promotion to this item, refusing one held by another item."""
        if self.promotion is not None:
            if self.promotion.attached_elsewhere(self):
                raise ValueError(
                    f"promotion already attached to {self.promotion.owner}"
                )
            self.promotion.attach_to(self)
        return self

    @property
    def effective_unit_price(self) -> int:
        """Unit price less markdown."""
        return self.unit_price - self.markdown

    def set_markdown(self, amount: int) -> bool:
        """Set the markdown; a negative amount is rejected and the old one kept."""
        try:
            self.markdown = amount
        except ValidationError:
            logger.warning("Rejected markdown %r for %s", amount, self.name)
            return False
        return True

    def assign_promotion(self, promotion: Promotion) -> bool:
        """Attach ``promotion``, replacing any current one."""
        if promotion.attached_elsewhere(self):
            logger.warning(
                "Promotion already attached to %s, not assigning to %s",
                promotion.owner,
                self.name,
            )
            return False

        if self.promotion is not None and self.promotion is not promotion:
            self.promotion.release()

        self.promotion = promotion
        return True

    def cost_at_quantity(self, quantity: int) -> Decimal:
        """Exact cost of holding ``quantity`` of this item, before rounding."""
        price = Decimal(self.effective_unit_price)
        if self.by_weight:
            price = price / WEIGHT_UNIT_SCALE

        if self.promotion is None:
            return price * quantity
        return self.promotion.cost(price, quantity)


class CatalogFile(BaseModel):
    """On-disk catalog document."""

    items: List[PricedItem] = Field(..., min_length=0, description="Catalog entries")


class CheckoutSummary(BaseModel):
    """Snapshot of a checkout ledger and its running total."""

    quantities: Dict[str, int] = Field(default_factory=dict)
    total: int
    currency: Optional[str] = None
    formatted_total: Optional[str] = None
