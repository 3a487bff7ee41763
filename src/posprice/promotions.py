"""Promotion rules and their cost functions."""

import logging
from decimal import Decimal
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, ValidationError

logger = logging.getLogger(__name__)


class _PromotionBase(BaseModel):
    """Fields and setters shared by both promotion variants."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    purchase_qty: int = Field(..., gt=0, description="Quantity bought per cycle")
    limit: Optional[int] = Field(
        None,
        gt=0,
        description="Maximum cumulative quantity eligible for the promotion",
    )

    _owner_id: Optional[int] = PrivateAttr(default=None)
    _owner_name: Optional[str] = PrivateAttr(default=None)

    @property
    def special_type(self) -> str:
        """Fixed label of the promotion variant."""
        return self.kind

    @property
    def owner(self) -> Optional[str]:
        """Name of the item this promotion is attached to, if any."""
        return self._owner_name

    def attached_elsewhere(self, item: Any) -> bool:
        """True if another item object holds this promotion."""
        return self._owner_id is not None and self._owner_id != id(item)

    def attach_to(self, item: Any) -> None:
        self._owner_id = id(item)
        self._owner_name = item.name

    def release(self) -> None:
        self._owner_id = None
        self._owner_name = None

    def set_purchase_qty(self, value: int) -> bool:
        return self._assign("purchase_qty", value)

    def set_limit(self, value: Optional[int]) -> bool:
        return self._assign("limit", value)

    def _assign(self, field_name: str, value: Any) -> bool:
        """Validate and store a field, keeping the prior value on failure."""
        try:
            setattr(self, field_name, value)
        except ValidationError as exc:
            logger.warning(
                "Rejected %s=%r for %s promotion: %s",
                field_name,
                value,
                self.kind,
                exc.errors()[0]["msg"],
            )
            return False
        return True

    def _split_eligible(self, quantity: int) -> tuple[int, int]:
        """Split quantity into the part eligible for the promotion and the excess."""
        if self.limit is None:
            return quantity, 0
        capped = min(quantity, self.limit)
        return capped, quantity - capped


class ThresholdPercentage(_PromotionBase):
    """Buy N at full price, get M at X percent off, repeating."""

    kind: Literal["BOGO"] = Field("BOGO", frozen=True)
    discount_qty: int = Field(..., ge=0, description="Discounted quantity per cycle")
    discount_percent: int = Field(
        ..., ge=0, le=100, description="Percent off for discounted units"
    )

    def set_discount_qty(self, value: int) -> bool:
        return self._assign("discount_qty", value)

    def set_discount_percent(self, value: int) -> bool:
        return self._assign("discount_percent", value)

    def cost(self, price: Decimal, quantity: int) -> Decimal:
        """
        Cost of ``quantity`` units at ``price`` per unit.

        The eligible part is cut into cycles of ``purchase_qty`` full-price
        units followed by ``discount_qty`` discounted units; a trailing
        partial cycle discounts only what lies past the purchase threshold.
        Quantity beyond ``limit`` is charged full price.
        """
        capped, excess = self._split_eligible(quantity)
        cycles, remainder = divmod(capped, self.purchase_qty + self.discount_qty)

        full_units = cycles * self.purchase_qty + min(remainder, self.purchase_qty)
        discounted_units = cycles * self.discount_qty + max(
            0, remainder - self.purchase_qty
        )
        rate = (100 - Decimal(self.discount_percent)) / 100

        return (full_units + excess) * price + discounted_units * price * rate


class BulkFixedPrice(_PromotionBase):
    """Buy N for a fixed price, repeating."""

    kind: Literal["BULK"] = Field("BULK", frozen=True)
    fixed_price: int = Field(
        ..., ge=0, description="Price in minor units for a whole group"
    )

    def set_fixed_price(self, value: int) -> bool:
        return self._assign("fixed_price", value)

    def cost(self, price: Decimal, quantity: int) -> Decimal:
        """Complete groups cost ``fixed_price``; leftovers and excess cost ``price`` each."""
        capped, excess = self._split_eligible(quantity)
        groups, remainder = divmod(capped, self.purchase_qty)

        return groups * Decimal(self.fixed_price) + (remainder + excess) * price


Promotion = Annotated[
    Union[ThresholdPercentage, BulkFixedPrice], Field(discriminator="kind")
]
