"""Shared test fixtures."""

import json
from pathlib import Path

import pytest

from posprice.catalog import Catalog
from posprice.checkout import Checkout
from posprice.models import PricedItem
from posprice.promotions import BulkFixedPrice, ThresholdPercentage


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep settings from the environment and earlier tests out of each test."""
    for var in ("CURRENCY", "CURRENCY_EXPONENT", "CATALOG_PATH"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setattr("posprice.config._config_instance", None)


def make_item(name, unit_price, *, promotion, by_weight=False):
    item = PricedItem(name=name, unit_price=unit_price, by_weight=by_weight)
    item.assign_promotion(promotion)
    return item


@pytest.fixture
def promo_catalog() -> Catalog:
    """Catalog of items carrying every promotion shape."""
    return Catalog(
        [
            make_item(
                "fish",
                598,
                promotion=ThresholdPercentage(
                    purchase_qty=1, discount_qty=1, discount_percent=70
                ),
            ),
            make_item(
                "cereal",
                299,
                promotion=ThresholdPercentage(
                    purchase_qty=3, discount_qty=2, discount_percent=100
                ),
            ),
            make_item(
                "coke", 499, promotion=BulkFixedPrice(purchase_qty=4, fixed_price=1200)
            ),
            make_item(
                "bread",
                235,
                promotion=BulkFixedPrice(purchase_qty=3, fixed_price=500, limit=3),
            ),
            make_item(
                "cheese",
                199,
                promotion=ThresholdPercentage(
                    purchase_qty=3, discount_qty=1, discount_percent=100, limit=4
                ),
            ),
            make_item(
                "bacon",
                700,
                by_weight=True,
                promotion=ThresholdPercentage(
                    purchase_qty=200, discount_qty=100, discount_percent=50
                ),
            ),
            make_item(
                "shrimp",
                500,
                by_weight=True,
                promotion=ThresholdPercentage(
                    purchase_qty=200, discount_qty=200, discount_percent=75, limit=400
                ),
            ),
        ]
    )


@pytest.fixture
def promo_register(promo_catalog: Catalog) -> Checkout:
    register = Checkout()
    register.assign_inventory(promo_catalog)
    return register


@pytest.fixture
def catalog_file(tmp_path: Path) -> Path:
    """Write a small catalog document and return its path."""
    path = tmp_path / "catalog.json"
    path.write_text(
        json.dumps(
            {
                "items": [
                    {"name": "tea", "unit_price": 299},
                    {"name": "ham", "unit_price": 376, "by_weight": True},
                    {"name": "sugar", "unit_price": 895, "markdown": 125},
                    {
                        "name": "coke",
                        "unit_price": 499,
                        "promotion": {
                            "kind": "BULK",
                            "purchase_qty": 4,
                            "fixed_price": 1200,
                        },
                    },
                    {
                        "name": "cereal",
                        "unit_price": 299,
                        "promotion": {
                            "kind": "BOGO",
                            "purchase_qty": 1,
                            "discount_qty": 1,
                            "discount_percent": 50,
                            "limit": 2,
                        },
                    },
                ]
            }
        ),
        encoding="utf-8",
    )
    return path
