"""In-memory product catalog and its JSON loader."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterable, Optional

from pydantic import ValidationError

from posprice.exceptions import CatalogError
from posprice.models import CatalogFile, PricedItem

logger = logging.getLogger(__name__)


class Catalog:
    """Name-keyed collection of priced items, held by reference."""

    def __init__(self, items: Iterable[PricedItem] = ()) -> None:
        self._items: dict[str, PricedItem] = {}
        for item in items:
            self.insert(item)

    def insert(self, item: PricedItem) -> None:
        """Store ``item`` under its name, replacing any previous entry."""
        if item.name in self._items:
            logger.debug("Replacing catalog entry %s", item.name)
        self._items[item.name] = item

    def retrieve(self, name: str) -> Optional[PricedItem]:
        return self._items.get(name)

    def names(self) -> list[str]:
        return sorted(self._items)

    def __contains__(self, name: object) -> bool:
        return name in self._items

    def __len__(self) -> int:
        return len(self._items)


def load_catalog(path: Path) -> Catalog:
    """Load a catalog from a JSON document of the form ``{"items": [...]}``."""
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise CatalogError(
            "catalog_not_found",
            f"Cannot read catalog file: {path}",
            path=path,
            details={"reason": str(exc)},
        ) from exc
    except UnicodeDecodeError as exc:
        raise CatalogError(
            "catalog_unreadable",
            f"Catalog file is not UTF-8 text: {path}",
            path=path,
            details={"position": exc.start, "reason": exc.reason},
        ) from exc

    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise CatalogError(
            "catalog_invalid_json",
            f"Catalog file is not valid JSON: {exc.msg}",
            path=path,
            details={"line": exc.lineno, "column": exc.colno},
        ) from exc

    try:
        document = CatalogFile.model_validate(payload)
    except ValidationError as exc:
        raise CatalogError(
            "catalog_invalid",
            "Catalog file does not match the expected schema",
            path=path,
            details={"errors": exc.errors(include_url=False)},
        ) from exc

    names = [item.name for item in document.items]
    duplicates = sorted({name for name in names if names.count(name) > 1})
    if duplicates:
        raise CatalogError(
            "catalog_duplicate_name",
            f"Duplicate item names in catalog: {', '.join(duplicates)}",
            path=path,
            details={"names": duplicates},
        )

    catalog = Catalog(document.items)
    logger.info("Loaded %d catalog items from %s", len(catalog), path)
    return catalog
