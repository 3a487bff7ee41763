"""Custom exceptions for catalog loading errors."""

from pathlib import Path
from typing import Any, Dict, Optional


class CatalogError(Exception):
    """A catalog file that cannot be turned into a catalog, with a stable code."""

    def __init__(
        self,
        code: str,
        message: str,
        *,
        path: Optional[Path] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.path = path
        self.details = details or {}
