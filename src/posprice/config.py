"""Configuration management for the checkout pricing CLI."""

import logging
from pathlib import Path
from typing import Optional

import pycountry
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class CheckoutConfig(BaseSettings):
    """Configuration for checkout pricing."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    currency: str = Field(
        default="USD",
        description="ISO 4217 code used to label totals",
    )

    currency_exponent: int = Field(
        default=2,
        ge=0,
        le=4,
        description="Number of minor-unit digits in the currency",
    )

    catalog_path: Optional[Path] = Field(
        default=None,
        description="Default catalog JSON file for the CLI",
    )

    @field_validator("currency")
    @classmethod
    def validate_currency_format(cls, v: str) -> str:
        """Validate the currency is a 3-letter code and normalize to uppercase."""
        code = v.strip().upper()
        if len(code) != 3 or not code.isalpha():
            raise ValueError(
                f"Invalid currency code format: '{v}'. "
                f"Must be a 3-letter ISO 4217 code (e.g., USD, EUR)."
            )
        return code

    def format_minor(self, amount: int) -> str:
        """Render an amount in minor units as a major-unit string."""
        if self.currency_exponent == 0:
            return f"{amount} {self.currency}"
        sign = "-" if amount < 0 else ""
        major, minor = divmod(abs(amount), 10**self.currency_exponent)
        return f"{sign}{major}.{minor:0{self.currency_exponent}d} {self.currency}"

    def validate_config(self, *, check_catalog: bool = True) -> None:
        """
        Validate configuration at startup. Raises ValueError if invalid.

        Args:
            check_catalog: Require CATALOG_PATH, when set, to be an existing file
        """
        errors = []

        valid_iso_codes = {c.alpha_3 for c in pycountry.currencies}
        if self.currency not in valid_iso_codes:
            errors.append(f"CURRENCY '{self.currency}' is not an ISO 4217 code")

        if (
            check_catalog
            and self.catalog_path is not None
            and not self.catalog_path.is_file()
        ):
            errors.append(f"CATALOG_PATH does not exist: {self.catalog_path}")

        if errors:
            raise ValueError(
                "Configuration validation failed:\n"
                + "\n".join(f"  - {e}" for e in errors)
            )


_config_instance = None


def get_config() -> CheckoutConfig:
    """Get or create global configuration instance."""
    global _config_instance
    if _config_instance is None:
        _config_instance = CheckoutConfig()
        _config_instance.validate_config()
        logger.info("Configuration validated successfully")
    return _config_instance


def reload_config() -> CheckoutConfig:
    """Reload configuration (useful for testing)."""
    global _config_instance
    _config_instance = CheckoutConfig()
    return _config_instance
