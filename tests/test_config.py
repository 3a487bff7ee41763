"""Tests for CheckoutConfig."""

import pytest

from posprice.config import CheckoutConfig, get_config, reload_config


def test_defaults():
    config = CheckoutConfig(_env_file=None)
    assert config.currency == "USD"
    assert config.currency_exponent == 2
    assert config.catalog_path is None


def test_currency_is_normalized():
    config = CheckoutConfig(_env_file=None, currency=" eur ")
    assert config.currency == "EUR"


@pytest.mark.parametrize("value", ["US", "EURO", "U5D"])
def test_currency_invalid_format(value):
    with pytest.raises(ValueError, match="Invalid currency code format"):
        CheckoutConfig(_env_file=None, currency=value)


def test_currency_exponent_range():
    with pytest.raises(ValueError, match="less than or equal to 4"):
        CheckoutConfig(_env_file=None, currency_exponent=5)


def test_settings_from_env(monkeypatch, tmp_path):
    monkeypatch.setenv("CURRENCY", "jpy")
    monkeypatch.setenv("CURRENCY_EXPONENT", "0")
    monkeypatch.setenv("CATALOG_PATH", str(tmp_path / "catalog.json"))

    config = CheckoutConfig(_env_file=None)
    assert config.currency == "JPY"
    assert config.currency_exponent == 0
    assert config.catalog_path == tmp_path / "catalog.json"


@pytest.mark.parametrize(
    ("currency", "exponent", "amount", "expected"),
    [
        ("USD", 2, 1614, "16.14 USD"),
        ("USD", 2, 5, "0.05 USD"),
        ("USD", 2, -5, "-0.05 USD"),
        ("JPY", 0, 1614, "1614 JPY"),
        ("BHD", 3, 1614, "1.614 BHD"),
    ],
)
def test_format_minor(currency, exponent, amount, expected):
    config = CheckoutConfig(
        _env_file=None, currency=currency, currency_exponent=exponent
    )
    assert config.format_minor(amount) == expected


def test_validate_config_unknown_iso_code():
    config = CheckoutConfig(_env_file=None, currency="ABC")
    with pytest.raises(ValueError, match="not an ISO 4217 code"):
        config.validate_config()


def test_validate_config_missing_catalog(tmp_path):
    config = CheckoutConfig(_env_file=None, catalog_path=tmp_path / "nope.json")
    with pytest.raises(ValueError, match="CATALOG_PATH does not exist"):
        config.validate_config()


def test_validate_config_reports_every_error(tmp_path):
    config = CheckoutConfig(
        _env_file=None, currency="ABC", catalog_path=tmp_path / "nope.json"
    )
    with pytest.raises(ValueError) as exc_info:
        config.validate_config()
    assert "CURRENCY" in str(exc_info.value)
    assert "CATALOG_PATH" in str(exc_info.value)


def test_validate_config_valid(catalog_file):
    config = CheckoutConfig(_env_file=None, currency="EUR", catalog_path=catalog_file)
    config.validate_config()  # Should not raise


def test_config_singleton():
    config1 = get_config()
    config2 = get_config()
    assert config1 is config2


def test_reload_config(monkeypatch):
    config1 = get_config()
    monkeypatch.setenv("CURRENCY", "GBP")
    config2 = reload_config()
    assert config1 is not config2
    assert config2.currency == "GBP"


def test_validate_config_can_skip_catalog_check(tmp_path):
    config = CheckoutConfig(_env_file=None, catalog_path=tmp_path / "nope.json")
    config.validate_config(check_catalog=False)  # Should not raise
