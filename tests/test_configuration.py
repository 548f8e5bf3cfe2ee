"""Tests for catalog, delivery rule and default configuration values."""
from decimal import Decimal

import pytest

from widget_basket.engine import (
    Basket,
    Catalog,
    DEFAULT_CATALOG,
    DEFAULT_DELIVERY_RULES,
    DEFAULT_OFFERS,
    DeliveryRule,
    DeliveryRuleSet,
    Product,
    default_config,
)
from widget_basket.errors import ConfigurationError, NoApplicableDeliveryRuleError


def test_default_catalog():
    assert DEFAULT_CATALOG.codes == ["R01", "G01", "B01"]
    assert DEFAULT_CATALOG["R01"] == Product("R01", "Red Widget", Decimal("32.95"))
    assert DEFAULT_CATALOG["G01"] == Product("G01", "Green Widget", Decimal("24.95"))
    assert DEFAULT_CATALOG["B01"] == Product("B01", "Blue Widget", Decimal("7.95"))


def test_default_delivery_rules_in_order():
    assert list(DEFAULT_DELIVERY_RULES) == [
        DeliveryRule(Decimal("90"), Decimal("0")),
        DeliveryRule(Decimal("50"), Decimal("2.95")),
        DeliveryRule(Decimal("0"), Decimal("4.95")),
    ]


def test_default_offers():
    assert list(DEFAULT_OFFERS) == ["R01"]


def test_default_config_bundle():
    config = default_config()
    assert config.catalog is DEFAULT_CATALOG
    assert config.delivery_rules is DEFAULT_DELIVERY_RULES
    assert config.offers is DEFAULT_OFFERS
    assert Basket.from_config(config).calculate_total() == Decimal("4.95")


def test_float_prices_become_exact_decimals():
    product = Product("X", "Thing", 32.95)
    assert product.price == Decimal("32.95")


@pytest.mark.parametrize("price", ["-1", "nan", "", "twelve"])
def test_product_rejects_bad_prices(price):
    with pytest.raises(ConfigurationError):
        Product("X", "Thing", price)


def test_product_is_immutable():
    product = DEFAULT_CATALOG["R01"]
    with pytest.raises(AttributeError):
        product.price = Decimal("1")


def test_catalog_is_read_only():
    with pytest.raises(TypeError):
        DEFAULT_CATALOG["X01"] = Product("X01", "Extra", "1")


def test_catalog_requires_name_and_price():
    with pytest.raises(ConfigurationError):
        Catalog({"X01": {"name": "No price"}})


def test_catalog_from_products_rejects_duplicates():
    with pytest.raises(ConfigurationError, match="Duplicate"):
        Catalog.from_products([Product("A", "One", "1"), Product("A", "Two", "2")])


@pytest.mark.parametrize("subtotal, expected_cost", [
    ("0", "4.95"),
    ("49.99", "4.95"),
    ("50", "2.95"),
    ("89.99", "2.95"),
    ("90", "0"),
    ("1000", "0"),
])
def test_delivery_rule_selection(subtotal, expected_cost):
    assert DEFAULT_DELIVERY_RULES.select(Decimal(subtotal)).cost == Decimal(expected_cost)


def test_delivery_rules_accept_pairs_and_mappings():
    rules = DeliveryRuleSet([(10, 1), {"min_total": 0, "cost": 2}])
    assert rules[0] == DeliveryRule(Decimal("10"), Decimal("1"))
    assert rules.select(Decimal("5")).cost == Decimal("2")
    assert rules.max_cost == Decimal("2")


def test_delivery_rules_reject_malformed_entries():
    with pytest.raises(ConfigurationError):
        DeliveryRuleSet([(1, 2, 3)])
    with pytest.raises(ConfigurationError):
        DeliveryRuleSet([{"cost": 1}])


def test_delivery_rules_without_match():
    with pytest.raises(NoApplicableDeliveryRuleError):
        DeliveryRuleSet([(10, 0)]).select(Decimal("9.99"))
