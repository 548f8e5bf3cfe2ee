"""
Pricing configuration - catalog, delivery rules and the default values.

All configuration objects are immutable once built and are passed explicitly
into a Basket.
"""
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Iterable, Iterator, Mapping, Optional, Sequence, Union

from ..errors import ConfigurationError, NoApplicableDeliveryRuleError
from .models import DeliveryRule, Product
from .offers import HALF_PRICE_EVERY_OTHER, OfferSet

ProductEntry = Union[Product, Mapping]
RuleEntry = Union[DeliveryRule, Mapping, Sequence]


def _as_product(code: str, entry: ProductEntry) -> Product:
    if isinstance(entry, Product):
        return entry
    try:
        return Product(code=code, name=entry['name'], price=entry['price'])
    except (KeyError, TypeError):
        raise ConfigurationError(f"Product {code} needs a name and a price, got {entry!r}")


def _as_rule(entry: RuleEntry) -> DeliveryRule:
    if isinstance(entry, DeliveryRule):
        return entry
    if isinstance(entry, Mapping):
        try:
            return DeliveryRule(min_total=entry['min_total'], cost=entry['cost'])
        except KeyError:
            raise ConfigurationError(f"Delivery rule needs min_total and cost, got {entry!r}")
    try:
        min_total, cost = entry
    except (TypeError, ValueError):
        raise ConfigurationError(f"Delivery rule must be a (min_total, cost) pair, got {entry!r}")
    return DeliveryRule(min_total=min_total, cost=cost)


class Catalog(Mapping):
    """Read-only mapping of product code -> Product, in insertion order."""

    def __init__(self, products: Optional[Mapping[str, ProductEntry]] = None):
        self._products = {
            str(code): _as_product(str(code), entry)
            for code, entry in (products or {}).items()
        }

    @classmethod
    def from_products(cls, products: Iterable[Product]) -> 'Catalog':
        catalog = {}
        for product in products:
            if product.code in catalog:
                raise ConfigurationError(f"Duplicate product code {product.code}")
            catalog[product.code] = product
        return cls(catalog)

    @property
    def codes(self) -> list[str]:
        return list(self._products)

    def __getitem__(self, code: str) -> Product:
        return self._products[code]

    def __iter__(self) -> Iterator[str]:
        return iter(self._products)

    def __len__(self) -> int:
        return len(self._products)

    def __repr__(self):
        return f"Catalog({list(self._products.values())!r})"


class DeliveryRuleSet(Sequence):
    """
    Ordered delivery rules, evaluated first-match-wins.

    Rules are not sorted: supply them in descending order of min_total for
    tiered delivery pricing.
    """

    def __init__(self, rules: Optional[Iterable[RuleEntry]] = None):
        self._rules = tuple(_as_rule(rule) for rule in (rules or ()))

    def select(self, subtotal: Decimal) -> DeliveryRule:
        """Return the first rule whose min_total the subtotal reaches."""
        for rule in self._rules:
            if rule.applies_to(subtotal):
                return rule
        raise NoApplicableDeliveryRuleError(subtotal)

    @property
    def max_cost(self) -> Decimal:
        return max((rule.cost for rule in self._rules), default=Decimal("0"))

    def __getitem__(self, index):
        return self._rules[index]

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self):
        return f"DeliveryRuleSet({list(self._rules)!r})"


@dataclass(frozen=True)
class PricingConfig:
    """Catalog, delivery rules and offers used together by a basket."""
    catalog: Catalog
    delivery_rules: DeliveryRuleSet
    offers: OfferSet = field(default_factory=OfferSet)


DEFAULT_CATALOG = Catalog({
    'R01': {'name': 'Red Widget', 'price': '32.95'},
    'G01': {'name': 'Green Widget', 'price': '24.95'},
    'B01': {'name': 'Blue Widget', 'price': '7.95'},
})

DEFAULT_DELIVERY_RULES = DeliveryRuleSet([
    {'min_total': '90', 'cost': '0'},
    {'min_total': '50', 'cost': '2.95'},
    {'min_total': '0', 'cost': '4.95'},
])

DEFAULT_OFFERS = OfferSet({'R01': HALF_PRICE_EVERY_OTHER})


def default_config() -> PricingConfig:
    """The stock widget catalog, tiered delivery and red widget offer."""
    return PricingConfig(
        catalog=DEFAULT_CATALOG,
        delivery_rules=DEFAULT_DELIVERY_RULES,
        offers=DEFAULT_OFFERS,
    )
