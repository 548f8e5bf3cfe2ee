"""
Basket - core pricing logic with traceability.

A basket accumulates product codes and prices them on demand:
- Per-unit charges with multi-buy offers applied to repeat units
- Tiered delivery cost chosen from the subtotal
- Decimal arithmetic, rounded to 2 places at the end
"""
import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import Mapping, Sequence, Union

from ..errors import InvalidItemsTypeError, UnknownProductError
from .configuration import (
    DEFAULT_CATALOG,
    DEFAULT_DELIVERY_RULES,
    DEFAULT_OFFERS,
    Catalog,
    DeliveryRuleSet,
    PricingConfig,
)
from .models import LineItem, Result
from .offers import OfferSet

logger = logging.getLogger(__name__)

CENTS = Decimal("0.01")


def _as_catalog(catalog) -> Catalog:
    return catalog if isinstance(catalog, Catalog) else Catalog(catalog)


def _as_rules(rules) -> DeliveryRuleSet:
    return rules if isinstance(rules, DeliveryRuleSet) else DeliveryRuleSet(rules)


def _as_offers(offers, catalog: Catalog) -> OfferSet:
    if isinstance(offers, OfferSet):
        return offers
    # Plain mappings may name offers by identifiers such as "multiple_R01".
    return OfferSet.from_identifiers(offers or {}, catalog)


def parse_items(items: Union[Sequence, str]) -> list[str]:
    """
    Normalise basket input to a list of product codes.

    Accepts a list/tuple of codes or a comma separated string such as
    "B01, R01, G01". A blank string is an empty basket; an empty code inside
    a string ("B01,,R01") is kept so add() rejects it. Raises
    InvalidItemsTypeError for anything else.
    """
    if isinstance(items, str):
        if not items.strip():
            return []
        return [item.strip() for item in items.split(',')]
    if isinstance(items, (list, tuple)):
        return [str(item) for item in items]
    raise InvalidItemsTypeError(items)


class Basket:
    """
    Shopping basket that prices its items against a catalog.

    Pricing order:
    1. Walk the items in the order they were added
    2. The first unit of a product is charged at catalog price
    3. Later units are charged by the product's offer, if it has one
    4. Pick the first delivery rule the subtotal reaches
    5. Round subtotal + delivery to 2 places

    A basket is not thread-safe; use one instance per caller.
    """

    def __init__(
        self,
        catalog: Union[Catalog, Mapping] = DEFAULT_CATALOG,
        delivery_rules: Union[DeliveryRuleSet, Sequence] = DEFAULT_DELIVERY_RULES,
        offers: Union[OfferSet, Mapping] = DEFAULT_OFFERS,
        rounding: str = ROUND_HALF_UP,
    ):
        self.catalog = _as_catalog(catalog)
        self.delivery_rules = _as_rules(delivery_rules)
        self.offers = _as_offers(offers, self.catalog)
        self.rounding = rounding
        self._items: list[str] = []

    @classmethod
    def from_config(cls, config: PricingConfig, rounding: str = ROUND_HALF_UP) -> 'Basket':
        """Create an empty basket from a configuration bundle."""
        return cls(config.catalog, config.delivery_rules, config.offers, rounding=rounding)

    @classmethod
    def initialize_with_items(cls, items: Union[Sequence, str], *args, **kwargs) -> 'Basket':
        """
        Create a basket and add the given items to it.

        Args:
            items: List of product codes, or a comma separated string of codes
            *args, **kwargs: Passed through to the Basket constructor

        Returns:
            Basket holding the items, in order
        """
        codes = parse_items(items)
        basket = cls(*args, **kwargs)
        for code in codes:
            basket.add(code)
        return basket

    @property
    def items(self) -> list[str]:
        """Copy of the product codes added so far."""
        return list(self._items)

    def add(self, item_code) -> list[str]:
        """
        Add one unit of a product to the basket.

        Returns the current items. Raises UnknownProductError when the code
        is not in the catalog.
        """
        code = str(item_code)
        if code not in self.catalog:
            raise UnknownProductError(code, self.catalog.codes)

        self._items.append(code)
        logger.debug("Added %s to basket (%d items)", code, len(self._items))
        return self.items

    def calculate_total(self) -> Decimal:
        """Total price of the basket, including delivery, rounded to 2 places."""
        return self.calculate().total

    def calculate(self) -> Result:
        """
        Price the basket with full traceability.

        Returns:
            Result dataclass with per-unit lines, subtotal, delivery and total
        """
        result = Result(items=self.items)
        subtotal = Decimal("0")
        tally: dict[str, int] = {}

        for code in self._items:
            line = self._price_unit(code, tally.get(code, 0))
            result.lines.append(line)
            subtotal += line.charge
            tally[code] = tally.get(code, 0) + 1

            if line.offer:
                result.add_trace("Offer Applied", f"{line.offer} on {code} (unit {line.prior_count + 1})", f"{line.charge}")
            else:
                result.add_trace("Unit Price", f"{line.name} ({code})", f"{line.charge}")

        result.subtotal = subtotal
        result.add_trace("Subtotal", f"{len(self._items)} items", f"{subtotal}")

        rule = self.delivery_rules.select(subtotal)
        result.delivery_cost = rule.cost
        result.add_trace("Delivery", f"Subtotal reaches {rule.min_total}", f"{rule.cost}")

        result.total = (subtotal + rule.cost).quantize(CENTS, rounding=self.rounding)
        result.add_trace("Total", f"Rounded {self.rounding}", f"{result.total}")

        logger.debug("Basket %s priced at %s", self._items, result.total)
        return result

    def _price_unit(self, code: str, prior_count: int) -> LineItem:
        """Charge for one unit, given how many of the same product came before it."""
        product = self.catalog[code]
        offer = self.offers.for_code(code)

        line = LineItem(
            code=code,
            name=product.name,
            unit_price=product.price,
            charge=product.price,
            prior_count=prior_count,
        )

        if offer is not None and prior_count > 0:
            line.charge = offer.charge(product.price, prior_count)
            if line.charge != product.price:
                line.offer = offer.label

        return line

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self):
        return f"Basket(items={self._items!r})"


def initialize_with_items(items: Union[Sequence, str], *args, **kwargs) -> Basket:
    """Create a Basket holding the given items; see Basket.initialize_with_items."""
    return Basket.initialize_with_items(items, *args, **kwargs)
