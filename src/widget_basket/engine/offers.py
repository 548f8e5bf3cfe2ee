"""
Offers - multi-buy discount strategies applied to repeat units of a product.

An offer only prices the second and later units of a product; the first unit
is always charged at the catalog price. Offers are keyed directly by product
code in an OfferSet.
"""
import logging
from decimal import Decimal
from typing import Callable, Iterable, Iterator, Mapping, Optional, Union

from ..errors import ConfigurationError
from .models import to_decimal

logger = logging.getLogger(__name__)

HUNDRED = Decimal("100")


class Offer:
    """
    Base offer strategy.

    Subclasses implement charge(unit_price, prior_count), returning the price
    to charge for the current unit given how many units of the same product
    were already counted.
    """

    label = "offer"

    def charge(self, unit_price: Decimal, prior_count: int) -> Decimal:
        raise NotImplementedError

    def __repr__(self):
        return f"{type(self).__name__}({self.label!r})"


class AlternateUnitDiscount(Offer):
    """Takes percent off every second unit (those with an odd prior count)."""

    def __init__(self, percent, label: Optional[str] = None):
        self.percent = to_decimal(percent, "percent")
        if self.percent.is_nan() or not Decimal("0") <= self.percent <= HUNDRED:
            raise ConfigurationError(f"percent must be between 0 and 100, got {percent!r}")
        self.label = label or f"{self.percent.normalize():f}% off every second unit"

    def charge(self, unit_price: Decimal, prior_count: int) -> Decimal:
        if prior_count % 2 == 1:
            return unit_price - unit_price * self.percent / HUNDRED
        return unit_price


class CallableOffer(Offer):
    """Wraps a plain (unit_price, prior_count) -> price function."""

    def __init__(self, func: Callable[[Decimal, int], object], label: Optional[str] = None):
        self.func = func
        self.label = label or getattr(func, "__name__", "custom offer")

    def charge(self, unit_price: Decimal, prior_count: int) -> Decimal:
        return to_decimal(self.func(unit_price, prior_count), self.label)


HALF_PRICE_EVERY_OTHER = AlternateUnitDiscount(50, label="buy one, get the second half price")

OfferLike = Union[Offer, Callable[[Decimal, int], object]]

OFFER_TYPES = {
    'alternate_unit_discount': AlternateUnitDiscount,
}


def build_offer(offer_type: str, value, label: Optional[str] = None) -> Offer:
    """Build an offer from its registered type name and parameter value."""
    offer_type = str(offer_type).strip()
    if offer_type not in OFFER_TYPES:
        raise ConfigurationError(
            f"Unknown offer type {offer_type!r}. Valid types: {', '.join(sorted(OFFER_TYPES))}"
        )
    return OFFER_TYPES[offer_type](value, label=label)


def _as_offer(offer: OfferLike, label: Optional[str] = None) -> Offer:
    if isinstance(offer, Offer):
        return offer
    if callable(offer):
        return CallableOffer(offer, label=label)
    raise ConfigurationError(f"Offer must be an Offer or a callable, got {type(offer).__name__}")


class OfferSet(Mapping):
    """
    Ordered, read-only mapping of product code -> Offer.

    Each product code has at most one offer; lookups are exact matches.
    """

    def __init__(self, offers: Optional[Mapping[str, OfferLike]] = None):
        self._offers = {
            str(code): _as_offer(offer)
            for code, offer in (offers or {}).items()
        }

    @classmethod
    def from_identifiers(cls, offers: Mapping[str, OfferLike], codes: Iterable[str]) -> 'OfferSet':
        """
        Resolve offers named by identifiers that embed a product code.

        An identifier applies to every code that appears in it as a substring,
        e.g. "multiple_R01" applies to R01. Codes are resolved in the given
        order; when several identifiers contain the same code, the first
        identifier in mapping order wins. An identifier equal to the code
        keeps the offer's own label.
        """
        resolved = {}
        for code in codes:
            code = str(code)
            matches = [name for name in offers if code in str(name)]
            if not matches:
                continue
            if len(matches) > 1:
                logger.warning(
                    "Offer identifiers %s all contain product code %s; using %s",
                    matches, code, matches[0],
                )
            name = matches[0]
            resolved[code] = _as_offer(offers[name], label=None if str(name) == code else str(name))
        return cls(resolved)

    def for_code(self, code: str) -> Optional[Offer]:
        """Return the offer for a product code, or None."""
        return self._offers.get(str(code))

    def __getitem__(self, code: str) -> Offer:
        return self._offers[code]

    def __iter__(self) -> Iterator[str]:
        return iter(self._offers)

    def __len__(self) -> int:
        return len(self._offers)

    def __repr__(self):
        return f"OfferSet({self._offers!r})"
