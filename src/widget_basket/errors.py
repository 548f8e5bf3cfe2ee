"""
Error types raised by the basket pricing engine.

All errors derive from PricingError so callers can catch the whole family.
"""
from decimal import Decimal
from typing import Iterable


class PricingError(Exception):
    """Base class for basket pricing errors."""


class UnknownProductError(PricingError, LookupError):
    """Raised when a product code is not present in the catalog."""

    def __init__(self, code: str, valid_codes: Iterable[str]):
        self.code = code
        self.valid_codes = list(valid_codes)
        super().__init__(
            f"Not a valid product code: {code!r}. "
            f"Available codes: {','.join(self.valid_codes)}"
        )


class InvalidItemsTypeError(PricingError, TypeError):
    """Raised when basket items are neither a list of codes nor a comma separated string."""

    def __init__(self, items):
        self.items = items
        super().__init__(
            f"items can only be a list of codes or a comma separated string, "
            f"got {type(items).__name__}"
        )


class NoApplicableDeliveryRuleError(PricingError):
    """Raised when no delivery rule covers the basket subtotal."""

    def __init__(self, subtotal: Decimal):
        self.subtotal = subtotal
        super().__init__(
            f"No delivery rule applies to subtotal {subtotal}. "
            "Delivery rules must include one with a minimum total of 0."
        )


class ConfigurationError(PricingError, ValueError):
    """Raised when catalog, delivery rule or offer data is malformed."""
