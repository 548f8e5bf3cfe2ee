"""Engine subpackage - core basket pricing logic."""
from .basket import Basket, initialize_with_items, parse_items
from .configuration import (
    DEFAULT_CATALOG,
    DEFAULT_DELIVERY_RULES,
    DEFAULT_OFFERS,
    Catalog,
    DeliveryRuleSet,
    PricingConfig,
    default_config,
)
from .models import DeliveryRule, LineItem, Product, Result
from .offers import AlternateUnitDiscount, CallableOffer, HALF_PRICE_EVERY_OTHER, Offer, OfferSet

__all__ = [
    'Basket', 'initialize_with_items', 'parse_items',
    'Catalog', 'DeliveryRuleSet', 'PricingConfig', 'default_config',
    'DEFAULT_CATALOG', 'DEFAULT_DELIVERY_RULES', 'DEFAULT_OFFERS',
    'Product', 'DeliveryRule', 'LineItem', 'Result',
    'Offer', 'AlternateUnitDiscount', 'CallableOffer', 'HALF_PRICE_EVERY_OTHER', 'OfferSet',
]
