"""
Configuration Loader - Builds a catalog, delivery rules and offers from CSV files.

File formats:
- catalog.csv: code, name, price
- delivery_rules.csv: min_total, cost (row order is evaluation order)
- offers.csv: code, offer_type, value[, label]
"""
import logging
from pathlib import Path
from typing import Optional

import pandas as pd

from ..config.settings import get_settings, Settings
from ..engine.configuration import Catalog, DeliveryRuleSet, PricingConfig
from ..engine.models import DeliveryRule, Product
from ..engine.offers import OfferSet, build_offer
from ..errors import ConfigurationError

logger = logging.getLogger(__name__)


def _read_csv(path: Path, required: tuple) -> pd.DataFrame:
    """Read a CSV as strings, with stripped headers and values."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"{path.name} not found at {path}.")

    df = pd.read_csv(path, dtype=str, skipinitialspace=True).fillna('')
    df.columns = [c.strip() for c in df.columns]
    for col in df.columns:
        df[col] = df[col].astype(str).str.strip()

    missing = [col for col in required if col not in df.columns]
    if missing:
        raise ConfigurationError(f"{path.name} is missing columns: {', '.join(missing)}")
    return df


def load_catalog(path: Path) -> Catalog:
    """Load the product catalog. Codes must be unique."""
    df = _read_csv(path, ('code', 'name', 'price'))
    df = df[df['code'] != '']

    duplicates = df.loc[df['code'].duplicated(), 'code'].unique()
    if len(duplicates) > 0:
        raise ConfigurationError(f"Duplicate product codes in {Path(path).name}: {', '.join(duplicates)}")

    catalog = Catalog.from_products(
        Product(code=row['code'], name=row['name'], price=row['price'])
        for _, row in df.iterrows()
    )
    logger.info("Loaded %d products from %s", len(catalog), path)
    return catalog


def load_delivery_rules(path: Path) -> DeliveryRuleSet:
    """Load delivery rules, keeping file order."""
    df = _read_csv(path, ('min_total', 'cost'))
    rules = DeliveryRuleSet(
        DeliveryRule(min_total=row['min_total'], cost=row['cost'])
        for _, row in df.iterrows()
    )
    logger.info("Loaded %d delivery rules from %s", len(rules), path)
    return rules


def load_offers(path: Path, catalog: Optional[Catalog] = None) -> OfferSet:
    """
    Load offers keyed by product code.

    When a catalog is given, every offer must reference a code in it.
    """
    df = _read_csv(path, ('code', 'offer_type', 'value'))
    offers = {}
    for _, row in df.iterrows():
        code = row['code']
        if catalog is not None and code not in catalog:
            raise ConfigurationError(f"Offer references unknown product code {code}")
        if code in offers:
            raise ConfigurationError(f"More than one offer for product code {code}")
        offers[code] = build_offer(row['offer_type'], row['value'], label=row.get('label') or None)

    logger.info("Loaded %d offers from %s", len(offers), path)
    return OfferSet(offers)


def load_config(settings: Optional[Settings] = None) -> PricingConfig:
    """Load the full pricing configuration from the settings' CSV files."""
    settings = settings or get_settings()

    catalog = load_catalog(settings.catalog_csv)
    return PricingConfig(
        catalog=catalog,
        delivery_rules=load_delivery_rules(settings.delivery_rules_csv),
        offers=load_offers(settings.offers_csv, catalog=catalog),
    )
