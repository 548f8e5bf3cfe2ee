#!/usr/bin/env python
"""
Demo - prices a fixed set of example baskets with the default configuration.

Usage:
    python scripts/run_demo.py [--verbose]
"""
import sys
from pathlib import Path

# Add src to path
src_path = Path(__file__).parent.parent / 'src'
sys.path.insert(0, str(src_path))

from widget_basket.config.logging_config import setup_logging
from widget_basket.engine import initialize_with_items

EXAMPLE_BASKETS = [
    ['B01', 'G01'],
    ['R01', 'R01'],
    ['R01', 'G01'],
    ['B01', 'B01', 'R01', 'R01', 'R01'],
    'B01, R01, G01',
    [],
]


def main():
    verbose = '--verbose' in sys.argv[1:]
    setup_logging('DEBUG' if verbose else None)

    for items in EXAMPLE_BASKETS:
        basket = initialize_with_items(items)
        print(f"Items: {items} - Price: {basket.calculate_total()}")
        if verbose:
            print(basket.calculate().get_trace_text())
            print()


if __name__ == "__main__":
    main()
