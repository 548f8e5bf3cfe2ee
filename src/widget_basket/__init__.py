"""
Widget Basket Package

A basket pricing calculator for the widget catalog.
Prices items with multi-buy offers and tiered delivery charges.
"""

__version__ = "1.0.0"
