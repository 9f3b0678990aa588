"""
Cross-currency Monte Carlo model exposed to products.
"""

from xccy_core.model.cross_currency import CrossCurrencyModel, Currency, as_currency

__all__ = [
    "CrossCurrencyModel",
    "Currency",
    "as_currency",
]
