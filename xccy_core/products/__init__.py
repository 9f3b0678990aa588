"""
Products valued on the cross-currency model.

Provides the generalized caplet covering domestic, foreign and quanto
caplets paid in advance or in arrears.
"""

from xccy_core.products.base import CrossCurrencyProduct
from xccy_core.products.caplet import (
    GeneralizedCaplet,
    caplet_variants,
    portfolio_caplets,
    valuate_caplets,
)
from xccy_core.products.result import ValuationResult

__all__ = [
    "CrossCurrencyProduct",
    "GeneralizedCaplet",
    "ValuationResult",
    "caplet_variants",
    "portfolio_caplets",
    "valuate_caplets",
]
