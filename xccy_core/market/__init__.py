"""
Market inputs and dynamics of the single-period cross-currency hybrid.

This module provides:
- Decomposition of the three pairwise correlations into independent drivers
- The immutable model parameter set
- Log-normal drift and factor loadings with the quanto adjustment
- The domestic zero-bond numeraire at 0, T1 and T2
"""

from xccy_core.market.correlation import CorrelationDecomposer
from xccy_core.market.lognormal_model import LognormalCrossCurrencyProcessModel
from xccy_core.market.numeraire import NumeraireProvider
from xccy_core.market.parameters import ModelParameters

__all__ = [
    "CorrelationDecomposer",
    "ModelParameters",
    "LognormalCrossCurrencyProcessModel",
    "NumeraireProvider",
]
