"""
Closed-form benchmarks for caplets paid at the end of the period.
"""

from xccy_core.analytics.black import (
    analytic_caplet_value,
    black_caplet,
    domestic_caplet_value,
    foreign_caplet_value,
    quanto_caplet_value,
)

__all__ = [
    "black_caplet",
    "domestic_caplet_value",
    "foreign_caplet_value",
    "quanto_caplet_value",
    "analytic_caplet_value",
]
