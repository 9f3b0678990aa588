"""
Reporting module for caplet valuation results.

Provides:
- DataFrame formatters
- CSV and JSON export
"""

from xccy_core.reporting.export import (
    export_to_csv,
    export_valuations_to_json,
    valuation_records,
)
from xccy_core.reporting.tables import create_caplet_price_table

__all__ = [
    "create_caplet_price_table",
    "export_to_csv",
    "export_valuations_to_json",
    "valuation_records",
]
