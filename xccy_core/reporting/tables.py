"""
Table generation utilities for caplet reporting.

One row per caplet, ready for printing or export.
"""

from collections.abc import Mapping

import numpy as np
import pandas as pd

from xccy_core.products.caplet import GeneralizedCaplet
from xccy_core.products.result import ValuationResult


def create_caplet_price_table(
    results: Mapping[str, tuple[GeneralizedCaplet, ValuationResult]],
    analytic_values: Mapping[str, float] | None = None,
) -> pd.DataFrame:
    """
    Create caplet price table.

    Parameters
    ----------
    results : Mapping[str, tuple[GeneralizedCaplet, ValuationResult]]
        Caplet and its Monte Carlo valuation, keyed by variant name
    analytic_values : Mapping[str, float] | None
        Closed-form values for the variants that have one

    Returns
    -------
    pd.DataFrame
        One row per caplet with the Monte Carlo price, its standard error
        and, where available, the analytic value and the difference in
        standard errors
    """
    analytic_values = analytic_values or {}
    rows = []

    for name, (caplet, valuation) in results.items():
        analytic = analytic_values.get(name, np.nan)
        if valuation.standard_error > 0:
            z_score = (valuation.price - analytic) / valuation.standard_error
        else:
            z_score = np.nan
        rows.append(
            {
                "Variant": name,
                "Currency": caplet.currency.name.lower(),
                "Quanto": caplet.is_quanto,
                "Payment (Y)": caplet.payment_time,
                "Strike": caplet.strike,
                "MC Price": valuation.price,
                "Std Error": valuation.standard_error,
                "Analytic": analytic,
                "Diff (SE)": z_score,
            }
        )

    return pd.DataFrame(rows)
