"""
Writers for caplet price tables and valuation records.
"""

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import pandas as pd

from xccy_core.products.caplet import GeneralizedCaplet
from xccy_core.products.result import ValuationResult


def _prepare(path: str | Path) -> Path:
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    return target


def export_to_csv(
    df: pd.DataFrame,
    path: str | Path,
    float_format: str = "%.8f",
) -> Path:
    """
    Write a price table to CSV, creating missing directories.

    Parameters
    ----------
    df : pd.DataFrame
        Table, typically from `create_caplet_price_table`
    path : str | Path
        Target file
    float_format : str
        printf-style format for prices (eight decimals by default,
        Monte Carlo errors are usually around 1e-5)

    Returns
    -------
    Path
        Location of the written file
    """
    target = _prepare(path)
    df.to_csv(target, index=False, float_format=float_format)
    return target


def valuation_records(
    results: Mapping[str, tuple[GeneralizedCaplet, ValuationResult]],
) -> list[dict[str, Any]]:
    """Flatten caplet terms and Monte Carlo estimates into plain dicts."""
    records = []
    for name, (caplet, valuation) in results.items():
        records.append(
            {
                "variant": name,
                "currency": caplet.currency.name.lower(),
                "is_quanto": caplet.is_quanto,
                "period_start": caplet.period_start,
                "period_end": caplet.period_end,
                "payment_time": caplet.payment_time,
                "strike": caplet.strike,
                **valuation.to_dict(),
            }
        )
    return records


def export_valuations_to_json(
    results: Mapping[str, tuple[GeneralizedCaplet, ValuationResult]],
    path: str | Path,
    indent: int = 2,
) -> Path:
    """
    Write caplet valuations as a JSON list, one object per caplet.

    Parameters
    ----------
    results : Mapping[str, tuple[GeneralizedCaplet, ValuationResult]]
        Output of `valuate_caplets`
    path : str | Path
        Target file
    indent : int
        JSON indentation

    Returns
    -------
    Path
        Location of the written file
    """
    target = _prepare(path)
    with open(target, "w", encoding="utf-8") as f:
        json.dump(valuation_records(results), f, indent=indent)
    return target
