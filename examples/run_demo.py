#!/usr/bin/env python3
"""
Cross-Currency Caplet Engine - Demo Script

This script demonstrates the complete valuation workflow:
1. Load model, simulation and caplet configuration
2. Simulate the domestic rate, foreign rate and forward FX
3. Check the numeraire and FX reconstruction at 0, T1 and T2
4. Value the six caplet variants
5. Compare with closed-form values where available
6. Export results

Usage:
    python examples/run_demo.py [config.yaml]
"""

import logging
import sys
from pathlib import Path

import numpy as np

from xccy_core import (
    CrossCurrencyModel,
    Currency,
    analytic_caplet_value,
    create_caplet_price_table,
    export_to_csv,
    export_valuations_to_json,
    load_config,
    portfolio_caplets,
    valuate_caplets,
)


def main() -> None:
    """Run the caplet demo."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    print("=" * 60)
    print("Cross-Currency Caplet Engine - Demo")
    print("=" * 60)
    print()

    # =========================================================================
    # 1. Load Configuration
    # =========================================================================
    print("1. Loading configuration...")

    config_path = (
        Path(sys.argv[1]) if len(sys.argv) > 1 else Path(__file__).parent / "config.yaml"
    )
    config = load_config(config_path)
    model_config = config["model"]
    simulation_config = config["simulation"]

    print(f"   Period: [{model_config.period_start}, {model_config.period_end}]")
    print(f"   Caplets: {config['portfolio'].n_caplets}")
    print()

    # =========================================================================
    # 2. Simulate
    # =========================================================================
    print("2. Simulating model...")

    model = CrossCurrencyModel.from_config(model_config, simulation_config)
    params = model.parameters

    print(f"   Paths: {model.number_of_paths}")
    print(f"   Time steps: {model.time_discretization.number_of_time_steps}")
    print(f"   Forward FX FFX(T2;0): {params.initial_forward_fx:.6f}")
    print()

    # =========================================================================
    # 3. Numeraire and FX checks
    # =========================================================================
    print("3. Numeraire and FX reconstruction...")

    t1, t2 = params.period_start, params.period_end
    for t in (0.0, t1, t2):
        numeraire = np.mean(model.numeraire(t))
        fx = np.mean(model.fx_rate(Currency.FOREIGN, t))
        print(f"   t={t:.2f}  E[N(t)] = {numeraire:.6f}  E[FX(t)] = {fx:.6f}")

    # FX(t) / N(t) should be a martingale for a foreign zero bond paying at T2
    print(f"   FX(0) P^f(T2;0) = {params.initial_fx * params.foreign_zero_bond:.6f}")
    print(f"   N(0) E[FX(T2)]  = {params.domestic_zero_bond * np.mean(model.fx_rate(1, t2)):.6f}")
    print()

    # =========================================================================
    # 4. Value Caplets
    # =========================================================================
    print("4. Valuing caplets...")

    caplets = portfolio_caplets(config["portfolio"], t1, t2)

    results = valuate_caplets(caplets, model)

    # =========================================================================
    # 5. Compare with Closed Forms
    # =========================================================================
    print("5. Comparing with closed forms...")

    analytic = {
        name: analytic_caplet_value(caplet, params)
        for name, caplet in caplets.items()
        if not caplet.pays_in_advance
    }

    table = create_caplet_price_table(results, analytic)
    print()
    print(table.to_string(index=False, float_format=lambda x: f"{x:.6f}"))
    print()

    # =========================================================================
    # 6. Export Results
    # =========================================================================
    print("6. Exporting results...")

    output_dir = Path(__file__).parent / "outputs"
    path = export_to_csv(table, output_dir / "caplet_prices.csv")
    print(f"   Saved: {path}")
    path = export_valuations_to_json(results, output_dir / "caplet_valuations.json")
    print(f"   Saved: {path}")

    print()
    print("=" * 60)
    print("Demo complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
