"""
Closed-form caplet values for the log-normal cross-currency model.

Used as benchmarks for the Monte Carlo valuation of the caplets paid
at the end of the period.
"""

import numpy as np
from scipy.stats import norm

from xccy_core.market.parameters import ModelParameters
from xccy_core.model.cross_currency import Currency
from xccy_core.products.caplet import GeneralizedCaplet


def black_caplet(forward: float, strike: float, volatility: float, expiry: float) -> float:
    """
    Undiscounted Black call on a log-normal forward.

    Parameters
    ----------
    forward : float
        Expected value of the rate at expiry under the pricing measure
    strike : float
        Strike rate
    volatility : float
        Log-volatility
    expiry : float
        Time to fixing in years

    Returns
    -------
    float
        E[max(L(T) - K, 0)] for log-normal L with mean `forward`

    Notes
    -----
    F N(d1) - K N(d2),  d1,2 = (ln(F/K) ± ½σ²T) / (σ√T)
    Falls back to intrinsic value for zero variance or non-positive strike.
    """
    std_dev = volatility * np.sqrt(max(expiry, 0.0))
    if std_dev <= 1e-12 or strike <= 0:
        return max(forward - strike, 0.0)

    d1 = (np.log(forward / strike) + 0.5 * std_dev**2) / std_dev
    d2 = d1 - std_dev
    return float(forward * norm.cdf(d1) - strike * norm.cdf(d2))


def domestic_caplet_value(params: ModelParameters, strike: float) -> float:
    """
    Domestic caplet paid at T2.

    L^d is a martingale under the domestic T2-forward measure:
        V(0) = P^d(T2; 0) · Black(L^d(0), K, σ_d, T1)
    """
    return params.domestic_zero_bond * black_caplet(
        params.initial_domestic_forward_rate,
        strike,
        params.volatility_domestic,
        params.period_start,
    )


def quanto_caplet_value(params: ModelParameters, strike: float) -> float:
    """
    Foreign rate caplet paid in domestic units at T2.

    Under the domestic T2-forward measure L^f drifts at -σ_f σ_FX ρ_XF:
        V(0) = P^d(T2; 0) · Black(L^f(0) e^{-σ_f σ_FX ρ_XF T1}, K, σ_f, T1)
    """
    adjustment = (
        params.volatility_foreign
        * params.volatility_fx_forward
        * params.correlation_fx_foreign
        * params.period_start
    )
    return params.domestic_zero_bond * black_caplet(
        params.initial_foreign_forward_rate * np.exp(-adjustment),
        strike,
        params.volatility_foreign,
        params.period_start,
    )


def foreign_caplet_value(params: ModelParameters, strike: float) -> float:
    """
    Foreign caplet paid in foreign units at T2, valued in domestic units.

    L^f is a martingale under the foreign T2-forward measure:
        V(0) = FX(0) P^f(T2; 0) · Black(L^f(0), K, σ_f, T1)
             = FFX(T2; 0) P^d(T2; 0) · Black(L^f(0), K, σ_f, T1)
    """
    return (
        params.initial_forward_fx
        * params.domestic_zero_bond
        * black_caplet(
            params.initial_foreign_forward_rate,
            strike,
            params.volatility_foreign,
            params.period_start,
        )
    )


def analytic_caplet_value(caplet: GeneralizedCaplet, params: ModelParameters) -> float:
    """
    Closed-form time-0 value of a caplet paid at the end of the period.

    Parameters
    ----------
    caplet : GeneralizedCaplet
        Caplet on the model's period, paid at T2
    params : ModelParameters
        Model parameters

    Returns
    -------
    float
        Analytic value in domestic units

    Raises
    ------
    NotImplementedError
        For in-advance payments, which carry a convexity adjustment with
        no closed form in this model
    """
    if caplet.pays_in_advance:
        raise NotImplementedError(
            f"No closed form for {caplet.label}; use the Monte Carlo valuation"
        )
    if caplet.currency is Currency.DOMESTIC:
        return domestic_caplet_value(params, caplet.strike)
    if caplet.is_quanto:
        return quanto_caplet_value(params, caplet.strike)
    return foreign_caplet_value(params, caplet.strike)
