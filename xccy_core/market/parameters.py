"""
Immutable parameter set of the single-period cross-currency model.
"""

from dataclasses import dataclass, field

import numpy as np

from xccy_core._types import Rate, Year
from xccy_core.exceptions import DomainError
from xccy_core.market.correlation import CorrelationDecomposer


@dataclass(frozen=True)
class ModelParameters:
    """
    Market data and dynamics of the model over the accrual period [T1, T2].

    The simulated processes are
        L^d(T1, T2; t)  domestic forward rate
        L^f(T1, T2; t)  foreign forward rate
        FFX(T2; t)      forward FX rate, FX(t) P^f(T2; t) / P^d(T2; t)

    each with constant log-volatility and pairwise correlated drivers.

    Attributes
    ----------
    period_start : float
        Fixing time T1 of both forward rates
    period_end : float
        End of the accrual period T2, maturity of the zero bonds
    domestic_zero_bond : float
        P^d(T2; 0)
    foreign_zero_bond : float
        P^f(T2; 0)
    initial_domestic_forward_rate : float
        L^d(T1, T2; 0)
    initial_foreign_forward_rate : float
        L^f(T1, T2; 0)
    initial_forward_fx : float
        FFX(T2; 0)
    volatility_domestic, volatility_foreign, volatility_fx_forward : float
        Log-volatilities of the three processes
    correlation_dom_for, correlation_fx_domestic, correlation_fx_foreign : float
        Pairwise correlations of the log-drivers

    Example
    -------
    >>> params = ModelParameters.from_spot_fx(
    ...     period_start=1.0, period_end=2.0,
    ...     domestic_zero_bond=0.95, foreign_zero_bond=0.96,
    ...     initial_domestic_forward_rate=0.05, initial_foreign_forward_rate=0.04,
    ...     initial_fx=1.10,
    ...     volatility_domestic=0.3, volatility_foreign=0.25, volatility_fx_forward=0.12,
    ...     correlation_dom_for=0.4, correlation_fx_domestic=0.3, correlation_fx_foreign=-0.2,
    ... )
    >>> round(params.initial_fx, 10)
    1.1
    """

    period_start: Year
    period_end: Year
    domestic_zero_bond: float
    foreign_zero_bond: float
    initial_domestic_forward_rate: Rate
    initial_foreign_forward_rate: Rate
    initial_forward_fx: float
    volatility_domestic: float
    volatility_foreign: float
    volatility_fx_forward: float
    correlation_dom_for: float = 0.0
    correlation_fx_domestic: float = 0.0
    correlation_fx_foreign: float = 0.0
    correlation: CorrelationDecomposer = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Validate the parameter set and decompose the correlations."""
        for name, val in [
            ("period_start", self.period_start),
            ("period_end", self.period_end),
        ]:
            if not np.isfinite(val):
                raise DomainError(f"{name} must be finite, got {val}")
        if self.period_start <= 0:
            raise DomainError(f"period_start must be positive, got {self.period_start}")
        if self.period_end <= self.period_start:
            raise DomainError(
                f"period_end ({self.period_end}) must be greater than "
                f"period_start ({self.period_start})"
            )
        for name, val in [
            ("domestic_zero_bond", self.domestic_zero_bond),
            ("foreign_zero_bond", self.foreign_zero_bond),
        ]:
            if not val > 0:
                raise DomainError(f"{name} must be positive, got {val}")
        # All three processes are simulated in log space
        for name, val in [
            ("initial_domestic_forward_rate", self.initial_domestic_forward_rate),
            ("initial_foreign_forward_rate", self.initial_foreign_forward_rate),
            ("initial_forward_fx", self.initial_forward_fx),
        ]:
            if not (np.isfinite(val) and val > 0):
                raise DomainError(f"{name} must be positive and finite, got {val}")
        for name, val in [
            ("volatility_domestic", self.volatility_domestic),
            ("volatility_foreign", self.volatility_foreign),
            ("volatility_fx_forward", self.volatility_fx_forward),
        ]:
            if not val >= 0:
                raise DomainError(f"{name} must be non-negative, got {val}")

        object.__setattr__(
            self,
            "correlation",
            CorrelationDecomposer(
                rho_dom_for=self.correlation_dom_for,
                rho_fx_dom=self.correlation_fx_domestic,
                rho_fx_for=self.correlation_fx_foreign,
            ),
        )

    @property
    def period_length(self) -> float:
        """Accrual period length T2 - T1."""
        return self.period_end - self.period_start

    @property
    def initial_fx(self) -> float:
        """Spot FX rate FX(0) = FFX(T2; 0) P^d(T2; 0) / P^f(T2; 0)."""
        return self.initial_forward_fx * self.domestic_zero_bond / self.foreign_zero_bond

    @property
    def volatilities(self) -> tuple[float, float, float]:
        """Log-volatilities ordered as the simulated components."""
        return (
            self.volatility_domestic,
            self.volatility_foreign,
            self.volatility_fx_forward,
        )

    @classmethod
    def from_spot_fx(
        cls,
        *,
        period_start: Year,
        period_end: Year,
        domestic_zero_bond: float,
        foreign_zero_bond: float,
        initial_domestic_forward_rate: Rate,
        initial_foreign_forward_rate: Rate,
        initial_fx: float,
        volatility_domestic: float,
        volatility_foreign: float,
        volatility_fx_forward: float,
        correlation_dom_for: float = 0.0,
        correlation_fx_domestic: float = 0.0,
        correlation_fx_foreign: float = 0.0,
    ) -> "ModelParameters":
        """
        Build the parameters from the spot FX rate instead of the forward FX.

        The forward FX rate is FFX(T2; 0) = FX(0) P^f(T2; 0) / P^d(T2; 0).

        Parameters
        ----------
        initial_fx : float
            Spot FX rate FX(0), domestic units per foreign unit

        Returns
        -------
        ModelParameters
            Parameters with the implied initial forward FX
        """
        if not domestic_zero_bond > 0:
            raise DomainError(
                f"domestic_zero_bond must be positive, got {domestic_zero_bond}"
            )
        return cls(
            period_start=period_start,
            period_end=period_end,
            domestic_zero_bond=domestic_zero_bond,
            foreign_zero_bond=foreign_zero_bond,
            initial_domestic_forward_rate=initial_domestic_forward_rate,
            initial_foreign_forward_rate=initial_foreign_forward_rate,
            initial_forward_fx=initial_fx * foreign_zero_bond / domestic_zero_bond,
            volatility_domestic=volatility_domestic,
            volatility_foreign=volatility_foreign,
            volatility_fx_forward=volatility_fx_forward,
            correlation_dom_for=correlation_dom_for,
            correlation_fx_domestic=correlation_fx_domestic,
            correlation_fx_foreign=correlation_fx_foreign,
        )

    @classmethod
    def from_config(cls, config: "ModelConfig") -> "ModelParameters":  # noqa: F821
        """
        Create parameters from configuration object.

        Parameters
        ----------
        config : ModelConfig
            Validated model configuration

        Returns
        -------
        ModelParameters
            Initialized parameters
        """
        common = dict(
            period_start=config.period_start,
            period_end=config.period_end,
            domestic_zero_bond=config.domestic_zero_bond,
            foreign_zero_bond=config.foreign_zero_bond,
            initial_domestic_forward_rate=config.initial_domestic_forward_rate,
            initial_foreign_forward_rate=config.initial_foreign_forward_rate,
            volatility_domestic=config.volatilities.domestic,
            volatility_foreign=config.volatilities.foreign,
            volatility_fx_forward=config.volatilities.fx_forward,
            correlation_dom_for=config.correlations.domestic_foreign,
            correlation_fx_domestic=config.correlations.fx_domestic,
            correlation_fx_foreign=config.correlations.fx_foreign,
        )
        if config.initial_forward_fx is not None:
            return cls(initial_forward_fx=config.initial_forward_fx, **common)
        return cls.from_spot_fx(initial_fx=config.initial_fx, **common)
