"""
Pydantic configuration models for the cross-currency caplet engine.

Sections of a configuration file:
- model: market data of the accrual period and the dynamics
- simulation: number of paths, Euler step and seed
- caplets: the products to value
"""

from typing import Literal

from pydantic import BaseModel, Field, model_validator

from xccy_core.market.correlation import CorrelationDecomposer


class VolatilityConfig(BaseModel):
    """
    Log-volatilities of the simulated processes.

    Attributes
    ----------
    domestic : float
        Volatility of the domestic forward rate
    foreign : float
        Volatility of the foreign forward rate
    fx_forward : float
        Volatility of the forward FX rate (not of the spot FX rate)
    """

    domestic: float = Field(ge=0, le=2.0, default=0.30)
    foreign: float = Field(ge=0, le=2.0, default=0.25)
    fx_forward: float = Field(ge=0, le=2.0, default=0.12)


class CorrelationConfig(BaseModel):
    """
    Correlations between the log-drivers.

    Attributes
    ----------
    domestic_foreign : float
        Correlation between domestic and foreign forward rates
    fx_domestic : float
        Correlation between forward FX and the domestic rate
    fx_foreign : float
        Correlation between forward FX and the foreign rate
    """

    domestic_foreign: float = Field(gt=-1, lt=1, default=0.4)
    fx_domestic: float = Field(ge=-1, le=1, default=0.3)
    fx_foreign: float = Field(ge=-1, le=1, default=-0.2)

    @model_validator(mode="after")
    def jointly_consistent(self) -> "CorrelationConfig":
        """Reject correlation triples that no Gaussian vector can have."""
        # Same check and tolerance as the model, raises DomainError (a ValueError)
        CorrelationDecomposer.from_config(self)
        return self


class ModelConfig(BaseModel):
    """
    Complete model configuration for one accrual period.

    Exactly one of `initial_fx` (spot FX rate) and `initial_forward_fx`
    (FFX(T2; 0)) must be given.

    Attributes
    ----------
    period_start : float
        Fixing time T1 in years
    period_end : float
        Period end T2 in years
    domestic_zero_bond : float
        P^d(T2; 0)
    foreign_zero_bond : float
        P^f(T2; 0)
    initial_domestic_forward_rate : float
        L^d(T1, T2; 0)
    initial_foreign_forward_rate : float
        L^f(T1, T2; 0)
    initial_fx : float | None
        Spot FX rate, domestic per foreign
    initial_forward_fx : float | None
        Forward FX rate for settlement at T2
    volatilities : VolatilityConfig
        Log-volatilities
    correlations : CorrelationConfig
        Driver correlations

    Example
    -------
    >>> config = ModelConfig(
    ...     period_start=1.0, period_end=2.0,
    ...     domestic_zero_bond=0.95, foreign_zero_bond=0.96,
    ...     initial_domestic_forward_rate=0.05, initial_foreign_forward_rate=0.04,
    ...     initial_fx=1.10,
    ... )
    """

    period_start: float = Field(gt=0, le=50)
    period_end: float = Field(gt=0, le=60)
    domestic_zero_bond: float = Field(gt=0, le=2.0)
    foreign_zero_bond: float = Field(gt=0, le=2.0)
    initial_domestic_forward_rate: float = Field(gt=0, le=1.0)
    initial_foreign_forward_rate: float = Field(gt=0, le=1.0)
    initial_fx: float | None = Field(default=None, gt=0)
    initial_forward_fx: float | None = Field(default=None, gt=0)
    volatilities: VolatilityConfig = Field(default_factory=VolatilityConfig)
    correlations: CorrelationConfig = Field(default_factory=CorrelationConfig)

    @model_validator(mode="after")
    def period_ordered(self) -> "ModelConfig":
        """Validate T1 < T2."""
        if self.period_end <= self.period_start:
            raise ValueError(
                f"period_end ({self.period_end}) must be greater than "
                f"period_start ({self.period_start})"
            )
        return self

    @model_validator(mode="after")
    def one_fx_quote(self) -> "ModelConfig":
        """Validate exactly one FX quote is given."""
        if (self.initial_fx is None) == (self.initial_forward_fx is None):
            raise ValueError("Specify exactly one of initial_fx and initial_forward_fx")
        return self

    @property
    def period_length(self) -> float:
        """Accrual period length T2 - T1."""
        return self.period_end - self.period_start


class SimulationConfig(BaseModel):
    """
    Paths, time step and seed of a run.

    Attributes
    ----------
    n_paths : int
        Number of Monte Carlo paths
    time_step : float
        Nominal Euler step in years (T1 and T2 are always grid points)
    seed : int | None
        Seed of the numpy Generator; None draws a fresh seed
    """

    n_paths: int = Field(ge=100, le=2_000_000, default=100_000)
    time_step: float = Field(gt=0, le=10.0, default=0.25)
    seed: int | None = Field(default=3141)


class CapletConfig(BaseModel):
    """
    Caplet configuration.

    Attributes
    ----------
    currency : str
        'domestic' or 'foreign'
    is_quanto : bool
        Pay the foreign payoff in domestic units without conversion
    payment : str
        'period_end' (in arrears) or 'period_start' (in advance)
    strike : float
        Strike rate (any sign)
    """

    currency: Literal["domestic", "foreign"] = "domestic"
    is_quanto: bool = False
    payment: Literal["period_start", "period_end"] = "period_end"
    strike: float = Field(ge=-1.0, le=1.0)


class PortfolioConfig(BaseModel):
    """
    A set of caplets valued on the same model.

    Attributes
    ----------
    caplets : list[CapletConfig]
        Caplet configurations
    """

    caplets: list[CapletConfig] = Field(default_factory=list)

    @property
    def n_caplets(self) -> int:
        """Number of caplets."""
        return len(self.caplets)
