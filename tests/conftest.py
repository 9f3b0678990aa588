"""
Pytest fixtures for cross-currency model testing.

Provides reusable test fixtures for parameters, grids, simulated models and caplets.
"""

from collections.abc import Callable

import pytest

from xccy_core.config.models import (
    CorrelationConfig,
    ModelConfig,
    SimulationConfig,
    VolatilityConfig,
)
from xccy_core.market import CorrelationDecomposer, ModelParameters
from xccy_core.model import CrossCurrencyModel
from xccy_core.simulation import BrownianMotion, TimeDiscretization


def build_model(
    params: ModelParameters,
    n_paths: int = 1000,
    time_step: float = 0.25,
    seed: int | None = 42,
) -> CrossCurrencyModel:
    """Simulate a model on a uniform grid containing T1 and T2."""
    grid = TimeDiscretization.from_period(params.period_start, params.period_end, time_step)
    brownian_motion = BrownianMotion(
        time_discretization=grid,
        number_of_factors=3,
        number_of_paths=n_paths,
        seed=seed,
    )
    return CrossCurrencyModel(params, brownian_motion)


@pytest.fixture
def model_factory() -> Callable[..., CrossCurrencyModel]:
    """Factory building simulated models from parameters."""
    return build_model


@pytest.fixture
def correlation() -> CorrelationDecomposer:
    """Standard correlation structure."""
    return CorrelationDecomposer(rho_dom_for=0.4, rho_fx_dom=0.3, rho_fx_for=-0.2)


@pytest.fixture
def params() -> ModelParameters:
    """Standard 1Y x 2Y model parameters, FX quoted spot."""
    return ModelParameters.from_spot_fx(
        period_start=1.0,
        period_end=2.0,
        domestic_zero_bond=0.95,
        foreign_zero_bond=0.96,
        initial_domestic_forward_rate=0.05,
        initial_foreign_forward_rate=0.04,
        initial_fx=1.10,
        volatility_domestic=0.30,
        volatility_foreign=0.25,
        volatility_fx_forward=0.12,
        correlation_dom_for=0.4,
        correlation_fx_domestic=0.3,
        correlation_fx_foreign=-0.2,
    )


@pytest.fixture
def zero_vol_params() -> ModelParameters:
    """Degenerate parameters: every path is the deterministic forward path."""
    return ModelParameters(
        period_start=1.0,
        period_end=2.0,
        domestic_zero_bond=0.98,
        foreign_zero_bond=0.97,
        initial_domestic_forward_rate=0.05,
        initial_foreign_forward_rate=0.04,
        initial_forward_fx=1.20,
        volatility_domestic=0.0,
        volatility_foreign=0.0,
        volatility_fx_forward=0.0,
        correlation_dom_for=0.4,
        correlation_fx_domestic=0.3,
        correlation_fx_foreign=-0.2,
    )


@pytest.fixture
def model(params: ModelParameters) -> CrossCurrencyModel:
    """Simulated standard model, 5000 paths."""
    return build_model(params, n_paths=5000)


@pytest.fixture
def zero_vol_model(zero_vol_params: ModelParameters) -> CrossCurrencyModel:
    """Deterministic model, 10 paths."""
    return build_model(zero_vol_params, n_paths=10)


@pytest.fixture
def model_config() -> ModelConfig:
    """Standard model configuration."""
    return ModelConfig(
        period_start=1.0,
        period_end=2.0,
        domestic_zero_bond=0.95,
        foreign_zero_bond=0.96,
        initial_domestic_forward_rate=0.05,
        initial_foreign_forward_rate=0.04,
        initial_fx=1.10,
        volatilities=VolatilityConfig(domestic=0.30, foreign=0.25, fx_forward=0.12),
        correlations=CorrelationConfig(
            domestic_foreign=0.4,
            fx_domestic=0.3,
            fx_foreign=-0.2,
        ),
    )


@pytest.fixture
def simulation_config() -> SimulationConfig:
    """Small simulation configuration."""
    return SimulationConfig(n_paths=1000, time_step=0.25, seed=7)
