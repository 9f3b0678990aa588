"""
Configuration module for the cross-currency caplet engine.

Provides Pydantic-validated configuration models and YAML loading utilities
for model parameters, simulation settings and caplet definitions.
"""

from xccy_core.config.loader import (
    create_default_model_config,
    load_config,
    load_model_config,
    load_simulation_config,
)
from xccy_core.config.models import (
    CapletConfig,
    CorrelationConfig,
    ModelConfig,
    PortfolioConfig,
    SimulationConfig,
    VolatilityConfig,
)

__all__ = [
    # Models
    "VolatilityConfig",
    "CorrelationConfig",
    "ModelConfig",
    "SimulationConfig",
    "CapletConfig",
    "PortfolioConfig",
    # Loaders
    "load_config",
    "load_model_config",
    "load_simulation_config",
    "create_default_model_config",
]
