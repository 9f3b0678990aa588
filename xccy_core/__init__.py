"""
Cross-Currency Caplet Engine - Core Package.

Monte Carlo simulation of a three-factor log-normal model for a domestic
forward rate, a foreign forward rate and a forward FX rate over a single
accrual period, with numeraire-relative valuation of domestic, foreign
and quanto caplets paid in advance or in arrears.

Example
-------
>>> from xccy_core import CrossCurrencyModel, caplet_variants, create_default_model_config
>>> from xccy_core.config import SimulationConfig
>>> model = CrossCurrencyModel.from_config(
...     create_default_model_config(), SimulationConfig(n_paths=20000)
... )
>>> caplets = caplet_variants(period_start=1.0, period_end=2.0, strike=0.045)
>>> price = caplets["Caplet Quanto"].get_price(model)
"""

__version__ = "1.0.0"

# Core types
from xccy_core._types import FloatArray, PathValues, StateArray

# Errors
from xccy_core.exceptions import (
    DomainError,
    UnsupportedTimeError,
    UpstreamSimulationError,
    XCCYError,
)

# Configuration
from xccy_core.config import (
    CapletConfig,
    ModelConfig,
    SimulationConfig,
    create_default_model_config,
    load_config,
)

# Model definition
from xccy_core.market import (
    CorrelationDecomposer,
    LognormalCrossCurrencyProcessModel,
    ModelParameters,
    NumeraireProvider,
)

# Simulation
from xccy_core.simulation import (
    BrownianMotion,
    EulerSchemeFromProcessModel,
    TimeDiscretization,
)

# Model
from xccy_core.model import CrossCurrencyModel, Currency

# Products
from xccy_core.products import (
    CrossCurrencyProduct,
    GeneralizedCaplet,
    ValuationResult,
    caplet_variants,
    portfolio_caplets,
    valuate_caplets,
)

# Analytics
from xccy_core.analytics import analytic_caplet_value, black_caplet

# Reporting
from xccy_core.reporting import (
    create_caplet_price_table,
    export_to_csv,
    export_valuations_to_json,
)

__all__ = [
    # Version
    "__version__",
    # Types
    "FloatArray",
    "PathValues",
    "StateArray",
    # Errors
    "XCCYError",
    "DomainError",
    "UnsupportedTimeError",
    "UpstreamSimulationError",
    # Config
    "ModelConfig",
    "SimulationConfig",
    "CapletConfig",
    "create_default_model_config",
    "load_config",
    # Model definition
    "CorrelationDecomposer",
    "ModelParameters",
    "LognormalCrossCurrencyProcessModel",
    "NumeraireProvider",
    # Simulation
    "TimeDiscretization",
    "BrownianMotion",
    "EulerSchemeFromProcessModel",
    # Model
    "CrossCurrencyModel",
    "Currency",
    # Products
    "CrossCurrencyProduct",
    "GeneralizedCaplet",
    "ValuationResult",
    "caplet_variants",
    "portfolio_caplets",
    "valuate_caplets",
    # Analytics
    "black_caplet",
    "analytic_caplet_value",
    # Reporting
    "create_caplet_price_table",
    "export_to_csv",
    "export_valuations_to_json",
]
