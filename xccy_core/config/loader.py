"""
Reading model, simulation and caplet settings from YAML.

A configuration file has a mandatory `model` section and optional
`simulation` and `caplets` sections; see examples/config.yaml.
"""

from pathlib import Path
from typing import Any

import yaml

from xccy_core.config.models import (
    CorrelationConfig,
    ModelConfig,
    PortfolioConfig,
    SimulationConfig,
    VolatilityConfig,
)


def _read_sections(path: Path | str) -> dict[str, Any]:
    """
    Parse a YAML configuration file into a mapping of sections.

    Raises
    ------
    FileNotFoundError
        If there is no file at `path`
    ValueError
        If the document is not a mapping
    yaml.YAMLError
        On malformed YAML
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"No configuration file at {path}")

    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Configuration in {path} must be a mapping of sections")
    return data


def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
    # Files holding a single section may omit its key
    return data.get(name, data)


def load_model_config(path: Path | str) -> ModelConfig:
    """
    Read only the market data and dynamics.

    Parameters
    ----------
    path : Path | str
        YAML file with a `model` section, or with the model fields at top level

    Returns
    -------
    ModelConfig
        Validated model configuration

    Example
    -------
    >>> config = load_model_config("examples/config.yaml")
    >>> config.period_start
    1.0
    """
    return ModelConfig(**_section(_read_sections(path), "model"))


def load_simulation_config(path: Path | str) -> SimulationConfig:
    """Read only the Monte Carlo settings."""
    data = _read_sections(path)
    if "simulation" not in data and "model" in data:
        return SimulationConfig()
    return SimulationConfig(**_section(data, "simulation"))


def load_config(path: Path | str) -> dict[str, Any]:
    """
    Read a full configuration file.

    Parameters
    ----------
    path : Path | str
        YAML file with `model` and optional `simulation`, `caplets` sections

    Returns
    -------
    dict[str, Any]
        'model' -> ModelConfig, 'simulation' -> SimulationConfig (defaults
        when absent), 'portfolio' -> PortfolioConfig (no caplets when absent)

    Example
    -------
    >>> config = load_config("examples/config.yaml")
    >>> config["portfolio"].n_caplets
    6
    """
    data = _read_sections(path)

    if "model" not in data:
        raise ValueError(f"{path}: missing 'model' section")

    return {
        "model": ModelConfig(**data["model"]),
        "simulation": SimulationConfig(**(data.get("simulation") or {})),
        "portfolio": PortfolioConfig(caplets=data.get("caplets") or []),
    }


def create_default_model_config() -> ModelConfig:
    """
    Standard 1Y x 2Y example used by the demo.

    Returns
    -------
    ModelConfig
        T1 = 1, T2 = 2, spot FX 1.10 and moderately correlated drivers
    """
    return ModelConfig(
        period_start=1.0,
        period_end=2.0,
        domestic_zero_bond=0.95,
        foreign_zero_bond=0.96,
        initial_domestic_forward_rate=0.05,
        initial_foreign_forward_rate=0.04,
        initial_fx=1.10,
        volatilities=VolatilityConfig(domestic=0.30, foreign=0.25, fx_forward=0.12),
        correlations=CorrelationConfig(domestic_foreign=0.4, fx_domestic=0.3, fx_foreign=-0.2),
    )
