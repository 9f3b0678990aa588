"""
Type aliases for path arrays, time grids and scalars.
"""

from typing import TypeAlias

import numpy as np
import numpy.typing as npt

FloatArray: TypeAlias = npt.NDArray[np.float64]
"""Generic float64 array."""

PathValues: TypeAlias = npt.NDArray[np.float64]
"""
1D array of shape (n_paths,) holding one value per Monte Carlo path.

Deterministic quantities are returned as plain floats and broadcast
against path arrays by numpy.
"""

StateArray: TypeAlias = npt.NDArray[np.float64]
"""
3D array of shape (n_steps + 1, n_components, n_paths) with simulated
log-states. The first axis is the time index.
"""

TimeGrid: TypeAlias = npt.NDArray[np.float64]
"""Strictly increasing simulation times, starting at 0."""

RandomVariable: TypeAlias = float | PathValues
"""A deterministic scalar or a per-path array."""

Rate: TypeAlias = float
"""Simply compounded rate as a decimal (e.g., 0.05 for 5%)."""

Year: TypeAlias = float
"""Time measured in years (e.g., 0.5 for six months)."""
