"""
Monte Carlo plumbing: time grid, Brownian drivers and the Euler scheme.
"""

from xccy_core.simulation.brownian import BrownianMotion
from xccy_core.simulation.euler import EulerSchemeFromProcessModel
from xccy_core.simulation.process_model import LognormalProcessModel
from xccy_core.simulation.time_grid import TimeDiscretization, is_same_time

__all__ = [
    "TimeDiscretization",
    "BrownianMotion",
    "LognormalProcessModel",
    "EulerSchemeFromProcessModel",
    "is_same_time",
]
