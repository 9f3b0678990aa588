"""
Independent Brownian increments driving the Euler scheme.
"""

import logging
from dataclasses import dataclass, field

import numpy as np

from xccy_core._types import FloatArray, PathValues
from xccy_core.exceptions import DomainError, UpstreamSimulationError
from xccy_core.simulation.time_grid import TimeDiscretization

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class BrownianMotion:
    """
    Multi-factor Brownian motion with independent components.

    Increments ΔW_k(t_i) ~ N(0, Δt_i) are generated once, on first access,
    from a numpy Generator seeded with `seed`.

    Attributes
    ----------
    time_discretization : TimeDiscretization
        Grid on which increments are generated
    number_of_factors : int
        Number of independent drivers
    number_of_paths : int
        Number of Monte Carlo paths
    seed : int | None
        Random seed for reproducibility

    Example
    -------
    >>> grid = TimeDiscretization.from_period(1.0, 2.0, 0.5)
    >>> bm = BrownianMotion(grid, number_of_factors=3, number_of_paths=1000, seed=42)
    >>> bm.increment(0, 2).shape
    (1000,)
    """

    time_discretization: TimeDiscretization
    number_of_factors: int = 3
    number_of_paths: int = 10000
    seed: int | None = 3141
    _increments: FloatArray | None = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        """Validate dimensions."""
        if self.number_of_factors < 1:
            raise DomainError(
                f"number_of_factors must be positive, got {self.number_of_factors}"
            )
        if self.number_of_paths < 1:
            raise DomainError(
                f"number_of_paths must be positive, got {self.number_of_paths}"
            )

    def _generate(self) -> FloatArray:
        """Draw all increments, shape (n_steps, n_factors, n_paths)."""
        rng = np.random.default_rng(self.seed)
        n_steps = self.time_discretization.number_of_time_steps
        z = rng.standard_normal((n_steps, self.number_of_factors, self.number_of_paths))
        sqrt_dt = np.sqrt(self.time_discretization.time_steps)
        logger.debug(
            "Generated Brownian increments: %d steps, %d factors, %d paths",
            n_steps,
            self.number_of_factors,
            self.number_of_paths,
        )
        return z * sqrt_dt[:, np.newaxis, np.newaxis]

    @property
    def increments(self) -> FloatArray:
        """All increments, shape (n_steps, n_factors, n_paths)."""
        if self._increments is None:
            self._increments = self._generate()
        return self._increments

    def increment(self, time_index: int, factor: int) -> PathValues:
        """
        Return ΔW_factor over [t_i, t_{i+1}] for every path.

        Parameters
        ----------
        time_index : int
            Index i of the step start
        factor : int
            Index of the driver

        Returns
        -------
        PathValues
            Increments, shape (n_paths,)
        """
        n_steps = self.time_discretization.number_of_time_steps
        if not 0 <= time_index < n_steps:
            raise UpstreamSimulationError(
                f"No increment for time index {time_index}; grid has {n_steps} steps"
            )
        if not 0 <= factor < self.number_of_factors:
            raise DomainError(
                f"Factor index must be in [0, {self.number_of_factors}), got {factor}"
            )
        return self.increments[time_index, factor]
