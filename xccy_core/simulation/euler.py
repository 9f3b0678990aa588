"""
Euler-Maruyama simulation of a log-normal process model.

Advances the log-state of every component along the time grid using the
drift and factor loadings supplied by the model and the independent
increments of a Brownian motion.
"""

import logging

import numpy as np

from xccy_core._types import PathValues, RandomVariable, StateArray, Year
from xccy_core.exceptions import DomainError
from xccy_core.simulation.brownian import BrownianMotion
from xccy_core.simulation.process_model import LognormalProcessModel
from xccy_core.simulation.time_grid import TimeDiscretization

logger = logging.getLogger(__name__)


class EulerSchemeFromProcessModel:
    """
    Euler scheme for the logarithm of a multi-factor log-normal model.

    For each step [t_i, t_{i+1}] and component j:

        Y_j(t_{i+1}) = Y_j(t_i) + μ_j Δt_i + Σ_k λ_jk ΔW_k(t_i)

    and the process value is X_j = exp(Y_j). Simulating the logarithm keeps
    the processes positive; with constant coefficients the scheme is exact.

    The simulation runs once, on the first value request, and is cached.

    Attributes
    ----------
    model : LognormalProcessModel
        Supplies initial state, drift and factor loadings
    brownian_motion : BrownianMotion
        Independent drivers; fixes the time grid and the number of paths

    Example
    -------
    >>> process = EulerSchemeFromProcessModel(model, brownian_motion)
    >>> domestic_rate_at_t1 = process.value_at(1.0, 0)
    """

    def __init__(
        self,
        model: LognormalProcessModel,
        brownian_motion: BrownianMotion,
    ) -> None:
        """
        Initialize the scheme.

        Parameters
        ----------
        model : LognormalProcessModel
            Model coefficients
        brownian_motion : BrownianMotion
            Driver with the same number of factors as the model
        """
        if model.number_of_factors != brownian_motion.number_of_factors:
            raise DomainError(
                f"Model has {model.number_of_factors} factors but the Brownian "
                f"motion has {brownian_motion.number_of_factors}"
            )

        self.model = model
        self.brownian_motion = brownian_motion
        self._log_state: StateArray | None = None

    @property
    def time_discretization(self) -> TimeDiscretization:
        """Simulation time grid."""
        return self.brownian_motion.time_discretization

    @property
    def number_of_paths(self) -> int:
        """Number of Monte Carlo paths."""
        return self.brownian_motion.number_of_paths

    @property
    def number_of_components(self) -> int:
        """Number of simulated processes."""
        return self.model.number_of_components

    def get_time_index(self, time: Year) -> int:
        """Index of a grid time; raises UpstreamSimulationError if absent."""
        return self.time_discretization.get_time_index(time)

    def get_time(self, time_index: int) -> Year:
        """Grid time at an index."""
        return self.time_discretization.get_time(time_index)

    def initial_log_state(self) -> tuple[float, ...]:
        """Initial log-state as supplied by the model."""
        return self.model.initial_state()

    def drift(self, time_index: int) -> tuple[float, ...]:
        """Log-drift of each component over step time_index."""
        return self.model.drift(time_index)

    def factor_loading(self, time_index: int, component_index: int) -> tuple[float, ...]:
        """Loadings of a component on each independent driver."""
        return self.model.factor_loading(time_index, component_index)

    def _simulate(self) -> StateArray:
        """
        Run the Euler scheme over the whole grid.

        Returns
        -------
        StateArray
            Log-states, shape (n_steps + 1, n_components, n_paths)
        """
        grid = self.time_discretization
        n_steps = grid.number_of_time_steps
        n_components = self.number_of_components
        n_factors = self.model.number_of_factors
        n_paths = self.number_of_paths

        log_state = np.empty((n_steps + 1, n_components, n_paths))
        log_state[0] = np.asarray(self.initial_log_state(), dtype=np.float64)[:, np.newaxis]

        increments = self.brownian_motion.increments
        dt = grid.time_steps

        for i in range(n_steps):
            drift = np.asarray(self.drift(i), dtype=np.float64)
            loadings = np.array(
                [self.factor_loading(i, j) for j in range(n_components)],
                dtype=np.float64,
            )
            if loadings.shape != (n_components, n_factors):
                raise DomainError(
                    f"Factor loadings must have shape {(n_components, n_factors)}, "
                    f"got {loadings.shape}"
                )

            # (n_components, n_factors) @ (n_factors, n_paths)
            diffusion = loadings @ increments[i]

            log_state[i + 1] = log_state[i] + drift[:, np.newaxis] * dt[i] + diffusion

        logger.debug(
            "Simulated %d components over %d steps on %d paths",
            n_components,
            n_steps,
            n_paths,
        )
        return log_state

    @property
    def log_state(self) -> StateArray:
        """Simulated log-states, shape (n_steps + 1, n_components, n_paths)."""
        if self._log_state is None:
            self._log_state = self._simulate()
        return self._log_state

    def _check_component(self, component_index: int) -> None:
        if not 0 <= component_index < self.number_of_components:
            raise DomainError(
                f"Component index must be in [0, {self.number_of_components}), "
                f"got {component_index}"
            )

    def process_value(self, time_index: int, component_index: int) -> PathValues:
        """
        Process value X_j(t_i) on every path.

        Parameters
        ----------
        time_index : int
            Grid index
        component_index : int
            Component j

        Returns
        -------
        PathValues
            exp(Y_j(t_i)), shape (n_paths,)
        """
        self._check_component(component_index)
        self.time_discretization.get_time(time_index)
        return np.exp(self.log_state[time_index, component_index])

    def value_at(self, time: Year, component_index: int) -> PathValues:
        """Process value X_j(time); the time must be a grid point."""
        return self.process_value(self.get_time_index(time), component_index)

    def numeraire(self, time: Year) -> RandomVariable:
        """Numeraire of the model at the given time."""
        return self.model.numeraire(self, time)
