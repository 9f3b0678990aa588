"""
Time discretization bookkeeping for the Euler scheme.
"""

from dataclasses import dataclass

import numpy as np

from xccy_core._types import TimeGrid, Year
from xccy_core.exceptions import DomainError, UpstreamSimulationError

TIME_TOLERANCE = 1e-10
"""Two times closer than this are the same grid point."""


def is_same_time(t1: float, t2: float) -> bool:
    """Return True if two times denote the same point of the grid."""
    return abs(t1 - t2) <= TIME_TOLERANCE


@dataclass(frozen=True, eq=False)
class TimeDiscretization:
    """
    Strictly increasing time grid starting at t=0.

    Attributes
    ----------
    times : TimeGrid
        Grid points in years, times[0] == 0

    Example
    -------
    >>> grid = TimeDiscretization.from_period(1.0, 2.0, time_step=0.25)
    >>> grid.get_time_index(1.0)
    4
    """

    times: TimeGrid

    def __post_init__(self) -> None:
        """Validate the grid."""
        times = np.asarray(self.times, dtype=np.float64)
        if times.ndim != 1 or len(times) < 2:
            raise DomainError("Time grid needs at least two points")
        if times[0] != 0.0:
            raise DomainError(f"Time grid must start at 0, got {times[0]}")
        if not np.all(np.diff(times) > TIME_TOLERANCE):
            raise DomainError("Time grid must be strictly increasing")
        times.setflags(write=False)
        object.__setattr__(self, "times", times)

    @classmethod
    def from_period(
        cls, period_start: Year, period_end: Year, time_step: float
    ) -> "TimeDiscretization":
        """
        Build a uniform grid on [0, period_end] that contains T1 and T2.

        Parameters
        ----------
        period_start : float
            T1, inserted into the grid if the step does not hit it
        period_end : float
            T2, last grid point
        time_step : float
            Nominal step size in years

        Returns
        -------
        TimeDiscretization
            Grid containing 0, T1 and T2
        """
        if time_step <= 0:
            raise DomainError(f"time_step must be positive, got {time_step}")
        if not 0 < period_start < period_end:
            raise DomainError(
                f"Need 0 < period_start < period_end, got {period_start}, {period_end}"
            )

        n_steps = max(int(np.ceil(period_end / time_step - TIME_TOLERANCE)), 1)
        uniform = np.linspace(0.0, period_end, n_steps + 1)

        # Replace the grid point nearest to T1 by T1 itself if they coincide
        uniform = uniform[np.abs(uniform - period_start) > TIME_TOLERANCE]
        return cls(np.sort(np.append(uniform, period_start)))

    @property
    def number_of_time_steps(self) -> int:
        """Number of steps (grid points minus one)."""
        return len(self.times) - 1

    @property
    def time_steps(self) -> TimeGrid:
        """Step sizes Δt_i = t_{i+1} - t_i."""
        return np.diff(self.times)

    @property
    def last_time(self) -> Year:
        """Last grid point."""
        return float(self.times[-1])

    def get_time(self, time_index: int) -> Year:
        """Return the grid point at the given index."""
        if not 0 <= time_index < len(self.times):
            raise UpstreamSimulationError(
                f"Time index {time_index} outside grid of {len(self.times)} points"
            )
        return float(self.times[time_index])

    def get_time_index(self, time: Year) -> int:
        """
        Return the index of a grid point.

        Raises
        ------
        UpstreamSimulationError
            If the time is not a point of the grid
        """
        idx = int(np.searchsorted(self.times, time - TIME_TOLERANCE))
        if idx < len(self.times) and is_same_time(self.times[idx], time):
            return idx
        raise UpstreamSimulationError(f"Time {time} is not on the simulation time grid")

    def __len__(self) -> int:
        return len(self.times)
