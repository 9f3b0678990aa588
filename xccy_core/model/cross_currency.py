"""
Monte Carlo cross-currency model with a single accrual period.

Couples the log-normal process model with an Euler scheme and exposes
the quantities products need: forward rates, FX rates and the numeraire
at the dates where they can be reconstructed from the simulated paths.
"""

import logging
from enum import IntEnum

from xccy_core._types import PathValues, RandomVariable, Year
from xccy_core.exceptions import DomainError, UnsupportedTimeError
from xccy_core.market.lognormal_model import LognormalCrossCurrencyProcessModel
from xccy_core.market.parameters import ModelParameters
from xccy_core.simulation.brownian import BrownianMotion
from xccy_core.simulation.euler import EulerSchemeFromProcessModel
from xccy_core.simulation.time_grid import TimeDiscretization, is_same_time

logger = logging.getLogger(__name__)

FX_FORWARD_COMPONENT = 2


class Currency(IntEnum):
    """Currency selector; the value is the simulated component of its rate."""

    DOMESTIC = 0
    FOREIGN = 1


def as_currency(value: int | str | Currency) -> Currency:
    """
    Convert an int, a name or a Currency to a Currency.

    Raises
    ------
    DomainError
        If the value does not denote the domestic or foreign currency
    """
    if isinstance(value, Currency):
        return value
    if isinstance(value, str):
        try:
            return Currency[value.upper()]
        except KeyError:
            raise DomainError(f"Unknown currency {value!r}") from None
    if isinstance(value, bool):
        raise DomainError(f"Currency must be 0 (domestic) or 1 (foreign), got {value}")
    try:
        return Currency(value)
    except ValueError:
        raise DomainError(
            f"Currency must be 0 (domestic) or 1 (foreign), got {value}"
        ) from None


class CrossCurrencyModel:
    """
    Simulation of L^d(T1, T2; t), L^f(T1, T2; t) and FFX(T2; t).

    The numeraire is the domestic zero bond maturing at T2. FX rates are
    reconstructed from the forward FX rate and the zero bonds,

        FX(t) = FFX(T2; t) P^d(T2; t) / P^f(T2; t),

    which is possible at t = 0 (market data), t = T1 (bonds from the fixed
    forward rates) and t = T2 (both bonds equal 1).

    Attributes
    ----------
    parameters : ModelParameters
        Model parameters
    brownian_motion : BrownianMotion
        Independent drivers with three factors

    Example
    -------
    >>> grid = TimeDiscretization.from_period(1.0, 2.0, time_step=0.25)
    >>> model = CrossCurrencyModel(params, BrownianMotion(grid, 3, 10000, seed=42))
    >>> fx_t1 = model.fx_rate(Currency.FOREIGN, 1.0)
    """

    def __init__(
        self,
        parameters: ModelParameters,
        brownian_motion: BrownianMotion,
    ) -> None:
        """
        Initialize the model and wire up the Euler scheme.

        Parameters
        ----------
        parameters : ModelParameters
            Model parameters
        brownian_motion : BrownianMotion
            Drivers; the grid must contain T1 and T2
        """
        self.parameters = parameters
        self.brownian_motion = brownian_motion

        grid = brownian_motion.time_discretization
        # Raises UpstreamSimulationError if T1 or T2 is missing
        for t in (parameters.period_start, parameters.period_end):
            grid.get_time_index(t)

        self.process_model = LognormalCrossCurrencyProcessModel(parameters)
        self.process = EulerSchemeFromProcessModel(self.process_model, brownian_motion)

        logger.debug(
            "Cross-currency model on [%g, %g] with %d paths and %d steps",
            parameters.period_start,
            parameters.period_end,
            brownian_motion.number_of_paths,
            grid.number_of_time_steps,
        )

    @classmethod
    def from_config(
        cls,
        model_config: "ModelConfig",  # noqa: F821
        simulation_config: "SimulationConfig",  # noqa: F821
    ) -> "CrossCurrencyModel":
        """
        Create model and drivers from configuration.

        Parameters
        ----------
        model_config : ModelConfig
            Market data and dynamics
        simulation_config : SimulationConfig
            Paths, time step and seed

        Returns
        -------
        CrossCurrencyModel
            Configured model
        """
        parameters = ModelParameters.from_config(model_config)
        grid = TimeDiscretization.from_period(
            parameters.period_start,
            parameters.period_end,
            simulation_config.time_step,
        )
        brownian_motion = BrownianMotion(
            time_discretization=grid,
            number_of_factors=3,
            number_of_paths=simulation_config.n_paths,
            seed=simulation_config.seed,
        )
        return cls(parameters, brownian_motion)

    @property
    def number_of_paths(self) -> int:
        """Number of Monte Carlo paths."""
        return self.brownian_motion.number_of_paths

    @property
    def time_discretization(self) -> TimeDiscretization:
        """Simulation time grid."""
        return self.brownian_motion.time_discretization

    def get_time(self, time_index: int) -> Year:
        """Grid time at an index."""
        return self.time_discretization.get_time(time_index)

    def get_time_index(self, time: Year) -> int:
        """Index of a grid time."""
        return self.time_discretization.get_time_index(time)

    def _check_period(self, period_start: Year | None, period_end: Year | None) -> None:
        params = self.parameters
        if period_start is not None and not is_same_time(period_start, params.period_start):
            raise DomainError(
                f"Model only simulates the period starting at {params.period_start}, "
                f"got {period_start}"
            )
        if period_end is not None and not is_same_time(period_end, params.period_end):
            raise DomainError(
                f"Model only simulates the period ending at {params.period_end}, "
                f"got {period_end}"
            )

    def forward_rate(
        self,
        currency: int | Currency,
        time: Year,
        period_start: Year | None = None,
        period_end: Year | None = None,
    ) -> PathValues:
        """
        Simulated forward rate L^c(T1, T2; time).

        Parameters
        ----------
        currency : int | Currency
            0 = domestic, 1 = foreign
        time : float
            Grid time; only T1 is meaningful for pricing
        period_start, period_end : float | None
            If given, must match the model's period

        Returns
        -------
        PathValues
            Forward rate on each path
        """
        ccy = as_currency(currency)
        self._check_period(period_start, period_end)
        return self.process.value_at(time, int(ccy))

    def fx_rate(self, currency: int | Currency, time: Year) -> RandomVariable:
        """
        FX rate FX(time) converting one unit of `currency` into domestic.

        Parameters
        ----------
        currency : int | Currency
            0 = domestic (always 1), 1 = foreign
        time : float
            0, T1 or T2

        Returns
        -------
        RandomVariable
            1.0 for the domestic currency, per-path array otherwise

        Raises
        ------
        UnsupportedTimeError
            For the foreign currency at any other time
        """
        ccy = as_currency(currency)
        if ccy is Currency.DOMESTIC:
            return 1.0

        params = self.parameters

        if is_same_time(time, 0.0):
            forward_fx = self.process.value_at(time, FX_FORWARD_COMPONENT)
            return forward_fx * params.domestic_zero_bond / params.foreign_zero_bond

        if is_same_time(time, params.period_end):
            # P^d(T2; T2) = P^f(T2; T2) = 1
            return self.process.value_at(time, FX_FORWARD_COMPONENT)

        if is_same_time(time, params.period_start):
            forward_fx = self.process.value_at(time, FX_FORWARD_COMPONENT)
            domestic_rate = self.process.value_at(time, int(Currency.DOMESTIC))
            foreign_rate = self.process.value_at(time, int(Currency.FOREIGN))
            tau = params.period_length
            # P^i(T2; T1) = 1 / (1 + L^i(T1) τ)
            return forward_fx * (1.0 + foreign_rate * tau) / (1.0 + domestic_rate * tau)

        raise UnsupportedTimeError(
            "FX rate", time, (0.0, params.period_start, params.period_end)
        )

    def numeraire(self, time: Year) -> RandomVariable:
        """Domestic zero bond P^d(T2; time) at 0, T1 or T2."""
        return self.process.numeraire(time)
