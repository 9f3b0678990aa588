"""
Domestic zero-coupon bond numeraire P^d(T2; t).

The bond is only observable at three dates of the single-period model:
t = 0 (market data), t = T1 (from the fixed domestic forward rate) and
t = T2 (maturity).
"""

from xccy_core._types import PathValues, RandomVariable, Year
from xccy_core.exceptions import UnsupportedTimeError, UpstreamSimulationError
from xccy_core.market.parameters import ModelParameters
from xccy_core.simulation.time_grid import is_same_time

DOMESTIC_RATE_COMPONENT = 0


class NumeraireProvider:
    """
    Numeraire of the domestic T2-forward measure.

        N(0)  = P^d(T2; 0)
        N(T1) = P^d(T2; T1) = 1 / (1 + L^d(T1, T2; T1) (T2 - T1))
        N(T2) = 1

    Any other query time is an error: the model neither interpolates nor
    extrapolates the bond.

    Example
    -------
    >>> provider = NumeraireProvider(params)
    >>> provider.at(0.0) == params.domestic_zero_bond
    True
    """

    def __init__(self, parameters: ModelParameters) -> None:
        self.parameters = parameters

    @property
    def supported_times(self) -> tuple[float, float, float]:
        """The three times at which the numeraire is defined."""
        return (0.0, self.parameters.period_start, self.parameters.period_end)

    def at(
        self,
        time: Year,
        domestic_forward_rate: PathValues | float | None = None,
    ) -> RandomVariable:
        """
        Numeraire value at time.

        Parameters
        ----------
        time : float
            0, T1 or T2
        domestic_forward_rate : PathValues | float | None
            L^d(T1, T2; T1), required only for time == T1

        Returns
        -------
        RandomVariable
            Float at 0 and T2, per-path array at T1

        Raises
        ------
        UnsupportedTimeError
            If time is not one of 0, T1, T2
        UpstreamSimulationError
            If time == T1 and no domestic forward rate is supplied
        """
        params = self.parameters

        if is_same_time(time, 0.0):
            return params.domestic_zero_bond
        if is_same_time(time, params.period_start):
            if domestic_forward_rate is None:
                raise UpstreamSimulationError(
                    "The numeraire at T1 needs the simulated domestic forward rate"
                )
            # 1 / (1 + L^d(T1) τ) = P^d(T2; T1)
            return 1.0 / (1.0 + domestic_forward_rate * params.period_length)
        if is_same_time(time, params.period_end):
            return 1.0

        raise UnsupportedTimeError("Numeraire", time, self.supported_times)

    def numeraire(self, process: "EulerSchemeFromProcessModel", time: Year) -> RandomVariable:  # noqa: F821
        """Numeraire at time, reading L^d(T1) from the process when needed."""
        if is_same_time(time, self.parameters.period_start):
            return self.at(time, process.value_at(time, DOMESTIC_RATE_COMPONENT))
        return self.at(time)
