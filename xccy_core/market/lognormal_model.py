"""
Log-normal dynamics of the domestic rate, foreign rate and forward FX.

Under the domestic T2-forward measure:

    dL^d / L^d = σ_d dB^d
    dL^f / L^f = -σ_f σ_FX ρ_XF dt + σ_f dB^f
    dFFX / FFX = σ_FX dB^FX

The model is simulated in log coordinates, so by Itô each drift picks up
a -½σ² correction and the loadings no longer depend on the state.
"""

import logging

import numpy as np

from xccy_core._types import RandomVariable, Year
from xccy_core.exceptions import DomainError
from xccy_core.market.numeraire import NumeraireProvider
from xccy_core.market.parameters import ModelParameters

logger = logging.getLogger(__name__)


class LognormalCrossCurrencyProcessModel:
    """
    Coefficients of the log-state SDEs of the cross-currency model.

    Components are ordered [domestic rate, foreign rate, forward FX] and
    driven by three independent Brownian motions.

    Attributes
    ----------
    parameters : ModelParameters
        Volatilities, correlations and initial values

    Example
    -------
    >>> model = LognormalCrossCurrencyProcessModel(params)
    >>> model.drift(0)[0] == -0.5 * params.volatility_domestic**2
    True
    """

    def __init__(self, parameters: ModelParameters) -> None:
        self.parameters = parameters
        self.numeraire_provider = NumeraireProvider(parameters)

        sigma_d, sigma_f, sigma_x = parameters.volatilities
        rho_xf = parameters.correlation_fx_foreign

        # Quanto adjustment: covariance of log L^f and log FFX per unit time
        quanto_adjustment = sigma_f * sigma_x * rho_xf

        self._drift = (
            -0.5 * sigma_d * sigma_d,
            -0.5 * sigma_f * sigma_f - quanto_adjustment,
            -0.5 * sigma_x * sigma_x,
        )

        volatilities = np.array(parameters.volatilities)
        self._loadings = volatilities[:, np.newaxis] * parameters.correlation.factor_matrix

        logger.debug(
            "Log-normal cross-currency model: drift=%s, quanto adjustment=%.6g",
            self._drift,
            quanto_adjustment,
        )

    @property
    def number_of_components(self) -> int:
        """Domestic rate, foreign rate and forward FX."""
        return 3

    @property
    def number_of_factors(self) -> int:
        """Three independent drivers."""
        return 3

    def initial_value(self) -> tuple[float, float, float]:
        """(L^d(T1, T2; 0), L^f(T1, T2; 0), FFX(T2; 0))."""
        params = self.parameters
        return (
            params.initial_domestic_forward_rate,
            params.initial_foreign_forward_rate,
            params.initial_forward_fx,
        )

    def initial_state(self) -> tuple[float, float, float]:
        """Logarithm of the initial values."""
        return tuple(float(np.log(x)) for x in self.initial_value())  # type: ignore[return-value]

    def drift(self, time_index: int) -> tuple[float, float, float]:
        """
        Drift of the log-states; constant over the period.

        Returns
        -------
        tuple[float, float, float]
            (-½σ_d², -½σ_f² - σ_f σ_FX ρ_XF, -½σ_FX²)
        """
        return self._drift

    def factor_loading(self, time_index: int, component_index: int) -> tuple[float, float, float]:
        """
        Loadings of a component on the independent drivers.

        Row component_index of the correlation factor matrix scaled by
        the component's volatility.
        """
        if component_index not in (0, 1, 2):
            raise DomainError(f"Component index must be 0, 1 or 2, got {component_index}")
        return tuple(float(x) for x in self._loadings[component_index])  # type: ignore[return-value]

    def numeraire(self, process: "EulerSchemeFromProcessModel", time: Year) -> RandomVariable:  # noqa: F821
        """Domestic zero bond P^d(T2; time)."""
        return self.numeraire_provider.numeraire(process, time)
