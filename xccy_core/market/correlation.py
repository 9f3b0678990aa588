"""
Correlation handling for the three log-normal drivers of the model.

Expresses the correlated Brownian motions B^d, B^f, B^FX driving the
domestic forward rate, the foreign forward rate and the forward FX rate
in terms of three independent Brownian motions W^1, W^2, W^3.
"""

from dataclasses import dataclass, field

import numpy as np

from xccy_core._types import FloatArray
from xccy_core.exceptions import DomainError

RADICAND_TOLERANCE = 1e-14
"""Negative radicands above this value are rounding noise and clamped to zero."""


@dataclass(frozen=True)
class CorrelationDecomposer:
    """
    Lower-triangular factor matrix for a 3×3 correlation structure.

    Rows are the assets [domestic, foreign, FX forward], columns are the
    independent drivers. The factor matrix L satisfies L @ L.T = C, where

        C = [[1,      ρ_DF,  ρ_XD],
             [ρ_DF,   1,     ρ_XF],
             [ρ_XD,   ρ_XF,  1   ]]

    The rows are fixed by the convention

        L[0] = (1, 0, 0)
        L[1] = (ρ_DF, √(1 - ρ_DF²), 0)
        L[2] = (ρ_XD, c, √(1 - ρ_XD² - c²)),  c = (ρ_XF - ρ_DF ρ_XD) / √(1 - ρ_DF²)

    Any other square root of C would do; this one is kept so that the
    domestic rate loads on the first driver only.

    Attributes
    ----------
    rho_dom_for : float
        Correlation between the domestic and the foreign forward rate
    rho_fx_dom : float
        Correlation between the forward FX rate and the domestic rate
    rho_fx_for : float
        Correlation between the forward FX rate and the foreign rate

    Example
    -------
    >>> corr = CorrelationDecomposer(rho_dom_for=0.4, rho_fx_dom=0.3, rho_fx_for=-0.2)
    >>> L = corr.factor_matrix
    >>> np.allclose(L @ L.T, corr.correlation_matrix)
    True
    """

    rho_dom_for: float = 0.0
    rho_fx_dom: float = 0.0
    rho_fx_for: float = 0.0
    _factor_matrix: FloatArray = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Validate correlations and build the factor matrix."""
        for name, val in [
            ("rho_dom_for", self.rho_dom_for),
            ("rho_fx_dom", self.rho_fx_dom),
            ("rho_fx_for", self.rho_fx_for),
        ]:
            if not -1 <= val <= 1:
                raise DomainError(f"{name} must be in [-1, 1], got {val}")

        object.__setattr__(self, "_factor_matrix", self._decompose())

    def _decompose(self) -> FloatArray:
        """Build the lower-triangular factor matrix."""
        rho_df = self.rho_dom_for
        rho_xd = self.rho_fx_dom
        rho_xf = self.rho_fx_for

        complement_df = 1.0 - rho_df * rho_df
        if complement_df <= 0.0:
            raise DomainError(
                f"Degenerate domestic-foreign correlation {rho_df}: "
                "|rho_dom_for| must be strictly less than 1"
            )
        sqrt_complement_df = np.sqrt(complement_df)

        loading_foreign = (rho_xf - rho_df * rho_xd) / sqrt_complement_df

        radicand = 1.0 - rho_xd * rho_xd - loading_foreign * loading_foreign
        if radicand < -RADICAND_TOLERANCE:
            raise DomainError(
                "Correlations are not jointly consistent: "
                f"1 - rho_fx_dom² - c² = {radicand:.3e} < 0 "
                f"(rho_dom_for={rho_df}, rho_fx_dom={rho_xd}, rho_fx_for={rho_xf})"
            )

        return np.array(
            [
                [1.0, 0.0, 0.0],
                [rho_df, sqrt_complement_df, 0.0],
                [rho_xd, loading_foreign, np.sqrt(max(radicand, 0.0))],
            ]
        )

    @property
    def correlation_matrix(self) -> FloatArray:
        """C, ordered [domestic, foreign, FX forward]."""
        return np.array(
            [
                [1.0, self.rho_dom_for, self.rho_fx_dom],
                [self.rho_dom_for, 1.0, self.rho_fx_for],
                [self.rho_fx_dom, self.rho_fx_for, 1.0],
            ]
        )

    @property
    def factor_matrix(self) -> FloatArray:
        """Return the lower triangular factor matrix L."""
        return self._factor_matrix.copy()

    def row(self, component_index: int) -> FloatArray:
        """
        Return the weights of one asset on the independent drivers.

        Parameters
        ----------
        component_index : int
            0 = domestic rate, 1 = foreign rate, 2 = forward FX

        Returns
        -------
        FloatArray
            Row of L, unit Euclidean norm
        """
        if component_index not in (0, 1, 2):
            raise DomainError(f"Component index must be 0, 1 or 2, got {component_index}")
        return self._factor_matrix[component_index].copy()

    def correlate(self, z_independent: FloatArray) -> FloatArray:
        """
        Map independent standard normals onto the asset drivers.

        Parameters
        ----------
        z_independent : FloatArray
            Shape (n_samples, 3), one independent N(0,1) draw per driver

        Returns
        -------
        FloatArray
            Correlated normals, columns [domestic, foreign, FX forward]
        """
        if z_independent.ndim != 2 or z_independent.shape[1] != 3:
            raise DomainError(
                f"Expected shape (n_samples, 3), got {z_independent.shape}"
            )

        return z_independent @ self._factor_matrix.T

    @classmethod
    def from_config(cls, config: "CorrelationConfig") -> "CorrelationDecomposer":  # noqa: F821
        """
        Build the decomposition from the `correlations` config section.

        Parameters
        ----------
        config : CorrelationConfig
            Validated correlations

        Returns
        -------
        CorrelationDecomposer
            Initialized decomposition
        """
        return cls(
            rho_dom_for=config.domestic_foreign,
            rho_fx_dom=config.fx_domestic,
            rho_fx_for=config.fx_foreign,
        )
