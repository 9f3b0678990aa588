"""
Capability set a model must provide to be simulated in log coordinates.
"""

from typing import Protocol, runtime_checkable

from xccy_core._types import RandomVariable


@runtime_checkable
class LognormalProcessModel(Protocol):
    """
    Model of strictly positive processes simulated through their logarithm.

    For each component X_i the model describes the log-dynamics

        d log X_i = μ_i dt + Σ_k λ_ik dW_k

    with independent Brownian motions W_k. The Euler scheme only asks the
    model for these coefficients, so any model implementing this protocol
    can be plugged in.
    """

    @property
    def number_of_components(self) -> int:
        """Number of simulated processes."""
        ...

    @property
    def number_of_factors(self) -> int:
        """Number of independent drivers."""
        ...

    def initial_value(self) -> tuple[float, ...]:
        """Initial values X_i(0)."""
        ...

    def initial_state(self) -> tuple[float, ...]:
        """Initial log-states log X_i(0)."""
        ...

    def drift(self, time_index: int) -> tuple[float, ...]:
        """Drift μ_i of the log-state over step time_index."""
        ...

    def factor_loading(self, time_index: int, component_index: int) -> tuple[float, ...]:
        """Loadings λ_ik of one component on each driver."""
        ...

    def numeraire(self, process: "EulerSchemeFromProcessModel", time: float) -> RandomVariable:  # noqa: F821
        """Numeraire N(time), possibly read from the simulated process."""
        ...
