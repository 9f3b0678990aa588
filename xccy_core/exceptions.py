"""
Error taxonomy for the cross-currency model.

Every error is fatal for the valuation that raised it: the library never
substitutes a default or interpolated value.
"""


class XCCYError(Exception):
    """Base class for all errors raised by xccy_core."""


class DomainError(XCCYError, ValueError):
    """Invalid construction parameters (correlations, caplet terms, ...)."""


class UnsupportedTimeError(XCCYError, ValueError):
    """A numeraire or FX query at a time the closed-form identities do not cover."""

    def __init__(self, quantity: str, time: float, supported: tuple[float, ...]) -> None:
        self.quantity = quantity
        self.time = time
        self.supported = supported
        times = ", ".join(f"{t:g}" for t in supported)
        super().__init__(
            f"{quantity} not supported at time {time:g}; supported times are {times}"
        )


class UpstreamSimulationError(XCCYError, LookupError):
    """The path simulator cannot produce the requested value."""
