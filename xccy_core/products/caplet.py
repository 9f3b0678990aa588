"""
Generalized caplet on a domestic or foreign forward rate.

Pays max(L - K, 0) at T, where L is the forward rate of the chosen currency
fixed at T1 and T is either T1 (in advance) or T2 (in arrears). Foreign
payoffs are converted at FX(T) unless the caplet is a quanto.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass

import numpy as np

from xccy_core._types import PathValues, Year
from xccy_core.exceptions import DomainError
from xccy_core.model.cross_currency import CrossCurrencyModel, Currency, as_currency
from xccy_core.products.base import CrossCurrencyProduct
from xccy_core.products.result import ValuationResult
from xccy_core.simulation.time_grid import is_same_time

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GeneralizedCaplet(CrossCurrencyProduct):
    """
    Caplet paying max(L^c(T1, T2; T1) - K, 0) · (1 if quanto else FX^c(T)) at T.

    Valued as a numeraire-relative expectation:

        V(t) = N(t) · E[ payoff / N(T) | F_t ]

    with N the domestic zero bond maturing at T2.

    The six usual variants differ only in `currency`, `is_quanto` and
    `payment_time`. A quanto flag on a domestic caplet has no effect.

    Attributes
    ----------
    currency : Currency
        Currency of the forward rate (0 = domestic, 1 = foreign)
    is_quanto : bool
        If True the payoff is paid in domestic units without conversion
    fixing_time : float
        Fixing time of the forward rate, must equal period_start
    period_start : float
        T1
    period_end : float
        T2
    payment_time : float
        T1 or T2
    strike : float
        Strike rate K

    Example
    -------
    >>> caplet = GeneralizedCaplet(
    ...     currency=Currency.FOREIGN, is_quanto=True,
    ...     fixing_time=1.0, period_start=1.0, period_end=2.0,
    ...     payment_time=2.0, strike=0.04,
    ... )
    >>> price = caplet.get_price(model)
    """

    currency: Currency
    is_quanto: bool
    fixing_time: Year
    period_start: Year
    period_end: Year
    payment_time: Year
    strike: float

    def __post_init__(self) -> None:
        """Validate the caplet terms."""
        object.__setattr__(self, "currency", as_currency(self.currency))

        if self.period_end <= self.period_start:
            raise DomainError(
                f"period_end ({self.period_end}) must be greater than "
                f"period_start ({self.period_start})"
            )
        if not is_same_time(self.fixing_time, self.period_start):
            raise DomainError(
                f"Fixing time ({self.fixing_time}) must equal period start "
                f"({self.period_start})"
            )
        if not (
            is_same_time(self.payment_time, self.period_start)
            or is_same_time(self.payment_time, self.period_end)
        ):
            raise DomainError(
                f"Payment time ({self.payment_time}) must be period start "
                f"({self.period_start}) or period end ({self.period_end})"
            )
        if not np.isfinite(self.strike):
            raise DomainError(f"Strike must be finite, got {self.strike}")

    @property
    def pays_in_advance(self) -> bool:
        """True if the payment is made at period start."""
        return is_same_time(self.payment_time, self.period_start)

    @property
    def label(self) -> str:
        """Human-readable variant name."""
        if self.currency is Currency.FOREIGN and self.is_quanto:
            name = "Caplet Quanto"
        elif self.currency is Currency.FOREIGN:
            name = "Caplet Foreign"
        else:
            name = "Caplet Domestic"
        if self.pays_in_advance:
            name += " with In-Advance Payment"
        return name

    def get_value(self, evaluation_time: Year, model: CrossCurrencyModel) -> PathValues:
        """
        Per-path value at evaluation_time.

        Parameters
        ----------
        evaluation_time : float
            0, T1 or T2
        model : CrossCurrencyModel
            Model simulating the caplet's period

        Returns
        -------
        PathValues
            payoff / N(payment_time) · N(evaluation_time), shape (n_paths,)
        """
        model = self._require_model(model)

        params = model.parameters
        if not (
            is_same_time(self.period_start, params.period_start)
            and is_same_time(self.period_end, params.period_end)
        ):
            raise DomainError(
                f"Caplet period [{self.period_start}, {self.period_end}] does not "
                f"match model period [{params.period_start}, {params.period_end}]"
            )

        forward_rate = model.forward_rate(
            self.currency, self.fixing_time, self.period_start, self.period_end
        )

        if self.is_quanto:
            fx_factor = 1.0
        else:
            fx_factor = model.fx_rate(self.currency, self.payment_time)

        payoff = np.maximum(forward_rate - self.strike, 0.0) * fx_factor

        value = (
            payoff
            / model.numeraire(self.payment_time)
            * model.numeraire(evaluation_time)
        )

        logger.debug("%s valued at t=%g on %d paths", self.label, evaluation_time, value.size)
        return value

    @classmethod
    def from_config(
        cls,
        config: "CapletConfig",  # noqa: F821
        period_start: Year,
        period_end: Year,
    ) -> "GeneralizedCaplet":
        """
        Create caplet from configuration.

        Parameters
        ----------
        config : CapletConfig
            Caplet configuration
        period_start, period_end : float
            Accrual period of the model

        Returns
        -------
        GeneralizedCaplet
            Configured caplet
        """
        payment_time = period_start if config.payment == "period_start" else period_end
        return cls(
            currency=as_currency(config.currency),
            is_quanto=config.is_quanto,
            fixing_time=period_start,
            period_start=period_start,
            period_end=period_end,
            payment_time=payment_time,
            strike=config.strike,
        )


def caplet_variants(
    period_start: Year,
    period_end: Year,
    strike: float,
) -> dict[str, GeneralizedCaplet]:
    """
    The six caplet variants: {domestic, foreign, quanto} × {T2, T1 payment}.

    Parameters
    ----------
    period_start, period_end : float
        Accrual period [T1, T2]
    strike : float
        Common strike

    Returns
    -------
    dict[str, GeneralizedCaplet]
        Caplets keyed by their label
    """
    caplets = []
    for payment_time in (period_end, period_start):
        for currency, is_quanto in [
            (Currency.DOMESTIC, False),
            (Currency.FOREIGN, False),
            (Currency.FOREIGN, True),
        ]:
            caplets.append(
                GeneralizedCaplet(
                    currency=currency,
                    is_quanto=is_quanto,
                    fixing_time=period_start,
                    period_start=period_start,
                    period_end=period_end,
                    payment_time=payment_time,
                    strike=strike,
                )
            )
    return {caplet.label: caplet for caplet in caplets}


def portfolio_caplets(
    portfolio: "PortfolioConfig",  # noqa: F821
    period_start: Year,
    period_end: Year,
) -> dict[str, GeneralizedCaplet]:
    """
    Build every configured caplet, keyed by position and label.

    Labels alone are not unique: they carry no strike, and a quanto
    domestic caplet shares the label of the plain one.

    Parameters
    ----------
    portfolio : PortfolioConfig
        Configured caplets
    period_start, period_end : float
        Accrual period of the model

    Returns
    -------
    dict[str, GeneralizedCaplet]
        One entry per configured caplet, e.g. "2: Caplet Domestic",
        in configuration order
    """
    caplets = {}
    for i, caplet_config in enumerate(portfolio.caplets, start=1):
        caplet = GeneralizedCaplet.from_config(caplet_config, period_start, period_end)
        caplets[f"{i}: {caplet.label}"] = caplet
    return caplets


def valuate_caplets(
    caplets: Mapping[str, GeneralizedCaplet],
    model: CrossCurrencyModel,
    evaluation_time: Year = 0.0,
) -> dict[str, tuple[GeneralizedCaplet, ValuationResult]]:
    """
    Value several caplets on the same simulated model.

    Parameters
    ----------
    caplets : Mapping[str, GeneralizedCaplet]
        Caplets keyed by name
    model : CrossCurrencyModel
        Simulated model shared by all caplets
    evaluation_time : float
        Valuation time (default 0)

    Returns
    -------
    dict[str, tuple[GeneralizedCaplet, ValuationResult]]
        Each caplet with its Monte Carlo valuation
    """
    return {
        name: (caplet, caplet.valuate(model, evaluation_time))
        for name, caplet in caplets.items()
    }
