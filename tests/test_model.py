"""
Tests for the cross-currency model: forward rates, FX reconstruction and numeraire.
"""

import numpy as np
import pytest

from xccy_core.exceptions import DomainError, UnsupportedTimeError, UpstreamSimulationError
from xccy_core.market import ModelParameters
from xccy_core.model import CrossCurrencyModel, Currency, as_currency
from xccy_core.simulation import BrownianMotion, TimeDiscretization


def deterministic_params(domestic_rate: float, foreign_rate: float) -> ModelParameters:
    """Zero-volatility parameters with bonds consistent with the forward rates."""
    return ModelParameters(
        period_start=1.0,
        period_end=2.0,
        domestic_zero_bond=1.0 / (1.0 + domestic_rate),
        foreign_zero_bond=1.0 / (1.0 + foreign_rate),
        initial_domestic_forward_rate=domestic_rate,
        initial_foreign_forward_rate=foreign_rate,
        initial_forward_fx=1.25,
        volatility_domestic=0.0,
        volatility_foreign=0.0,
        volatility_fx_forward=0.0,
    )


class TestCurrency:
    """Tests for the currency selector."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (0, Currency.DOMESTIC),
            (1, Currency.FOREIGN),
            ("foreign", Currency.FOREIGN),
            ("DOMESTIC", Currency.DOMESTIC),
            (Currency.FOREIGN, Currency.FOREIGN),
        ],
    )
    def test_conversion(self, value, expected: Currency) -> None:
        """Ints, names and members are accepted."""
        assert as_currency(value) is expected

    @pytest.mark.parametrize("value", [2, -1, "yen", True])
    def test_invalid_currency_raises(self, value) -> None:
        """Anything else is a domain error."""
        with pytest.raises(DomainError):
            as_currency(value)


class TestCrossCurrencyModel:
    """Tests for quantities reconstructed from the simulated paths."""

    def test_forward_rates_start_at_initial_values(
        self, model: CrossCurrencyModel, params: ModelParameters
    ) -> None:
        """At t=0 every path sits at the initial forward rate."""
        assert np.allclose(
            model.forward_rate(Currency.DOMESTIC, 0.0), params.initial_domestic_forward_rate
        )
        assert np.allclose(
            model.forward_rate(Currency.FOREIGN, 0.0), params.initial_foreign_forward_rate
        )

    def test_forward_rate_shape(self, model: CrossCurrencyModel) -> None:
        """Forward rates are per-path arrays."""
        rates = model.forward_rate(Currency.FOREIGN, 1.0, 1.0, 2.0)
        assert rates.shape == (5000,)
        assert np.all(rates > 0)

    def test_domestic_rate_is_martingale(
        self, model_factory, params: ModelParameters
    ) -> None:
        """Under the domestic T2-forward measure E[L^d(T1)] = L^d(0)."""
        model = model_factory(params, n_paths=100000, time_step=1.0, seed=17)
        rates = model.forward_rate(Currency.DOMESTIC, 1.0)
        se = rates.std() / np.sqrt(rates.size)
        assert abs(rates.mean() - params.initial_domestic_forward_rate) < 4 * se

    def test_domestic_fx_is_one(self, model: CrossCurrencyModel) -> None:
        """Domestic currency converts at 1 at all supported times."""
        for t in (0.0, 1.0, 2.0):
            assert model.fx_rate(Currency.DOMESTIC, t) == 1.0

    def test_fx_at_zero_is_spot(self, model: CrossCurrencyModel, params: ModelParameters) -> None:
        """FX(0) = FFX(T2; 0) P^d / P^f recovers the spot rate."""
        fx0 = model.fx_rate(Currency.FOREIGN, 0.0)
        assert np.allclose(fx0, 1.10)
        assert np.allclose(fx0, params.initial_fx)

    def test_fx_at_maturity_is_forward_fx(self, model: CrossCurrencyModel) -> None:
        """At T2 both bonds equal one."""
        assert np.array_equal(
            model.fx_rate(Currency.FOREIGN, 2.0), model.process.value_at(2.0, 2)
        )

    def test_fx_at_fixing(self, model: CrossCurrencyModel) -> None:
        """FX(T1) = FFX(T1) (1 + L^f τ) / (1 + L^d τ)."""
        ffx = model.process.value_at(1.0, 2)
        ld = model.forward_rate(Currency.DOMESTIC, 1.0)
        lf = model.forward_rate(Currency.FOREIGN, 1.0)

        assert np.allclose(model.fx_rate(Currency.FOREIGN, 1.0), ffx * (1 + lf) / (1 + ld))

    def test_zero_vol_fx_continuity(self) -> None:
        """Bonds consistent with the forwards make FX(T1) = FX(0)."""
        model = CrossCurrencyModel(
            deterministic_params(0.05, 0.04),
            BrownianMotion(TimeDiscretization.from_period(1.0, 2.0, 0.5), 3, 10, seed=1),
        )
        fx0 = model.fx_rate(Currency.FOREIGN, 0.0)
        fx1 = model.fx_rate(Currency.FOREIGN, 1.0)

        assert np.allclose(fx1, fx0, rtol=1e-12)

    def test_zero_vol_equal_rates_constant_fx(self) -> None:
        """With equal rates the FX rate is flat at 0, T1 and T2."""
        model = CrossCurrencyModel(
            deterministic_params(0.03, 0.03),
            BrownianMotion(TimeDiscretization.from_period(1.0, 2.0, 0.5), 3, 10, seed=1),
        )
        values = [model.fx_rate(Currency.FOREIGN, t) for t in (0.0, 1.0, 2.0)]

        assert np.allclose(values[0], 1.25)
        assert np.allclose(values[1], 1.25)
        assert np.allclose(values[2], 1.25)

    def test_numeraire_values(self, model: CrossCurrencyModel, params: ModelParameters) -> None:
        """Numeraire is P^d(T2; t) at the three supported times."""
        ld = model.forward_rate(Currency.DOMESTIC, 1.0)

        assert model.numeraire(0.0) == params.domestic_zero_bond
        assert np.allclose(model.numeraire(1.0), 1.0 / (1.0 + ld))
        assert model.numeraire(2.0) == 1.0

    def test_numeraire_off_supported_times_raises(self, model: CrossCurrencyModel) -> None:
        """The numeraire is not interpolated."""
        with pytest.raises(UnsupportedTimeError):
            model.numeraire(0.5)

    def test_fx_unsupported_time_raises(self, model: CrossCurrencyModel) -> None:
        """Foreign FX at an arbitrary time is an error, even off the grid."""
        with pytest.raises(UnsupportedTimeError):
            model.fx_rate(Currency.FOREIGN, 0.37)
        with pytest.raises(UnsupportedTimeError):
            model.fx_rate(Currency.FOREIGN, 0.5)

    def test_forward_rate_off_grid_raises(self, model: CrossCurrencyModel) -> None:
        """Forward rates exist only on grid points."""
        with pytest.raises(UpstreamSimulationError):
            model.forward_rate(Currency.DOMESTIC, 0.37)

    def test_invalid_currency_raises(self, model: CrossCurrencyModel) -> None:
        """Currency index 2 is the FX component, not a currency."""
        with pytest.raises(DomainError):
            model.forward_rate(2, 1.0)
        with pytest.raises(DomainError):
            model.fx_rate(2, 1.0)

    def test_period_mismatch_raises(self, model: CrossCurrencyModel) -> None:
        """The model simulates a single accrual period."""
        with pytest.raises(DomainError):
            model.forward_rate(Currency.DOMESTIC, 1.0, 1.0, 3.0)

    def test_grid_without_fixing_raises(self, params: ModelParameters) -> None:
        """T1 must be a point of the simulation grid."""
        grid = TimeDiscretization(np.array([0.0, 0.6, 1.2, 2.0]))
        with pytest.raises(UpstreamSimulationError):
            CrossCurrencyModel(params, BrownianMotion(grid, 3, 10, seed=1))

    def test_grid_accessors(self, model: CrossCurrencyModel) -> None:
        """Time accessors delegate to the grid."""
        assert model.number_of_paths == 5000
        assert model.get_time_index(1.0) == 4
        assert model.get_time(8) == 2.0
