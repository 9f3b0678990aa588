"""
Tests for market module: correlation, parameters, drift model and numeraire.
"""

import numpy as np
import pytest

from xccy_core.exceptions import DomainError, UnsupportedTimeError, UpstreamSimulationError
from xccy_core.market import (
    CorrelationDecomposer,
    LognormalCrossCurrencyProcessModel,
    ModelParameters,
    NumeraireProvider,
)

VALID_CORRELATIONS = [
    (0.0, 0.0, 0.0),
    (0.4, 0.3, -0.2),
    (0.7, -0.3, 0.4),
    (-0.9, 0.5, -0.5),
    (0.99, 0.5, 0.5),
    (0.0, 0.6, 0.8),  # singular but positive semi-definite
]


class TestCorrelationDecomposer:
    """Tests for the correlation factor matrix."""

    @pytest.mark.parametrize("rho_df, rho_xd, rho_xf", VALID_CORRELATIONS)
    def test_rows_have_unit_norm(self, rho_df: float, rho_xd: float, rho_xf: float) -> None:
        """Each row of L should have unit Euclidean norm."""
        corr = CorrelationDecomposer(rho_dom_for=rho_df, rho_fx_dom=rho_xd, rho_fx_for=rho_xf)
        norms = np.linalg.norm(corr.factor_matrix, axis=1)
        assert np.allclose(norms, 1.0, rtol=0, atol=1e-12)

    @pytest.mark.parametrize("rho_df, rho_xd, rho_xf", VALID_CORRELATIONS)
    def test_reproduces_correlation_matrix(
        self, rho_df: float, rho_xd: float, rho_xf: float
    ) -> None:
        """L @ L.T should equal the input correlation matrix."""
        corr = CorrelationDecomposer(rho_dom_for=rho_df, rho_fx_dom=rho_xd, rho_fx_for=rho_xf)
        L = corr.factor_matrix
        assert np.allclose(L @ L.T, corr.correlation_matrix, rtol=0, atol=1e-12)

    def test_lower_triangular(self, correlation: CorrelationDecomposer) -> None:
        """Factor matrix should be lower triangular with the domestic row first."""
        L = correlation.factor_matrix
        assert np.allclose(np.triu(L, k=1), 0.0)
        assert np.array_equal(L[0], [1.0, 0.0, 0.0])

    def test_canonical_rows(self, correlation: CorrelationDecomposer) -> None:
        """Rows should follow the documented convention."""
        rho_df, rho_xd, rho_xf = 0.4, 0.3, -0.2
        c = (rho_xf - rho_df * rho_xd) / np.sqrt(1 - rho_df**2)

        assert np.allclose(correlation.row(1), [rho_df, np.sqrt(1 - rho_df**2), 0.0])
        assert np.allclose(correlation.row(2), [rho_xd, c, np.sqrt(1 - rho_xd**2 - c**2)])

    def test_correlated_samples_empirical(self, correlation: CorrelationDecomposer) -> None:
        """Empirical correlations of correlated normals should match target."""
        rng = np.random.default_rng(42)
        z = correlation.correlate(rng.standard_normal((50000, 3)))
        empirical = np.corrcoef(z.T)
        assert np.allclose(empirical, correlation.correlation_matrix, atol=0.02)

    def test_correlate_wrong_shape_raises(self, correlation: CorrelationDecomposer) -> None:
        """Samples must have three columns."""
        with pytest.raises(DomainError):
            correlation.correlate(np.zeros((10, 2)))

    def test_out_of_range_correlation_raises(self) -> None:
        """A correlation of 1.5 should be rejected before any simulation."""
        with pytest.raises(DomainError):
            CorrelationDecomposer(rho_dom_for=1.5, rho_fx_dom=0.0, rho_fx_for=0.0)

    def test_degenerate_domestic_foreign_raises(self) -> None:
        """Perfect domestic-foreign correlation makes the construction singular."""
        with pytest.raises(DomainError):
            CorrelationDecomposer(rho_dom_for=1.0, rho_fx_dom=0.2, rho_fx_for=0.2)

    def test_inconsistent_correlations_raise(self) -> None:
        """Correlations that are not jointly consistent should raise error."""
        with pytest.raises(DomainError):
            CorrelationDecomposer(rho_dom_for=0.99, rho_fx_dom=0.99, rho_fx_for=-0.99)

    def test_domain_error_is_value_error(self) -> None:
        """DomainError should be catchable as ValueError."""
        with pytest.raises(ValueError):
            CorrelationDecomposer(rho_dom_for=-1.2)

    def test_row_index_validated(self, correlation: CorrelationDecomposer) -> None:
        """Only components 0, 1 and 2 exist."""
        with pytest.raises(DomainError):
            correlation.row(3)


class TestModelParameters:
    """Tests for the parameter set."""

    def test_spot_fx_converted_to_forward(self, params: ModelParameters) -> None:
        """FFX(T2;0) = FX(0) P^f / P^d."""
        assert np.isclose(params.initial_forward_fx, 1.10 * 0.96 / 0.95, rtol=1e-14)
        assert np.isclose(params.initial_fx, 1.10, rtol=1e-14)

    def test_period_length(self, params: ModelParameters) -> None:
        """Period length should be T2 - T1."""
        assert params.period_length == 1.0

    def test_parameters_immutable(self, params: ModelParameters) -> None:
        """Parameters cannot be changed after construction."""
        with pytest.raises(AttributeError):
            params.period_start = 0.5  # type: ignore[misc]

    def test_correlation_decomposed(self, params: ModelParameters) -> None:
        """Parameters should carry the decomposed correlations."""
        assert params.correlation.rho_dom_for == 0.4
        assert params.correlation.rho_fx_for == -0.2

    def test_unordered_period_raises(self) -> None:
        """T2 must be after T1."""
        with pytest.raises(DomainError):
            ModelParameters(
                period_start=2.0,
                period_end=1.0,
                domestic_zero_bond=0.95,
                foreign_zero_bond=0.96,
                initial_domestic_forward_rate=0.05,
                initial_foreign_forward_rate=0.04,
                initial_forward_fx=1.1,
                volatility_domestic=0.2,
                volatility_foreign=0.2,
                volatility_fx_forward=0.1,
            )

    @pytest.mark.parametrize(
        "field, value",
        [
            ("domestic_zero_bond", 0.0),
            ("foreign_zero_bond", -0.5),
            ("initial_domestic_forward_rate", -0.01),
            ("initial_forward_fx", 0.0),
            ("volatility_foreign", -0.1),
            ("correlation_fx_foreign", 1.1),
            ("period_start", float("nan")),
            ("period_end", float("nan")),
            ("period_end", float("inf")),
        ],
    )
    def test_invalid_values_raise(self, field: str, value: float) -> None:
        """Invalid market data should fail at construction."""
        kwargs = dict(
            period_start=1.0,
            period_end=2.0,
            domestic_zero_bond=0.95,
            foreign_zero_bond=0.96,
            initial_domestic_forward_rate=0.05,
            initial_foreign_forward_rate=0.04,
            initial_forward_fx=1.1,
            volatility_domestic=0.2,
            volatility_foreign=0.2,
            volatility_fx_forward=0.1,
        )
        kwargs[field] = value
        with pytest.raises(DomainError):
            ModelParameters(**kwargs)


class TestLognormalCrossCurrencyProcessModel:
    """Tests for drift and factor loadings of the log-states."""

    def test_drift_ito_and_quanto(self, params: ModelParameters) -> None:
        """Drift should contain the Itô correction and the quanto adjustment."""
        model = LognormalCrossCurrencyProcessModel(params)
        drift = model.drift(0)

        assert drift[0] == pytest.approx(-0.5 * 0.30**2)
        assert drift[1] == pytest.approx(-0.5 * 0.25**2 - 0.25 * 0.12 * (-0.2))
        assert drift[2] == pytest.approx(-0.5 * 0.12**2)

    def test_drift_time_homogeneous(self, params: ModelParameters) -> None:
        """Drift should not depend on the time index."""
        model = LognormalCrossCurrencyProcessModel(params)
        assert model.drift(0) == model.drift(7)

    def test_factor_loadings_scaled_rows(self, params: ModelParameters) -> None:
        """Loadings should be volatility times the correlation row."""
        model = LognormalCrossCurrencyProcessModel(params)
        L = params.correlation.factor_matrix

        for i, sigma in enumerate(params.volatilities):
            assert np.allclose(model.factor_loading(0, i), sigma * L[i])

    def test_factor_loadings_covariance(self, params: ModelParameters) -> None:
        """Instantaneous covariance should be σ_i σ_j ρ_ij."""
        model = LognormalCrossCurrencyProcessModel(params)
        loadings = np.array([model.factor_loading(0, i) for i in range(3)])
        sigmas = np.array(params.volatilities)
        expected = np.outer(sigmas, sigmas) * params.correlation.correlation_matrix

        assert np.allclose(loadings @ loadings.T, expected, atol=1e-14)

    def test_initial_state_is_log(self, params: ModelParameters) -> None:
        """Initial state should be the logarithm of the initial values."""
        model = LognormalCrossCurrencyProcessModel(params)
        assert np.allclose(np.exp(model.initial_state()), model.initial_value())
        assert model.initial_value()[2] == params.initial_forward_fx

    def test_invalid_component_raises(self, params: ModelParameters) -> None:
        """Component index 3 does not exist."""
        model = LognormalCrossCurrencyProcessModel(params)
        with pytest.raises(DomainError):
            model.factor_loading(0, 3)

    def test_dimensions(self, params: ModelParameters) -> None:
        """Three components driven by three factors."""
        model = LognormalCrossCurrencyProcessModel(params)
        assert model.number_of_components == 3
        assert model.number_of_factors == 3


class TestNumeraireProvider:
    """Tests for the domestic zero-bond numeraire."""

    def test_numeraire_at_zero(self, params: ModelParameters) -> None:
        """N(0) should be the domestic zero bond."""
        assert NumeraireProvider(params).at(0.0) == params.domestic_zero_bond

    def test_numeraire_at_maturity(self, params: ModelParameters) -> None:
        """N(T2) should be exactly one."""
        assert NumeraireProvider(params).at(params.period_end) == 1.0

    def test_numeraire_at_fixing(self, params: ModelParameters) -> None:
        """N(T1) = 1 / (1 + L^d(T1) τ)."""
        rates = np.array([0.03, 0.05, 0.08])
        numeraire = NumeraireProvider(params).at(params.period_start, rates)
        assert np.allclose(numeraire, 1.0 / (1.0 + rates * params.period_length))

    def test_numeraire_at_fixing_needs_rate(self, params: ModelParameters) -> None:
        """N(T1) cannot be computed without the simulated domestic rate."""
        with pytest.raises(UpstreamSimulationError):
            NumeraireProvider(params).at(params.period_start)

    @pytest.mark.parametrize("time", [0.5, 1.5, 2.5, -1.0])
    def test_unsupported_time_raises(self, params: ModelParameters, time: float) -> None:
        """Numeraire is not interpolated between the three supported times."""
        with pytest.raises(UnsupportedTimeError):
            NumeraireProvider(params).at(time, 0.05)
