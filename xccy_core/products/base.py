"""
Base class for products valued on the cross-currency model.
"""

from abc import ABC, abstractmethod

import numpy as np

from xccy_core._types import PathValues, Year
from xccy_core.model.cross_currency import CrossCurrencyModel
from xccy_core.products.result import ValuationResult


class CrossCurrencyProduct(ABC):
    """
    Abstract base class for Monte Carlo products on a CrossCurrencyModel.

    Subclasses implement `get_value`, which returns the numeraire-relative
    value on every path. Averaging over paths is done here.

    Methods
    -------
    get_value(evaluation_time, model)
        Per-path value at evaluation_time
    get_price(model, evaluation_time)
        Monte Carlo estimate (mean over paths)
    valuate(model, evaluation_time)
        Estimate with standard error
    """

    @abstractmethod
    def get_value(self, evaluation_time: Year, model: CrossCurrencyModel) -> PathValues:
        """
        Value of the product at evaluation_time on each path.

        Parameters
        ----------
        evaluation_time : float
            Time at which the value is expressed (0, T1 or T2)
        model : CrossCurrencyModel
            Simulated model

        Returns
        -------
        PathValues
            Per-path values, shape (n_paths,)
        """
        pass

    def _require_model(self, model: object) -> CrossCurrencyModel:
        if not isinstance(model, CrossCurrencyModel):
            raise TypeError(
                f"{self.__class__.__name__} requires a CrossCurrencyModel, "
                f"got {type(model).__name__}"
            )
        return model

    def _path_values(self, model: CrossCurrencyModel, evaluation_time: Year) -> PathValues:
        values = self.get_value(evaluation_time, self._require_model(model))
        return np.broadcast_to(values, (model.number_of_paths,))

    def get_price(self, model: CrossCurrencyModel, evaluation_time: Year = 0.0) -> float:
        """Monte Carlo price: mean of the per-path values."""
        return float(np.mean(self._path_values(model, evaluation_time)))

    def valuate(self, model: CrossCurrencyModel, evaluation_time: Year = 0.0) -> ValuationResult:
        """Monte Carlo price with its standard error."""
        return ValuationResult.from_path_values(self._path_values(model, evaluation_time))
