"""
Container for a Monte Carlo valuation.
"""

from dataclasses import dataclass

import numpy as np

from xccy_core._types import PathValues


@dataclass(frozen=True)
class ValuationResult:
    """
    Monte Carlo estimate of a product value.

    Attributes
    ----------
    price : float
        Mean of the per-path values
    standard_error : float
        Sample standard deviation divided by √n_paths
    n_paths : int
        Number of paths used

    Example
    -------
    >>> result = caplet.valuate(model)
    >>> low, high = result.confidence_interval()
    """

    price: float
    standard_error: float
    n_paths: int

    @classmethod
    def from_path_values(cls, values: PathValues) -> "ValuationResult":
        """Estimate price and standard error from per-path values."""
        values = np.asarray(values, dtype=np.float64)
        n_paths = values.size
        std = float(np.std(values, ddof=1)) if n_paths > 1 else 0.0
        return cls(
            price=float(np.mean(values)),
            standard_error=std / np.sqrt(n_paths),
            n_paths=n_paths,
        )

    def confidence_interval(self, n_std: float = 1.96) -> tuple[float, float]:
        """Symmetric interval price ± n_std standard errors."""
        half_width = n_std * self.standard_error
        return self.price - half_width, self.price + half_width

    def to_dict(self) -> dict[str, float]:
        """Convert to dictionary."""
        return {
            "price": self.price,
            "standard_error": self.standard_error,
            "n_paths": self.n_paths,
        }
