"""Vote weighting for the circle Hough transform."""

import numpy as np
from typing import Union


class SymmetricTriangleKernel:
    """
    Symmetric triangular density centered on mu with half-width sigma.

    pdf(d) = (1 / sigma) * (1 - |d - mu| / sigma) for |d - mu| <= sigma,
    and 0 elsewhere. The peak value at d == mu is 1 / sigma.
    """

    def __init__(self, mu: float, sigma: float):
        if sigma <= 0:
            raise ValueError(f"sigma must be positive, got {sigma}")
        self.mu = float(mu)
        self.sigma = float(sigma)
        self.one_over_sigma = 1.0 / self.sigma

    @property
    def support(self):
        return self.mu - self.sigma, self.mu + self.sigma

    def evaluate(self, d: Union[float, np.ndarray]) -> Union[float, np.ndarray]:
        """Evaluate the density at distance(s) d."""
        d = np.asarray(d, dtype=np.float64)
        offset = d - self.mu
        px = (1.0 - np.abs(offset * self.one_over_sigma)) * self.one_over_sigma
        px = np.where(np.abs(offset) > self.sigma, 0.0, px)
        if px.ndim == 0:
            return float(px)
        return px

    __call__ = evaluate
