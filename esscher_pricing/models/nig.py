"""Normal Inverse Gaussian (NIG) tilting model.

The driver is an NIG(alpha, beta, delta, mu) variable standardized to mean 0
and variance 1, which pins the scale and location:
    gamma = sqrt(alpha^2 - beta^2)
    delta = gamma^3 / alpha^2
    mu    = -delta * beta / gamma

Its cumulant generating function is
    kappa(s) = mu s + delta * (gamma - sqrt(alpha^2 - (beta + s)^2)),
finite for |beta + s| < alpha. The NIG family is closed under Esscher
tilting: tilting by s replaces beta with beta + s and keeps alpha, delta, mu.

References: Barndorff-Nielsen (1997).
"""

from __future__ import annotations

from typing import Any, Dict, Tuple

import numpy as np
from scipy.stats import norminvgauss

from ..base_model import TiltingModel


class NIGModel(TiltingModel):
    """Standardized NIG driver.

    Parameters (in `params` dict): alpha (tail heaviness), beta (skew).
    """

    def __init__(self, params: Dict[str, Any]):
        super().__init__(params)
        alpha = float(self.params["alpha"])
        beta = float(self.params["beta"])
        self._alpha = alpha
        self._beta = beta
        self._gamma = float(np.sqrt(alpha * alpha - beta * beta))
        self._delta = self._gamma ** 3 / (alpha * alpha)
        self._mu = -self._delta * beta / self._gamma

    @staticmethod
    def _validate(params: Dict[str, Any]) -> None:
        if "alpha" not in params or "beta" not in params:
            raise ValueError("NIGModel requires params['alpha'] and params['beta']")
        alpha = float(params["alpha"])
        beta = float(params["beta"])
        if not np.isfinite(alpha) or not np.isfinite(beta):
            raise ValueError("NIG parameters must be finite")
        if alpha <= 0.0:
            raise ValueError("NIG requires alpha > 0")
        if alpha <= abs(beta):
            raise ValueError("NIG requires alpha > |beta|")

    def tilt_bounds(self) -> Tuple[float, float]:
        return -self._alpha - self._beta, self._alpha - self._beta

    def _cgf(self, s: np.ndarray) -> np.ndarray:
        a, b = self._alpha, self._beta
        return self._mu * s + self._delta * (self._gamma - np.sqrt(a * a - (b + s) ** 2))

    def _frozen_args(self, s: np.ndarray) -> dict:
        # scipy's norminvgauss(a, b, loc, scale) has alpha = a/scale, beta = b/scale.
        d = self._delta
        return {"a": self._alpha * d, "b": (self._beta + s) * d, "loc": self._mu, "scale": d}

    def _cdf(self, x: np.ndarray, s: np.ndarray) -> np.ndarray:
        return norminvgauss.cdf(x, **self._frozen_args(s))

    def _pdf(self, x: np.ndarray, s: np.ndarray) -> np.ndarray:
        return norminvgauss.pdf(x, **self._frozen_args(s))

    def cumulants(self) -> Tuple[float, float, float]:
        a, b, g, d = self._alpha, self._beta, self._gamma, self._delta
        c2 = d * a * a / g ** 3
        c4 = 3.0 * d * a * a * (a * a + 4.0 * b * b) / g ** 7
        return 0.0, float(c2), float(c4)
