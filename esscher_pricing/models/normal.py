"""Normal (Black-Scholes) tilting model."""

from __future__ import annotations

from typing import Any, Dict, Tuple

import numpy as np
from scipy.special import ndtr

from ..base_model import TiltingModel
from ..numerics import normal_cdf_as

_ERF_CHOICES = ("scipy", "as")


class NormalModel(TiltingModel):
    """Standard normal driver: kappa(s) = s^2/2 and P_s(X < x) = Phi(x - s).

    With this driver the valuation formulas reduce to Black's model with
    total volatility s.

    Parameters (in `params` dict): erf
        "scipy" (default) evaluates Phi with ``scipy.special.ndtr``;
        "as" uses the Abramowitz & Stegun error function approximation.
    """

    @staticmethod
    def _validate(params: Dict[str, Any]) -> None:
        erf = str(params.get("erf", "scipy")).lower().strip()
        if erf not in _ERF_CHOICES:
            raise ValueError(f"Unsupported erf: {erf}. Supported: {list(_ERF_CHOICES)}")
        params["erf"] = erf

    def _phi(self, z: np.ndarray) -> np.ndarray:
        if self.params["erf"] == "as":
            return normal_cdf_as(z)
        return ndtr(z)

    def _cgf(self, s: np.ndarray) -> np.ndarray:
        return 0.5 * s * s

    def _cdf(self, x: np.ndarray, s: np.ndarray) -> np.ndarray:
        # Tilting a standard normal by s shifts its mean to s.
        return self._phi(x - s)

    def _pdf(self, x: np.ndarray, s: np.ndarray) -> np.ndarray:
        z = x - s
        return np.exp(-0.5 * z * z) / np.sqrt(2.0 * np.pi)

    def cumulants(self) -> Tuple[float, float, float]:
        return 0.0, 1.0, 0.0
