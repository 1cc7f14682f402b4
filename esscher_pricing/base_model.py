"""Esscher-tilting model base API.

A model describes a mean-zero, unit-variance driver X through two primitives:

- cgf(s):    kappa(s) = log E[exp(s X)]
- cdf(x, s): P_s(X < x) = E[1(X < x) exp(s X - kappa(s))]

where dP_s/dP = exp(s X - kappa(s)). At s = 0 the tilted CDF is the ordinary
CDF of X. Valuation routines in :mod:`esscher_pricing.valuation` only ever
touch these two methods, so any subclass (or duck-typed object) can be used.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Tuple

import numpy as np

from .numerics import as_result

logger = logging.getLogger(__name__)


class TiltingModel:
    """
    Base class for all drivers.
    Subclasses must implement :meth:`_cgf` and :meth:`_cdf`.

    Models are immutable after construction: `params` is copied and validated
    once, and instances can be shared freely between threads.
    """

    def __init__(self, params: Dict[str, Any] | None = None):
        params = dict(params or {})
        self._validate(params)
        self.params = params
        logger.debug("Constructed %s with params=%s", type(self).__name__, params)

    @staticmethod
    def _validate(params: Dict[str, Any]) -> None:
        """Raise ValueError for unusable parameters. Default accepts anything."""

    # ----------------------------------------------------------------------- #
    # Primitives
    # ----------------------------------------------------------------------- #
    def cgf(self, s: np.ndarray) -> np.ndarray:
        """Cumulant generating function kappa(s) = log E[exp(s X)].

        Tilts outside :meth:`tilt_bounds` give NaN.
        """
        s = np.asarray(s, dtype=float)
        lo, hi = self.tilt_bounds()
        inside = (s > lo) & (s < hi)
        with np.errstate(invalid="ignore", divide="ignore", over="ignore"):
            out = self._cgf(np.where(inside, s, 0.0))
        return as_result(np.where(inside, out, np.nan))

    def cdf(self, x: np.ndarray, s: np.ndarray = 0.0) -> np.ndarray:
        """Cumulative share distribution P_s(X < x), broadcast over x and s."""
        x, s = np.broadcast_arrays(np.asarray(x, dtype=float), np.asarray(s, dtype=float))
        lo, hi = self.tilt_bounds()
        inside = (s > lo) & (s < hi)
        with np.errstate(invalid="ignore", divide="ignore", over="ignore"):
            out = self._cdf(x, np.where(inside, s, 0.0))
        return as_result(np.where(inside, out, np.nan))

    def pdf(self, x: np.ndarray, s: np.ndarray = 0.0) -> np.ndarray:
        """Tilted density of X, when the model has one."""
        x, s = np.broadcast_arrays(np.asarray(x, dtype=float), np.asarray(s, dtype=float))
        lo, hi = self.tilt_bounds()
        inside = (s > lo) & (s < hi)
        with np.errstate(invalid="ignore", divide="ignore", over="ignore"):
            out = self._pdf(x, np.where(inside, s, 0.0))
        return as_result(np.where(inside, out, np.nan))

    def _cgf(self, s: np.ndarray) -> np.ndarray:
        raise NotImplementedError

    def _cdf(self, x: np.ndarray, s: np.ndarray) -> np.ndarray:
        raise NotImplementedError

    def _pdf(self, x: np.ndarray, s: np.ndarray) -> np.ndarray:
        raise NotImplementedError

    # ----------------------------------------------------------------------- #
    # Descriptive helpers
    # ----------------------------------------------------------------------- #
    def tilt_bounds(self) -> Tuple[float, float]:
        """Open interval of tilts s for which kappa(s) is finite."""
        return -np.inf, np.inf

    def cumulants(self) -> Tuple[float, float, float]:
        """Return (c1, c2, c4) cumulants of X.

        Standardized drivers have c1 = 0 and c2 = 1; c4 is the excess kurtosis.
        Subclasses should override with analytic values.
        """
        raise NotImplementedError

    def param_names(self) -> list[str]:
        """Return model parameter names in deterministic order."""
        return [str(k) for k in sorted(self.params.keys(), key=lambda x: str(x))]

    def __repr__(self) -> str:
        args = ", ".join(f"{k}={self.params[k]!r}" for k in self.param_names())
        return f"{type(self).__name__}({args})"
