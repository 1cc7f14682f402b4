"""European option valuation on an Esscher-tilted forward.

The forward is modelled as F = f exp(s X - kappa(s)) with E[F] = f and
Var(log F) = s^2 when X has mean 0 and variance 1. Then

    E[(k - F)^+] = E[(k - F) 1(F < k)]
                 = k P(F < k) - E[F 1(F < k)]
                 = k P(F < k) - f P_s(F < k)

and F < k  iff  X < (log(k/f) + kappa(s)) / s, so both probabilities are
single evaluations of the model's tilted CDF.

All routines broadcast over numpy arrays and never raise on numeric input:
f <= 0, s <= 0 or k <= 0 (or NaN) give NaN in the affected entries, so a whole
grid can be priced in one call. Prices are undiscounted.
"""

from __future__ import annotations

from typing import Tuple

import numpy as np

from .numerics import as_result, common_dtype


def _broadcast_inputs(f, s, k, dtype) -> Tuple[np.ndarray, np.ndarray, np.ndarray, np.dtype]:
    dt = common_dtype(f, s, k) if dtype is None else np.dtype(dtype)
    f, s, k = np.broadcast_arrays(*(np.asarray(v, dtype=dt) for v in (f, s, k)))
    return f, s, k, dt


def _moneyness(f: np.ndarray, s: np.ndarray, k: np.ndarray, m, dt: np.dtype) -> np.ndarray:
    valid = (f > 0) & (s > 0) & (k > 0)
    x = np.full(f.shape, np.nan, dtype=dt)
    if np.any(valid):
        # The model is only asked for kappa on the valid entries.
        fv, sv, kv = f[valid], s[valid], k[valid]
        with np.errstate(over="ignore", invalid="ignore"):
            x[valid] = (np.log(kv / fv) + np.asarray(m.cgf(sv), dtype=float)) / sv
    return x


def moneyness(f, s, k, m, *, dtype=None):
    """Strike threshold on the driver: F < k  iff  X < moneyness(f, s, k, m).

    This is Black's -d2 generalized to an arbitrary tilting distribution.

    Parameters
    ----------
    f:
        Forward price level (> 0).
    s:
        Esscher tilt, conventionally total volatility over the option's life (> 0).
    k:
        Strike (> 0).
    m:
        Any object providing ``cgf(s)`` and ``cdf(x, s)``.
    dtype:
        Result precision. Defaults to the common floating type of f, s and k.

    Returns
    -------
    (log(k/f) + kappa(s)) / s, or NaN where the inputs are out of domain.
    """
    f, s, k, dt = _broadcast_inputs(f, s, k, dtype)
    return as_result(_moneyness(f, s, k, m, dt))


def digital_put(f, s, k, m, *, dtype=None):
    """Cash-or-nothing put paying 1 if F < k: P(F < k)."""
    f, s, k, dt = _broadcast_inputs(f, s, k, dtype)
    x = _moneyness(f, s, k, m, dt)
    with np.errstate(invalid="ignore"):
        out = np.asarray(m.cdf(x, 0.0), dtype=float)
    return as_result(out.astype(dt, copy=False))


def asset_put(f, s, k, m, *, dtype=None):
    """Asset-or-nothing put paying F if F < k: f P_s(F < k)."""
    f, s, k, dt = _broadcast_inputs(f, s, k, dtype)
    x = _moneyness(f, s, k, m, dt)
    with np.errstate(invalid="ignore"):
        out = f * np.asarray(m.cdf(x, s), dtype=float)
    return as_result(out.astype(dt, copy=False))


def digital_call(f, s, k, m, *, dtype=None):
    """Cash-or-nothing call paying 1 if F >= k."""
    f, s, k, dt = _broadcast_inputs(f, s, k, dtype)
    out = 1.0 - np.asarray(digital_put(f, s, k, m, dtype=dt))
    return as_result(out.astype(dt, copy=False))


def asset_call(f, s, k, m, *, dtype=None):
    """Asset-or-nothing call paying F if F >= k: f - f P_s(F < k)."""
    f, s, k, dt = _broadcast_inputs(f, s, k, dtype)
    out = f - np.asarray(asset_put(f, s, k, m, dtype=dt))
    return as_result(out.astype(dt, copy=False))


def put(f, s, k, m, *, dtype=None):
    """European put value E[(k - F)^+] = k P(F < k) - f P_s(F < k)."""
    f, s, k, dt = _broadcast_inputs(f, s, k, dtype)
    x = _moneyness(f, s, k, m, dt)
    with np.errstate(invalid="ignore"):
        p0 = np.asarray(m.cdf(x, 0.0), dtype=float)
        ps = np.asarray(m.cdf(x, s), dtype=float)
        out = k * p0 - f * ps
    return as_result(out.astype(dt, copy=False))


def call(f, s, k, m, *, dtype=None):
    """European call value via put-call parity: call = put + f - k."""
    f, s, k, dt = _broadcast_inputs(f, s, k, dtype)
    with np.errstate(invalid="ignore"):
        out = np.asarray(put(f, s, k, m, dtype=dt)) + f - k
    return as_result(out.astype(dt, copy=False))


def european_price(f, s, k, m, is_call: bool = True, *, dtype=None):
    """European option value; dispatches to :func:`call` or :func:`put`."""
    if is_call:
        return call(f, s, k, m, dtype=dtype)
    return put(f, s, k, m, dtype=dtype)
