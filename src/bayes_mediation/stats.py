"""
Summary statistics for posterior draws.

Highest density intervals and typical values used across the mediation
summaries.
"""

from __future__ import annotations

import math

import numpy as np
from loguru import logger

from .config import TypicalValue
from .exceptions import InsufficientSamplesError


def compute_hdi(samples: np.ndarray, prob: float = 0.9) -> tuple[float, float]:
    """
    Compute the highest density interval of a sample.

    The sorted draws are scanned with windows of ``ceil(prob * n)``
    consecutive values and the narrowest window is returned. When several
    adjacent windows share the minimum width the middle one is used, so an
    evenly spaced sample yields the equal-tailed interval.

    Parameters
    ----------
    samples : np.ndarray
        Posterior draws. Non-finite values are ignored.
    prob : float
        Probability mass of the interval, in (0, 1].

    Returns
    -------
    tuple[float, float]
        Lower and upper bounds of the HDI.

    Raises
    ------
    InsufficientSamplesError
        If no finite draws remain.
    """
    if not 0 < prob <= 1:
        raise ValueError(f"prob must be in (0, 1], got {prob}")

    x = np.asarray(samples, dtype=float).reshape(-1)
    x = np.sort(x[np.isfinite(x)])
    n = len(x)
    if n == 0:
        raise InsufficientSamplesError("No finite samples to compute an HDI from")

    # round first: 0.9 * 100 is 90.00000000000001 in floating point
    window = min(max(int(math.ceil(round(prob * n, 9))), 1), n)
    widths = x[window - 1 :] - x[: n - window + 1]

    candidates = np.flatnonzero(np.isclose(widths, widths.min(), rtol=1e-9, atol=0))
    if len(candidates) == 1:
        start = int(candidates[0])
    elif np.all(np.diff(candidates) == 1):
        start = int(np.floor(candidates.mean()))
    else:
        logger.debug(
            "Identical interval widths found along different segments; "
            "using the last one"
        )
        start = int(candidates[-1])

    return float(x[start]), float(x[start + window - 1])


def typical_value(
    samples: np.ndarray, typical: TypicalValue | str = TypicalValue.MEDIAN
) -> float:
    """Point summary (median or mean) of posterior draws."""
    typical = TypicalValue(typical)
    x = np.asarray(samples, dtype=float)
    if x.size == 0:
        raise InsufficientSamplesError("No samples to summarize")
    if typical is TypicalValue.MEAN:
        return float(np.mean(x))
    return float(np.median(x))


__all__ = [
    "compute_hdi",
    "typical_value",
]
