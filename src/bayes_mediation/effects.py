"""
Product-of-coefficients effect decomposition with HDI summaries.

Combines path coefficient draws into direct, indirect, mediator and total
effects and summarizes each with a typical value and a highest density
interval.
"""

from __future__ import annotations

import numpy as np
from loguru import logger

from .config import TypicalValue
from .exceptions import InsufficientSamplesError, UndefinedRatioWarning
from .results import Diagnostic, EffectSampleSet
from .stats import compute_hdi, typical_value


def combine_effects(
    direct: np.ndarray,
    mediator: np.ndarray,
    treatment_on_mediator: np.ndarray,
) -> EffectSampleSet:
    """
    Compute per-draw indirect and total effects.

    ``indirect = treatment_on_mediator * mediator`` and
    ``total = direct + indirect``, elementwise over posterior draws. The
    per-draw proportion mediated is ``indirect / total``; it is NaN where the
    total effect is zero.

    Parameters
    ----------
    direct : np.ndarray
        Draws of the treatment coefficient in the outcome equation.
    mediator : np.ndarray
        Draws of the mediator coefficient in the outcome equation.
    treatment_on_mediator : np.ndarray
        Draws of the treatment coefficient in the mediator equation.

    Returns
    -------
    EffectSampleSet
    """
    direct = np.asarray(direct, dtype=float)
    mediator = np.asarray(mediator, dtype=float)
    treatment_on_mediator = np.asarray(treatment_on_mediator, dtype=float)

    if not (direct.shape == mediator.shape == treatment_on_mediator.shape):
        raise InsufficientSamplesError(
            "Effect draws must have equal length, got "
            f"{direct.shape}, {mediator.shape}, {treatment_on_mediator.shape}"
        )

    indirect = treatment_on_mediator * mediator
    total = indirect + direct

    ratio = np.full_like(total, np.nan)
    np.divide(indirect, total, out=ratio, where=total != 0)

    return EffectSampleSet(
        direct=direct,
        mediator=mediator,
        indirect=indirect,
        total=total,
        proportion_mediated=ratio,
    )


def _summarize(
    samples: np.ndarray, interval_mass: float, typical: TypicalValue
) -> tuple[float, float, float]:
    low, high = compute_hdi(samples, interval_mass)
    return typical_value(samples, typical), low, high


def proportion_mediated_interval(
    effect_set: EffectSampleSet,
    point_estimate: float,
    interval_mass: float,
) -> tuple[tuple[float, float], list[Diagnostic]]:
    """
    Interval for the proportion mediated.

    Half the width of the HDI of the per-draw ratio ``indirect / total`` is
    used as a symmetric margin around ``point_estimate``. Draws with a zero
    total effect are excluded from the HDI.

    Returns
    -------
    tuple[tuple[float, float], list[Diagnostic]]
        ``(low, high)`` and an :class:`UndefinedRatioWarning` advisory when
        draws were excluded.

    Raises
    ------
    InsufficientSamplesError
        If no draw has a defined ratio.
    """
    ratio = effect_set.proportion_mediated
    defined = np.isfinite(ratio)
    n_undefined = int(np.count_nonzero(~defined))

    diagnostics = []
    if n_undefined:
        if n_undefined == len(ratio):
            raise InsufficientSamplesError(
                "Total effect is zero in every draw; proportion mediated is undefined"
            )
        message = (
            f"{n_undefined} of {len(ratio)} draws have a total effect of zero "
            "and were excluded from the proportion mediated interval"
        )
        logger.warning(message)
        diagnostics.append(Diagnostic(UndefinedRatioWarning, message))

    low, high = compute_hdi(ratio[defined], interval_mass)
    margin = (high - low) / 2
    return (point_estimate - margin, point_estimate + margin), diagnostics


def summarize_effects(
    effect_set: EffectSampleSet,
    interval_mass: float = 0.9,
    typical: TypicalValue | str = TypicalValue.MEDIAN,
) -> tuple[dict[str, tuple[float, float, float]], list[Diagnostic]]:
    """
    Typical values and HDIs of all mediation effects.

    Parameters
    ----------
    effect_set : EffectSampleSet
        Per-draw effects from :func:`combine_effects`.
    interval_mass : float
        Probability mass of the HDIs.
    typical : TypicalValue or str
        ``"median"`` or ``"mean"``.

    Returns
    -------
    tuple[dict, list[Diagnostic]]
        ``(value, hdi_low, hdi_high)`` keyed by effect label, and advisories.

    Notes
    -----
    The proportion mediated is ``typical(indirect) / typical(total)``, not a
    summary of the per-draw ratios, which are unstable when the total effect
    is close to zero.
    """
    typical = TypicalValue(typical)

    summaries = {
        "direct": _summarize(effect_set.direct, interval_mass, typical),
        "indirect": _summarize(effect_set.indirect, interval_mass, typical),
        "mediator": _summarize(effect_set.mediator, interval_mass, typical),
        "total": _summarize(effect_set.total, interval_mass, typical),
    }

    indirect_value = summaries["indirect"][0]
    total_value = summaries["total"][0]
    if total_value == 0:
        logger.warning("Typical total effect is zero; proportion mediated is undefined")
        prop = float("nan")
    else:
        prop = indirect_value / total_value

    (low, high), diagnostics = proportion_mediated_interval(
        effect_set, prop, interval_mass
    )
    summaries["proportion mediated"] = (prop, low, high)

    return summaries, diagnostics


__all__ = [
    "combine_effects",
    "proportion_mediated_interval",
    "summarize_effects",
]
