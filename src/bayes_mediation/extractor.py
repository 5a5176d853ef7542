"""
Extraction of mediation path coefficients from posterior draws.
"""

from __future__ import annotations

from typing import NamedTuple

import numpy as np
from loguru import logger

from .exceptions import (
    BinaryResponseAdvisory,
    CoefficientNotFoundError,
    InsufficientSamplesError,
)
from .introspection import MediationModel, coefficient_key
from .resolver import ResolvedRoles
from .results import Diagnostic

BINARY_ADVISORY = (
    "One of mediator or outcome is binary, so direct and indirect effects "
    "may be on different scales. Consider standardizing the model predictors."
)


class PathSamples(NamedTuple):
    """Posterior draws of the three mediation path coefficients."""

    direct: np.ndarray
    mediator: np.ndarray
    treatment_on_mediator: np.ndarray


def binary_response_diagnostics(model: MediationModel) -> list[Diagnostic]:
    """Advisory for models with a binary mediator or outcome, at most once."""
    if any(model.is_binary(eq.response) for eq in model.equations()):
        logger.info(BINARY_ADVISORY)
        return [Diagnostic(BinaryResponseAdvisory, BINARY_ADVISORY)]
    return []


def _get_samples(model: MediationModel, key: str) -> np.ndarray:
    if not model.has_coefficient(key):
        available = getattr(model, "coefficient_names", None)
        raise CoefficientNotFoundError(
            key, available() if callable(available) else None
        )
    return np.asarray(model.posterior_samples(key), dtype=float).reshape(-1)


def extract_path_samples(
    model: MediationModel,
    roles: ResolvedRoles,
) -> tuple[PathSamples, list[Diagnostic]]:
    """
    Pull posterior draws for the direct, mediator and treatment->mediator paths.

    Parameters
    ----------
    model : MediationModel
        Fitted multivariate model.
    roles : ResolvedRoles
        Resolved treatment/mediator and equation indices.

    Returns
    -------
    tuple[PathSamples, list[Diagnostic]]
        The draws and any advisories raised while extracting them.

    Raises
    ------
    CoefficientNotFoundError
        If one of the coefficients is not in the posterior store.
    InsufficientSamplesError
        If the draw vectors are empty or of different lengths.
    """
    equations = model.equations()
    outcome_eq = equations[roles.outcome_equation_index]
    mediator_eq = equations[roles.mediator_equation_index]

    diagnostics = binary_response_diagnostics(model)

    direct_key = coefficient_key(outcome_eq, roles.treatment)
    mediator_key = coefficient_key(outcome_eq, roles.mediator)
    indirect_key = coefficient_key(mediator_eq, roles.treatment)
    logger.debug(
        f"Mediation coefficients: direct={direct_key}, "
        f"mediator={mediator_key}, treatment->mediator={indirect_key}"
    )

    samples = PathSamples(
        direct=_get_samples(model, direct_key),
        mediator=_get_samples(model, mediator_key),
        treatment_on_mediator=_get_samples(model, indirect_key),
    )

    lengths = {len(s) for s in samples}
    if len(lengths) != 1:
        raise InsufficientSamplesError(
            f"Posterior draws differ in length across coefficients: {sorted(lengths)}"
        )
    if 0 in lengths:
        raise InsufficientSamplesError("Posterior contains no draws")

    return samples, diagnostics


__all__ = [
    "BINARY_ADVISORY",
    "PathSamples",
    "binary_response_diagnostics",
    "extract_path_samples",
]
