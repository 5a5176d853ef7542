"""
Summary of Bayesian multivariate-response mediation models.

``mediation()`` estimates direct, indirect, mediator and total effects of a
treatment with the product-of-coefficients method, using the posterior draws
of a fitted model with a mediator equation and an outcome equation.
"""

from __future__ import annotations

from collections.abc import Sequence

from loguru import logger

from .config import MediationConfig, TypicalValue
from .effects import combine_effects, summarize_effects
from .extractor import extract_path_samples
from .introspection import MediationModel
from .resolver import resolve_roles
from .results import MediationResult, assemble_result


def mediation(
    model: MediationModel,
    treatment: str | None = None,
    mediator: str | None = None,
    interval_mass: float | Sequence[float] = 0.9,
    typical: TypicalValue | str = TypicalValue.MEDIAN,
) -> MediationResult:
    """
    Summarize a multivariate-response mediation model.

    Parameters
    ----------
    model : MediationModel
        Fitted model with (at least) a mediator and an outcome equation,
        e.g. a :class:`~bayes_mediation.adapters.PosteriorModel`.
    treatment : str, optional
        Name of the treatment variable (the direct effect). Detected
        automatically when missing, which may fail.
    mediator : str, optional
        Name of the mediator variable. Detected automatically when missing,
        which may fail.
    interval_mass : float or sequence of float
        Probability mass of the HDIs (default 0.9). Only one interval is
        computed; for a sequence the first value is used.
    typical : {"median", "mean"}
        Statistic used as point estimate (default ``"median"``).

    Returns
    -------
    MediationResult
        Direct, indirect, mediator and total effect and the proportion
        mediated, each with its HDI.

    Notes
    -----
    - *direct effect*: treatment coefficient of the outcome equation.
    - *mediator effect*: mediator coefficient of the outcome equation.
    - *indirect effect*: product of the treatment coefficient of the mediator
      equation and the mediator effect, per draw.
    - *total effect*: direct + indirect, per draw.
    - *proportion mediated*: indirect / total of the typical values. Its
      interval is the point estimate plus/minus half the HDI width of the
      per-draw ratios.

    Examples
    --------
    >>> result = mediation(model, treatment="treat", mediator="job_seek")
    >>> result["indirect"].hdi_low, result["indirect"].hdi_high
    >>> print(result)
    """
    config = MediationConfig(
        interval_mass=interval_mass,
        typical=typical,
        treatment=treatment,
        mediator=mediator,
    )

    roles = resolve_roles(model, treatment=config.treatment, mediator=config.mediator)
    equations = model.equations()
    outcome_eq = equations[roles.outcome_equation_index]
    logger.debug(
        f"Mediation of '{roles.treatment}' via '{roles.mediator}' "
        f"on '{outcome_eq.response}'"
    )

    paths, diagnostics = extract_path_samples(model, roles)
    effect_set = combine_effects(
        direct=paths.direct,
        mediator=paths.mediator,
        treatment_on_mediator=paths.treatment_on_mediator,
    )
    summaries, interval_diagnostics = summarize_effects(
        effect_set, config.interval_mass, config.typical
    )

    return assemble_result(
        effect_set,
        summaries,
        treatment=roles.treatment,
        mediator=roles.mediator,
        response=outcome_eq.response,
        interval_mass=config.interval_mass,
        formulas=[eq.formula for eq in equations],
        typical=config.typical.value,
        diagnostics=[*diagnostics, *interval_diagnostics],
    )


__all__ = [
    "mediation",
]
