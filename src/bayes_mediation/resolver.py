"""
Treatment and mediator resolution for multivariate mediation models.

Determines which equation models the mediator and which the outcome, and
which predictor is the treatment, either from explicit names or by matching
the equations' predictors against the model's responses.
"""

from __future__ import annotations

from dataclasses import dataclass

import pandas as pd
from loguru import logger

from .exceptions import (
    AmbiguousRoleError,
    RoleResolutionError,
    UnsupportedModelShapeError,
)
from .introspection import Equation, MediationModel


@dataclass(frozen=True)
class ResolvedRoles:
    """Treatment/mediator names and the equations they belong to."""

    treatment: str
    mediator: str
    outcome_equation_index: int
    mediator_equation_index: int

    def __post_init__(self) -> None:
        if self.outcome_equation_index == self.mediator_equation_index:
            raise ValueError("Outcome and mediator equations must differ")
        if min(self.outcome_equation_index, self.mediator_equation_index) < 0:
            raise ValueError("Equation indices must be non-negative")


def fix_factor_name(data: pd.DataFrame | None, variable: str) -> str:
    """
    Append the encoded level to a categorical variable name.

    Coefficients of categorical predictors are stored per level, e.g.
    ``"treathigh"`` for factor ``treat``. The last level is used, matching
    the highest-ranked indicator coefficient.

    Parameters
    ----------
    data : pd.DataFrame or None
        Training data of the model.
    variable : str
        Variable name as it appears in the formula.

    Returns
    -------
    str
        ``variable`` with its highest level appended for categorical columns,
        ``variable + "TRUE"`` for boolean columns, otherwise unchanged.
    """
    if data is None or variable not in getattr(data, "columns", ()):
        return variable

    column = data[variable]
    if isinstance(column.dtype, pd.CategoricalDtype):
        levels = column.cat.categories
        if len(levels) > 0:
            return f"{variable}{levels[-1]}"
    elif pd.api.types.is_bool_dtype(column):
        return f"{variable}TRUE"
    elif pd.api.types.infer_dtype(column, skipna=True) == "boolean":
        # booleans with missing values are stored as object
        return f"{variable}TRUE"
    elif pd.api.types.is_object_dtype(column) or pd.api.types.is_string_dtype(
        column
    ):
        levels = sorted(str(v) for v in column.dropna().unique())
        if levels:
            return f"{variable}{levels[-1]}"
    return variable


def _unique(names) -> list[str]:
    seen: list[str] = []
    for name in names:
        if name not in seen:
            seen.append(name)
    return seen


def _detect_mediator(equations: list[Equation], responses: list[str]) -> str:
    predictors = _unique(p for eq in equations for p in eq.predictors)
    candidates = [p for p in predictors if p in responses]
    if len(candidates) != 1:
        raise AmbiguousRoleError("mediator", candidates)
    return candidates[0]


def _outcome_index(
    equations: list[Equation], mediator: str, mediator_index: int
) -> int:
    others = [i for i in range(len(equations)) if i != mediator_index]
    using_mediator = [i for i in others if mediator in equations[i].predictors]
    if len(using_mediator) == 1:
        return using_mediator[0]
    if not using_mediator and len(others) == 1:
        return others[0]
    responses = [equations[i].response for i in (using_mediator or others)]
    raise AmbiguousRoleError("outcome", responses)


def _detect_treatment(mediator_eq: Equation, outcome_eq: Equation) -> str:
    shared = [p for p in mediator_eq.predictors if p in outcome_eq.predictors]
    if not shared:
        raise AmbiguousRoleError("treatment")
    return shared[0]


def resolve_roles(
    model: MediationModel,
    treatment: str | None = None,
    mediator: str | None = None,
) -> ResolvedRoles:
    """
    Resolve treatment, mediator, and the equations they belong to.

    Parameters
    ----------
    model : MediationModel
        Fitted multivariate model.
    treatment : str, optional
        Treatment variable. Detected automatically when missing, as the
        first mediator-equation predictor that also enters the outcome
        equation.
    mediator : str, optional
        Mediator variable. Detected automatically when missing, as the single
        predictor that is also a response of the model.

    Returns
    -------
    ResolvedRoles

    Raises
    ------
    UnsupportedModelShapeError
        If the model has fewer than two responses.
    AmbiguousRoleError
        If a role cannot be detected uniquely.
    RoleResolutionError
        If an explicit mediator is not a response of the model.

    Notes
    -----
    Automatically detected names are adjusted for categorical and boolean
    variables (see :func:`fix_factor_name`). Explicit names are used as given.
    """
    equations = model.equations()
    responses = [eq.response for eq in equations]

    if len(set(responses)) < 2:
        raise UnsupportedModelShapeError(
            "Mediation analysis requires a multivariate-response model with "
            f"a mediator and an outcome equation, got responses {responses}"
        )

    auto_mediator = mediator is None
    if auto_mediator:
        mediator = _detect_mediator(equations, responses)
        logger.debug(f"Detected mediator '{mediator}'")
    elif mediator not in responses:
        raise RoleResolutionError(
            f"Mediator '{mediator}' is not a response of the model "
            f"(responses: {responses})"
        )

    mediator_index = responses.index(mediator)
    outcome_index = _outcome_index(equations, mediator, mediator_index)

    data = model.raw_data()

    if treatment is None:
        treatment = _detect_treatment(
            equations[mediator_index], equations[outcome_index]
        )
        treatment = fix_factor_name(data, treatment)
        logger.debug(f"Detected treatment '{treatment}'")

    if auto_mediator:
        mediator = fix_factor_name(data, mediator)

    return ResolvedRoles(
        treatment=treatment,
        mediator=mediator,
        outcome_equation_index=outcome_index,
        mediator_equation_index=mediator_index,
    )


__all__ = [
    "ResolvedRoles",
    "fix_factor_name",
    "resolve_roles",
]
