"""
Model introspection contract for multivariate-response mediation models.

Defines the structural protocol the mediation routines are written against,
the :class:`Equation` description of one sub-model, and the naming convention
used to look up coefficients in a posterior sample store.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

import numpy as np

BINARY_FAMILIES = frozenset({"bernoulli", "binomial"})

_IDENTIFIER = re.compile(r"(?<![A-Za-z0-9._])[A-Za-z.][A-Za-z0-9._]*")
_CALL = re.compile(r"([A-Za-z.][A-Za-z0-9._]*)\s*\(")
_KEYWORD = re.compile(r"\s*=(?!=)")


def response_label(response: str) -> str:
    """Return the response name as it appears in coefficient names.

    brms drops underscores and dots from response names when it labels
    estimates, so ``"job_seek"`` becomes ``"jobseek"``.
    """
    return response.replace("_", "").replace(".", "")


def _formula_variables(rhs: str) -> tuple[str, ...]:
    """Ordered, unique variable names on the right-hand side of a formula."""
    # Function names such as log(x) or I(x^2) are not variables
    calls = {m.group(1) for m in _CALL.finditer(rhs)}
    names: list[str] = []
    for match in _IDENTIFIER.finditer(rhs):
        token = match.group(0)
        if token in calls or token in names:
            continue
        # keyword arguments such as s(x, k = 5)
        if _KEYWORD.match(rhs, match.end()):
            continue
        if re.fullmatch(r"\.+\d*", token):
            continue
        names.append(token)
    return tuple(names)


@dataclass(frozen=True)
class Equation:
    """One response equation of a multivariate model."""

    response: str
    predictors: tuple[str, ...]
    family: str = "gaussian"
    link: str = "identity"
    formula: str | None = None
    label: str = field(default="")

    def __post_init__(self) -> None:
        object.__setattr__(self, "predictors", tuple(self.predictors))
        object.__setattr__(self, "family", self.family.lower())
        if not self.label:
            object.__setattr__(self, "label", response_label(self.response))
        if self.formula is None:
            rhs = " + ".join(self.predictors) if self.predictors else "1"
            object.__setattr__(self, "formula", f"{self.response} ~ {rhs}")

    @classmethod
    def from_formula(
        cls,
        formula: str,
        family: str = "gaussian",
        link: str | None = None,
        label: str | None = None,
    ) -> Equation:
        """
        Build an equation from an R-style formula string.

        Parameters
        ----------
        formula : str
            Formula such as ``"job_seek ~ treat + econ_hard + sex"``.
        family : str
            Response family, e.g. ``"gaussian"`` or ``"bernoulli"``.
        link : str, optional
            Link function. Defaults to ``"logit"`` for binary families and
            ``"identity"`` otherwise.
        label : str, optional
            Response label used in coefficient names.

        Returns
        -------
        Equation

        Examples
        --------
        >>> eq = Equation.from_formula("m ~ x + log(z) + x:w")
        >>> eq.predictors
        ('x', 'z', 'w')
        """
        if "~" not in formula:
            raise ValueError(f"Formula has no '~': {formula!r}")
        lhs, rhs = formula.split("~", 1)
        response = lhs.strip()
        if not response:
            raise ValueError(f"Formula has no response: {formula!r}")
        if link is None:
            link = "logit" if family.lower() in BINARY_FAMILIES else "identity"
        return cls(
            response=response,
            predictors=_formula_variables(rhs),
            family=family,
            link=link,
            formula=" ".join(formula.split()),
            label=label or "",
        )

    @property
    def is_binary(self) -> bool:
        return self.family in BINARY_FAMILIES


def coefficient_key(equation: Equation, predictor: str) -> str:
    """Name of the population-level coefficient of ``predictor`` in ``equation``."""
    return f"b_{equation.label}_{predictor}"


@runtime_checkable
class MediationModel(Protocol):
    """Protocol for fitted multivariate models usable by ``mediation()``."""

    def equations(self) -> list[Equation]: ...

    def is_binary(self, response: str) -> bool: ...

    def raw_data(self) -> Any: ...

    def posterior_samples(self, key: str) -> np.ndarray: ...

    def has_coefficient(self, key: str) -> bool: ...


__all__ = [
    "BINARY_FAMILIES",
    "Equation",
    "MediationModel",
    "coefficient_key",
    "response_label",
]
