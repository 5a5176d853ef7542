"""
Adapters exposing fitted models through the introspection protocol.

:class:`PosteriorModel` wraps an ArviZ ``InferenceData`` (or any mapping of
coefficient names to draws) together with the model's equations and
training data.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

import arviz as az
import numpy as np
import pandas as pd
from loguru import logger

from .introspection import Equation


def _flatten_samples(data: Any) -> np.ndarray:
    """Flatten chain and draw dimensions of a scalar parameter into one vector."""
    if hasattr(data, "values"):
        arr = data.values
    else:
        arr = np.asarray(data)
    return np.asarray(arr, dtype=float).reshape(-1)


def _get_posterior(posterior: Any) -> Any:
    """Return the posterior group of an InferenceData, or the object itself."""
    if isinstance(posterior, az.InferenceData):
        if "posterior" not in posterior.groups():
            raise ValueError("InferenceData has no posterior group")
        return posterior.posterior
    if hasattr(posterior, "posterior"):
        return posterior.posterior
    return posterior


class PosteriorModel:
    """
    Multivariate model backed by stored posterior draws.

    Parameters
    ----------
    posterior : az.InferenceData or Mapping[str, array-like]
        Posterior draws. For ``InferenceData`` the ``posterior`` group is
        used; every coefficient must be a scalar parameter with
        ``(chain, draw)`` dimensions.
    equations : Iterable[Equation]
        Response equations in model order.
    data : pd.DataFrame, optional
        Training data, used to look up categorical levels.

    Examples
    --------
    >>> model = PosteriorModel.from_formulas(
    ...     idata,
    ...     ["job_seek ~ treat + econ_hard", "depress2 ~ treat + job_seek"],
    ...     data=jobs,
    ... )
    >>> model.equations()[0].label
    'jobseek'
    """

    def __init__(
        self,
        posterior: Any,
        equations: Iterable[Equation],
        data: pd.DataFrame | None = None,
    ):
        self._posterior = _get_posterior(posterior)
        self._equations = list(equations)
        self._data = data

        if not self._equations:
            raise ValueError("At least one equation is required")

    @classmethod
    def from_formulas(
        cls,
        posterior: Any,
        formulas: Iterable[str],
        data: pd.DataFrame | None = None,
        families: Mapping[str, str] | None = None,
    ) -> PosteriorModel:
        """
        Build a model from formula strings.

        Parameters
        ----------
        posterior : az.InferenceData or Mapping[str, array-like]
            Posterior draws.
        formulas : Iterable[str]
            One formula per response, e.g. ``"m ~ x + c"``.
        data : pd.DataFrame, optional
            Training data.
        families : Mapping[str, str], optional
            Response family by response name. Responses not listed are
            treated as gaussian.
        """
        families = dict(families or {})
        equations = []
        for formula in formulas:
            response = formula.split("~", 1)[0].strip()
            equations.append(
                Equation.from_formula(
                    formula, family=families.get(response, "gaussian")
                )
            )
        return cls(posterior, equations, data=data)

    def equations(self) -> list[Equation]:
        return list(self._equations)

    def is_binary(self, response: str) -> bool:
        for eq in self._equations:
            if eq.response == response:
                return eq.is_binary
        raise KeyError(f"Unknown response '{response}'")

    def raw_data(self) -> pd.DataFrame | None:
        return self._data

    def coefficient_names(self) -> list[str]:
        """Names of all variables in the posterior store."""
        if hasattr(self._posterior, "data_vars"):
            return [str(name) for name in self._posterior.data_vars]
        return [str(name) for name in self._posterior.keys()]

    def has_coefficient(self, key: str) -> bool:
        if hasattr(self._posterior, "data_vars"):
            return key in self._posterior.data_vars
        return key in self._posterior

    def posterior_samples(self, key: str) -> np.ndarray:
        if not self.has_coefficient(key):
            raise KeyError(key)
        samples = _flatten_samples(self._posterior[key])
        logger.debug(f"Extracted {len(samples)} draws for {key}")
        return samples

    def __repr__(self) -> str:
        forms = "; ".join(eq.formula for eq in self._equations)
        return f"{type(self).__name__}({forms})"


__all__ = [
    "PosteriorModel",
]
