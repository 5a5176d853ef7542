"""
Result containers for mediation analysis.

These dataclasses hold posterior effect draws, their summaries, and the
advisories collected during a ``mediation()`` call.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import numpy as np
import pandas as pd

EFFECT_LABELS = ("direct", "indirect", "mediator", "total", "proportion mediated")


@dataclass(frozen=True)
class Diagnostic:
    """Non-fatal advisory raised during a computation."""

    category: type[Warning]
    message: str

    def __str__(self) -> str:
        return f"{self.category.__name__}: {self.message}"


@dataclass(frozen=True, eq=False)
class EffectSampleSet:
    """Per-draw direct, mediator, indirect and total effects."""

    direct: np.ndarray
    mediator: np.ndarray
    indirect: np.ndarray
    total: np.ndarray
    proportion_mediated: np.ndarray

    def __len__(self) -> int:
        return len(self.direct)

    def to_dataframe(self) -> pd.DataFrame:
        return pd.DataFrame(
            {
                "direct": self.direct,
                "indirect": self.indirect,
                "mediator": self.mediator,
                "total": self.total,
                "proportion_mediated": self.proportion_mediated,
            }
        )


@dataclass(frozen=True)
class EffectSummaryRow:
    """Point estimate and credible interval of one effect."""

    label: str
    value: float
    hdi_low: float
    hdi_high: float

    @property
    def width(self) -> float:
        return self.hdi_high - self.hdi_low

    def to_dict(self) -> dict[str, Any]:
        return {
            "effect": self.label,
            "value": self.value,
            "hdi_low": self.hdi_low,
            "hdi_high": self.hdi_high,
        }


@dataclass(frozen=True)
class MediationResult:
    """
    Summary of a multivariate-response mediation model.

    Rows are always ordered direct, indirect, mediator, total, proportion
    mediated. ``value`` holds the typical value (median or mean) of the
    posterior draws and ``hdi_low``/``hdi_high`` the HDI bounds.
    """

    rows: tuple[EffectSummaryRow, ...]
    interval_mass: float
    treatment: str
    mediator: str
    response: str
    formulas: tuple[str, ...] = ()
    typical: str = "median"
    diagnostics: tuple[Diagnostic, ...] = ()
    samples: EffectSampleSet | None = field(default=None, repr=False, compare=False)

    def __getitem__(self, label: str) -> EffectSummaryRow:
        for row in self.rows:
            if row.label == label:
                return row
        raise KeyError(label)

    def __iter__(self):
        return iter(self.rows)

    def __len__(self) -> int:
        return len(self.rows)

    @property
    def proportion_mediated(self) -> float:
        return self["proportion mediated"].value

    def has_diagnostic(self, category: type[Warning]) -> bool:
        return any(issubclass(d.category, category) for d in self.diagnostics)

    def to_dataframe(self) -> pd.DataFrame:
        """Tabular form with columns effect, value, hdi_low, hdi_high."""
        df = pd.DataFrame([row.to_dict() for row in self.rows])
        df.attrs.update(
            {
                "interval_mass": self.interval_mass,
                "treatment": self.treatment,
                "mediator": self.mediator,
                "response": self.response,
                "formulas": list(self.formulas),
            }
        )
        return df

    def to_dict(self) -> dict[str, Any]:
        return {
            "effects": [row.to_dict() for row in self.rows],
            "interval_mass": self.interval_mass,
            "treatment": self.treatment,
            "mediator": self.mediator,
            "response": self.response,
            "formulas": list(self.formulas),
            "typical": self.typical,
            "diagnostics": [str(d) for d in self.diagnostics],
        }

    def format(self, digits: int = 2) -> str:
        """Render the summary as a plain-text table."""
        pct = f"{self.interval_mass * 100:g}%"
        lines = [
            "# Causal Mediation Analysis for Bayesian Model",
            "",
            f"  Treatment: {self.treatment}",
            f"   Mediator: {self.mediator}",
            f"   Response: {self.response}",
            "",
        ]

        width = max(len(label) for label in EFFECT_LABELS)
        values = [f"{row.value:.{digits}f}" for row in self.rows]
        value_width = max(len("Estimate"), *(len(v) for v in values))
        lines.append(f"{'':<{width}}  {'Estimate':>{value_width}}  HDI ({pct})")
        for row, value in zip(self.rows, values):
            if row.label == "proportion mediated":
                value = f"{row.value * 100:.{digits}f}%"
                interval = (
                    f"[{row.hdi_low * 100:.{digits}f}% "
                    f"{row.hdi_high * 100:.{digits}f}%]"
                )
            else:
                interval = f"[{row.hdi_low:.{digits}f} {row.hdi_high:.{digits}f}]"
            lines.append(f"{row.label:<{width}}  {value:>{value_width}}  {interval}")
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.format()


def assemble_result(
    effect_set: EffectSampleSet,
    summaries: dict[str, tuple[float, float, float]],
    treatment: str,
    mediator: str,
    response: str,
    interval_mass: float,
    formulas: tuple[str, ...] | list[str] = (),
    typical: str = "median",
    diagnostics: tuple[Diagnostic, ...] | list[Diagnostic] = (),
) -> MediationResult:
    """
    Package effect summaries into a :class:`MediationResult`.

    Parameters
    ----------
    effect_set : EffectSampleSet
        Per-draw effects.
    summaries : dict[str, tuple[float, float, float]]
        ``(value, hdi_low, hdi_high)`` keyed by effect label.
    treatment, mediator, response : str
        Resolved role names and the outcome response.
    interval_mass : float
        Probability mass of the HDIs.
    formulas : sequence of str
        Equation formulas of the model.
    typical : str
        Point estimate statistic.
    diagnostics : sequence of Diagnostic
        Advisories collected during the computation.
    """
    rows = tuple(
        EffectSummaryRow(label, *(float(v) for v in summaries[label]))
        for label in EFFECT_LABELS
    )
    return MediationResult(
        rows=rows,
        interval_mass=float(interval_mass),
        treatment=treatment,
        mediator=mediator,
        response=response,
        formulas=tuple(formulas),
        typical=typical,
        diagnostics=tuple(diagnostics),
        samples=effect_set,
    )


__all__ = [
    "EFFECT_LABELS",
    "Diagnostic",
    "EffectSampleSet",
    "EffectSummaryRow",
    "MediationResult",
    "assemble_result",
]
