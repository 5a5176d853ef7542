"""
Configuration for mediation analysis.

Uses Pydantic for validation of the call options accepted by ``mediation()``.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator


class TypicalValue(str, Enum):
    """Statistic used as the Bayesian point estimate."""

    MEDIAN = "median"
    MEAN = "mean"


class MediationConfig(BaseModel):
    """Options for a single mediation summary.

    Only one credible interval is computed. When ``interval_mass`` is given
    as a sequence, the first value is used and the rest are dropped.
    """

    interval_mass: float = Field(default=0.9, gt=0.0, le=1.0)
    typical: TypicalValue = TypicalValue.MEDIAN
    treatment: str | None = None
    mediator: str | None = None

    model_config = {"extra": "forbid"}

    @field_validator("interval_mass", mode="before")
    @classmethod
    def first_interval_mass(cls, v: Any) -> Any:
        if isinstance(v, Sequence) and not isinstance(v, str):
            if len(v) == 0:
                raise ValueError("interval_mass must not be empty")
            return v[0]
        if hasattr(v, "ndim") and getattr(v, "ndim", 0) > 0:
            # numpy arrays
            return v.flat[0]
        return v

    @field_validator("typical", mode="before")
    @classmethod
    def lower_typical(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().lower()
        return v


__all__ = [
    "TypicalValue",
    "MediationConfig",
]
