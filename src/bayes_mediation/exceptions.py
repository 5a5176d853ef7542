"""
Exceptions and advisory categories for mediation analysis.

Fatal conditions derive from :class:`MediationError` and abort the call.
Advisories are ``UserWarning`` subclasses that are never raised; they are
recorded as :class:`~bayes_mediation.results.Diagnostic` entries on the result.
"""

from __future__ import annotations


class MediationError(Exception):
    """Base class for all mediation analysis errors."""


class UnsupportedModelShapeError(MediationError, ValueError):
    """Model does not have at least a mediator and an outcome equation."""


class RoleResolutionError(MediationError, ValueError):
    """Treatment or mediator could not be matched to the model."""


class AmbiguousRoleError(RoleResolutionError):
    """Automatic detection found zero or several candidates for a role."""

    def __init__(self, role: str, candidates: list[str] | None = None):
        self.role = role
        self.candidates = list(candidates or [])
        if self.candidates:
            found = f"found {len(self.candidates)} candidates {self.candidates}"
        else:
            found = "found no candidate"
        super().__init__(
            f"Could not detect the {role} variable automatically ({found}). "
            f"Please specify `{role}` explicitly."
        )


class CoefficientNotFoundError(MediationError, KeyError):
    """A required coefficient is missing from the posterior store."""

    def __init__(self, key: str, available: list[str] | None = None):
        self.key = key
        self.available = list(available or [])
        super().__init__(key)

    def __str__(self) -> str:
        msg = f"Coefficient '{self.key}' not found in posterior samples"
        if self.available:
            msg += f" (available: {', '.join(self.available)})"
        return msg


class InsufficientSamplesError(MediationError, ValueError):
    """Not enough usable posterior draws to compute an interval."""


class UndefinedRatioWarning(UserWarning):
    """Some draws have a total effect of zero, so their ratio is undefined."""


class BinaryResponseAdvisory(UserWarning):
    """A response is binary; effects may be on different link scales."""


__all__ = [
    "MediationError",
    "UnsupportedModelShapeError",
    "RoleResolutionError",
    "AmbiguousRoleError",
    "CoefficientNotFoundError",
    "InsufficientSamplesError",
    "UndefinedRatioWarning",
    "BinaryResponseAdvisory",
]
