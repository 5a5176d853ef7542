"""
Bayesian Mediation Summaries

Convenience statistics for fitted multivariate-response Bayesian models:
product-of-coefficients mediation effects with highest density intervals,
computed from posterior draws.
"""

from .config import MediationConfig, TypicalValue

from .exceptions import (
    # Errors
    MediationError,
    UnsupportedModelShapeError,
    RoleResolutionError,
    AmbiguousRoleError,
    CoefficientNotFoundError,
    InsufficientSamplesError,
    # Advisories
    UndefinedRatioWarning,
    BinaryResponseAdvisory,
)

from .introspection import (
    Equation,
    MediationModel,
    coefficient_key,
    response_label,
)

from .adapters import PosteriorModel

from .resolver import ResolvedRoles, fix_factor_name, resolve_roles

from .extractor import PathSamples, extract_path_samples

from .stats import compute_hdi, typical_value

from .effects import (
    combine_effects,
    proportion_mediated_interval,
    summarize_effects,
)

from .results import (
    Diagnostic,
    EffectSampleSet,
    EffectSummaryRow,
    MediationResult,
    assemble_result,
)

from .summary import mediation

__version__ = "0.1.0"

__all__ = [
    # Entry point
    "mediation",
    # Configuration
    "MediationConfig",
    "TypicalValue",
    # Errors and advisories
    "MediationError",
    "UnsupportedModelShapeError",
    "RoleResolutionError",
    "AmbiguousRoleError",
    "CoefficientNotFoundError",
    "InsufficientSamplesError",
    "UndefinedRatioWarning",
    "BinaryResponseAdvisory",
    # Model introspection
    "Equation",
    "MediationModel",
    "PosteriorModel",
    "coefficient_key",
    "response_label",
    # Pipeline steps
    "ResolvedRoles",
    "resolve_roles",
    "fix_factor_name",
    "PathSamples",
    "extract_path_samples",
    "combine_effects",
    "summarize_effects",
    "proportion_mediated_interval",
    "assemble_result",
    # Statistics
    "compute_hdi",
    "typical_value",
    # Results
    "Diagnostic",
    "EffectSampleSet",
    "EffectSummaryRow",
    "MediationResult",
]
