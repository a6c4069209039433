"""
Generic result container for all trialstats computations.

Every solver that returns a Solution object builds one of these envelopes
around its domain payload. Shared tooling (timing, warnings, summaries)
reads the envelope without knowing the payload type.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (method label, counts, grid sizes)
    - timing is optional (don't burden unit tests)
    - warnings hold non-fatal statistical caveats (undefined rates,
      zero-event arms) so that degenerate data never raises
    - Immutable (frozen=True); results are snapshots of one computation
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for statistical computations.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific estimates (curves, ratios, counts)
        info: Structured metadata (method, sample sizes, grid settings)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the routine that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=KMParams(...),
        ...     info={'method': 'Kaplan-Meier'},
        ...     timing={'total_seconds': 0.001},
        ...     backend_name='cpu_km',
        ... )

        >>> Result(
        ...     params=ROCParams(...),
        ...     info={'method': 'ROC', 'n_positive': 0},
        ...     timing=None,
        ...     backend_name='cpu_roc',
        ...     warnings=('no positive cases: TPR is undefined',),
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
