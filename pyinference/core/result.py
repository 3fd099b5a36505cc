"""
Generic result container for all PyInference computations.

Every interval and test backend returns the same envelope, so timing,
warnings and backend metadata are reported uniformly while each domain
defines its own parameter payload.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (operation kind, df)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True): identical inputs give identical results
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
        params: Domain-specific payload (IntervalParams, TestParams)
        info: Structured metadata (operation kind, sample sizes)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=IntervalParams(lower=1.61, upper=4.39, ...),
        ...     info={'kind': 'z_one_sample'},
        ...     timing={'total_seconds': 0.0001},
        ...     backend_name='cpu_interval'
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
