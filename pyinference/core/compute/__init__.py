"""
Shared compute infrastructure for PyInference.

Domain-specific backends live in {domain}/backends/. This module holds
only infrastructure shared by all of them.

Submodules:
    timing: Execution timing utilities
"""

from pyinference.core.compute.timing import Timer

__all__ = [
    "Timer",
]
