"""
Host boundary for embedding callers.

Callers that exchange loosely typed values (JSON payloads, values coming
from another runtime) use these functions instead of the typed solvers.
Inputs are filtered to numeric vectors once, here; outputs are plain
tuples and dicts:

    interval operations  -> (lower, upper), or None on any input failure
    test operations      -> {"t": 4.24, "p": 0.0132}, or {"error": message}

Every PyInferenceError raised by the core is converted at this boundary
and nowhere else.
"""

from __future__ import annotations

import math
import numbers
from typing import Any, Callable

import numpy as np
from numpy.typing import NDArray

from pyinference.core.exceptions import PyInferenceError, ValidationError
from pyinference.core.validation import check_real
from pyinference.interval import (
    one_samp_z_interval as _one_samp_z_interval,
    two_samp_z_interval as _two_samp_z_interval,
    one_samp_t_interval as _one_samp_t_interval,
    two_samp_t_interval as _two_samp_t_interval,
    two_samp_var_interval as _two_samp_var_interval,
)
from pyinference.interval._common import DEFAULT_ALPHA
from pyinference.hypothesis import (
    one_samp_z_test as _one_samp_z_test,
    one_samp_t_test as _one_samp_t_test,
    two_samp_t_test as _two_samp_t_test,
    matched_pairs_t_test as _matched_pairs_t_test,
    variance_test as _variance_test,
    anova_1way_test as _anova_1way_test,
    regression_test as _regression_test,
)
from pyinference.hypothesis.solution import TestSolution


# --- Conversion ---

def _is_number(value: Any) -> bool:
    # bool is an Integral subclass but never a measurement
    return isinstance(value, numbers.Real) and not isinstance(value, (bool, np.bool_))


def _as_list(values: Any) -> list[Any] | None:
    if isinstance(values, np.ndarray):
        return values.ravel().tolist()
    if isinstance(values, (str, bytes)) or not isinstance(values, (list, tuple)):
        return None
    return list(values)


def to_vector(values: Any) -> NDArray[np.float64]:
    """
    Convert a host array to a float64 vector.

    Non-numeric entries (strings, None, booleans, complex numbers, nested
    arrays) are dropped. Anything that is not a sequence yields an empty
    vector.
    """
    if isinstance(values, np.ndarray) and (
        np.issubdtype(values.dtype, np.integer)
        or np.issubdtype(values.dtype, np.floating)
    ):
        return values.astype(np.float64).ravel()
    items = _as_list(values)
    if items is None:
        return np.empty(0, dtype=np.float64)
    return np.array([float(v) for v in items if _is_number(v)], dtype=np.float64)


def to_paired_vectors(
    values1: Any,
    values2: Any,
) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    """
    Convert two host arrays of paired observations to float64 vectors.

    Position i is kept only when both entries are numbers, so a missing
    value drops its whole pair. Arrays of different lengths are filtered
    one by one and left for the length check to reject.
    """
    first = _as_list(values1)
    second = _as_list(values2)
    if first is None or second is None or len(first) != len(second):
        return to_vector(values1), to_vector(values2)
    pairs = [
        (float(a), float(b)) for a, b in zip(first, second)
        if _is_number(a) and _is_number(b)
    ]
    x = np.array([a for a, _ in pairs], dtype=np.float64)
    y = np.array([b for _, b in pairs], dtype=np.float64)
    return x, y


def to_nested_vectors(values: Any) -> list[NDArray[np.float64]]:
    """Convert a host array of arrays to a list of float64 vectors."""
    if isinstance(values, np.ndarray) and values.ndim == 2:
        return [to_vector(row) for row in values]
    if isinstance(values, (str, bytes)) or not isinstance(values, (list, tuple)):
        return []
    return [to_vector(v) for v in values]


def parse_alpha(value: Any) -> float:
    """Significance level, defaulting to 0.05 when absent or unparseable."""
    if _is_number(value):
        alpha = float(value)
    elif isinstance(value, str):
        try:
            alpha = float(value)
        except ValueError:
            return DEFAULT_ALPHA
    else:
        return DEFAULT_ALPHA
    return DEFAULT_ALPHA if math.isnan(alpha) else alpha


def _parse_real(value: Any, name: str) -> float:
    if value is None:
        return 0.0
    if not _is_number(value):
        raise ValidationError(f"{name}: expected a number, got {value!r}")
    return check_real(value, name)


# --- Output shapes ---

def _interval(solve: Callable[[], Any]) -> tuple[float, float] | None:
    try:
        return solve().bounds
    except PyInferenceError:
        return None


def _test(solve: Callable[[], TestSolution]) -> dict[str, Any]:
    try:
        solution = solve()
    except PyInferenceError as e:
        return {"error": str(e)}
    out: dict[str, Any] = {
        solution.statistic_name.lower(): solution.statistic,
        "p": solution.p_value,
    }
    if solution.extras and "s1" in solution.extras:
        for key in ("n1", "n2", "s1", "s2"):
            out[key] = solution.extras[key]
    return out


# --- Confidence intervals ---

def one_samp_z_interval(column: Any, alpha: Any = None) -> tuple[float, float] | None:
    return _interval(lambda: _one_samp_z_interval(
        to_vector(column), parse_alpha(alpha),
    ))


def two_samp_z_interval(column1: Any, column2: Any, alpha: Any = None) -> tuple[float, float] | None:
    return _interval(lambda: _two_samp_z_interval(
        to_vector(column1), to_vector(column2), parse_alpha(alpha),
    ))


def one_samp_t_interval(column: Any, alpha: Any = None) -> tuple[float, float] | None:
    return _interval(lambda: _one_samp_t_interval(
        to_vector(column), parse_alpha(alpha),
    ))


def two_samp_t_interval(column1: Any, column2: Any, alpha: Any = None) -> tuple[float, float] | None:
    return _interval(lambda: _two_samp_t_interval(
        to_vector(column1), to_vector(column2), parse_alpha(alpha),
    ))


def two_samp_var_interval(column1: Any, column2: Any, alpha: Any = None) -> tuple[float, float] | None:
    return _interval(lambda: _two_samp_var_interval(
        to_vector(column1), to_vector(column2), parse_alpha(alpha),
    ))


# --- Hypothesis tests ---

def one_samp_z_test(column: Any, tails: Any, mu0: Any = None) -> dict[str, Any]:
    return _test(lambda: _one_samp_z_test(
        to_vector(column), tails, _parse_real(mu0, "mu0"),
    ))


def one_samp_t_test(column: Any, tails: Any, mu0: Any = None) -> dict[str, Any]:
    return _test(lambda: _one_samp_t_test(
        to_vector(column), tails, _parse_real(mu0, "mu0"),
    ))


def two_samp_t_test(column1: Any, column2: Any, delta0: Any, tails: Any) -> dict[str, Any]:
    return _test(lambda: _two_samp_t_test(
        to_vector(column1), to_vector(column2),
        _parse_real(delta0, "delta0"), tails,
    ))


def matched_pairs_t_test(column1: Any, column2: Any, delta0: Any, tails: Any) -> dict[str, Any]:
    x, y = to_paired_vectors(column1, column2)
    return _test(lambda: _matched_pairs_t_test(
        x, y, _parse_real(delta0, "delta0"), tails,
    ))


def variance_test(column1: Any, column2: Any, tails: Any) -> dict[str, Any]:
    return _test(lambda: _variance_test(
        to_vector(column1), to_vector(column2), tails,
    ))


def anova_1way_test(data: Any) -> dict[str, Any]:
    return _test(lambda: _anova_1way_test(to_nested_vectors(data)))


def regression_test(x: Any, y: Any) -> dict[str, Any]:
    return _test(lambda: _regression_test(to_vector(x), to_vector(y)))
