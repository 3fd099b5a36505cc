"""
HypothesisDesign: tagged union for hypothesis test inputs.

Uses factory classmethods per test type. The `test_type` field identifies
which fields are populated. Immutable after construction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence
import numpy as np
from numpy.typing import NDArray, ArrayLike

from pyinference.core.exceptions import ValidationError, DimensionError
from pyinference.core.validation import (
    check_sample,
    check_real,
    check_consistent_length,
)
from pyinference.hypothesis._common import TailMode


@dataclass(frozen=True)
class HypothesisDesign:
    """
    Design for hypothesis tests.

    Uses a tagged-union approach: the `test_type` field identifies which
    fields are populated. Factory classmethods validate inputs.

    Do not construct directly; use factory classmethods.
    """
    test_type: str

    # Numeric vectors
    _x: NDArray[np.floating[Any]] | None = None
    _y: NDArray[np.floating[Any]] | None = None

    # Grouped sample (ANOVA)
    _groups: tuple[NDArray[np.floating[Any]], ...] | None = None

    # Test configuration
    _mu: float = 0.0
    _tail: TailMode = TailMode.TWO_SIDED

    # Metadata
    _data_name: str = ""

    # --- Properties ---

    @property
    def x(self) -> NDArray[np.floating[Any]] | None:
        return self._x

    @property
    def y(self) -> NDArray[np.floating[Any]] | None:
        return self._y

    @property
    def groups(self) -> tuple[NDArray[np.floating[Any]], ...] | None:
        return self._groups

    @property
    def mu(self) -> float:
        """Hypothesized mean (mu0) or difference in means (delta0)."""
        return self._mu

    @property
    def tail(self) -> TailMode:
        return self._tail

    @property
    def data_name(self) -> str:
        return self._data_name

    # --- Factory classmethods ---

    @classmethod
    def for_z_test(
        cls,
        x: ArrayLike,
        *,
        tails: TailMode | str = TailMode.TWO_SIDED,
        mu0: float = 0.0,
    ) -> HypothesisDesign:
        """Build design for one_samp_z_test()."""
        tail = TailMode.parse(tails)
        mu0 = check_real(mu0, "mu0")
        x_arr = check_sample(x, "x")
        return cls(
            test_type="z_one_sample",
            _x=x_arr,
            _mu=mu0,
            _tail=tail,
            _data_name="x",
        )

    @classmethod
    def for_t_test(
        cls,
        x: ArrayLike,
        y: ArrayLike | None = None,
        *,
        tails: TailMode | str = TailMode.TWO_SIDED,
        mu: float = 0.0,
        paired: bool = False,
    ) -> HypothesisDesign:
        """
        Build design for the t-test family.

        Parameters
        ----------
        x : array-like
            First (or only) sample.
        y : array-like or None
            Second sample. None for the one-sample test.
        tails : TailMode or str
            "two-sided" (default), "less", or "greater".
        mu : float
            mu0 for the one-sample test, delta0 otherwise.
        paired : bool
            If True, test the element-wise differences x - y; x and y
            must have equal lengths.
        """
        tail = TailMode.parse(tails)
        mu = check_real(mu, "delta0" if y is not None else "mu0")

        if y is None:
            if paired:
                raise ValidationError("y is required for a paired t-test")
            return cls(
                test_type="t_one_sample",
                _x=check_sample(x, "x"),
                _mu=mu,
                _tail=tail,
                _data_name="x",
            )

        if paired:
            x_arr = check_sample(x, "x")
            y_arr = check_sample(y, "y")
            check_consistent_length(x_arr, y_arr, names=("x", "y"))
            return cls(
                test_type="t_paired",
                _x=x_arr - y_arr,
                _mu=mu,
                _tail=tail,
                _data_name="x and y",
            )

        return cls(
            test_type="t_two_sample",
            _x=check_sample(x, "x"),
            _y=check_sample(y, "y"),
            _mu=mu,
            _tail=tail,
            _data_name="x and y",
        )

    @classmethod
    def for_var_test(
        cls,
        x: ArrayLike,
        y: ArrayLike,
        *,
        tails: TailMode | str = TailMode.TWO_SIDED,
    ) -> HypothesisDesign:
        """Build design for variance_test()."""
        tail = TailMode.parse(tails)
        return cls(
            test_type="var_test",
            _x=check_sample(x, "x"),
            _y=check_sample(y, "y"),
            _tail=tail,
            _data_name="x and y",
        )

    @classmethod
    def for_anova_oneway(
        cls,
        groups: Sequence[ArrayLike],
    ) -> HypothesisDesign:
        """
        Build design for anova_1way_test().

        Parameters
        ----------
        groups : sequence of array-like
            At least 2 groups, all of the same size (at least 2 each).
        """
        if isinstance(groups, (str, bytes)) or not hasattr(groups, '__len__'):
            raise ValidationError(
                f"groups: expected a sequence of samples, got {type(groups).__name__}"
            )
        if isinstance(groups, np.ndarray) and groups.ndim == 2:
            groups = list(groups)
        if len(groups) < 2:
            raise ValidationError(
                f"groups: need at least 2 groups, got {len(groups)}"
            )

        arrays = tuple(
            check_sample(g, f"groups[{i}]") for i, g in enumerate(groups)
        )
        sizes = {len(a) for a in arrays}
        if len(sizes) > 1:
            details = ", ".join(
                f"groups[{i}]={len(a)}" for i, a in enumerate(arrays)
            )
            raise DimensionError(
                f"One-way ANOVA requires equal group sizes: {details}"
            )

        return cls(
            test_type="anova_oneway",
            _groups=arrays,
            _tail=TailMode.GREATER,
            _data_name="groups",
        )

    @classmethod
    def for_regression(
        cls,
        x: ArrayLike,
        y: ArrayLike,
    ) -> HypothesisDesign:
        """
        Build design for regression_test().

        x and y are paired observations: equal length, at least 3, and x
        not constant.
        """
        x_arr = check_sample(x, "x", min_samples=3)
        y_arr = check_sample(y, "y", min_samples=3)
        check_consistent_length(x_arr, y_arr, names=("x", "y"))
        if np.all(x_arr == x_arr[0]):
            raise ValidationError(
                "x: is constant, regression slope is undefined"
            )
        return cls(
            test_type="regression",
            _x=x_arr,
            _y=y_arr,
            _tail=TailMode.GREATER,
            _data_name="y ~ x",
        )

    def __repr__(self) -> str:
        if self._groups is not None:
            return (
                f"HypothesisDesign(test_type={self.test_type!r}, "
                f"k={len(self._groups)}, n={len(self._groups[0])})"
            )
        n_x = len(self._x) if self._x is not None else 0
        n_y = len(self._y) if self._y is not None else 0
        if n_y > 0:
            return (
                f"HypothesisDesign(test_type={self.test_type!r}, "
                f"n_x={n_x}, n_y={n_y})"
            )
        return (
            f"HypothesisDesign(test_type={self.test_type!r}, n={n_x})"
        )
