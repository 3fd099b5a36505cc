"""
IntervalDesign: validated inputs for confidence intervals.

Uses factory classmethods per interval family. The `kind` field identifies
which computation the backend runs. Immutable after construction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray, ArrayLike

from pyinference.core.validation import check_alpha, check_sample
from pyinference.interval._common import DEFAULT_ALPHA


@dataclass(frozen=True)
class IntervalDesign:
    """
    Design for confidence intervals.

    Do not construct directly; use factory classmethods.
    """
    kind: str
    _x: NDArray[np.floating[Any]]
    _y: NDArray[np.floating[Any]] | None = None
    _alpha: float = DEFAULT_ALPHA
    _data_name: str = "x"

    @property
    def x(self) -> NDArray[np.floating[Any]]:
        return self._x

    @property
    def y(self) -> NDArray[np.floating[Any]] | None:
        return self._y

    @property
    def alpha(self) -> float:
        return self._alpha

    @property
    def conf_level(self) -> float:
        return 1.0 - self._alpha

    @property
    def data_name(self) -> str:
        return self._data_name

    # --- Factory classmethods ---

    @classmethod
    def _for_means(
        cls,
        prefix: str,
        x: ArrayLike,
        y: ArrayLike | None,
        alpha: float,
    ) -> IntervalDesign:
        alpha = check_alpha(alpha)
        x_arr = check_sample(x, "x")
        if y is None:
            return cls(kind=f"{prefix}_one_sample", _x=x_arr, _alpha=alpha)
        y_arr = check_sample(y, "y")
        return cls(
            kind=f"{prefix}_two_sample",
            _x=x_arr,
            _y=y_arr,
            _alpha=alpha,
            _data_name="x and y",
        )

    @classmethod
    def for_z_interval(
        cls,
        x: ArrayLike,
        y: ArrayLike | None = None,
        *,
        alpha: float = DEFAULT_ALPHA,
    ) -> IntervalDesign:
        """Build design for a one- or two-sample z-interval."""
        return cls._for_means("z", x, y, alpha)

    @classmethod
    def for_t_interval(
        cls,
        x: ArrayLike,
        y: ArrayLike | None = None,
        *,
        alpha: float = DEFAULT_ALPHA,
    ) -> IntervalDesign:
        """Build design for a one-sample or Welch two-sample t-interval."""
        return cls._for_means("t", x, y, alpha)

    @classmethod
    def for_var_interval(
        cls,
        x: ArrayLike,
        y: ArrayLike,
        *,
        alpha: float = DEFAULT_ALPHA,
    ) -> IntervalDesign:
        """
        Build design for the two-sample variance-ratio interval.

        Parameters
        ----------
        x, y : array-like
            The two samples, each with at least 2 observations.
        alpha : float
            Significance level. Default 0.05.
        """
        alpha = check_alpha(alpha)
        x_arr = check_sample(x, "x")
        y_arr = check_sample(y, "y")
        return cls(
            kind="var_ratio",
            _x=x_arr,
            _y=y_arr,
            _alpha=alpha,
            _data_name="x and y",
        )

    def __repr__(self) -> str:
        if self._y is not None:
            return (
                f"IntervalDesign(kind={self.kind!r}, "
                f"n_x={len(self._x)}, n_y={len(self._y)}, alpha={self._alpha})"
            )
        return (
            f"IntervalDesign(kind={self.kind!r}, n={len(self._x)}, "
            f"alpha={self._alpha})"
        )
