"""numpy / pandas variants of :func:`seqfilter.core.filter_sequence`.

Same calling convention and ordering guarantees as the list version, but the
result keeps the container type: a new ``ndarray`` with the input dtype, or a
new ``Series`` that keeps the labels and name of the retained rows.
"""

from __future__ import annotations

from typing import Any, Callable

import numpy as np
import pandas as pd

from seqfilter.config import FilterConfig
from seqfilter.core import make_caller


def _verdict_mask(
    values: Any,
    n: int,
    call: Callable[[Any, int, Any], bool],
    element_at: Callable[[int], Any],
) -> np.ndarray:
    return np.fromiter((call(element_at(i), i, values) for i in range(n)), dtype=bool, count=n)


def filter_array(
    array: np.ndarray,
    predicate: Callable[..., Any],
    context: Any = None,
    *,
    config: FilterConfig | None = None,
) -> np.ndarray:
    """Filter a 1-D array, returning a new array of the same dtype.

    The predicate receives numpy scalars (``array[i]``), the position ``i`` and
    the original array.
    """

    call = make_caller(predicate, context, config=config)

    arr = np.asarray(array)
    if arr.ndim != 1:
        raise ValueError(f"filter_array expects a 1-D array, got ndim={arr.ndim}")

    # The predicate sees the caller's object, not the converted array.
    mask = _verdict_mask(array, len(arr), call, arr.__getitem__)
    return arr[mask]


def filter_series(
    series: pd.Series,
    predicate: Callable[..., Any],
    context: Any = None,
    *,
    config: FilterConfig | None = None,
) -> pd.Series:
    """Filter a Series by position.

    ``index`` is the 0-based position, not the label; the returned Series
    keeps the original labels of the retained rows.
    """

    call = make_caller(predicate, context, config=config)

    mask = _verdict_mask(series, len(series), call, lambda i: series.iloc[i])
    return series.iloc[mask]
