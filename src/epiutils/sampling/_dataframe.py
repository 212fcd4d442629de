"""
Conditional sampling of node identifiers from an attribute table.
"""

import logging
from typing import Any, Iterable, Optional, Sequence

import numpy as np
import pandas as pd

from ..errors import InvalidArgumentError
from ._draw import RngLike, _check_size, draw

logger = logging.getLogger(__name__)

DEFAULT_ID_COL = "ids"
DEFAULT_GROUP_COL = "group"
DEFAULT_STATUS_COL = "status"


def _as_value_list(values: Any) -> list:
    if isinstance(values, (str, bytes)) or not isinstance(values, Iterable):
        return [values]
    return list(values)


def _require_column(df: pd.DataFrame, col: str) -> None:
    if col not in df.columns:
        raise InvalidArgumentError(
            f"Column {col!r} not found. Available: {list(df.columns)}"
        )


def eligible_mask(
    df: pd.DataFrame,
    group: Optional[Any] = None,
    status: Optional[Any] = None,
    group_col: str = DEFAULT_GROUP_COL,
    status_col: str = DEFAULT_STATUS_COL,
) -> np.ndarray:
    """Boolean row mask for the rows passing the supplied group/status filters."""
    mask = np.ones(len(df), dtype=bool)
    if group is not None:
        _require_column(df, group_col)
        mask &= df[group_col].isin(_as_value_list(group)).to_numpy()
    if status is not None:
        _require_column(df, status_col)
        mask &= df[status_col].isin(_as_value_list(status)).to_numpy()
    return mask


def sample_df(
    df: pd.DataFrame,
    size: int,
    replace: bool = False,
    prob: Optional[Sequence[float]] = None,
    group: Optional[Any] = None,
    status: Optional[Any] = None,
    *,
    id_col: str = DEFAULT_ID_COL,
    group_col: str = DEFAULT_GROUP_COL,
    status_col: str = DEFAULT_STATUS_COL,
    rng: RngLike = None,
) -> np.ndarray:
    """
    Sample identifiers from ``df`` among rows matching group/status filters.

    Parameters
    ----------
    df : pd.DataFrame
        Table with an identifier column and optional group/status columns.
    size : int
        Number of identifiers to draw.
    replace : bool
        Sample with replacement.
    prob : sequence of float, optional
        Selection weights, aligned either with the eligible rows or with
        every row of ``df``.
    group, status : value or collection of values, optional
        Accepted group / status values. ``None`` disables that filter.
    id_col, group_col, status_col : str
        Column names.
    rng : int or np.random.Generator, optional
        Seed or generator for reproducible draws.

    Returns
    -------
    np.ndarray
        Sampled identifiers. A lone eligible identifier is returned as-is
        when ``size > 0``.

    Raises
    ------
    InvalidArgumentError
        If a column is missing, ``size`` exceeds the eligible pool without
        replacement, or no identifier is eligible while ``size > 0``.

    Example
    -------
    >>> df = pd.DataFrame({"ids": [1, 2, 3, 4],
    ...                    "group": ["a", "a", "b", "b"],
    ...                    "status": ["active", "inactive", "active", "active"]})
    >>> sample_df(df, 1, group="a", status="active")
    array([1])
    """
    size = _check_size(size)
    _require_column(df, id_col)

    mask = eligible_mask(df, group, status, group_col=group_col, status_col=status_col)
    elig_ids = df[id_col].to_numpy()[mask]
    n_elig = len(elig_ids)
    logger.debug("sample_df: %d of %d rows eligible, size=%d", n_elig, len(df), size)

    if n_elig > 1:
        if prob is not None:
            prob = np.asarray(prob, dtype=float).ravel()
            if prob.size == len(df) and prob.size != n_elig:
                prob = prob[mask]
        return draw(elig_ids, size, replace=replace, prob=prob, rng=rng)

    if size == 0:
        return elig_ids[:0]
    if n_elig == 0:
        raise InvalidArgumentError(
            f"No eligible identifiers to draw a sample of size {size} from"
        )
    return elig_ids


__all__ = [
    "eligible_mask",
    "sample_df",
]
