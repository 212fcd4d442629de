"""
Helpers for row-aligned attribute lists and nested parameter sets.
"""

import logging
from typing import Any, Dict, Iterable, Mapping, Optional

import numpy as np
import pandas as pd

from .errors import InvalidArgumentError

logger = logging.getLogger(__name__)


def _drop_positions(values: Any, drop: set) -> Any:
    if isinstance(values, np.ndarray):
        return np.delete(values, sorted(drop))
    if isinstance(values, pd.Series):
        keep = [i for i in range(len(values)) if i not in drop]
        return values.iloc[keep].reset_index(drop=True)
    kept = [v for i, v in enumerate(values) if i not in drop]
    if isinstance(values, tuple):
        return tuple(kept)
    return kept


def delete_attr(attr_list: Mapping[str, Any], ids: Iterable[int]) -> Dict[str, Any]:
    """
    Remove the entries at positions ``ids`` from every attribute vector.

    Parameters
    ----------
    attr_list : Mapping[str, sequence]
        Attribute name -> row-aligned values (list, tuple, array, or Series).
    ids : iterable of int
        0-based positions to remove. Duplicates are ignored.

    Returns
    -------
    Dict[str, Any]
        New mapping with the same key order. ``attr_list`` is not modified.

    Raises
    ------
    InvalidArgumentError
        If a position is negative or beyond the end of any attribute vector.
    """
    drop = set()
    for i in ids:
        if isinstance(i, (bool, np.bool_)) or not isinstance(i, (int, np.integer)):
            raise InvalidArgumentError(f"Positions must be integers, got {i!r}")
        drop.add(int(i))

    if not drop:
        return dict(attr_list)

    out = {}
    for name, values in attr_list.items():
        if min(drop) < 0 or max(drop) >= len(values):
            raise InvalidArgumentError(
                f"Positions {sorted(drop)} out of range for attribute {name!r} "
                f"of length {len(values)}"
            )
        out[name] = _drop_positions(values, drop)
    logger.debug("delete_attr: removed %d position(s) from %d attribute(s)", len(drop), len(out))
    return out


def split_list(params: Mapping[str, Any], exclude: Optional[Iterable[str]] = None) -> Dict[str, Any]:
    """
    Splice nested parameter mappings into the top level.

    Each value that is itself a mapping (unless its key is in ``exclude``)
    contributes its items to the result: keys already present are
    overwritten in place, new keys are appended, and the container key is
    dropped.

    Example
    -------
    >>> split_list({"nsims": 5, "control": {"nsteps": 100, "verbose": False}})
    {'nsims': 5, 'nsteps': 100, 'verbose': False}
    """
    excluded = set(exclude) if exclude is not None else set()
    nested = [k for k, v in params.items() if isinstance(v, Mapping) and k not in excluded]

    out = dict(params)
    for key in nested:
        out.update(params[key])
        out.pop(key, None)
    return out


__all__ = [
    "delete_attr",
    "split_list",
]
