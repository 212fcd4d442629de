"""
Random draws that stay well-defined for tiny candidate pools.

``numpy.random.Generator.choice`` treats a bare integer as a population bound
(``choice(5)`` draws from ``range(5)``), so a pool holding a single numeric
id cannot be passed to it safely. ``ssample`` short-circuits that case.
"""

import logging
import numbers
from typing import Any, Iterable, Optional, Sequence, Union

import numpy as np

from ..errors import InvalidArgumentError

logger = logging.getLogger(__name__)

RngLike = Union[None, int, np.random.Generator]


def _make_rng(rng: RngLike = None) -> np.random.Generator:
    return np.random.default_rng(rng)


def _as_pool(x: Any) -> np.ndarray:
    """Candidates as an array; scalars and strings become a pool of one."""
    if isinstance(x, np.ndarray):
        return x.reshape(1) if x.ndim == 0 else x
    if isinstance(x, (str, bytes)) or not isinstance(x, Iterable):
        return np.asarray([x])
    return np.asarray(list(x))


def _check_size(size: Any) -> int:
    if not isinstance(size, numbers.Integral) or isinstance(size, bool) or size < 0:
        raise InvalidArgumentError(f"size must be a non-negative integer, got {size!r}")
    return int(size)


def _normalize_prob(prob: Optional[Sequence[float]], n_pool: int) -> Optional[np.ndarray]:
    """Validate selection weights and rescale them to sum to 1."""
    if prob is None:
        return None
    p = np.asarray(prob, dtype=float).ravel()
    if p.size != n_pool:
        raise InvalidArgumentError(
            f"prob has {p.size} weights but the pool holds {n_pool} candidates"
        )
    if not np.isfinite(p).all() or (p < 0).any():
        raise InvalidArgumentError("prob weights must be finite and non-negative")
    total = p.sum()
    if total <= 0:
        raise InvalidArgumentError("prob weights must not all be zero")
    return p / total


def draw(
    pool: Sequence[Any],
    size: int,
    replace: bool = False,
    prob: Optional[Sequence[float]] = None,
    rng: RngLike = None,
) -> np.ndarray:
    """Draw ``size`` elements of ``pool`` (length > 1 expected)."""
    size = _check_size(size)
    values = _as_pool(pool)
    n_pool = len(values)
    p = _normalize_prob(prob, n_pool)

    if not replace:
        if size > n_pool:
            raise InvalidArgumentError(
                f"Cannot take a sample of size {size} from {n_pool} candidates "
                "without replacement"
            )
        if p is not None and np.count_nonzero(p) < size:
            raise InvalidArgumentError(
                f"Too few positive weights for a sample of size {size} without replacement"
            )

    idx = _make_rng(rng).choice(n_pool, size=size, replace=replace, p=p)
    return values[idx]


def ssample(
    x: Sequence[Any],
    size: int,
    replace: bool = False,
    prob: Optional[Sequence[float]] = None,
    rng: RngLike = None,
) -> np.ndarray:
    """
    Sample from ``x``, returning a single-element pool as-is.

    Parameters
    ----------
    x : sequence
        Candidates. Must hold at least one element.
    size : int
        Number of draws.
    replace : bool
        Sample with replacement.
    prob : sequence of float, optional
        Selection weights aligned with ``x``; rescaled to sum to 1.
    rng : int or np.random.Generator, optional
        Seed or generator for reproducible draws.

    Returns
    -------
    np.ndarray
        The drawn elements. For a single candidate: that candidate when
        ``size > 0``, otherwise an empty array.

    Raises
    ------
    InvalidArgumentError
        On an empty ``x``, a negative ``size``, an oversized draw without
        replacement, or malformed weights.
    """
    size = _check_size(size)
    values = _as_pool(x)

    if len(values) == 0:
        raise InvalidArgumentError("Cannot sample from an empty candidate sequence")
    if len(values) > 1:
        return draw(values, size, replace=replace, prob=prob, rng=rng)

    logger.debug("ssample: single candidate, size=%d", size)
    if size > 0:
        return values
    return values[:0]


__all__ = [
    "RngLike",
    "draw",
    "ssample",
]
