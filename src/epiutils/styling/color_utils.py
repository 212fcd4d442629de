"""
Generic color utilities for epidemic plots.

These helpers are plotting-backend agnostic: they resolve colors through
matplotlib's color parser and return plain hex strings that base matplotlib,
network plots, or plotly traces all accept.
"""

import logging
import numbers
from typing import Any, List, Optional, Sequence, Tuple

import matplotlib.colors as mcolors
import numpy as np

from ..errors import InvalidArgumentError
from .palette_config import DEFAULT_ALPHA

logger = logging.getLogger(__name__)


STANDARD_PALETTE = [
    "#1f77b4",
    "#ff7f0e",
    "#2ca02c",
    "#d62728",
    "#9467bd",
    "#8c564b",
    "#e377c2",
    "#7f7f7f",
    "#bcbd22",
    "#17becf",
]


def _is_int(value: Any) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, (bool, np.bool_))


def resolve_rgb(color: Any) -> Tuple[int, int, int]:
    """Resolve a color spec to an ``(r, g, b)`` triple of ints in [0, 255].

    Integers index into ``STANDARD_PALETTE`` (cycling, like matplotlib's
    ``C0``..``C9``). Any alpha carried by the input is dropped.
    """
    if _is_int(color):
        color = STANDARD_PALETTE[int(color) % len(STANDARD_PALETTE)]
    try:
        r, g, b = mcolors.to_rgb(color)
    except (ValueError, TypeError) as exc:
        raise InvalidArgumentError(f"Invalid color specification: {color!r}") from exc
    return int(round(r * 255)), int(round(g * 255)), int(round(b * 255))


def _rgb_to_hex(rgb: Sequence[int], alpha: Optional[int] = None) -> str:
    channels = [int(v) / 255 for v in rgb]
    if alpha is None:
        return mcolors.to_hex(channels)
    return mcolors.to_hex(channels + [int(alpha) / 255], keep_alpha=True)


def _as_color_list(col: Any) -> List[Any]:
    # A tuple of numbers is a single RGB(A) color, not a list of colors.
    if isinstance(col, tuple) and all(isinstance(v, numbers.Real) for v in col):
        return [col]
    if isinstance(col, str) or _is_int(col):
        return [col]
    return list(col)


def transco(col: Any, alpha: Any = DEFAULT_ALPHA) -> List[str]:
    """
    Apply transparency to one or more colors.

    One of ``col`` or ``alpha`` may hold several values; the other must be a
    single value that is paired with each of them.

    Parameters
    ----------
    col : color or sequence of colors
        Named color, hex string, RGB(A) tuple, or integer palette index.
    alpha : float or sequence of float
        Opacity in [0, 1], where 0 is transparent and 1 is opaque.

    Returns
    -------
    List[str]
        ``#rrggbbaa`` strings, one per color (or per alpha).

    Raises
    ------
    InvalidArgumentError
        If both inputs hold more than one value, an alpha lies outside
        [0, 1], or a color cannot be resolved.

    Example
    -------
    >>> transco(["steelblue", "black"], 0.5)
    ['#4682b47f', '#0000007f']
    """
    colors = _as_color_list(col)
    alphas = np.atleast_1d(np.asarray(alpha))
    if alphas.dtype.kind not in "iuf":
        raise InvalidArgumentError(f"alpha must be numeric, got {alpha!r}")
    alphas = alphas.astype(float)

    if len(colors) == 0 or alphas.size == 0:
        raise InvalidArgumentError("col and alpha must each hold at least one value")
    if len(colors) > 1 and alphas.size > 1:
        raise InvalidArgumentError("Length of col or length of alpha must be 1")
    if np.isnan(alphas).any() or (alphas < 0).any() or (alphas > 1).any():
        raise InvalidArgumentError(f"Specify alpha between 0 and 1, got {alpha!r}")

    channels = np.floor(alphas * 255).astype(int)
    rgbs = [resolve_rgb(c) for c in colors]

    if len(rgbs) > 1:
        return [_rgb_to_hex(rgb, int(channels[0])) for rgb in rgbs]
    return [_rgb_to_hex(rgbs[0], int(a)) for a in channels]


def interpolate_colors(colors: Sequence[Any], n: int) -> List[str]:
    """
    Build a linear RGB ramp through ``colors`` and sample it at ``n`` points.

    Stops sit at evenly spaced positions on [0, 1] and the samples are
    ``linspace(0, 1, n)``, so the first sample is always the first stop.
    Channels are rounded half-up to integers.
    """
    if not _is_int(n) or n < 0:
        raise InvalidArgumentError(f"n must be a non-negative integer, got {n!r}")
    if len(colors) == 0:
        raise InvalidArgumentError("At least one color stop is required")
    if n == 0:
        return []

    stops = np.array([resolve_rgb(c) for c in colors], dtype=float)
    if len(stops) == 1:
        return [_rgb_to_hex(stops[0].astype(int))] * n

    logger.debug("Interpolating %d color stops into %d colors", len(stops), n)
    stop_pos = np.linspace(0.0, 1.0, len(stops))
    sample_pos = np.linspace(0.0, 1.0, n)
    ramp = np.column_stack([
        np.interp(sample_pos, stop_pos, stops[:, channel]) for channel in range(3)
    ])
    ramp = np.clip(np.floor(ramp + 0.5), 0, 255).astype(int)
    return [_rgb_to_hex(rgb) for rgb in ramp]


__all__ = [
    "STANDARD_PALETTE",
    "resolve_rgb",
    "transco",
    "interpolate_colors",
]
