"""
ColorBrewer palette lookup and continuous ramps.

Brewer palettes are limited to their native sizes. ``brewer_ramp`` fills the
gaps between stops so any number of colors can be drawn, and by default
drops the near-white stops of diverging and sequential palettes so lines and
nodes stay visible on a white background.

Usage:
    from epiutils.styling.palettes import brewer_ramp

    cols = brewer_ramp(100, "Spectral")
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Tuple, Union

from ..errors import InvalidArgumentError
from .color_utils import interpolate_colors
from .palette_config import (
    DIVERGING_LIGHT_POSITIONS,
    DIVERGING_PALETTES,
    QUALITATIVE_PALETTES,
    SEQUENTIAL_LIGHT_POSITIONS,
    SEQUENTIAL_PALETTES,
)

logger = logging.getLogger(__name__)


class PaletteCategory(Enum):
    """Palette family, each with its own light-stop and ordering policy."""

    DIVERGING = "div"
    QUALITATIVE = "qual"
    SEQUENTIAL = "seq"

    @property
    def reversed(self) -> bool:
        """Sequential ramps run dark to light so index 0 is most saturated."""
        return self is PaletteCategory.SEQUENTIAL

    def light_positions(self, n_stops: int) -> Tuple[int, ...]:
        if self is PaletteCategory.DIVERGING:
            positions = DIVERGING_LIGHT_POSITIONS
        elif self is PaletteCategory.SEQUENTIAL:
            positions = SEQUENTIAL_LIGHT_POSITIONS
        else:
            positions = ()
        return tuple(p for p in positions if p < n_stops)

    def select_stops(self, colors: List[str], delete_lights: bool = True) -> List[str]:
        """Drop light stops (if requested), then apply the category ordering."""
        stops = list(colors)
        if delete_lights:
            drop = set(self.light_positions(len(stops)))
            stops = [c for i, c in enumerate(stops) if i not in drop]
        if self.reversed:
            stops.reverse()
        return stops


@dataclass(frozen=True)
class BrewerPalette:
    """A named palette at its maximum native size."""
    name: str
    category: PaletteCategory
    colors: Tuple[str, ...]

    @property
    def max_colors(self) -> int:
        return len(self.colors)


def _build_registry() -> Dict[str, BrewerPalette]:
    registry = {}
    for category, table in (
        (PaletteCategory.DIVERGING, DIVERGING_PALETTES),
        (PaletteCategory.QUALITATIVE, QUALITATIVE_PALETTES),
        (PaletteCategory.SEQUENTIAL, SEQUENTIAL_PALETTES),
    ):
        for name, colors in table.items():
            registry[name] = BrewerPalette(name=name, category=category, colors=tuple(colors))
    return registry


BREWER_PALETTES = _build_registry()


def get_palette_info(name: str) -> BrewerPalette:
    """Look up a Brewer palette by name (case-sensitive, e.g. ``"RdBu"``)."""
    try:
        return BREWER_PALETTES[name]
    except (KeyError, TypeError) as exc:
        raise InvalidArgumentError(
            f"Unknown palette {name!r}. Available: {sorted(BREWER_PALETTES)}"
        ) from exc


def get_palette_colors(name: str) -> List[str]:
    """Native stops of a palette at its maximum size, in native order."""
    return list(get_palette_info(name).colors)


def brewer_ramp(
    n: int,
    palette: Union[str, BrewerPalette],
    delete_lights: bool = True,
) -> List[str]:
    """
    Expand a Brewer palette into ``n`` evenly interpolated colors.

    Parameters
    ----------
    n : int
        Number of colors to return.
    palette : str or BrewerPalette
        Palette name (e.g. ``"Spectral"``, ``"Blues"``, ``"Set1"``) or a
        palette object carrying its own category and stops.
    delete_lights : bool, default=True
        Drop the near-white stops of diverging (4th-7th) and sequential
        (1st-3rd) palettes before interpolating. Ignored for qualitative
        palettes.

    Returns
    -------
    List[str]
        ``n`` colors as ``#rrggbb`` strings. Sequential ramps start at the
        darkest stop.
    """
    info = palette if isinstance(palette, BrewerPalette) else get_palette_info(palette)
    stops = info.category.select_stops(list(info.colors), delete_lights=delete_lights)
    logger.debug(
        "brewer_ramp(%s): category=%s, %d of %d stops kept",
        info.name, info.category.value, len(stops), info.max_colors,
    )
    return interpolate_colors(stops, n)


__all__ = [
    "PaletteCategory",
    "BrewerPalette",
    "BREWER_PALETTES",
    "get_palette_info",
    "get_palette_colors",
    "brewer_ramp",
]
