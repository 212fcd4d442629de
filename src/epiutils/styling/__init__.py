"""
Color transparency and palette ramp helpers shared by epidemic plots.
"""

from .color_utils import (
    STANDARD_PALETTE,
    resolve_rgb,
    transco,
    interpolate_colors,
)
from .palettes import (
    PaletteCategory,
    BrewerPalette,
    BREWER_PALETTES,
    get_palette_info,
    get_palette_colors,
    brewer_ramp,
)

__all__ = [
    'STANDARD_PALETTE',
    'resolve_rgb',
    'transco',
    'interpolate_colors',
    'PaletteCategory',
    'BrewerPalette',
    'BREWER_PALETTES',
    'get_palette_info',
    'get_palette_colors',
    'brewer_ramp',
]
