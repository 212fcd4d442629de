"""
Random sampling helpers for simulation modules.

Submodules
==========
- _draw : ``ssample``, sampling that is safe for single-element pools
- _dataframe : ``sample_df``, conditional sampling of ids from a node table
"""

from ._draw import ssample, draw
from ._dataframe import sample_df, eligible_mask

__all__ = [
    "ssample",
    "draw",
    "sample_df",
    "eligible_mask",
]
