"""Top-level epiutils package exports."""

import importlib

from .errors import InvalidArgumentError

__all__ = [
    'InvalidArgumentError',
    'transco',
    'brewer_ramp',
    'delete_attr',
    'split_list',
    'sample_df',
    'ssample',
]


_LAZY_EXPORTS = {
    'transco': 'styling',
    'brewer_ramp': 'styling',
    'delete_attr': 'attrs',
    'split_list': 'attrs',
    'sample_df': 'sampling',
    'ssample': 'sampling',
}


def __getattr__(name: str):
    if name in _LAZY_EXPORTS:
        module = importlib.import_module(f"{__name__}.{_LAZY_EXPORTS[name]}")
        value = getattr(module, name)
        globals()[name] = value
        return value
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
