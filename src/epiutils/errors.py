"""
Exception types shared across epiutils.
"""


class InvalidArgumentError(ValueError):
    """Raised when a helper is called with arguments it cannot honor."""


__all__ = [
    "InvalidArgumentError",
]
