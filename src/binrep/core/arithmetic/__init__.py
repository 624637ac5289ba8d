"""
Arithmetic over encoded operands.
"""

from .operations import operate, operate_request, truncating_divide

__all__ = [
    "operate",
    "operate_request",
    "truncating_divide",
]
