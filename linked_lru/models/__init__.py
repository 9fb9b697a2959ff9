"""
Selector models used to drive linked list searches.
"""

from .selector import UNSET, ValueSelector, MatcherSelector, Selector, build_selector

__all__ = [
    "UNSET",
    "ValueSelector",
    "MatcherSelector",
    "Selector",
    "build_selector",
]
