"""Reusable callable type aliases for the lystrym primitives.

Type Aliases:
    Predicate: A test on a single element.
    Reducer: An accumulator-first binary function used by folds and scans.
    Listener: A callback registered on a stream.
"""

from typing import Callable, TypeVar

__all__ = [
    "T",
    "U",
    "V",
    "Predicate",
    "Reducer",
    "Listener",
]

T = TypeVar("T")
U = TypeVar("U")
V = TypeVar("V")

Predicate = Callable[[T], bool]

# (accumulator, element) -> accumulator
Reducer = Callable[[U, T], U]

Listener = Callable[[T], None]
