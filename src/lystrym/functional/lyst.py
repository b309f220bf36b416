"""Immutable singly-linked persistent list ("Lyst").

This module provides a cons-list with O(1) prepend and structural sharing of
tails, together with the usual higher-order toolkit (folds, map, filter, zip,
concat, flatten). A list is one of two variants:

    - **Empty**: the shared ``empty`` singleton, with length 0
    - **Node**: a value, the tail it extends, and the cached length

Both variants carry a ``tag`` (:class:`~lystrym.core.enums.Tag`) and every
operation dispatches on it rather than on object identity.

Operations that take more than one argument are curried, so they can be
partially applied and passed around as plain callables::

    inc_all = map(lambda x: x + 1)
    inc_all(xs)

Key Features:
    - Lists are never mutated; prepending reuses the existing list as the tail
    - Folds, comparisons and conversions are iterative, so long lists do not
      exhaust the interpreter stack
    - Lists behave as Python sequences for ``len``, ``iter``, ``==`` and ``hash``

Note:
    ``map``, ``filter``, ``range`` and ``zip`` deliberately reuse the builtin
    names. Import the module (``from lystrym.functional import lyst as L``)
    rather than star-importing it.

Examples:
    >>> from lystrym.functional import lyst as L
    >>>
    >>> xs = L.from_array([1, 2, 3])
    >>> L.join("$")(xs)
    '1$2$3'
    >>> L.show(L.map(lambda x: x * 10)(xs))
    'Lyst[10, 20, 30]'
    >>> L.range(2, 10, 2) == L.from_array([2, 4, 6, 8])
    True
"""

import builtins
import typing as tp
from dataclasses import dataclass, field

import numpy as np

from lystrym.core.enums import Tag
from lystrym.core.types import Predicate, Reducer
from lystrym.functional.utils import flip, identity

__all__ = [
    "Lyst",
    "Node",
    "Empty",
    "empty",
    "cons",
    "singleton",
    "is_empty",
    "range",
    "head_or",
    "foldr",
    "foldl",
    "map",
    "filter",
    "find_or",
    "concat",
    "flat_map",
    "flatten",
    "to_array",
    "from_array",
    "to_numpy",
    "reverse",
    "zip_with",
    "zip",
    "equals",
    "join",
    "show",
]

T = tp.TypeVar("T")
U = tp.TypeVar("U")
V = tp.TypeVar("V")


class Lyst(tp.Generic[T]):
    """Common base of the two list variants.

    Attributes:
        tag: Which variant this list is.
        length: Number of elements reachable from this list.
    """

    __slots__ = ()

    tag: tp.ClassVar[Tag]
    length: int

    def __iter__(self) -> tp.Iterator[T]:
        node = self
        while node.tag is Tag.NODE:
            yield node.value
            node = node.next

    def __reversed__(self) -> tp.Iterator[T]:
        return reversed(to_array(self))

    def __len__(self) -> int:
        return self.length

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Lyst):
            return NotImplemented
        return equals(self)(other)

    def __hash__(self) -> int:
        return hash((Lyst, tuple(self)))

    def __repr__(self) -> str:
        return show(self)


class Empty(Lyst[tp.Any]):
    """The empty list. There is exactly one instance, exported as ``empty``."""

    __slots__ = ()

    tag = Tag.EMPTY
    length = 0

    _instance: tp.ClassVar[tp.Optional["Empty"]] = None

    def __new__(cls) -> "Empty":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __reduce__(self):
        return (Empty, ())


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class Node(Lyst[T]):
    """A list with at least one element.

    Attributes:
        value: The head element.
        next: The tail. Shared, never copied.
        length: ``next.length + 1``, computed once at construction.
    """

    value: T
    next: Lyst[T]
    length: int = field(init=False)

    tag: tp.ClassVar[Tag] = Tag.NODE

    def __post_init__(self) -> None:
        if not isinstance(self.next, Lyst):
            raise TypeError(
                f"List tail must be a Lyst, got {type(self.next).__name__}."
            )
        object.__setattr__(self, "length", self.next.length + 1)


empty: Empty = Empty()


def cons(value: T, tail: Lyst[T]) -> Node[T]:
    """Prepend ``value`` to ``tail`` without copying it.

    Args:
        value: Value to store in the new head node.
        tail: List to extend. Pass ``empty`` to start a new list.

    Returns:
        A new non-empty list of length ``tail.length + 1``.

    Raises:
        TypeError: If ``tail`` is not a list.
    """
    return Node(value, tail)


def singleton(value: T) -> Node[T]:
    return Node(value, empty)


def is_empty(xs: Lyst[tp.Any]) -> bool:
    return xs.tag is Tag.EMPTY


def range(start: float, end: float, step: float = 1) -> Lyst[float]:
    """Build the list ``start, start + step, ...`` stopping before ``end``.

    A positive step counts up while below ``end``; a negative step counts down
    while above it. A range that is already past ``end`` is ``empty``.

    Args:
        start: First value.
        end: Exclusive bound.
        step: Increment between values.

    Returns:
        The list of values.

    Raises:
        ValueError: If ``step`` is zero.
    """
    if step == 0:
        raise ValueError("Range step must be non-zero.")

    values = []
    current = start
    if step > 0:
        while current < end:
            values.append(current)
            current += step
    else:
        while current > end:
            values.append(current)
            current += step
    return from_array(values)


def head_or(fallback: T) -> tp.Callable[[Lyst[T]], T]:
    """Extract the first value of a list, or ``fallback`` when it is empty."""

    def head(xs: Lyst[T]) -> T:
        return fallback if xs.tag is Tag.EMPTY else xs.value

    return head


def foldr(
    f: Reducer[U, T],
) -> tp.Callable[[U], tp.Callable[[Lyst[T]], U]]:
    """Reduce a list from right to left, like ``functools.reduce`` on the reversed list.

    The result is ``f(...f(f(acc, last), ...), first)``. The fold walks a
    reversed copy of the values instead of recursing, so the stack depth does
    not grow with the list.

    Args:
        f: Accumulator-first reducing function.

    Returns:
        A function taking the initial accumulator, then the list.
    """

    def with_acc(acc: U) -> tp.Callable[[Lyst[T]], U]:
        def run(xs: Lyst[T]) -> U:
            result = acc
            for value in reversed(to_array(xs)):
                result = f(result, value)
            return result

        return run

    return with_acc


def foldl(
    f: Reducer[U, T],
) -> tp.Callable[[U], tp.Callable[[Lyst[T]], U]]:
    """Reduce a list from left to right: ``f(f(f(acc, first), second), ...)``."""

    def with_acc(acc: U) -> tp.Callable[[Lyst[T]], U]:
        def run(xs: Lyst[T]) -> U:
            result = acc
            for value in xs:
                result = f(result, value)
            return result

        return run

    return with_acc


def map(f: tp.Callable[[T], U]) -> tp.Callable[[Lyst[T]], Lyst[U]]:
    """Transform each element with ``f``, keeping order and length."""
    return foldr(lambda ys, y: Node(f(y), ys))(empty)


def filter(pred: Predicate[T]) -> tp.Callable[[Lyst[T]], Lyst[T]]:
    """Keep only the elements for which ``pred`` holds, in their original order."""
    return foldr(lambda ys, y: Node(y, ys) if pred(y) else ys)(empty)


def find_or(pred: Predicate[T], fallback: T) -> tp.Callable[[Lyst[T]], T]:
    """Return the first element matching ``pred``, or ``fallback`` if none does.

    Stops at the first match; later elements are never passed to ``pred``.
    """

    def find(xs: Lyst[T]) -> T:
        for value in xs:
            if pred(value):
                return value
        return fallback

    return find


def concat(xs: Lyst[T]) -> tp.Callable[[Lyst[T]], Lyst[T]]:
    """Append ``ys`` after ``xs``.

    Only ``xs`` is rebuilt; ``ys`` becomes the shared tail of the result.

    Raises:
        TypeError: If ``ys`` is not a list.
    """

    def onto(ys: Lyst[T]) -> Lyst[T]:
        if not isinstance(ys, Lyst):
            raise TypeError(f"Can only concat onto a Lyst, got {type(ys).__name__}.")
        return foldr(flip(cons))(ys)(xs)

    return onto


def flat_map(f: tp.Callable[[T], Lyst[U]]) -> tp.Callable[[Lyst[T]], Lyst[U]]:
    """Map each element to a list and concatenate the results in order."""
    return foldr(lambda ys, y: concat(f(y))(ys))(empty)


def flatten(xs: Lyst[Lyst[T]]) -> Lyst[T]:
    """Flatten a list of lists down one level."""
    return flat_map(identity)(xs)


def to_array(xs: Lyst[T]) -> tp.List[T]:
    return list(xs)


def from_array(values: tp.Iterable[T]) -> Lyst[T]:
    """Build a list from any finite iterable; its first item becomes the head.

    Args:
        values: A list, tuple, generator, numpy array or other iterable.

    Returns:
        The list holding the same values in the same order.
    """
    result: Lyst[T] = empty
    for value in reversed(list(values)):
        result = Node(value, result)
    return result


def to_numpy(xs: Lyst[tp.Any], dtype: tp.Any = None) -> np.ndarray:
    """Convert a list to a 1-D numpy array.

    Args:
        xs: List to convert.
        dtype: Optional dtype forwarded to ``np.asarray``.

    Returns:
        Array of shape ``(xs.length,)``.
    """
    return np.asarray(to_array(xs), dtype=dtype)


def reverse(xs: Lyst[T]) -> Lyst[T]:
    return foldl(flip(cons))(empty)(xs)


def zip_with(
    f: tp.Callable[[T, U], V],
) -> tp.Callable[[Lyst[T]], tp.Callable[[Lyst[U]], Lyst[V]]]:
    """Combine two lists position by position with ``f``.

    The result is as long as the shorter input; extra elements of the longer
    list are ignored.

    Args:
        f: Binary function joining a value from each list.

    Returns:
        A function taking the left list, then the right list.
    """

    def left(xs: Lyst[T]) -> tp.Callable[[Lyst[U]], Lyst[V]]:
        def right(ys: Lyst[U]) -> Lyst[V]:
            return from_array([f(x, y) for x, y in builtins.zip(xs, ys)])

        return right

    return left


def zip(xs: Lyst[T]) -> tp.Callable[[Lyst[T]], Lyst[T]]:
    """Interleave two lists: ``[x1, y1, x2, y2, ...]``, truncated to the shorter."""

    def other(ys: Lyst[T]) -> Lyst[T]:
        pairs = zip_with(lambda x, y: Node(x, singleton(y)))(xs)(ys)
        return flatten(pairs)

    return other


def equals(xs: Lyst[T]) -> tp.Callable[[Lyst[T]], bool]:
    """Compare two lists element by element with ``==``.

    Lists of different lengths are unequal without looking at any element.
    """

    def compare(ys: Lyst[T]) -> bool:
        if xs.length != ys.length:
            return False
        return all(x == y for x, y in builtins.zip(xs, ys))

    return compare


def join(separator: str) -> tp.Callable[[Lyst[tp.Any]], str]:
    """Render each element with ``str`` and put ``separator`` between them."""

    def render(xs: Lyst[tp.Any]) -> str:
        return separator.join(str(x) for x in xs)

    return render


def show(xs: Lyst[tp.Any]) -> str:
    return f"Lyst[{join(', ')(xs)}]"
