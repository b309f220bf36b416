"""Small function combinators shared by the list and stream modules."""

import typing as tp

__all__ = ["identity", "flip", "compose"]

A = tp.TypeVar("A")
B = tp.TypeVar("B")
C = tp.TypeVar("C")


def identity(x: A) -> A:
    return x


def flip(f: tp.Callable[[A, B], C]) -> tp.Callable[[B, A], C]:
    """Swap the arguments of a binary function."""

    def flipped(y: B, x: A) -> C:
        return f(x, y)

    return flipped


def compose(f: tp.Callable[[B], C], g: tp.Callable[[A], B]) -> tp.Callable[[A], C]:
    """Right-to-left composition: ``compose(f, g)(x) == f(g(x))``."""

    def composed(x: A) -> C:
        return f(g(x))

    return composed
