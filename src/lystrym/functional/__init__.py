"""Functional primitives for lystrym.

This package provides the two building blocks of the project: an immutable
persistent list (``lyst``) and a synchronous event stream (``strym``). The
list operations are pure and side-effect-free so they can be composed into
pipelines; the stream is the one stateful piece, a push-based broadcast with
functional combinators.
"""

from lystrym.functional import lyst
from lystrym.functional.lyst import Lyst, Node, Empty, empty
from lystrym.functional.strym import Strym
from lystrym.functional.utils import identity, flip, compose

__all__ = [
    "lyst",
    "Lyst",
    "Node",
    "Empty",
    "empty",
    "Strym",
    "identity",
    "flip",
    "compose",
]
