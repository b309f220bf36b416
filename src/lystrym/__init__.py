"""lystrym: a persistent list and a synchronous event stream.

Usage:
    >>> from lystrym import lyst as L, Strym
    >>> L.show(L.from_array([1, 2, 3]))
    'Lyst[1, 2, 3]'
"""

from lystrym.functional import lyst
from lystrym.functional.lyst import Lyst, Node, Empty, empty
from lystrym.functional.strym import Strym
from lystrym.core.enums import Tag, ListenerErrorPolicy

__version__ = "0.1.0"

__all__ = [
    "lyst",
    "Lyst",
    "Node",
    "Empty",
    "empty",
    "Strym",
    "Tag",
    "ListenerErrorPolicy",
]
