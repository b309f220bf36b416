"""Synchronous push-based event stream ("Strym").

A stream is an ordered list of listeners. ``trigger`` calls each of them, in
registration order, before returning. Combinators (``map``, ``filter``,
``scan``, ``ap``, ``concat``, ``flatten``) build a new stream and register a
listener on their source(s) that forwards to it. Streams keep no history, so
a listener only sees values triggered after it was registered.

Delivery rules:
    - ``trigger`` iterates over a snapshot of the listeners taken when it
      starts; listeners added while it runs first hear the next trigger
    - the listener list is guarded by a lock, and listeners run outside it
    - there is no unsubscribe; derived streams stay attached to their sources
    - a listener that raises is handled according to the stream's
      :class:`~lystrym.core.enums.ListenerErrorPolicy`: ``PROPAGATE`` re-raises
      from ``trigger`` and skips the remaining listeners, ``ISOLATE`` logs the
      error and carries on

Examples:
    >>> from lystrym.functional.strym import Strym
    >>>
    >>> clicks = Strym.empty()
    >>> totals = clicks.map(lambda n: n * 2).scan(lambda acc, n: acc + n, 0)
    >>> totals.on(print)
    >>> clicks.trigger(1)
    2
    >>> clicks.trigger(3)
    8
"""

import threading
import typing as tp

from lystrym.core.config import settings
from lystrym.core.enums import ListenerErrorPolicy
from lystrym.core.types import Listener, Predicate
from lystrym.functional.utils import compose
from lystrym.logger.logger import logger

__all__ = ["Strym"]

T = tp.TypeVar("T")
U = tp.TypeVar("U")


class Strym(tp.Generic[T]):
    """Hot, synchronous broadcast of values to registered listeners.

    Attributes:
        error_policy: How ``trigger`` reacts to a listener raising.
    """

    def __init__(
        self, error_policy: tp.Optional[ListenerErrorPolicy] = None
    ) -> None:
        self.error_policy = (
            ListenerErrorPolicy.parse(error_policy)
            if error_policy is not None
            else settings.LISTENER_ERRORS
        )
        self._listeners: tp.List[Listener[T]] = []
        self._lock = threading.Lock()

    @classmethod
    def empty(
        cls, error_policy: tp.Optional[ListenerErrorPolicy] = None
    ) -> "Strym[T]":
        """New stream with no listeners; the identity for ``concat``."""
        return cls(error_policy)

    @property
    def listener_count(self) -> int:
        with self._lock:
            return len(self._listeners)

    def __repr__(self) -> str:
        return (
            f"Strym(listeners={self.listener_count}, "
            f"error_policy={self.error_policy.value})"
        )

    def on(self, listener: Listener[T]) -> None:
        """Register ``listener`` to be called with every future value."""
        with self._lock:
            self._listeners.append(listener)

    def trigger(self, value: T) -> None:
        """Call every registered listener with ``value``, in registration order.

        Raises:
            Exception: Whatever a listener raised, when the policy is
                ``PROPAGATE``. Listeners after the failing one are skipped.
        """
        with self._lock:
            listeners = tuple(self._listeners)

        for listener in listeners:
            if self.error_policy is ListenerErrorPolicy.PROPAGATE:
                listener(value)
                continue
            try:
                listener(value)
            except Exception as e:
                logger.error(
                    f"Listener {listener!r} failed on value {value!r}: {e}",
                    exc_info=True,
                )

    def _derive(self, kind: str) -> "Strym[tp.Any]":
        logger.debug(f"Deriving '{kind}' stream from {self!r}")
        return Strym(self.error_policy)

    def concat(self, other: "Strym[T]") -> "Strym[T]":
        """Merge two streams: the result re-emits values triggered on either."""
        s = self._derive("concat")
        self.on(s.trigger)
        other.on(s.trigger)
        return s

    def map(self, f: tp.Callable[[T], U]) -> "Strym[U]":
        """Derived stream emitting ``f(value)`` for every value of this stream."""
        s = self._derive("map")
        self.on(compose(s.trigger, f))
        return s

    @tp.overload
    def filter(self, pred: tp.Callable[[T], "tp.TypeGuard[U]"]) -> "Strym[U]": ...

    @tp.overload
    def filter(self, pred: Predicate[T]) -> "Strym[T]": ...

    def filter(self, pred):
        """Derived stream emitting only the values for which ``pred`` holds.

        A ``TypeGuard`` predicate narrows the element type of the result.
        """
        s = self._derive("filter")

        def forward(x):
            if pred(x):
                s.trigger(x)

        self.on(forward)
        return s

    def scan(self, f: tp.Callable[[U, T], U], acc: U) -> "Strym[U]":
        """Running reduction: emits the updated accumulator on every value.

        Args:
            f: Accumulator-first reducing function.
            acc: Seed; never emitted itself.

        Returns:
            Derived stream of accumulated values.
        """
        last = acc

        def step(item: T) -> U:
            nonlocal last
            last = f(last, item)
            return last

        return self.map(step)

    def ap(self, functions: "Strym[tp.Callable[[T], U]]") -> "Strym[U]":
        """Apply the most recent function from ``functions`` to each later value.

        Values of this stream triggered before any function arrives produce
        nothing; they are not buffered.
        """
        s = self._derive("ap")
        latest: tp.Optional[tp.Callable[[T], U]] = None

        def apply(x: T) -> None:
            s.trigger(latest(x))

        def receive(f: tp.Callable[[T], U]) -> None:
            nonlocal latest
            first = latest is None
            latest = f
            if first:
                self.on(apply)

        functions.on(receive)
        return s

    @staticmethod
    def flatten(streams: "Strym[Strym[U]]") -> "Strym[U]":
        """Re-emit the values of every inner stream the outer stream carries.

        Each inner stream stays subscribed once seen, so its values keep
        flowing after later inner streams arrive.
        """
        s = streams._derive("flatten")
        streams.on(lambda inner: inner.on(s.trigger))
        return s
