"""Enumerations for list variants and stream listener error handling."""

from enum import Enum


class Tag(Enum):
    """Discriminant for the two persistent list variants."""

    EMPTY = "EmptyLyst"
    NODE = "Lyst"


class ListenerErrorPolicy(Enum):
    """What a stream does when one of its listeners raises during ``trigger``."""

    PROPAGATE = "propagate"
    ISOLATE = "isolate"

    @classmethod
    def parse(cls, value: "str | ListenerErrorPolicy") -> "ListenerErrorPolicy":
        """Build a policy from its name or value, case-insensitively.

        Args:
            value: A policy, or a string such as ``"isolate"`` / ``"ISOLATE"``.

        Returns:
            The matching policy.

        Raises:
            ValueError: If the string names no known policy.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(
                f"Unknown listener error policy '{value}'. "
                f"Expected one of: {[p.value for p in cls]}."
            ) from None
