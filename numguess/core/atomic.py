"""Minimal atomic cell offering compare-and-set semantics."""

from threading import Lock
from typing import Generic, TypeVar

T = TypeVar("T")


class AtomicReference(Generic[T]):
    """
    Holds a single value that can be swapped atomically.

    ---
    The lock is held only for one read, or one compare-and-store. Callers that need a read-modify-write
    build it as a retry loop around compare_and_set().
    """

    def __init__(self, initial: T) -> None:
        self._value = initial
        self._lock = Lock()

    def get(self) -> T:
        with self._lock:
            return self._value

    def compare_and_set(self, expected: T, new: T) -> bool:
        """Store `new` only if the current value still equals `expected`. Returns whether the store happened."""
        with self._lock:
            if self._value != expected:
                return False
            self._value = new
            return True
