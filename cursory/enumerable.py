from __future__ import annotations

from abc import ABC, abstractmethod
from .types import *
from .enumerators import IEnumerator, ArrayEnumerator, MapEnumerator, FindAllEnumerator

# --- core functionality ---
from .extensions.core import _CoreOperations

# --- accessors ---
from .extensions.terminal import TerminalAccessor

# --- abstract base class ---

class IEnumerable(ABC, Generic[T]):
    @abstractmethod
    def get_enumerator(self) -> IEnumerator[T]:
        """a fresh, independently positioned cursor on every call"""
        pass

# --- main enumerable class ---

class Enumerable(
    IEnumerable[T],
    _CoreOperations[T]
):
    """a lazy, cursor-driven sequence. subclasses supply get_enumerator()"""
    def __init__(self):
        # --- initialize accessors ---
        self.to = TerminalAccessor(self)

    def __iter__(self) -> Iterator[T]:
        enumerator = self.get_enumerator()
        while enumerator.has_next():
            yield enumerator.next()

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

# --- array-backed sequence ---

class ArrayEnumerable(Enumerable[T]):
    """
    wraps a concrete sequence (list, tuple, range) without copying it.
    mutating the wrapped collection while a cursor is live gives undefined
    results; call save() or wrap a copy if the caller keeps writing to it.
    """

    def __init__(self, array: Sequence[T]):
        super().__init__()
        self.array = array

    def get_enumerator(self) -> IEnumerator[T]:
        return ArrayEnumerator(self.array, 0)

    def contains_value(self, value: T) -> bool:
        # == only, as in the generic path; `in` also matches by identity
        return any(item == value for item in self.array)

    def empty(self) -> bool:
        return len(self.array) == 0

    def length(self) -> int:
        return len(self.array)

    def to_array(self) -> List[T]:
        return list(self.array)

    def first(self) -> T:
        return self.array[0] if len(self.array) else NO_VALUE

    def last(self) -> T:
        return self.array[-1] if len(self.array) else NO_VALUE

    def nth(self, index: int) -> T:
        if 0 <= index < len(self.array):
            return self.array[index]
        return NO_VALUE

    # only the array-backed variant is sized; list() calls len() before iterating
    def __len__(self) -> int:
        return len(self.array)

    def __repr__(self) -> str:
        return f"ArrayEnumerable(length={len(self.array)})"

# --- mapped sequence ---

class MapEnumerable(Enumerable[U]):
    """lazy projection. cardinality and positions match the upstream sequence"""

    def __init__(self, enumerable: Enumerable[T], selector: Selector[T, U]):
        super().__init__()
        self.enumerable = enumerable
        self.selector = selector

    def get_enumerator(self) -> IEnumerator[U]:
        return MapEnumerator(self.enumerable.get_enumerator(), self.selector)

    def _select(self, value: T) -> U:
        return NO_VALUE if value is NO_VALUE else self.selector(value)

    def empty(self) -> bool:
        return self.enumerable.empty()

    def length(self) -> int:
        return self.enumerable.length()

    def first(self) -> U:
        return self._select(self.enumerable.first())

    def last(self) -> U:
        return self._select(self.enumerable.last())

    def nth(self, index: int) -> U:
        return self._select(self.enumerable.nth(index))

    def __repr__(self) -> str:
        return f"MapEnumerable({self.enumerable!r})"

# --- filtered sequence ---

class FindAllEnumerable(Enumerable[T]):
    """lazy filter. no shortcuts: every operation walks a FindAllEnumerator"""

    def __init__(self, enumerable: Enumerable[T], predicate: Predicate[T]):
        super().__init__()
        self.enumerable = enumerable
        self.predicate = predicate

    def get_enumerator(self) -> IEnumerator[T]:
        return FindAllEnumerator(self.enumerable.get_enumerator(), self.predicate)

    def __repr__(self) -> str:
        return f"FindAllEnumerable({self.enumerable!r})"
