from abc import ABC, abstractmethod
from .types import *

# --- cursor protocol ---

class IEnumerator(ABC, Generic[T]):
    """single-use, stateful cursor over a sequence"""

    @abstractmethod
    def has_next(self) -> bool:
        """true if another element can be produced. repeated calls must not advance"""
        pass

    @abstractmethod
    def next(self) -> T:
        """return the next element and advance, or NO_VALUE when exhausted"""
        pass


# --- array-backed cursor ---

class ArrayEnumerator(IEnumerator[T]):
    def __init__(self, array: Sequence[T], index: int = 0):
        self.array = array  # not copied, see ArrayEnumerable
        self.index = index

    def has_next(self) -> bool:
        return self.index < len(self.array)

    def next(self) -> T:
        if self.index >= len(self.array):
            return NO_VALUE
        value = self.array[self.index]
        self.index += 1
        return value


# --- mapped cursor ---

class MapEnumerator(IEnumerator[U]):
    def __init__(self, enumerator: IEnumerator[T], selector: Selector[T, U]):
        self.enumerator = enumerator
        self.selector = selector

    def has_next(self) -> bool:
        return self.enumerator.has_next()

    def next(self) -> U:
        value = self.enumerator.next()
        # never hand the sentinel to the caller's selector
        if value is NO_VALUE:
            return NO_VALUE
        return self.selector(value)


# --- filtered cursor ---

class _Lookahead(NamedTuple):
    """result of one scan: whether a match was found and the matched value"""
    found: bool
    value: Any


class FindAllEnumerator(IEnumerator[T]):
    """
    filtering cursor with a one-element lookahead buffer.

    state is either "needs lookahead" (self._lookahead is None) or
    "lookahead ready" (a _Lookahead). has_next() and next() both scan only
    in the first state, so repeated has_next() calls are pure reads and each
    upstream element reaches the predicate at most once.
    """

    def __init__(self, enumerator: IEnumerator[T], predicate: Predicate[T]):
        self.enumerator = enumerator
        self.predicate = predicate
        self._lookahead: Optional[_Lookahead] = None

    def _prepare_next_value(self) -> _Lookahead:
        if self._lookahead is None:
            result = _Lookahead(False, NO_VALUE)
            while self.enumerator.has_next():
                value = self.enumerator.next()
                if self.predicate(value):
                    result = _Lookahead(True, value)
                    break
            self._lookahead = result
        return self._lookahead

    def has_next(self) -> bool:
        return self._prepare_next_value().found

    def next(self) -> T:
        lookahead = self._prepare_next_value()
        self._lookahead = None
        return lookahead.value
