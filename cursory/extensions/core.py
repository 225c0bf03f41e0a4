from __future__ import annotations
import logging
import typing
from functools import cmp_to_key
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable, ArrayEnumerable

logger = logging.getLogger(__name__)


class _CoreOperations(Generic[T]):
    """
    the sequence algebra. every operation here is written only against
    get_enumerator(); variants override some of them with direct lookups.
    """

    # --- lazy composition ---

    def find_all(self: 'Enumerable[T]', predicate: Predicate[T]) -> 'Enumerable[T]':
        """lazily keep the elements matching predicate"""
        from ..enumerable import FindAllEnumerable
        return FindAllEnumerable(self, predicate)

    def map(self: 'Enumerable[T]', selector: Selector[T, U]) -> 'Enumerable[U]':
        """lazily project each element"""
        from ..enumerable import MapEnumerable
        return MapEnumerable(self, selector)

    # --- traversal ---

    def for_each(self: 'Enumerable[T]', action: Action[T]) -> None:
        """call action on every element, in order. eager"""
        enumerator = self.get_enumerator()
        while enumerator.has_next():
            action(enumerator.next())

    def index_of(self: 'Enumerable[T]', predicate: Predicate[T]) -> int:
        """zero-based position of the first match, or -1"""
        i = 0
        enumerator = self.get_enumerator()
        while enumerator.has_next():
            if predicate(enumerator.next()):
                return i
            i += 1
        return -1

    def find(self: 'Enumerable[T]', predicate: Predicate[T]) -> T:
        """first element matching predicate, or NO_VALUE"""
        enumerator = self.get_enumerator()
        while enumerator.has_next():
            value = enumerator.next()
            if predicate(value):
                return value
        return NO_VALUE

    def contains(self: 'Enumerable[T]', predicate: Predicate[T]) -> bool:
        enumerator = self.get_enumerator()
        while enumerator.has_next():
            if predicate(enumerator.next()):
                return True
        return False

    def contains_value(self: 'Enumerable[T]', value: T) -> bool:
        return self.contains(lambda item: item == value)

    def all_pass(self: 'Enumerable[T]', predicate: Predicate[T]) -> bool:
        """true when no element is a counterexample. vacuously true when empty"""
        return not self.contains(lambda item: not predicate(item))

    # --- aggregation ---

    def max(self: 'Enumerable[T]', comparer: Comparer[T]) -> T:
        """
        largest element under comparer, or NO_VALUE when empty.
        the best is replaced only on strict improvement, so ties keep the first.
        """
        has_value = False
        best = NO_VALUE
        enumerator = self.get_enumerator()
        while enumerator.has_next():
            value = enumerator.next()
            if not has_value or comparer(best, value) < 0:
                has_value = True
                best = value
        return best

    def min(self: 'Enumerable[T]', comparer: Comparer[T]) -> T:
        """smallest element under comparer, first-wins on ties"""
        return self.max(lambda a, b: -comparer(a, b))

    def empty(self: 'Enumerable[T]') -> bool:
        return not self.get_enumerator().has_next()

    def length(self: 'Enumerable[T]') -> int:
        result = 0
        enumerator = self.get_enumerator()
        while enumerator.has_next():
            enumerator.next()
            result += 1
        return result

    # --- materialization ---

    def sort(self: 'Enumerable[T]', comparer: Comparer[T]) -> 'ArrayEnumerable[T]':
        """
        eager stable sort with a three-way comparer (negative, zero, positive).
        returns a new array-backed sequence; this one is left untouched.
        """
        from ..enumerable import ArrayEnumerable
        data = self.to_array()
        data.sort(key=cmp_to_key(comparer))
        logger.debug("sorted %d elements from %r", len(data), self)
        return ArrayEnumerable(data)

    def to_array(self: 'Enumerable[T]') -> List[T]:
        """a new list on every call"""
        result = []
        enumerator = self.get_enumerator()
        while enumerator.has_next():
            result.append(enumerator.next())
        return result

    def save(self: 'Enumerable[T]') -> 'ArrayEnumerable[T]':
        """
        run the chain once and freeze the result in an array-backed sequence,
        so upstream selectors and predicates are not re-run on later traversals.
        """
        from ..enumerable import ArrayEnumerable
        data = self.to_array()
        logger.debug("saved %d elements from %r", len(data), self)
        return ArrayEnumerable(data)

    # --- positional access ---

    def first(self: 'Enumerable[T]') -> T:
        enumerator = self.get_enumerator()
        return enumerator.next() if enumerator.has_next() else NO_VALUE

    def last(self: 'Enumerable[T]') -> T:
        result = NO_VALUE
        enumerator = self.get_enumerator()
        while enumerator.has_next():
            result = enumerator.next()
        return result

    def nth(self: 'Enumerable[T]', index: int) -> T:
        """element at index, or NO_VALUE. negative indexes do not wrap"""
        if index < 0:
            return NO_VALUE
        i = 0
        enumerator = self.get_enumerator()
        while enumerator.has_next():
            value = enumerator.next()
            if i == index:
                return value
            i += 1
        return NO_VALUE

    def first_or_default(self: 'Enumerable[T]', default: T) -> T:
        value = self.first()
        return default if value is NO_VALUE else value

    def last_or_default(self: 'Enumerable[T]', default: T) -> T:
        value = self.last()
        return default if value is NO_VALUE else value

    def nth_or_default(self: 'Enumerable[T]', index: int, default: T) -> T:
        value = self.nth(index)
        return default if value is NO_VALUE else value
