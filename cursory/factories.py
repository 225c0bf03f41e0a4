import typing
from collections.abc import Sequence as _ConcreteSequence
from .types import *

if typing.TYPE_CHECKING:
    from .enumerable import ArrayEnumerable

def from_list(data: Iterable[T]) -> 'ArrayEnumerable[T]':
    """
    wrap an ordered collection. lists, tuples and ranges are wrapped as-is
    (later writes to them show through); other iterables are read once into a list.
    """
    from .enumerable import ArrayEnumerable
    if isinstance(data, _ConcreteSequence) and not isinstance(data, (str, bytes)):
        return ArrayEnumerable(data)
    return ArrayEnumerable(list(data))

def from_range(start: int, count: int) -> 'ArrayEnumerable[int]':
    """create enumerable from range"""
    from .enumerable import ArrayEnumerable
    if count < 0: raise ValueError(f"count must be non-negative, got {count}")
    return ArrayEnumerable(range(start, start + count))

def repeat(item: T, count: int) -> 'ArrayEnumerable[T]':
    """create enumerable with repeated item"""
    from .enumerable import ArrayEnumerable
    if count < 0: raise ValueError(f"count must be non-negative, got {count}")
    return ArrayEnumerable([item] * count)

def empty() -> 'ArrayEnumerable[Any]':
    """create empty enumerable"""
    from .enumerable import ArrayEnumerable
    return ArrayEnumerable([])

# --- aliases ---
A = from_list
