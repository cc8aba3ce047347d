"""
Chainable in-memory collection.

Provides fluent filtering, grouping and ordering over a list of items.
Every query returns a new collection; the wrapped list is never modified.
"""

from collections.abc import Iterable
from typing import TypeVar, Generic, Callable, List, Dict, Optional, Any, Union, Hashable

T = TypeVar('T')


class QueryableCollection(Generic[T]):
    """
    A lightweight, chainable collection for filtering and querying in-memory data.

    Examples:
        # Predicate filtering
        notams.filter(lambda n: n.is_permanent).all()

        # Attribute matching
        notams.where(field_a='YSSY').first()

        # Sorting
        notams.order_by(lambda n: n.notam_id).take(10).all()
    """

    def __init__(self, items: Union[List[T], Iterable]):
        """
        Initialize a queryable collection.

        Args:
            items: List or iterable of items to wrap
        """
        self._items: List[T] = list(items)

    def _new_collection(self, items: List[T]) -> 'QueryableCollection[T]':
        return self.__class__(items)

    def filter(self, predicate: Callable[[T], bool]) -> 'QueryableCollection[T]':
        """
        Filter items using a predicate function.

        Args:
            predicate: Function that takes an item and returns True to include it

        Returns:
            New collection with filtered items
        """
        return self._new_collection([item for item in self._items if predicate(item)])

    def where(self, **kwargs) -> 'QueryableCollection[T]':
        """
        Filter items by attribute equality. All conditions must match.

        Examples:
            notams.where(notam_id='A1234/24', is_permanent=False)
        """
        def matches(item: T) -> bool:
            return all(getattr(item, key, None) == value for key, value in kwargs.items())
        return self.filter(matches)

    def first(self) -> Optional[T]:
        """Return the first item or None if the collection is empty."""
        return self._items[0] if self._items else None

    def all(self) -> List[T]:
        """Return a copy of all items as a list."""
        return list(self._items)

    def count(self) -> int:
        return len(self._items)

    def exists(self) -> bool:
        return len(self._items) > 0

    def group_by(self, key_func: Callable[[T], Hashable]) -> Dict[Any, List[T]]:
        """
        Group items by a key function, keeping first-seen key order.

        Args:
            key_func: Function that returns a grouping key for each item

        Returns:
            Dictionary mapping keys to lists of items
        """
        result: Dict[Any, List[T]] = {}
        for item in self._items:
            result.setdefault(key_func(item), []).append(item)
        return result

    def order_by(self, key_func: Callable[[T], Any], reverse: bool = False) -> 'QueryableCollection[T]':
        """
        Sort items by a key function (stable).

        Args:
            key_func: Function that returns a sort key for each item
            reverse: If True, sort in descending order
        """
        return self._new_collection(sorted(self._items, key=key_func, reverse=reverse))

    def take(self, n: int) -> 'QueryableCollection[T]':
        return self._new_collection(self._items[:n])

    def map(self, transform: Callable[[T], Any]) -> List[Any]:
        """Apply a function to each item and return the results."""
        return [transform(item) for item in self._items]

    def __iter__(self):
        return iter(self._items)

    def __len__(self):
        return len(self._items)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return self._new_collection(self._items[index])
        return self._items[index]

    def __bool__(self):
        return len(self._items) > 0

    def __repr__(self):
        count = len(self._items)
        preview = [repr(item) for item in self._items[:3]]
        if count > 3:
            preview.append('...')
        return f"{self.__class__.__name__}([{', '.join(preview)}], count={count})"

    # Set operations use object identity, preserving order of the left operand

    def __or__(self, other: 'QueryableCollection[T]') -> 'QueryableCollection[T]':
        """Union operator (|) - items from both collections without duplicates."""
        seen = set()
        result = []
        for item in list(self._items) + list(other._items):
            if id(item) not in seen:
                seen.add(id(item))
                result.append(item)
        return self._new_collection(result)

    def __and__(self, other: 'QueryableCollection[T]') -> 'QueryableCollection[T]':
        """Intersection operator (&) - items present in both collections."""
        other_ids = {id(item) for item in other._items}
        return self._new_collection([item for item in self._items if id(item) in other_ids])

    def __sub__(self, other: 'QueryableCollection[T]') -> 'QueryableCollection[T]':
        """Difference operator (-) - items in this collection but not the other."""
        other_ids = {id(item) for item in other._items}
        return self._new_collection([item for item in self._items if id(item) not in other_ids])
