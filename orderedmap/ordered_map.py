import logging
import reprlib
from typing import Any, Dict, Hashable, Iterator, List, Optional, Tuple

from orderedmap.errors import UnhashableKeyError
from orderedmap.utils.collections import OrderedKeySet

LOGGER = logging.getLogger(__name__)


class OrderedMap:
    """
    A map that remembers the order in which its keys were first inserted.

    Lookups go through a plain dict. A separate key sequence records
    insertion order and is only consulted for enumeration. Updating the value
    of an existing key keeps its position.

    Keys follow Python's own hashing and equality: instances of classes that
    do not define ``__eq__`` are distinct keys even if they hold equal data,
    while ints, strings, tuples and frozen dataclasses compare by value.

    Not thread-safe. Callers sharing a map between threads must guard every
    call with their own lock.
    """

    def __init__(self):
        self._entries: Dict[Hashable, Any] = {}
        self._order = OrderedKeySet()

    def put(self, key: Hashable, value: Any) -> None:
        """
        Insert ``key`` with ``value``, or replace the value of an existing key.

        A new key is appended to the end of the insertion order. An existing
        key keeps its position.

        Raises:
            UnhashableKeyError: if ``key`` is not hashable.
        """
        self._insert("put", key, value)

    def get(self, key: Hashable) -> Tuple[Optional[Any], bool]:
        """
        Look up ``key``.

        Returns:
            ``(value, True)`` when the key is present, ``(None, False)``
            otherwise.
        """
        try:
            return self._entries[key], True
        except KeyError:
            return None, False
        except TypeError as e:
            raise self._reject("get", key) from e

    def remove(self, key: Hashable) -> None:
        """Remove ``key`` and its value. Removing an absent key does nothing."""
        try:
            if key not in self._entries:
                return
        except TypeError as e:
            raise self._reject("remove", key) from e
        del self._entries[key]
        self._order.discard(key)

    def empty(self) -> bool:
        return not self._entries

    def size(self) -> int:
        return len(self._entries)

    def keys(self) -> List[Hashable]:
        """Return a new list of the keys, oldest first."""
        return self._order.to_list()

    def values(self) -> List[Any]:
        """Return a new list of the values, aligned with :meth:`keys`."""
        return [self._entries[key] for key in self._order]

    def items(self) -> List[Tuple[Hashable, Any]]:
        return [(key, self._entries[key]) for key in self._order]

    def _insert(self, operation: str, key, value) -> None:
        try:
            is_new = key not in self._entries
        except TypeError as e:
            raise self._reject(operation, key) from e
        self._entries[key] = value
        if is_new:
            self._order.add(key)

    def _reject(self, operation: str, key) -> UnhashableKeyError:
        LOGGER.debug("rejecting key of type %s in %s", type(key).__name__, operation)
        return UnhashableKeyError(operation, key)

    def __contains__(self, key) -> bool:
        try:
            return key in self._entries
        except TypeError as e:
            raise self._reject("__contains__", key) from e

    def __getitem__(self, key):
        try:
            return self._entries[key]
        except TypeError as e:
            raise self._reject("__getitem__", key) from e

    def __setitem__(self, key, value):
        self._insert("__setitem__", key, value)

    def __delitem__(self, key):
        try:
            del self._entries[key]
        except TypeError as e:
            raise self._reject("__delitem__", key) from e
        self._order.discard(key)

    def __len__(self):
        return self.size()

    def __bool__(self):
        return not self.empty()

    def __iter__(self) -> Iterator[Hashable]:
        # iterate over a snapshot so callers may mutate the map while looping
        return iter(self.keys())

    @reprlib.recursive_repr()
    def __repr__(self):
        return f"OrderedMap({self.items()!r})"
