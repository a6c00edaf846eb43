# Copyright 2025 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
The value tree that the codec decodes into and encodes from.

`BNode` is a closed union of four variants: `BInteger`, `BByteString`, `BList` and `BDict`. Every node has the same
accessor methods (`as_integer()`, `as_byte_string()`, `as_text()`, `as_list()`, `as_dictionary()`), which return
`None` when the node is of another variant, so callers can branch on the shape of a tree without catching anything:

>>> node = BDict({'int': 233, 'lst': ['bencode']})
>>> node['int'].as_integer()
233
>>> node['lst'].as_integer() is None
True
>>> node['lst'].as_list()[0].as_text()
'bencode'

Plain Python values are converted with `to_bnode()`, and the container constructors do the same for their children,
so a tree can be built without wrapping each value by hand:

>>> to_bnode([1, b'two', {'three': 3}])
BList([BInteger(1), BByteString(b'two'), BDict({b'three': BInteger(3)})])

`BDict` keys are byte strings, `str` keys are accepted and UTF-8 encoded. The entries are always kept in
byte-lexicographic order of their keys, regardless of insertion order:

>>> list(BDict({'foo': 42, 'bar': 'spam'}))
[b'bar', b'foo']
"""

from __future__ import annotations

from abc import ABC
from collections.abc import Iterable, Iterator, Mapping, MutableMapping, MutableSequence, Sequence
from dataclasses import dataclass
from typing import Any, Optional, Union, overload

from sortedcontainers import SortedDict

from bencodex.constants import INT_MAX, INT_MIN

KeyLike = Union[bytes, bytearray, memoryview, str, 'BByteString']


class BNode(ABC):
    """Base class of every node in a value tree, see the module docstring."""

    __slots__ = ()

    def as_integer(self) -> Optional[int]:
        return None

    def as_byte_string(self) -> Optional[bytes]:
        return None

    def as_text(self, encoding: str = 'utf-8') -> Optional[str]:
        """The byte string decoded as text, None if this isn't a byte string or it isn't valid in `encoding`."""
        data = self.as_byte_string()
        if data is None:
            return None
        try:
            return data.decode(encoding)
        except UnicodeDecodeError:
            return None

    def as_list(self) -> Optional[BList]:
        return None

    def as_dictionary(self) -> Optional[BDict]:
        return None

    def encode(self) -> bytes:
        """Canonical bencode of this node."""
        from bencodex.encoder import encode
        return encode(self)

    def __bytes__(self) -> bytes:
        return self.encode()


@dataclass(frozen=True, slots=True)
class BInteger(BNode):
    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f'expected int, got {type(self.value).__name__}')
        if not INT_MIN <= self.value <= INT_MAX:
            raise ValueError(f'{self.value} does not fit in 64 bits')

    def as_integer(self) -> int:
        return self.value

    def __repr__(self) -> str:
        return f'BInteger({self.value!r})'


@dataclass(frozen=True, slots=True)
class BByteString(BNode):
    value: bytes

    def __post_init__(self) -> None:
        value: Any = self.value
        if isinstance(value, str):
            value = value.encode('utf-8')
        elif isinstance(value, (bytearray, memoryview)):
            value = bytes(value)
        elif not isinstance(value, bytes):
            raise TypeError(f'expected bytes or str, got {type(value).__name__}')
        # XXX: frozen dataclass, the normalized value has to bypass __setattr__
        object.__setattr__(self, 'value', value)

    def as_byte_string(self) -> bytes:
        return self.value

    def __repr__(self) -> str:
        return f'BByteString({self.value!r})'


class BList(BNode, MutableSequence[BNode]):
    """An ordered list of nodes, the order is kept exactly as given."""

    __slots__ = ('_items',)

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._items: list[BNode] = [to_bnode(item) for item in items]

    def as_list(self) -> BList:
        return self

    @overload
    def __getitem__(self, index: int) -> BNode:
        ...

    @overload
    def __getitem__(self, index: slice) -> BList:
        ...

    def __getitem__(self, index: Union[int, slice]) -> Union[BNode, BList]:
        if isinstance(index, slice):
            return BList(self._items[index])
        return self._items[index]

    @overload
    def __setitem__(self, index: int, value: Any) -> None:
        ...

    @overload
    def __setitem__(self, index: slice, value: Iterable[Any]) -> None:
        ...

    def __setitem__(self, index: Union[int, slice], value: Any) -> None:
        if isinstance(index, slice):
            self._items[index] = [to_bnode(item) for item in value]
        else:
            self._items[index] = to_bnode(value)

    def __delitem__(self, index: Union[int, slice]) -> None:
        del self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[BNode]:
        return iter(self._items)

    def insert(self, index: int, value: Any) -> None:
        self._items.insert(index, to_bnode(value))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BList):
            return NotImplemented
        return self._items == other._items

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f'BList({self._items!r})'


class BDict(BNode, MutableMapping[bytes, BNode]):
    """A mapping of byte-string keys to nodes, iterated in byte-lexicographic key order.

    Assigning to an existing key replaces its value. Duplicate keys are only an error when decoding.
    """

    __slots__ = ('_entries',)

    def __init__(self, entries: Union[Mapping[Any, Any], Iterable[tuple[Any, Any]]] = ()) -> None:
        self._entries: SortedDict = SortedDict()
        self.update(entries)

    def as_dictionary(self) -> BDict:
        return self

    def __getitem__(self, key: KeyLike) -> BNode:
        normalized = _lookup_key(key)
        if normalized is None:
            raise KeyError(key)
        return self._entries[normalized]

    def __setitem__(self, key: KeyLike, value: Any) -> None:
        self._entries[to_key(key)] = to_bnode(value)

    def __delitem__(self, key: KeyLike) -> None:
        normalized = _lookup_key(key)
        if normalized is None:
            raise KeyError(key)
        del self._entries[normalized]

    def __iter__(self) -> Iterator[bytes]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        normalized = _lookup_key(key)
        return normalized is not None and normalized in self._entries

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BDict):
            return NotImplemented
        return self._entries == other._entries

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f'BDict({dict(self._entries)!r})'


def to_key(key: KeyLike) -> bytes:
    """Normalize a dictionary key to bytes, `str` keys are UTF-8 encoded."""
    match key:
        case bytes():
            return key
        case bytearray() | memoryview():
            return bytes(key)
        case str():
            return key.encode('utf-8')
        case BByteString():
            return key.value
    raise TypeError(f'dictionary keys must be bytes or str, got {type(key).__name__}')


def _lookup_key(key: object) -> Optional[bytes]:
    # lookups never raise TypeError, a key of an unsupported type is just never present
    if isinstance(key, (bytes, bytearray, memoryview, str, BByteString)):
        return to_key(key)
    return None


def to_bnode(value: Any) -> BNode:
    """ Convert a plain Python value into a node.

    - `int` becomes `BInteger` (`bool` is rejected)
    - `bytes`, `bytearray`, `memoryview` and `str` (UTF-8 encoded) become `BByteString`
    - any other sequence, like `list` or `tuple`, becomes `BList`
    - any mapping becomes `BDict`
    - nodes are returned as they are

    >>> to_bnode(42)
    BInteger(42)
    >>> to_bnode('spam')
    BByteString(b'spam')
    >>> to_bnode((1, 2))
    BList([BInteger(1), BInteger(2)])
    >>> to_bnode(1.5)
    Traceback (most recent call last):
    ...
    TypeError: cannot convert float to a bencode value
    """
    match value:
        case BNode():
            return value
        case bool():
            raise TypeError('cannot convert bool to a bencode value')
        case int():
            return BInteger(value)
        case bytes() | bytearray() | memoryview() | str():
            return BByteString(value)
        case Mapping():
            return BDict(value)
        case Sequence():
            return BList(value)
    raise TypeError(f'cannot convert {type(value).__name__} to a bencode value')


def from_bnode(node: BNode) -> Any:
    """ Convert a node back into plain Python values: `int`, `bytes`, `list` and `dict` with `bytes` keys.

    >>> from_bnode(BDict({'int': 233, 'lst': ['bencode']}))
    {b'int': 233, b'lst': [b'bencode']}
    """
    match node:
        case BInteger(value) | BByteString(value):
            return value
        case BList():
            return [from_bnode(item) for item in node]
        case BDict():
            return {key: from_bnode(value) for key, value in node.items()}
    raise TypeError(f'expected a BNode, got {type(node).__name__}')
