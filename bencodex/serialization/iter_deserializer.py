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
A deserializer over any iterable of byte values (ints in `range(256)`), typically a generator.

>>> def gen():
...     yield from b'i42e'
>>> de = Deserializer.build_iter_deserializer(gen())
>>> de.read_byte() == ord('i')
True
>>> bytes(de.read_bytes(2))
b'42'
>>> de.is_empty()
False
>>> bytes(de.read_all())
b'e'
>>> de.is_empty()
True
"""

from itertools import islice
from typing import Iterable, Iterator

from typing_extensions import override

from .deserializer import Deserializer
from .exceptions import OutOfDataError


class IterDeserializer(Deserializer):
    def __init__(self, iterable: Iterable[int]) -> None:
        self._iter: Iterator[int] = iter(iterable)
        self._peeked: int | None = None
        self._pos = 0

    def _fill(self) -> bool:
        if self._peeked is None:
            byte = next(self._iter, None)
            if byte is None:
                return False
            if not 0 <= byte <= 255:
                raise ValueError(f'{byte!r} is not a byte value')
            self._peeked = byte
        return True

    @override
    def finalize(self) -> None:
        if not self.is_empty():
            raise ValueError('trailing data')

    @override
    def cur_pos(self) -> int:
        return self._pos

    @override
    def is_empty(self) -> bool:
        return not self._fill()

    @override
    def peek_byte(self) -> int:
        if not self._fill():
            raise OutOfDataError('not enough bytes to read')
        assert self._peeked is not None
        return self._peeked

    @override
    def read_byte(self) -> int:
        b = self.peek_byte()
        self._peeked = None
        self._pos += 1
        return b

    @override
    def read_bytes(self, n: int, *, exact: bool = True) -> bytes:
        if n < 0:
            raise ValueError('value cannot be negative')
        head = b''
        if n and self._peeked is not None:
            head = bytes([self._peeked])
            self._peeked = None
        # bytes() validates the range of every value
        data = head + bytes(islice(self._iter, n - len(head)))
        self._pos += len(data)
        if exact and len(data) < n:
            raise OutOfDataError('not enough bytes to read')
        return data

    @override
    def read_all(self) -> bytes:
        head = b'' if self._peeked is None else bytes([self._peeked])
        self._peeked = None
        data = head + bytes(self._iter)
        self._pos += len(data)
        return data
