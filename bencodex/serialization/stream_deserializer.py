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

r"""
A deserializer that pulls bytes from a binary file-like object.

Only `read()` is ever called on the stream, it is never seeked, so pipes and sockets (through
`socket.makefile('rb')`) work the same as regular files. A single byte is cached to serve `peek_byte()`.

>>> import io
>>> stream = io.BytesIO(b'4:spamtail')
>>> de = Deserializer.build_stream_deserializer(stream)
>>> chr(de.peek_byte())
'4'
>>> bytes(de.read_bytes(6))
b'4:spam'
>>> de.cur_pos()
6
>>> stream.tell()
6
>>> bytes(de.read_all())
b'tail'
>>> de.finalize()
"""

from typing_extensions import override

from .deserializer import Deserializer
from .exceptions import OutOfDataError
from .types import ReadableStream

# reads are split in chunks so a bogus length prefix can't make us allocate a huge buffer up front
_CHUNK_SIZE = 64 * 1024


def _check_binary(data: object) -> None:
    if not isinstance(data, (bytes, bytearray)):
        raise TypeError(f'stream returned {type(data).__name__}, open it in binary mode')


class StreamDeserializer(Deserializer):
    def __init__(self, stream: ReadableStream) -> None:
        self._stream = stream
        self._peeked: int | None = None
        self._pos = 0

    def _fill(self) -> bool:
        """Make sure there is a cached byte, returns False if the stream is exhausted."""
        if self._peeked is None:
            data = self._stream.read(1)
            _check_binary(data)
            if not data:
                return False
            self._peeked = data[0]
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
    def read_bytes(self, n: int, *, exact: bool = True) -> memoryview:
        if n < 0:
            raise ValueError('value cannot be negative')
        parts: list[bytes] = []
        remaining = n
        if remaining and self._peeked is not None:
            parts.append(bytes([self._peeked]))
            self._peeked = None
            remaining -= 1
        while remaining:
            chunk = self._stream.read(min(remaining, _CHUNK_SIZE))
            _check_binary(chunk)
            if not chunk:
                break
            parts.append(chunk)
            remaining -= len(chunk)
        data = b''.join(parts)
        self._pos += len(data)
        if exact and remaining:
            raise OutOfDataError('not enough bytes to read')
        return memoryview(data)

    @override
    def read_all(self) -> memoryview:
        parts: list[bytes] = []
        if self._peeked is not None:
            parts.append(bytes([self._peeked]))
            self._peeked = None
        while chunk := self._stream.read(_CHUNK_SIZE):
            _check_binary(chunk)
            parts.append(chunk)
        data = b''.join(parts)
        self._pos += len(data)
        return memoryview(data)
