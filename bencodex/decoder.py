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
Decoding of bencoded bytes into a `BNode` tree.

The decoder is a recursive descent that dispatches on the next byte of the source:

    i: integer, see `bencodex.encoding.int`
    0-9: byte string, see `bencodex.encoding.bytes`
    l: list, see `bencodex.compound_encoding.list`
    d: dictionary, see `bencodex.compound_encoding.dict`

It pulls one byte at a time and never looks further ahead than the next byte, so any `Deserializer` works as a source,
including ones backed by a file or a generator.

>>> decode(b'd3:inti233e3:lstl7:bencodeee')
BDict({b'int': BInteger(233), b'lst': BList([BByteString(b'bencode')])})

Bytes after the top-level value are left unread, unless decoding is strict:

>>> decode(b'i42eXYZ')
BInteger(42)
>>> decode(b'i42eXYZ', strict=True)
Traceback (most recent call last):
...
bencodex.exception.TrailingDataError: trailing data after the top-level value (at byte 4)

`try_decode()` returns the error instead of raising it:

>>> try_decode(b'i42e')
Ok(BInteger(42))
>>> try_decode(b'i42').unwrap_err().position
3
"""

from collections.abc import Iterable
from typing import Any, Optional, Union

from structlog import get_logger

from bencodex.bnode import BByteString, BDict, BInteger, BList, BNode
from bencodex.compound_encoding.dict import decode_dict
from bencodex.compound_encoding.list import decode_list
from bencodex.conf.get_settings import get_global_settings
from bencodex.conf.settings import CodecSettings
from bencodex.constants import DICT_BEGIN, INTEGER_BEGIN, LIST_BEGIN, is_digit
from bencodex.encoding.bytes import decode_bytes
from bencodex.encoding.int import decode_int
from bencodex.exception import (
    DecodeError,
    InputTooLargeError,
    InvalidFormatError,
    MaxDepthExceededError,
    TrailingDataError,
    UnexpectedEofError,
)
from bencodex.serialization import Deserializer, OutOfDataError
from bencodex.serialization.adapters import MaxBytesExceededError
from bencodex.serialization.types import ReadableStream
from bencodex.utils.result import as_result

logger = get_logger()

DecodeSource = Union[Deserializer, bytes, bytearray, memoryview, ReadableStream, Iterable[int]]


class _NodeDecoder:
    """Decodes a single value of any kind, keeping track of how deep inside lists and dictionaries it is."""

    def __init__(self, max_depth: int) -> None:
        self._max_depth = max_depth
        self._depth = 0

    def __call__(self, deserializer: Deserializer) -> BNode:
        pos = deserializer.cur_pos()
        token = deserializer.peek_byte()
        if token == INTEGER_BEGIN:
            return BInteger(decode_int(deserializer))
        if is_digit(token):
            return BByteString(decode_bytes(deserializer))
        if token == LIST_BEGIN:
            self._enter(pos)
            try:
                return BList(decode_list(deserializer, self))
            finally:
                self._depth -= 1
        if token == DICT_BEGIN:
            self._enter(pos)
            try:
                return decode_dict(deserializer, self, BDict)
            finally:
                self._depth -= 1
        raise InvalidFormatError(f'unexpected byte {bytes([token])!r}', position=pos)

    def _enter(self, pos: int) -> None:
        if self._depth >= self._max_depth:
            raise MaxDepthExceededError(f'nesting is deeper than {self._max_depth} levels', position=pos)
        self._depth += 1


def _build_deserializer(source: Any) -> Deserializer:
    match source:
        case Deserializer():
            return source
        case str():
            raise TypeError('cannot decode str, encode it to bytes first')
        case bytes() | bytearray() | memoryview():
            return Deserializer.build_bytes_deserializer(source)
        case _ if callable(getattr(source, 'read', None)):
            return Deserializer.build_stream_deserializer(source)
        case Iterable():
            return Deserializer.build_iter_deserializer(source)
    raise TypeError(f'cannot decode from {type(source).__name__}')


def _decode_value(deserializer: Deserializer, *, max_depth: int, strict: bool) -> BNode:
    try:
        node = _NodeDecoder(max_depth)(deserializer)
        if strict and not deserializer.is_empty():
            raise TrailingDataError('trailing data after the top-level value', position=deserializer.cur_pos())
    except OutOfDataError as e:
        raise UnexpectedEofError('unexpected end of input', position=deserializer.cur_pos()) from e
    except MaxBytesExceededError as e:
        raise InputTooLargeError('input exceeds the configured maximum size', position=deserializer.cur_pos()) from e
    return node


def decode(
    source: DecodeSource,
    *,
    strict: Optional[bool] = None,
    settings: Optional[CodecSettings] = None,
) -> BNode:
    """ Decode exactly one bencoded value from `source`.

    `source` can be a `Deserializer`, a bytes-like object, a binary file-like object or an iterable of byte values.
    Nothing past the end of the value is read, unless `strict` is set, in which case the source must be exhausted
    right after it. `strict` and the limits default to what `settings` (or the global settings) say.

    Raises a subclass of `DecodeError` on malformed input, no partial tree is ever returned.
    """
    if settings is None:
        settings = get_global_settings()
    if strict is None:
        strict = settings.STRICT_TRAILING_DATA
    deserializer = _build_deserializer(source).with_optional_max_bytes(settings.MAX_INPUT_BYTES)
    try:
        return _decode_value(deserializer, max_depth=settings.MAX_DEPTH, strict=strict)
    except DecodeError as e:
        logger.new().debug('bencode decode failed', error=type(e).__name__, reason=e.reason, position=e.position)
        raise


@as_result(DecodeError)
def try_decode(
    source: DecodeSource,
    *,
    strict: Optional[bool] = None,
    settings: Optional[CodecSettings] = None,
) -> BNode:
    """Same as `decode()` but returns `Ok(node)` or `Err(error)` instead of raising a `DecodeError`."""
    return decode(source, strict=strict, settings=settings)
