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
A bencode dictionary is a sequence of byte-string keys, each followed by its value, between `d` and `e`.

Layout: d[key_0][value_0]...[key_N][value_N]e

Keys are always written in byte-lexicographic order, whatever the iteration order of the mapping that is given:

>>> from bencodex.encoding.int import decode_int, encode_int
>>> se = Serializer.build_bytes_serializer()
>>> encode_dict(se, {b'foo': 42, b'bar': -1}, encode_int)
>>> bytes(se.finalize())
b'd3:bari-1e3:fooi42ee'

Breakdown of the result:

    d: dictionary begins
    3:bar: key b'bar'
    i-1e: its value
    3:foo: key b'foo'
    i42e: its value
    e: dictionary ends

When decoding, keys are accepted in any order, the builder receives the entries in the order they were read:

>>> de = Deserializer.build_bytes_deserializer(b'd3:fooi42e3:bari-1ee')
>>> decode_dict(de, decode_int, dict)
{b'foo': 42, b'bar': -1}
>>> de.finalize()

A key can only appear once:

>>> de = Deserializer.build_bytes_deserializer(b'd3:fooi1e3:fooi2ee')
>>> try:
...     decode_dict(de, decode_int, dict)
... except DuplicateKeyError as e:
...     print(e)
duplicate dictionary key b'foo' (at byte 9)
"""

from collections.abc import Iterable, Mapping
from typing import Callable, TypeVar

from bencodex.constants import DICT_BEGIN, END, is_digit
from bencodex.encoding.bytes import decode_bytes, encode_bytes
from bencodex.exception import DuplicateKeyError, InvalidFormatError
from bencodex.serialization import Deserializer, Serializer

from . import Decoder, Encoder

VT = TypeVar('VT')
R = TypeVar('R', bound=Mapping)


def encode_dict(serializer: Serializer, values_mapping: Mapping[bytes, VT], value_encoder: Encoder[VT]) -> None:
    serializer.write_byte(DICT_BEGIN)
    # XXX: sorted() is linear on input that is already sorted, which is the case for BDict
    for key in sorted(values_mapping):
        encode_bytes(serializer, key)
        value_encoder(serializer, values_mapping[key])
    serializer.write_byte(END)


def decode_dict(
    deserializer: Deserializer,
    value_decoder: Decoder[VT],
    mapping_builder: Callable[[Iterable[tuple[bytes, VT]]], R],
) -> R:
    pos = deserializer.cur_pos()
    marker = deserializer.read_byte()
    if marker != DICT_BEGIN:
        raise InvalidFormatError(f'expected a dictionary, got {bytes([marker])!r}', position=pos)
    entries: dict[bytes, VT] = {}
    while True:
        pos = deserializer.cur_pos()
        token = deserializer.peek_byte()
        if token == END:
            deserializer.read_byte()
            break
        if not is_digit(token):
            raise InvalidFormatError('dictionary keys must be byte strings', position=pos)
        key = decode_bytes(deserializer)
        if key in entries:
            raise DuplicateKeyError(key, position=pos)
        entries[key] = value_decoder(deserializer)
    return mapping_builder(entries.items())
