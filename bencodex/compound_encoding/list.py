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
A bencode list has no length prefix, items are written one after the other between `l` and `e`.

Layout: l[value_0]...[value_N]e

>>> from bencodex.encoding.bytes import decode_bytes, encode_bytes
>>> se = Serializer.build_bytes_serializer()
>>> encode_list(se, [b'spam', b'eggs'], encode_bytes)
>>> bytes(se.finalize())
b'l4:spam4:eggse'

Breakdown of the result:

    l: list begins
    4:spam: b'spam' with its length prefix
    4:eggs: b'eggs' with its length prefix
    e: list ends

>>> de = Deserializer.build_bytes_deserializer(b'l4:spam4:eggse')
>>> decode_list(de, decode_bytes)
[b'spam', b'eggs']
>>> de.finalize()

>>> de = Deserializer.build_bytes_deserializer(b'le')
>>> decode_list(de, decode_bytes)
[]
"""

from collections.abc import Iterable
from typing import TypeVar

from bencodex.constants import END, LIST_BEGIN
from bencodex.exception import InvalidFormatError
from bencodex.serialization import Deserializer, Serializer

from . import Decoder, Encoder

T = TypeVar('T')


def encode_list(serializer: Serializer, values: Iterable[T], encoder: Encoder[T]) -> None:
    serializer.write_byte(LIST_BEGIN)
    for value in values:
        encoder(serializer, value)
    serializer.write_byte(END)


def decode_list(deserializer: Deserializer, decoder: Decoder[T]) -> list[T]:
    pos = deserializer.cur_pos()
    marker = deserializer.read_byte()
    if marker != LIST_BEGIN:
        raise InvalidFormatError(f'expected a list, got {bytes([marker])!r}', position=pos)
    values: list[T] = []
    while deserializer.peek_byte() != END:
        values.append(decoder(deserializer))
    deserializer.read_byte()
    return values
