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
This module implements bencode integers: `i<canonical decimal>e`.

>>> se = Serializer.build_bytes_serializer()
>>> encode_int(se, 0)  # writes i0e
>>> encode_int(se, 42)  # writes i42e
>>> encode_int(se, -1024)  # writes i-1024e
>>> bytes(se.finalize())
b'i0ei42ei-1024e'

>>> de = Deserializer.build_bytes_deserializer(b'i0ei42ei-1024e')
>>> decode_int(de)
0
>>> decode_int(de)
42
>>> decode_int(de)
-1024
>>> de.finalize()

>>> for raw in [b'i00e', b'i-0e', b'i+3e', b'ie', b'i9223372036854775808e']:
...     try:
...         decode_int(Deserializer.build_bytes_deserializer(raw))
...     except InvalidIntegerError as e:
...         print(raw, '->', e)
b'i00e' -> leading zeros are not allowed (at byte 2)
b'i-0e' -> negative zero is not allowed (at byte 2)
b'i+3e' -> unexpected byte b'+' (at byte 1)
b'ie' -> missing digits (at byte 1)
b'i9223372036854775808e' -> number does not fit in 64 bits (at byte 1)
"""

from bencodex.constants import END, INTEGER_BEGIN
from bencodex.exception import InvalidFormatError, InvalidIntegerError
from bencodex.serialization import Deserializer, Serializer

from .decimal import decode_decimal, encode_decimal


def encode_int(serializer: Serializer, number: int) -> None:
    """ Encode an integer in its canonical form.

    This modules's docstring has more details and examples.
    """
    serializer.write_byte(INTEGER_BEGIN)
    encode_decimal(serializer, number)
    serializer.write_byte(END)


def decode_int(deserializer: Deserializer) -> int:
    """ Decode an integer, rejecting any non-canonical literal.

    This modules's docstring has more details and examples.
    """
    pos = deserializer.cur_pos()
    marker = deserializer.read_byte()
    if marker != INTEGER_BEGIN:
        raise InvalidFormatError(f'expected an integer, got {bytes([marker])!r}', position=pos)
    return decode_decimal(deserializer, terminator=END, signed=True, error_class=InvalidIntegerError)
