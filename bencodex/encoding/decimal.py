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
This module implements the canonical decimal text shared by integers (`i42e`) and byte-string lengths (`4:spam`).

Canonical means: ASCII digits only, no leading zeros unless the number is exactly `0`, no `+` sign, and when a sign
is allowed, a single leading `-` that is never followed by `0`. Values must fit in a signed 64-bit integer.

>>> se = Serializer.build_bytes_serializer()
>>> encode_decimal(se, 0)
>>> encode_decimal(se, -42)
>>> encode_decimal(se, 1024)
>>> bytes(se.finalize())
b'0-421024'

The decoder reads up to and including the terminator byte, which is not part of the number:

>>> from bencodex.exception import InvalidIntegerError, InvalidLengthError
>>> de = Deserializer.build_bytes_deserializer(b'-42e')
>>> decode_decimal(de, terminator=ord('e'), signed=True, error_class=InvalidIntegerError)
-42
>>> de.finalize()

>>> de = Deserializer.build_bytes_deserializer(b'007:')
>>> try:
...     decode_decimal(de, terminator=ord(':'), signed=False, error_class=InvalidLengthError)
... except InvalidLengthError as e:
...     print(e)
leading zeros are not allowed (at byte 1)

>>> de = Deserializer.build_bytes_deserializer(b'-0e')
>>> try:
...     decode_decimal(de, terminator=ord('e'), signed=True, error_class=InvalidIntegerError)
... except InvalidIntegerError as e:
...     print(e)
negative zero is not allowed (at byte 1)
"""

from bencodex.constants import DIGIT_ZERO, INT_MAX, INT_MIN, MAX_DECIMAL_DIGITS, MINUS, is_digit
from bencodex.exception import DecodeError
from bencodex.serialization import Deserializer, Serializer


def encode_decimal(serializer: Serializer, number: int) -> None:
    """ Write the canonical decimal text of a number, without any terminator.

    Python's own `str(int)` already is canonical.
    """
    if not INT_MIN <= number <= INT_MAX:
        raise ValueError('too big to encode')
    serializer.write_bytes(str(number).encode('ascii'))


def decode_decimal(
    deserializer: Deserializer,
    *,
    terminator: int,
    signed: bool,
    error_class: type[DecodeError],
) -> int:
    """ Read a canonical decimal number up to (and consuming) the given terminator byte.

    Violations are reported with `error_class`, at the position of the offending byte. Running out of data before the
    terminator raises `OutOfDataError` from the deserializer.
    """
    start = deserializer.cur_pos()
    negative = False
    digits = bytearray()
    while True:
        pos = deserializer.cur_pos()
        byte = deserializer.read_byte()
        if byte == terminator:
            break
        if signed and byte == MINUS and not negative and not digits:
            negative = True
            continue
        if not is_digit(byte):
            raise error_class(f'unexpected byte {bytes([byte])!r}', position=pos)
        if negative and not digits and byte == DIGIT_ZERO:
            raise error_class('negative zero is not allowed', position=pos)
        if digits == b'0':
            raise error_class('leading zeros are not allowed', position=pos)
        if len(digits) == MAX_DECIMAL_DIGITS:
            raise error_class('number does not fit in 64 bits', position=start)
        digits.append(byte)
    if not digits:
        raise error_class('missing digits', position=pos)
    number = int(digits)
    if negative:
        number = -number
    if not INT_MIN <= number <= INT_MAX:
        raise error_class('number does not fit in 64 bits', position=start)
    return number
