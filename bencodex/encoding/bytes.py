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
This module implements bencode byte strings: the length in canonical decimal, a colon, and the raw bytes.

>>> se = Serializer.build_bytes_serializer()
>>> encode_bytes(se, b'spam')  # writes 4:spam
>>> encode_bytes(se, b'')  # writes 0:
>>> encode_bytes(se, b'\x00\xff')  # any byte goes, it doesn't have to be text
>>> bytes(se.finalize())
b'4:spam0:2:\x00\xff'

>>> de = Deserializer.build_bytes_deserializer(b'4:spam0:')
>>> decode_bytes(de)
b'spam'
>>> decode_bytes(de)
b''
>>> de.finalize()

The payload is read as-is, so a length that is too short simply leaves bytes behind for the next read:

>>> de = Deserializer.build_bytes_deserializer(b'3:spam')
>>> decode_bytes(de)
b'spa'
>>> bytes(de.read_all())
b'm'

And a length that is too long runs out of data, the error points at the first byte of the payload:

>>> de = Deserializer.build_bytes_deserializer(b'5:spam')
>>> try:
...     decode_bytes(de)
... except UnexpectedEofError as e:
...     print(e)
byte string of length 5 is truncated (at byte 2)
"""

from bencodex.constants import LENGTH_SEPARATOR, is_digit
from bencodex.exception import InvalidFormatError, InvalidLengthError, UnexpectedEofError
from bencodex.serialization import Deserializer, OutOfDataError, Serializer

from .decimal import decode_decimal, encode_decimal


def encode_bytes(serializer: Serializer, data: bytes) -> None:
    """ Encodes a byte-sequence adding its length prefix.

    This modules's docstring has more details and examples.
    """
    assert isinstance(data, bytes)
    encode_decimal(serializer, len(data))
    serializer.write_byte(LENGTH_SEPARATOR)
    serializer.write_bytes(data)


def decode_bytes(deserializer: Deserializer) -> bytes:
    """ Decodes a byte-sequence with a length prefix.

    This modules's docstring has more details and examples.
    """
    pos = deserializer.cur_pos()
    first = deserializer.peek_byte()
    if not is_digit(first):
        raise InvalidFormatError(f'expected a byte string, got {bytes([first])!r}', position=pos)
    size = decode_decimal(deserializer, terminator=LENGTH_SEPARATOR, signed=False, error_class=InvalidLengthError)
    payload_pos = deserializer.cur_pos()
    try:
        return bytes(deserializer.read_bytes(size))
    except OutOfDataError as e:
        # sources disagree on how much they consume before failing, so point at where the payload starts
        raise UnexpectedEofError(f'byte string of length {size} is truncated', position=payload_pos) from e
