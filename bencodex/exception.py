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

from typing import Optional


class BencodeError(Exception):
    """Base class for all errors raised by the codec."""


class DecodeError(BencodeError):
    """Raised when a byte sequence is not a well-formed bencoded value.

    `position` is the zero-based offset in the source of the byte where the problem was detected, or None if it is
    not known.
    """

    def __init__(self, reason: str, *, position: Optional[int] = None) -> None:
        self.reason = reason
        self.position = position
        if position is None:
            super().__init__(reason)
        else:
            super().__init__(f'{reason} (at byte {position})')


class UnexpectedEofError(DecodeError):
    """The source was exhausted while a value was still expected."""


class InvalidFormatError(DecodeError):
    """Unrecognized leading byte or a structurally wrong value."""


class TrailingDataError(InvalidFormatError):
    """Bytes left in the source after a complete top-level value, raised only by strict decoding."""


class MaxDepthExceededError(InvalidFormatError):
    """Lists and dictionaries are nested deeper than the configured maximum."""


class InvalidIntegerError(DecodeError):
    """Non-canonical, unparsable or out of range integer literal."""


class InvalidLengthError(DecodeError):
    """Malformed byte-string length prefix."""


class DuplicateKeyError(DecodeError):
    """The same key appears twice in one decoded dictionary."""

    def __init__(self, key: bytes, *, position: Optional[int] = None) -> None:
        self.key = key
        super().__init__(f'duplicate dictionary key {key!r}', position=position)


class InputTooLargeError(DecodeError):
    """More bytes were read than the configured input cap allows."""


class EncodeError(BencodeError):
    """Raised when a value tree cannot be written out."""


class EncodeIoError(EncodeError):
    """The sink failed while the encoded bytes were being written."""
