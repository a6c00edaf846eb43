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

from typing import Final

# Integers are bounded to a signed 64-bit range, larger values are rejected both when decoding and when building a
# tree.
INT_BITS: Final[int] = 64
INT_MIN: Final[int] = -(1 << (INT_BITS - 1))
INT_MAX: Final[int] = (1 << (INT_BITS - 1)) - 1

# Digits needed to write INT_MAX (and INT_MIN without its sign).
MAX_DECIMAL_DIGITS: Final[int] = len(str(INT_MAX))

INTEGER_BEGIN: Final[int] = ord('i')
LIST_BEGIN: Final[int] = ord('l')
DICT_BEGIN: Final[int] = ord('d')
END: Final[int] = ord('e')
LENGTH_SEPARATOR: Final[int] = ord(':')
MINUS: Final[int] = ord('-')
DIGIT_ZERO: Final[int] = ord('0')
DIGIT_NINE: Final[int] = ord('9')


def is_digit(byte: int) -> bool:
    return DIGIT_ZERO <= byte <= DIGIT_NINE
