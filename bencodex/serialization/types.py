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

from typing import Protocol

from typing_extensions import Buffer


class ReadableStream(Protocol):
    """Anything with a blocking `read(n)` that returns at most `n` bytes and `b''` when exhausted."""

    def read(self, n: int = -1, /) -> bytes:
        ...


class WritableStream(Protocol):
    """Anything with a `write(data)`, like a file opened in binary mode or `io.BytesIO`."""

    def write(self, data: Buffer, /) -> int | None:
        ...


__all__ = [
    'Buffer',
    'ReadableStream',
    'WritableStream',
]
