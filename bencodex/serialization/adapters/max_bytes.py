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

from typing import TypeVar

from typing_extensions import override

from bencodex.serialization.deserializer import Deserializer
from bencodex.serialization.exceptions import SerializationError

from ..types import Buffer
from .generic_adapter import GenericDeserializerAdapter

D = TypeVar('D', bound=Deserializer)


class MaxBytesExceededError(SerializationError):
    """ This error is raised when the adapted deserializer reached its maximum bytes read.

    After this exception is raised the adapted deserializer cannot be used anymore. Handlers of this exception are
    expected to either bubble up the exception (or an equivalent exception) or return an error, they should not try to
    read again from the same deserializer.
    """
    pass


class MaxBytesDeserializer(GenericDeserializerAdapter[D]):
    def __init__(self, deserializer: D, max_bytes: int) -> None:
        super().__init__(deserializer)
        self._bytes_left = max_bytes

    def _check_update_exceeds(self, read_size: int) -> None:
        self._bytes_left -= read_size
        if self._bytes_left < 0:
            raise MaxBytesExceededError

    @override
    def read_byte(self) -> int:
        # running out of data takes precedence over running out of budget
        self.inner.peek_byte()
        self._check_update_exceeds(1)
        return super().read_byte()

    @override
    def read_bytes(self, n: int, *, exact: bool = True) -> Buffer:
        self._check_update_exceeds(n)
        return super().read_bytes(n, exact=exact)

    @override
    def read_all(self) -> Buffer:
        result = super().read_bytes(self._bytes_left, exact=False)
        self._bytes_left -= memoryview(result).nbytes
        if not self.is_empty():
            raise MaxBytesExceededError
        return result
