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

from typing_extensions import override

from .serializer import Serializer
from .types import Buffer, WritableStream


class StreamSerializer(Serializer):
    """Serializer that writes straight through to a binary file-like object.

    Every failure of the stream surfaces as `OSError`, including the `ValueError` that io raises for a closed file.
    Flushing and closing the stream is left to whoever owns it.
    """

    def __init__(self, stream: WritableStream) -> None:
        self._stream = stream
        self._pos = 0

    @override
    def cur_pos(self) -> int:
        return self._pos

    @override
    def write_byte(self, data: int) -> None:
        self.write_bytes(int.to_bytes(data, length=1, byteorder='big'))

    @override
    def write_bytes(self, data: Buffer) -> None:
        view = memoryview(data).cast('B')
        while view:
            try:
                written = self._stream.write(view)
            except ValueError as e:
                raise OSError(f'stream rejected the write: {e}') from e
            # some file-likes return None from write(), that is taken as a full write
            if written is None:
                written = len(view)
            elif written == 0:
                raise OSError('stream did not accept any bytes')
            self._pos += written
            view = view[written:]
