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
Canonical encoding of `BNode` trees.

The output only depends on the tree, never on how it was built: dictionary entries are always written in
byte-lexicographic key order and integers in their minimal decimal form.

>>> encode({'foo': 42, 'bar': 'spam'})
b'd3:bar4:spam3:fooi42ee'
>>> encode({'int': 2333, 'lst': ['bencode']})
b'd3:inti2333e3:lstl7:bencodeee'

When a sink is given the encoded bytes are written to it and their count is returned:

>>> import io
>>> sink = io.BytesIO()
>>> encode([1, 2, 3], sink)
11
>>> sink.getvalue()
b'li1ei2ei3ee'
"""

from typing import Any, Optional, Union, overload

from structlog import get_logger

from bencodex.bnode import BByteString, BDict, BInteger, BList, BNode, to_bnode
from bencodex.compound_encoding.dict import encode_dict
from bencodex.compound_encoding.list import encode_list
from bencodex.encoding.bytes import encode_bytes
from bencodex.encoding.int import encode_int
from bencodex.exception import EncodeError, EncodeIoError
from bencodex.serialization import Serializer
from bencodex.serialization.types import WritableStream
from bencodex.utils.result import as_result

logger = get_logger()

EncodeSink = Union[Serializer, WritableStream]


def encode_node(serializer: Serializer, node: BNode) -> None:
    match node:
        case BInteger(value):
            encode_int(serializer, value)
        case BByteString(value):
            encode_bytes(serializer, value)
        case BList():
            encode_list(serializer, node, encode_node)
        case BDict():
            encode_dict(serializer, node, encode_node)
        case _:
            raise TypeError(f'expected a BNode, got {type(node).__name__}')


@overload
def encode(value: Any, sink: None = None) -> bytes:
    ...


@overload
def encode(value: Any, sink: EncodeSink) -> int:
    ...


def encode(value: Any, sink: Optional[EncodeSink] = None) -> Union[bytes, int]:
    """ Encode a tree, or anything `to_bnode()` accepts, in canonical form.

    Without a sink the encoded bytes are returned. With a sink, which is either a `Serializer` or a binary file-like
    object, the bytes are written to it and the number of bytes written is returned. Failures of the sink are raised
    as `EncodeIoError`, the sink may have received part of the output by then.
    """
    node = to_bnode(value)
    if sink is None:
        serializer = Serializer.build_bytes_serializer()
        encode_node(serializer, node)
        return bytes(serializer.finalize())

    if isinstance(sink, Serializer):
        serializer = sink
    else:
        serializer = Serializer.build_stream_serializer(sink)
    start = serializer.cur_pos()
    try:
        encode_node(serializer, node)
    except OSError as e:
        logger.new().debug('bencode encode failed', error=type(e).__name__, written=serializer.cur_pos() - start)
        raise EncodeIoError(f'failed to write to the sink: {e}') from e
    return serializer.cur_pos() - start


@as_result(EncodeError)
def try_encode(value: Any, sink: Optional[EncodeSink] = None) -> Union[bytes, int]:
    """Same as `encode()` but returns `Ok(...)` or `Err(error)` instead of raising an `EncodeError`."""
    return encode(value, sink)
