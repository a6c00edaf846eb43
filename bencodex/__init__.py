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
A codec for bencode, the encoding used by BitTorrent metainfo files.

>>> from bencodex import decode, encode
>>> node = decode(b'd3:bar4:spam3:fooi42ee')
>>> node[b'foo'].as_integer()
42
>>> node['bar'].as_text()
'spam'
>>> encode(node)
b'd3:bar4:spam3:fooi42ee'
"""

from bencodex.bnode import BByteString, BDict, BInteger, BList, BNode, from_bnode, to_bnode
from bencodex.decoder import decode, try_decode
from bencodex.encoder import encode, try_encode
from bencodex.exception import (
    BencodeError,
    DecodeError,
    DuplicateKeyError,
    EncodeError,
    EncodeIoError,
    InputTooLargeError,
    InvalidFormatError,
    InvalidIntegerError,
    InvalidLengthError,
    MaxDepthExceededError,
    TrailingDataError,
    UnexpectedEofError,
)
from bencodex.version import __version__

__all__ = [
    '__version__',
    'BNode',
    'BInteger',
    'BByteString',
    'BList',
    'BDict',
    'to_bnode',
    'from_bnode',
    'decode',
    'try_decode',
    'encode',
    'try_encode',
    'BencodeError',
    'DecodeError',
    'UnexpectedEofError',
    'InvalidFormatError',
    'TrailingDataError',
    'MaxDepthExceededError',
    'InvalidIntegerError',
    'InvalidLengthError',
    'DuplicateKeyError',
    'InputTooLargeError',
    'EncodeError',
    'EncodeIoError',
]
