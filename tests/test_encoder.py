#  Copyright 2025 Hathor Labs
#
#  Licensed under the Apache License, Version 2.0 (the "License");
#  you may not use this file except in compliance with the License.
#  You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
#  Unless required by applicable law or agreed to in writing, software
#  distributed under the License is distributed on an "AS IS" BASIS,
#  WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#  See the License for the specific language governing permissions and
#  limitations under the License.
import io
from collections import OrderedDict

import pytest

from bencodex import BByteString, BDict, BInteger, BList, EncodeError, EncodeIoError, decode, encode, try_encode
from bencodex.serialization import Serializer
from bencodex.utils.result import Ok


def test_encode_scalars() -> None:
    assert encode(BInteger(0)) == b'i0e'
    assert encode(BInteger(-42)) == b'i-42e'
    assert encode(BByteString(b'')) == b'0:'
    assert encode(BByteString(b'spam')) == b'4:spam'


def test_encode_plain_values() -> None:
    assert encode(42) == b'i42e'
    assert encode('spam') == b'4:spam'
    assert encode(b'\x00\x01') == b'2:\x00\x01'
    assert encode([]) == b'le'
    assert encode({}) == b'de'
    assert encode(('a', 1)) == b'l1:ai1ee'


def test_encode_dict_ordering() -> None:
    assert encode({'foo': 42, 'bar': 'spam'}) == b'd3:bar4:spam3:fooi42ee'


def test_encode_nested_literal() -> None:
    assert encode({'int': 2333, 'lst': ['bencode']}) == b'd3:inti2333e3:lstl7:bencodeee'


def test_encode_is_independent_of_insertion_order() -> None:
    forward = BDict()
    forward['a'] = 1
    forward['b'] = [1, 2]
    forward['c'] = {'y': 2, 'x': 1}

    backward = BDict()
    backward['c'] = {'x': 1, 'y': 2}
    backward['b'] = [1, 2]
    backward['a'] = 1

    assert encode(forward) == encode(backward) == b'd1:ai1e1:bli1ei2ee1:cd1:xi1e1:yi2eee'
    assert encode(OrderedDict([('b', 2), ('a', 1)])) == b'd1:ai1e1:bi2ee'


def test_encode_keys_sorted_as_bytes() -> None:
    node = BDict({b'b': 1, b'B': 2, b'\xff': 3, b'': 4, b'ba': 5})

    assert encode(node) == b'd0:i4e1:Bi2e1:bi1e2:bai5e1:\xffi3ee'


def test_encode_list_keeps_stored_order() -> None:
    node = BList([3, 'x', 1])
    node.insert(0, 'first')

    assert encode(node) == b'l5:firsti3e1:xi1ee'


def test_encode_is_deterministic() -> None:
    node = decode(b'd4:infod6:lengthi1e4:name1:xe8:announce3:urle')

    assert encode(node) == encode(node)
    assert encode(decode(encode(node))) == encode(node)


@pytest.mark.parametrize(
    'raw',
    [
        b'i0e',
        b'i-9223372036854775808e',
        b'0:',
        b'le',
        b'de',
        b'li256e7:bencodeli256e7:bencodeee',
        b'l4:spami42ee',
        b'll5:helloe4:spami42ee',
        b'd3:bar4:spam3:fooi42ee',
        b'd1:ad1:bd1:cleeee',
    ]
)
def test_round_trip(raw: bytes) -> None:
    node = decode(raw)

    assert encode(node) == raw
    assert decode(encode(node)) == node


def test_node_shortcuts() -> None:
    node = BList([1, {'k': 'v'}])

    assert node.encode() == b'li1ed1:k1:vee'
    assert bytes(node) == b'li1ed1:k1:vee'
    assert bytes(BInteger(5)) == b'i5e'


def test_encode_to_stream() -> None:
    sink = io.BytesIO()

    written = encode({'foo': 42}, sink)

    assert written == 11
    assert sink.getvalue() == b'd3:fooi42ee'


def test_encode_to_serializer() -> None:
    se = Serializer.build_bytes_serializer()
    se.write_bytes(b'prefix')

    assert encode(BList([1]), se) == 5
    assert encode(BByteString(b'ab'), se) == 4
    assert bytes(se.finalize()) == b'prefixli1ee2:ab'


class _FailingSink:
    def __init__(self, fail_after: int) -> None:
        self.data = bytearray()
        self.fail_after = fail_after

    def write(self, data) -> int:
        if len(self.data) + len(data) > self.fail_after:
            raise OSError('disk full')
        self.data += bytes(data)
        return len(data)


def test_encode_io_error() -> None:
    sink = _FailingSink(fail_after=3)

    with pytest.raises(EncodeIoError) as e:
        encode(['spam', 'eggs'], sink)

    assert isinstance(e.value, EncodeError)
    assert isinstance(e.value.__cause__, OSError)
    # whatever was written before the failure stays in the sink
    assert bytes(sink.data) == b'l4:'


def test_encode_io_error_closed_sink() -> None:
    sink = io.BytesIO()
    sink.close()

    with pytest.raises(EncodeIoError) as e:
        encode([1, 2], sink)

    assert isinstance(e.value.__cause__, OSError)
    assert isinstance(e.value.__cause__.__cause__, ValueError)


@pytest.mark.parametrize('value', [1.5, None, True, {1: 2}, [object()]])
def test_encode_unsupported_values(value) -> None:
    with pytest.raises(TypeError):
        encode(value)


def test_try_encode() -> None:
    assert try_encode([1]) == Ok(b'li1ee')

    result = try_encode('spam', _FailingSink(fail_after=0))
    assert result.is_err()
    assert isinstance(result.err(), EncodeIoError)


def test_try_encode_does_not_catch_type_errors() -> None:
    with pytest.raises(TypeError):
        try_encode(1.5)
