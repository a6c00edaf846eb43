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
from collections import OrderedDict

import pytest

from bencodex.compound_encoding.dict import decode_dict, encode_dict
from bencodex.compound_encoding.list import decode_list, encode_list
from bencodex.encoding.bytes import decode_bytes, encode_bytes
from bencodex.encoding.int import decode_int, encode_int
from bencodex.exception import DuplicateKeyError, InvalidFormatError
from bencodex.serialization import Deserializer, OutOfDataError, Serializer


def test_encode_list_keeps_order() -> None:
    se = Serializer.build_bytes_serializer()

    encode_list(se, [3, 1, 2], encode_int)

    assert bytes(se.finalize()) == b'li3ei1ei2ee'


def test_decode_list_of_lists() -> None:
    de = Deserializer.build_bytes_deserializer(b'lli1eeli2ei3eelee')

    def decode_int_list(deserializer: Deserializer) -> list[int]:
        return decode_list(deserializer, decode_int)

    assert decode_list(de, decode_int_list) == [[1], [2, 3], []]
    de.finalize()


def test_decode_list_unterminated() -> None:
    with pytest.raises(OutOfDataError):
        decode_list(Deserializer.build_bytes_deserializer(b'l4:halo'), decode_bytes)


def test_decode_list_wrong_marker() -> None:
    with pytest.raises(InvalidFormatError) as e:
        decode_list(Deserializer.build_bytes_deserializer(b'd4:haloe'), decode_bytes)

    assert e.value.position == 0


def test_encode_dict_sorts_keys() -> None:
    se = Serializer.build_bytes_serializer()

    encode_dict(se, OrderedDict([(b'zz', b'last'), (b'a', b'first'), (b'Z', b'upper')]), encode_bytes)

    # byte order, uppercase sorts before lowercase
    assert bytes(se.finalize()) == b'd1:Z5:upper1:a5:first2:zz4:laste'


def test_decode_dict_builder_gets_read_order() -> None:
    de = Deserializer.build_bytes_deserializer(b'd1:bi2e1:ai1ee')

    assert decode_dict(de, decode_int, list) == [(b'b', 2), (b'a', 1)]


def test_decode_dict_empty() -> None:
    assert decode_dict(Deserializer.build_bytes_deserializer(b'de'), decode_int, dict) == {}


@pytest.mark.parametrize(['raw', 'position'], [(b'di23e4:haloe', 1), (b'dle', 1), (b'd1:ai1eli1eei2ee', 7)])
def test_decode_dict_non_string_key(raw: bytes, position: int) -> None:
    with pytest.raises(InvalidFormatError) as e:
        decode_dict(Deserializer.build_bytes_deserializer(raw), decode_int, dict)

    assert e.value.position == position


def test_decode_dict_duplicate_key() -> None:
    with pytest.raises(DuplicateKeyError) as e:
        decode_dict(Deserializer.build_bytes_deserializer(b'd3:fooi1e3:bari0e3:fooi2ee'), decode_int, dict)

    assert e.value.key == b'foo'
    assert e.value.position == 17


@pytest.mark.parametrize('raw', [b'd4:haloi23e', b'd4:halo', b'd'])
def test_decode_dict_unterminated(raw: bytes) -> None:
    with pytest.raises(OutOfDataError):
        decode_dict(Deserializer.build_bytes_deserializer(raw), decode_int, dict)
