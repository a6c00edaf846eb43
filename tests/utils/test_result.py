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
from __future__ import annotations

import pytest

from bencodex import BList, DecodeError, try_decode
from bencodex.utils.result import Err, Ok, Result, UnwrapError, as_result, is_err, is_ok


def test_ok() -> None:
    result: Result[int, ValueError] = Ok(42)

    assert result.is_ok()
    assert not result.is_err()
    assert is_ok(result)
    assert not is_err(result)
    assert result.ok() == 42
    assert result.err() is None
    assert result.unwrap() == 42
    assert result.unwrap_or(0) == 42


def test_err() -> None:
    error = ValueError('bad value')
    result: Result[int, ValueError] = Err(error)

    assert result.is_err()
    assert not result.is_ok()
    assert is_err(result)
    assert not is_ok(result)
    assert result.ok() is None
    assert result.err() is error
    assert result.unwrap_err() is error
    assert result.unwrap_or(0) == 0


def test_unwrap_on_wrong_variant() -> None:
    error = ValueError('bad value')

    with pytest.raises(UnwrapError) as e:
        Err(error).unwrap()
    assert e.value.__cause__ is error
    assert e.value.result == Err(error)

    with pytest.raises(UnwrapError) as e:
        Ok(1).unwrap_err()
    assert e.value.result == Ok(1)


def test_equality_and_hash() -> None:
    assert Ok(1) == Ok(1)
    assert Ok(1) != Ok(2)
    assert Ok(1) != Err(1)
    assert Err(1) == Err(1)
    assert hash(Ok(1)) == hash(Ok(1))
    assert hash(Ok(1)) != hash(Err(1))
    assert repr(Ok(b'x')) == "Ok(b'x')"
    assert repr(Err('x')) == "Err('x')"


def test_match() -> None:
    def describe(result: Result[int, str]) -> str:
        match result:
            case Ok(value):
                return f'ok {value}'
            case Err(error):
                return f'err {error}'
        raise AssertionError

    assert describe(Ok(1)) == 'ok 1'
    assert describe(Err('nope')) == 'err nope'


def test_as_result() -> None:
    @as_result(ValueError, KeyError)
    def parse(value: str) -> int:
        if value == 'key':
            raise KeyError(value)
        return int(value)

    assert parse('12') == Ok(12)
    assert isinstance(parse('twelve').err(), ValueError)
    assert isinstance(parse('key').err(), KeyError)


def test_as_result_does_not_catch_other_exceptions() -> None:
    @as_result(ValueError)
    def fail() -> int:
        raise TypeError('not caught')

    with pytest.raises(TypeError, match='not caught'):
        fail()


def test_as_result_requires_exception_types() -> None:
    with pytest.raises(TypeError):
        as_result()

    with pytest.raises(TypeError):
        as_result(int)  # type: ignore[arg-type]


def test_try_decode_result() -> None:
    match try_decode(b'l1:ae'):
        case Ok(node):
            assert node == BList([b'a'])
        case Err():
            raise AssertionError

    result = try_decode(b'l1:a')
    assert is_err(result)
    assert isinstance(result.err(), DecodeError)
    with pytest.raises(UnwrapError) as e:
        result.unwrap()
    assert e.value.__cause__ is result.err()
