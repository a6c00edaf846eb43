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
import pytest

from bencodex import BByteString, BDict, BInteger, BList, BNode, from_bnode, to_bnode
from bencodex.bnode import to_key
from bencodex.constants import INT_MAX, INT_MIN


def test_integer_bounds() -> None:
    assert BInteger(INT_MAX).value == INT_MAX
    assert BInteger(INT_MIN).value == INT_MIN

    with pytest.raises(ValueError):
        BInteger(INT_MAX + 1)
    with pytest.raises(ValueError):
        BInteger(INT_MIN - 1)


@pytest.mark.parametrize('value', [True, 1.0, '1', None])
def test_integer_rejects_other_types(value) -> None:
    with pytest.raises(TypeError):
        BInteger(value)


def test_byte_string_normalization() -> None:
    assert BByteString('ação').value == 'ação'.encode('utf-8')
    assert BByteString(bytearray(b'ab')).value == b'ab'
    assert BByteString(memoryview(b'ab')).value == b'ab'
    assert type(BByteString(bytearray(b'ab')).value) is bytes

    with pytest.raises(TypeError):
        BByteString(12)  # type: ignore[arg-type]


def test_scalars_are_immutable_and_hashable() -> None:
    integer = BInteger(1)
    string = BByteString(b'x')

    with pytest.raises(AttributeError):
        integer.value = 2  # type: ignore[misc]
    with pytest.raises(AttributeError):
        string.value = b'y'  # type: ignore[misc]

    assert {BInteger(1), BInteger(1), BByteString(b'x'), string} == {integer, string}


def test_containers_are_unhashable() -> None:
    with pytest.raises(TypeError):
        hash(BList())
    with pytest.raises(TypeError):
        hash(BDict())


def test_accessors() -> None:
    integer = BInteger(7)
    string = BByteString(b'text')
    lst = BList([1])
    dictionary = BDict({'a': 1})

    assert integer.as_integer() == 7
    assert string.as_byte_string() == b'text'
    assert string.as_text() == 'text'
    assert lst.as_list() is lst
    assert dictionary.as_dictionary() is dictionary

    nodes: list[BNode] = [integer, string, lst, dictionary]
    assert [node.as_integer() for node in nodes] == [7, None, None, None]
    assert [node.as_byte_string() for node in nodes] == [None, b'text', None, None]
    assert [node.as_text() for node in nodes] == [None, 'text', None, None]
    assert [node.as_list() for node in nodes] == [None, None, lst, None]
    assert [node.as_dictionary() for node in nodes] == [None, None, None, dictionary]


def test_as_text_invalid() -> None:
    node = BByteString(b'\xff\xfe')

    assert node.as_text() is None
    assert node.as_text('latin-1') == 'ÿþ'


def test_to_bnode() -> None:
    assert to_bnode(1) == BInteger(1)
    assert to_bnode('a') == BByteString(b'a')
    assert to_bnode(b'a') == BByteString(b'a')
    assert to_bnode([1, 'a']) == BList([BInteger(1), BByteString(b'a')])
    assert to_bnode((1,)) == BList([1])
    assert to_bnode({'k': [1]}) == BDict({b'k': BList([1])})

    node = BInteger(3)
    assert to_bnode(node) is node


@pytest.mark.parametrize('value', [True, False, None, 1.5, {1, 2}, object()])
def test_to_bnode_unsupported(value) -> None:
    with pytest.raises(TypeError):
        to_bnode(value)


def test_from_bnode() -> None:
    node = BDict({'int': 233, 'lst': ['bencode', [1]], 'sub': {}})

    assert from_bnode(node) == {b'int': 233, b'lst': [b'bencode', [1]], b'sub': {}}

    with pytest.raises(TypeError):
        from_bnode(42)  # type: ignore[arg-type]


def test_to_key() -> None:
    assert to_key(b'k') == b'k'
    assert to_key('ação') == 'ação'.encode('utf-8')
    assert to_key(bytearray(b'k')) == b'k'
    assert to_key(BByteString(b'k')) == b'k'

    with pytest.raises(TypeError):
        to_key(1)  # type: ignore[arg-type]


def test_list_is_mutable_sequence() -> None:
    lst = BList()

    lst.append(1)
    lst.extend(['a', [2]])
    lst.insert(0, b'first')
    lst[1] = 10

    assert lst == BList([b'first', 10, 'a', [2]])
    assert len(lst) == 4
    assert lst[-1] == BList([2])
    assert lst[1:3] == BList([10, 'a'])
    assert isinstance(lst[1:3], BList)

    del lst[0]
    assert lst == BList([10, 'a', [2]])

    lst[0:2] = [7]
    assert lst == BList([7, [2]])
    assert lst.pop() == BList([2])
    assert BInteger(7) in lst

    with pytest.raises(TypeError):
        lst.append(1.5)


def test_list_equality() -> None:
    assert BList([1, 2]) == BList([1, 2])
    assert BList([1, 2]) != BList([2, 1])
    # a plain list is not a node
    assert BList([1]) != [BInteger(1)]


def test_dict_is_mutable_mapping() -> None:
    dictionary = BDict()

    dictionary['b'] = 1
    dictionary[b'a'] = 'x'
    dictionary['b'] = 2

    assert list(dictionary) == [b'a', b'b']
    assert dictionary['b'] == BInteger(2)
    assert len(dictionary) == 2
    assert 'a' in dictionary
    assert b'a' in dictionary
    assert 'z' not in dictionary
    assert 1 not in dictionary
    assert dictionary.get('z') is None
    assert dictionary.get(1) is None
    assert dictionary.get('a') == BByteString(b'x')
    assert list(dictionary.items()) == [(b'a', BByteString(b'x')), (b'b', BInteger(2))]

    del dictionary['a']
    assert list(dictionary) == [b'b']

    with pytest.raises(KeyError):
        dictionary['a']
    with pytest.raises(KeyError):
        del dictionary[b'a']
    with pytest.raises(KeyError):
        dictionary[1]  # type: ignore[index]
    with pytest.raises(TypeError):
        dictionary[1] = 2  # type: ignore[index]


def test_dict_last_insert_wins() -> None:
    dictionary = BDict([('k', 1), (b'k', 2)])

    assert dictionary == BDict({'k': 2})

    dictionary.update({'k': 3})
    assert dictionary['k'].as_integer() == 3


def test_dict_keeps_sorted_order() -> None:
    dictionary = BDict({'zeta': 1, 'alpha': 2, 'Mid': 3})

    assert list(dictionary) == [b'Mid', b'alpha', b'zeta']


def test_reprs() -> None:
    assert repr(BInteger(1)) == 'BInteger(1)'
    assert repr(BByteString(b'a')) == "BByteString(b'a')"
    assert repr(BList([1])) == 'BList([BInteger(1)])'
    assert repr(BDict({'a': 1})) == "BDict({b'a': BInteger(1)})"
