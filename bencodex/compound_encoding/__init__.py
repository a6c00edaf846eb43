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
This module holds the compound encoders: bencode lists and dictionaries.

Compound encoders are generic over the items they hold and delegate the encoding of each item to another encoder.
For example the list encoder writes the `l`/`e` markers and calls the given item encoder for everything in between.
This keeps them independent from the value tree, `bencodex.decoder` and `bencodex.encoder` are what tie them to
`BNode`.

The general organization follows `bencodex.encoding`:

    def encode_x(serializer: Serializer, value: ValueType, ...item encoders...) -> None:
        ...

    def decode_x(deserializer: Deserializer, ...item decoders...) -> ValueType:
        ...
"""

from typing import Protocol, TypeVar

from bencodex.serialization.deserializer import Deserializer
from bencodex.serialization.serializer import Serializer

T_co = TypeVar('T_co', covariant=True)
T_contra = TypeVar('T_contra', contravariant=True)


class Decoder(Protocol[T_co]):
    def __call__(self, deserializer: Deserializer, /) -> T_co:
        ...


class Encoder(Protocol[T_contra]):
    def __call__(self, serializer: Serializer, value: T_contra, /) -> None:
        ...
