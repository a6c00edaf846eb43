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
This module holds the encoders of the bencode scalar values: integers and byte strings.

For lists and dictionaries, which delegate the encoding of their items to another encoder, see the
`bencodex.compound_encoding` module.

The general organization is that each submodule `x` deals with a single type and looks like this:

    def encode_x(serializer: Serializer, value: ValueType) -> None:
        ...

    def decode_x(deserializer: Deserializer) -> ValueType:
        ...

Decoders consume the whole value including its leading marker, and raise a `bencodex.exception.DecodeError` subclass
when the grammar is violated. Running out of bytes surfaces as `bencodex.serialization.OutOfDataError`, which the
top-level `bencodex.decode` turns into `UnexpectedEofError`.
"""
