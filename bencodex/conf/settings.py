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

from pathlib import Path
from typing import Optional, Union

from pydantic import Field

from bencodex.utils.pydantic import BaseModel

# Each level of nesting costs a couple of Python frames while decoding, this keeps the deepest accepted input well
# below the default recursion limit of 1000.
MAX_DEPTH_LIMIT = 400


class CodecSettings(BaseModel):
    # Maximum nesting depth of lists and dictionaries accepted by the decoder, a top-level list is depth 1.
    MAX_DEPTH: int = Field(default=256, ge=1, le=MAX_DEPTH_LIMIT)

    # Maximum number of bytes a single decode call may read from its source, None means no limit.
    MAX_INPUT_BYTES: Optional[int] = Field(default=None, ge=1)

    # Whether decode() rejects bytes left in the source after a complete top-level value, when not told explicitly.
    STRICT_TRAILING_DATA: bool = False

    @classmethod
    def from_yaml(cls, *, filepath: Union[Path, str]) -> 'CodecSettings':
        """Load settings from a yaml file, which may extend another one (see `dict_from_extended_yaml`)."""
        from bencodex.utils.yaml import model_from_extended_yaml
        return model_from_extended_yaml(cls, filepath=filepath, custom_root=Path(__file__).parent)
