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

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from jbin.serialization.consts import DEFAULT_MAX_DEPTH


class CodecSettings(BaseModel):
    model_config = ConfigDict(frozen=True, extra='forbid')

    # Maximum nesting of arrays and objects accepted when decoding, empty containers count as a level too
    MAX_DEPTH: int = Field(default=DEFAULT_MAX_DEPTH, gt=0)

    # Maximum encoded size of a single string or object key when decoding, `None` means no limit
    MAX_STRING_BYTES: Optional[int] = Field(default=None, gt=0)

    # Maximum number of items of an array or pairs of an object when decoding, `None` means no limit
    MAX_CONTAINER_LENGTH: Optional[int] = Field(default=None, gt=0)
