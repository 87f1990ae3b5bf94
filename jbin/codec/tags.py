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

from enum import IntEnum


class Tag(IntEnum):
    """Single byte written before every value, identifying its variant."""

    NULL = 0x00
    TRUE = 0x01
    FALSE = 0x02
    NUMBER = 0x03
    STRING = 0x04
    ARRAY = 0x05
    OBJECT = 0x06
