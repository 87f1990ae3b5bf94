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
Encodings of the scalar pieces a value tree is made of: varint lengths, 64-bit floats and UTF-8 text.

Each submodule pairs an `encode_x(serializer, value)` with a `decode_x(deserializer)`. The tree walk itself lives in
`jbin.codec`.
"""
