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

# a u64 needs at most ceil(64 / 7) groups of 7 bits
VARINT_MAX_BYTES = 10

U64_MAX = (1 << 64) - 1

# maximum container nesting accepted when no explicit limit is given
DEFAULT_MAX_DEPTH = 512

# reads from a stream are split in chunks of this size, so a declared length never translates directly into an
# allocation
IO_READ_CHUNK_SIZE = 64 * 1024
