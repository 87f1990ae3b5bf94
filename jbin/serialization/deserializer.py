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

from __future__ import annotations

import struct
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, BinaryIO

from typing_extensions import Buffer

from .exceptions import OutOfDataError, SerializationError

if TYPE_CHECKING:
    from .memory import BytesDeserializer
    from .stream import IODeserializer


class Deserializer(ABC):
    """Byte source used by the decoder.

    Every read is all-or-nothing from the caller's point of view: asking for more bytes than are left raises
    `OutOfDataError`. Implementations only have to hand out bytes and say whether any are left.
    """

    @abstractmethod
    def _take(self, n: int) -> Buffer:
        """Consume up to n bytes, fewer are returned only when the source runs out."""
        raise NotImplementedError

    @abstractmethod
    def _at_end(self) -> bool:
        raise NotImplementedError

    def finalize(self) -> None:
        """Fail if anything is left after the last read."""
        if not self._at_end():
            raise SerializationError('trailing data')

    def read_bytes(self, n: int) -> Buffer:
        if n < 0:
            raise ValueError('cannot read a negative number of bytes')
        data = self._take(n)
        if len(memoryview(data)) < n:
            raise OutOfDataError('not enough bytes to read')
        return data

    def read_byte(self) -> int:
        return memoryview(self.read_bytes(1))[0]

    def read_struct(self, format: str) -> tuple[Any, ...]:
        return struct.unpack(format, self.read_bytes(struct.calcsize(format)))

    @staticmethod
    def build_bytes_deserializer(data: Buffer) -> BytesDeserializer:
        from .memory import BytesDeserializer
        return BytesDeserializer(data)

    @staticmethod
    def build_io_deserializer(source: BinaryIO) -> IODeserializer:
        from .stream import IODeserializer
        return IODeserializer(source)
