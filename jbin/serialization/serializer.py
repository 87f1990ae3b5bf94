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

if TYPE_CHECKING:
    from .memory import BytesSerializer
    from .stream import IOSerializer


class Serializer(ABC):
    """Append-only byte sink used by the encoder.

    Implementations only store chunks, counting is done here so `cur_pos` means the same for every sink.
    """

    def __init__(self) -> None:
        self._written = 0

    @abstractmethod
    def _put(self, chunk: memoryview) -> None:
        """Store a non-empty chunk of bytes after everything written so far."""
        raise NotImplementedError

    def finalize(self) -> bytes:
        """Return everything that was written, only sinks that keep their output support this."""
        raise TypeError(f'{type(self).__name__} does not keep what is written to it')

    def cur_pos(self) -> int:
        """Number of bytes written so far."""
        return self._written

    def write_bytes(self, data: Buffer) -> None:
        chunk = memoryview(data).cast('B')
        if chunk:
            self._put(chunk)
            self._written += len(chunk)

    def write_byte(self, byte: int) -> None:
        # bytes() rejects anything outside 0..255
        self.write_bytes(bytes((byte,)))

    def write_struct(self, data: tuple[Any, ...], format: str) -> None:
        self.write_bytes(struct.pack(format, *data))

    @staticmethod
    def build_bytes_serializer() -> BytesSerializer:
        from .memory import BytesSerializer
        return BytesSerializer()

    @staticmethod
    def build_io_serializer(sink: BinaryIO) -> IOSerializer:
        from .stream import IOSerializer
        return IOSerializer(sink)
