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

from typing import BinaryIO

from typing_extensions import override

from .consts import IO_READ_CHUNK_SIZE
from .deserializer import Deserializer
from .serializer import Serializer


class IOSerializer(Serializer):
    """Writes straight into a binary file-like object, which is neither flushed nor closed here.

    Raw unbuffered sinks may accept only part of a chunk, the rest is written again until nothing is left.
    """

    def __init__(self, sink: BinaryIO) -> None:
        super().__init__()
        self._sink = sink

    @override
    def _put(self, chunk: memoryview) -> None:
        while chunk:
            written = self._sink.write(chunk)
            if written is None:
                # non-blocking raw streams return None when they cannot take anything
                raise BlockingIOError('sink is not ready for writing')
            chunk = chunk[written:]


class IODeserializer(Deserializer):
    """Reads from a binary file-like object, only as far as the decoder asks.

    The source is therefore left right after the last byte read. Large reads are split in chunks of at most
    `IO_READ_CHUNK_SIZE` bytes, so a corrupt length prefix ends in `OutOfDataError` when the source runs dry instead of
    a huge allocation upfront.
    """

    def __init__(self, source: BinaryIO) -> None:
        self._source = source
        # holds the single byte read by `_at_end` until someone consumes it
        self._lookahead = b''

    @override
    def _take(self, n: int) -> bytes:
        data = bytearray(self._lookahead[:n])
        self._lookahead = self._lookahead[n:]
        while len(data) < n:
            chunk = self._source.read(min(IO_READ_CHUNK_SIZE, n - len(data)))
            if not chunk:
                break
            data += chunk
        return bytes(data)

    @override
    def _at_end(self) -> bool:
        if not self._lookahead:
            self._lookahead = self._source.read(1)
        return not self._lookahead
