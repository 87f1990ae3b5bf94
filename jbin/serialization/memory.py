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

r"""
Serializer and Deserializer backed by memory.

>>> se = BytesSerializer()
>>> se.write_byte(0x05)
>>> se.write_bytes(b'\x00')
>>> se.cur_pos()
2
>>> se.finalize()
b'\x05\x00'

>>> de = BytesDeserializer(b'\x05\x00\x01')
>>> de.read_byte()
5
>>> bytes(de.read_bytes(1))
b'\x00'
>>> de.finalize()
Traceback (most recent call last):
...
jbin.serialization.exceptions.SerializationError: trailing data
"""

from typing_extensions import Buffer, override

from .deserializer import Deserializer
from .serializer import Serializer


class BytesSerializer(Serializer):
    def __init__(self) -> None:
        super().__init__()
        self._buffer = bytearray()

    @override
    def _put(self, chunk: memoryview) -> None:
        self._buffer += chunk

    @override
    def finalize(self) -> bytes:
        return bytes(self._buffer)


class BytesDeserializer(Deserializer):
    """Reads from a byte sequence without copying, the view shrinks as bytes are consumed."""

    def __init__(self, data: Buffer) -> None:
        self._view = memoryview(data).cast('B')

    @override
    def _take(self, n: int) -> memoryview:
        chunk = self._view[:n]
        self._view = self._view[len(chunk):]
        return chunk

    @override
    def _at_end(self) -> bool:
        return not self._view
