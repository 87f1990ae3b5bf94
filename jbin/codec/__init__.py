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
Encoding and decoding of whole value trees.

>>> from jbin.value import JArray, JObject
>>> encode(JArray()).hex()
'0500'
>>> decode(bytes.fromhex('0600'))
JObject(pairs=())
"""

from typing import BinaryIO, Optional

from structlog import get_logger
from typing_extensions import Buffer

from jbin.codec.decoder import decode_value
from jbin.codec.encoder import encode_value
from jbin.codec.tags import Tag
from jbin.conf import CodecSettings, get_settings
from jbin.serialization import Deserializer, SerializationError, Serializer
from jbin.value import Value

logger = get_logger()

__all__ = [
    'Tag',
    'encode',
    'encode_to',
    'decode',
    'decode_from',
    'encode_value',
    'decode_value',
]


def encode(value: Value) -> bytes:
    """Encode a value tree into a new byte string."""
    serializer = Serializer.build_bytes_serializer()
    encode_value(serializer, value)
    return bytes(serializer.finalize())


def encode_to(value: Value, sink: BinaryIO) -> int:
    """Encode a value tree into a binary file-like object and return the number of bytes written."""
    return encode_value(Serializer.build_io_serializer(sink), value)


def _decode_with_settings(deserializer: Deserializer, settings: Optional[CodecSettings]) -> Value:
    if settings is None:
        settings = get_settings()
    return decode_value(
        deserializer,
        max_depth=settings.MAX_DEPTH,
        max_string_bytes=settings.MAX_STRING_BYTES,
        max_container_length=settings.MAX_CONTAINER_LENGTH,
    )


def decode(data: Buffer, *, settings: Optional[CodecSettings] = None) -> Value:
    """ Decode a byte sequence that holds exactly one encoded value.

    Bytes left after the value make the whole decoding fail with a `SerializationError`.
    """
    deserializer = Deserializer.build_bytes_deserializer(data)
    try:
        value = _decode_with_settings(deserializer, settings)
        deserializer.finalize()
    except SerializationError as e:
        logger.debug('failed to decode value', size=len(memoryview(data)), error=repr(e))
        raise
    return value


def decode_from(source: BinaryIO, *, settings: Optional[CodecSettings] = None) -> Value:
    """ Decode one value from a binary file-like object.

    Only the bytes of the value are consumed, anything after it is left in the source.
    """
    deserializer = Deserializer.build_io_deserializer(source)
    try:
        return _decode_with_settings(deserializer, settings)
    except SerializationError as e:
        logger.debug('failed to decode value from stream', error=repr(e))
        raise
