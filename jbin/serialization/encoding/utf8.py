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
Text encoding: the varint length of the UTF-8 bytes followed by the bytes themselves.

>>> se = Serializer.build_bytes_serializer()
>>> encode_utf8(se, 'a')
>>> encode_utf8(se, 'π')
>>> encode_utf8(se, '')
>>> se.finalize().hex(' ')
'01 61 02 cf 80 00'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('0161 02cf80 00'))
>>> [decode_utf8(de) for _ in range(3)]
['a', 'π', '']

>>> decode_utf8(Deserializer.build_bytes_deserializer(b'\x02\xc3\x28'))
Traceback (most recent call last):
...
jbin.serialization.exceptions.InvalidUtf8Error: invalid utf-8 text

>>> decode_utf8(Deserializer.build_bytes_deserializer(b'\x04test'), max_length=3)
Traceback (most recent call last):
...
jbin.serialization.exceptions.TooLongError: declared length 4 exceeds the maximum of 3 bytes
"""

from jbin.serialization import Deserializer, InvalidUtf8Error, Serializer, TooLongError

from .varint import decode_varint, encode_varint


def encode_utf8(serializer: Serializer, text: str) -> None:
    data = text.encode('utf-8')
    encode_varint(serializer, len(data))
    serializer.write_bytes(data)


def decode_utf8(deserializer: Deserializer, *, max_length: int | None = None) -> str:
    """ Read a length-prefixed UTF-8 text.

    A declared length above `max_length` is rejected before the payload is read.
    """
    length = decode_varint(deserializer)
    if max_length is not None and length > max_length:
        raise TooLongError(f'declared length {length} exceeds the maximum of {max_length} bytes')
    data = deserializer.read_bytes(length)
    try:
        return str(data, 'utf-8')
    except UnicodeDecodeError as e:
        raise InvalidUtf8Error('invalid utf-8 text') from e
