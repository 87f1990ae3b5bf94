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
Length prefix used by strings, arrays and objects: an unsigned LEB128 integer limited to 64 bits.

Every byte carries 7 bits of the value, least significant group first, and the high bit is set on all bytes but the
last. A 64-bit value needs at most 10 bytes. A varint that has not ended after 10 bytes, or one that carries more than
64 bits, is malformed. Redundant groups (`80 00` for 0) are accepted.

>>> se = Serializer.build_bytes_serializer()
>>> for n in (0, 127, 128, 300, 2**64 - 1):
...     encode_varint(se, n)
>>> se.finalize().hex(' ')
'00 7f 80 01 ac 02 ff ff ff ff ff ff ff ff ff 01'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('ac02 8000'))
>>> decode_varint(de), decode_varint(de)
(300, 0)

>>> decode_varint(Deserializer.build_bytes_deserializer(b'\x80' * 10))
Traceback (most recent call last):
...
jbin.serialization.exceptions.BadDataError: varint does not terminate within 10 bytes

>>> decode_varint(Deserializer.build_bytes_deserializer(b'\x80' * 3))
Traceback (most recent call last):
...
jbin.serialization.exceptions.OutOfDataError: not enough bytes to read
"""

from jbin.serialization import BadDataError, Deserializer, Serializer
from jbin.serialization.consts import U64_MAX, VARINT_MAX_BYTES

_PAYLOAD_MASK = 0x7f
_CONTINUATION_BIT = 0x80


def encode_varint(serializer: Serializer, value: int) -> None:
    if not 0 <= value <= U64_MAX:
        raise ValueError(f'cannot encode {value} as a 64-bit unsigned varint')
    groups = bytearray()
    while value > _PAYLOAD_MASK:
        groups.append((value & _PAYLOAD_MASK) | _CONTINUATION_BIT)
        value >>= 7
    groups.append(value)
    serializer.write_bytes(groups)


def decode_varint(deserializer: Deserializer) -> int:
    """ Read one varint, consuming at most 10 bytes.

    Running out of bytes is reported before the length limit, so a varint cut short always raises `OutOfDataError`.
    """
    value = 0
    for index in range(VARINT_MAX_BYTES):
        byte = deserializer.read_byte()
        value |= (byte & _PAYLOAD_MASK) << (7 * index)
        if not byte & _CONTINUATION_BIT:
            if value > U64_MAX:
                raise BadDataError('varint value does not fit in 64 bits')
            return value
    raise BadDataError(f'varint does not terminate within {VARINT_MAX_BYTES} bytes')
