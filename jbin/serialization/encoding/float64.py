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
This module implements encoding of a double-precision float as its 8-byte IEEE-754 representation in big-endian
byte order.

>>> se = Serializer.build_bytes_serializer()
>>> encode_float64(se, 1.5)  # writes 3ff8000000000000
>>> encode_float64(se, -0.0)  # writes 8000000000000000
>>> bytes(se.finalize()).hex()
'3ff80000000000008000000000000000'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('3ff80000000000008000000000000000'))
>>> decode_float64(de)  # reads 3ff8000000000000
1.5
>>> decode_float64(de)  # reads 8000000000000000
-0.0
>>> de.finalize()
"""

from jbin.serialization import Deserializer, Serializer

_FORMAT = '>d'


def encode_float64(serializer: Serializer, value: float) -> None:
    assert isinstance(value, float)
    serializer.write_struct((value,), _FORMAT)


def decode_float64(deserializer: Deserializer) -> float:
    value, = deserializer.read_struct(_FORMAT)
    return value
