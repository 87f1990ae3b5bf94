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

import io

import pytest

from jbin.codec import encode, encode_to, encode_value
from jbin.serialization import Serializer, UnsupportedTypeError
from jbin.value import FALSE, NULL, TRUE, JArray, JNumber, JObject, JString, from_python

EXAMPLE_VALUE = JObject([('a', JNumber(1.5)), ('b', JArray([TRUE, NULL]))])
EXAMPLE_HEX = '06 02 01 61 03 3F F8 00 00 00 00 00 00 01 62 05 02 01 00'


def test_example_object() -> None:
    assert encode(EXAMPLE_VALUE) == bytes.fromhex(EXAMPLE_HEX)


@pytest.mark.parametrize('value, expected_hex', [
    (NULL, '00'),
    (TRUE, '01'),
    (FALSE, '02'),
    (JNumber(1.5), '03 3ff8000000000000'),
    (JNumber(-2), '03 c000000000000000'),
    (JString(''), '04 00'),
    (JString('hi'), '04 02 6869'),
    (JString('é'), '04 02 c3a9'),
    (JArray(), '05 00'),
    (JObject(), '06 00'),
    (JArray([JArray()]), '05 01 05 00'),
    (JObject([('', NULL)]), '06 01 00 00'),
])
def test_encode_single_values(value, expected_hex) -> None:
    assert encode(value) == bytes.fromhex(expected_hex)


def test_duplicate_keys_are_written_in_order() -> None:
    value = JObject([('k', TRUE), ('k', FALSE)])
    assert encode(value) == bytes.fromhex('06 02 016b 01 016b 02')


def test_long_string_uses_multi_byte_length() -> None:
    text = 'x' * 200
    data = encode(JString(text))
    assert data[:3] == bytes([0x04, 0xc8, 0x01])
    assert data[3:] == text.encode('utf-8')


def test_array_count_is_number_of_children() -> None:
    value = JArray([JArray([TRUE, TRUE, TRUE])] * 130)
    data = encode(value)
    assert data[:3] == bytes([0x05, 0x82, 0x01])
    assert len(data) == 3 + 130 * 5


def test_encoding_is_deterministic() -> None:
    value = from_python({'z': [1, 'two', {'three': None}], 'a': False})
    assert encode(value) == encode(value)
    assert encode(value) == encode(from_python({'z': [1, 'two', {'three': None}], 'a': False}))


def test_encode_value_returns_bytes_written() -> None:
    se = Serializer.build_bytes_serializer()
    se.write_bytes(b'prefix')
    written = encode_value(se, EXAMPLE_VALUE)
    assert written == 19
    assert bytes(se.finalize()) == b'prefix' + bytes.fromhex(EXAMPLE_HEX)


def test_encode_to_stream() -> None:
    sink = io.BytesIO()
    assert encode_to(EXAMPLE_VALUE, sink) == 19
    assert encode_to(NULL, sink) == 1
    assert sink.getvalue() == bytes.fromhex(EXAMPLE_HEX) + b'\x00'


def test_encode_deep_tree_without_recursion() -> None:
    depth = 20_000
    value = JArray()
    for _ in range(depth):
        value = JArray([value])
    data = encode(value)
    assert data == b'\x05\x01' * depth + b'\x05\x00'


def test_encode_unsupported_object() -> None:
    se = Serializer.build_bytes_serializer()
    with pytest.raises(UnsupportedTypeError):
        encode_value(se, 'not a value')  # type: ignore[arg-type]
