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
Encoding of a value tree.

Layout of each value: [tag: 1 byte][payload], where the payload depends on the tag:

- null, true, false: empty
- number: 8 bytes, big-endian IEEE-754 double
- string: [N: varint][N bytes of utf-8]
- array: [N: varint][value_0]...[value_N]
- object: [N: varint][key_0: varint length + utf-8][value_0]...[key_N][value_N]

>>> from jbin.value import JArray, JNumber, JObject, NULL, TRUE
>>> se = Serializer.build_bytes_serializer()
>>> encode_value(se, JObject([('a', JNumber(1.5)), ('b', JArray([TRUE, NULL]))]))
19
>>> bytes(se.finalize()).hex(' ')
'06 02 01 61 03 3f f8 00 00 00 00 00 00 01 62 05 02 01 00'

Breakdown of the result:

    06: object tag
    02: 2 pairs
    0161: key 'a' with length prefix
    03 3ff8000000000000: number tag, 1.5
    0162: key 'b' with length prefix
    05 02: array tag, 2 items
    01: true
    00: null
"""

from collections.abc import Iterator
from typing import Optional

from jbin.codec.tags import Tag
from jbin.serialization import Serializer, UnsupportedTypeError
from jbin.serialization.encoding.float64 import encode_float64
from jbin.serialization.encoding.utf8 import encode_utf8
from jbin.serialization.encoding.varint import encode_varint
from jbin.value import JArray, JFalse, JNull, JNumber, JObject, JString, JTrue, Value

_Child = tuple[Optional[str], Value]


def _encode_head(serializer: Serializer, value: Value) -> Optional[Iterator[_Child]]:
    """Write a value, or only the header of a container, in which case its children are returned to be written next."""
    match value:
        case JNull():
            serializer.write_byte(Tag.NULL)
        case JTrue():
            serializer.write_byte(Tag.TRUE)
        case JFalse():
            serializer.write_byte(Tag.FALSE)
        case JNumber(value=number):
            serializer.write_byte(Tag.NUMBER)
            encode_float64(serializer, number)
        case JString(value=text):
            serializer.write_byte(Tag.STRING)
            encode_utf8(serializer, text)
        case JArray(items=items):
            serializer.write_byte(Tag.ARRAY)
            encode_varint(serializer, len(items))
            return ((None, item) for item in items)
        case JObject(pairs=pairs):
            serializer.write_byte(Tag.OBJECT)
            encode_varint(serializer, len(pairs))
            return iter(pairs)
        case _:
            raise UnsupportedTypeError(f'cannot encode {type(value).__name__}')
    return None


def encode_value(serializer: Serializer, value: Value) -> int:
    """ Encode a value tree depth-first and return the number of bytes written.

    Containers are tracked with an explicit stack instead of recursion, so the depth of the tree is only limited by
    memory. This modules's docstring has more details and examples.
    """
    start = serializer.cur_pos()
    stack: list[Iterator[_Child]] = []
    key: Optional[str] = None
    while True:
        if key is not None:
            encode_utf8(serializer, key)
        children = _encode_head(serializer, value)
        if children is not None:
            stack.append(children)
        while stack:
            child = next(stack[-1], None)
            if child is not None:
                key, value = child
                break
            stack.pop()
        else:
            return serializer.cur_pos() - start
