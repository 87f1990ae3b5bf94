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
Decoding of a value tree, the reverse of `jbin.codec.encoder`.

Decoding is all-or-nothing: either a complete value is returned or an exception is raised, every exception is a
`SerializationError`:

- `OutOfDataError` when the data ends before the value does;
- `InvalidTagError` when a tag byte is not one of the seven known tags;
- `InvalidUtf8Error` when a string or a key is not valid utf-8;
- `BadDataError` when a length prefix is not a valid varint;
- `MaxDepthExceededError` and `TooLongError` when one of the optional limits is exceeded.

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('06 02 0161 03 3ff8000000000000 0162 05 02 01 00'))
>>> decode_value(de)
JObject(pairs=(('a', JNumber(value=1.5)), ('b', JArray(items=(JTrue(), JNull())))))
>>> de.finalize()

>>> de = Deserializer.build_bytes_deserializer(bytes([0x07]))
>>> try:
...     decode_value(de)
... except InvalidTagError as e:
...     print(*e.args)
invalid tag byte: 0x07
"""

from dataclasses import dataclass, field
from typing import Any, Optional

from typing_extensions import assert_never

from jbin.codec.tags import Tag
from jbin.serialization import Deserializer, InvalidTagError, MaxDepthExceededError, TooLongError
from jbin.serialization.consts import DEFAULT_MAX_DEPTH
from jbin.serialization.encoding.float64 import decode_float64
from jbin.serialization.encoding.utf8 import decode_utf8
from jbin.serialization.encoding.varint import decode_varint
from jbin.value import FALSE, NULL, TRUE, JArray, JNumber, JObject, JString, Value


@dataclass(slots=True)
class _Frame:
    """A container whose children are still being read."""

    tag: Tag
    remaining: int
    children: list[Any] = field(default_factory=list)
    key: Optional[str] = None

    def add(self, value: Value) -> None:
        if self.tag is Tag.OBJECT:
            assert self.key is not None
            self.children.append((self.key, value))
            self.key = None
        else:
            self.children.append(value)
        self.remaining -= 1

    def build(self) -> Value:
        if self.tag is Tag.OBJECT:
            return JObject(self.children)
        return JArray(self.children)


def _read_tag(deserializer: Deserializer) -> Tag:
    raw_tag = deserializer.read_byte()
    try:
        return Tag(raw_tag)
    except ValueError as e:
        raise InvalidTagError(f'invalid tag byte: 0x{raw_tag:02x}') from e


def decode_value(
    deserializer: Deserializer,
    *,
    max_depth: int = DEFAULT_MAX_DEPTH,
    max_string_bytes: Optional[int] = None,
    max_container_length: Optional[int] = None,
) -> Value:
    """ Decode exactly one value tree, consuming only its bytes.

    Nesting is tracked with an explicit stack, `max_depth` is the maximum number of containers enclosing a value
    (counting empty containers too). `max_string_bytes` limits the encoded size of strings and keys and
    `max_container_length` the number of items or pairs of a container, `None` disables these two limits.
    """
    stack: list[_Frame] = []
    while True:
        if stack and stack[-1].tag is Tag.OBJECT:
            stack[-1].key = decode_utf8(deserializer, max_length=max_string_bytes)
        value: Value
        tag = _read_tag(deserializer)
        match tag:
            case Tag.NULL:
                value = NULL
            case Tag.TRUE:
                value = TRUE
            case Tag.FALSE:
                value = FALSE
            case Tag.NUMBER:
                value = JNumber(decode_float64(deserializer))
            case Tag.STRING:
                value = JString(decode_utf8(deserializer, max_length=max_string_bytes))
            case Tag.ARRAY | Tag.OBJECT:
                if len(stack) >= max_depth:
                    raise MaxDepthExceededError(f'containers are nested deeper than {max_depth} levels')
                length = decode_varint(deserializer)
                if max_container_length is not None and length > max_container_length:
                    raise TooLongError(f'container length {length} exceeds the maximum of {max_container_length}')
                frame = _Frame(tag, length)
                if length > 0:
                    stack.append(frame)
                    continue
                value = frame.build()
            case _:
                assert_never(tag)
        # attach the value to its parent, closing every container that got complete
        while stack:
            parent = stack[-1]
            parent.add(value)
            if parent.remaining > 0:
                break
            stack.pop()
            value = parent.build()
        else:
            return value
