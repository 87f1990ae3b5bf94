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
In-memory representation of a JSON-like value tree.

A `Value` is one of seven variants, each a small immutable dataclass:

- `JNull`, `JTrue` and `JFalse` carry no payload (use the `NULL`, `TRUE` and `FALSE` instances);
- `JNumber` carries a double-precision float;
- `JString` carries a text;
- `JArray` carries an ordered tuple of values;
- `JObject` carries an ordered tuple of `(key, value)` pairs, keys may repeat and their order is kept.

Containers store tuples, so a tree is immutable and cannot reference itself.

>>> value = JObject([('a', JNumber(1.5)), ('b', JArray([TRUE, NULL]))])
>>> value.pairs[1]
('b', JArray(items=(JTrue(), JNull())))
>>> to_python(value)
{'a': 1.5, 'b': [True, None]}
>>> from_python({'a': 1.5, 'b': [True, None]}) == value
True
"""

from __future__ import annotations

import struct
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from itertools import zip_longest
from typing import Any, Callable, Optional, Union

from jbin.serialization.exceptions import UnsupportedTypeError


def _check_text(text: Any, what: str) -> None:
    if not isinstance(text, str):
        raise TypeError(f'{what} must be a str, got {type(text).__name__}')
    try:
        text.encode('utf-8')
    except UnicodeEncodeError as e:
        raise ValueError(f'{what} is not valid UTF-8 text') from e


def _check_value(obj: Any) -> None:
    if not isinstance(obj, VALUE_TYPES):
        raise TypeError(f'expected a Value, got {type(obj).__name__}')


@dataclass(frozen=True, slots=True)
class JNull:
    pass


@dataclass(frozen=True, slots=True)
class JTrue:
    pass


@dataclass(frozen=True, slots=True)
class JFalse:
    pass


@dataclass(frozen=True, slots=True, eq=False)
class JNumber:
    """A double-precision number.

    Two numbers are equal when their IEEE-754 bit patterns are equal, so `JNumber(-0.0) != JNumber(0.0)` and a NaN is
    equal to itself. This is what makes every number survive an encode/decode round-trip as an equal value.
    """

    value: float

    def __post_init__(self) -> None:
        value = self.value
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeError(f'number payload must be a float, got {type(value).__name__}')
        if isinstance(value, int):
            try:
                object.__setattr__(self, 'value', float(value))
            except OverflowError as e:
                raise ValueError(f'{value} is too large to be represented as a double') from e

    def _bits(self) -> bytes:
        return struct.pack('>d', self.value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JNumber):
            return NotImplemented
        return self._bits() == other._bits()

    def __hash__(self) -> int:
        return hash(self._bits())


@dataclass(frozen=True, slots=True)
class JString:
    value: str

    def __post_init__(self) -> None:
        _check_text(self.value, 'string payload')


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class JArray:
    items: tuple[Value, ...] = ()

    def __post_init__(self) -> None:
        items = tuple(self.items)
        for item in items:
            _check_value(item)
        object.__setattr__(self, 'items', items)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Value]:
        return iter(self.items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JArray):
            return NotImplemented
        return _same_tree(self, other)

    def __hash__(self) -> int:
        return _tree_hash(self)

    def __repr__(self) -> str:
        return _tree_repr(self)


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class JObject:
    """Ordered key/value pairs, duplicate keys are kept as they are."""

    pairs: tuple[tuple[str, Value], ...] = ()

    def __post_init__(self) -> None:
        raw_pairs: Iterable[tuple[str, Value]] = self.pairs
        if isinstance(raw_pairs, Mapping):
            raw_pairs = raw_pairs.items()
        pairs = []
        for key, value in raw_pairs:
            _check_text(key, 'object key')
            _check_value(value)
            pairs.append((key, value))
        object.__setattr__(self, 'pairs', tuple(pairs))

    def __len__(self) -> int:
        return len(self.pairs)

    def __iter__(self) -> Iterator[tuple[str, Value]]:
        return iter(self.pairs)

    def get_all(self, key: str) -> list[Value]:
        """All values stored under `key`, in order."""
        return [value for k, value in self.pairs if k == key]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JObject):
            return NotImplemented
        return _same_tree(self, other)

    def __hash__(self) -> int:
        return _tree_hash(self)

    def __repr__(self) -> str:
        return _tree_repr(self)


Value = Union[JNull, JTrue, JFalse, JNumber, JString, JArray, JObject]

VALUE_TYPES = (JNull, JTrue, JFalse, JNumber, JString, JArray, JObject)

NULL = JNull()
TRUE = JTrue()
FALSE = JFalse()


def boolean(flag: bool) -> Union[JTrue, JFalse]:
    return TRUE if flag else FALSE


def from_python(obj: Any) -> Value:
    """ Build a value tree from plain Python objects.

    `None`, `bool`, `int`, `float`, `str`, lists/tuples and mappings with `str` keys are supported, values that are
    already a `Value` are kept as they are.
    """
    if isinstance(obj, VALUE_TYPES):
        return obj
    if obj is None:
        return NULL
    if isinstance(obj, bool):
        return boolean(obj)
    if isinstance(obj, (int, float)):
        return JNumber(obj)
    if isinstance(obj, str):
        return JString(obj)
    if isinstance(obj, (list, tuple)):
        return JArray(from_python(item) for item in obj)
    if isinstance(obj, Mapping):
        pairs = []
        for key, value in obj.items():
            if not isinstance(key, str):
                raise UnsupportedTypeError(f'object keys must be str, got {type(key).__name__}')
            pairs.append((key, from_python(value)))
        return JObject(pairs)
    raise UnsupportedTypeError(f'cannot convert {type(obj).__name__} to a value')


def to_python(value: Value, *, object_hook: Callable[[list[tuple[str, Any]]], Any] = dict) -> Any:
    """ Convert a value tree to plain Python objects.

    Objects are built by calling `object_hook` with their list of pairs. With the default `dict` a repeated key keeps
    only its last value, use `object_hook=list` to see every pair.
    """
    # nodes are visited in reverse encoding order, so the converted children of a container are on top of the stack,
    # first child last, by the time the container itself is reached
    converted: list[Any] = []
    for _, _, node in reversed(list(walk(value))):
        match node:
            case JNull():
                converted.append(None)
            case JTrue():
                converted.append(True)
            case JFalse():
                converted.append(False)
            case JNumber(value=number):
                converted.append(number)
            case JString(value=text):
                converted.append(text)
            case JArray(items=items):
                converted.append([converted.pop() for _ in items])
            case JObject(pairs=pairs):
                converted.append(object_hook([(key, converted.pop()) for key, _ in pairs]))
            case _:
                raise UnsupportedTypeError(f'not a value: {type(node).__name__}')
    return converted.pop()


def walk(value: Value) -> Iterator[tuple[int, Optional[Union[int, str]], Value]]:
    """ Iterate over every node of a tree depth-first, in encoding order.

    Each step yields `(depth, label, node)` where the label is `None` for the root, the index for array items and the
    key for object values. This does not recurse, so it works for trees of any depth.

    >>> [(depth, label) for depth, label, _ in walk(from_python({'a': [1, 2], 'b': None}))]
    [(0, None), (1, 'a'), (2, 0), (2, 1), (1, 'b')]
    """
    stack: list[tuple[int, Optional[Union[int, str]], Value]] = [(0, None, value)]
    while stack:
        depth, label, node = stack.pop()
        yield depth, label, node
        if isinstance(node, JArray):
            stack.extend(reversed([(depth + 1, index, item) for index, item in enumerate(node.items)]))
        elif isinstance(node, JObject):
            stack.extend(reversed([(depth + 1, key, child) for key, child in node.pairs]))


def _shape(value: Value) -> Iterator[tuple[Any, ...]]:
    """Flatten a tree into one token per node, in encoding order. Two trees are equal exactly when their tokens are."""
    for _, label, node in walk(value):
        if isinstance(node, (JArray, JObject)):
            yield label, type(node), len(node)
        else:
            yield label, node


def _same_tree(a: Value, b: Value) -> bool:
    if a is b:
        return True
    end = object()
    return all(x == y for x, y in zip_longest(_shape(a), _shape(b), fillvalue=end))


def _tree_hash(value: Value) -> int:
    return hash(tuple(_shape(value)))


def _tree_repr(value: Value) -> str:
    parts: list[str] = []
    # pending text fragments and nodes still to be rendered, next one on top
    stack: list[Union[str, Value]] = [value]
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            parts.append(item)
            continue
        if isinstance(item, JArray):
            pieces: list[Union[str, Value]] = ['JArray(items=(']
            for index, child in enumerate(item.items):
                pieces.extend([', ', child] if index else [child])
            pieces.append(',))' if len(item.items) == 1 else '))')
        elif isinstance(item, JObject):
            pieces = ['JObject(pairs=(']
            for index, (key, child) in enumerate(item.pairs):
                pieces.extend([', (' if index else '(', repr(key) + ', ', child, ')'])
            pieces.append(',))' if len(item.pairs) == 1 else '))')
        else:
            parts.append(repr(item))
            continue
        stack.extend(reversed(pieces))
    return ''.join(parts)
