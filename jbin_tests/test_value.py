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

import math

import pytest

from jbin.serialization import UnsupportedTypeError
from jbin.value import (
    FALSE,
    NULL,
    TRUE,
    JArray,
    JNumber,
    JObject,
    JString,
    boolean,
    from_python,
    to_python,
    walk,
)


def test_number_accepts_int_and_float() -> None:
    assert JNumber(3).value == 3.0
    assert isinstance(JNumber(3).value, float)
    assert JNumber(1.5).value == 1.5


def test_number_rejects_other_types() -> None:
    with pytest.raises(TypeError):
        JNumber(True)
    with pytest.raises(TypeError):
        JNumber('1.5')  # type: ignore[arg-type]
    with pytest.raises(ValueError):
        JNumber(10 ** 400)


def test_number_equality_is_bitwise() -> None:
    assert JNumber(1.5) == JNumber(1.5)
    assert JNumber(0.0) != JNumber(-0.0)
    assert JNumber(math.nan) == JNumber(math.nan)
    assert hash(JNumber(math.nan)) == hash(JNumber(math.nan))
    assert JNumber(math.inf) != JNumber(-math.inf)
    assert JNumber(1.0) != JString('1.0')


def test_string_must_be_valid_text() -> None:
    assert JString('π').value == 'π'
    with pytest.raises(ValueError):
        JString('\ud800')
    with pytest.raises(TypeError):
        JString(b'bytes')  # type: ignore[arg-type]


def test_array_stores_a_tuple() -> None:
    array = JArray([TRUE, NULL])
    assert array.items == (TRUE, NULL)
    assert len(array) == 2
    assert list(array) == [TRUE, NULL]
    assert hash(array) == hash(JArray((TRUE, NULL)))
    assert JArray() == JArray([])


def test_array_rejects_non_values() -> None:
    with pytest.raises(TypeError):
        JArray([1])  # type: ignore[list-item]


def test_object_keeps_duplicates_and_order() -> None:
    obj = JObject([('b', TRUE), ('a', FALSE), ('b', NULL)])
    assert [key for key, _ in obj] == ['b', 'a', 'b']
    assert obj.get_all('b') == [TRUE, NULL]
    assert obj.get_all('missing') == []
    assert obj != JObject([('a', FALSE), ('b', TRUE), ('b', NULL)])


def test_object_from_mapping() -> None:
    assert JObject({'a': TRUE}) == JObject([('a', TRUE)])


def test_object_validates_keys_and_values() -> None:
    with pytest.raises(TypeError):
        JObject([(1, TRUE)])  # type: ignore[list-item]
    with pytest.raises(ValueError):
        JObject([('\udfff', TRUE)])
    with pytest.raises(TypeError):
        JObject([('a', None)])  # type: ignore[list-item]


def test_boolean() -> None:
    assert boolean(True) is TRUE
    assert boolean(False) is FALSE


def test_from_python() -> None:
    value = from_python({'a': 1, 'b': [True, False, None, 'x'], 'c': (2.5,)})
    assert value == JObject([
        ('a', JNumber(1.0)),
        ('b', JArray([TRUE, FALSE, NULL, JString('x')])),
        ('c', JArray([JNumber(2.5)])),
    ])
    assert from_python(TRUE) is TRUE


@pytest.mark.parametrize('obj', [b'bytes', {1: 'a'}, object(), {1.5}])
def test_from_python_unsupported(obj) -> None:
    with pytest.raises(UnsupportedTypeError):
        from_python(obj)


def test_to_python() -> None:
    value = JObject([('a', JArray([NULL, TRUE, FALSE, JNumber(2), JString('s')])), ('a', JObject())])
    assert to_python(value) == {'a': {}}
    assert to_python(value, object_hook=list) == [('a', [None, True, False, 2.0, 's']), ('a', [])]


def test_to_python_unsupported() -> None:
    with pytest.raises(UnsupportedTypeError):
        to_python('not a value')  # type: ignore[arg-type]


def test_walk_deep_tree() -> None:
    value = JArray()
    for _ in range(5000):
        value = JArray([value])
    depths = [depth for depth, _, _ in walk(value)]
    assert depths == list(range(5001))


def _nested_arrays(depth: int, leaf=NULL):
    value = leaf
    for _ in range(depth):
        value = JArray([value])
    return value


def test_container_equality_compares_structure() -> None:
    assert JArray([JNumber(1), JString('x')]) == JArray([JNumber(1.0), JString('x')])
    assert JArray([NULL]) != JArray([NULL, NULL])
    assert JArray([JArray()]) != JArray([JObject()])
    assert JObject([('a', NULL)]) != JObject([('b', NULL)])
    assert JArray() != JObject()
    assert JArray([JNumber(0.0)]) != JArray([JNumber(-0.0)])
    assert JArray([JNumber(math.nan)]) == JArray([JNumber(math.nan)])
    assert JArray([TRUE]) != [TRUE]


def test_deep_trees_compare_hash_and_convert() -> None:
    depth = 5000
    a = _nested_arrays(depth)
    b = _nested_arrays(depth)
    assert a is not b
    assert a == b
    assert hash(a) == hash(b)
    assert a != _nested_arrays(depth, leaf=TRUE)
    assert a != _nested_arrays(depth + 1)

    python = to_python(a)
    for _ in range(depth):
        assert isinstance(python, list) and len(python) == 1
        python = python[0]
    assert python is None

    text = repr(a)
    assert text.startswith('JArray(items=(JArray(items=(')
    assert text.count('JArray(items=(') == depth


def test_deep_object_to_python() -> None:
    value = NULL
    for _ in range(3000):
        value = JObject([('k', value)])
    python = to_python(value, object_hook=list)
    for _ in range(3000):
        [(key, python)] = python
        assert key == 'k'
    assert python is None


def test_repr() -> None:
    assert repr(JArray()) == 'JArray(items=())'
    assert repr(JArray([NULL])) == 'JArray(items=(JNull(),))'
    assert repr(JArray([JNumber(1.5), JString('x')])) == "JArray(items=(JNumber(value=1.5), JString(value='x')))"
    assert repr(JObject()) == 'JObject(pairs=())'
    assert repr(JObject([('a', TRUE)])) == "JObject(pairs=(('a', JTrue()),))"
    assert repr(JObject([('a', TRUE), ('b', JArray([FALSE]))])) == (
        "JObject(pairs=(('a', JTrue()), ('b', JArray(items=(JFalse(),)))))"
    )
