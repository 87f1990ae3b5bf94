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

import doctest
import importlib

import pytest

MODULES_WITH_EXAMPLES = [
    'jbin',
    'jbin.value',
    'jbin.codec',
    'jbin.codec.encoder',
    'jbin.codec.decoder',
    'jbin.serialization.memory',
    'jbin.serialization.encoding.varint',
    'jbin.serialization.encoding.float64',
    'jbin.serialization.encoding.utf8',
    'jbin.cli.inspect_file',
    'jbin.cli.util',
]


@pytest.mark.parametrize('module_name', MODULES_WITH_EXAMPLES)
def test_docstring_examples(module_name: str) -> None:
    module = importlib.import_module(module_name)
    result = doctest.testmod(module)
    assert result.attempted > 0
    assert result.failed == 0
