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
Compact binary serialization of JSON-like values.

>>> data = encode(from_python({'a': 1.5, 'b': [True, None]}))
>>> len(data)
19
>>> to_python(decode(data))
{'a': 1.5, 'b': [True, None]}
"""

from jbin.codec import decode, decode_from, encode, encode_to
from jbin.serialization import (
    BadDataError,
    InvalidTagError,
    InvalidUtf8Error,
    MaxDepthExceededError,
    OutOfDataError,
    SerializationError,
    TooLongError,
    UnsupportedTypeError,
)
from jbin.value import (
    FALSE,
    NULL,
    TRUE,
    JArray,
    JFalse,
    JNull,
    JNumber,
    JObject,
    JString,
    JTrue,
    Value,
    boolean,
    from_python,
    to_python,
    walk,
)
from jbin.version import __version__

__all__ = [
    'encode',
    'encode_to',
    'decode',
    'decode_from',
    'Value',
    'JNull',
    'JTrue',
    'JFalse',
    'JNumber',
    'JString',
    'JArray',
    'JObject',
    'NULL',
    'TRUE',
    'FALSE',
    'boolean',
    'from_python',
    'to_python',
    'walk',
    'SerializationError',
    'OutOfDataError',
    'BadDataError',
    'InvalidTagError',
    'InvalidUtf8Error',
    'TooLongError',
    'MaxDepthExceededError',
    'UnsupportedTypeError',
    '__version__',
]
