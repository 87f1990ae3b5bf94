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


class SerializationError(ValueError):
    """Base class for all errors raised while encoding or decoding."""


class OutOfDataError(SerializationError):
    """There are fewer bytes available than what is required to read a value."""


class BadDataError(SerializationError):
    """The data being read is malformed."""


class InvalidTagError(BadDataError):
    """The tag byte does not identify any known value variant."""


class InvalidUtf8Error(BadDataError):
    """A text payload is not valid UTF-8."""


class TooLongError(SerializationError):
    """A declared length is above the configured limit."""


class MaxDepthExceededError(SerializationError):
    """Containers are nested deeper than the configured limit."""


class UnsupportedTypeError(SerializationError):
    """The given object cannot be represented in the value model."""
