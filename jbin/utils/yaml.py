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
Settings files in YAML.

A file may name another one under the `extends` key, given relative to itself, and inherits every key it does not set.
Chains of any length are followed, a chain that comes back to a file it already visited is an error. Settings are
flat, so the merge is shallow.
"""

from pathlib import Path
from typing import Any, Optional, TypeVar, Union

import yaml
from pydantic import BaseModel

EXTENDS_KEY = 'extends'

ModelT = TypeVar('ModelT', bound=BaseModel)


def read_yaml_mapping(filepath: Union[Path, str]) -> dict[str, Any]:
    """Read a yaml file that holds a mapping, an empty file reads as an empty mapping."""
    path = Path(filepath)
    if not path.is_file():
        raise ValueError(f"'{path}' is not a file")

    with path.open() as fp:
        contents = yaml.safe_load(fp)

    if contents is None:
        return {}
    if not isinstance(contents, dict):
        raise ValueError(f"'{path}' cannot be parsed as a dictionary")
    return contents


def read_extended_yaml(filepath: Union[Path, str]) -> dict[str, Any]:
    """Read a yaml file merged over the files it extends. The `extends` key is not part of the result."""
    layers: list[dict[str, Any]] = []
    visited: set[Path] = set()
    path: Optional[Path] = Path(filepath)
    while path is not None:
        resolved = path.resolve()
        if resolved in visited:
            raise ValueError('Cannot parse yaml with recursive extensions.')
        visited.add(resolved)

        contents = read_yaml_mapping(path)
        parent = contents.pop(EXTENDS_KEY, None)
        layers.append(contents)
        path = path.parent / str(parent) if parent else None

    merged: dict[str, Any] = {}
    # base files first, so the file that was asked for has the last word
    for contents in reversed(layers):
        merged.update(contents)
    return merged


def load_yaml_settings(model: type[ModelT], filepath: Union[Path, str]) -> ModelT:
    """Validate the merged contents of a yaml settings file against a pydantic model."""
    return model.model_validate(read_extended_yaml(filepath))
