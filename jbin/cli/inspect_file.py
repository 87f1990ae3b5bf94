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

from argparse import ArgumentParser, ArgumentTypeError, FileType, Namespace
from typing import Iterator, NamedTuple, Optional

from structlog import get_logger

from jbin.value import JArray, JFalse, JNull, JNumber, JObject, JString, JTrue, Value, walk

logger = get_logger()


class TreeStats(NamedTuple):
    nodes: int
    max_depth: int


def describe(node: Value) -> str:
    match node:
        case JNull():
            return 'null'
        case JTrue():
            return 'true'
        case JFalse():
            return 'false'
        case JNumber(value=number):
            return f'number {number!r}'
        case JString(value=text):
            return f'string {text!r}'
        case JArray(items=items):
            return f'array ({len(items)} items)'
        case JObject(pairs=pairs):
            return f'object ({len(pairs)} pairs)'
        case _:
            raise TypeError(f'not a value: {type(node).__name__}')


def iter_outline(value: Value, *, indent: str = '  ') -> Iterator[str]:
    """ Yield one line per node, indented by depth.

    >>> from jbin.value import from_python
    >>> for line in iter_outline(from_python({'a': 1.5, 'b': [True, None]})):
    ...     print(line)
    object (2 pairs)
      'a': number 1.5
      'b': array (2 items)
        [0] true
        [1] null
    """
    for depth, label, node in walk(value):
        if label is None:
            prefix = ''
        elif isinstance(label, int):
            prefix = f'[{label}] '
        else:
            prefix = f'{label!r}: '
        yield f'{indent * depth}{prefix}{describe(node)}'


def collect_stats(value: Value) -> TreeStats:
    """Count the nodes of a tree and measure its container nesting (0 for a lone scalar)."""
    nodes = 0
    max_depth = 0
    for depth, _, node in walk(value):
        nodes += 1
        if isinstance(node, (JArray, JObject)):
            max_depth = max(max_depth, depth + 1)
    return TreeStats(nodes=nodes, max_depth=max_depth)


def positive_int(text: str) -> int:
    value = int(text)
    if value <= 0:
        raise ArgumentTypeError(f'must be a positive integer: {text}')
    return value


def create_parser() -> ArgumentParser:
    from jbin.cli.util import create_parser
    parser = create_parser()
    parser.add_argument('file', type=FileType('rb'), help='File holding one encoded value')
    parser.add_argument('--max-depth', type=positive_int, help='Override the maximum nesting accepted')
    parser.add_argument('--indent', default='  ', help='Indentation used for each level of the outline')
    return parser


def execute(args: Namespace) -> int:
    from jbin.codec import decode
    from jbin.conf import get_settings
    from jbin.serialization import SerializationError

    settings = get_settings()
    if args.max_depth is not None:
        settings = settings.model_copy(update={'MAX_DEPTH': args.max_depth})

    with args.file as fp:
        data = fp.read()

    try:
        value = decode(data, settings=settings)
    except SerializationError as e:
        logger.error('cannot decode file', file=args.file.name, error=str(e))
        return 1

    for line in iter_outline(value, indent=args.indent):
        print(line)
    stats = collect_stats(value)
    print()
    print(f'size: {len(data)} bytes, nodes: {stats.nodes}, max depth: {stats.max_depth}')
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    parser = create_parser()
    args = parser.parse_args(argv)
    return execute(args)
