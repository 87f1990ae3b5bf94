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

from argparse import ArgumentParser, FileType, Namespace
from typing import Optional

from structlog import get_logger

logger = get_logger()


def create_parser() -> ArgumentParser:
    from jbin.cli.util import create_parser
    parser = create_parser()
    parser.add_argument('files', nargs='+', type=FileType('rb'), help='Files holding one encoded value each')
    return parser


def execute(args: Namespace) -> int:
    from jbin.codec import decode
    from jbin.serialization import SerializationError

    failed = 0
    for file in args.files:
        with file as fp:
            data = fp.read()
        try:
            decode(data)
        except SerializationError as e:
            failed += 1
            print(f'{file.name}: {e.__class__.__name__}: {e}')
        else:
            print(f'{file.name}: ok')

    if failed:
        logger.warning('invalid files found', failed=failed, total=len(args.files))
        return 1
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    parser = create_parser()
    args = parser.parse_args(argv)
    return execute(args)
