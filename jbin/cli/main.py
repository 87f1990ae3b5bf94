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

import os
import sys
from collections import defaultdict
from types import ModuleType
from typing import NamedTuple, Optional

from structlog import get_logger

from jbin.cli.util import extract_logging_config, setup_logging

logger = get_logger()


class Command(NamedTuple):
    name: str
    group: str
    module: ModuleType
    description: str


class CliManager:
    """Dispatches `jbin <command> [args...]` to the module implementing the command.

    Command modules expose `main(argv) -> int`, logging is set up here before it is called.
    """

    def __init__(self) -> None:
        self.prog = os.path.basename(sys.argv[0])
        self.commands: dict[str, Command] = {}

        from jbin.cli import inspect_file, validate

        self.register(Command('inspect', 'codec', inspect_file, 'Decode a file and print an outline of its value tree'))
        self.register(Command('validate', 'codec', validate, 'Check that files hold exactly one well-formed value'))

    def register(self, command: Command) -> None:
        if command.name in self.commands:
            raise ValueError(f'command already registered: {command.name}')
        self.commands[command.name] = command

    def help(self) -> None:
        from colorama import Fore, Style

        by_group: dict[str, list[Command]] = defaultdict(list)
        for command in self.commands.values():
            by_group[command.group].append(command)
        width = max(len(name) for name in self.commands)

        print()
        print('Available subcommands:')
        print()
        for group in sorted(by_group):
            print(f'{Fore.RED}{Style.BRIGHT}[{group}]{Style.RESET_ALL}')
            for command in by_group[group]:
                print(f'    {command.name.ljust(width)}   {command.description}')
            print()

    def execute_from_command_line(self, argv: Optional[list[str]] = None) -> int:
        args = list(sys.argv[1:] if argv is None else argv)
        if not args or args[0] == 'help':
            self.help()
            return 0

        name, rest = args[0], args[1:]
        command = self.commands.get(name)
        if command is None:
            print(f'Unknown command: "{name}"')
            print(f'Type "{self.prog} help" for usage.')
            return -1

        setup_logging(extract_logging_config(rest))
        return command.module.main(rest)


def main() -> None:
    try:
        sys.exit(CliManager().execute_from_command_line())
    except KeyboardInterrupt:
        logger.warning('interrupted, exiting')
        sys.exit(1)
    except Exception:
        logger.exception('uncaught exception')
        sys.exit(2)


if __name__ == '__main__':
    main()
