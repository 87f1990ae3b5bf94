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

import logging.config
from collections import OrderedDict
from enum import IntEnum, auto
from typing import Any, NamedTuple

import configargparse
import structlog
from typing_extensions import assert_never


def create_parser(*, add_help: bool = True) -> configargparse.ArgumentParser:
    """Parser for a command, every long option can also be given as a `JBIN_*` environment variable."""
    return configargparse.ArgumentParser(auto_env_var_prefix='jbin_', add_help=add_help)


class LoggingOutput(IntEnum):
    NULL = auto()
    PRETTY = auto()
    JSON = auto()


class LoggingConfig(NamedTuple):
    output: LoggingOutput
    debug: bool


def extract_logging_config(argv: list[str]) -> LoggingConfig:
    """Remove the logging flags from `argv`, in place, and return the configuration they select.

    >>> argv = ['file.bin', '--json-logs', '--debug']
    >>> extract_logging_config(argv)
    LoggingConfig(output=<LoggingOutput.JSON: 3>, debug=True)
    >>> argv
    ['file.bin']
    """
    parser = create_parser(add_help=False)
    outputs = parser.add_mutually_exclusive_group()
    outputs.add_argument('--json-logs', dest='output', action='store_const', const=LoggingOutput.JSON)
    outputs.add_argument('--disable-logs', dest='output', action='store_const', const=LoggingOutput.NULL)
    parser.add_argument('--debug', action='store_true')
    parser.set_defaults(output=LoggingOutput.PRETTY)

    args, remaining = parser.parse_known_args(argv)
    argv[:] = remaining
    return LoggingConfig(output=args.output, debug=args.debug)


def setup_logging(config: LoggingConfig) -> None:
    """Route structlog and stdlib logging to stderr, rendered for a terminal or as JSON lines."""
    timestamper = structlog.processors.TimeStamper(fmt='%Y-%m-%d %H:%M:%S')

    renderer: Any
    match config.output:
        case LoggingOutput.NULL:
            renderer = None
        case LoggingOutput.PRETTY:
            renderer = structlog.dev.ConsoleRenderer(colors=True)
        case LoggingOutput.JSON:
            renderer = structlog.processors.JSONRenderer()
        case _:
            assert_never(config.output)

    formatters: dict[str, Any] = {}
    handler: dict[str, Any] = {'class': 'logging.NullHandler'}
    if renderer is not None:
        formatters['structlog'] = {
            '()': structlog.stdlib.ProcessorFormatter,
            'processor': renderer,
            # records from stdlib loggers get the same fields as structlog events
            'foreign_pre_chain': [structlog.stdlib.add_log_level, structlog.stdlib.add_logger_name, timestamper],
        }
        handler = {'class': 'logging.StreamHandler', 'formatter': 'structlog'}

    logging.config.dictConfig({
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': formatters,
        'handlers': {'default': handler},
        'root': {'handlers': ['default'], 'level': 'DEBUG' if config.debug else 'INFO'},
    })

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            timestamper,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=OrderedDict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
