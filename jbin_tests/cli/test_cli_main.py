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

import sys
import unittest
from contextlib import redirect_stderr, redirect_stdout
from io import StringIO
from unittest.mock import patch

from structlog.testing import capture_logs

from jbin.cli import main
from jbin.cli.util import LoggingConfig, LoggingOutput, extract_logging_config


class CliMainTest(unittest.TestCase):
    def test_help(self):
        cli = main.CliManager()

        f = StringIO()
        with capture_logs():
            with redirect_stdout(f):
                cli.help()
        output = f.getvalue()

        self.assertIn('Available subcommands:', output)
        self.assertIn('inspect', output)
        self.assertIn('validate', output)

    def test_no_command_prints_help(self):
        f = StringIO()
        with patch.object(sys, 'argv', ['jbin']):
            with redirect_stdout(f):
                result = main.CliManager().execute_from_command_line()
        self.assertEqual(result, 0)
        self.assertIn('Available subcommands:', f.getvalue())

    def test_unknown_command(self):
        f = StringIO()
        with patch.object(sys, 'argv', ['jbin', 'nope']):
            with redirect_stdout(f):
                result = main.CliManager().execute_from_command_line()
        self.assertEqual(result, -1)
        self.assertIn('Unknown command: "nope"', f.getvalue())

    def test_unknown_command_from_explicit_argv(self):
        f = StringIO()
        with redirect_stdout(f):
            result = main.CliManager().execute_from_command_line(['nope', '--debug'])
        self.assertEqual(result, -1)
        self.assertIn('Unknown command: "nope"', f.getvalue())

    def test_register_twice(self):
        cli = main.CliManager()
        with self.assertRaises(ValueError):
            cli.register(cli.commands['inspect'])

    def test_interrupt_exits_with_warning(self):
        with patch.object(main.CliManager, 'execute_from_command_line', side_effect=KeyboardInterrupt):
            with capture_logs() as logs:
                with self.assertRaises(SystemExit) as cm:
                    main.main()
        self.assertEqual(cm.exception.code, 1)
        self.assertEqual(logs[-1]['event'], 'interrupted, exiting')
        self.assertEqual(logs[-1]['log_level'], 'warning')

    def test_uncaught_exception_exits_with_2(self):
        with patch.object(main.CliManager, 'execute_from_command_line', side_effect=RuntimeError('boom')):
            with capture_logs() as logs:
                with self.assertRaises(SystemExit) as cm:
                    main.main()
        self.assertEqual(cm.exception.code, 2)
        self.assertEqual(logs[-1]['log_level'], 'error')


class LoggingArgsTest(unittest.TestCase):
    def test_defaults(self):
        argv = ['file.bin']
        self.assertEqual(extract_logging_config(argv), LoggingConfig(output=LoggingOutput.PRETTY, debug=False))
        self.assertEqual(argv, ['file.bin'])

    def test_flags_are_removed(self):
        argv = ['--disable-logs', 'a.bin', '--debug', 'b.bin']
        self.assertEqual(extract_logging_config(argv), LoggingConfig(output=LoggingOutput.NULL, debug=True))
        self.assertEqual(argv, ['a.bin', 'b.bin'])

    def test_outputs_are_exclusive(self):
        with redirect_stderr(StringIO()):
            with self.assertRaises(SystemExit):
                extract_logging_config(['--json-logs', '--disable-logs'])
