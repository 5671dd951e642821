from haven import create, env
from haven.config import (
    check_types_from_environment,
    log_handler_from_environment,
    parse_flag,
)
from haven.errors import ConfigurationError
import json
import logging
import pathlib
import tempfile
import unittest


class TestCheckTypesFromEnvironment(unittest.TestCase):
    def test_default_is_on(self) -> None:
        self.assertTrue(check_types_from_environment({}))

    def test_production_turns_checking_off(self) -> None:
        for value, expected in [
            ('production', False),
            ('Production', False),
            ('staging', True),
        ]:
            with self.subTest(value=value):
                self.assertIs(
                    expected,
                    check_types_from_environment({'HAVEN_ENV': value}),
                )

    def test_explicit_flag_wins(self) -> None:
        self.assertTrue(
            check_types_from_environment(
                {'HAVEN_ENV': 'production', 'HAVEN_CHECK_TYPES': 'yes'}
            )
        )
        self.assertFalse(
            check_types_from_environment({'HAVEN_CHECK_TYPES': '0'})
        )

    def test_invalid_flag(self) -> None:
        with self.assertRaises(ConfigurationError) as cm:
            check_types_from_environment({'HAVEN_CHECK_TYPES': 'maybe'})
        self.assertIn('HAVEN_CHECK_TYPES', str(cm.exception))
        self.assertIsInstance(cm.exception, ValueError)

    def test_turning_checking_off_is_logged(self) -> None:
        with self.assertLogs('haven.config', level='INFO') as cm:
            check_types_from_environment({'HAVEN_ENV': 'Production'})
        self.assertEqual(
            ['INFO:haven.config:type checking is off (HAVEN_ENV=production)'],
            cm.output,
        )


class TestLogHandlerFromEnvironment(unittest.TestCase):
    def setUp(self) -> None:
        self.python_logger = logging.getLogger('haven')
        self.old_level = self.python_logger.level
        directory = tempfile.TemporaryDirectory()
        self.addCleanup(directory.cleanup)
        self.path = pathlib.Path(directory.name) / 'haven.log'

    def tearDown(self) -> None:
        self.python_logger.setLevel(self.old_level)

    def test_unset(self) -> None:
        self.assertIsNone(log_handler_from_environment({}))
        self.assertIsNone(log_handler_from_environment({'HAVEN_LOG_FILE': ''}))

    def test_records_are_written_as_json(self) -> None:
        handler = log_handler_from_environment(
            {'HAVEN_LOG_FILE': str(self.path)}
        )
        assert handler is not None
        try:
            create(check_types=True, env=env)
        finally:
            self.python_logger.removeHandler(handler)
            handler.close()
        records = [
            json.loads(line) for line in self.path.read_text().splitlines()
        ]
        self.assertIn(
            'haven.module', [record['name'] for record in records]
        )
        self.assertTrue(
            all(record['level_name'] == 'DEBUG' for record in records)
        )


class TestParseFlag(unittest.TestCase):
    def test_values(self) -> None:
        for text, expected in [
            ('1', True),
            ('TRUE', True),
            (' on ', True),
            ('no', False),
            ('Off', False),
        ]:
            with self.subTest(text=text):
                self.assertIs(expected, parse_flag('FLAG', text))
