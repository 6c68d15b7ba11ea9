import logging
import os
import tempfile
import unittest
from pathlib import Path

from mock import patch
from pydantic import ValidationError

import powerprofile.common.profile_logging as pp_logging
import powerprofile.profile.store as profile_store
from powerprofile.common.profile_logging import DEFAULT_LOG_PATH
from powerprofile.common.constants import DEFAULT_PROFILE_FILE
from powerprofile.profile.settings import ProfileSettings


class TestProfileSettings(unittest.TestCase):

    @patch.dict(os.environ, {}, clear=True)
    def test_defaults(self):
        settings = ProfileSettings()
        self.assertIsNone(settings.profile_file)
        self.assertEqual('INFO', settings.log_level)
        self.assertFalse(settings.debug)
        self.assertEqual(DEFAULT_LOG_PATH, settings.log_path)
        self.assertEqual(DEFAULT_PROFILE_FILE, settings.document_file)

    @patch.dict(os.environ, {}, clear=True)
    def test_log_level_validation(self):
        self.assertEqual('DEBUG', ProfileSettings(log_level=' debug ').log_level)
        with self.assertRaises(ValidationError):
            ProfileSettings(log_level='verbose')

    @patch.dict(os.environ, {'POWER_PROFILE_PROFILE_FILE': '/etc/power_profile.xml',
                             'POWER_PROFILE_DEBUG': 'true'}, clear=True)
    def test_environment_variables(self):
        settings = ProfileSettings()
        self.assertEqual(Path('/etc/power_profile.xml'), settings.document_file)
        self.assertTrue(settings.debug)

    @patch.dict(os.environ, {'POWER_PROFILE_LOG_LEVEL': 'ERROR'}, clear=True)
    def test_from_toml(self):
        with tempfile.TemporaryDirectory() as tmp_dir:
            config_file = Path(tmp_dir) / 'power_profile.toml'
            config_file.write_text('profile_file = "/data/device.xml"\n'
                                   'log_level = "WARNING"\n'
                                   'disable_file_logging = true\n')
            settings = ProfileSettings.from_toml(str(config_file))

        self.assertEqual(Path('/data/device.xml'), settings.profile_file)
        self.assertTrue(settings.disable_file_logging)
        # Environment takes precedence over the file
        self.assertEqual('ERROR', settings.log_level)

    def test_from_toml_missing_file(self):
        with self.assertRaises(FileNotFoundError):
            ProfileSettings.from_toml(Path('/non/existing/power_profile.toml'))

    @patch('powerprofile.profile.settings.recompute_profile_loggers')
    @patch('powerprofile.profile.settings.set_logging_configuration')
    @patch.dict(os.environ, {}, clear=True)
    def test_configure_logging(self, mock_set_logging, mock_recompute):
        settings = ProfileSettings(log_level='WARNING', debug=True, log_path='/tmp/pp_logs',
                                   disable_file_logging=True)
        settings.configure_logging()
        mock_set_logging.assert_called_once_with(debug=True,
                                                 log_path=Path('/tmp/pp_logs'),
                                                 log_level=logging.WARNING,
                                                 disable_file_logging=True)
        mock_recompute.assert_called_once()


class TestProfileSettingsLogging(unittest.TestCase):

    def setUp(self) -> None:
        self.tmp_dir = tempfile.TemporaryDirectory()
        self.saved = (pp_logging._DEBUG, pp_logging._LOG_LEVEL, pp_logging._LOG_PATH, pp_logging._DISABLE_FILE_LOGGING)

    def tearDown(self) -> None:
        (pp_logging._DEBUG, pp_logging._LOG_LEVEL,
         pp_logging._LOG_PATH, pp_logging._DISABLE_FILE_LOGGING) = self.saved
        pp_logging.recompute_profile_loggers()
        self.tmp_dir.cleanup()

    @patch.dict(os.environ, {}, clear=True)
    def test_configure_logging_updates_existing_loggers(self):
        settings = ProfileSettings(debug=True, log_level='DEBUG', log_path=self.tmp_dir.name,
                                   disable_file_logging=True)
        settings.configure_logging()

        self.assertEqual(logging.DEBUG, profile_store.logger.level)
        self.assertEqual(1, len(profile_store.logger.handlers))
        self.assertEqual(logging.DEBUG, profile_store.logger.handlers[0].level)
        self.assertEqual(logging.DEBUG, logging.getLogger('powerprofile.profile.loader').level)

    @patch.dict(os.environ, {}, clear=True)
    def test_configure_logging_uncreatable_path(self):
        blocking_file = Path(self.tmp_dir.name) / 'not_a_dir'
        blocking_file.write_text('')

        ProfileSettings(log_path=blocking_file / 'logs').configure_logging()

        self.assertTrue(pp_logging._DISABLE_FILE_LOGGING)
        self.assertEqual(1, len(profile_store.logger.handlers))
