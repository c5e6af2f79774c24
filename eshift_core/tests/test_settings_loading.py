import os
import runpy
import sys
from unittest import mock

from django.test import SimpleTestCase


class SettingsLoadingTest(SimpleTestCase):
    """Settings modules executed the way ``manage.py <command>`` would load them."""

    def run_outside_tests(self, module):
        modules = {k: v for k, v in sys.modules.items() if k not in ('pytest', 'eshift_core.settings')}
        with mock.patch.dict(os.environ, {}, clear=True), \
                mock.patch.object(sys, 'argv', ['manage.py', 'check']), \
                mock.patch.dict(sys.modules, modules, clear=True):
            return runpy.run_module(module)

    def test_base_settings_require_a_secret_key(self):
        with self.assertRaises(ValueError):
            self.run_outside_tests('eshift_core.settings')

    def test_test_settings_load_without_a_secret_key_in_the_environment(self):
        namespace = self.run_outside_tests('eshift_core.test_settings')
        self.assertEqual(namespace['SECRET_KEY'], 'dummy-secret-key-for-testing-eshift')
        self.assertEqual(namespace['DATABASES']['default']['NAME'], ':memory:')
