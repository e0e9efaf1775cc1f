"""
LineBASIC tests.utils
Shared testing utilities

(c) 2024--2026 LineBASIC developers
This file is released under the GNU GPL version 3 or later.
"""

import unittest
import logging
import os
import shutil
from unittest import main as run_tests


class TestCase(unittest.TestCase):
    """Base class for test cases."""

    tag = None

    def __init__(self, *args, **kwargs):
        """Define output dir name."""
        unittest.TestCase.__init__(self, *args, **kwargs)
        here = os.path.dirname(os.path.abspath(__file__))
        self._dir = os.path.join(here, u'output', self.tag or u'')

    def setUp(self):
        """Ensure output directory exists and is empty."""
        try:
            shutil.rmtree(self._dir)
        except EnvironmentError:
            pass
        if not os.path.isdir(self._dir):
            os.makedirs(self._dir)
        # settings reconfigure the root logger
        root_logger = logging.getLogger()
        self._log_handlers = list(root_logger.handlers)
        self._log_level = root_logger.level

    def tearDown(self):
        """Undo any logging configuration made by the test."""
        root_logger = logging.getLogger()
        for handler in list(root_logger.handlers):
            if handler not in self._log_handlers:
                root_logger.removeHandler(handler)
        for handler in self._log_handlers:
            if handler not in root_logger.handlers:
                root_logger.addHandler(handler)
        root_logger.setLevel(self._log_level)

    def output_path(self, *names):
        """Output file name."""
        return os.path.join(self._dir, *names)

    def write_file(self, name, text):
        """Write a text file to the output directory, return its path."""
        path = self.output_path(name)
        with open(path, 'w', encoding='utf-8') as f:
            f.write(text)
        return path
