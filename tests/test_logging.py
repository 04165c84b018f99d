from __future__ import annotations

import logging

from calculator.app import create_app
from calculator.config import Settings


def test_each_app_applies_its_log_level():
    root = logging.getLogger()
    original_level = root.level
    try:
        create_app(Settings(_env_file=None, log_level="DEBUG"))
        assert root.level == logging.DEBUG

        create_app(Settings(_env_file=None, log_level="WARNING"))
        assert root.level == logging.WARNING
    finally:
        root.setLevel(original_level)
