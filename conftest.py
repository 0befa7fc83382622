"""Top-level pytest configuration.

Living at the repository root keeps ``podaggregate`` importable from a
checkout, and the suite runs with the package's debug logging captured.
"""

import logging

import pytest


@pytest.fixture(autouse=True)
def _debug_logging(caplog):
    caplog.set_level(logging.DEBUG, logger="podaggregate")
