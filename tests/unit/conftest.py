"""Unit test fixtures.

Most configuration helpers are in tests/conftest.py.
"""

from tests.conftest import FakeStdin, minimal_config_dict, run_cmd, write_config

__all__ = [
    "FakeStdin",
    "minimal_config_dict",
    "run_cmd",
    "write_config",
]
