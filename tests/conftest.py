"""Test configuration shared by every test module.

The environment is prepared before any application module is imported, because
the configuration is loaded once at import time.
"""

import os

os.environ["APP_ENVIRONMENT"] = "test"
os.environ["TEST_DATABASE_URL"] = "sqlite://"
os.environ["TEST_LOG_FILE"] = ""

from tests.fixtures import *  # noqa: E402,F401,F403
