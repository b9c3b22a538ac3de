import os
import sys

from sqlalchemy.orm import Session

# Test Environment Overrides will override .env files
# THESE MUST BE IMPORTED BEFORE ANYTHING
BASE_DIR = os.path.dirname(os.path.abspath(__file__))

EXPECTED_DATABASE_URL = 'sqlite://'
os.environ.setdefault('ENVIRONMENT', 'testing')
os.environ.setdefault('DATABASE_URL', EXPECTED_DATABASE_URL)
os.environ.setdefault('LOG_LEVEL', 'DEBUG')

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
from ecommerce import setup

setup.run()
setup.create_schema()

import pytest

# Add fixtures here
pytest_plugins = [
    'tests.factories.core.customer',
]

# ruff: noqa: E402
from ecommerce import settings
from ecommerce.network.database.session import db as session_manager

# When ecommerce files are imported before the above patching, tests will use
# incorrect database settings.
if settings.DATABASE_URL != EXPECTED_DATABASE_URL:
    raise ValueError(
        'Patching of environment variables failed.\n'
        'This will cause unexpected test failures'
        'Check all ecommerce imports are delayed until after patching.\n'
    )


@pytest.fixture(scope='function', autouse=True)
def db() -> Session:
    with session_manager(commit_on_success=False):
        session = session_manager.session

        # Patch commit() to prevent accidental commits in tests
        # changes stay visible within the transaction but are rolled back
        def no_op_commit():
            session.flush()

        session.commit = no_op_commit

        yield session

        session.rollback()
