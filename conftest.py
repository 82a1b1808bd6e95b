import logging
import os.path

import pytest

collect_ignore = []

try:
    import requests  # NOQA
except ImportError:
    collect_ignore.append('tests/transport/requests')


@pytest.fixture
def project_root():
    return os.path.dirname(os.path.abspath(__file__))


@pytest.fixture(autouse=True)
def corvid_logging():
    # ``Client`` installs a StreamHandler on first use; keep test output quiet
    logger = logging.getLogger('corvid')
    if not logger.handlers:
        logger.addHandler(logging.NullHandler())
    yield
