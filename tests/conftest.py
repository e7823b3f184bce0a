import logging

import pytest

from unparse import Config


# pytest seems to tweak logging such that our debug logs go to stderr, which
# is hella spammy when using --capture=no. Explicitly turn it back down.
logging.basicConfig(level=logging.INFO)


@pytest.fixture
def posix():
    """
    POSIX config without quoting, matching what most specs expect.
    """
    return Config("posix", argument_quoter=False)


@pytest.fixture
def windows():
    return Config("windows")
