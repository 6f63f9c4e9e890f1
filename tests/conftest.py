from unittest.mock import Mock

import pytest

from optional_explanation.demo import Config


@pytest.fixture
def config():
    return Config(log_level="DEBUG")


@pytest.fixture
def counted():
    """
    Wrap a function in a Mock, so tests can check how often (and with what)
    it was called.
    """

    def wrap(fn):
        return Mock(side_effect=fn)

    return wrap
