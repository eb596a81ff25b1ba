"""Pytest configuration.

Run pytest from this project's root; pythonpath in pyproject.toml puts src
and the project root on sys.path so tests import log_message_linter and
the shared helpers under tests/.
"""

import pytest

from log_message_linter.infrastructure.di.container import LogLintContainer


@pytest.fixture(autouse=True)
def _fresh_container():
    """Each test sees a new container and an empty config cache."""
    yield
    LogLintContainer.reset()
