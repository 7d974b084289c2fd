# conftest.py
import os

import pytest
from dotenv import load_dotenv

load_dotenv()

# Keep the suite offline no matter what .env says
os.environ['BACKEND'] = 'dummy'


@pytest.fixture()
def invoker():
    from tests.fakes import FakeInvoker

    return FakeInvoker()


@pytest.fixture(autouse=True)
def _reset_backend_singleton():
    from chatbridge.infra.llm import get_backend_singleton

    get_backend_singleton.cache_clear()
    yield
    get_backend_singleton.cache_clear()


@pytest.fixture(autouse=True)
def restore_root_logger():
    import logging

    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
