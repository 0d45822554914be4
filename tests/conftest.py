import io
import os
import sys
from datetime import datetime

import pytest
from flask import Flask

# Ensure the repository root is on the import path so application modules can
# be imported when tests run from the `tests/` directory.
sys.path.append(os.path.join(os.path.dirname(os.path.dirname(__file__)), "src"))

from conlog import log  # noqa: E402
from conlog.adapters import AdapterRegistry, ConsoleSink  # noqa: E402
from conlog.config import LogConfig  # noqa: E402

FIXED_NOW = datetime(2017, 6, 25, 15, 49, 4)
STAMP = "2017/06/25 15:49:04"


@pytest.fixture
def clock():
    return lambda: FIXED_NOW


@pytest.fixture
def config(clock):
    return LogConfig(now=clock)


@pytest.fixture
def out():
    return io.StringIO()


@pytest.fixture
def logger(config, out):
    """A ConsoleLogger writing to an in-memory buffer."""
    return log.ConsoleLogger(config=config, registry=AdapterRegistry(), sink=ConsoleSink(out))


@pytest.fixture
def default_logger(monkeypatch, config):
    """Replace the process-wide logger with one on stdout and a fixed clock."""
    fresh = log.ConsoleLogger(config=config)
    monkeypatch.setattr(log, "default_logger", fresh)
    return fresh


class RecordingAdapter:
    def __init__(self):
        self.calls = []

    def handle(self, msg_type, out_type, config, *args):
        self.calls.append((msg_type, out_type, config, args))


@pytest.fixture
def recorder():
    return RecordingAdapter()


@pytest.fixture
def flask_app(default_logger):
    app = Flask(__name__)

    @app.get("/bad")
    def bad():
        return log.error_response(400)

    @app.get("/missing")
    def missing():
        return log.error_response(404)

    return app
