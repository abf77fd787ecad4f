"""Shared test fixtures for httpline."""
import logging

import pytest

from httpline.logging import default_handler

SAMPLE_REQUEST = (
    "GET /greeting HTTP/1.1\r\n"
    "Host: localhost:3000\r\n"
    "User-Agent: curl/7.64.1\r\n"
    "Accept: */*\r\n"
    "\r\n"
)


def make_request(request_line="GET / HTTP/1.1", headers=None, body=None,
                 newline="\r\n"):
    """Build a raw request buffer from its parts."""
    lines = [request_line]
    for key, value in (headers or {}).items():
        lines.append(f"{key}: {value}")
    lines.append("")
    if body is not None:
        lines.append(body)
    return newline.join(lines) + newline


@pytest.fixture(autouse=True)
def reset_httpline_logger():
    """Undo level and handler changes made by parsers created in a test."""
    logger = logging.getLogger("httpline")
    level = logger.level
    yield
    logger.setLevel(level)
    logger.removeHandler(default_handler)


@pytest.fixture
def sample_request():
    return SAMPLE_REQUEST


@pytest.fixture(name="make_request")
def make_request_fixture():
    return make_request
