import pytest

from api_config import load_config
from api_helpers import create_token, make_client
from api_logger import APILogger
from custom_assertions import ApiExpect
from logging_helper import configure_logging
from request_handler import RequestHandler

pytest_plugins = ["pytester"]


def pytest_configure(config):
    configure_logging()
    config.addinivalue_line("markers", "live: hits the real Conduit API (run with -m live)")


# -----------------------------
# Session (one per xdist worker)
# -----------------------------
@pytest.fixture(scope="session")
def api_config():
    return load_config()


@pytest.fixture(scope="session")
def auth_token(api_config):
    """Logged in once per worker process and shared read-only by its tests."""
    return create_token(api_config.user_email, api_config.user_password, api_config.api_url)


# -----------------------------
# Per test
# -----------------------------
@pytest.fixture
def api_logger():
    return APILogger()


@pytest.fixture
def http_client():
    client = make_client()
    yield client
    client.close()


@pytest.fixture
def api(http_client, api_config, api_logger, auth_token):
    return RequestHandler(http_client, api_config.api_url, api_logger, auth_token)


@pytest.fixture
def anonymous_api(http_client, api_config, api_logger):
    return RequestHandler(http_client, api_config.api_url, api_logger)


@pytest.fixture
def expect(api_logger):
    return ApiExpect(api_logger)
