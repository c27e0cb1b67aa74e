"""Shared pytest fixtures for all tests."""

import httpx
import pytest
from unittest.mock import Mock

from cli.config import Config
from gett.request import Request
from gett.user import User


BASE_URL = 'http://api.test/1'


@pytest.fixture
def make_request():
    """
    Build a Request whose HTTP traffic is answered by a handler function.

    Returns:
        Factory taking handler(httpx.Request) -> httpx.Response
    """
    def factory(handler):
        session = httpx.Client(transport=httpx.MockTransport(handler), base_url=BASE_URL)
        return Request(base_url=BASE_URL, session=session)

    return factory


@pytest.fixture
def mock_request():
    """Request double recording every call."""
    return Mock(spec=Request)


@pytest.fixture
def logged_in_user():
    """User double that already holds an access token."""
    user = Mock(spec=User)
    user.has_access_token.return_value = True
    user.access_token = 'tok123'
    return user


@pytest.fixture
def logged_out_user():
    """User double whose login() stores an access token."""
    user = Mock(spec=User)
    user.has_access_token.return_value = False
    user.access_token = None

    def login():
        user.access_token = 'fresh456'
        return True

    user.login.side_effect = login
    return user


@pytest.fixture
def temp_config_dir(tmp_path):
    """
    Create temporary config directory.

    Returns:
        Path to temporary .gett directory
    """
    config_dir = tmp_path / '.gett'
    config_dir.mkdir()
    return config_dir


@pytest.fixture
def temp_config(temp_config_dir, monkeypatch):
    """
    Create temporary config instance.

    Returns:
        Config instance with temp config file
    """
    monkeypatch.delenv('GETT_API_KEY', raising=False)
    return Config(temp_config_dir / 'config.json')


@pytest.fixture
def sample_file(tmp_path):
    """
    Create a sample file for testing file uploads.

    Returns:
        Path to sample text file
    """
    file_path = tmp_path / 'test.txt'
    file_path.write_text('Sample content for testing')
    return file_path
