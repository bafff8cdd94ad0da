"""Shared fixtures for the PR stats tests."""

import pytest
from unittest.mock import Mock

from pr_stats.api_client import GitHubAPIClient
from pr_stats.config import Config

API_URL = 'https://api.github.com'


def make_response(status_code=200, data=None, reason='OK'):
    """Build a mock requests.Response."""
    response = Mock()
    response.status_code = status_code
    response.reason = reason
    response.json.return_value = data
    return response


class FakeGitHub:
    """Serves canned responses keyed by request path and records every URL requested."""

    def __init__(self, routes=None):
        self.routes = dict(routes or {})
        self.requested = []

    def get(self, url, **kwargs):
        self.requested.append(url)
        path = url[len(API_URL):]
        if path not in self.routes:
            return make_response(404, {'message': 'Not Found'}, reason='Not Found')
        route = self.routes[path]
        if isinstance(route, tuple):
            status_code, data = route
            return make_response(status_code, data, reason='Error')
        return make_response(200, route)

    def count(self, path):
        return self.requested.count(f"{API_URL}{path}")


@pytest.fixture
def fake_github():
    return FakeGitHub()


@pytest.fixture
def cache_dir(tmp_path):
    path = tmp_path / 'cache'
    path.mkdir()
    return str(path)


@pytest.fixture
def client(fake_github):
    """API client without a cache directory, wired to the fake GitHub."""
    client = GitHubAPIClient(Config(token='test_token'))
    client.session = Mock()
    client.session.get.side_effect = fake_github.get
    return client


@pytest.fixture
def cached_client(fake_github, cache_dir):
    """API client with an on-disk cache, wired to the fake GitHub."""
    client = GitHubAPIClient(Config(token='test_token', cache_dir=cache_dir))
    client.session = Mock()
    client.session.get.side_effect = fake_github.get
    return client
