"""
Unit tests for API client functionality
"""

import pytest
import requests
from unittest.mock import Mock

from pr_stats.api_client import GitHubAPIClient, FetchResult, PAGE_SIZE, MAX_PAGES
from pr_stats.config import Config
from pr_stats.exceptions import ConfigurationError, GitHubAPIError

REVIEWS = '/repos/org/repo/pulls/5/reviews'


def items(count, start=0):
    return [{'id': i} for i in range(start, start + count)]


class TestClientInitialization:
    """Test cases for client setup."""

    def test_initialization_with_token(self):
        client = GitHubAPIClient(Config(token='test_token'))
        assert client.token == 'test_token'
        assert client.session.headers['Authorization'] == 'token test_token'

    def test_initialization_without_token(self):
        client = GitHubAPIClient(Config())
        assert client.token is None
        assert 'Authorization' not in client.session.headers

    def test_custom_api_url(self, fake_github):
        client = GitHubAPIClient(Config(token='t', api_url='https://ghe.example.com/api/v3'))
        client.session = Mock()
        client.session.get.return_value = Mock(status_code=200, json=Mock(return_value=[]))

        client.get('/repos/org/repo/pulls', use_cache=False)

        client.session.get.assert_called_once_with('https://ghe.example.com/api/v3/repos/org/repo/pulls')


class TestAPIErrorHandling:
    """Test cases for API error handling."""

    def test_missing_token_fails_before_request(self):
        client = GitHubAPIClient(Config())
        client.session = Mock()

        with pytest.raises(ConfigurationError):
            client.get('/repos/org/repo/pulls', use_cache=False)
        assert not client.session.get.called

    def test_non_success_status_carries_code(self, client, fake_github):
        fake_github.routes['/repos/org/repo/pulls'] = (502, {'message': 'Bad Gateway'})

        with pytest.raises(GitHubAPIError) as excinfo:
            client.get('/repos/org/repo/pulls')

        assert excinfo.value.status_code == 502
        assert excinfo.value.path == '/repos/org/repo/pulls'
        assert not excinfo.value.not_found

    def test_not_found_raises_from_get(self, client):
        with pytest.raises(GitHubAPIError) as excinfo:
            client.get('/repos/org/missing/pulls')
        assert excinfo.value.not_found

    def test_not_found_is_a_value_from_lookup(self, client):
        result = client.lookup('/repos/org/missing/pulls')
        assert result.not_found
        assert result.data is None

    def test_network_error_is_not_an_api_error(self, client):
        client.session.get.side_effect = requests.exceptions.ConnectionError("Network error")

        with pytest.raises(requests.exceptions.ConnectionError):
            client.get('/repos/org/repo/pulls')

    def test_no_retries(self, client, fake_github):
        fake_github.routes['/repos/org/repo/pulls'] = (503, {})

        with pytest.raises(GitHubAPIError):
            client.get('/repos/org/repo/pulls')
        assert fake_github.count('/repos/org/repo/pulls') == 1


class TestFetchResult:
    """Test cases for FetchResult."""

    def test_unwrap_found(self):
        assert FetchResult(status_code=200, path='/x', data=[1]).unwrap() == [1]

    def test_unwrap_not_found(self):
        with pytest.raises(GitHubAPIError):
            FetchResult(status_code=404, path='/x').unwrap()


class TestPagination:
    """Test cases for get_paginated."""

    def test_short_last_page(self, client, fake_github):
        fake_github.routes[REVIEWS] = items(30)
        fake_github.routes[f'{REVIEWS}?page=2'] = items(30, 30)
        fake_github.routes[f'{REVIEWS}?page=3'] = items(17, 60)

        results = client.get_paginated(REVIEWS)

        assert len(results) == 77
        assert [r['id'] for r in results] == list(range(77))
        assert len(fake_github.requested) == 3

    def test_not_found_ends_pagination(self, client, fake_github):
        fake_github.routes[REVIEWS] = items(PAGE_SIZE)

        results = client.get_paginated(REVIEWS)

        assert len(results) == 30
        # Only page 1 produced data; page 2 answered 404
        assert fake_github.count(REVIEWS) == 1
        assert fake_github.count(f'{REVIEWS}?page=2') == 1
        assert len(fake_github.requested) == 2

    def test_not_found_on_first_page_is_empty(self, client):
        assert client.get_paginated(REVIEWS) == []

    def test_empty_first_page(self, client, fake_github):
        fake_github.routes[REVIEWS] = []

        assert client.get_paginated(REVIEWS) == []
        assert len(fake_github.requested) == 1

    def test_stops_at_page_cap(self, client, fake_github):
        fake_github.routes[REVIEWS] = items(PAGE_SIZE)
        for page in range(2, MAX_PAGES + 3):
            fake_github.routes[f'{REVIEWS}?page={page}'] = items(PAGE_SIZE, page * 100)

        results = client.get_paginated(REVIEWS)

        assert len(fake_github.requested) == MAX_PAGES
        assert len(results) == MAX_PAGES * PAGE_SIZE
        assert fake_github.count(f'{REVIEWS}?page={MAX_PAGES + 1}') == 0

    def test_other_errors_propagate(self, client, fake_github):
        fake_github.routes[REVIEWS] = items(PAGE_SIZE)
        fake_github.routes[f'{REVIEWS}?page=2'] = (500, {})

        with pytest.raises(GitHubAPIError) as excinfo:
            client.get_paginated(REVIEWS)
        assert excinfo.value.status_code == 500

    def test_existing_query_string(self, client, fake_github):
        path = '/repos/org/repo/pulls/5/reviews?per_page=30'
        fake_github.routes[path] = items(PAGE_SIZE)
        fake_github.routes[f'{path}&page=2'] = items(3)

        assert len(client.get_paginated(path)) == 33

    def test_pages_are_cached(self, cached_client, fake_github):
        fake_github.routes[REVIEWS] = items(30)
        fake_github.routes[f'{REVIEWS}?page=2'] = items(5, 30)

        first = cached_client.get_paginated(REVIEWS)
        second = cached_client.get_paginated(REVIEWS)

        assert first == second
        # Two pages fetched once; page 2 is short so nothing else is requested
        assert len(fake_github.requested) == 2
