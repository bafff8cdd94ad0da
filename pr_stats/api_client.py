"""GitHub API client for making requests, caching responses and handling pagination."""

import logging
from dataclasses import dataclass
from typing import Any, List
import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from .cache import ResponseCache
from .config import Config
from .exceptions import ConfigurationError, GitHubAPIError

# GitHub's default page size for endpoints called without per_page
PAGE_SIZE = 30
# Circuit breaker for runaway pagination
MAX_PAGES = 9


@dataclass
class FetchResult:
    """Outcome of a single API request: either a decoded body or "not found"."""
    status_code: int
    path: str
    data: Any = None
    from_cache: bool = False

    @property
    def not_found(self) -> bool:
        return self.status_code == 404

    def unwrap(self) -> Any:
        """Return the decoded body.

        Raises:
            GitHubAPIError: If the resource was not found
        """
        if self.not_found:
            raise GitHubAPIError(self.status_code, self.path, f"404 Not Found: {self.path}")
        return self.data


class GitHubAPIClient:
    """Handles GitHub API requests with an optional on-disk cache and pagination.

    Requests are issued one at a time and are never retried.
    """

    def __init__(self, config: Config):
        """Initialize the GitHub API client.

        Args:
            config: Token, cache directory and API base URL to use
        """
        self.config = config
        self.token = config.token
        self.api_url = config.api_url
        self.cache = ResponseCache(config.cache_dir) if config.cache_dir else None
        self.session = requests.Session()

        adapter = HTTPAdapter(max_retries=Retry(total=0, raise_on_status=False))
        self.session.mount('https://', adapter)
        self.session.mount('http://', adapter)

        if self.token:
            self.session.headers.update({
                'Authorization': f'token {self.token}',
                'Accept': 'application/vnd.github.v3+json'
            })
            logging.debug("Initialized GitHub API client with token")

    def _require_token(self):
        if not self.token:
            raise ConfigurationError("Missing environment variable: GITHUB_TOKEN")

    def _fetch(self, path: str) -> FetchResult:
        """Make a single live GET request.

        Args:
            path: API request path, e.g. '/repos/org/repo/pulls'

        Returns:
            FetchResult holding the decoded body, or a not-found result for a 404

        Raises:
            GitHubAPIError: For any other non-success status
        """
        url = f"{self.api_url}{path}"
        logging.info(f"Fetching {url} ...")
        response = self.session.get(url)

        if response.status_code == 404:
            return FetchResult(status_code=404, path=path)

        if not 200 <= response.status_code < 300:
            raise GitHubAPIError(
                response.status_code, path,
                f"{response.status_code} {response.reason} for {url}"
            )

        return FetchResult(status_code=response.status_code, path=path, data=response.json())

    def lookup(self, path: str, use_cache: bool = True) -> FetchResult:
        """Fetch a path, going through the cache when enabled.

        Args:
            path: API request path
            use_cache: Whether the on-disk cache may be used for this call

        Returns:
            FetchResult; check ``not_found`` before reading ``data``

        Raises:
            ConfigurationError: If no token is configured or the cache
                directory is unusable
            GitHubAPIError: For non-success statuses other than 404
        """
        self._require_token()

        if not use_cache or self.cache is None:
            return self._fetch(path)

        self.cache.check_directory()

        cached = self.cache.get(path)
        if cached is not None:
            return FetchResult(status_code=200, path=path, data=cached, from_cache=True)

        result = self._fetch(path)
        if not result.not_found:
            self.cache.put(path, result.data)
        return result

    def get(self, path: str, use_cache: bool = True) -> Any:
        """Fetch a path and return its decoded JSON body.

        A 404 is an error here; use lookup() to treat it as a value.
        """
        return self.lookup(path, use_cache).unwrap()

    def get_paginated(self, path: str, use_cache: bool = True) -> List[Any]:
        """Fetch all pages of a paginated GitHub API endpoint.

        Pagination stops at the first page that is not found, at the first
        page with fewer than PAGE_SIZE items, or after MAX_PAGES pages.

        Args:
            path: The API request path for page 1
            use_cache: Whether the on-disk cache may be used

        Returns:
            List of all items from all pages, in page order
        """
        results = []
        cached_pages = 0
        separator = '&' if '?' in path else '?'

        for page in range(1, MAX_PAGES + 1):
            page_path = path if page == 1 else f"{path}{separator}page={page}"
            result = self.lookup(page_path, use_cache)

            if result.not_found:
                logging.debug(f"No page {page} for {path}")
                break

            if result.from_cache:
                cached_pages += 1
            data = result.data
            results.extend(data)

            # A short page is the last one
            if len(data) < PAGE_SIZE:
                break
        else:
            logging.debug(f"Stopped after {MAX_PAGES} pages for {path}")

        logging.debug(f"Fetched {len(results)} total items from {path} ({cached_pages} pages from cache)")
        return results
