"""On-disk caching of GitHub API responses, one JSON file per request path."""

import os
import re
import json
import logging
import tempfile
from typing import Any, Optional

from .exceptions import ConfigurationError

_UNSAFE_CHARS = re.compile(r'[^A-Za-z0-9]')


class ResponseCache:
    """Stores decoded API responses in a directory, keyed by request path.

    Entries are written once on the first successful fetch and are never
    expired or deleted.
    """

    def __init__(self, cache_dir: str):
        """Initialize the cache.

        Args:
            cache_dir: Existing directory that holds the cache files
        """
        self.cache_dir = cache_dir

    def check_directory(self):
        """Make sure the configured cache location is a usable directory.

        Raises:
            ConfigurationError: If the path is missing or not a directory
        """
        if not os.path.isdir(self.cache_dir):
            raise ConfigurationError(f"Not a directory: {self.cache_dir}")

    @staticmethod
    def get_cache_key(path: str) -> str:
        """Generate a file-system safe cache key for a request path.

        Args:
            path: API request path including the query string

        Returns:
            The path with every non-alphanumeric character replaced by '_'
        """
        return _UNSAFE_CHARS.sub('_', path)

    def file_for(self, path: str) -> str:
        return os.path.join(self.cache_dir, f"{self.get_cache_key(path)}.json")

    def get(self, path: str) -> Optional[Any]:
        """Read a cached response.

        Args:
            path: API request path

        Returns:
            The decoded response, or None if nothing is cached for the path

        Raises:
            OSError: For read failures other than a missing file
            json.JSONDecodeError: If the cache file is corrupt
        """
        cache_file = self.file_for(path)
        try:
            with open(cache_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except FileNotFoundError:
            logging.debug(f"Cache miss for {path}")
            return None

        logging.debug(f"Cache hit for {path}")
        return data

    def put(self, path: str, data: Any):
        """Write a response to the cache.

        Args:
            path: API request path
            data: Decoded JSON body to store
        """
        cache_file = self.file_for(path)
        # Readers only ever see a complete file
        fd, tmp_file = tempfile.mkstemp(dir=self.cache_dir, suffix='.tmp')
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                json.dump(data, f)
            os.replace(tmp_file, cache_file)
        except BaseException:
            os.unlink(tmp_file)
            raise
        logging.debug(f"Cached {path} in {cache_file}")

    def __contains__(self, path: str) -> bool:
        return os.path.exists(self.file_for(path))
