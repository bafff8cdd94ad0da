"""
Configuration for the PR stats collector.

Values come from the process environment (optionally populated from a
.env file by the command line front end) and are passed explicitly to the
API client and the analyzer.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_API_URL = "https://api.github.com"


@dataclass(frozen=True)
class Config:
    """Settings shared by the API client and the analyzer."""
    token: Optional[str] = None
    cache_dir: Optional[str] = None
    api_url: str = DEFAULT_API_URL

    @classmethod
    def from_env(cls, environ: Mapping[str, str] = None) -> 'Config':
        """Build a config from environment variables.

        Args:
            environ: Mapping to read from (defaults to os.environ)

        Returns:
            Config with GITHUB_TOKEN, CACHE and GITHUB_API_URL applied
        """
        if environ is None:
            environ = os.environ

        # Empty strings count as unset
        token = environ.get('GITHUB_TOKEN') or None
        cache_dir = environ.get('CACHE') or None
        api_url = (environ.get('GITHUB_API_URL') or DEFAULT_API_URL).rstrip('/')

        return cls(token=token, cache_dir=cache_dir, api_url=api_url)

    def without_cache(self) -> 'Config':
        """Return a copy of this config with on-disk caching switched off."""
        return Config(token=self.token, cache_dir=None, api_url=self.api_url)
