"""GitHub PR Stats - collect pull-request collaboration metrics for a repository."""

from .config import Config
from .exceptions import ConfigurationError, GitHubAPIError
from .cache import ResponseCache
from .api_client import GitHubAPIClient, FetchResult
from .stats import Stats
from .analyzer import PullRequestStatsAnalyzer
from .output import MarkdownTableFormatter

__all__ = [
    'Config',
    'ConfigurationError',
    'GitHubAPIError',
    'ResponseCache',
    'GitHubAPIClient',
    'FetchResult',
    'Stats',
    'PullRequestStatsAnalyzer',
    'MarkdownTableFormatter',
]
