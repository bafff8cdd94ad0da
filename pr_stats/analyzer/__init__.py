"""Pull-request stats analyzer."""

from .core import PullRequestStatsAnalyzer

__all__ = ['PullRequestStatsAnalyzer']
