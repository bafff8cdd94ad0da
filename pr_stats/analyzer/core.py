"""Main pull-request stats analyzer."""

import logging
from datetime import datetime
from typing import Dict

from ..api_client import GitHubAPIClient
from ..config import Config
from ..stats import Stats

# Only the first page of the closed-PR listing is read
PULLS_PER_PAGE = 100


class PullRequestStatsAnalyzer:
    """Collects review, comment and commit counters for merged PRs of a repository."""

    def __init__(self, config: Config, api_client: GitHubAPIClient = None):
        """Initialize the analyzer.

        Args:
            config: Token, cache directory and API URL
            api_client: Client to use instead of building one from config
        """
        self.config = config
        self.api_client = api_client or GitHubAPIClient(config)

    def run(self, repository: str, from_date: datetime, to_date: datetime) -> Dict:
        """Collect stats for PRs of a repository merged within [from_date, to_date].

        Args:
            repository: Repository name in format 'owner/repo'
            from_date: Inclusive lower bound for the merge time (timezone-aware)
            to_date: Inclusive upper bound for the merge time (timezone-aware)

        Returns:
            Dict with the repository name and the sorted counter snapshot
        """
        if from_date.tzinfo is None or to_date.tzinfo is None:
            raise ValueError("from_date and to_date must be timezone-aware")

        logging.info(f"Analyzing repository: {repository}")
        stats = Stats()
        root = f"/repos/{repository}"

        # A bad cache directory must stop the run before the first request
        if self.api_client.cache is not None:
            self.api_client.cache.check_directory()

        # Listing always reflects the current state, so it bypasses the cache
        listing = self.api_client.get(
            f"{root}/pulls?state=closed&sort=updated&direction=desc&per_page={PULLS_PER_PAGE}",
            use_cache=False
        )

        merged_prs = self._filter_prs(listing, from_date, to_date)
        logging.info(f"Found {len(merged_prs)} merged PRs in window (from {len(listing)} closed PRs)")

        for pr in merged_prs:
            self._analyze_pr(root, pr, stats)

        return {'repository': repository, 'data': stats.snapshot()}


# Import and attach methods from submodules
from .pr_filtering import _filter_prs
from .pr_processing import _analyze_pr, _count_reviews, _count_review_comments, _count_commits

PullRequestStatsAnalyzer._filter_prs = _filter_prs
PullRequestStatsAnalyzer._analyze_pr = _analyze_pr
PullRequestStatsAnalyzer._count_reviews = _count_reviews
PullRequestStatsAnalyzer._count_review_comments = _count_review_comments
PullRequestStatsAnalyzer._count_commits = _count_commits
