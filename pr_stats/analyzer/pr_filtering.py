"""PR filtering methods for PullRequestStatsAnalyzer."""

import logging
from datetime import datetime
from typing import Dict, List

from ..models import PullRequest


def in_merge_window(pr: PullRequest, from_date: datetime, to_date: datetime) -> bool:
    """Check whether a PR was merged within [from_date, to_date], both bounds inclusive."""
    if pr.merged_at is None:
        return False
    return from_date <= pr.merged_at <= to_date


def _filter_prs(self, listing: List[Dict], from_date: datetime, to_date: datetime) -> List[PullRequest]:
    """Keep PRs merged inside the window, preserving listing order.

    Args:
        listing: Raw PR dicts from the closed-PR listing
        from_date: Inclusive lower bound
        to_date: Inclusive upper bound

    Returns:
        Merged PRs inside the window
    """
    merged_prs = []
    for data in listing:
        pr = PullRequest.from_api(data)

        if not pr.merged:
            logging.debug(f"Skipping PR #{pr.number} - closed but not merged")
            continue

        if not in_merge_window(pr, from_date, to_date):
            logging.debug(f"Skipping PR #{pr.number} - merged {pr.merged_at.isoformat()} outside window")
            continue

        merged_prs.append(pr)

    return merged_prs
