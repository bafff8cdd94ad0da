"""PR processing methods for PullRequestStatsAnalyzer."""

import logging
from typing import Set

from ..models import PullRequest, Review, ReviewComment, Commit
from ..stats import Stats


def _analyze_pr(self, root: str, pr: PullRequest, stats: Stats):
    """Count reviews, review comments and commits of a single merged PR.

    Args:
        root: Repository API root, e.g. '/repos/org/repo'
        pr: The merged PR
        stats: Counters to update
    """
    logging.info(f"#{pr.number} {pr.merged_at.isoformat()} {pr.author} {pr.title}")

    stats.increment('pr')
    self._count_reviews(root, pr, stats)
    self._count_commits(root, pr, stats)


def _count_reviews(self, root: str, pr: PullRequest, stats: Stats):
    """Count review states, distinct approvers and the comments of each review."""
    approvers: Set[str] = set()

    reviews = self.api_client.get_paginated(f"{root}/pulls/{pr.number}/reviews")
    for data in reviews:
        review = Review.from_api(data)
        stats.increment('pr.review', review.state)

        # An approver counts once per PR, however many approving reviews they leave.
        # Deleted accounts cannot be told apart, so their approvals are not attributed.
        if review.approved and review.author and review.author not in approvers:
            approvers.add(review.author)
            stats.increment('pr.review.approval', review.author)

        self._count_review_comments(root, pr, review, stats)


def _count_review_comments(self, root: str, pr: PullRequest, review: Review, stats: Stats):
    comments = self.api_client.get(f"{root}/pulls/{pr.number}/reviews/{review.id}/comments")
    for data in comments:
        comment = ReviewComment.from_api(data)
        if comment.is_reply:
            stats.increment('pr.review.reply', comment.author)
        else:
            stats.increment('pr.review.comment', comment.author)


def _count_commits(self, root: str, pr: PullRequest, stats: Stats):
    commits = self.api_client.get(f"{root}/pulls/{pr.number}/commits")
    for data in commits:
        commit = Commit.from_api(data)
        if commit.author:
            stats.increment('pr.commit', commit.author)
