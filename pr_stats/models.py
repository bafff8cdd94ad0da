"""Data models for the GitHub API records consumed by the stats collector."""

from dataclasses import dataclass
from datetime import datetime
from typing import Dict, Optional

APPROVED = 'APPROVED'
# Placeholder login GitHub shows for deleted accounts
GHOST = 'ghost'


def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    """Parse an ISO-8601 timestamp as returned by GitHub ('Z' suffix allowed)."""
    if value is None:
        return None
    return datetime.fromisoformat(value)


def _login(user: Optional[Dict], default: Optional[str] = GHOST) -> Optional[str]:
    # GitHub sends null for deleted accounts and unlinked commit authors
    return user.get('login', default) if user else default


@dataclass
class PullRequest:
    """A pull request from the closed-PR listing."""
    number: int
    title: str
    author: Optional[str]
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    merged_at: Optional[datetime] = None

    @classmethod
    def from_api(cls, data: Dict) -> 'PullRequest':
        return cls(
            number=data['number'],
            title=data.get('title', ''),
            author=_login(data.get('user')),
            created_at=parse_timestamp(data.get('created_at')),
            updated_at=parse_timestamp(data.get('updated_at')),
            merged_at=parse_timestamp(data.get('merged_at')),
        )

    @property
    def merged(self) -> bool:
        return self.merged_at is not None


@dataclass
class Review:
    """A review submitted on a pull request."""
    id: int
    author: Optional[str]
    state: str

    @classmethod
    def from_api(cls, data: Dict) -> 'Review':
        return cls(id=data['id'], author=_login(data.get('user'), default=None), state=data['state'])

    @property
    def approved(self) -> bool:
        return self.state == APPROVED


@dataclass
class ReviewComment:
    """A comment attached to a review; replies reference another comment."""
    author: Optional[str]
    in_reply_to_id: Optional[int] = None

    @classmethod
    def from_api(cls, data: Dict) -> 'ReviewComment':
        return cls(author=_login(data.get('user')), in_reply_to_id=data.get('in_reply_to_id'))

    @property
    def is_reply(self) -> bool:
        return self.in_reply_to_id is not None


@dataclass
class Commit:
    """A commit on a pull request. The author is None when GitHub cannot link it to an account."""
    author: Optional[str] = None

    @classmethod
    def from_api(cls, data: Dict) -> 'Commit':
        return cls(author=_login(data.get('author'), default=None))
