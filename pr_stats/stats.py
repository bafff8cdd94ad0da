"""Hierarchical counters for PR statistics."""

from typing import Dict, Tuple

SEPARATOR = '.'


class Stats:
    """Counts observations under hierarchical paths such as ('pr', 'review', 'APPROVED').

    Incrementing a path also increments its immediate parent, so
    ``increment('pr.review', 'APPROVED')`` bumps both ``pr.review.APPROVED``
    and ``pr.review``. Rollup goes exactly one level up; ``pr`` is untouched.
    """

    def __init__(self):
        self._counts: Dict[Tuple[str, ...], int] = {}

    def increment(self, *segments: str):
        """Increment a counter path and its immediate parent.

        Args:
            segments: Path segments; a segment may itself contain dots

        Raises:
            ValueError: If no segment is given
        """
        if not segments:
            raise ValueError("increment() needs at least one path segment")

        path = self._split(segments)
        self._bump(path)
        if len(segments) > 1:
            self._bump(self._split(segments[:-1]))

    def _bump(self, path: Tuple[str, ...]):
        self._counts[path] = self._counts.get(path, 0) + 1

    @staticmethod
    def _split(segments) -> Tuple[str, ...]:
        # 'pr.review' and ('pr', 'review') name the same counter
        return tuple(SEPARATOR.join(segments).split(SEPARATOR))

    def get(self, *segments: str) -> int:
        """Return the current count for a path, 0 if it was never incremented."""
        return self._counts.get(self._split(segments), 0)

    def snapshot(self) -> Dict[str, int]:
        """Return all counters as a new dict keyed by dotted path, in sorted key order."""
        items = ((SEPARATOR.join(path), count) for path, count in self._counts.items())
        return dict(sorted(items))

    def __len__(self) -> int:
        return len(self._counts)
