"""Markdown output for collected PR stats."""

from typing import Dict, Iterable, List, Tuple

APPROVAL_PREFIX = 'pr.review.approval.'


def approvals(data: Dict[str, int]) -> List[Tuple[str, int]]:
    """Return (user, approvals) pairs, most approvals first.

    Ties keep the order in which the keys appear in ``data``.
    """
    pairs = [
        (key[len(APPROVAL_PREFIX):], count)
        for key, count in data.items()
        if key.startswith(APPROVAL_PREFIX)
    ]
    return sorted(pairs, key=lambda pair: pair[1], reverse=True)


class MarkdownTableFormatter:
    """Formats stats documents ({'repository': ..., 'data': ...}) as markdown."""

    def format_document(self, document: Dict) -> List[str]:
        """Format one repository; returns no lines for repositories without PRs.

        Args:
            document: A document produced by PullRequestStatsAnalyzer.run()

        Returns:
            Markdown lines, ending with a blank line
        """
        repository = document['repository']
        data = document['data']

        if data.get('pr', 0) < 1:
            return []

        lines = [
            f"# {repository}",
            f"- Pull requests: {data['pr']}",
            f"- Approvals total: {data.get('pr.review.approval', 0)}",
        ]
        for user, count in approvals(data):
            lines.append(f"- Approvals {user}: {count}")
        lines.append('')
        return lines

    def format_documents(self, documents: Iterable[Dict]) -> str:
        """Format several repositories, separated by blank lines."""
        lines = []
        for document in documents:
            lines.extend(self.format_document(document))
        return '\n'.join(lines) + '\n' if lines else ''

    def print_summary(self, documents: Iterable[Dict]):
        print(self.format_documents(documents), end='')
