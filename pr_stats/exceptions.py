"""Error types raised while collecting PR stats."""


class ConfigurationError(Exception):
    """Raised for unusable configuration (missing token, bad cache directory)."""


class GitHubAPIError(Exception):
    """Raised when the GitHub API answers with a non-success status."""

    def __init__(self, status_code: int, path: str, message: str = ''):
        super().__init__(message or f"{status_code} error for {path}")
        self.status_code = int(status_code)
        self.path = path

    @property
    def not_found(self) -> bool:
        return self.status_code == 404
