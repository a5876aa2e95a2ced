"""Error types raised while labeling a pull request."""

from typing import Any


class PRLabelerError(Exception):
    """Base class for all labeler errors."""


class InvalidInputError(PRLabelerError):
    """The pull request URL could not be parsed."""

    def __init__(self, url: str | None) -> None:
        super().__init__(f"Unparsable pull request URL: {url!r}")
        self.url = url


class ClassificationError(PRLabelerError):
    """The pull request title does not follow the ``type(feature):`` convention."""

    def __init__(self, title: str) -> None:
        super().__init__(f"Title does not follow the contribution guidelines: {title!r}")
        self.title = title


class GitHubAPIError(PRLabelerError):
    """A GitHub API call failed at the transport level or returned a non-2xx status."""

    def __init__(self, message: str, status_code: int | None = None, response: Any = None) -> None:  # noqa: ANN401
        super().__init__(message)
        self.status_code = status_code
        self.response = response


class RemoteFetchError(GitHubAPIError):
    """Fetching the pull request failed."""


class RemoteWriteError(GitHubAPIError):
    """Adding labels or creating a comment failed."""
