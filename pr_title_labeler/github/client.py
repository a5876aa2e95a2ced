"""GitHub API client for reading and updating pull requests."""

import json
from typing import Any
from urllib.parse import urljoin

import requests

from pr_title_labeler.config import get_github_headers, get_settings
from pr_title_labeler.exceptions import GitHubAPIError, RemoteFetchError, RemoteWriteError
from pr_title_labeler.models import PullRequestSummary
from pr_title_labeler.utils import get_logger

logger = get_logger(__name__)


class GitHubAPIClient:
    """GitHub API client for the three calls the labeler makes."""

    def __init__(
        self,
        access_token: str | None = None,
        base_url: str | None = None,
        user_agent: str | None = None,
    ) -> None:
        """Initialize GitHub API client.

        Args:
        ----
            access_token: GitHub personal access token for authentication
            base_url: API root, e.g. ``https://api.github.com``
            user_agent: Value sent in the ``User-Agent`` header

        """
        settings = get_settings()
        self.access_token = access_token or settings.github_token
        self.base_url = base_url or settings.github_api_base_url
        self.timeout = settings.request_timeout
        self.session = requests.Session()

        self.session.headers.update(get_github_headers(self.access_token))
        if user_agent:
            self.session.headers["User-Agent"] = user_agent

        if not self.access_token:
            logger.warning("No GitHub token provided, using unauthenticated requests")

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self.session.close()

    def __enter__(self) -> "GitHubAPIClient":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def _make_request(self, method: str, path: str, data: Any = None) -> Any:  # noqa: ANN401
        """Make HTTP request and decode the JSON response.

        Args:
        ----
            method: HTTP method (GET, POST, etc.)
            path: Request path relative to the API root, or a full URL
            data: JSON-serialisable request body

        Returns:
        -------
            Decoded JSON body, or None when the response has no body

        Raises:
        ------
            GitHubAPIError: If the request fails or returns a non-2xx status

        """
        url = path
        if not url.startswith(("http://", "https://")):
            url = urljoin(self.base_url.rstrip("/") + "/", path.lstrip("/"))

        body = json.dumps(data) if data is not None else None

        logger.debug("Making %s request to %s", method, url)

        try:
            response = self.session.request(method, url, data=body, timeout=self.timeout)
            response.raise_for_status()
        except requests.HTTPError as e:
            logger.exception("Request failed")
            raise GitHubAPIError(
                f"{method} {url} returned {e.response.status_code}",
                status_code=e.response.status_code,
                response=e.response,
            ) from e
        except requests.RequestException as e:
            logger.exception("Request failed")
            raise GitHubAPIError(f"{method} {url} failed: {e}") from e

        if not response.content:
            return None

        try:
            return response.json()
        except ValueError as e:
            raise GitHubAPIError(
                f"{method} {url} returned a non-JSON body",
                status_code=response.status_code,
                response=response,
            ) from e

    def get_pull_request(self, owner: str, repository: str, number: int) -> PullRequestSummary:
        """Get the title and author of a pull request.

        Args:
        ----
            owner: Repository owner
            repository: Repository name
            number: Pull request number

        Returns:
        -------
            PullRequestSummary with title and author login

        Raises:
        ------
            RemoteFetchError: If the pull request cannot be fetched

        """
        url = f"/repos/{owner}/{repository}/pulls/{number}"

        try:
            pr_data = self._make_request("GET", url)
        except GitHubAPIError as e:
            raise RemoteFetchError(str(e), status_code=e.status_code, response=e.response) from e

        try:
            return PullRequestSummary.from_github_data(pr_data)
        except (KeyError, TypeError, ValueError) as e:
            raise RemoteFetchError(f"Unexpected pull request payload from {url}") from e

    def add_labels(self, owner: str, repository: str, issue_number: int, labels: list[str]) -> Any:  # noqa: ANN401
        """Add labels to an issue or pull request.

        Raises
        ------
            RemoteWriteError: If the labels cannot be added

        """
        url = f"/repos/{owner}/{repository}/issues/{issue_number}/labels"

        try:
            return self._make_request("POST", url, data=labels)
        except GitHubAPIError as e:
            raise RemoteWriteError(str(e), status_code=e.status_code, response=e.response) from e

    def create_comment(self, owner: str, repository: str, issue_number: int, body: str) -> Any:  # noqa: ANN401
        """Create a comment on an issue or pull request.

        Raises
        ------
            RemoteWriteError: If the comment cannot be created

        """
        url = f"/repos/{owner}/{repository}/issues/{issue_number}/comments"

        try:
            return self._make_request("POST", url, data={"body": body})
        except GitHubAPIError as e:
            raise RemoteWriteError(str(e), status_code=e.status_code, response=e.response) from e
