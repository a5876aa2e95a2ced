"""Labeling service for incoming pull requests."""

import asyncio

from ..exceptions import ClassificationError, InvalidInputError, RemoteFetchError, RemoteWriteError
from ..github.client import GitHubAPIClient
from ..models import PullRequestReference, PullRequestSummary
from ..utils import get_logger
from .title_parser import parse_title, parse_url

logger = get_logger(__name__)

SUCCESS_MESSAGE = "The PR was successfully updated!"
GUIDELINES_MESSAGE = "The provided PR did not follow the contribution guidelines, no action was taken!"
WRITE_FAILED_MESSAGE = "Oops, something went wrong :("
INVALID_URL_MESSAGE = "The provided url ({url}) is invalid."

WELCOME_COMMENT = (
    "Hi @{author_login},\n"
    "Thanks for creating a pull request. We'll review this PR as soon as possible, please be patient.\n"
    "Remember that PR's are reserved for issues and feature requests only."
)


def build_welcome_comment(author_login: str) -> str:
    """Render the comment posted on pull requests that follow the guidelines."""
    return WELCOME_COMMENT.format(author_login=author_login)


class PullRequestLabeler:
    """Service that labels a pull request and welcomes its author.

    Every outcome, including failures, is reported as a message string;
    ``process`` does not raise for invalid input or GitHub errors.
    """

    def __init__(self, github_client: GitHubAPIClient, web_host: str = "github.com") -> None:
        """Initialize labeler.

        Args:
        ----
            github_client: Client used for all GitHub calls
            web_host: Host expected in pull request URLs

        """
        self.github_client = github_client
        self.web_host = web_host

    async def process(self, pull_request_url: str | None) -> str:
        """Label the pull request at ``pull_request_url``.

        Args:
        ----
            pull_request_url: URL of the pull request to update

        Returns:
        -------
            Human readable outcome message

        """
        url = pull_request_url or ""

        try:
            reference = self._parse_reference(url)
            pull_request = await self._fetch(reference)
        except InvalidInputError:
            logger.info("Rejected unparsable pull request URL %r", url)
            return INVALID_URL_MESSAGE.format(url=url)
        except RemoteFetchError:
            # Reported with the same message as an unparsable URL
            logger.exception("Could not fetch pull request %s", url)
            return INVALID_URL_MESSAGE.format(url=url)

        try:
            return await self.update_pull_request(reference, pull_request)
        except ClassificationError as e:
            logger.info("%s: %s", reference, e)
            return GUIDELINES_MESSAGE
        except RemoteWriteError:
            logger.exception("Failed to update pull request %s", reference)
            return WRITE_FAILED_MESSAGE

    async def update_pull_request(self, reference: PullRequestReference, pull_request: PullRequestSummary) -> str:
        """Apply labels and the welcome comment to a fetched pull request.

        Both calls are issued concurrently and always run to completion. A call
        that succeeded is not undone when the other one fails. The calls share
        the client's ``requests.Session`` for its default headers; each carries
        its own path and body.

        Raises
        ------
            ClassificationError: If the title does not follow the convention
            RemoteWriteError: If adding labels or creating the comment failed

        """
        classification = parse_title(pull_request.title)
        if classification is None:
            raise ClassificationError(pull_request.title)

        labels = classification.labels()
        comment = build_welcome_comment(pull_request.author_login)

        logger.info("Updating %s with labels %s", reference, labels)

        results = await asyncio.gather(
            asyncio.to_thread(
                self.github_client.add_labels,
                reference.owner,
                reference.repository,
                reference.number,
                labels,
            ),
            asyncio.to_thread(
                self.github_client.create_comment,
                reference.owner,
                reference.repository,
                reference.number,
                comment,
            ),
            return_exceptions=True,
        )

        errors = [result for result in results if isinstance(result, BaseException)]
        for error in errors:
            if not isinstance(error, RemoteWriteError):
                raise error
        for error in errors:
            logger.error("Write to %s failed: %s", reference, error, exc_info=error)
        if errors:
            raise errors[0]

        return SUCCESS_MESSAGE

    def _parse_reference(self, url: str) -> PullRequestReference:
        reference = parse_url(url, host=self.web_host)
        if reference is None:
            raise InvalidInputError(url)
        return reference

    async def _fetch(self, reference: PullRequestReference) -> PullRequestSummary:
        logger.debug("Fetching pull request %s", reference)
        return await asyncio.to_thread(
            self.github_client.get_pull_request,
            reference.owner,
            reference.repository,
            reference.number,
        )
