"""Entry points that run one labeling cycle for a webhook invocation."""

import asyncio
from collections.abc import Callable, Mapping
from typing import Any

from pydantic import ValidationError

from .config import get_settings
from .github.client import GitHubAPIClient
from .models import HandlerContext
from .services.pull_request_labeler import INVALID_URL_MESSAGE, PullRequestLabeler
from .utils import get_logger

logger = get_logger(__name__)

DoneCallback = Callable[[Exception | None, str], None]


def _to_context(context: HandlerContext | Mapping[str, Any]) -> HandlerContext:
    if isinstance(context, HandlerContext):
        return context
    return HandlerContext.model_validate(dict(context))


def _raw_url(context: Mapping[str, Any]) -> Any:  # noqa: ANN401
    url = context.get("pullRequestUrl")
    if url is None:
        url = context.get("pull_request_url")
    return "" if url is None else url


async def handle_request(context: HandlerContext | Mapping[str, Any]) -> str:
    """Label the pull request described by ``context`` and return the outcome message."""
    try:
        context = _to_context(context)
    except ValidationError:
        logger.exception("Rejected malformed handler context")
        result = INVALID_URL_MESSAGE.format(url=_raw_url(context))
        logger.info("%s", result)
        return result

    settings = get_settings()

    with GitHubAPIClient(access_token=context.github_token) as client:
        labeler = PullRequestLabeler(client, web_host=settings.github_web_host)
        result = await labeler.process(context.pull_request_url)

    logger.info("%s", result)
    return result


def webhook_handler(context: HandlerContext | Mapping[str, Any], done: DoneCallback) -> None:
    """Callback-style entry point.

    ``done`` is always called with ``None`` as the error and the outcome
    message as the result; failures are described by the message itself.
    """
    result = asyncio.run(handle_request(context))
    done(None, result)
