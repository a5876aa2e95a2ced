"""Parsing of pull request URLs and titles."""

import re

from ..models import PullRequestReference, TitleClassification, TitleType

TITLE_PATTERN = re.compile(
    r"(?<![A-Za-z])(" + "|".join(t.value for t in TitleType) + r")\((.+?)\):",
)


def _url_pattern(host: str) -> re.Pattern:
    return re.compile(
        r"^https://" + re.escape(host) + r"/([^/\s]+)/([^/\s]+)/pull/(\d+)(?:[/?#].*)?$",
    )


def parse_url(url: str | None, host: str = "github.com") -> PullRequestReference | None:
    """Extract owner, repository and number from a pull request URL.

    Args:
    ----
        url: URL such as ``https://github.com/acme/widgets/pull/42``
        host: Web host of the GitHub instance

    Returns:
    -------
        PullRequestReference, or None if the URL is not a pull request URL

    """
    if not url:
        return None

    match = _url_pattern(host).match(url.strip())
    if not match:
        return None

    owner, repository, number = match.group(1), match.group(2), int(match.group(3))
    if number <= 0:
        return None

    return PullRequestReference(owner=owner, repository=repository, number=number)


def parse_title(title: str | None) -> TitleClassification | None:
    """Classify a pull request title by its ``type(feature):`` prefix.

    ``None`` means the title does not follow the contribution guidelines.
    """
    if not title:
        return None

    match = TITLE_PATTERN.search(title)
    if not match:
        return None

    return TitleClassification(type=TitleType(match.group(1)), feature=match.group(2))
