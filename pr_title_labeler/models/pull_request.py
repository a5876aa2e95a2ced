"""Pull request data models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

REVIEW_LABEL = "Review PR"


class TitleType(str, Enum):
    """Change types accepted in a pull request title prefix."""

    CHORE = "chore"
    FIX = "fix"
    FEATURE = "feature"


class PullRequestReference(BaseModel):
    """Owner, repository and number identifying a pull request."""

    model_config = ConfigDict(frozen=True)

    owner: str = Field(..., min_length=1)
    repository: str = Field(..., min_length=1)
    number: int = Field(..., gt=0)

    def __str__(self) -> str:
        return f"{self.owner}/{self.repository}#{self.number}"


class PullRequestSummary(BaseModel):
    """The parts of a GitHub pull request the labeler cares about."""

    model_config = ConfigDict(frozen=True)

    title: str
    author_login: str

    @classmethod
    def from_github_data(cls, github_data: dict) -> "PullRequestSummary":
        """Create summary from GitHub API data."""
        return cls(
            title=github_data["title"],
            author_login=github_data["user"]["login"],
        )


class TitleClassification(BaseModel):
    """Type and feature extracted from a ``type(feature):`` title prefix."""

    model_config = ConfigDict(frozen=True)

    type: TitleType
    feature: str = Field(..., min_length=1)

    def labels(self) -> list[str]:
        """Labels to apply to a pull request with this classification."""
        return [
            f"type: {self.type.value}",
            f"feature: {self.feature}",
            REVIEW_LABEL,
        ]
