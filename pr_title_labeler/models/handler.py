"""Request and response models for the webhook entry points."""

from pydantic import BaseModel, ConfigDict, Field


class HandlerContext(BaseModel):
    """Input for a single labeling run.

    Accepts both snake_case field names and the camelCase names used by
    webhook payloads (``githubToken``, ``pullRequestUrl``).
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    github_token: str | None = Field(None, alias="githubToken")
    pull_request_url: str | None = Field(None, alias="pullRequestUrl")


class HandlerResponse(BaseModel):
    """Result of a labeling run. ``error`` is always empty."""

    error: None = None
    result: str
