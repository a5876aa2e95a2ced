"""
Data models for the PR Title Labeler
"""

from .handler import HandlerContext, HandlerResponse
from .pull_request import (
    REVIEW_LABEL,
    PullRequestReference,
    PullRequestSummary,
    TitleClassification,
    TitleType,
)

__all__ = [
    "REVIEW_LABEL",
    "HandlerContext",
    "HandlerResponse",
    "PullRequestReference",
    "PullRequestSummary",
    "TitleClassification",
    "TitleType",
]
