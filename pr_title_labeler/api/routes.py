"""FastAPI routes for the PR Title Labeler."""

from typing import Any

from fastapi import APIRouter

from pr_title_labeler.handler import handle_request
from pr_title_labeler.models import HandlerContext, HandlerResponse
from pr_title_labeler.utils import get_logger

logger = get_logger(__name__)
router = APIRouter()


@router.get("/")
async def root() -> dict[str, Any]:
    """Root endpoint."""
    return {
        "message": "PR Title Labeler API",
        "version": "1.0.0",
        "endpoints": {
            "label": "/pull-requests/label",
        },
    }


@router.post("/pull-requests/label")
async def label_pull_request(context: HandlerContext) -> HandlerResponse:
    """Label a pull request whose title follows the contribution guidelines.

    Always answers 200; the ``result`` message describes what happened.
    """
    logger.debug("Labeling request for %s", context.pull_request_url)
    result = await handle_request(context)
    return HandlerResponse(result=result)
