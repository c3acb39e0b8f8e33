"""
Shared endpoint dependencies.
"""
from fastapi import Query, Request
from typing import Optional

from flashdeck.core.config import settings
from flashdeck.core.exceptions import AuthenticationError
from flashdeck.services.review_session_service import ReviewSessionController


def has_valid_token(uuid: Optional[str]) -> bool:
    """Check the shared `uuid` token. Always true when no token is configured."""
    if not settings.access_token:
        return True
    return uuid == settings.access_token


def verify_access_token(uuid: Optional[str] = Query(None)) -> None:
    """Reject API requests that do not carry the shared `uuid` token."""
    if not has_valid_token(uuid):
        raise AuthenticationError("Invalid or missing uuid")


def get_current_user_id() -> int:
    """Every deck served by this instance belongs to the configured user."""
    return settings.default_user_id


def get_review_controller(request: Request) -> ReviewSessionController:
    """The controller built at startup, holding the active deck cache."""
    return request.app.state.review_controller
