"""
Review flow endpoints: the deck overview and the position-by-position action.
"""
from fastapi import APIRouter, Depends, Path
from sqlmodel import Session
from typing import Optional

from flashdeck.api.v1.endpoints.dependencies import (
    get_current_user_id,
    get_review_controller,
    has_valid_token,
)
from flashdeck.core.database import get_session
from flashdeck.schemas.deck import DeckResponse, HomeResponse
from flashdeck.schemas.review import ActionResponse, CardSide
from flashdeck.services import record_store
from flashdeck.services.review_session_service import ReviewSessionController

router = APIRouter(tags=["review"])


@router.get("/home", response_model=HomeResponse)
def home(
    uuid: Optional[str] = None,
    user_id: int = Depends(get_current_user_id),
    session: Session = Depends(get_session)
):
    """Decks to pick a review from. Empty unless the shared token matches."""
    if not has_valid_token(uuid):
        return HomeResponse(decks=[])
    decks = record_store.read_decks(session, user_id)
    return HomeResponse(decks=[DeckResponse.model_validate(deck) for deck in decks])


@router.get("/action/{deck_id}/{card_index}/{card_side}", response_model=ActionResponse)
def action(
    deck_id: int,
    card_side: CardSide,
    card_index: int = Path(..., ge=0),
    session: Session = Depends(get_session),
    controller: ReviewSessionController = Depends(get_review_controller)
):
    """
    Card at `card_index` of the deck's review order.

    Index 0 with side "from" starts a new session. Past the end of the order
    the "The End" card is returned with num_cards = 0.
    """
    return controller.handle_session_position(session, deck_id, card_index, card_side)
