"""
Deck CRUD endpoints. Decks are always scoped to the configured user.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlmodel import Session
from typing import List
import logging

from flashdeck.api.v1.endpoints.dependencies import (
    get_current_user_id,
    get_review_controller,
    verify_access_token,
)
from flashdeck.core.database import get_session
from flashdeck.schemas.card import RowsAffectedResponse
from flashdeck.schemas.deck import DeckForm, DeckResponse
from flashdeck.services import record_store
from flashdeck.services.review_session_service import ReviewSessionController

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/decks",
    tags=["decks"],
    dependencies=[Depends(verify_access_token)]
)


@router.get("", response_model=List[DeckResponse])
def get_decks(
    user_id: int = Depends(get_current_user_id),
    session: Session = Depends(get_session)
):
    """Get all decks of the current user."""
    decks = record_store.read_decks(session, user_id)
    return [DeckResponse.model_validate(deck) for deck in decks]


@router.get("/{deck_id}", response_model=DeckResponse)
def get_deck(
    deck_id: int,
    user_id: int = Depends(get_current_user_id),
    session: Session = Depends(get_session)
):
    """Get a deck by ID."""
    deck = record_store.read_deck(session, deck_id, user_id)
    if not deck:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Deck not found")
    return DeckResponse.model_validate(deck)


@router.post("", response_model=RowsAffectedResponse, status_code=status.HTTP_201_CREATED)
def post_deck(
    deck_form: DeckForm,
    user_id: int = Depends(get_current_user_id),
    session: Session = Depends(get_session)
):
    """Create a deck. from_language and to_language_primary are required."""
    return RowsAffectedResponse(rows_affected=record_store.create_deck(session, deck_form, user_id))


@router.put("/{deck_id}", response_model=RowsAffectedResponse)
def put_deck(
    deck_id: int,
    deck_form: DeckForm,
    user_id: int = Depends(get_current_user_id),
    session: Session = Depends(get_session)
):
    """Update the provided fields of a deck."""
    rows_affected = record_store.update_deck(session, deck_id, deck_form, user_id)
    return RowsAffectedResponse(rows_affected=rows_affected)


@router.delete("/{deck_id}", response_model=RowsAffectedResponse)
def delete_deck(
    deck_id: int,
    user_id: int = Depends(get_current_user_id),
    session: Session = Depends(get_session),
    controller: ReviewSessionController = Depends(get_review_controller)
):
    """Delete a deck with its cards and drop its active review session."""
    rows_affected = record_store.delete_deck(session, deck_id, user_id)
    if rows_affected:
        controller.cache.discard(deck_id)
    return RowsAffectedResponse(rows_affected=rows_affected)
