"""
Card CRUD endpoints.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlmodel import Session
from typing import List

from flashdeck.api.v1.endpoints.dependencies import verify_access_token
from flashdeck.core.database import get_session
from flashdeck.schemas.card import CardForm, CardResponse, RowsAffectedResponse
from flashdeck.services import record_store

router = APIRouter(
    prefix="/cards",
    tags=["cards"],
    dependencies=[Depends(verify_access_token)]
)


@router.get("/{deck_id}", response_model=List[CardResponse])
def get_cards(deck_id: int, session: Session = Depends(get_session)):
    """Get all cards of a deck."""
    return [CardResponse.model_validate(card) for card in record_store.read_cards(session, deck_id)]


@router.get("/{deck_id}/{card_id}", response_model=CardResponse)
def get_card(deck_id: int, card_id: int, session: Session = Depends(get_session)):
    """Get a card of a deck by ID."""
    card = record_store.read_card(session, deck_id, card_id)
    if not card:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Card not found")
    return CardResponse.model_validate(card)


@router.post("/{deck_id}", response_model=RowsAffectedResponse, status_code=status.HTTP_201_CREATED)
def post_card(deck_id: int, card_form: CardForm, session: Session = Depends(get_session)):
    """Create a card. from_text and to_text_primary are required."""
    return RowsAffectedResponse(rows_affected=record_store.create_card(session, deck_id, card_form))


@router.put("/{deck_id}/{card_id}", response_model=RowsAffectedResponse)
def put_card(
    deck_id: int,
    card_id: int,
    card_form: CardForm,
    session: Session = Depends(get_session)
):
    """
    Update the provided fields of a card.

    Rating a card goes through here; the previous rating is kept in prev_rating.
    Active review orders are snapshots and are not affected until the deck's
    session restarts.
    """
    rows_affected = record_store.update_card(session, deck_id, card_id, card_form)
    return RowsAffectedResponse(rows_affected=rows_affected)


@router.delete("/{deck_id}/{card_id}", response_model=RowsAffectedResponse)
def delete_card(deck_id: int, card_id: int, session: Session = Depends(get_session)):
    """Delete a card."""
    return RowsAffectedResponse(rows_affected=record_store.delete_card(session, deck_id, card_id))
