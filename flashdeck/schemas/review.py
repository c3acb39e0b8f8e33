"""
Review action schemas.
"""
from pydantic import BaseModel
from typing import Literal
from flashdeck.schemas.card import CardResponse

CardSide = Literal["from", "to"]


class ActionResponse(BaseModel):
    """One step of a review session."""
    card: CardResponse
    num_cards: int  # Length of the active order, 0 once the deck is exhausted
    deck_id: int
    index: int
    side: CardSide  # Side requested by the client
    display_side: CardSide  # Side to show first, picked at random
