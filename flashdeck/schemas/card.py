"""
Card schemas.
"""
from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime


class CardForm(BaseModel):
    """Create/update form for a card. Only provided fields are written on update."""
    related_card_ids: Optional[List[int]] = None
    from_text: Optional[str] = Field(None, max_length=100)
    to_text_primary: Optional[str] = Field(None, max_length=100)
    to_text_secondary: Optional[str] = Field(None, max_length=100)
    example_text: Optional[str] = Field(None, max_length=255)
    audio_url: Optional[str] = Field(None, max_length=255)
    seen_at: Optional[datetime] = None
    seen_for: Optional[int] = Field(None, ge=0, description="Time spent on the card")
    rating: Optional[int] = Field(None, ge=0, le=4, description="0 = unrated, 1-4 = increasing ease")


class CardResponse(BaseModel):
    """Card response schema.

    Also used as the detached snapshot held by the active deck cache, so a
    cached review order never changes when the underlying row does.
    """
    id: int
    deck_id: int
    related_card_ids: List[int] = []
    from_text: str
    to_text_primary: str
    to_text_secondary: Optional[str] = None
    example_text: Optional[str] = None
    audio_url: Optional[str] = None
    seen_at: datetime
    seen_for: Optional[int] = None
    rating: int = 0
    prev_rating: int = 0
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class RowsAffectedResponse(BaseModel):
    """Result of a write against the record store."""
    rows_affected: int
