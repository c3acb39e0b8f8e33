"""
Deck schemas.
"""
from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime


class DeckForm(BaseModel):
    """Create/update form for a deck. Only provided fields are written on update."""
    from_language: Optional[str] = Field(None, max_length=100)
    to_language_primary: Optional[str] = Field(None, max_length=100)
    to_language_secondary: Optional[str] = Field(None, max_length=100)
    design_key: Optional[str] = Field(None, max_length=100)
    seen_at: Optional[datetime] = None


class DeckResponse(BaseModel):
    """Deck response schema."""
    id: int
    user_id: int
    from_language: str
    to_language_primary: str
    to_language_secondary: Optional[str] = None
    design_key: Optional[str] = None
    seen_at: datetime
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class HomeResponse(BaseModel):
    """Decks of the configured user, sorted by id."""
    decks: List[DeckResponse]
