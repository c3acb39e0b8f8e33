"""
Card model.
"""
from sqlmodel import SQLModel, Field, Relationship
from typing import Optional, List, TYPE_CHECKING
from datetime import datetime
from sqlalchemy import Column, JSON

if TYPE_CHECKING:
    from flashdeck.models.deck import Deck


class Card(SQLModel, table=True):
    """Card table - a single review item and its rating history."""
    __tablename__ = "cards"

    id: Optional[int] = Field(default=None, primary_key=True)
    deck_id: int = Field(foreign_key="decks.id", index=True)
    related_card_ids: List[int] = Field(
        default_factory=list,
        sa_column=Column(JSON, nullable=False)
    )
    from_text: str = Field(max_length=100)
    to_text_primary: str = Field(max_length=100)
    to_text_secondary: Optional[str] = Field(default=None, max_length=100)
    example_text: Optional[str] = Field(default=None, max_length=255)
    audio_url: Optional[str] = Field(default=None, max_length=255)
    seen_at: datetime = Field(default_factory=datetime.utcnow)
    seen_for: Optional[int] = None  # Time spent on the card
    rating: int = Field(default=0)  # 0 = unrated, 1-4 = increasing ease
    prev_rating: int = Field(default=0)  # Rating before the last rating change
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(
        default_factory=datetime.utcnow,
        sa_column_kwargs={"onupdate": datetime.utcnow}
    )

    # Relationships
    deck: Optional["Deck"] = Relationship(back_populates="cards")
