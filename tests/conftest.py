"""Shared test fixtures."""

import os

# Settings are read at import time and refuse to load without a database URL
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.pop("UUID", None)

from datetime import datetime

import pytest
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from flashdeck.models import Card, Deck, User
from flashdeck.services.active_deck_cache import ActiveDeckCache
from flashdeck.services.review_session_service import ReviewSessionController


@pytest.fixture
def engine():
    """In-memory SQLite engine with all tables created."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def user(session):
    user = User(name="glencoden", email="glen@coden.io")
    session.add(user)
    session.commit()
    session.refresh(user)
    return user


@pytest.fixture
def deck(session, user):
    """A deck last reviewed on 2024-01-01 12:00."""
    deck = Deck(
        user_id=user.id,
        from_language="de",
        to_language_primary="en",
        seen_at=datetime(2024, 1, 1, 12, 0, 0),
    )
    session.add(deck)
    session.commit()
    session.refresh(deck)
    return deck


@pytest.fixture
def add_card(session, deck):
    """Insert a card into the deck with a fixed update time."""
    def _add(from_text, rating=0, updated_at=None, deck_id=None):
        card = Card(
            deck_id=deck_id or deck.id,
            from_text=from_text,
            to_text_primary=from_text.upper(),
            rating=rating,
            updated_at=updated_at or datetime(2024, 1, 1, 0, 0, 0),
        )
        session.add(card)
        session.commit()
        session.refresh(card)
        return card
    return _add


@pytest.fixture
def controller(user):
    return ReviewSessionController(ActiveDeckCache(max_decks=8), user_id=user.id)
