"""
Record store for users, decks and cards.

Plain read/create/update/delete helpers over SQLModel sessions. Updates are
partial: only the fields present on the form are written, and every write
returns the number of rows it touched.

The three functions used by review sessions (`fetch_deck`, `fetch_cards`,
`persist_deck_seen_at`) translate database failures into `StorageUnavailable`
so callers can fall back without knowing about SQLAlchemy.
"""
import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from flashdeck.core.exceptions import StorageUnavailable, ValidationError
from flashdeck.models import Card, Deck, User
from flashdeck.schemas.card import CardForm
from flashdeck.schemas.deck import DeckForm
from flashdeck.schemas.user import UserForm

logger = logging.getLogger(__name__)


def _provided_fields(form: BaseModel) -> Dict[str, Any]:
    """Fields set on a form, ignoring the ones left empty."""
    fields = form.model_dump(exclude_none=True)
    if not fields:
        raise ValidationError("No fields to update")
    return fields


def _require(form: BaseModel, *names: str) -> None:
    missing = [name for name in names if getattr(form, name) is None]
    if missing:
        raise ValidationError(f"Missing required fields: {', '.join(missing)}")


# Users

def read_users(session: Session) -> List[User]:
    return list(session.exec(select(User).order_by(User.id)).all())


def read_user(session: Session, user_id: int) -> Optional[User]:
    return session.get(User, user_id)


def create_user(session: Session, user_form: UserForm) -> int:
    _require(user_form, "name", "email")
    session.add(User(name=user_form.name, email=user_form.email))
    session.commit()
    return 1


def update_user(session: Session, user_id: int, user_form: UserForm) -> int:
    fields = _provided_fields(user_form)
    user = session.get(User, user_id)
    if not user:
        return 0
    for name, value in fields.items():
        setattr(user, name, value)
    user.updated_at = datetime.utcnow()
    session.add(user)
    session.commit()
    return 1


def delete_user(session: Session, user_id: int) -> int:
    """
    Delete a user together with their decks and the cards in them.

    Returns:
        1 if the user existed, 0 otherwise
    """
    user = session.get(User, user_id)
    if not user:
        return 0

    decks = session.exec(select(Deck).where(Deck.user_id == user_id)).all()
    cards_deleted = 0
    for deck in decks:
        cards_deleted += _delete_cards_of_deck(session, deck.id)
        session.delete(deck)

    session.delete(user)
    session.commit()

    logger.info(
        f"Deleted user {user_id}: {len(decks)} decks, {cards_deleted} cards"
    )
    return 1


# Decks

def read_decks(session: Session, user_id: int) -> List[Deck]:
    return list(session.exec(
        select(Deck).where(Deck.user_id == user_id).order_by(Deck.id)
    ).all())


def read_deck(session: Session, deck_id: int, user_id: int) -> Optional[Deck]:
    """Get a deck only if it belongs to `user_id`."""
    return session.exec(
        select(Deck).where(Deck.id == deck_id, Deck.user_id == user_id)
    ).first()


def create_deck(session: Session, deck_form: DeckForm, user_id: int) -> int:
    _require(deck_form, "from_language", "to_language_primary")
    deck = Deck(
        user_id=user_id,
        from_language=deck_form.from_language,
        to_language_primary=deck_form.to_language_primary,
        to_language_secondary=deck_form.to_language_secondary,
        design_key=deck_form.design_key,
    )
    if deck_form.seen_at is not None:
        deck.seen_at = deck_form.seen_at
    session.add(deck)
    session.commit()
    return 1


def update_deck(session: Session, deck_id: int, deck_form: DeckForm, user_id: int) -> int:
    fields = _provided_fields(deck_form)
    deck = read_deck(session, deck_id, user_id)
    if not deck:
        return 0
    for name, value in fields.items():
        setattr(deck, name, value)
    deck.updated_at = datetime.utcnow()
    session.add(deck)
    session.commit()
    return 1


def delete_deck(session: Session, deck_id: int, user_id: int) -> int:
    """Delete a deck and its cards. Returns 1 if the deck existed for the user."""
    deck = read_deck(session, deck_id, user_id)
    if not deck:
        return 0
    cards_deleted = _delete_cards_of_deck(session, deck_id)
    session.delete(deck)
    session.commit()
    logger.info(f"Deleted deck {deck_id} and {cards_deleted} cards")
    return 1


# Cards

def read_cards(session: Session, deck_id: int) -> List[Card]:
    return list(session.exec(
        select(Card).where(Card.deck_id == deck_id).order_by(Card.id)
    ).all())


def read_card(session: Session, deck_id: int, card_id: int) -> Optional[Card]:
    return session.exec(
        select(Card).where(Card.id == card_id, Card.deck_id == deck_id)
    ).first()


def create_card(session: Session, deck_id: int, card_form: CardForm) -> int:
    _require(card_form, "from_text", "to_text_primary")
    card = Card(
        deck_id=deck_id,
        related_card_ids=card_form.related_card_ids or [],
        from_text=card_form.from_text,
        to_text_primary=card_form.to_text_primary,
        to_text_secondary=card_form.to_text_secondary,
        example_text=card_form.example_text,
        audio_url=card_form.audio_url,
    )
    session.add(card)
    session.commit()
    return 1


def update_card(session: Session, deck_id: int, card_id: int, card_form: CardForm) -> int:
    """
    Partially update a card.

    A changed rating moves the old rating into `prev_rating`. `updated_at` is
    bumped even when every value is unchanged, so re-grading a card counts
    as a fresh review.
    """
    fields = _provided_fields(card_form)
    card = read_card(session, deck_id, card_id)
    if not card:
        return 0
    if "rating" in fields and fields["rating"] != card.rating:
        card.prev_rating = card.rating
    for name, value in fields.items():
        setattr(card, name, value)
    card.updated_at = datetime.utcnow()
    session.add(card)
    session.commit()
    return 1


def delete_card(session: Session, deck_id: int, card_id: int) -> int:
    card = read_card(session, deck_id, card_id)
    if not card:
        return 0
    session.delete(card)
    session.commit()
    return 1


def _delete_cards_of_deck(session: Session, deck_id: int) -> int:
    cards = session.exec(select(Card).where(Card.deck_id == deck_id)).all()
    for card in cards:
        session.delete(card)
    return len(cards)


# Review session inputs

def fetch_deck(session: Session, deck_id: int, user_id: int) -> Optional[Deck]:
    try:
        return read_deck(session, deck_id, user_id)
    except SQLAlchemyError as e:
        session.rollback()
        raise StorageUnavailable(f"Could not read deck {deck_id}: {e}") from e


def fetch_cards(session: Session, deck_id: int) -> List[Card]:
    try:
        return read_cards(session, deck_id)
    except SQLAlchemyError as e:
        session.rollback()
        raise StorageUnavailable(f"Could not read cards of deck {deck_id}: {e}") from e


def persist_deck_seen_at(
    session: Session,
    deck_id: int,
    user_id: int,
    timestamp: datetime
) -> int:
    try:
        return update_deck(session, deck_id, DeckForm(seen_at=timestamp), user_id)
    except SQLAlchemyError as e:
        session.rollback()
        raise StorageUnavailable(f"Could not stamp deck {deck_id}: {e}") from e
