"""
Review session controller.

A review session is a walk over a deck's scheduled order, one position per
request. Requesting position 0 with the "from" side (re)starts the session:
the deck is stamped as seen, its cards are scheduled, and the order is stored in
the active deck cache. Every other request only reads from the cache.

Anything that goes wrong (unknown deck, empty deck, position past the end,
storage failure) ends in the "The End" card rather than an error, so callers
always have a card to show.
"""
import logging
import random
from datetime import datetime
from typing import List, Optional

from sqlmodel import Session

from flashdeck.core.exceptions import (
    DeckNotFound,
    EmptyDeck,
    FlashdeckException,
    PositionOutOfRange,
    StorageUnavailable,
)
from flashdeck.schemas.card import CardResponse
from flashdeck.schemas.review import ActionResponse
from flashdeck.services.active_deck_cache import ActiveDeckCache
from flashdeck.services.record_store import fetch_cards, fetch_deck, persist_deck_seen_at
from flashdeck.services.scheduler_service import DEFAULT_DAILY_QUOTA, compute_order

logger = logging.getLogger(__name__)


SIDE_FROM = "from"
SIDE_TO = "to"
SIDES = (SIDE_FROM, SIDE_TO)

END_TEXT = "The End"
END_TIMESTAMP = datetime(2016, 7, 8, 9, 10, 11)

END_CARD = CardResponse(
    id=0,
    deck_id=0,
    related_card_ids=[],
    from_text=END_TEXT,
    to_text_primary=END_TEXT,
    seen_at=END_TIMESTAMP,
    rating=0,
    prev_rating=0,
    created_at=END_TIMESTAMP,
    updated_at=END_TIMESTAMP,
)


def is_session_start(position: int, side: str) -> bool:
    return position == 0 and side == SIDE_FROM


class ReviewSessionController:
    """Serves review positions for decks of a single user."""

    def __init__(
        self,
        cache: ActiveDeckCache,
        user_id: int,
        daily_quota: int = DEFAULT_DAILY_QUOTA,
        rng: Optional[random.Random] = None
    ):
        self.cache = cache
        self.user_id = user_id
        self.daily_quota = daily_quota
        self._rng = rng or random.Random()

    def start_session(self, session: Session, deck_id: int) -> List[CardResponse]:
        """
        Schedule a deck and make the result its active order.

        The deck's previous `seen_at` is what the scheduler compares card
        updates against; the new stamp only affects the next session.

        Raises:
            DeckNotFound: If the deck does not exist for this user
            StorageUnavailable: If the record store fails; the cached order
                for the deck is left as it was
        """
        deck = fetch_deck(session, deck_id, self.user_id)
        if deck is None:
            raise DeckNotFound(f"Deck {deck_id} not found for user {self.user_id}")

        previous_seen_at = deck.seen_at

        rows_affected = persist_deck_seen_at(session, deck_id, self.user_id, datetime.utcnow())
        if rows_affected == 0:
            raise DeckNotFound(f"Deck {deck_id} disappeared while starting a session")

        cards = fetch_cards(session, deck_id)

        # Snapshots detach the order from later edits to the rows
        snapshots = [CardResponse.model_validate(card) for card in cards]
        order = compute_order(snapshots, previous_seen_at, self.daily_quota)

        self.cache.store(deck_id, order)
        logger.info(f"Started review session for deck {deck_id} with {len(order)} cards")
        return order

    def get_at(self, deck_id: int, position: int) -> CardResponse:
        """
        Card at `position` of the deck's active order.

        Raises:
            EmptyDeck: If the deck has no active order or it holds no cards
            PositionOutOfRange: If `position` lies past the end of the order
        """
        return self._pick(self.cache.get(deck_id), deck_id, position)

    @staticmethod
    def _pick(order: Optional[List[CardResponse]], deck_id: int, position: int) -> CardResponse:
        if not order:
            raise EmptyDeck(f"No active cards for deck {deck_id}")
        if position < 0 or position >= len(order):
            raise PositionOutOfRange(
                f"Position {position} outside deck {deck_id} ({len(order)} cards)"
            )
        return order[position]

    def handle_session_position(
        self,
        session: Session,
        deck_id: int,
        position: int,
        side: str
    ) -> ActionResponse:
        """
        Answer a review request for `position` of a deck.

        Args:
            session: Database session
            deck_id: Deck under review
            position: Index into the deck's active order
            side: "from" or "to"; "from" at position 0 restarts the session

        Returns:
            The card to show, or the end card once the session is exhausted
        """
        if is_session_start(position, side):
            try:
                self.start_session(session, deck_id)
            except DeckNotFound as e:
                logger.warning(f"Cannot start session: {e}")
                self.cache.discard(deck_id)
            except StorageUnavailable as e:
                logger.error(f"Cannot start session, keeping previous order: {e}")

        order = self.cache.get(deck_id)
        try:
            card = self._pick(order, deck_id, position)
        except FlashdeckException as e:
            logger.info(f"Review of deck {deck_id} exhausted: {e}")
            return self.end_of_deck(deck_id)

        return ActionResponse(
            card=card,
            num_cards=len(order),
            deck_id=deck_id,
            index=position,
            side=side,
            display_side=self._rng.choice(SIDES),
        )

    @staticmethod
    def end_of_deck(deck_id: int) -> ActionResponse:
        return ActionResponse(
            card=END_CARD,
            num_cards=0,
            deck_id=deck_id,
            index=0,
            side=SIDE_FROM,
            display_side=SIDE_FROM,
        )
