"""
In-memory store of the review order currently being walked for each deck.
"""
import logging
from collections import OrderedDict
from threading import Lock
from typing import List, Optional

from flashdeck.schemas.card import CardResponse

logger = logging.getLogger(__name__)


DEFAULT_MAX_DECKS = 128


class ActiveDeckCache:
    """
    Maps deck id to the ordered card snapshots of its current review session.

    Entries are replaced whole under the lock, so a reader sees either the old
    order or the new one. Two restarts of the same deck racing each other end
    with whichever wrote last; one client per deck is assumed.

    The least recently used deck is evicted once `max_decks` entries are held.
    """

    def __init__(self, max_decks: int = DEFAULT_MAX_DECKS):
        if max_decks < 1:
            raise ValueError("max_decks must be at least 1")
        self.max_decks = max_decks
        self._decks: "OrderedDict[int, List[CardResponse]]" = OrderedDict()
        self._lock = Lock()

    def store(self, deck_id: int, cards: List[CardResponse]) -> None:
        """Replace the active order for a deck."""
        entry = list(cards)
        with self._lock:
            self._decks[deck_id] = entry
            self._decks.move_to_end(deck_id)
            while len(self._decks) > self.max_decks:
                evicted_id, _ = self._decks.popitem(last=False)
                logger.info(f"Evicted active deck {evicted_id} from cache")
        logger.info(f"Stored active order for deck {deck_id} ({len(entry)} cards)")

    def get(self, deck_id: int) -> Optional[List[CardResponse]]:
        """Return the active order for a deck, or None if there is none."""
        with self._lock:
            entry = self._decks.get(deck_id)
            if entry is not None:
                self._decks.move_to_end(deck_id)
            return entry

    def discard(self, deck_id: int) -> None:
        with self._lock:
            self._decks.pop(deck_id, None)

    def __contains__(self, deck_id: int) -> bool:
        with self._lock:
            return deck_id in self._decks

    def __len__(self) -> int:
        with self._lock:
            return len(self._decks)
