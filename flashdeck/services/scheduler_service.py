"""
Review scheduler: decides the order in which a deck's cards are presented.

Cards are bucketed into weight tiers and then sorted by weight, highest first:

- Cards rated 4 ("known") that changed after the deck was last reviewed are
  forced to the front so the new state gets looked at.
- Unrated cards come next.
- If fewer than `daily_quota` cards have been weighted so far, the youngest
  remaining cards are pulled into the same tier as unrated cards.
- Everything else is weighted by its rating plus how stale it is relative to the
  youngest card in the deck.

Ties keep the "most recently updated first" order.
"""
import logging
import math
from datetime import datetime, timedelta
from typing import Dict, List, Protocol, Sequence, TypeVar

logger = logging.getLogger(__name__)


DEFAULT_DAILY_QUOTA = 9

KNOWN_BUT_DUE_WEIGHT = 1_000_000
FRONT_OF_QUEUE_WEIGHT = 100_000

KNOWN_RATING = 4
UNRATED = 0
RECENCY_STEPS = 4


class SchedulableCard(Protocol):
    id: int
    rating: int
    updated_at: datetime


CardT = TypeVar("CardT", bound=SchedulableCard)


def calculate_recency_weight(current_age: timedelta, span: timedelta) -> int:
    """
    Map a card's age onto 0..RECENCY_STEPS, relative to the deck's age span.

    Args:
        current_age: Time between the youngest card's update and this card's update
        span: Time between the youngest and the oldest card's update

    Returns:
        ceil(current_age / span * RECENCY_STEPS), or 0 when every card shares
        the same update time
    """
    if span <= timedelta(0):
        return 0
    return math.ceil(current_age * RECENCY_STEPS / span)


def calculate_weights(
    cards: Sequence[SchedulableCard],
    deck_seen_at: datetime,
    daily_quota: int = DEFAULT_DAILY_QUOTA
) -> Dict[int, int]:
    """
    Assign a weight to every card id.

    `cards` must already be sorted youngest first. A card keeps the first
    weight it is given.
    """
    weights: Dict[int, int] = {}

    # 1. Known cards updated after the deck was last seen, 2. unrated cards
    for card in cards:
        if card.rating == KNOWN_RATING and deck_seen_at < card.updated_at:
            weights[card.id] = KNOWN_BUT_DUE_WEIGHT
        elif card.rating == UNRATED:
            weights[card.id] = FRONT_OF_QUEUE_WEIGHT

    youngest = cards[0].updated_at
    span = youngest - cards[-1].updated_at

    for card in cards:
        if card.id in weights:
            continue

        # 3. Fill the front tier with the youngest cards up to the daily quota
        if len(weights) < daily_quota:
            weights[card.id] = FRONT_OF_QUEUE_WEIGHT
            continue

        # 4. Rating plus staleness
        current_age = youngest - card.updated_at
        weights[card.id] = card.rating + calculate_recency_weight(current_age, span)

    return weights


def compute_order(
    cards: Sequence[CardT],
    deck_seen_at: datetime,
    daily_quota: int = DEFAULT_DAILY_QUOTA
) -> List[CardT]:
    """
    Compute the review order for a deck.

    Args:
        cards: All cards of the deck
        deck_seen_at: The deck's `seen_at` from before the current session started
        daily_quota: Minimum number of cards placed in the front tier when available

    Returns:
        A permutation of `cards`, highest priority first
    """
    if not cards:
        return []

    # Youngest first; sorted() is stable so equal timestamps keep input order
    by_recency = sorted(cards, key=lambda card: card.updated_at, reverse=True)

    weights = calculate_weights(by_recency, deck_seen_at, daily_quota)

    ordered = sorted(by_recency, key=lambda card: weights[card.id], reverse=True)

    logger.debug(
        f"Scheduled {len(ordered)} cards: "
        f"{sum(1 for w in weights.values() if w == KNOWN_BUT_DUE_WEIGHT)} due, "
        f"{sum(1 for w in weights.values() if w == FRONT_OF_QUEUE_WEIGHT)} front of queue"
    )

    return ordered
