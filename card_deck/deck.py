from __future__ import annotations

import logging
import random
from typing import Iterable, Optional, Sequence, Tuple

from .cards import Card, CardDeckError, rank_value
from .models import RANKS, SUITS

# Every operation here takes a deck and hands back a new tuple. Nothing mutates
# the caller's sequence, so decks can be shared freely between callers.

LOGGER = logging.getLogger("card_deck")

Deck = Tuple[Card, ...]

_FULL_DECK: Deck = tuple(Card(rank, suit) for rank in RANKS for suit in SUITS)


class DealError(CardDeckError):
    """Raised when a deal asks for more cards than the deck holds."""

    def __init__(self, requested: int, available: int) -> None:
        super().__init__(f"Not enough cards left in deck: requested {requested}, have {available}")
        self.requested = requested
        self.available = available


def new() -> Deck:
    """Return the canonical 52-card deck: 2C, 2D, 2H, 2S, 3C, ... AS."""
    return _FULL_DECK


def shuffle(deck: Sequence[Card], rng: Optional[random.Random] = None) -> Deck:
    """Return a uniformly shuffled copy of ``deck``.

    ``rng`` lets callers pass a seeded ``random.Random`` for reproducible
    orderings; otherwise the module-level generator is used.
    """
    cards = list(deck)
    generator = rng if rng is not None else random
    generator.shuffle(cards)
    return tuple(cards)


def shuffled(rng: Optional[random.Random] = None) -> Deck:
    return shuffle(new(), rng)


def size(deck: Sequence[Card]) -> int:
    return len(deck)


def sort_by_rank(deck: Iterable[Card]) -> Deck:
    return tuple(sorted(deck, key=rank_value))


def sort_by_suit(deck: Iterable[Card]) -> Deck:
    return tuple(sorted(deck, key=lambda card: card.suit.value))


def sort(deck: Iterable[Card]) -> Deck:
    """Order by rank value, ties broken by suit (C < D < H < S).

    Both passes are stable, so sorting by suit first and rank second leaves
    suit as the secondary key.
    """
    return sort_by_rank(sort_by_suit(deck))


def deal(deck: Sequence[Card], count: int = 1) -> Tuple[Deck, Deck]:
    """Split ``deck`` into the top ``count`` cards and the remainder."""
    available = len(deck)
    if count < 0 or count > available:
        LOGGER.debug("Refusing to deal %d cards from a deck of %d", count, available)
        raise DealError(count, available)
    cards = tuple(deck)
    return cards[:count], cards[count:]


def drop(deck: Iterable[Card], positions: Iterable[int]) -> Deck:
    """Remove the cards at the given zero-based positions.

    Positions outside the deck are ignored.
    """
    _, remaining = drop_to_pile(deck, positions)
    return remaining


def drop_to_pile(deck: Iterable[Card], positions: Iterable[int]) -> Tuple[Deck, Deck]:
    """Partition ``deck`` into (pile, rest) by position membership.

    The pile holds the cards whose index is in ``positions``; both sides keep
    the original relative order.
    """
    selected = set(positions)
    pile = []
    rest = []
    for idx, card in enumerate(deck):
        if idx in selected:
            pile.append(card)
        else:
            rest.append(card)
    return tuple(pile), tuple(rest)
