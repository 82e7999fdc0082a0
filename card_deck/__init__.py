"""Standard 52-card deck: construction, shuffling, sorting and partitioning."""

from .cards import (
    Card,
    CardDeckError,
    InvalidCard,
    InvalidRank,
    InvalidSuit,
    cards_to_labels,
    parse_cards,
    parse_label,
    rank,
    rank_value,
    suit,
    to_value,
)
from .deck import (
    DealError,
    Deck,
    deal,
    drop,
    drop_to_pile,
    new,
    shuffle,
    shuffled,
    size,
    sort,
    sort_by_rank,
    sort_by_suit,
)
from .models import RANKS, SUITS, Rank, Suit

__all__ = [
    "Card",
    "CardDeckError",
    "DealError",
    "Deck",
    "InvalidCard",
    "InvalidRank",
    "InvalidSuit",
    "RANKS",
    "SUITS",
    "Rank",
    "Suit",
    "cards_to_labels",
    "deal",
    "drop",
    "drop_to_pile",
    "new",
    "parse_cards",
    "parse_label",
    "rank",
    "rank_value",
    "shuffle",
    "shuffled",
    "size",
    "sort",
    "sort_by_rank",
    "sort_by_suit",
    "suit",
    "to_value",
]
