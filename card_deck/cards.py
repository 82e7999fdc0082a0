from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Tuple, Union

from .models import RANKS, Rank, Suit

RANK_VALUE = {rank: idx for idx, rank in enumerate(RANKS, start=2)}


class CardDeckError(ValueError):
    """Base class for every error raised by the deck engine."""


class InvalidRank(CardDeckError):
    pass


class InvalidSuit(CardDeckError):
    pass


class InvalidCard(CardDeckError):
    pass


def _coerce_rank(value: object) -> Rank:
    try:
        return Rank(value)
    except (ValueError, TypeError):
        raise InvalidRank(f"Invalid rank: {value!r}") from None


def _coerce_suit(value: object) -> Suit:
    try:
        return Suit(value)
    except (ValueError, TypeError):
        raise InvalidSuit(f"Invalid suit: {value!r}") from None


@dataclass(frozen=True)
class Card:
    rank: Rank
    suit: Suit

    def __post_init__(self) -> None:
        # Accept raw symbols ("T", "C") and store the enum members.
        object.__setattr__(self, "rank", _coerce_rank(self.rank))
        object.__setattr__(self, "suit", _coerce_suit(self.suit))

    @property
    def label(self) -> str:
        return f"{self.rank.value}{self.suit.value}"

    def __str__(self) -> str:
        return self.label


def rank_value(value: Union[Rank, Card, str]) -> int:
    """Numeric strength of a rank (or of a card's rank): 2..9, T=10 up to A=14."""
    if isinstance(value, Card):
        value = value.rank
    return RANK_VALUE[_coerce_rank(value)]


def to_value(card: Card) -> Tuple[int, Suit]:
    return rank_value(card), card.suit


def rank(card: Card) -> Rank:
    return card.rank


def suit(card: Card) -> Suit:
    return card.suit


def cards_to_labels(cards: Iterable[Card]) -> List[str]:
    return [card.label for card in cards]


def parse_label(label: str) -> Card:
    if len(label) != 2:
        raise InvalidCard(f"Invalid card label: {label}")
    return Card(label[0].upper(), label[1].upper())


def parse_cards(labels: Iterable[str]) -> Tuple[Card, ...]:
    return tuple(parse_label(label) for label in labels)
