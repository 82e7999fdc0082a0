from __future__ import annotations

from enum import Enum
from typing import Tuple


class Rank(str, Enum):
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "T"
    JACK = "J"
    QUEEN = "Q"
    KING = "K"
    ACE = "A"

    def __str__(self) -> str:
        return self.value


class Suit(str, Enum):
    CLUBS = "C"
    DIAMONDS = "D"
    HEARTS = "H"
    SPADES = "S"

    def __str__(self) -> str:
        return self.value


# Declaration order is generation order: weakest rank first, suits C, D, H, S.
RANKS: Tuple[Rank, ...] = tuple(Rank)
SUITS: Tuple[Suit, ...] = tuple(Suit)
