from __future__ import annotations

from typing import Iterable

from card_deck.cards import Card, parse_cards
from card_deck.deck import Deck


def cards(*labels: str) -> Deck:
    """Build a deck from compact labels, e.g. cards("TC", "2D")."""
    return parse_cards(labels)


def labels_of(deck: Iterable[Card]) -> list[str]:
    return [card.label for card in deck]
