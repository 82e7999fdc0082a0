from __future__ import annotations

import argparse
import logging
import random
import sys
from typing import List, Optional

from . import deck as decks
from .cards import cards_to_labels

LOGGER = logging.getLogger("card_deck")

_SORTERS = {
    "rank": decks.sort_by_rank,
    "suit": decks.sort_by_suit,
    "full": decks.sort,
}


def _render(cards: decks.Deck) -> str:
    return " ".join(cards_to_labels(cards)) or "-"


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Build, shuffle, sort and deal a 52-card deck")
    parser.add_argument("--shuffle", action="store_true", help="Shuffle the deck before anything else")
    parser.add_argument("--seed", type=int, default=None, help="Seed for a reproducible shuffle")
    parser.add_argument("--sort", choices=sorted(_SORTERS), default=None)
    parser.add_argument("--drop", type=int, nargs="+", default=[], metavar="POS", help="Zero-based positions to discard")
    parser.add_argument("--deal", type=int, default=None, metavar="N", help="Deal N cards and print both sides")
    parser.add_argument("--log-level", default="WARNING")
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.WARNING), format="%(message)s")

    cards = decks.new()
    if args.shuffle or args.seed is not None:
        rng = random.Random(args.seed) if args.seed is not None else None
        cards = decks.shuffle(cards, rng)
        LOGGER.info("Shuffled deck (seed=%s)", args.seed)
    if args.sort:
        cards = _SORTERS[args.sort](cards)
    if args.drop:
        cards = decks.drop(cards, args.drop)
        LOGGER.info("Dropped positions %s, %d cards left", sorted(set(args.drop)), decks.size(cards))

    if args.deal is None:
        print(_render(cards))
        return 0

    try:
        hand, remaining = decks.deal(cards, args.deal)
    except decks.DealError as exc:
        LOGGER.error("%s", exc)
        return 1
    print(_render(hand))
    print(_render(remaining))
    return 0


if __name__ == "__main__":
    sys.exit(main())
