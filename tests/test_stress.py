import random
from collections import Counter

from card_deck.deck import deal, drop_to_pile, new, shuffle, size, sort


def test_thousand_shuffle_and_deal_rounds_conserve_the_deck():
    rng = random.Random(1_000)
    full = Counter(new())
    rounds = 0

    for _ in range(1_000):
        deck = shuffle(new(), rng)
        dealt = []
        while size(deck) > 0:
            hand, deck = deal(deck, min(size(deck), rng.randint(1, 7)))
            dealt.extend(hand)
        assert Counter(dealt) == full
        assert sort(dealt) == new()
        rounds += 1

    assert rounds == 1_000


def test_repeated_partitioning_never_loses_cards():
    rng = random.Random(4_242)
    deck = new()
    discards = []
    while size(deck) > 0:
        positions = {rng.randrange(size(deck)) for _ in range(3)}
        pile, deck = drop_to_pile(deck, positions)
        assert pile
        discards.extend(pile)
        deck = shuffle(deck, rng)
    assert sort(discards) == new()
