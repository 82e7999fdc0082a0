import pytest

from card_deck.cards import CardDeckError
from card_deck.deck import DealError, deal, new, size

from .helpers import cards, labels_of


def test_deal_defaults_to_one_card():
    hand, rest = deal(new())
    assert labels_of(hand) == ["2C"]
    assert size(rest) == 51


def test_deal_splits_in_order():
    hand, rest = deal(new(), 5)
    assert hand == cards("2C", "2D", "2H", "2S", "3C")
    assert size(rest) == 47
    assert rest[0].label == "3D"
    assert hand + rest == new()


def test_deal_whole_deck_and_nothing():
    deck = cards("AH", "KD")
    assert deal(deck, 2) == (deck, ())
    assert deal(deck, 0) == ((), deck)
    assert deal((), 0) == ((), ())


def test_deal_raises_when_deck_exhausted():
    with pytest.raises(DealError, match="Not enough cards") as excinfo:
        deal(new(), 55)
    assert excinfo.value.requested == 55
    assert excinfo.value.available == 52


def test_deal_rejects_negative_counts():
    with pytest.raises(DealError):
        deal(new(), -1)


def test_failed_deal_leaves_input_unchanged():
    deck = [*cards("AH", "KD")]
    with pytest.raises(DealError):
        deal(deck, 3)
    assert deck == [*cards("AH", "KD")]


def test_deal_error_is_catchable_as_value_error():
    assert issubclass(DealError, CardDeckError)
    with pytest.raises(ValueError):
        deal(cards("AH"), 2)
