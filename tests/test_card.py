import pytest

from monarchs.common.card import Card, Rank, Suit


def test_card_creation():
    card = Card(Suit.HEARTS, Rank.ACE)
    assert card.suit == Suit.HEARTS
    assert card.rank == Rank.ACE


def test_card_values_run_ace_low_to_king_high():
    values = [Card(Suit.SPADES, rank).value for rank in Rank]
    assert values == list(range(1, 14))


def test_card_equality_and_hash():
    card1 = Card(Suit.HEARTS, Rank.ACE)
    card2 = Card(Suit.HEARTS, Rank.ACE)
    card3 = Card(Suit.SPADES, Rank.ACE)

    assert card1 == card2
    assert card1 != card3
    assert len({card1, card2, card3}) == 2


def test_card_is_immutable():
    card = Card(Suit.CLUBS, Rank.NINE)
    with pytest.raises(AttributeError):
        card.rank = Rank.TEN


def test_card_str():
    assert str(Card(Suit.HEARTS, Rank.KING)) == "K of ♥"
    assert str(Card(Suit.SPADES, Rank.TEN)) == "10 of ♠"


def test_card_repr():
    assert repr(Card(Suit.DIAMONDS, Rank.QUEEN)) == "Card(Suit.DIAMONDS, Rank.QUEEN)"


def test_card_code():
    assert Card(Suit.CLUBS, Rank.JACK).code == "JC"
    assert Card(Suit.HEARTS, Rank.TEN).code == "10H"


@pytest.mark.parametrize(
    "code, suit, rank",
    [
        ("KS", Suit.SPADES, Rank.KING),
        ("10h", Suit.HEARTS, Rank.TEN),
        ("ad", Suit.DIAMONDS, Rank.ACE),
        ("4C", Suit.CLUBS, Rank.FOUR),
    ],
)
def test_card_parse(code, suit, rank):
    assert Card.parse(code) == Card(suit, rank)


@pytest.mark.parametrize("code", ["", "K", "KX", "1S", "11H"])
def test_card_parse_rejects_bad_codes(code):
    with pytest.raises(ValueError):
        Card.parse(code)


def test_face_cards():
    faces = [rank for rank in Rank if Card(Suit.SPADES, rank).is_face]
    assert faces == [Rank.JACK, Rank.QUEEN, Rank.KING]


def test_invalid_suit_and_rank():
    with pytest.raises(TypeError):
        Card("Hearts", Rank.ACE)
    with pytest.raises(TypeError):
        Card(Suit.HEARTS, 1)


def test_rank_from_str():
    assert Rank.from_str("q") is Rank.QUEEN
    assert Rank.from_str("7") is Rank.SEVEN
    with pytest.raises(ValueError):
        Rank.from_str("Z")
