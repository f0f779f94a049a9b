"""
Tests for card image lookup.
"""

from monarchs.common.assets import CARD_BACK, card_asset_name, card_image_url
from monarchs.common.card import Card


def test_asset_names(cards):
    assert card_asset_name(cards("AS")) == "ace_of_spades.png"
    assert card_asset_name(cards("10H")) == "10_of_hearts.png"
    assert card_asset_name(cards("QD")) == "queen_of_diamonds.png"
    assert card_asset_name(cards("7C")) == "7_of_clubs.png"


def test_every_card_has_a_distinct_image():
    from monarchs.common.deck import standard_deck

    assert len({card_asset_name(card) for card in standard_deck()}) == 52


def test_image_url(cards):
    assert card_image_url(cards("KH"), "https://cards.example/png/") == (
        "https://cards.example/png/king_of_hearts.png"
    )


def test_missing_card_shows_the_back():
    assert card_image_url(None).endswith("/" + CARD_BACK)
    assert isinstance(card_image_url(Card.parse("2S")), str)
