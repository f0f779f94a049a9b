"""
Card image lookup.

Maps a card to the file name of its face image, ``<rank>_of_<suit>.png``, and
joins it onto an asset base URL. Whether the asset exists is the display
layer's concern.
"""

from typing import Optional

from monarchs.common.card import Card, Rank, Suit

DEFAULT_ASSET_BASE = "https://cdn.jsdelivr.net/gh/hayeah/playing-cards-assets/png"
CARD_BACK = "back.png"

_RANK_NAMES = {
    Rank.ACE: "ace",
    Rank.JACK: "jack",
    Rank.QUEEN: "queen",
    Rank.KING: "king",
}


def rank_name(rank: Rank) -> str:
    return _RANK_NAMES.get(rank, str(rank.value))


def suit_name(suit: Suit) -> str:
    return suit.name.lower()


def card_asset_name(card: Card) -> str:
    """
    >>> from monarchs.common.card import Card, Rank, Suit
    >>> card_asset_name(Card(Suit.SPADES, Rank.ACE))
    'ace_of_spades.png'
    >>> card_asset_name(Card(Suit.HEARTS, Rank.TEN))
    '10_of_hearts.png'
    """
    return f"{rank_name(card.rank)}_of_{suit_name(card.suit)}.png"


def card_image_url(card: Optional[Card], base_url: str = DEFAULT_ASSET_BASE) -> str:
    """URL of the face image, or of the card back when no card is present."""
    name = card_asset_name(card) if card is not None else CARD_BACK
    return f"{base_url.rstrip('/')}/{name}"
