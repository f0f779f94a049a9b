"""
Cards, decks and shoes shared by the table.
"""

from monarchs.common.card import Card, Rank, Suit
from monarchs.common.shoe import Shoe, ShoeExhaustedError

__all__ = ["Card", "Rank", "Suit", "Shoe", "ShoeExhaustedError"]
