"""
Standard 52-card deck construction.

>>> len(standard_deck())
52
>>> standard_deck()[0]
Card(Suit.SPADES, Rank.ACE)
"""

from typing import List

from monarchs.common.card import Card, Rank, Suit

DECK_SIZE = 52

# Precompute the default deck, suit by suit in rank order
_default_deck = tuple(Card(suit, rank) for suit in Suit for rank in Rank)


def standard_deck() -> List[Card]:
    """
    Return a new list holding one copy of every (rank, suit) pair, unshuffled.
    """
    return list(_default_deck)


def multi_deck(num_decks: int) -> List[Card]:
    """
    Return ``num_decks`` standard decks concatenated, unshuffled.

    :param num_decks: Number of decks, at least 1
    """
    if num_decks < 1:
        raise ValueError("Number of decks must be at least 1")
    return list(_default_deck) * num_decks
