"""
Immutable multi-deck shoe.

A shoe is an ordered sequence of cards built from one or more standard decks
and shuffled once at construction. Drawing never mutates a shoe: it returns
the drawn cards together with a new, shorter shoe.

>>> import random
>>> shoe = Shoe.build(num_decks=2, rng=random.Random(7))
>>> len(shoe)
104
>>> cards, rest = shoe.draw(2)
>>> len(cards), len(rest)
(2, 102)
"""

import logging
import random
from dataclasses import dataclass
from typing import Optional, Tuple

from monarchs.common.card import Card
from monarchs.common.deck import DECK_SIZE, multi_deck

logger = logging.getLogger(__name__)

DEFAULT_NUM_DECKS = 6


class ShoeExhaustedError(Exception):
    """Raised when more cards are drawn than the shoe holds."""


@dataclass(frozen=True)
class Shoe:
    """
    Ordered, depleting sequence of cards.

    Attributes:
        cards: Remaining cards, next card first
        num_decks: Number of decks the shoe was built from
    """

    cards: Tuple[Card, ...]
    num_decks: int = DEFAULT_NUM_DECKS

    @classmethod
    def build(
        cls, num_decks: int = DEFAULT_NUM_DECKS, rng: Optional[random.Random] = None
    ) -> "Shoe":
        """
        Build a freshly shuffled shoe of ``num_decks`` standard decks.

        The shuffle is ``Random.shuffle``, a Fisher-Yates pass from the end
        using an unbiased index generator, so every permutation is equally
        likely.

        :param num_decks: Number of decks to combine (default is 6)
        :param rng: Random source; the module-level generator when omitted
        """
        cards = multi_deck(num_decks)
        (rng or random).shuffle(cards)
        logger.debug("Built shoe of %d decks (%d cards)", num_decks, len(cards))
        return cls(cards=tuple(cards), num_decks=num_decks)

    def draw(self, num_cards: int = 2) -> Tuple[Tuple[Card, ...], "Shoe"]:
        """
        Remove the first ``num_cards`` cards in their current order.

        :param num_cards: Number of cards to draw (default is 2)
        :return: Tuple of (drawn cards, remaining shoe)
        :raises ShoeExhaustedError: If fewer than ``num_cards`` cards remain
        """
        if num_cards < 1:
            raise ValueError("Number of cards to draw must be at least 1")
        if len(self.cards) < num_cards:
            raise ShoeExhaustedError(
                f"Cannot draw {num_cards} cards from a shoe with {len(self.cards)}"
            )
        drawn = self.cards[:num_cards]
        return drawn, Shoe(cards=self.cards[num_cards:], num_decks=self.num_decks)

    def needs_rebuild(self, threshold: int) -> bool:
        """Return whether fewer than ``threshold`` cards remain."""
        return len(self.cards) < threshold

    @property
    def total_cards(self) -> int:
        """Size of the shoe when full."""
        return DECK_SIZE * self.num_decks

    @property
    def cards_remaining(self) -> int:
        return len(self.cards)

    def __len__(self) -> int:
        return len(self.cards)

    def __str__(self) -> str:
        return f"Shoe with {len(self.cards)} cards remaining"

    def __repr__(self) -> str:
        return f"Shoe(num_decks={self.num_decks}, cards_remaining={len(self.cards)})"
