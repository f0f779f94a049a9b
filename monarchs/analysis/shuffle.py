"""
Shuffle uniformity check.

Builds many shoes and counts which card identity lands at a fixed position.
Under a uniform shuffle every identity is equally likely there, which a
chi-square goodness-of-fit test checks.
"""

import random
from dataclasses import dataclass
from typing import Optional

import numpy as np
import scipy.stats as stats

from monarchs.common.deck import DECK_SIZE, standard_deck
from monarchs.common.shoe import Shoe

_CARD_INDEX = {card: i for i, card in enumerate(standard_deck())}


@dataclass
class ShuffleCheck:
    """
    Result of a uniformity check.

    Attributes:
        counts: How often each identity (standard deck order) was seen
        statistic: Chi-square statistic
        p_value: Probability of a statistic at least this large if uniform
    """

    counts: np.ndarray
    statistic: float
    p_value: float

    def is_uniform(self, alpha: float = 0.001) -> bool:
        return self.p_value >= alpha


def position_counts(
    num_trials: int,
    num_decks: int = 1,
    position: int = 0,
    rng: Optional[random.Random] = None,
) -> np.ndarray:
    """
    Count card identities seen at ``position`` over ``num_trials`` fresh shoes.

    Args:
        num_trials: Number of shoes to build
        num_decks: Decks per shoe
        position: Index into the shoe to observe
        rng: Random source passed to `Shoe.build`

    Returns:
        Array of 52 counts summing to ``num_trials``
    """
    if not 0 <= position < DECK_SIZE * num_decks:
        raise ValueError(f"Position {position} is outside the shoe")
    counts = np.zeros(DECK_SIZE, dtype=int)
    for _ in range(num_trials):
        shoe = Shoe.build(num_decks, rng)
        counts[_CARD_INDEX[shoe.cards[position]]] += 1
    return counts


def shuffle_uniformity(
    num_trials: int = 5200,
    num_decks: int = 1,
    position: int = 0,
    rng: Optional[random.Random] = None,
) -> ShuffleCheck:
    """
    Chi-square test of the identity distribution at one shoe position.

    Args:
        num_trials: Number of shoes to build; at least 5 per identity
        num_decks: Decks per shoe
        position: Index into the shoe to observe
        rng: Random source passed to `Shoe.build`
    """
    if num_trials < 5 * DECK_SIZE:
        raise ValueError("Need at least 5 expected observations per card")
    counts = position_counts(num_trials, num_decks, position, rng)
    statistic, p_value = stats.chisquare(counts)
    return ShuffleCheck(counts=counts, statistic=float(statistic), p_value=float(p_value))
