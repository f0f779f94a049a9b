"""
Exact paytable analysis.

The first two cards drawn from a full D-deck shoe form a pair of distinct
positions, so the probability of any (player card, banker card) identity pair
is known in closed form. Multiplying that matrix by each spot's multiplier
matrix gives the exact expected return per unit staked.
"""

from typing import Dict, Optional

import numpy as np
import pandas as pd

from monarchs.common.deck import DECK_SIZE, standard_deck
from monarchs.common.shoe import DEFAULT_NUM_DECKS
from monarchs.table.constants import BetSpot
from monarchs.table.payouts import spot_multiplier


def pair_probabilities(num_decks: int = DEFAULT_NUM_DECKS) -> np.ndarray:
    """
    Probability of each (player, banker) card identity pair on a fresh shoe.

    Rows index the player card and columns the banker card, both in
    `standard_deck` order. The matrix sums to 1.

    Args:
        num_decks: Number of decks in the shoe

    Returns:
        52x52 array of probabilities
    """
    if num_decks < 1:
        raise ValueError("Number of decks must be at least 1")
    shoe_size = DECK_SIZE * num_decks
    probs = np.full((DECK_SIZE, DECK_SIZE), float(num_decks * num_decks))
    # Same identity twice needs two different copies
    np.fill_diagonal(probs, float(num_decks * (num_decks - 1)))
    return probs / (shoe_size * (shoe_size - 1))


def multiplier_matrix(spot: BetSpot) -> np.ndarray:
    """52x52 array of the multiplier ``spot`` pays for each card pair."""
    deck = standard_deck()
    return np.array(
        [[spot_multiplier(spot, player, banker) for banker in deck] for player in deck],
        dtype=float,
    )


def _spot_stats(spot: BetSpot, probs: np.ndarray) -> Dict[str, float]:
    multipliers = multiplier_matrix(spot)
    expected = float((probs * multipliers).sum())
    return {
        "spot": spot.value,
        "expected_return": expected,
        "house_edge": 1.0 - expected,
        "hit_frequency": float(probs[multipliers > 0].sum()),
        "max_multiplier": int(multipliers.max()),
    }


def paytable_report(num_decks: int = DEFAULT_NUM_DECKS, probs: Optional[np.ndarray] = None) -> pd.DataFrame:
    """
    Expected return of one unit on each spot.

    ``expected_return`` counts the stake, so 1.0 is break-even and
    ``house_edge`` is ``1 - expected_return``.

    Args:
        num_decks: Number of decks in the shoe
        probs: Pair probabilities to use instead of a fresh shoe's

    Returns:
        DataFrame indexed by spot name
    """
    if probs is None:
        probs = pair_probabilities(num_decks)
    rows = [_spot_stats(spot, probs) for spot in BetSpot]
    return pd.DataFrame(rows).set_index("spot")
