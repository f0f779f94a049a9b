"""Bet spots, chip denominations and paytable constants for the Monarchs table."""

from enum import Enum
from typing import Dict, Union

from monarchs.common.card import Rank


class BetSpot(Enum):
    """The seven independently wagerable spots, valued by their wire name."""

    PLAYER = "player"
    BANKER = "banker"
    TIE = "tie"
    BAD_BEAT = "badbeat"
    PLAYER_DRAGON = "pDragon"
    BANKER_DRAGON = "bDragon"
    MONARCHS = "monarchs"

    @classmethod
    def coerce(cls, spot: Union["BetSpot", str]) -> "BetSpot":
        """
        Accept a spot or its name (wire name or enum name, any case).

        >>> BetSpot.coerce("pDragon")
        <BetSpot.PLAYER_DRAGON: 'pDragon'>
        >>> BetSpot.coerce("bad_beat")
        <BetSpot.BAD_BEAT: 'badbeat'>
        """
        if isinstance(spot, cls):
            return spot
        if isinstance(spot, str):
            wanted = spot.strip().lower()
            for member in cls:
                if wanted in (member.value.lower(), member.name.lower()):
                    return member
        raise ValueError(f"Unknown bet spot: {spot!r}")


class Side(Enum):
    """The two hands a card is dealt to."""

    PLAYER = "player"
    BANKER = "banker"


STARTING_BALANCE = 2000
CHIP_VALUES = (1, 5, 25, 100, 500, 1000)
DEFAULT_UNIT = 100

# Shoe is rebuilt before a deal once fewer cards than this remain
RESHUFFLE_THRESHOLD = 20
CARDS_PER_ROUND = 2

# Seconds, measured from the deal
SETTLE_DELAY = 0.9
REVEAL_DELAY = 1.2
RESET_DELAY = 2.5

# Player/banker spots: a winning value of 4 pays even money, a tie at 4 pushes
PUSH_VALUE = 4
MAIN_WIN_PAYOUT = 2
PUSH_PAYOUT = 1

TIE_PAYOUT = 9
SUITED_TIE_PAYOUT = 26

# Keyed by the losing card's value
BAD_BEAT_PAYOUTS: Dict[int, int] = {9: 4, 10: 9, 11: 11, 12: 16}

# Keyed by the winning margin; margins of 12 or more pay the top entry
DRAGON_PAYOUTS: Dict[int, int] = {12: 31, 11: 16, 10: 9, 9: 7, 8: 5, 7: 3}
DRAGON_MAX_MARGIN = 12

MONARCHS_SINGLE_PAYOUT = 2
MONARCHS_SUITED_PAYOUT = 6
MONARCHS_UNSUITED_PAYOUT = 3
MONARCHS_MATCHED_PAYOUTS: Dict[Rank, int] = {
    Rank.KING: 21,
    Rank.QUEEN: 16,
    Rank.JACK: 11,
}
