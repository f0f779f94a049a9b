"""
Payout resolution for the Monarchs table.

Every bet spot is resolved independently from the two dealt cards, by the
rule registered for it in `PAYTABLE`. A rule returns the multiplier applied to
that spot's stake; the total credited to the balance is the sum over spots.
Multipliers already include the stake: a push pays 1x and nothing else is
returned.

The player/banker and player-dragon/banker-dragon spots mirror each other, so
each pair shares one rule parameterised by `Side`.
"""

from dataclasses import dataclass
from enum import Enum
from functools import partial
from typing import Callable, Dict, Optional

from monarchs.common.card import Card
from monarchs.table.constants import (
    BAD_BEAT_PAYOUTS,
    BetSpot,
    DRAGON_MAX_MARGIN,
    DRAGON_PAYOUTS,
    MAIN_WIN_PAYOUT,
    MONARCHS_MATCHED_PAYOUTS,
    MONARCHS_SINGLE_PAYOUT,
    MONARCHS_SUITED_PAYOUT,
    MONARCHS_UNSUITED_PAYOUT,
    PUSH_PAYOUT,
    PUSH_VALUE,
    Side,
    SUITED_TIE_PAYOUT,
    TIE_PAYOUT,
)
from monarchs.table.ledger import WagerLedger


class Outcome(Enum):
    """Possible outcomes of a round."""

    PLAYER_WIN = "player_win"
    BANKER_WIN = "banker_win"
    TIE = "tie"

    @property
    def winner(self) -> Optional[Side]:
        if self is Outcome.PLAYER_WIN:
            return Side.PLAYER
        if self is Outcome.BANKER_WIN:
            return Side.BANKER
        return None

    @property
    def label(self) -> str:
        if self is Outcome.TIE:
            return "TIE"
        return f"{self.winner.value.upper()} WINS"


def determine_outcome(player: Card, banker: Card) -> Outcome:
    """
    Compare two cards by value; suits never decide.

    Args:
        player: Card dealt to the player
        banker: Card dealt to the banker

    Returns:
        Outcome enum value
    """
    if player.value > banker.value:
        return Outcome.PLAYER_WIN
    if banker.value > player.value:
        return Outcome.BANKER_WIN
    return Outcome.TIE


@dataclass(frozen=True)
class Showdown:
    """The two dealt cards and everything the rules derive from them."""

    player: Card
    banker: Card

    @property
    def outcome(self) -> Outcome:
        return determine_outcome(self.player, self.banker)

    def card(self, side: Side) -> Card:
        return self.player if side is Side.PLAYER else self.banker

    def opponent(self, side: Side) -> Card:
        return self.banker if side is Side.PLAYER else self.player

    @property
    def margin(self) -> int:
        return abs(self.player.value - self.banker.value)

    @property
    def suited(self) -> bool:
        return self.player.suit == self.banker.suit


MultiplierRule = Callable[[Showdown], int]


def dragon_multiplier(margin: int) -> int:
    """
    Dragon bonus multiplier for a winning margin.

    >>> dragon_multiplier(12), dragon_multiplier(8), dragon_multiplier(6)
    (31, 5, 0)
    """
    return DRAGON_PAYOUTS.get(min(margin, DRAGON_MAX_MARGIN), 0)


def _main_multiplier(side: Side, showdown: Showdown) -> int:
    value = showdown.card(side).value
    outcome = showdown.outcome
    if outcome.winner is side:
        return PUSH_PAYOUT if value == PUSH_VALUE else MAIN_WIN_PAYOUT
    if outcome is Outcome.TIE and value == PUSH_VALUE:
        return PUSH_PAYOUT
    return 0


def _tie_multiplier(showdown: Showdown) -> int:
    if showdown.outcome is not Outcome.TIE:
        return 0
    return SUITED_TIE_PAYOUT if showdown.suited else TIE_PAYOUT


def _bad_beat_multiplier(showdown: Showdown) -> int:
    winner = showdown.outcome.winner
    if winner is None:
        return 0
    return BAD_BEAT_PAYOUTS.get(showdown.opponent(winner).value, 0)


def _dragon_bet_multiplier(side: Side, showdown: Showdown) -> int:
    if showdown.outcome.winner is not side:
        return 0
    return dragon_multiplier(showdown.card(side).value - showdown.opponent(side).value)


def _monarchs_multiplier(showdown: Showdown) -> int:
    player, banker = showdown.player, showdown.banker
    if not (player.is_face or banker.is_face):
        return 0
    if not (player.is_face and banker.is_face):
        return MONARCHS_SINGLE_PAYOUT
    if showdown.suited and player.rank == banker.rank:
        return MONARCHS_MATCHED_PAYOUTS[player.rank]
    return MONARCHS_SUITED_PAYOUT if showdown.suited else MONARCHS_UNSUITED_PAYOUT


PAYTABLE: Dict[BetSpot, MultiplierRule] = {
    BetSpot.PLAYER: partial(_main_multiplier, Side.PLAYER),
    BetSpot.BANKER: partial(_main_multiplier, Side.BANKER),
    BetSpot.TIE: _tie_multiplier,
    BetSpot.BAD_BEAT: _bad_beat_multiplier,
    BetSpot.PLAYER_DRAGON: partial(_dragon_bet_multiplier, Side.PLAYER),
    BetSpot.BANKER_DRAGON: partial(_dragon_bet_multiplier, Side.BANKER),
    BetSpot.MONARCHS: _monarchs_multiplier,
}


def spot_multiplier(spot: BetSpot, player: Card, banker: Card) -> int:
    """Multiplier paid on ``spot`` for this pair of cards."""
    return PAYTABLE[BetSpot.coerce(spot)](Showdown(player, banker))


def resolve_breakdown(player: Card, banker: Card, ledger: WagerLedger) -> Dict[BetSpot, int]:
    """
    Winnings per spot. Spots without a stake resolve to 0 unevaluated.

    Args:
        player: Card dealt to the player
        banker: Card dealt to the banker
        ledger: Stakes captured at deal time

    Returns:
        Dictionary mapping every bet spot to its winnings
    """
    showdown = Showdown(player, banker)
    return {
        spot: ledger[spot] * PAYTABLE[spot](showdown) if ledger[spot] else 0
        for spot in BetSpot
    }


def resolve(player: Card, banker: Card, ledger: WagerLedger) -> int:
    """
    Total winnings for a round.

    Pure: the result depends only on the arguments, and nothing is mutated.

    >>> from monarchs.common.card import Rank, Suit
    >>> resolve(Card(Suit.CLUBS, Rank.SEVEN), Card(Suit.HEARTS, Rank.THREE),
    ...         WagerLedger.from_amounts(player=100))
    200
    """
    return sum(resolve_breakdown(player, banker, ledger).values())
