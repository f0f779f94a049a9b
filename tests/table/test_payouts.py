"""
Tests for the Monarchs paytable resolver.
"""

import pytest

from monarchs.table.constants import BetSpot
from monarchs.table.ledger import WagerLedger
from monarchs.table.payouts import (
    PAYTABLE,
    Outcome,
    determine_outcome,
    dragon_multiplier,
    resolve,
    resolve_breakdown,
    spot_multiplier,
)


def test_paytable_covers_every_spot():
    assert set(PAYTABLE) == set(BetSpot)


class TestOutcome:
    def test_higher_value_wins(self, cards):
        assert determine_outcome(*cards("7C", "3H")) is Outcome.PLAYER_WIN
        assert determine_outcome(*cards("2D", "10S")) is Outcome.BANKER_WIN

    def test_suits_never_decide(self, cards):
        assert determine_outcome(*cards("KS", "KH")) is Outcome.TIE

    def test_labels(self):
        assert Outcome.PLAYER_WIN.label == "PLAYER WINS"
        assert Outcome.BANKER_WIN.label == "BANKER WINS"
        assert Outcome.TIE.label == "TIE"


class TestExamples:
    def test_player_win(self, cards):
        ledger = WagerLedger.from_amounts(player=100)
        assert resolve(*cards("7C", "3H"), ledger) == 200

    def test_push_on_four_tie(self, cards):
        ledger = WagerLedger.from_amounts(player=100)
        assert resolve(*cards("4S", "4D"), ledger) == 100

    def test_suited_tie(self, cards):
        ledger = WagerLedger.from_amounts(tie=50)
        assert resolve(*cards("8S", "8S"), ledger) == 1300

    def test_bad_beat_and_dragon(self, cards):
        ledger = WagerLedger.from_amounts(badbeat=10, bDragon=10)
        # Losing 2 pays nothing on bad beat; margin 8 pays 5x on the dragon
        assert resolve(*cards("2C", "10D"), ledger) == 50

    def test_unsuited_kings(self, cards):
        ledger = WagerLedger.from_amounts(monarchs=10)
        assert resolve(*cards("KS", "KH"), ledger) == 30

    def test_combined_spots(self, cards):
        ledger = WagerLedger.from_amounts(tie=10, monarchs=10, player=10)
        assert resolve(*cards("KS", "KH"), ledger) == 120


class TestMainBets:
    @pytest.mark.parametrize(
        "player,banker,player_mult,banker_mult",
        [
            ("7C", "3H", 2, 0),
            ("3H", "7C", 0, 2),
            ("4C", "2H", 1, 0),
            ("2H", "4C", 0, 1),
            ("4C", "4H", 1, 1),
            ("9C", "9H", 0, 0),
        ],
    )
    def test_multipliers(self, cards, player, banker, player_mult, banker_mult):
        p, b = cards(player, banker)
        assert spot_multiplier(BetSpot.PLAYER, p, b) == player_mult
        assert spot_multiplier(BetSpot.BANKER, p, b) == banker_mult


class TestTie:
    def test_unsuited_tie(self, cards):
        assert spot_multiplier("tie", *cards("5C", "5H")) == 9

    def test_suited_tie(self, cards):
        assert spot_multiplier("tie", *cards("5C", "5C")) == 26

    def test_no_tie(self, cards):
        assert spot_multiplier("tie", *cards("5C", "6C")) == 0


class TestBadBeat:
    @pytest.mark.parametrize(
        "loser,multiplier", [("8H", 0), ("9H", 4), ("10H", 9), ("JH", 11), ("QH", 16)]
    )
    def test_losing_card_value(self, cards, loser, multiplier):
        assert spot_multiplier("badbeat", *cards("KS", loser)) == multiplier
        assert spot_multiplier("badbeat", *cards(loser, "KS")) == multiplier

    def test_tie_pays_nothing(self, cards):
        assert spot_multiplier("badbeat", *cards("QS", "QH")) == 0


class TestDragon:
    @pytest.mark.parametrize(
        "margin,multiplier",
        [(12, 31), (11, 16), (10, 9), (9, 7), (8, 5), (7, 3), (6, 0), (1, 0), (0, 0)],
    )
    def test_margin_table(self, margin, multiplier):
        assert dragon_multiplier(margin) == multiplier

    def test_only_the_winning_side_pays(self, cards):
        p, b = cards("KS", "AH")
        assert spot_multiplier(BetSpot.PLAYER_DRAGON, p, b) == 31
        assert spot_multiplier(BetSpot.BANKER_DRAGON, p, b) == 0
        assert spot_multiplier(BetSpot.BANKER_DRAGON, b, p) == 31

    def test_tie_pays_nothing(self, cards):
        p, b = cards("7S", "7H")
        assert spot_multiplier(BetSpot.PLAYER_DRAGON, p, b) == 0
        assert spot_multiplier(BetSpot.BANKER_DRAGON, p, b) == 0


class TestMonarchs:
    @pytest.mark.parametrize(
        "player,banker,multiplier",
        [
            ("KS", "KS", 21),
            ("QH", "QH", 16),
            ("JD", "JD", 11),
            ("QS", "KS", 6),
            ("JC", "KD", 3),
            ("KS", "KH", 3),
            ("KS", "2H", 2),
            ("AH", "JD", 2),
            ("10S", "9S", 0),
        ],
    )
    def test_multipliers(self, cards, player, banker, multiplier):
        assert spot_multiplier(BetSpot.MONARCHS, *cards(player, banker)) == multiplier


class TestBreakdown:
    def test_unstaked_spots_resolve_to_zero(self, cards):
        breakdown = resolve_breakdown(*cards("KS", "KS"), WagerLedger.from_amounts(banker=5))
        assert set(breakdown) == set(BetSpot)
        assert breakdown[BetSpot.TIE] == 0
        assert breakdown[BetSpot.MONARCHS] == 0
        assert breakdown[BetSpot.BANKER] == 0

    def test_total_is_sum_of_breakdown(self, cards):
        ledger = WagerLedger.from_amounts(player=10, tie=5, pDragon=5, monarchs=5)
        p, b = cards("KH", "AH")
        breakdown = resolve_breakdown(p, b, ledger)
        assert breakdown[BetSpot.PLAYER] == 20
        assert breakdown[BetSpot.PLAYER_DRAGON] == 155
        assert breakdown[BetSpot.MONARCHS] == 10
        assert resolve(p, b, ledger) == sum(breakdown.values()) == 185

    def test_resolution_is_pure(self, cards):
        ledger = WagerLedger.from_amounts(player=10, badbeat=10)
        before = dict(ledger.stakes)
        p, b = cards("KD", "QC")
        first = resolve(p, b, ledger)
        assert resolve(p, b, ledger) == first
        assert ledger.stakes == before

    def test_empty_ledger_wins_nothing(self, cards):
        assert resolve(*cards("KS", "KS"), WagerLedger()) == 0
