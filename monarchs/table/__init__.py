"""
Monarchs table implementation.

Bet spots and paytable, the wager ledger, payout resolution, and the
immutable round state machine.
"""

from monarchs.table.constants import BetSpot, Side
from monarchs.table.errors import (
    InsufficientBalanceError,
    InsufficientStakeError,
    InvalidTransitionError,
    RoundInProgressError,
    StaleRoundError,
    TableError,
)
from monarchs.table.ledger import WagerLedger
from monarchs.table.payouts import (
    Outcome,
    PAYTABLE,
    determine_outcome,
    dragon_multiplier,
    resolve,
    resolve_breakdown,
    spot_multiplier,
)
from monarchs.table.rules import TableRules
from monarchs.table.state import Round, TableStage, TableState
from monarchs.table.transitions import StateTransitionEngine

__all__ = [
    "BetSpot",
    "Side",
    "TableError",
    "InsufficientBalanceError",
    "InsufficientStakeError",
    "InvalidTransitionError",
    "RoundInProgressError",
    "StaleRoundError",
    "WagerLedger",
    "Outcome",
    "PAYTABLE",
    "determine_outcome",
    "dragon_multiplier",
    "resolve",
    "resolve_breakdown",
    "spot_multiplier",
    "TableRules",
    "Round",
    "TableStage",
    "TableState",
    "StateTransitionEngine",
]
