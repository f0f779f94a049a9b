"""
Immutable state models for the Monarchs table.

`TableState` is the whole session: shoe, ledger, balance, selected chip and
the round in flight. Transition functions in `monarchs.table.transitions`
take a state and return a new one; nothing here is ever mutated.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Dict, Optional
import time
import uuid

from monarchs.common.assets import card_image_url
from monarchs.common.card import Card
from monarchs.common.shoe import Shoe
from monarchs.table.constants import BetSpot, DEFAULT_UNIT, STARTING_BALANCE
from monarchs.table.ledger import WagerLedger
from monarchs.table.payouts import Outcome, determine_outcome


class TableStage(Enum):
    """Stages of the round lifecycle."""

    IDLE = auto()
    DEALT = auto()
    REVEALED = auto()
    SETTLED = auto()


@dataclass(frozen=True)
class Round:
    """
    A round in flight: created at the deal, discarded at the reset.

    Attributes:
        round_id: Unique identifier, used to match timer events
        number: 1-based sequence number within the session
        player_card: First card drawn
        banker_card: Second card drawn
        stakes: Ledger snapshot taken at the deal
        revealed: Whether the result has been shown
        winnings: Amount credited at settlement, None before it
        breakdown: Winnings per spot, None before settlement
    """

    player_card: Card
    banker_card: Card
    stakes: WagerLedger
    round_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    number: int = 1
    revealed: bool = False
    winnings: Optional[int] = None
    breakdown: Optional[Dict[BetSpot, int]] = None

    @property
    def outcome(self) -> Outcome:
        return determine_outcome(self.player_card, self.banker_card)

    @property
    def is_settled(self) -> bool:
        return self.winnings is not None


@dataclass(frozen=True)
class TableState:
    """
    Immutable snapshot of a table session.

    Attributes:
        shoe: Cards left to draw
        id: Unique identifier for this session
        stage: Current stage of the round lifecycle
        ledger: Stakes on the layout
        balance: Player's balance
        unit: Selected chip denomination
        round: Round in flight, None while idle
        rounds_played: Rounds dealt this session
        timestamp: Time when this state was created
    """

    shoe: Shoe
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    stage: TableStage = TableStage.IDLE
    ledger: WagerLedger = field(default_factory=WagerLedger)
    balance: int = STARTING_BALANCE
    unit: int = DEFAULT_UNIT
    round: Optional[Round] = None
    rounds_played: int = 0
    timestamp: float = field(default_factory=lambda: time.time())

    @property
    def total_bet(self) -> int:
        return self.ledger.total

    @property
    def in_progress(self) -> bool:
        return self.round is not None

    @property
    def player_card(self) -> Optional[Card]:
        return self.round.player_card if self.round else None

    @property
    def banker_card(self) -> Optional[Card]:
        return self.round.banker_card if self.round else None

    @property
    def revealed(self) -> bool:
        return bool(self.round and self.round.revealed)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the table state to a dictionary suitable for serialization.

        Returns:
            Dictionary representation of the table state
        """
        current = self.round
        return {
            "id": self.id,
            "stage": self.stage.name,
            "balance": self.balance,
            "unit": self.unit,
            "bets": self.ledger.to_dict(),
            "total_bet": self.total_bet,
            "rounds_played": self.rounds_played,
            "cards_remaining": self.shoe.cards_remaining,
            "timestamp": self.timestamp,
            "round": None
            if current is None
            else {
                "round_id": current.round_id,
                "number": current.number,
                "player_card": current.player_card.code,
                "banker_card": current.banker_card.code,
                "outcome": current.outcome.value,
                "revealed": current.revealed,
                "winnings": current.winnings,
            },
        }

    def to_adapter_format(self) -> Dict[str, Any]:
        """
        Convert the table state to what a display layer renders.

        The outcome is only included once the round has been revealed.
        """
        player, banker = self.player_card, self.banker_card
        return {
            "player_card": str(player) if player else None,
            "banker_card": str(banker) if banker else None,
            "player_card_image": card_image_url(player),
            "banker_card_image": card_image_url(banker),
            "revealed": self.revealed,
            "outcome": self.round.outcome.label if self.revealed else None,
            "total_bet": self.total_bet,
            "balance": self.balance,
            "bets": self.ledger.to_dict(),
            "unit": self.unit,
        }
