"""
State transition functions for the Monarchs table.

This module provides pure functions for moving a `TableState` through the
round lifecycle, without modifying the original state objects:

    IDLE --deal--> DEALT --reveal--> REVEALED --settle--> SETTLED --reset--> IDLE

Settlement may also happen straight from DEALT, and a reveal that arrives
after settlement only marks the round as revealed. Every failed transition
raises before anything is built, so the caller keeps its previous snapshot
untouched. Events are emitted on the shared `EventBus` after each successful
transition.
"""

import logging
import random
from dataclasses import replace
from typing import Optional, Union

from monarchs.common.shoe import Shoe
from monarchs.events import EventBus, TableEventType
from monarchs.table.constants import BetSpot, CARDS_PER_ROUND
from monarchs.table.errors import (
    InsufficientBalanceError,
    InsufficientStakeError,
    InvalidTransitionError,
    RoundInProgressError,
    StaleRoundError,
)
from monarchs.table.payouts import resolve_breakdown
from monarchs.table.rules import TableRules
from monarchs.table.state import Round, TableStage, TableState

logger = logging.getLogger(__name__)

_DEFAULT_RULES = TableRules()


class StateTransitionEngine:
    """
    Pure functions for state transitions at the table.

    Each method takes a state and returns a new state, without modifying the
    original.
    """

    @staticmethod
    def new_table(
        rules: TableRules = _DEFAULT_RULES, rng: Optional[random.Random] = None
    ) -> TableState:
        """
        Create a fresh session: full shoe, empty ledger, starting balance.

        Args:
            rules: Table configuration
            rng: Random source for the shuffle

        Returns:
            New idle table state
        """
        return TableState(
            shoe=Shoe.build(rules.num_decks, rng),
            balance=rules.starting_balance,
            unit=rules.default_unit,
        )

    @staticmethod
    def set_unit(
        state: TableState, unit: int, rules: TableRules = _DEFAULT_RULES
    ) -> TableState:
        """
        Select the chip denomination added by each placement.

        Args:
            state: Current table state
            unit: One of the table's chip values

        Returns:
            New table state with the unit selected
        """
        if unit not in rules.chip_values:
            raise ValueError(f"Unit {unit} is not one of {rules.chip_values}")

        new_state = replace(state, unit=unit)

        EventBus.get_instance().emit(
            TableEventType.UNIT_CHANGED,
            {"game_id": state.id, "unit": unit, "timestamp": new_state.timestamp},
        )

        return new_state

    @staticmethod
    def place_bet(
        state: TableState, spot: Union[BetSpot, str], amount: Optional[int] = None
    ) -> TableState:
        """
        Add chips to a bet spot.

        The stake is not checked against the balance here; the deal is.

        Args:
            state: Current table state
            spot: Spot to bet on
            amount: Amount to add; the selected unit when omitted

        Returns:
            New table state with the stake added
        """
        if state.in_progress:
            raise RoundInProgressError("Bets are locked while a round is in progress")

        spot = BetSpot.coerce(spot)
        amount = state.unit if amount is None else amount
        new_state = replace(state, ledger=state.ledger.place(spot, amount))

        EventBus.get_instance().emit(
            TableEventType.BET_PLACED,
            {
                "game_id": state.id,
                "spot": spot.value,
                "amount": amount,
                "spot_total": new_state.ledger[spot],
                "total_bet": new_state.total_bet,
                "timestamp": new_state.timestamp,
            },
        )

        return new_state

    @staticmethod
    def clear_bets(state: TableState) -> TableState:
        """Remove every stake from the layout."""
        if state.in_progress:
            raise RoundInProgressError("Bets are locked while a round is in progress")

        new_state = replace(state, ledger=state.ledger.clear())

        EventBus.get_instance().emit(
            TableEventType.BETS_CLEARED,
            {"game_id": state.id, "timestamp": new_state.timestamp},
        )

        return new_state

    @staticmethod
    def deal(
        state: TableState,
        rules: TableRules = _DEFAULT_RULES,
        rng: Optional[random.Random] = None,
    ) -> TableState:
        """
        Start a round: debit the stake and draw the player and banker cards.

        The shoe is rebuilt first when it holds fewer cards than the
        reshuffle threshold.

        Args:
            state: Current table state, which must be idle
            rules: Table configuration
            rng: Random source used if the shoe is rebuilt

        Returns:
            New table state in the DEALT stage

        Raises:
            RoundInProgressError: If a round is already in flight
            InsufficientStakeError: If nothing is staked
            InsufficientBalanceError: If the stake exceeds the balance
        """
        if state.in_progress:
            raise RoundInProgressError("A round is already in progress")

        total_stake = state.total_bet
        if total_stake == 0:
            raise InsufficientStakeError("Place a bet first")
        if total_stake > state.balance:
            raise InsufficientBalanceError(total_stake, state.balance)

        shoe = state.shoe
        rebuilt = shoe.needs_rebuild(rules.reshuffle_threshold)
        if rebuilt:
            logger.info(
                "Shoe down to %d cards, rebuilding %d decks",
                len(shoe),
                rules.num_decks,
            )
            shoe = Shoe.build(rules.num_decks, rng)

        (player_card, banker_card), shoe = shoe.draw(CARDS_PER_ROUND)

        new_round = Round(
            player_card=player_card,
            banker_card=banker_card,
            stakes=state.ledger,
            number=state.rounds_played + 1,
        )
        new_state = replace(
            state,
            stage=TableStage.DEALT,
            shoe=shoe,
            balance=state.balance - total_stake,
            round=new_round,
            rounds_played=state.rounds_played + 1,
        )

        event_bus = EventBus.get_instance()
        base = {
            "game_id": state.id,
            "round_id": new_round.round_id,
            "timestamp": new_state.timestamp,
        }
        if rebuilt:
            event_bus.emit(
                TableEventType.SHOE_REBUILT,
                {**base, "cards_remaining": shoe.cards_remaining + CARDS_PER_ROUND},
            )
        event_bus.emit(
            TableEventType.ROUND_STARTED,
            {**base, "round_number": new_round.number, "total_bet": total_stake},
        )
        for side, card in (("player", player_card), ("banker", banker_card)):
            event_bus.emit(
                TableEventType.CARD_DEALT, {**base, "side": side, "card": str(card)}
            )
        event_bus.emit(
            TableEventType.BANKROLL_UPDATED,
            {**base, "balance": new_state.balance, "change": -total_stake},
        )

        return new_state

    @staticmethod
    def _current_round(state: TableState, round_id: Optional[str]) -> Round:
        if state.round is None:
            if round_id is not None:
                raise StaleRoundError(f"Round {round_id} is no longer in progress")
            raise InvalidTransitionError("No round is in progress")
        if round_id is not None and round_id != state.round.round_id:
            raise StaleRoundError(
                f"Round {round_id} is not the current round {state.round.round_id}"
            )
        return state.round

    @staticmethod
    def reveal(state: TableState, round_id: Optional[str] = None) -> TableState:
        """
        Mark the round's result as shown.

        Args:
            state: Current table state
            round_id: Round the caller expects to be current, if known

        Returns:
            New table state with the round revealed
        """
        current = StateTransitionEngine._current_round(state, round_id)
        if current.revealed:
            raise InvalidTransitionError("Round has already been revealed")

        stage = TableStage.REVEALED if state.stage is TableStage.DEALT else state.stage
        new_state = replace(state, stage=stage, round=replace(current, revealed=True))

        EventBus.get_instance().emit(
            TableEventType.ROUND_REVEALED,
            {
                "game_id": state.id,
                "round_id": current.round_id,
                "outcome": current.outcome.value,
                "player_card": str(current.player_card),
                "banker_card": str(current.banker_card),
                "timestamp": new_state.timestamp,
            },
        )

        return new_state

    @staticmethod
    def settle(state: TableState, round_id: Optional[str] = None) -> TableState:
        """
        Resolve every spot against the deal-time stakes and credit the winnings.

        Args:
            state: Current table state, DEALT or REVEALED
            round_id: Round the caller expects to be current, if known

        Returns:
            New table state in the SETTLED stage
        """
        current = StateTransitionEngine._current_round(state, round_id)
        if state.stage not in (TableStage.DEALT, TableStage.REVEALED):
            raise InvalidTransitionError(f"Cannot settle from {state.stage.name}")

        breakdown = resolve_breakdown(
            current.player_card, current.banker_card, current.stakes
        )
        winnings = sum(breakdown.values())
        new_state = replace(
            state,
            stage=TableStage.SETTLED,
            balance=state.balance + winnings,
            round=replace(current, winnings=winnings, breakdown=breakdown),
        )

        event_bus = EventBus.get_instance()
        event_bus.emit(
            TableEventType.ROUND_SETTLED,
            {
                "game_id": state.id,
                "round_id": current.round_id,
                "outcome": current.outcome.value,
                "winnings": winnings,
                "breakdown": {spot.value: amount for spot, amount in breakdown.items()},
                "timestamp": new_state.timestamp,
            },
        )
        event_bus.emit(
            TableEventType.BANKROLL_UPDATED,
            {
                "game_id": state.id,
                "round_id": current.round_id,
                "balance": new_state.balance,
                "change": winnings,
                "timestamp": new_state.timestamp,
            },
        )

        return new_state

    @staticmethod
    def reset(state: TableState, round_id: Optional[str] = None) -> TableState:
        """
        Clear the cards and the ledger after settlement.

        Args:
            state: Current table state, SETTLED
            round_id: Round the caller expects to be current, if known

        Returns:
            New idle table state
        """
        current = StateTransitionEngine._current_round(state, round_id)
        if state.stage is not TableStage.SETTLED:
            raise InvalidTransitionError(f"Cannot reset from {state.stage.name}")

        new_state = replace(
            state, stage=TableStage.IDLE, round=None, ledger=state.ledger.clear()
        )

        EventBus.get_instance().emit(
            TableEventType.ROUND_RESET,
            {
                "game_id": state.id,
                "round_id": current.round_id,
                "timestamp": new_state.timestamp,
            },
        )

        return new_state
