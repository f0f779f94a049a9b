"""
Monarchs table engine.

This module provides the TableEngine class. It holds the current
`TableState`, applies `StateTransitionEngine` transitions for player intents,
and runs the timed part of a round (settle, reveal, reset) as one asyncio
task per round. The task is keyed by round id and cancelled whenever the
round it belongs to stops being current.
"""

import asyncio
import logging
import random
import time
from typing import Any, Awaitable, Callable, Dict, List, Optional, Tuple

from monarchs.adapters import Intent, IntentType, PlatformAdapter
from monarchs.engine.base import MonarchsEngine
from monarchs.events import TableEventType
from monarchs.table.errors import StaleRoundError, TableError
from monarchs.table.rules import TableRules
from monarchs.table.state import Round, TableState
from monarchs.table.transitions import StateTransitionEngine

logger = logging.getLogger(__name__)

RoundStep = Callable[[Optional[str]], Awaitable[TableState]]
StepDone = Callable[[Round], bool]


class TableEngine(MonarchsEngine):
    """
    Engine implementation for a single-player Monarchs table.

    Config keys:
        auto_timers: Run settle/reveal/reset on timers after each deal
            (default True). With False, the caller drives them.
        seed: Seed for the engine's random source
        any `TableRules` field, e.g. ``num_decks`` or ``reveal_delay``
    """

    def __init__(
        self,
        adapter: PlatformAdapter,
        config: Optional[Dict[str, Any]] = None,
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize the table engine.

        Args:
            adapter: Platform adapter to use for rendering and input
            config: Configuration options for the table
            rng: Random source for shuffles; built from ``seed`` when omitted
        """
        super().__init__(adapter, config)

        default_config = {"auto_timers": True, "seed": None}
        default_config.update(self.config)
        self.config = default_config

        self.rules = TableRules.from_config(self.config)
        self.rng = rng or random.Random(self.config["seed"])
        self.state: TableState = StateTransitionEngine.new_table(self.rules, self.rng)

        self._timers: Dict[str, asyncio.Task] = {}

    async def initialize(self) -> None:
        """
        Initialize the engine and prepare for play.
        """
        await super().initialize()

        self.event_bus.emit(
            TableEventType.ENGINE_INIT,
            {
                "engine_type": "monarchs",
                "game_id": self.state.id,
                "config": self.config,
                "timestamp": time.time(),
            },
        )
        logger.info(
            "Table %s open: %d decks, balance %d",
            self.state.id,
            self.rules.num_decks,
            self.state.balance,
        )
        await self.render_state()

    async def shutdown(self) -> None:
        """
        Cancel pending round timers and shut down the adapter.
        """
        await self._cancel_timers()

        self.event_bus.emit(
            TableEventType.ENGINE_SHUTDOWN,
            {"game_id": self.state.id, "timestamp": time.time()},
        )

        await super().shutdown()

    async def _reject(self, action: str, error: Exception) -> None:
        logger.warning("%s rejected: %s", action, error)
        self.event_bus.emit(
            TableEventType.ERROR,
            {
                "game_id": self.state.id,
                "action": action,
                "error": type(error).__name__,
                "message": str(error),
                "timestamp": time.time(),
            },
        )

    async def _apply(self, action: str, transition: Callable[[], TableState]) -> TableState:
        try:
            new_state = transition()
        except StaleRoundError:
            raise
        except (TableError, ValueError) as e:
            await self._reject(action, e)
            raise
        self.state = new_state
        await self.render_state()
        return new_state

    async def place_bet(self, spot: str, amount: Optional[int] = None) -> TableState:
        """
        Add the selected chip (or ``amount``) to a bet spot.

        Args:
            spot: Bet spot name or enum
            amount: Amount to add; the selected unit when omitted
        """
        return await self._apply(
            "place_bet",
            lambda: StateTransitionEngine.place_bet(self.state, spot, amount),
        )

    async def set_unit(self, unit: int) -> TableState:
        """Select the chip denomination."""
        return await self._apply(
            "set_unit",
            lambda: StateTransitionEngine.set_unit(self.state, unit, self.rules),
        )

    async def clear_bets(self) -> TableState:
        """Remove every stake from the layout."""
        return await self._apply(
            "clear_bets", lambda: StateTransitionEngine.clear_bets(self.state)
        )

    async def deal(self) -> Round:
        """
        Deal a round and, with auto timers, schedule its settle/reveal/reset.

        Returns:
            The round just dealt

        Raises:
            InsufficientStakeError, InsufficientBalanceError,
            RoundInProgressError: The deal is rejected and the state is unchanged
        """
        await self._apply(
            "deal",
            lambda: StateTransitionEngine.deal(self.state, self.rules, self.rng),
        )
        current = self.state.round
        logger.info(
            "Round %d dealt: %s vs %s, stake %d",
            current.number,
            current.player_card,
            current.banker_card,
            current.stakes.total,
        )

        if self.config["auto_timers"]:
            await self._cancel_timers()
            self._timers[current.round_id] = asyncio.create_task(
                self._run_round_timers(current.round_id)
            )

        return current

    async def reveal(self, round_id: Optional[str] = None) -> TableState:
        """Show the result of the current round."""
        await self._apply(
            "reveal", lambda: StateTransitionEngine.reveal(self.state, round_id)
        )
        current = self.state.round
        await self.adapter.notify_game_event(
            TableEventType.ROUND_REVEALED,
            {"round_id": current.round_id, "outcome": current.outcome.label},
        )
        return self.state

    async def settle(self, round_id: Optional[str] = None) -> TableState:
        """Resolve the current round and credit the winnings."""
        await self._apply(
            "settle", lambda: StateTransitionEngine.settle(self.state, round_id)
        )
        current = self.state.round
        logger.info("Round %d settled: winnings %d", current.number, current.winnings)
        await self.adapter.notify_game_event(
            TableEventType.ROUND_SETTLED,
            {
                "round_id": current.round_id,
                "winnings": current.winnings,
                "balance": self.state.balance,
            },
        )
        return self.state

    async def reset(self, round_id: Optional[str] = None) -> TableState:
        """Clear the cards and the ledger of a settled round."""
        finished = self.state.round
        await self._apply(
            "reset", lambda: StateTransitionEngine.reset(self.state, round_id)
        )
        task = self._timers.pop(finished.round_id, None)
        if task is not None and task is not asyncio.current_task():
            task.cancel()
        return self.state

    def _round_steps(self) -> List[Tuple[float, RoundStep, StepDone]]:
        steps = [
            (self.rules.settle_delay, self.settle, lambda current: current.is_settled),
            (self.rules.reveal_delay, self.reveal, lambda current: current.revealed),
            (self.rules.reset_delay, self.reset, lambda current: False),
        ]
        # Stable sort: on equal delays settle precedes reveal, reset is last
        return sorted(steps, key=lambda step: step[0])

    async def _run_round_timers(self, round_id: str) -> None:
        elapsed = 0.0
        try:
            for delay, step, done in self._round_steps():
                await asyncio.sleep(delay - elapsed)
                elapsed = delay
                current = self.state.round
                # Already applied by hand for this round
                if current is not None and current.round_id == round_id and done(current):
                    logger.debug("Round %s: skipping %s", round_id, step.__name__)
                    continue
                await step(round_id)
        except StaleRoundError as e:
            logger.debug("Dropping timer for stale round: %s", e)
        except TableError as e:
            logger.warning("Round %s timers stopped: %s", round_id, e)
        finally:
            if self._timers.get(round_id) is asyncio.current_task():
                del self._timers[round_id]

    async def _cancel_timers(self) -> None:
        pending = list(self._timers.values())
        self._timers.clear()
        for task in pending:
            task.cancel()
        for task in pending:
            try:
                await task
            except asyncio.CancelledError:
                pass

    async def wait_for_round(self) -> TableState:
        """
        Wait until the timers of the current round have run out.

        Returns:
            The state after the round's last timer step
        """
        pending = list(self._timers.values())
        if pending:
            # Cancelled timers count as finished
            await asyncio.gather(*pending, return_exceptions=True)
        return self.state

    async def dispatch(self, intent: Intent) -> Optional[TableState]:
        """
        Apply one player intent.

        Args:
            intent: The intent to apply

        Returns:
            The resulting state, or None for QUIT
        """
        if intent.kind is IntentType.PLACE_BET:
            return await self.place_bet(intent.spot)
        if intent.kind is IntentType.SET_UNIT:
            return await self.set_unit(intent.unit)
        if intent.kind is IntentType.CLEAR_BETS:
            return await self.clear_bets()
        if intent.kind is IntentType.DEAL:
            await self.deal()
            return self.state
        return None

    async def play(self) -> TableState:
        """
        Run the table until the adapter asks to quit.

        Rejected intents are reported through the adapter and play continues.
        After each deal the loop waits for the round to finish.

        Returns:
            The final state
        """
        while True:
            intent = await self.adapter.request_intent(
                self.state.to_adapter_format(), self.rules.chip_values
            )
            if intent.kind is IntentType.QUIT:
                break

            try:
                await self.dispatch(intent)
            except (TableError, ValueError) as e:
                await self.adapter.notify_game_event(
                    TableEventType.ERROR, {"message": str(e), "error": type(e).__name__}
                )
                continue

            if intent.kind is IntentType.DEAL:
                await self.wait_for_round()

        return self.state
