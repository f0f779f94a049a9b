"""
Command-line interface adapter for the Monarchs engine.

Renders the table as text and reads one command per line:

    bet <spot>     add the selected chip to a spot (player, banker, tie,
                   badbeat, pdragon, bdragon, monarchs)
    unit <value>   select a chip denomination
    clear          remove all bets
    deal           deal a round
    quit           leave the table
"""

from enum import Enum
from typing import Any, Callable, Dict, Optional, Sequence, Union

from monarchs.adapters.base import Intent, PlatformAdapter
from monarchs.table.constants import BetSpot

HELP_TEXT = """Commands:
  bet <spot>     add the selected chip to a spot
  unit <value>   select a chip denomination
  clear          remove all bets
  deal           deal a round
  quit           leave the table"""

_SPOT_LABELS = {
    BetSpot.PLAYER: "Player",
    BetSpot.BANKER: "Banker",
    BetSpot.TIE: "Tie",
    BetSpot.BAD_BEAT: "Bad Beat",
    BetSpot.PLAYER_DRAGON: "P Dragon",
    BetSpot.BANKER_DRAGON: "B Dragon",
    BetSpot.MONARCHS: "Monarchs",
}


def parse_intent(line: str) -> Optional[Intent]:
    """
    Turn a command line into an intent.

    >>> parse_intent("bet pDragon")
    Intent(kind=<IntentType.PLACE_BET: 1>, spot='pDragon', unit=None)
    >>> parse_intent("unit 25").unit
    25
    >>> parse_intent("shuffle") is None
    True
    """
    words = line.strip().split()
    if not words:
        return None
    command, args = words[0].lower(), words[1:]

    if command in ("bet", "b") and len(args) == 1:
        try:
            BetSpot.coerce(args[0])
        except ValueError:
            return None
        return Intent.place_bet(args[0])
    if command in ("unit", "u") and len(args) == 1 and args[0].isdigit():
        return Intent.set_unit(int(args[0]))
    if command in ("clear", "c") and not args:
        return Intent.clear_bets()
    if command in ("deal", "d") and not args:
        return Intent.deal()
    if command in ("quit", "q", "exit") and not args:
        return Intent.quit()
    return None


class CLIAdapter(PlatformAdapter):
    """
    Console adapter.

    Input and output go through plain callables so the adapter can be driven
    without a terminal.
    """

    def __init__(
        self,
        input_func: Optional[Callable[[str], str]] = None,
        output_func: Optional[Callable[[str], None]] = None,
    ):
        """
        Args:
            input_func: Reads one line given a prompt; `input` by default
            output_func: Writes one line; `print` by default
        """
        self.input_func = input_func or input
        self.output_func = output_func or print

    async def initialize(self) -> None:
        self.output_func("Welcome to the Monarchs table. Type 'help' for commands.")

    async def shutdown(self) -> None:
        self.output_func("Thanks for playing.")

    async def render_game_state(self, state: Dict[str, Any]) -> None:
        self.output_func("\n=== Monarchs Table ===")
        player = state.get("player_card") or "--"
        banker = state.get("banker_card") or "--"
        self.output_func(f"Player: {player:<10} Banker: {banker}")
        if state.get("revealed"):
            self.output_func(f"Result: {state.get('outcome')}")

        bets = state.get("bets", {})
        staked = [
            f"{_SPOT_LABELS[spot]} ${bets[spot.value]}"
            for spot in BetSpot
            if bets.get(spot.value)
        ]
        self.output_func(f"Bets: {', '.join(staked) if staked else 'none'}")
        self.output_func(
            f"BET ${state.get('total_bet', 0)}   BAL ${state.get('balance', 0)}"
            f"   Chip: {state.get('unit')}"
        )
        self.output_func("======================")

    async def request_intent(
        self, state: Dict[str, Any], chip_values: Sequence[int]
    ) -> Intent:
        while True:
            line = self.input_func("> ")
            if line.strip().lower() in ("help", "h", "?"):
                self.output_func(HELP_TEXT)
                self.output_func(f"Chips: {', '.join(str(v) for v in chip_values)}")
                continue
            intent = parse_intent(line)
            if intent is not None:
                return intent
            self.output_func("Invalid command. Type 'help' for commands.")

    async def notify_game_event(
        self, event_type: Union[str, Enum], data: Dict[str, Any]
    ) -> None:
        if isinstance(event_type, Enum):
            event_type = event_type.name

        message = self._format_event_message(event_type, data)
        if message:
            self.output_func(message)

    def _format_event_message(self, event_type: str, data: Dict[str, Any]) -> Optional[str]:
        if event_type == "ERROR":
            return f"Error: {data.get('message', 'unknown error')}"
        if event_type == "ROUND_SETTLED":
            winnings = data.get("winnings", 0)
            if winnings > 0:
                return f"You collect ${winnings}"
            return "No win this round."
        return None
