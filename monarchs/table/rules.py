"""
Table configuration.

`TableRules` collects the constants a table runs with. Engines accept a plain
config dict as well; `TableRules.from_config` picks the rule keys out of it.
"""

from dataclasses import dataclass, fields
from typing import Any, Dict, Optional, Tuple

from monarchs.common.shoe import DEFAULT_NUM_DECKS
from monarchs.table.constants import (
    CHIP_VALUES,
    DEFAULT_UNIT,
    RESET_DELAY,
    RESHUFFLE_THRESHOLD,
    REVEAL_DELAY,
    SETTLE_DELAY,
    STARTING_BALANCE,
)


@dataclass(frozen=True)
class TableRules:
    """
    Configuration for a Monarchs table.

    Attributes:
        num_decks: Number of decks in the shoe
        reshuffle_threshold: Rebuild the shoe before a deal below this many cards
        starting_balance: Balance a new session starts with
        chip_values: Chip denominations a player may select
        default_unit: Chip selected when a session starts
        settle_delay: Seconds from deal until winnings are credited
        reveal_delay: Seconds from deal until the result is shown
        reset_delay: Seconds from deal until the table clears
    """

    num_decks: int = DEFAULT_NUM_DECKS
    reshuffle_threshold: int = RESHUFFLE_THRESHOLD
    starting_balance: int = STARTING_BALANCE
    chip_values: Tuple[int, ...] = CHIP_VALUES
    default_unit: int = DEFAULT_UNIT
    settle_delay: float = SETTLE_DELAY
    reveal_delay: float = REVEAL_DELAY
    reset_delay: float = RESET_DELAY

    def __post_init__(self):
        if self.num_decks < 1:
            raise ValueError("Number of decks must be at least 1")
        if self.reshuffle_threshold < 2:
            raise ValueError("Reshuffle threshold must leave room for a deal")
        if self.reshuffle_threshold > 52 * self.num_decks:
            raise ValueError("Reshuffle threshold cannot exceed the shoe size")
        if self.starting_balance < 0:
            raise ValueError("Starting balance must be non-negative")
        if not self.chip_values or any(v <= 0 for v in self.chip_values):
            raise ValueError("Chip values must be positive")
        if self.default_unit not in self.chip_values:
            raise ValueError(f"Default unit {self.default_unit} is not a chip value")
        if min(self.settle_delay, self.reveal_delay, self.reset_delay) < 0:
            raise ValueError("Delays must be non-negative")
        if self.reset_delay < max(self.settle_delay, self.reveal_delay):
            raise ValueError("Reset delay must not precede reveal or settlement")

    @classmethod
    def from_config(cls, config: Optional[Dict[str, Any]] = None) -> "TableRules":
        """Build rules from the matching keys of an engine config dict."""
        config = config or {}
        names = {f.name for f in fields(cls)}
        overrides = {k: v for k, v in config.items() if k in names}
        if "chip_values" in overrides:
            overrides["chip_values"] = tuple(overrides["chip_values"])
        return cls(**overrides)
