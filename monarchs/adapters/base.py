"""
Base adapter interface for the Monarchs engine.

An adapter is the display layer: it renders table snapshots, shows
notifications, and hands the engine the player's next intent.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Dict, Optional, Sequence, Union


class IntentType(Enum):
    """What a player can ask the table to do."""

    PLACE_BET = auto()
    SET_UNIT = auto()
    CLEAR_BETS = auto()
    DEAL = auto()
    QUIT = auto()


@dataclass(frozen=True)
class Intent:
    """
    A player request coming from the display layer.

    Attributes:
        kind: The requested action
        spot: Bet spot name, for PLACE_BET
        unit: Chip value, for SET_UNIT
    """

    kind: IntentType
    spot: Optional[str] = None
    unit: Optional[int] = None

    @classmethod
    def place_bet(cls, spot: str) -> "Intent":
        return cls(IntentType.PLACE_BET, spot=spot)

    @classmethod
    def set_unit(cls, unit: int) -> "Intent":
        return cls(IntentType.SET_UNIT, unit=unit)

    @classmethod
    def clear_bets(cls) -> "Intent":
        return cls(IntentType.CLEAR_BETS)

    @classmethod
    def deal(cls) -> "Intent":
        return cls(IntentType.DEAL)

    @classmethod
    def quit(cls) -> "Intent":
        return cls(IntentType.QUIT)


class PlatformAdapter(ABC):
    """
    Base interface for platform-specific adapters.

    Implementations bridge the platform-agnostic table engine and a concrete
    front end such as a console or a test harness.
    """

    @abstractmethod
    async def render_game_state(self, state: Dict[str, Any]) -> None:
        """
        Render a table snapshot.

        Args:
            state: Output of `TableState.to_adapter_format`
        """

    @abstractmethod
    async def request_intent(
        self, state: Dict[str, Any], chip_values: Sequence[int]
    ) -> Intent:
        """
        Wait for the player's next intent.

        Args:
            state: Current table snapshot, for prompting
            chip_values: Chip denominations the player may select

        Returns:
            The player's intent
        """

    @abstractmethod
    async def notify_game_event(
        self, event_type: Union[str, Enum], data: Dict[str, Any]
    ) -> None:
        """
        Notify the platform of a table event.

        Args:
            event_type: The type of event that occurred
            data: Data associated with the event
        """

    async def initialize(self) -> None:
        """Called once when the engine starts."""

    async def shutdown(self) -> None:
        """Called once when the engine stops."""
