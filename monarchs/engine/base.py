"""
Base engine class for the Monarchs table.

An engine owns the current state snapshot, applies transitions to it in
response to intents and timers, and renders through a platform adapter.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from monarchs.adapters import PlatformAdapter
from monarchs.events import EventBus


class MonarchsEngine(ABC):
    """
    Abstract base class for table engines.
    """

    def __init__(self, adapter: PlatformAdapter, config: Optional[Dict[str, Any]] = None):
        """
        Initialize the engine.

        Args:
            adapter: Platform adapter to use for rendering and input
            config: Configuration options for the table
        """
        self.adapter = adapter
        self.config = dict(config or {})
        self.event_bus = EventBus.get_instance()
        self.state = None

    @abstractmethod
    async def initialize(self) -> None:
        """
        Initialize the engine and prepare for play.
        """
        await self.adapter.initialize()

    @abstractmethod
    async def shutdown(self) -> None:
        """
        Shut down the engine and clean up resources.
        """
        await self.adapter.shutdown()

    @abstractmethod
    async def deal(self):
        """
        Start a round.
        """

    async def render_state(self) -> None:
        """
        Render the current state through the adapter.
        """
        await self.adapter.render_game_state(self.state.to_adapter_format())
