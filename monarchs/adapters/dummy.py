"""
Dummy adapter for the Monarchs engine, used for testing and scripted play.

The adapter answers intent requests from a predefined script and keeps every
rendered state and notification for later inspection.
"""

from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple, Union

from monarchs.adapters.base import Intent, PlatformAdapter


class DummyAdapter(PlatformAdapter):
    """
    Non-interactive adapter.

    Once the scripted intents run out, every further request returns QUIT.
    """

    def __init__(self, intents: Optional[Iterable[Intent]] = None, verbose: bool = False):
        """
        Args:
            intents: Intents to hand out in order
            verbose: Whether to print renders and events to stdout
        """
        self.intents: List[Intent] = list(intents or [])
        self.verbose = verbose
        self._next_intent = 0
        self.events: List[Tuple[str, Dict[str, Any]]] = []
        self.rendered_states: List[Dict[str, Any]] = []
        self.initialized = False
        self.shut_down = False

    async def initialize(self) -> None:
        self.initialized = True

    async def shutdown(self) -> None:
        self.shut_down = True

    async def render_game_state(self, state: Dict[str, Any]) -> None:
        self.rendered_states.append(state)
        if self.verbose:
            print(
                f"[render] player={state['player_card']} banker={state['banker_card']} "
                f"bet={state['total_bet']} balance={state['balance']}"
            )

    async def request_intent(
        self, state: Dict[str, Any], chip_values: Sequence[int]
    ) -> Intent:
        if self._next_intent >= len(self.intents):
            return Intent.quit()
        intent = self.intents[self._next_intent]
        self._next_intent += 1
        return intent

    async def notify_game_event(
        self, event_type: Union[str, Enum], data: Dict[str, Any]
    ) -> None:
        event_type_str = event_type.name if isinstance(event_type, Enum) else event_type
        self.events.append((event_type_str, data))
        if self.verbose:
            print(f"[event] {event_type_str}: {data}")

    def get_events_by_type(self, event_type: Union[str, Enum]) -> List[Dict[str, Any]]:
        """All recorded event payloads of one type."""
        event_type_str = event_type.name if isinstance(event_type, Enum) else event_type
        return [data for typ, data in self.events if typ == event_type_str]

    @property
    def last_state(self) -> Optional[Dict[str, Any]]:
        return self.rendered_states[-1] if self.rendered_states else None

    def clear(self) -> None:
        """Clear all stored events and states."""
        self.events.clear()
        self.rendered_states.clear()
