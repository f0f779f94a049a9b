"""
Event system for the Monarchs table.
"""

from monarchs.events.emitter import (
    EventEmitter,
    EventBus,
    EventPriority,
    TableEventType,
)

__all__ = ["EventEmitter", "EventBus", "EventPriority", "TableEventType"]
