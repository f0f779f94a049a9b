"""
Platform adapters for the Monarchs engine.

Adapters translate between the table engine and a front end.
"""

from monarchs.adapters.base import Intent, IntentType, PlatformAdapter
from monarchs.adapters.cli import CLIAdapter
from monarchs.adapters.dummy import DummyAdapter

__all__ = ["Intent", "IntentType", "PlatformAdapter", "CLIAdapter", "DummyAdapter"]
