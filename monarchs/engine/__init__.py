"""
Engines that drive a Monarchs table through a platform adapter.
"""

from monarchs.engine.base import MonarchsEngine
from monarchs.engine.table import TableEngine

__all__ = ["MonarchsEngine", "TableEngine"]
