"""
Monarchs: a dragon/monarchs side-bet card comparison table.

Two cards are drawn from a multi-deck shoe, player first and banker second,
and seven bet spots are resolved against a fixed paytable.
"""

__version__ = "0.1.0"
