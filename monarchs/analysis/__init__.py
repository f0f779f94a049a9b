"""
Paytable and shuffle analysis for the Monarchs table.
"""

from monarchs.analysis.paytable import multiplier_matrix, pair_probabilities, paytable_report
from monarchs.analysis.shuffle import ShuffleCheck, position_counts, shuffle_uniformity

__all__ = [
    "multiplier_matrix",
    "pair_probabilities",
    "paytable_report",
    "ShuffleCheck",
    "position_counts",
    "shuffle_uniformity",
]
