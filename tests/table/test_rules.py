"""
Tests for table configuration.
"""

import pytest

from monarchs.table.rules import TableRules


def test_defaults():
    rules = TableRules()
    assert rules.num_decks == 6
    assert rules.reshuffle_threshold == 20
    assert rules.starting_balance == 2000
    assert rules.chip_values == (1, 5, 25, 100, 500, 1000)
    assert rules.default_unit == 100
    assert (rules.settle_delay, rules.reveal_delay, rules.reset_delay) == (0.9, 1.2, 2.5)


def test_from_config_ignores_other_keys():
    rules = TableRules.from_config(
        {"num_decks": 2, "chip_values": [5, 10], "default_unit": 5, "seed": 3}
    )
    assert rules.num_decks == 2
    assert rules.chip_values == (5, 10)
    assert rules.default_unit == 5


def test_from_config_empty():
    assert TableRules.from_config(None) == TableRules()


@pytest.mark.parametrize(
    "overrides",
    [
        {"num_decks": 0},
        {"reshuffle_threshold": 1},
        {"num_decks": 1, "reshuffle_threshold": 53},
        {"starting_balance": -1},
        {"chip_values": ()},
        {"chip_values": (0, 100)},
        {"default_unit": 50},
        {"settle_delay": -0.1},
        {"reset_delay": 1.0},
    ],
)
def test_invalid_rules(overrides):
    with pytest.raises(ValueError):
        TableRules(**overrides)


def test_zero_delays_allowed():
    rules = TableRules(settle_delay=0, reveal_delay=0, reset_delay=0)
    assert rules.reset_delay == 0
