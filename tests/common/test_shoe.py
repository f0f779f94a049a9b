"""
Tests for the immutable multi-deck shoe.
"""

import random
from collections import Counter

import pytest

from monarchs.common.deck import multi_deck
from monarchs.common.shoe import DEFAULT_NUM_DECKS, Shoe, ShoeExhaustedError


class TestBuild:
    @pytest.mark.parametrize("num_decks", [1, 2, 3, 6, 8])
    def test_size_and_copies(self, num_decks, rng):
        shoe = Shoe.build(num_decks, rng)
        assert len(shoe) == 52 * num_decks
        counts = Counter(shoe.cards)
        assert len(counts) == 52
        assert set(counts.values()) == {num_decks}

    def test_build_is_a_permutation(self, rng):
        shoe = Shoe.build(6, rng)
        unshuffled = multi_deck(6)
        key = lambda card: card.sort_key()
        assert sorted(shoe.cards, key=key) == sorted(unshuffled, key=key)
        assert list(shoe.cards) != unshuffled

    def test_default_decks(self):
        shoe = Shoe.build()
        assert shoe.num_decks == DEFAULT_NUM_DECKS
        assert shoe.total_cards == 312

    def test_seeded_builds_are_reproducible(self):
        assert Shoe.build(2, random.Random(5)) == Shoe.build(2, random.Random(5))

    def test_build_requires_a_deck(self):
        with pytest.raises(ValueError):
            Shoe.build(0)


class TestDraw:
    def test_draw_takes_cards_from_the_front(self, rng):
        shoe = Shoe.build(1, rng)
        drawn, rest = shoe.draw(2)
        assert drawn == shoe.cards[:2]
        assert rest.cards == shoe.cards[2:]
        assert len(rest) == 50
        assert rest.cards_remaining == 50
        assert rest.num_decks == 1

    def test_draw_leaves_the_original_untouched(self, rng):
        shoe = Shoe.build(1, rng)
        shoe.draw(2)
        assert len(shoe) == 52

    def test_draw_whole_shoe(self, rng):
        shoe = Shoe.build(1, rng)
        drawn, rest = shoe.draw(52)
        assert len(drawn) == 52
        assert len(rest) == 0

    def test_draw_past_the_end(self, rng):
        shoe = Shoe.build(1, rng)
        _, rest = shoe.draw(51)
        with pytest.raises(ShoeExhaustedError):
            rest.draw(2)

    def test_draw_needs_a_positive_count(self, rng):
        with pytest.raises(ValueError):
            Shoe.build(1, rng).draw(0)


def test_needs_rebuild(rng):
    shoe = Shoe.build(1, rng)
    _, at_mark = shoe.draw(32)
    _, below_mark = shoe.draw(33)
    assert len(at_mark) == 20
    assert not at_mark.needs_rebuild(20)
    assert below_mark.needs_rebuild(20)


def test_str_and_repr(rng):
    shoe = Shoe.build(2, rng)
    assert str(shoe) == "Shoe with 104 cards remaining"
    assert repr(shoe) == "Shoe(num_decks=2, cards_remaining=104)"
