"""Unit tests for /src/quirky/bag.py"""

import random
from collections import Counter
from unittest.mock import Mock

from src.quirky.bag import PieceBag
from src.quirky.pieces import ALL_PIECES, Color, Piece, Shape


def test_fresh_bag_holds_three_of_each() -> None:
    bag = PieceBag()
    assert bag.count() == 108
    assert bag.remaining() == [(piece, 3) for piece in ALL_PIECES]
    assert not bag.is_empty


def test_draw_returns_requested_amount(rng: random.Random) -> None:
    bag = PieceBag(rng)
    drawn = bag.draw(6)
    assert len(drawn) == 6
    assert bag.count() == 102


def test_draw_more_than_available_empties_the_bag(rng: random.Random) -> None:
    """A short draw is not an error: you simply get whatever is left"""
    bag = PieceBag(rng)
    drawn = bag.draw(200)
    assert len(drawn) == 108
    assert bag.count() == 0
    assert bag.is_empty
    assert bag.remaining() == []
    assert Counter(drawn) == Counter({piece: 3 for piece in ALL_PIECES})


def test_draw_from_empty_bag(rng: random.Random) -> None:
    bag = PieceBag(rng)
    bag.draw(108)
    assert bag.draw(6) == []


def test_draw_zero(rng: random.Random) -> None:
    bag = PieceBag(rng)
    assert bag.draw(0) == []
    assert bag.count() == 108


def test_exhausted_identity_leaves_the_pool() -> None:
    """Always pick the first identity: after three draws it must be gone from the choices"""
    fake_rng = Mock()
    fake_rng.choice.side_effect = lambda options: options[0]
    bag = PieceBag(fake_rng)

    red_circle = Piece(Shape.CIRCLE, Color.RED)
    assert bag.draw(3) == [red_circle] * 3
    assert red_circle not in dict(bag.remaining())

    bag.draw(1)
    last_options = fake_rng.choice.call_args.args[0]
    assert red_circle not in last_options
    assert len(last_options) == 35


def test_draw_is_uniform_over_distinct_identities() -> None:
    """The choice is made among identities, no matter how many copies of each are left"""
    fake_rng = Mock()
    fake_rng.choice.side_effect = lambda options: options[-1]
    bag = PieceBag(fake_rng)
    bag.draw(2)

    # purple clover has fewer copies left than the rest, yet is offered exactly once like every other identity
    options = fake_rng.choice.call_args.args[0]
    assert len(options) == 36
    assert len(set(options)) == 36

