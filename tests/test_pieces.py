from __future__ import annotations

import random
from collections import Counter

import numpy as np
import pytest

from block_puzzle_quiz.game.pieces import (
    BASE_SHAPES,
    Piece,
    PieceCatalog,
    Shape,
    ShapeFamily,
    default_shapes,
    unique_rotations,
)


def test_unique_rotations_drop_duplicates() -> None:
    assert len(unique_rotations(BASE_SHAPES[ShapeFamily.MONO])) == 1
    assert len(unique_rotations(BASE_SHAPES[ShapeFamily.O])) == 1
    assert len(unique_rotations(BASE_SHAPES[ShapeFamily.I4])) == 2
    assert len(unique_rotations(BASE_SHAPES[ShapeFamily.S])) == 2
    assert len(unique_rotations(BASE_SHAPES[ShapeFamily.T])) == 4
    assert len(unique_rotations(BASE_SHAPES[ShapeFamily.BIG_CORNER])) == 4


def test_rotation_is_clockwise() -> None:
    horizontal, vertical = unique_rotations(np.array([[1, 1, 1]]))
    assert (horizontal.rows, horizontal.cols) == (1, 3)
    assert (vertical.rows, vertical.cols) == (3, 1)


def test_default_catalog_covers_every_family() -> None:
    shapes = default_shapes()
    assert set(shapes) == set(ShapeFamily)
    for variants in shapes.values():
        assert variants
        assert all(v.cell_count > 0 for v in variants)


def test_shape_is_read_only() -> None:
    shape = Shape(np.array([[1, 0], [1, 1]]))
    assert shape.cell_count == 3
    assert shape.offsets() == [(0, 0), (1, 0), (1, 1)]
    with pytest.raises(ValueError):
        shape.cells[0, 1] = True


def test_two_stage_sampling_balances_families() -> None:
    many = [Shape(np.ones((1, n))) for n in range(1, 10)]
    catalog = PieceCatalog(
        {ShapeFamily.MONO: [Shape(np.array([[1]]))], ShapeFamily.I5: many},
        rng=random.Random(7),
    )
    counts = Counter(catalog.random_shape()[0] for _ in range(4000))
    share = counts[ShapeFamily.MONO] / 4000
    assert 0.45 < share < 0.55


def test_random_shape_returns_a_variant_of_its_family() -> None:
    catalog = PieceCatalog(rng=random.Random(3))
    for _ in range(50):
        family, shape = catalog.random_shape()
        assert any(shape is v for v in catalog.variants(family))


def test_catalog_rejects_empty_definitions() -> None:
    with pytest.raises(ValueError):
        PieceCatalog({})
    with pytest.raises(ValueError):
        PieceCatalog({ShapeFamily.MONO: []})
    with pytest.raises(ValueError):
        PieceCatalog({ShapeFamily.MONO: [Shape(np.zeros((1, 1)))]})


def test_piece_returns_to_home() -> None:
    a = Piece(1, Shape(np.array([[1]])), ShapeFamily.MONO)
    assert (a.x, a.y) == (0.0, 0.0)
    a.set_home(10.0, 20.0)
    a.move_to(99.0, 5.0)
    a.reset_position()
    assert (a.x, a.y) == (10.0, 20.0)
