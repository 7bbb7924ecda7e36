from __future__ import annotations

import random
from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

import numpy as np


class ShapeFamily(IntEnum):
    """Enumeration of shape families offered by the default catalog"""
    MONO = 0
    DOMINO = 1
    I3 = 2  # Three in a row
    CORNER = 3  # Small 2x2 corner
    I4 = 4
    O = 5  # 2x2 square
    T = 6
    L = 7
    J = 8
    S = 9
    Z = 10
    I5 = 11
    BIG_O = 12  # 3x3 square
    BIG_CORNER = 13  # 3x3 corner
    RECT = 14  # 2x3 rectangle


@dataclass(frozen=True, eq=False)
class Shape:
    """Immutable boolean matrix describing the cells a piece covers.

    Row 0 is the top of the bounding box; the anchor is the (0, 0) entry.
    """

    cells: np.ndarray

    def __post_init__(self) -> None:
        arr = np.array(self.cells, dtype=bool)
        if arr.ndim != 2:
            raise ValueError(f"Shape must be a 2-D matrix, got {arr.ndim} dimensions")
        arr.setflags(write=False)
        object.__setattr__(self, "cells", arr)

    @property
    def rows(self) -> int:
        return int(self.cells.shape[0])

    @property
    def cols(self) -> int:
        return int(self.cells.shape[1])

    @property
    def cell_count(self) -> int:
        return int(np.count_nonzero(self.cells))

    def offsets(self) -> List[Tuple[int, int]]:
        """Filled (row, col) offsets relative to the anchor"""
        return [(int(r), int(c)) for r, c in zip(*np.nonzero(self.cells))]

    def __repr__(self) -> str:
        rows = ["".join("#" if cell else "." for cell in row) for row in self.cells]
        return f"Shape({'/'.join(rows)})"


BASE_SHAPES: Dict[ShapeFamily, np.ndarray] = {
    ShapeFamily.MONO: np.array([[1]], dtype=np.int8),
    ShapeFamily.DOMINO: np.array([[1, 1]], dtype=np.int8),
    ShapeFamily.I3: np.array([[1, 1, 1]], dtype=np.int8),
    ShapeFamily.CORNER: np.array([[1, 0], [1, 1]], dtype=np.int8),
    ShapeFamily.I4: np.array([[1, 1, 1, 1]], dtype=np.int8),
    ShapeFamily.O: np.array([[1, 1], [1, 1]], dtype=np.int8),
    ShapeFamily.T: np.array([[1, 1, 1], [0, 1, 0]], dtype=np.int8),
    ShapeFamily.L: np.array([[1, 0], [1, 0], [1, 1]], dtype=np.int8),
    ShapeFamily.J: np.array([[0, 1], [0, 1], [1, 1]], dtype=np.int8),
    ShapeFamily.S: np.array([[0, 1, 1], [1, 1, 0]], dtype=np.int8),
    ShapeFamily.Z: np.array([[1, 1, 0], [0, 1, 1]], dtype=np.int8),
    ShapeFamily.I5: np.array([[1, 1, 1, 1, 1]], dtype=np.int8),
    ShapeFamily.BIG_O: np.ones((3, 3), dtype=np.int8),
    ShapeFamily.BIG_CORNER: np.array([[1, 0, 0], [1, 0, 0], [1, 1, 1]], dtype=np.int8),
    ShapeFamily.RECT: np.ones((2, 3), dtype=np.int8),
}


def unique_rotations(base: np.ndarray) -> List[Shape]:
    """All distinct clockwise rotations of `base`, in rotation order"""
    rotations: List[np.ndarray] = []
    for k in range(4):
        rotated = np.rot90(base, k, axes=(1, 0))
        if not any(np.array_equal(rotated, existing) for existing in rotations):
            rotations.append(rotated)
    return [Shape(r) for r in rotations]


def default_shapes() -> Dict[ShapeFamily, Tuple[Shape, ...]]:
    return {family: tuple(unique_rotations(base)) for family, base in BASE_SHAPES.items()}


class PieceCatalog:
    """Fixed set of shape families with their orientation variants.

    Sampling is two-stage: a family is drawn uniformly, then one of its
    variants, so families with many orientations are not over-represented.
    """

    def __init__(
        self,
        shapes: Optional[Mapping[ShapeFamily, Sequence[Shape]]] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        source = default_shapes() if shapes is None else shapes
        if not source:
            raise ValueError("Piece catalog needs at least one shape family")
        self._variants: Dict[ShapeFamily, Tuple[Shape, ...]] = {}
        for family, variants in source.items():
            variants = tuple(variants)
            if not variants:
                raise ValueError(f"Shape family {family!r} has no variants")
            if any(v.cell_count == 0 for v in variants):
                raise ValueError(f"Shape family {family!r} contains an empty shape")
            self._variants[family] = variants
        self.rng = rng if rng is not None else random.Random()

    @property
    def families(self) -> List[ShapeFamily]:
        return list(self._variants)

    def variants(self, family: ShapeFamily) -> Tuple[Shape, ...]:
        return self._variants[family]

    def random_shape(self) -> Tuple[ShapeFamily, Shape]:
        family = self.rng.choice(self.families)
        return family, self.rng.choice(self._variants[family])



@dataclass
class Piece:
    """A piece offered in the staging area.

    `x`/`y` is the free pixel position of the shape's top-left corner and
    `home_x`/`home_y` the staging position it returns to after a rejected
    placement. `id` is handed out by the owning `PieceSet`.
    """

    id: int
    shape: Shape
    family: ShapeFamily
    x: float = 0.0
    y: float = 0.0
    home_x: float = 0.0
    home_y: float = 0.0

    @property
    def cell_count(self) -> int:
        return self.shape.cell_count

    def move_to(self, x: float, y: float) -> None:
        self.x = x
        self.y = y

    def set_home(self, x: float, y: float) -> None:
        self.home_x, self.home_y = x, y
        self.move_to(x, y)

    def reset_position(self) -> None:
        self.move_to(self.home_x, self.home_y)
