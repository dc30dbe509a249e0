"""The grid of cells a level is played on."""

from __future__ import annotations

import copy
import os
from collections.abc import Iterable

from babagrid.enums import ObjectType
from babagrid.objects import GameObject

Position = tuple[int, int]


class Board:
    """A width x height grid of cells, remembering its initial layout for resets."""

    def __init__(
        self,
        width: int = 0,
        height: int = 0,
        kinds: Iterable[ObjectType] | None = None,
    ) -> None:
        if width < 0 or height < 0:
            raise ValueError("board dimensions must not be negative")
        self._width = width
        self._height = height
        size = width * height
        if kinds is None:
            initial = [ObjectType.ICON_EMPTY] * size
        else:
            initial = [ObjectType(k) for k in kinds]
            if len(initial) != size:
                raise ValueError(
                    f"expected {size} cells for a {width}x{height} board, got {len(initial)}"
                )
        self._initial = [GameObject([kind]) for kind in initial]
        self._cells = [GameObject([kind]) for kind in initial]

    @classmethod
    def parse(cls, text: str) -> Board:
        """Build a board from whitespace-separated integers: width, height, then cells."""
        tokens = text.split()
        if len(tokens) < 2:
            raise ValueError("board data must start with width and height")
        try:
            numbers = [int(token) for token in tokens]
        except ValueError as exc:
            raise ValueError(f"malformed board data: {exc}") from None
        width, height, *cells = numbers
        if width < 0 or height < 0:
            raise ValueError("board dimensions must not be negative")
        size = width * height
        if len(cells) < size:
            raise ValueError(f"board data holds {len(cells)} cells, expected {size}")
        return cls(width, height, (ObjectType(value) for value in cells[:size]))

    @classmethod
    def from_file(cls, path: str | os.PathLike[str]) -> Board:
        """Load a board from a map file."""
        with open(path, encoding="utf-8") as handle:
            return cls.parse(handle.read())

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def reset(self) -> None:
        """Restore every cell to the layout the board was created with."""
        self._cells = [copy.copy(cell) for cell in self._initial]

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(f"position ({x}, {y}) is outside the board")
        return y * self._width + x

    def _is_boundary(self, x: int, y: int) -> bool:
        return x == 0 or x == self._width - 1 or y == 0 or y == self._height - 1

    def add_object(self, x: int, y: int, kind: ObjectType) -> None:
        self._cells[self._index(x, y)].add(kind, self._is_boundary(x, y))

    def remove_object(self, x: int, y: int, kind: ObjectType) -> None:
        self._cells[self._index(x, y)].remove(kind)

    def at(self, x: int, y: int) -> GameObject:
        """The cell at column ``x`` and row ``y``."""
        return self._cells[self._index(x, y)]

    def positions(self, kind: ObjectType) -> list[Position]:
        """Every (x, y) holding ``kind``, in row-major order."""
        return [
            (x, y)
            for y in range(self._height)
            for x in range(self._width)
            if self.at(x, y).has_type(kind)
        ]