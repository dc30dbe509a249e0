"""Enumerations describing game state, directions and object kinds."""

from __future__ import annotations

from enum import Enum, IntEnum, auto


class GameState(Enum):
    """Overall state of a running game."""

    INVALID = auto()
    PLAYING = auto()
    WON = auto()
    LOST = auto()


class Direction(Enum):
    """Movement direction of the player."""

    NONE = auto()
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()

    @property
    def offset(self) -> tuple[int, int]:
        """The (dx, dy) step this direction takes on the grid."""
        return _OFFSETS[self]


_OFFSETS = {
    Direction.NONE: (0, 0),
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}


class RuleDirection(Enum):
    """Orientation in which a rule is read on the board."""

    HORIZONTAL = auto()
    VERTICAL = auto()


class ObjectType(IntEnum):
    """Every kind of tile.

    Text tiles come first, split into nouns, operators and properties by the
    NOUN, OPERATOR and PROPERTY markers. Icons follow the ICON marker; the
    icon of a noun sits exactly ``ICON`` places after that noun.
    """

    NOUN = 0
    BABA = 1
    FLAG = 2
    ROCK = 3
    WALL = 4
    WATER = 5
    SKULL = 6
    LAVA = 7

    OPERATOR = 8
    IS = 9
    HAS = 10
    MAKE = 11
    WRITE = 12
    AND = 13
    NOT = 14

    PROPERTY = 15
    YOU = 16
    WIN = 17
    STOP = 18
    PUSH = 19
    SINK = 20
    DEFEAT = 21
    HOT = 22
    MELT = 23

    ICON = 24
    ICON_BABA = 25
    ICON_FLAG = 26
    ICON_ROCK = 27
    ICON_WALL = 28
    ICON_WATER = 29
    ICON_SKULL = 30
    ICON_LAVA = 31
    ICON_EMPTY = 32


def is_text(kind: ObjectType) -> bool:
    """True for anything that is not an icon."""
    return kind < ObjectType.ICON


def is_noun(kind: ObjectType) -> bool:
    """True for words that name an in-game sprite."""
    return ObjectType.NOUN < kind < ObjectType.OPERATOR


def is_operator(kind: ObjectType) -> bool:
    """True for words that relate nouns and properties."""
    return ObjectType.OPERATOR < kind < ObjectType.PROPERTY


def is_verb(kind: ObjectType) -> bool:
    """True for the operators that can sit between a noun and its complement."""
    return kind in (ObjectType.IS, ObjectType.HAS, ObjectType.MAKE, ObjectType.WRITE)


def is_property(kind: ObjectType) -> bool:
    """True for qualities that can be attached to nouns."""
    return ObjectType.PROPERTY < kind < ObjectType.ICON


def convert_text_to_icon(kind: ObjectType) -> ObjectType:
    """Return the icon matching a text kind; icons are returned unchanged.

    Raises ValueError when the text kind has no icon counterpart.
    """
    if kind > ObjectType.ICON:
        return ObjectType(kind)
    try:
        return ObjectType(kind + ObjectType.ICON)
    except ValueError:
        raise ValueError(f"{ObjectType(kind).name} has no icon") from None


def convert_icon_to_text(kind: ObjectType) -> ObjectType:
    """Return the text kind matching an icon; text kinds are returned unchanged."""
    if kind <= ObjectType.ICON:
        return ObjectType(kind)
    return ObjectType(kind - ObjectType.ICON)