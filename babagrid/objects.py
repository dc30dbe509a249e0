"""A single board cell holding a multiset of object kinds."""

from __future__ import annotations

from collections.abc import Iterable

from babagrid.enums import ObjectType, is_noun, is_property, is_verb


class GameObject:
    """The stack of nouns, operators, properties or icons in one cell."""

    __hash__ = None  # mutable

    def __init__(self, types: Iterable[ObjectType] = ()) -> None:
        self._counts: dict[ObjectType, int] = {ObjectType(t): 1 for t in types}
        self.is_rule = False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GameObject):
            return NotImplemented
        return self._counts == other._counts

    def __repr__(self) -> str:
        names = ", ".join(t.name for t in self.types())
        return f"GameObject([{names}])"

    def __copy__(self) -> GameObject:
        clone = GameObject()
        clone._counts = dict(self._counts)
        clone.is_rule = self.is_rule
        return clone

    def add(self, kind: ObjectType, is_boundary: bool) -> None:
        """Add one of ``kind``; on a boundary cell a kind never stacks above one."""
        kind = ObjectType(kind)
        if kind in self._counts:
            self._counts[kind] = 1 if is_boundary else self._counts[kind] + 1
        else:
            self._counts[kind] = 1

    def remove(self, kind: ObjectType) -> None:
        """Remove one of ``kind``; an emptied cell becomes ICON_EMPTY."""
        count = self._counts.get(kind)
        if count is not None:
            if count == 1:
                del self._counts[kind]
            else:
                self._counts[kind] = count - 1
        if not self._counts:
            self._counts[ObjectType.ICON_EMPTY] = 1

    def types(self) -> list[ObjectType]:
        """The distinct kinds present, in ascending order."""
        return sorted(self._counts)

    def has_type(self, kind: ObjectType) -> bool:
        return kind in self._counts

    def has_text_type(self) -> bool:
        return any(t <= ObjectType.ICON for t in self._counts)

    def has_noun_type(self) -> bool:
        return any(is_noun(t) for t in self._counts)

    def has_verb_type(self) -> bool:
        return any(is_verb(t) for t in self._counts)

    def has_property_type(self) -> bool:
        return any(is_property(t) for t in self._counts)