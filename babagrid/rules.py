"""Rules read off the board and the collection that holds them."""

from __future__ import annotations

import copy
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from babagrid.enums import ObjectType, convert_icon_to_text, convert_text_to_icon
from babagrid.objects import GameObject


@dataclass(eq=True)
class Rule:
    """A three-word statement such as BABA IS YOU."""

    subject: GameObject
    verb: GameObject
    complement: GameObject

    def __post_init__(self) -> None:
        # A rule keeps its own snapshot of the cells it was read from.
        self.subject = copy.copy(self.subject)
        self.verb = copy.copy(self.verb)
        self.complement = copy.copy(self.complement)

    @property
    def objects(self) -> tuple[GameObject, GameObject, GameObject]:
        return (self.subject, self.verb, self.complement)


class RuleManager:
    """An ordered list of active rules."""

    def __init__(self) -> None:
        self._rules: list[Rule] = []

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self) -> Iterator[Rule]:
        return iter(self._rules)

    def add(self, rule: Rule) -> None:
        self._rules.append(rule)

    def remove(self, rule: Rule) -> None:
        """Remove the first rule equal to ``rule``; absent rules are ignored."""
        try:
            self._rules.remove(rule)
        except ValueError:
            pass

    def clear(self) -> None:
        self._rules.clear()

    def rules_with(self, kind: ObjectType) -> list[Rule]:
        """All rules in which any of the three words is ``kind``."""
        return [r for r in self._rules if any(o.has_type(kind) for o in r.objects)]

    def find_player(self) -> ObjectType:
        """The icon controlled by the player, or ICON_EMPTY when nothing IS YOU."""
        for rule in self._rules:
            if rule.complement.has_type(ObjectType.YOU):
                return convert_text_to_icon(rule.subject.types()[0])
        return ObjectType.ICON_EMPTY

    def has_property(self, kinds: Iterable[ObjectType], prop: ObjectType) -> bool:
        """True if some rule gives any of ``kinds`` the property ``prop``."""
        for kind in kinds:
            text = convert_icon_to_text(kind)
            for rule in self._rules:
                if rule.subject.has_type(text) and rule.complement.has_type(prop):
                    return True
        return False