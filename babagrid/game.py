"""Game logic: reading rules off the board and moving the player."""

from __future__ import annotations

import os

from babagrid.board import Board
from babagrid.enums import (
    Direction,
    GameState,
    ObjectType,
    RuleDirection,
    convert_text_to_icon,
)
from babagrid.rules import Rule, RuleManager


class Game:
    """A level in play: the board, its active rules and the game state."""

    def __init__(self, board: Board) -> None:
        self.board = board
        self.rules = RuleManager()
        self.state = GameState.INVALID
        self.player_icon = ObjectType.ICON
        self._parse_rules()
        self.state = GameState.PLAYING

    @classmethod
    def from_file(cls, path: str | os.PathLike[str]) -> Game:
        """Start a game on the level stored in a map file."""
        return cls(Board.from_file(path))

    def reset(self) -> None:
        """Restore the board and rules to the start of the level."""
        self.board.reset()
        self._parse_rules()
        self.state = GameState.PLAYING

    def move_player(self, direction: Direction) -> None:
        """Move every tile the player controls one step, then re-evaluate."""
        for x, y in self.board.positions(self.player_icon):
            if self._can_move(x, y, direction):
                self._process_move(x, y, direction, self.player_icon)
        self._parse_rules()
        self._check_play_state()

    def _parse_rules(self) -> None:
        self.rules.clear()
        board = self.board
        for y in range(board.height):
            for x in range(board.width):
                board.at(x, y).is_rule = False
        for y in range(board.height):
            for x in range(board.width):
                self._parse_rule(x, y, RuleDirection.HORIZONTAL)
                self._parse_rule(x, y, RuleDirection.VERTICAL)
        self.player_icon = self.rules.find_player()

    def _parse_rule(self, x: int, y: int, direction: RuleDirection) -> None:
        board = self.board
        if direction is RuleDirection.HORIZONTAL:
            if x + 2 >= board.width:
                return
            coords = [(x, y), (x + 1, y), (x + 2, y)]
        else:
            if y + 2 >= board.height:
                return
            coords = [(x, y), (x, y + 1), (x, y + 2)]

        subject, verb, complement = (board.at(cx, cy) for cx, cy in coords)
        if (
            subject.has_noun_type()
            and verb.has_verb_type()
            and (complement.has_noun_type() or complement.has_property_type())
        ):
            self.rules.add(Rule(subject, verb, complement))
            for cell in (subject, verb, complement):
                cell.is_rule = True

    def _can_move(self, x: int, y: int, direction: Direction) -> bool:
        dx, dy = direction.offset
        nx, ny = x + dx, y + dy
        if not (0 <= nx < self.board.width and 0 <= ny < self.board.height):
            return False

        target = self.board.at(nx, ny)
        kinds = target.types()
        if self.rules.has_property(kinds, ObjectType.STOP):
            return False
        if self.rules.has_property(kinds, ObjectType.PUSH) or target.has_text_type():
            return self._can_move(nx, ny, direction)
        return True

    def _process_move(
        self, x: int, y: int, direction: Direction, kind: ObjectType
    ) -> None:
        dx, dy = direction.offset
        nx, ny = x + dx, y + dy
        target = self.board.at(nx, ny)
        kinds = target.types()

        if self.rules.has_property(kinds, ObjectType.PUSH):
            for rule in self.rules.rules_with(ObjectType.PUSH):
                noun = rule.subject.types()[0]
                self._process_move(nx, ny, direction, convert_text_to_icon(noun))
        elif self.rules.has_property(kinds, ObjectType.SINK) or self.rules.has_property(
            kinds, ObjectType.DEFEAT
        ):
            self.board.remove_object(x, y, kind)
            return
        elif target.has_text_type():
            self._process_move(nx, ny, direction, kinds[0])

        self.board.add_object(nx, ny, kind)
        self.board.remove_object(x, y, kind)

    def _check_play_state(self) -> None:
        if not self.rules.rules_with(ObjectType.YOU):
            self.state = GameState.LOST
            return

        positions = self.board.positions(self.player_icon)
        if not positions:
            self.state = GameState.LOST
            return

        win_rules = self.rules.rules_with(ObjectType.WIN)
        for x, y in positions:
            for rule in win_rules:
                noun = rule.subject.types()[0]
                if self.board.at(x, y).has_type(convert_text_to_icon(noun)):
                    self.state = GameState.WON