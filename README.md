# babagrid

A small grid puzzle engine in which the rules of a level are themselves
pieces on the board. A noun, a verb and a noun or property lined up
left-to-right or top-to-bottom (for example `BABA`, `IS`, `YOU`) form a rule;
pushing words around breaks old rules and forms new ones.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Running the window

```
babagrid
```

This opens an 800×450 window titled "baba-is-you" running at 60 frames per
second and steps through four screens: a logo screen that waits 120 frames
(two seconds), then a title screen, a gameplay screen and an ending screen.
Enter or a left mouse click moves to the next screen; the ending screen
returns to the title screen. Escape or closing the window quits. The command
takes no options besides `--help`.

On start-up the program looks for a `resources` folder in the working
directory, then in the application's directory and up to three levels above
it, and makes the first one found the working directory
(`babagrid.app.search_and_set_resource_dir`).

### What the window does not do

The screens are plain coloured placeholders with captions. The window does
not load a level, draw the board, or play the puzzle; the rule engine below
is only usable from Python.

## Using the engine

```python
from babagrid.game import Game
from babagrid.enums import Direction, GameState

game = Game.from_file("level.txt")
game.move_player(Direction.RIGHT)
if game.state is GameState.WON:
    print("solved")
```

A `Game` exposes `board`, `rules` (a `RuleManager`), `state` (a `GameState`)
and `player_icon` (the icon kind that some rule makes `YOU`). `reset()`
restores the level to its starting layout.

After each move the rules are read off the board again. The game is lost when
no rule mentions `YOU` or no player icon is left, and won when a player icon
shares a cell with an icon whose noun `IS WIN`. Moving into a cell whose kind
is `STOP` is blocked, `PUSH` objects and text tiles are pushed along, and
moving into `SINK` or `DEFEAT` removes the mover.

### Level files

A level file holds the width and height followed by `width * height`
whitespace-separated integers, one per cell in row-major order, each the
numeric value of an `ObjectType`. `Board.parse` reads the same format from a
string and raises `ValueError` on malformed data.

### Modules

- `babagrid.enums` – `GameState`, `Direction` (with an `offset` step),
  `ObjectType`, `RuleDirection`, and the helpers `is_text`, `is_noun`,
  `is_operator`, `is_verb`, `is_property`, `convert_text_to_icon` (raises
  `ValueError` for text with no icon) and `convert_icon_to_text`.
- `babagrid.objects` – `GameObject`, the multiset of kinds occupying one
  cell, with `add`, `remove`, `types`, `has_type` and the `has_*_type` checks.
  An emptied cell becomes `ICON_EMPTY`.
- `babagrid.rules` – `Rule` (`subject`, `verb`, `complement`) and
  `RuleManager` with `add`, `remove`, `clear`, `rules_with`, `find_player`,
  `has_property`, `len()` and iteration.
- `babagrid.board` – `Board`, built directly or with `Board.from_file` /
  `Board.parse`, with `width`, `height`, `at`, `positions`, `add_object`,
  `remove_object` and `reset`. `at` raises `IndexError` outside the grid.
- `babagrid.game` – `Game`, described above.
- `babagrid.app` – the window front end: `Screen`, `ScreenFlow`,
  `search_and_set_resource_dir` and `main`.