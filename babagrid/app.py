"""Windowed front end with a simple logo/title/gameplay/ending screen flow."""

from __future__ import annotations

import argparse
import os
import sys
from dataclasses import dataclass
from enum import Enum, auto
from pathlib import Path

SCREEN_WIDTH = 800
SCREEN_HEIGHT = 450
WINDOW_TITLE = "baba-is-you"
TARGET_FPS = 60
LOGO_FRAMES = 120

_RAYWHITE = (245, 245, 245)
_LIGHTGRAY = (200, 200, 200)
_GRAY = (130, 130, 130)
_GREEN = (0, 228, 48)
_DARKGREEN = (0, 117, 44)
_PURPLE = (200, 122, 255)
_MAROON = (190, 33, 55)
_BLUE = (0, 121, 241)
_DARKBLUE = (0, 82, 172)


class Screen(Enum):
    LOGO = auto()
    TITLE = auto()
    GAMEPLAY = auto()
    ENDING = auto()


@dataclass
class ScreenFlow:
    """Tracks which screen is shown and advances between them."""

    screen: Screen = Screen.LOGO
    frames_counter: int = 0

    def update(self, advance_pressed: bool) -> Screen:
        """Advance one frame; ``advance_pressed`` is Enter or a tap this frame."""
        if self.screen is Screen.LOGO:
            self.frames_counter += 1
            if self.frames_counter > LOGO_FRAMES:
                self.screen = Screen.TITLE
        elif advance_pressed:
            self.screen = _NEXT_SCREEN[self.screen]
        return self.screen


_NEXT_SCREEN = {
    Screen.TITLE: Screen.GAMEPLAY,
    Screen.GAMEPLAY: Screen.ENDING,
    Screen.ENDING: Screen.TITLE,
}

# background, (title, colour), (hint, x, colour)
_SCREEN_LOOK = {
    Screen.LOGO: (None, ("LOGO SCREEN", _LIGHTGRAY), ("WAIT for 2 SECONDS...", 290, _GRAY)),
    Screen.TITLE: (
        _GREEN,
        ("TITLE SCREEN", _DARKGREEN),
        ("PRESS ENTER or TAP to JUMP to GAMEPLAY SCREEN", 120, _DARKGREEN),
    ),
    Screen.GAMEPLAY: (
        _PURPLE,
        ("GAMEPLAY SCREEN", _MAROON),
        ("PRESS ENTER or TAP to JUMP to ENDING SCREEN", 130, _MAROON),
    ),
    Screen.ENDING: (
        _BLUE,
        ("ENDING SCREEN", _DARKBLUE),
        ("PRESS ENTER or TAP to RETURN to TITLE SCREEN", 120, _DARKBLUE),
    ),
}


def search_and_set_resource_dir(
    folder_name: str, app_dir: str | os.PathLike[str] | None = None
) -> bool:
    """Find ``folder_name`` near the working or application dir and chdir into it.

    Looks in the working directory, the application directory and up to three
    levels above the application directory. Returns False, leaving the working
    directory alone, when none of them holds the folder.
    """
    if Path(folder_name).is_dir():
        os.chdir(Path.cwd() / folder_name)
        return True

    base = Path(app_dir) if app_dir is not None else Path(sys.argv[0]).resolve().parent
    for levels in range(4):
        candidate = base.joinpath(*([".."] * levels), folder_name)
        if candidate.is_dir():
            os.chdir(candidate)
            return True
    return False


def _draw(surface, fonts, screen: Screen) -> None:
    background, (title, title_colour), (hint, hint_x, hint_colour) = _SCREEN_LOOK[screen]
    surface.fill(_RAYWHITE)
    if background is not None:
        surface.fill(background)
    surface.blit(fonts[40].render(title, True, title_colour), (20, 20))
    surface.blit(fonts[20].render(hint, True, hint_colour), (hint_x, 220))


def main(argv: list[str] | None = None) -> int:
    """Open the game window and run the screen loop until it is closed."""
    parser = argparse.ArgumentParser(prog="babagrid", description="Run the game window.")
    parser.parse_args(argv)

    import pygame

    search_and_set_resource_dir("resources")

    pygame.init()
    try:
        surface = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption(WINDOW_TITLE)
        clock = pygame.time.Clock()
        fonts = {size: pygame.font.Font(None, size) for size in (20, 40)}
        flow = ScreenFlow()

        running = True
        while running:
            advance = False
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_RETURN:
                        advance = True
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    advance = True
            if not running:
                break
            _draw(surface, fonts, flow.screen)
            pygame.display.flip()
            flow.update(advance)
            clock.tick(TARGET_FPS)
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())