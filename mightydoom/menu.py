"""The title menu: cursor movement and starting the game."""

from __future__ import annotations

from dataclasses import dataclass

from mightydoom.state import GameState

TITLE = "Mighty Doom 64"
MENU_ITEMS = ("Tutorial", "Options")
MENU_ITEM_COUNT = len(MENU_ITEMS)
JOY_THRESHOLD = 32
MENU_X = 80
MENU_Y_BASE = 80
MENU_SPACING = 20
CURSOR_X = MENU_X - 20
MENU_TRACK = "Main_Menu_n64.wav64"
CURSOR_SPRITE = "rom:/Main-Menu-Mighty-Doom.rgba32.sprite"


@dataclass(frozen=True)
class Controls:
    """One frame of controller input: buttons pressed this frame and the stick."""

    start: bool = False
    d_up: bool = False
    d_down: bool = False
    l: bool = False
    stick_x: int = 0
    stick_y: int = 0


@dataclass
class Menu:
    """Selection state of the title menu."""

    index: int = 0
    stick_pressed: bool = False

    @property
    def selected(self) -> str:
        """Label of the highlighted item."""
        return MENU_ITEMS[self.index]

    @property
    def cursor_position(self) -> tuple[int, int]:
        """Screen position of the cursor sprite."""
        return CURSOR_X, MENU_Y_BASE + self.index * MENU_SPACING

    def handle_input(self, controls: Controls) -> GameState | None:
        """Move the cursor; return the next state when the menu is left."""
        next_state = GameState.TUTORIAL if controls.start else None

        if not self.stick_pressed:
            if controls.d_down or controls.stick_y < -JOY_THRESHOLD:
                self.index = (self.index + 1) % MENU_ITEM_COUNT
                self.stick_pressed = True
            elif controls.d_up or controls.stick_y > JOY_THRESHOLD:
                self.index = (self.index - 1) % MENU_ITEM_COUNT
                self.stick_pressed = True
        elif -JOY_THRESHOLD < controls.stick_y < JOY_THRESHOLD:
            self.stick_pressed = False

        return next_state