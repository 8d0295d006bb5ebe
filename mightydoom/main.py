"""The game's entry point: window, input and the state loop."""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Iterable
from typing import Any

import pygame

from mightydoom.camera import SCREEN_HEIGHT, SCREEN_WIDTH
from mightydoom.game import TUTORIAL_TRACK, Tutorial
from mightydoom.menu import MENU_TRACK, TITLE, Controls, Menu
from mightydoom.music import Music
from mightydoom.render import Renderer
from mightydoom.state import INITIAL_STATE, GameState, run_state

STICK_MAX = 85
FRAME_RATE = 60
MENU_REPEAT_MS = 120

_START_KEYS = (pygame.K_RETURN, pygame.K_SPACE)
_UP_KEYS = (pygame.K_UP,)
_DOWN_KEYS = (pygame.K_DOWN,)
_L_KEYS = (pygame.K_l, pygame.K_q)


def read_controls(keys: Any, events: Iterable[Any]) -> Controls:
    """Build one frame of input from held ``keys`` and this frame's ``events``.

    Buttons count only when pressed this frame; WASD held down moves the stick.
    """
    pressed = {e.key for e in events if e.type == pygame.KEYDOWN and hasattr(e, "key")}

    def any_pressed(candidates: tuple[int, ...]) -> bool:
        return any(key in pressed for key in candidates)

    stick_x = (STICK_MAX if keys[pygame.K_d] else 0) - (STICK_MAX if keys[pygame.K_a] else 0)
    stick_y = (STICK_MAX if keys[pygame.K_w] else 0) - (STICK_MAX if keys[pygame.K_s] else 0)
    return Controls(
        start=any_pressed(_START_KEYS),
        d_up=any_pressed(_UP_KEYS),
        d_down=any_pressed(_DOWN_KEYS),
        l=any_pressed(_L_KEYS),
        stick_x=stick_x,
        stick_y=stick_y,
    )


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="mightydoom", description=TITLE)
    parser.add_argument("--assets", default="assets", help="directory holding music files")
    parser.add_argument("--scale", type=int, default=2, help="window scale factor")
    parser.add_argument("--frames", type=int, default=None, help="stop after this many frames")
    args = parser.parse_args(argv)
    if args.scale < 1:
        parser.error("--scale must be at least 1")
    if args.frames is not None and args.frames < 0:
        parser.error("--frames must not be negative")
    return args


def _load_track(music: Music, filename: str) -> None:
    try:
        music.load(filename)
    except (FileNotFoundError, pygame.error) as exc:
        print(f"mightydoom: no music: {exc}", file=sys.stderr)


def main(argv: list[str] | None = None) -> int:
    """Open the window and run the menu and tutorial until the window closes."""
    args = _parse_args(argv)
    pygame.init()
    try:
        window = pygame.display.set_mode((SCREEN_WIDTH * args.scale, SCREEN_HEIGHT * args.scale))
        pygame.display.set_caption(TITLE)
        screen = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT))
        renderer = Renderer()
        music = Music(args.assets)
        clock = pygame.time.Clock()
        start = time.monotonic()

        state = INITIAL_STATE
        entered: GameState | None = None
        menu = Menu()
        tutorial: Tutorial | None = None
        frame = 0

        while state is not GameState.EXIT and (args.frames is None or frame < args.frames):
            events = pygame.event.get()
            if any(event.type == pygame.QUIT for event in events):
                state = GameState.EXIT
                break
            controls = read_controls(pygame.key.get_pressed(), events)
            now = time.monotonic() - start

            if state is not entered:
                if entered is not None:
                    music.stop()
                if state is GameState.MENU:
                    menu = Menu(stick_pressed=menu.stick_pressed)
                    _load_track(music, MENU_TRACK)
                elif state is GameState.TUTORIAL:
                    tutorial = Tutorial(now=now)
                    _load_track(music, TUTORIAL_TRACK)
                entered = state

            def menu_frame() -> GameState | None:
                renderer.draw_menu(screen, menu)
                music.play()
                before = menu.index
                next_state = menu.handle_input(controls)
                if menu.index != before:
                    pygame.time.wait(MENU_REPEAT_MS)
                return next_state

            def tutorial_frame() -> GameState | None:
                assert tutorial is not None
                music.play()
                next_state = tutorial.step(controls, now)
                renderer.draw_game(screen, tutorial, now)
                return next_state

            state = run_state(
                state, {GameState.MENU: menu_frame, GameState.TUTORIAL: tutorial_frame}
            )

            pygame.transform.scale(screen, window.get_size(), window)
            pygame.display.flip()
            clock.tick(FRAME_RATE)
            frame += 1

        music.stop()
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())