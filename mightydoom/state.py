"""Top-level game states and the dispatch between them."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from enum import Enum, auto


class GameState(Enum):
    """The screens the game can be in."""

    MENU = auto()
    TUTORIAL = auto()
    GAME = auto()
    EXIT = auto()


INITIAL_STATE = GameState.MENU


def run_state(
    state: GameState,
    handlers: Mapping[GameState, Callable[[], GameState | None]],
) -> GameState:
    """Run the handler registered for ``state`` and return the next state.

    A state without a handler is left as it is, and so is one whose
    handler returns ``None``.
    """
    handler = handlers.get(state)
    if handler is None:
        return state
    next_state = handler()
    return state if next_state is None else GameState(next_state)