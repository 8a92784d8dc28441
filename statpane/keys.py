"""Keyboard dispatch from decoded key tokens to navigation transitions."""

from __future__ import annotations

import enum
from collections.abc import Callable

from .browser import NavigationState


class Action(enum.Enum):
    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    ENTER = "enter"
    ASCEND = "ascend"
    QUIT = "quit"


DEFAULT_KEY_BINDINGS: dict[Action, tuple[str, ...]] = {
    Action.MOVE_UP: ("UP",),
    Action.MOVE_DOWN: ("DOWN",),
    Action.ENTER: ("ENTER_CR", "ENTER_LF"),
    Action.ASCEND: ("BACKSPACE",),
    Action.QUIT: ("q",),
}


class BrowserKeyHandler:
    """Applies one transition per key to a bound ``NavigationState``.

    ``handle`` returns ``True`` only for the quit action. ``changed`` reports
    whether the last key altered the state, so the loop can skip redraws.
    """

    def __init__(
        self,
        state: NavigationState,
        bindings: dict[Action, tuple[str, ...]] | None = None,
    ) -> None:
        """Bind key tokens to ``state`` transitions per ``bindings``."""
        self.state = state
        self.changed = False
        transitions: dict[Action, Callable[[], bool]] = {
            Action.MOVE_UP: state.move_up,
            Action.MOVE_DOWN: state.move_down,
            Action.ENTER: state.enter,
            Action.ASCEND: state.ascend,
        }
        self._actions: dict[str, Action] = {}
        self._transitions = transitions
        for action, combos in (bindings or DEFAULT_KEY_BINDINGS).items():
            for combo in combos:
                self._actions[combo] = action

    def action_for(self, key: str) -> Action | None:
        """Return the action bound to ``key``, or ``None`` when unbound."""
        return self._actions.get(key)

    def handle(self, key: str) -> bool:
        """Apply the transition bound to ``key`` and return ``True`` on quit."""
        self.changed = False
        action = self.action_for(key)
        if action is None:
            return False
        if action is Action.QUIT:
            return True
        self.changed = bool(self._transitions[action]())
        return False


__all__ = [
    "Action",
    "DEFAULT_KEY_BINDINGS",
    "BrowserKeyHandler",
]
