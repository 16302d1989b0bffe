"""Keyboard state shared between the host event pump and the tanks."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Hashable, Tuple


@dataclass(frozen=True)
class Controls:
    """Key ids bound to one player's logical actions."""

    forward: Hashable
    backward: Hashable
    left: Hashable
    right: Hashable
    shoot: Hashable

    def keys(self) -> Tuple[Hashable, ...]:
        return (self.forward, self.backward, self.left, self.right, self.shoot)


@dataclass
class InputState:
    """Current pressed level of every key seen so far.

    Written by key-down/key-up handlers and read once per frame. Only the
    latest level is observable; nothing is queued.
    """

    _pressed: Dict[Hashable, bool] = field(default_factory=dict)

    def press(self, key: Hashable) -> None:
        self._pressed[key] = True

    def release(self, key: Hashable) -> None:
        self._pressed[key] = False

    def is_pressed(self, key: Hashable) -> bool:
        return self._pressed.get(key, False)

    def clear(self) -> None:
        self._pressed.clear()


__all__ = ["Controls", "InputState"]
