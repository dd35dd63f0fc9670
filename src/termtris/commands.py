"""Discrete input commands consumed by :meth:`GameState.tick`."""

from __future__ import annotations

from enum import Enum
from typing import Union


class Command(str, Enum):
    """Actions an input layer can deliver once per frame."""

    MOVE_LEFT = "move-left"
    MOVE_RIGHT = "move-right"
    SOFT_DROP = "soft-drop"
    ROTATE = "rotate"
    HARD_DROP = "hard-drop"
    RESTART = "restart"
    QUIT = "quit"

    @classmethod
    def parse(cls, value: Union["Command", str]) -> "Command":
        """Return the command matching ``value``.

        ``value`` may be a :class:`Command`, its string value (``"move-left"``)
        or its member name (``"MOVE_LEFT"``).

        Raises:
            ValueError: If ``value`` names no command.
        """

        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for command in cls:
                if value == command.value or value.upper() == command.name:
                    return command
        raise ValueError(f"Unknown command: {value!r}")
