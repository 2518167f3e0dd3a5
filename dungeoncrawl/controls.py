"""Keyboard, mouse and window events."""

from __future__ import annotations

import os

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
import pygame  # noqa: E402


def _key_name(key: int) -> str:
    """Capitalised key names such as ``A``, ``Right`` or ``Space``."""
    name = pygame.key.name(key)
    if len(name) == 1:
        return name.upper()
    return name.title()


class Input:
    """Collects input events and remembers the most recent key press.

    Events are read from the window's event queue, so the window must be open
    before ``poll_events`` is called.
    """

    def __init__(self) -> None:
        self._last_keypress = ""
        self.last_mouse_click: tuple[int, int] = (-1, -1)

    def take_last_keypress(self) -> str:
        """Return the most recent key press and forget it."""
        key, self._last_keypress = self._last_keypress, ""
        return key

    def set_last_keypress(self, key: str) -> None:
        self._last_keypress = key

    def poll_events(self) -> list[str]:
        """Names of all events since the last call: ``Quit``, ``Click`` or a key name."""
        inputs: list[str] = []
        try:
            events = pygame.event.get()
        except pygame.error as error:
            raise RuntimeError(f"Unable to read events: {error}") from error
        for event in events:
            if event.type == pygame.QUIT:
                inputs.append("Quit")
            elif event.type == pygame.KEYDOWN:
                inputs.append(_key_name(event.key))
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == pygame.BUTTON_LEFT:
                inputs.append("Click")
                self.last_mouse_click = tuple(event.pos)
        return inputs