"""Keyboard, mouse and text input state, updated once per frame."""

from __future__ import annotations

import enum
from collections import deque
from functools import partial
from typing import Callable

from .input import KEY_UNKNOWN, Binding, InputType

KEYS_BUFFER_SIZE = 1032
MOUSE_KEYS_OFFSET = 1024


class KeyAction(enum.IntEnum):
    """What happened to a key or mouse button."""

    RELEASE = 0
    PRESS = 1
    REPEAT = 2


class Events:
    """Input state of a window.

    The on_* handlers record raw input as it arrives. poll() starts a new
    frame, applies everything recorded since the previous poll and then
    refreshes the named bindings.
    """

    def __init__(self) -> None:
        self._keys = [False] * KEYS_BUFFER_SIZE
        self._frames = [0] * KEYS_BUFFER_SIZE
        self._current = 0
        self.delta_x = 0.0
        self.delta_y = 0.0
        self.x = 0.0
        self.y = 0.0
        self.scroll = 0
        self.cursor_locked = False
        self._cursor_started = False
        self.codepoints: list[int] = []
        self.pressed_keys: list[int] = []
        self.bindings: dict[str, Binding] = {}
        self._pending: deque[Callable[[], None]] = deque()

    @property
    def frame(self) -> int:
        """Number of the current frame."""
        return self._current

    def poll(self) -> None:
        """Start a new frame, apply recorded input and update bindings."""
        self._current += 1
        self.delta_x = 0.0
        self.delta_y = 0.0
        self.scroll = 0
        self.codepoints.clear()
        self.pressed_keys.clear()
        while self._pending:
            self._pending.popleft()()

        for binding in self.bindings.values():
            binding.just_change = False
            if binding.type is InputType.keyboard:
                new_state = self.pressed(binding.code)
            else:
                new_state = self.clicked(binding.code)
            if new_state != binding.state:
                binding.state = new_state
                binding.just_change = True

    def pressed(self, keycode: int) -> bool:
        """Return True while the key is held."""
        if keycode < 0 or keycode >= KEYS_BUFFER_SIZE:
            return False
        return self._keys[keycode]

    def jpressed(self, keycode: int) -> bool:
        """Return True only in the frame the key went down."""
        return self.pressed(keycode) and self._frames[keycode] == self._current

    def clicked(self, button: int) -> bool:
        """Return True while the mouse button is held."""
        return self.pressed(MOUSE_KEYS_OFFSET + button)

    def jclicked(self, button: int) -> bool:
        """Return True only in the frame the mouse button went down."""
        return self.jpressed(MOUSE_KEYS_OFFSET + button)

    def bind(self, name: str, input_type: InputType, code: int) -> None:
        """Bind a name to a key or mouse button, replacing any earlier binding."""
        self.bindings[name] = Binding(input_type, code)

    def active(self, name: str) -> bool:
        """Return True while the named binding is held; False if unbound."""
        binding = self.bindings.get(name)
        return binding is not None and binding.active()

    def jactive(self, name: str) -> bool:
        """Return True in the frame the named binding went down; False if unbound."""
        binding = self.bindings.get(name)
        return binding is not None and binding.jactive()

    def on_key(self, key: int, action: int) -> None:
        """Record a keyboard key action."""
        if key == KEY_UNKNOWN:
            return
        self._check_index(key)
        self._pending.append(partial(self._apply_key, key, KeyAction(action)))

    def on_mouse_button(self, button: int, action: int) -> None:
        """Record a mouse button action."""
        self._check_index(MOUSE_KEYS_OFFSET + button)
        self._pending.append(partial(self._apply_button, button, KeyAction(action)))

    def on_cursor(self, xpos: float, ypos: float) -> None:
        """Record a cursor move to (xpos, ypos)."""
        self._pending.append(partial(self._apply_cursor, xpos, ypos))

    def on_scroll(self, yoffset: float) -> None:
        """Record a vertical scroll."""
        self._pending.append(partial(self._apply_scroll, yoffset))

    def on_char(self, codepoint: int) -> None:
        """Record a typed character."""
        self._pending.append(partial(self.codepoints.append, codepoint))

    @staticmethod
    def _check_index(index: int) -> None:
        if index < 0 or index >= KEYS_BUFFER_SIZE:
            raise IndexError(f"input code {index} is out of range")

    def _set(self, index: int, state: bool) -> None:
        self._keys[index] = state
        self._frames[index] = self._current

    def _apply_key(self, key: int, action: KeyAction) -> None:
        if action is KeyAction.PRESS:
            self._set(key, True)
            self.pressed_keys.append(key)
        elif action is KeyAction.RELEASE:
            self._set(key, False)
        else:
            self.pressed_keys.append(key)

    def _apply_button(self, button: int, action: KeyAction) -> None:
        if action is KeyAction.PRESS:
            self._set(MOUSE_KEYS_OFFSET + button, True)
        elif action is KeyAction.RELEASE:
            self._set(MOUSE_KEYS_OFFSET + button, False)

    def _apply_cursor(self, xpos: float, ypos: float) -> None:
        if self._cursor_started:
            self.delta_x += xpos - self.x
            self.delta_y += ypos - self.y
        else:
            self._cursor_started = True
        self.x = xpos
        self.y = ypos

    def _apply_scroll(self, yoffset: float) -> None:
        self.scroll = int(self.scroll + yoffset)