"""Window event handling: quitting, resizing and logging input."""

from __future__ import annotations

from collections.abc import Callable

ESCAPE = 0xFF1B

_MOUSE_BUTTONS = {1: "Left", 2: "Middle", 4: "Right", 8: "X1", 16: "X2"}


def _button_name(button: int) -> str:
    return _MOUSE_BUTTONS.get(button, f"Unknown({button})")


class EventHandler:
    """Tracks whether the app runs and the window size; reports other input."""

    def __init__(
        self,
        width: int,
        height: int,
        output: Callable[[str], object] = print,
    ) -> None:
        self.running = True
        self.width = width
        self.height = height
        self._output = output

    def on_close(self) -> None:
        self.running = False

    def on_key_press(self, symbol: int, modifiers: int) -> None:
        if symbol == ESCAPE:
            self.running = False
            return
        self._output(f"Key down: {symbol}, Keymod: {modifiers}")

    def on_key_release(self, symbol: int, modifiers: int) -> None:
        self._output(f"Key up: {symbol}, Keymod: {modifiers}")

    def on_text(self, text: str) -> None:
        self._output(f"Text input: {text}")

    def on_resize(self, width: int, height: int) -> None:
        self.width = width
        self.height = height

    def on_deactivate(self) -> None:
        self._output("App lost focus -> pause game!")

    def on_mouse_motion(self, x: int, y: int, dx: int, dy: int) -> None:
        self._output(f"Moved mouse: ({x}|{y}), Velocity: ({dx}|{dy})")

    def on_mouse_press(self, x: int, y: int, button: int, modifiers: int) -> None:
        self._output(f"Pressed mouse button: {_button_name(button)}")

    def on_mouse_release(self, x: int, y: int, button: int, modifiers: int) -> None:
        self._output(f"Released mouse button: {_button_name(button)}")

    def on_mouse_scroll(self, x: int, y: int, scroll_x: float, scroll_y: float) -> None:
        self._output(f"Mouse wheel: {scroll_x}, {scroll_y}; Position: ({x}|{y})")