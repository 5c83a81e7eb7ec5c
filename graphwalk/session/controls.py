"""
Console key bindings for driving a session from stdin.
"""

from __future__ import annotations

from graphwalk.session.engine import InputEvent

# Input text -> event. None means quit.
KEY_BINDINGS: dict[str, InputEvent | None] = {
    "": InputEvent.STEP,
    "s": InputEvent.STEP,
    "step": InputEvent.STEP,
    "r": InputEvent.RESET,
    "reset": InputEvent.RESET,
    "\t": InputEvent.SWITCH,
    "a": InputEvent.SWITCH,
    "switch": InputEvent.SWITCH,
    "q": None,
    "quit": None,
}

HELP_TEXT = "[Enter] step   [r] reset   [a/Tab] switch algorithm   [q] quit"


def parse_command(text: str) -> InputEvent | None:
    """
    Map a line of console input to an input event.

    Returns:
        The event, or None for quit

    Raises:
        ValueError: If the input is not a known command
    """
    key = text if text == "\t" else text.strip().lower()
    if key not in KEY_BINDINGS:
        raise ValueError(f"Unknown command '{text.strip()}'. {HELP_TEXT}")
    return KEY_BINDINGS[key]
