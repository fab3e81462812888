"""Bridges host key/mouse/resize events to the editor and pushes frames."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Optional

from wrapedit.buffer import BufferMirror
from wrapedit.context import EditorContext
from wrapedit.editor import Editor
from wrapedit.modes import KeyInput, ModeResult
from wrapedit.runtime import telemetry
from wrapedit.viewport import click

from .paint import CHROME_ROWS, Frame, render_frame

BUS_EVENTS = (
    "mode.switch",
    "command.submit",
    "command.error",
    "editor.repaint",
    "editor.quit",
    "buffer.saved",
    "buffer.loaded",
)

REPORTED_STATUSES = frozenset({"error", "not_found", "save_skipped"})

NAMED_KEYS = {
    "escape": "ESC",
    "enter": "ENTER",
    "return": "ENTER",
    "tab": "\t",
    "backspace": "BACKSPACE",
    "delete": "DELETE",
    "up": "UP",
    "down": "DOWN",
    "left": "LEFT",
    "right": "RIGHT",
    "pageup": "PAGEUP",
    "pagedown": "PAGEDOWN",
}


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the controller to update Textual widgets."""

    update_frame: Callable[[Frame], None]
    update_status: Callable[[str], None] = _noop
    handle_event: Callable[[str, object | None], None] = _noop
    request_exit: Callable[[], None] = _noop
    log: Callable[[str], None] = _noop


def normalize_key(key: str, character: Optional[str] = None) -> Optional[KeyInput]:
    """Translate a Textual key name into the editor's key vocabulary.

    ``ctrl+s`` becomes ``KeyInput("s", ("CTRL",))``; printable characters
    stand for themselves; unknown names are upper-cased.
    """

    if key in NAMED_KEYS:
        return KeyInput(key=NAMED_KEYS[key])
    if key.startswith("ctrl+"):
        base = key[len("ctrl+") :]
        return KeyInput(key=base, modifiers=("CTRL",)) if base else None
    if character and len(character) == 1 and character.isprintable():
        return KeyInput(key=character, text=character)
    if not key:
        return None
    return KeyInput(key=key.upper())


class EditorController:
    """Drives an ``Editor`` from a Textual host and repaints after each event.

    Implements ``BufferSync`` so hosts can pull a mirror of the current buffer.
    """

    def __init__(
        self,
        editor: Editor,
        hooks: TextualUIHooks,
        *,
        size: tuple[int, int] = (80, 24),
    ) -> None:
        self.editor = editor
        self.hooks = hooks
        self.width, self.height = size
        self.frame: Optional[Frame] = None
        self.logger = telemetry.get_logger("wrapedit.adapters.textual")
        self._subscribe_events()
        self.resize(self.width, self.height)

    @property
    def context(self) -> EditorContext:
        return self.editor.context

    def handle_textual_key(
        self,
        key: str,
        *,
        text: Optional[str] = None,
        modifiers: Iterable[str] = (),
    ) -> Optional[ModeResult]:
        """Normalize a Textual key event and dispatch it."""

        event = normalize_key(key, text)
        if event is None:
            return None
        extra = tuple(str(mod).upper() for mod in modifiers if mod)
        if extra:
            event = KeyInput(
                key=event.key,
                modifiers=tuple(dict.fromkeys(event.modifiers + extra)),
                text=event.text,
            )
        return self.handle_key(event)

    def handle_key(self, event: KeyInput) -> ModeResult:
        self.hooks.log(f"key -> {event.key!r} mods={event.modifiers}")
        result = self.editor.feed(event)
        self.hooks.log(
            f"result <- status={result.status} switch_to={result.switch_to}"
        )
        if result.message and result.status in REPORTED_STATUSES:
            self.hooks.update_status(result.message)
        self._after_event()
        return result

    def handle_click(self, x: int, y: int) -> None:
        """Move the cursor to screen cell ``(x, y)``; the status bar is row 0."""

        buffer = self.context.buffer
        row = y - 1
        if buffer is None or not 0 <= row < self.context.viewport.height:
            return
        click(self.context.viewport, buffer, x, row)
        self._after_event()

    def resize(self, width: int, height: int) -> None:
        self.width = max(1, width)
        self.height = max(CHROME_ROWS + 1, height)
        self.context.viewport.resize(self.width, self.height - CHROME_ROWS)
        self.repaint()

    def quit(self) -> None:
        self.editor.quit()
        self._after_event()

    def pull_buffer(self) -> Optional[BufferMirror]:
        buffer = self.context.buffer
        if buffer is None:
            return None
        return buffer.mirror(attributes={"mode": self.context.mode})

    def repaint(self) -> Frame:
        self.frame = render_frame(self.context, self.width, self.height)
        self.hooks.update_frame(self.frame)
        return self.frame

    def _after_event(self) -> None:
        if not self.context.running:
            self.hooks.request_exit()
            return
        self.context.buffers.ensure_current()
        self.repaint()

    def _subscribe_events(self) -> None:
        bus = self.context.bus
        for event in BUS_EVENTS:
            bus.subscribe(
                event, lambda payload, name=event: self._handle_event(name, payload)
            )

    def _handle_event(self, name: str, payload: object | None) -> None:
        self.hooks.log(f"event -> {name} payload={payload!r}")
        self.hooks.handle_event(name, payload)
        if name == "command.error" and isinstance(payload, str):
            self.hooks.update_status(payload)
        elif name in {"buffer.saved", "buffer.loaded"} and isinstance(payload, dict):
            verb = "wrote" if name == "buffer.saved" else "read"
            self.hooks.update_status(f"{verb} {payload.get('path')}")
        elif name == "editor.repaint" and self.context.running:
            self.repaint()


__all__ = [
    "BUS_EVENTS",
    "EditorController",
    "NAMED_KEYS",
    "TextualUIHooks",
    "normalize_key",
]
