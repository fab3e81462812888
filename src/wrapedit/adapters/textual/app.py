"""Executable Textual app that hosts the editor."""

from __future__ import annotations

import argparse
import asyncio
import os
import signal
import sys
from contextlib import suppress
from dataclasses import dataclass
from typing import Any, Optional, Sequence

try:  # pragma: no cover - imported only when the app is run
    from rich.text import Text
    from textual import events
    from textual.app import App, ComposeResult
    from textual.widgets import Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use wrapedit.adapters.textual.app"
    ) from exc

from wrapedit import __version__
from wrapedit.buffer import STDIN_PATH
from wrapedit.config import EditorConfig
from wrapedit.editor import Editor, create_editor
from wrapedit.runtime import telemetry

from .controller import EditorController, TextualUIHooks
from .paint import Frame

SHUTDOWN_SIGNALS = ("SIGHUP", "SIGINT", "SIGTERM")


@dataclass
class UIState:
    status_text: str = ""
    message: str = ""


def _with_cursor(text: str, column: Optional[int]) -> Text:
    if column is None:
        return Text(text)
    rendered = Text(text.ljust(column + 1))
    rendered.stylize("reverse", column, column + 1)
    return rendered


class WrapEditApp(App[None]):
    """Status bar, wrapped buffer view and command line."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
	}

	#buffer-view {
		height: 1fr;
		content-align: left top;
	}

	#command-line {
		height: 1;
		background: $surface-darken-2;
	}
	"""

    BINDINGS = [
        ("ctrl+c", "quit", "Quit"),
    ]

    def __init__(self, editor: Editor) -> None:
        super().__init__()
        self.editor = editor
        self.controller: EditorController | None = None
        self._state = UIState()
        self._status_widget: Static | None = None
        self._buffer_widget: Static | None = None
        self._command_widget: Static | None = None

    def compose(self) -> ComposeResult:
        self._status_widget = Static("", id="status-line")
        self._buffer_widget = Static("", id="buffer-view")
        self._command_widget = Static("", id="command-line")
        yield self._status_widget
        yield self._buffer_widget
        yield self._command_widget

    async def on_mount(self) -> None:
        hooks = TextualUIHooks(
            update_frame=self._update_frame,
            update_status=self._update_status,
            handle_event=self._handle_event,
            request_exit=self.exit,
            log=self._log_line,
        )
        self.controller = EditorController(
            self.editor, hooks, size=(self.size.width, self.size.height)
        )
        self._install_signal_handlers()

    def on_resize(self, event: events.Resize) -> None:
        if self.controller:
            self.controller.resize(event.size.width, event.size.height)

    async def on_key(self, event: events.Key) -> None:
        if not self.controller:
            return
        self._state.message = ""
        self.controller.handle_textual_key(event.key, text=event.character)
        event.stop()

    def on_click(self, event: events.Click) -> None:
        if self.controller:
            self.controller.handle_click(event.screen_x, event.screen_y)

    async def action_quit(self) -> None:
        if self.controller:
            self.controller.quit()
        self.exit()

    def _install_signal_handlers(self) -> None:
        loop = asyncio.get_running_loop()
        for name in SHUTDOWN_SIGNALS:
            signum = getattr(signal, name, None)
            if signum is None:
                continue
            # not available on every event loop (e.g. Windows proactor)
            with suppress(NotImplementedError, RuntimeError):
                loop.add_signal_handler(signum, self._on_signal, name)

    def _on_signal(self, name: str) -> None:
        telemetry.record_event("editor.signal", data={"signal": name})
        if self.controller:
            self.controller.quit()
        self.exit()

    def _update_frame(self, frame: Frame) -> None:
        row, column = frame.cursor
        self._state.status_text = frame.status
        if self._status_widget:
            self._status_widget.update(frame.status)
        if self._buffer_widget:
            body = Text()
            for index, line in enumerate(frame.rows, start=1):
                if index > 1:
                    body.append("\n")
                body.append_text(_with_cursor(line, column if index == row else None))
            self._buffer_widget.update(body)
        if self._command_widget:
            command = frame.command
            if self._state.message and frame.mode != "command":
                command = self._state.message
            cursor = column if row == len(frame.rows) + 1 else None
            self._command_widget.update(_with_cursor(command, cursor))

    def _update_status(self, message: str) -> None:
        self._state.message = message
        if self._command_widget and self.controller and self.controller.frame:
            self._update_frame(self.controller.frame)

    def _handle_event(self, name: str, payload: Any | None) -> None:
        del payload
        if name == "editor.quit":
            self._state.message = ""

    def _log_line(self, line: str) -> None:
        telemetry.get_logger("wrapedit.adapters.textual").debug(line)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="wrapedit", description="Minimal modal text editor."
    )
    parser.add_argument(
        "paths",
        nargs="*",
        help=f"Files to open; '{STDIN_PATH}' reads standard input",
    )
    parser.add_argument("--tab-width", type=int, default=None)
    parser.add_argument("--linebuf-size", type=int, default=None)
    parser.add_argument(
        "--max-repeat",
        type=int,
        default=None,
        help="Cap for repetition counts",
    )
    parser.add_argument(
        "--no-auto-indent",
        dest="auto_indent",
        action="store_false",
        default=None,
        help="Do not carry indentation over to new lines",
    )
    parser.add_argument(
        "--no-line-numbers",
        dest="line_numbers",
        action="store_false",
        default=None,
        help="Hide the relative line numbers",
    )
    parser.add_argument(
        "--backup",
        dest="backup_on_write",
        action="store_true",
        default=None,
        help="Copy the file to the backup path before each save",
    )
    parser.add_argument("--backup-path", default=None)
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> EditorConfig:
    """Defaults, then ``WRAPEDIT_*`` environment, then command-line flags."""

    return EditorConfig.from_env().with_overrides(
        tab_width=args.tab_width,
        default_linebuf_size=args.linebuf_size,
        max_cmd_repetition=args.max_repeat,
        auto_indent=args.auto_indent,
        line_numbers=args.line_numbers,
        backup_on_write=args.backup_on_write,
        backup_path=args.backup_path,
    )


def _reattach_terminal() -> None:
    # stdin was consumed as a file; the UI reads keys from the controlling tty
    fd = os.open("/dev/tty", os.O_RDONLY)
    os.dup2(fd, 0)
    os.close(fd)
    sys.stdin = open(0, closefd=False)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    editor = create_editor(build_config(args), paths=args.paths)
    if STDIN_PATH in args.paths and not sys.stdin.isatty():
        _reattach_terminal()
    app = WrapEditApp(editor)
    app.run()
    editor.quit()


if __name__ == "__main__":  # pragma: no cover - manual run
    main()
