"""Core action implementations: modes, repaint and shutdown."""

from __future__ import annotations

from wrapedit.context import EditorContext
from wrapedit.keymaps import Quit, Repaint, SetMode
from wrapedit.modes.base_mode import ModeResult
from wrapedit.runtime import telemetry


def set_mode(context: EditorContext, operation: SetMode) -> ModeResult:
    del context
    return ModeResult(
        consumed=True, switch_to=operation.mode, message=f"enter_{operation.mode}"
    )


def repaint(context: EditorContext, operation: Repaint) -> None:
    del operation
    context.bus.emit("editor.repaint", None)


def quit_editor(context: EditorContext, operation: Quit) -> ModeResult:
    del operation
    names = [buffer.name for buffer in context.buffers]
    context.buffers.close_all()
    context.cmdbuf.release()
    context.running = False
    telemetry.record_event("editor.quit", data={"buffers": len(names)})
    context.bus.emit("editor.quit", names)
    return ModeResult(consumed=True, status="quit")


__all__ = ["quit_editor", "repaint", "set_mode"]
