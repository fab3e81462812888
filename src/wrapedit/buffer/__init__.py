"""Line storage, buffers and the buffer registry."""

from .buffer import SCRATCH_NAME, STDIN_PATH, Buffer
from .lines import Line, LineIndex, LineStore
from .registry import BufferRegistry
from .state import Coord, Cursor
from .sync import BufferMirror, BufferSync

__all__ = [
    "Buffer",
    "BufferMirror",
    "BufferRegistry",
    "BufferSync",
    "Coord",
    "Cursor",
    "Line",
    "LineIndex",
    "LineStore",
    "SCRATCH_NAME",
    "STDIN_PATH",
]
