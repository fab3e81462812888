"""Shell escape used by ``!`` command arguments."""

from __future__ import annotations

import subprocess

from wrapedit.errors import ShellCommandError
from wrapedit.runtime import telemetry

DEFAULT_OUTPUT_LIMIT = 64 * 1024


def run_shell(
    command: str,
    *,
    timeout: float = 10.0,
    limit: int = DEFAULT_OUTPUT_LIMIT,
) -> str:
    """Return the standard output of ``command`` run through ``/bin/sh``.

    At most ``limit`` bytes are kept and decoded as UTF-8 with replacement.
    A command that cannot be spawned yields ``""``; one that outlives
    ``timeout`` seconds raises ``ShellCommandError``.
    """

    with telemetry.span(
        "commands::shell",
        component="commands",
        metadata={"command": command},
    ) as handle:
        try:
            completed = subprocess.run(
                command,
                shell=True,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.DEVNULL,
                timeout=timeout,
            )
        except subprocess.TimeoutExpired as exc:
            raise ShellCommandError(
                f"Shell command timed out after {timeout:g}s", command=command
            ) from exc
        except OSError as exc:
            handle.warn(f"spawn failed: {exc}")
            return ""
        except subprocess.SubprocessError as exc:
            raise ShellCommandError(
                f"Shell output unreadable: {exc}", command=command
            ) from exc

        output = (completed.stdout or b"")[:limit]
        handle.add_metadata("returncode", completed.returncode)
        handle.add_metadata("bytes", len(output))
    return output.decode("utf-8", errors="replace")


__all__ = ["DEFAULT_OUTPUT_LIMIT", "run_shell"]
