"""Child-process helper shared by every language handler."""

from __future__ import annotations

import asyncio
from pathlib import Path

from leetlocal.exceptions import CommandFailedError, ToolchainStartError
from leetlocal.models import ExecutionResult

_CHUNK_SIZE = 4096


async def _drain(stream: asyncio.StreamReader | None) -> str:
    if stream is None:
        return ""
    chunks: list[bytes] = []
    while True:
        chunk = await stream.read(_CHUNK_SIZE)
        if not chunk:
            break
        chunks.append(chunk)
    return b"".join(chunks).decode("utf-8", errors="replace")


async def spawn(
    command: str,
    args: list[str],
    cwd: str | Path | None = None,
) -> ExecutionResult:
    """Run *command* with an explicit argument vector and capture its output.

    No shell is involved. Raises ToolchainStartError when the executable
    cannot be started; otherwise returns whatever the process produced,
    whatever its exit code.
    """
    try:
        proc = await asyncio.create_subprocess_exec(
            command,
            *args,
            stdin=asyncio.subprocess.DEVNULL,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
            cwd=str(cwd) if cwd is not None else None,
        )
    except OSError as e:
        # FileNotFoundError, PermissionError, exec format errors
        raise ToolchainStartError(command, e.strerror or str(e)) from e

    stdout, stderr = await asyncio.gather(_drain(proc.stdout), _drain(proc.stderr))
    exit_code = await proc.wait()
    return ExecutionResult(stdout=stdout, stderr=stderr, exit_code=exit_code)


async def run_command(
    command: str,
    args: list[str],
    cwd: str | Path | None = None,
) -> str:
    """Run a toolchain step; return stdout (or stderr if stdout is empty)."""
    result = await spawn(command, args, cwd=cwd)
    if result.exit_code != 0:
        raise CommandFailedError(result.exit_code, result.stderr)
    return result.output
