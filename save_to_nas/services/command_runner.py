"""Async runner for the external commands the NAS services shell out to."""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence


class CommandTimeoutError(Exception):
    """Raised when an external command exceeds the configured timeout."""
    pass


@dataclass
class CommandResult:
    args: List[str]
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    @property
    def error_message(self) -> str:
        """Best available description of why the command failed."""
        message = (self.stderr or self.stdout).strip()
        if message:
            return message
        return f"Command '{' '.join(self.args)}' exited with code {self.returncode}"


@dataclass
class CommandRunner:
    """
    Runs commands as argument lists, never through a shell.

    The child never inherits stdin, which carries the stdio MCP stream.
    Launch failures (command not installed, permission denied) propagate
    as OSError; callers translate them into their own error types.
    """

    timeout_seconds: Optional[float] = None
    sudo_prefix: List[str] = field(default_factory=lambda: ["sudo"])

    async def run(self, args: Sequence[str]) -> CommandResult:
        cmd = list(args)
        logging.debug(f"Running command: {cmd}")

        process = await asyncio.create_subprocess_exec(
            *cmd,
            stdin=asyncio.subprocess.DEVNULL,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )

        try:
            stdout, stderr = await asyncio.wait_for(
                process.communicate(), timeout=self.timeout_seconds
            )
        except asyncio.TimeoutError:
            logging.error(f"Command timed out after {self.timeout_seconds}s: {cmd}")
            process.kill()
            await process.wait()
            raise CommandTimeoutError(
                f"Command '{' '.join(cmd)}' timed out after {self.timeout_seconds}s"
            )

        result = CommandResult(
            args=cmd,
            returncode=process.returncode,
            stdout=stdout.decode(errors="replace") if stdout else "",
            stderr=stderr.decode(errors="replace") if stderr else "",
        )
        if not result.ok:
            logging.debug(f"Command {cmd} exited with {result.returncode}: {result.error_message}")
        return result

    async def run_privileged(self, args: Sequence[str], use_sudo: bool = True) -> CommandResult:
        """Run a command with elevated privileges (sudo) when requested."""
        if use_sudo:
            return await self.run([*self.sudo_prefix, *args])
        return await self.run(args)
