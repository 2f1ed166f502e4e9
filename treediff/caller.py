"""Run git inside a repository and collect its output."""

from __future__ import annotations

import subprocess
from dataclasses import dataclass, field

import structlog

from treediff.command import render
from treediff.errors import GitCommandError, GitTimeoutError
from treediff.git import normalize_directory_path, require_git_binary
from treediff.settings import settings

logger = structlog.get_logger(__name__)


@dataclass
class CallerResult:
    """Output of one finished git invocation."""

    command: list[str]
    returncode: int
    output: str = ""
    stderr: str = ""
    _lines: list[str] | None = field(default=None, init=False, repr=False, compare=False)

    @property
    def output_lines(self) -> list[str]:
        """Stdout split on newlines, without the empty string after the last one."""
        if self._lines is None:
            lines = self.output.split("\n")
            if lines and lines[-1] == "":
                lines.pop()
            self._lines = lines
        return self._lines


class Caller:
    """Executes git commands with ``git -C <repository_path>``.

    Args:
        repository_path: Working tree (or bare repository) to run git in.
        git_binary: Executable name; defaults to ``settings.git_binary()``.
        timeout: Seconds before the process is killed; defaults to
            ``settings.command_timeout()`` where 0 means no limit.
    """

    def __init__(
        self,
        repository_path: str,
        *,
        git_binary: str | None = None,
        timeout: float | None = None,
    ) -> None:
        self.repository_path = normalize_directory_path(repository_path)
        self._git_binary = git_binary
        self._timeout = timeout

    def _resolve_timeout(self) -> float | None:
        timeout = self._timeout if self._timeout is not None else settings.command_timeout()
        return timeout or None

    def execute(self, args: list[str]) -> CallerResult:
        """Run ``git <args>`` and return its output.

        Raises:
            GitUnavailableError: The git executable is missing.
            GitCommandError: Git exited with a non-zero status.
            GitTimeoutError: Git ran longer than the configured timeout.
        """
        git = require_git_binary(self._git_binary or settings.git_binary())
        timeout = self._resolve_timeout()
        logger.debug("Running git", command=render(args), cwd=self.repository_path)
        try:
            proc = subprocess.run(
                [git, "-C", self.repository_path, *args],
                capture_output=True,
                timeout=timeout,
            )
        except subprocess.TimeoutExpired as exc:
            logger.warning("Git timed out", command=render(args), timeout_s=timeout)
            raise GitTimeoutError(args, timeout or 0) from exc

        # Decode without newline translation; "\r" in file content must survive.
        stdout = (proc.stdout or b"").decode("utf-8", errors="replace")
        stderr = (proc.stderr or b"").decode("utf-8", errors="replace")

        if proc.returncode != 0:
            logger.warning(
                "Git failed",
                command=render(args),
                returncode=proc.returncode,
                stderr=stderr.strip()[:500],
            )
            raise GitCommandError(args, proc.returncode, stderr)

        return CallerResult(
            command=list(args),
            returncode=proc.returncode,
            output=stdout,
            stderr=stderr,
        )
