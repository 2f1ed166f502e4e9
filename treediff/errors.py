"""Exceptions raised while talking to git."""

from __future__ import annotations

from treediff.models import ErrorDetail


class GitError(Exception):
    """Base class for every failure surfaced by treediff.

    Args:
        message: Human-readable error message.
        code: Stable error code string.
    """

    code = "GIT_ERROR"

    def __init__(self, message: str, *, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code

    def details(self) -> dict | None:
        return None

    def to_detail(self) -> ErrorDetail:
        """Return the structured payload for this error."""
        return ErrorDetail(code=self.code, message=self.message, details=self.details())


class GitUnavailableError(GitError):
    """The git executable could not be located."""

    code = "GIT_UNAVAILABLE"


class NotARepositoryError(GitError):
    """A directory that was expected to hold a repository does not."""

    code = "NOT_A_REPOSITORY"


class GitCommandError(GitError):
    """Git ran but exited with a non-zero status."""

    code = "GIT_ERROR"

    def __init__(self, command: list[str], returncode: int, stderr: str = "") -> None:
        self.command = list(command)
        self.returncode = returncode
        self.stderr = stderr
        message = (stderr or "").strip() or f"exit status {returncode}"
        super().__init__(f"git {' '.join(self.command)} failed: {message}")

    def details(self) -> dict | None:
        return {
            "command": self.command,
            "returncode": self.returncode,
            "stderr": self.stderr,
        }


class RevisionNotFoundError(GitCommandError):
    """A revision identifier does not name an existing commit."""

    code = "REVISION_NOT_FOUND"

    def __init__(self, revision: str, command: list[str], returncode: int, stderr: str = "") -> None:
        self.revision = revision
        super().__init__(command, returncode, stderr)

    def details(self) -> dict | None:
        payload = super().details() or {}
        payload["revision"] = self.revision
        return payload


class GitTimeoutError(GitError):
    """Git did not finish within the configured timeout."""

    code = "GIT_TIMEOUT"

    def __init__(self, command: list[str], timeout: float) -> None:
        self.command = list(command)
        self.timeout = timeout
        super().__init__(f"git {' '.join(self.command)} timed out after {timeout}s")

    def details(self) -> dict | None:
        return {"command": self.command, "timeout": self.timeout}
