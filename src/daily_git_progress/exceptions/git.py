"""Version-control tool exceptions: failed or unparseable git invocations."""

from typing import Optional, Sequence

from .base import DailyProgressError


class ToolInvocationError(DailyProgressError):
    """Raised when a git invocation exits non-zero, times out, or cannot start."""

    def __init__(self, command: Sequence[str], reason: str, returncode: Optional[int] = None):
        details = {"reason": reason}
        if returncode is not None:
            details["returncode"] = str(returncode)

        super().__init__(f"git {' '.join(command)} failed", details=details)
        self.command = list(command)
        self.reason = reason
        self.returncode = returncode


class MalformedOutputError(ToolInvocationError):
    """Raised when git output does not match the requested format."""

    def __init__(self, command: Sequence[str], line: str):
        super().__init__(command, f"unparseable output line: {line!r}")
        self.line = line
