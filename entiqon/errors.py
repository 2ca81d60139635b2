"""Error types that carry a machine-readable cause and a human-readable reason.

CausableError distinguishes error categories programmatically while keeping a
detailed description. ProcessStageError also records the processing stage at
which the error happened and may wrap an underlying error.
"""

from __future__ import annotations

from typing import Optional


class CausableError(Exception):
    """An error with a short cause (category) and a descriptive reason."""

    def __init__(self, cause: str, reason: str) -> None:
        super().__init__(reason)
        self.cause = cause
        self.reason = reason

    def __str__(self) -> str:
        return self.reason


class ProcessStageError(CausableError):
    """An error raised at a given process stage, optionally wrapping another."""

    def __init__(
        self,
        stage: str,
        cause: str,
        reason: str,
        err: Optional[BaseException] = None,
    ) -> None:
        super().__init__(cause, reason)
        self.stage = stage
        self.err = err
        self.__cause__ = err

    def __str__(self) -> str:
        message = f"[{self.cause}] at stage {self.stage}: {self.reason}"
        if self.err is not None:
            return f"{message}: {self.err}"
        return message