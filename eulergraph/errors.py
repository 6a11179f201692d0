from __future__ import annotations

__all__ = [
    "EulerGraphError",
    "InvalidConfiguration",
    "OutputError",
]


class EulerGraphError(Exception):
    """Base class for every error raised by eulergraph."""


class InvalidConfiguration(EulerGraphError, ValueError):
    """Construction parameters were rejected before any work started."""


class OutputError(EulerGraphError, OSError):
    """
    Writing a finished graph failed.

    The graph itself is left untouched, so the caller may retry with another
    destination or another format.

    Parameters
    ----------
    path : str
        Destination that could not be written.
    reason : str, optional
        Underlying error message.
    """

    def __init__(self, path, reason: str | None = None):
        self.path = str(path)
        self.reason = reason
        msg = f"Cannot open file \"{self.path}\" for writing"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)
