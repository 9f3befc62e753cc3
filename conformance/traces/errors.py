"""
Exceptions raised by the trace codec and trace comparison.

Every error carries the dotted path of the value it concerns (empty for
whole-document errors) so callers can point at the broken part of a trace.
"""

from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from .compare import Difference


class TraceError(Exception):
    """Base exception for all trace errors.

    Attributes:
        message: Human-readable error message
        path: Dotted location inside the trace, e.g. ``steps[3].action.chain``
    """

    def __init__(self, message: str, path: str = "") -> None:
        super().__init__(f"{path}: {message}" if path else message)
        self.message = message
        self.path = path


class TraceEncodeError(TraceError):
    """Raised when a value cannot be represented in the wire form."""
    pass


class TraceDecodeError(TraceError):
    """Raised on unknown discriminators, missing fields or malformed values."""
    pass


class TraceIOError(TraceError):
    """Raised when a trace document cannot be read or written."""

    def __init__(self, message: str, file_path: str) -> None:
        super().__init__(message)
        self.file_path = file_path


class TraceMismatchError(TraceError):
    """Raised when two traces (or a trace and live state) differ.

    The structured differences are kept on ``differences``.
    """

    def __init__(self, differences: List["Difference"], message: str = "") -> None:
        count = len(differences)
        super().__init__(message or f"{count} difference{'s' if count != 1 else ''} found")
        self.differences = differences


class UnknownProfileError(TraceError, KeyError):
    """Raised when a wire schema profile name is not registered."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown schema profile: {name}")
        self.name = name

    def __str__(self) -> str:
        return self.message
