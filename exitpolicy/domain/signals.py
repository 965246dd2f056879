"""Immutable termination signals handed to the exit-status resolver."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TypeAlias


class ErrorKind(Enum):
    """Classification tag carried by each error in a chain."""

    REBOOT = "reboot"
    REBOOT_FAILED = "reboot_failed"
    AUDIT_FAILURE = "audit_failure"
    UNCLASSIFIED = "unclassified"


@dataclass(frozen=True, slots=True)
class ErrorDescriptor:
    """One error of a chain, reduced to what exit-code resolution needs."""

    kind: ErrorKind
    message: str = ""


@dataclass(frozen=True, slots=True)
class Absent:
    """No termination information was supplied."""


@dataclass(frozen=True, slots=True)
class RawCode:
    """A numeric exit code reported directly by the caller."""

    code: int


@dataclass(frozen=True, slots=True)
class ErrorChain:
    """A primary error plus the causes it wraps, outermost first."""

    errors: tuple[ErrorDescriptor, ...]

    def __post_init__(self) -> None:
        if not self.errors:
            raise ValueError("An error chain needs at least one error")

    @classmethod
    def of(cls, *kinds: ErrorKind) -> ErrorChain:
        """Build a chain from bare classification tags."""
        return cls(tuple(ErrorDescriptor(kind) for kind in kinds))

    @property
    def kinds(self) -> tuple[ErrorKind, ...]:
        return tuple(error.kind for error in self.errors)


Signal: TypeAlias = Absent | RawCode | ErrorChain

ABSENT = Absent()


def _describe(exc: BaseException) -> ErrorDescriptor:
    kind = getattr(exc, "kind", ErrorKind.UNCLASSIFIED)
    if not isinstance(kind, ErrorKind):
        kind = ErrorKind.UNCLASSIFIED
    return ErrorDescriptor(kind=kind, message=str(exc))


def _linked_errors(exc: BaseException) -> list[BaseException]:
    """Return the errors ``exc`` wraps, in the order they were attached."""
    linked = list(getattr(exc, "wrapped_errors", ()) or ())
    if exc.__cause__ is not None:
        linked.append(exc.__cause__)
    elif exc.__context__ is not None and not exc.__suppress_context__:
        linked.append(exc.__context__)
    return linked


def chain_from_exception(exc: BaseException) -> ErrorChain:
    """
    Flatten an exception and everything it wraps into an ``ErrorChain``.

    The walk is depth-first and outermost first: the exception itself, then each
    explicitly wrapped error (``wrapped_errors``) with its own causes, then the
    ``__cause__`` (or an unsuppressed ``__context__``). Each exception is visited once.

    Parameters:
        exc (BaseException): The outermost error raised by the run.

    Returns:
        ErrorChain: The flattened chain.
    """
    descriptors: list[ErrorDescriptor] = []
    seen: set[int] = set()
    pending = [exc]
    while pending:
        current = pending.pop()
        if id(current) in seen:
            continue
        seen.add(id(current))
        descriptors.append(_describe(current))
        # Reverse so the first attached error is popped next.
        pending.extend(reversed(_linked_errors(current)))
    return ErrorChain(tuple(descriptors))


def signal_from(value: object) -> Signal:
    """
    Convert a caller-supplied value into a ``Signal``.

    Parameters:
        value: ``None``, an integer exit code, an exception, or an existing signal.

    Returns:
        Signal: The tagged signal for the value.

    Raises:
        TypeError: If the value cannot describe a termination.
    """
    if value is None:
        return ABSENT
    if isinstance(value, (Absent, RawCode, ErrorChain)):
        return value
    if isinstance(value, BaseException):
        return chain_from_exception(value)
    if isinstance(value, int) and not isinstance(value, bool):
        return RawCode(int(value))
    raise TypeError(f"Cannot build an exit signal from {type(value).__name__}")
