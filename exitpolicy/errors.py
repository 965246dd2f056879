"""Domain-specific exceptions raised by exitpolicy components and the runs it reports on."""

from __future__ import annotations

from typing import Iterable

from exitpolicy.domain.signals import ErrorKind


class ExitPolicyError(Exception):
    """Base exception for exitpolicy-specific failures."""


class ConfigurationError(ExitPolicyError, ValueError):
    """Raised when exit-status settings cannot be loaded or understood."""


class DeprecatedFeatureError(ExitPolicyError):
    """Raised by the deprecation sink when deprecation warnings are treated as errors."""


class RunError(ExitPolicyError):
    """Base class for failures of the run whose exit code is being resolved."""

    kind: ErrorKind = ErrorKind.UNCLASSIFIED


class RebootRequested(RunError):
    """Raised when the run asks for an immediate reboot."""

    kind = ErrorKind.REBOOT


class RebootFailed(RunError):
    """Raised when the reboot command itself fails."""

    kind = ErrorKind.REBOOT_FAILED


class AuditFailure(RunError):
    """Raised when audit mode reports failing controls."""

    kind = ErrorKind.AUDIT_FAILURE


class RunFailedWrappingError(RunError):
    """Aggregate error wrapping every failure collected during one run."""

    def __init__(self, *errors: BaseException) -> None:
        self.wrapped_errors: tuple[BaseException, ...] = tuple(errors)
        super().__init__(_summarize(self.wrapped_errors))


def _summarize(errors: Iterable[BaseException]) -> str:
    parts = [f"{type(error).__name__}: {error}" for error in errors]
    if not parts:
        return "Run failed"
    return f"Found {len(parts)} error(s), they are shown below\n" + "\n".join(parts)
