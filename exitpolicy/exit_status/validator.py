"""Accept, coerce or default candidate exit codes according to the compatibility mode."""

from __future__ import annotations

from typing import Optional

from exitpolicy.constants import CompatibilityMode, DeprecatedCode, ExitStatusCode
from exitpolicy.domain.signals import Signal
from exitpolicy.exit_status.classifier import classify
from exitpolicy.exit_status.deprecation import DeprecationSink, log_deprecation, notify_deprecation
from exitpolicy.exit_status.registry import is_code, is_sanctioned


def is_valid(
    code: Optional[int],
    mode: CompatibilityMode,
    sink: DeprecationSink = log_deprecation,
) -> bool:
    """
    Decide whether ``code`` may be used as the process exit code.

    An absent code, or anything that is not an integer, is never valid. With
    validation disabled everything else is accepted silently. Sanctioned codes
    are always accepted. Any other code sends one deprecation notice to ``sink``
    and is accepted unless the mode is strict.

    Parameters:
        code (Optional[int]): Candidate exit code.
        mode (CompatibilityMode): Current compatibility mode.
        sink (DeprecationSink): Where the deprecation notice goes.

    Returns:
        bool: True if the code can be returned unchanged.
    """
    if code is None or not is_code(code):
        return False
    if mode is CompatibilityMode.DISABLED:
        return True
    if is_sanctioned(code):
        return True

    notify_deprecation(sink=sink)
    return not mode.is_strict


def default_exit_code(mode: CompatibilityMode) -> int:
    """Return the code used when no acceptable candidate exists."""
    if mode.is_strict:
        return int(ExitStatusCode.GENERIC_FAILURE)
    return int(DeprecatedCode.DEPRECATED_FAILURE)


def resolve(
    signal: Signal,
    mode: CompatibilityMode,
    reboot_pending: bool,
    sink: DeprecationSink = log_deprecation,
) -> int:
    """
    Map a termination signal to the exit code the process should end with.

    Parameters:
        signal (Signal): What the run reported.
        mode (CompatibilityMode): Current compatibility mode.
        reboot_pending (bool): Whether the host has a reboot pending.
        sink (DeprecationSink): Where deprecation notices go.

    Returns:
        int: The resolved exit code.
    """
    candidate = classify(signal, mode, reboot_pending)
    if candidate is not None and is_valid(candidate, mode, sink):
        return candidate
    return default_exit_code(mode)
