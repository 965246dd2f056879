"""Turn a termination signal into a candidate exit code."""

from __future__ import annotations

from typing import Optional

from exitpolicy.constants import CompatibilityMode, ExitStatusCode
from exitpolicy.domain.signals import Absent, ErrorChain, ErrorKind, RawCode, Signal

# Codes for classified errors under strict mode; the outermost classified error wins.
_KIND_CODES: dict[ErrorKind, ExitStatusCode] = {
    ErrorKind.REBOOT: ExitStatusCode.REBOOT_NOW,
    ErrorKind.REBOOT_FAILED: ExitStatusCode.REBOOT_FAILED,
    ErrorKind.AUDIT_FAILURE: ExitStatusCode.AUDIT_MODE_FAILURE,
}


def classify(
    signal: Signal,
    mode: CompatibilityMode,
    reboot_pending: bool,
) -> Optional[int]:
    """
    Compute the candidate exit code for ``signal``.

    Parameters:
        signal (Signal): What the run reported.
        mode (CompatibilityMode): Current compatibility mode.
        reboot_pending (bool): Whether the host has a reboot pending.

    Returns:
        Optional[int]: The candidate code, or None when the signal carries no information.
    """
    match signal:
        case Absent():
            return None
        case RawCode(code=code):
            return _classify_raw_code(code, mode, reboot_pending)
        case ErrorChain():
            return _classify_error_chain(signal, mode)
    raise TypeError(f"Unsupported signal: {signal!r}")


def _classify_raw_code(code: int, mode: CompatibilityMode, reboot_pending: bool) -> int:
    if mode.is_strict:
        return code
    if code == ExitStatusCode.SUCCESS and reboot_pending:
        return int(ExitStatusCode.REBOOT_NEEDED)
    return code


def _classify_error_chain(chain: ErrorChain, mode: CompatibilityMode) -> int:
    # Legacy callers never looked at the error type.
    if not mode.is_strict:
        return int(ExitStatusCode.GENERIC_FAILURE)
    for kind in chain.kinds:
        if kind in _KIND_CODES:
            return int(_KIND_CODES[kind])
    return int(ExitStatusCode.GENERIC_FAILURE)
