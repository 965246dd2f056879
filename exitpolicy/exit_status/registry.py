"""Lookups over the sanctioned exit-code table and the deprecated sentinel."""

from __future__ import annotations

from typing import Optional

from exitpolicy.constants import DeprecatedCode, ExitStatusCode

_SANCTIONED = frozenset(int(code) for code in ExitStatusCode)
_DEPRECATED = frozenset(int(code) for code in DeprecatedCode)


def is_code(value: object) -> bool:
    """Return whether ``value`` is an integer exit code; booleans are not codes."""
    return isinstance(value, int) and not isinstance(value, bool)


def sanctioned_codes() -> frozenset[int]:
    """Return every exit code RFC 062 sanctions."""
    return _SANCTIONED


def is_sanctioned(code: object) -> bool:
    """Return whether ``code`` is one of the sanctioned exit codes."""
    return is_code(code) and code in _SANCTIONED


def is_deprecated_sentinel(code: object) -> bool:
    """Return whether ``code`` is the legacy ``DEPRECATED_FAILURE`` sentinel."""
    return is_code(code) and code in _DEPRECATED


def code_name(code: int) -> Optional[str]:
    """Return the symbolic name of a registered code, or None for anything else."""
    if is_sanctioned(code):
        return ExitStatusCode(code).name
    if is_deprecated_sentinel(code):
        return DeprecatedCode(code).name
    return None


def lookup_code(name: str) -> int:
    """
    Resolve a symbolic code name such as ``reboot_needed`` to its value.

    Raises:
        KeyError: If the name is not in either table.
    """
    key = name.strip().upper()
    if key in ExitStatusCode.__members__:
        return int(ExitStatusCode[key])
    if key in DeprecatedCode.__members__:
        return int(DeprecatedCode[key])
    raise KeyError(name)
