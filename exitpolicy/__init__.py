"""Exit-status resolution policy for command-line runs."""

from exitpolicy.application.resolution import is_valid, resolve_exit_code
from exitpolicy.constants import CompatibilityMode, DeprecatedCode, ExitStatusCode

__all__ = [
    "CompatibilityMode",
    "DeprecatedCode",
    "ExitStatusCode",
    "is_valid",
    "resolve_exit_code",
]
