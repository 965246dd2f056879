"""Exit codes defined in Chef RFC 062 and the compatibility modes that police them."""

from enum import Enum, IntEnum


class ExitStatusCode(IntEnum):
    """Sanctioned exit codes that scripts and supervisors may depend on."""
    SUCCESS = 0
    GENERIC_FAILURE = 1
    REBOOT_SCHEDULED = 35
    REBOOT_NEEDED = 37
    REBOOT_NOW = 40
    REBOOT_FAILED = 41
    AUDIT_MODE_FAILURE = 42


class DeprecatedCode(IntEnum):
    """Legacy sentinel, only returned while deprecated codes are tolerated."""
    DEPRECATED_FAILURE = -1


class CompatibilityMode(Enum):
    """How strictly non-sanctioned exit codes are policed."""
    DISABLED = "disabled"
    STRICT = "strict"
    LEGACY = "legacy"

    @property
    def is_strict(self) -> bool:
        return self is CompatibilityMode.STRICT


RFC_062_URL = "https://github.com/chef/chef-rfc/master/rfc062-exit-status.md"

# Accepted spellings of the ``exit_status`` setting.
MODE_ALIASES = {
    "": CompatibilityMode.LEGACY,
    "legacy": CompatibilityMode.LEGACY,
    "disabled": CompatibilityMode.DISABLED,
    "enabled": CompatibilityMode.STRICT,
    "strict": CompatibilityMode.STRICT,
}
