"""Best-effort deprecation notices for non-sanctioned exit codes."""

from __future__ import annotations

import logging
from typing import Callable, TypeAlias

from exitpolicy.constants import RFC_062_URL
from exitpolicy.errors import DeprecatedFeatureError

log = logging.getLogger(__name__)
deprecation_log = logging.getLogger("exitpolicy.deprecation")

DeprecationSink: TypeAlias = Callable[[str], None]

DEPRECATION_WARNING = (
    f"Chef RFC 62 ({RFC_062_URL}) defines the"
    " exit codes that should be used with Chef.  Chef::Application::ExitCode defines valid exit codes"
    " In a future release, non-standard exit codes will be redefined as"
    " GENERIC_FAILURE unless `exit_status` is set to `:disabled` in your client.rb."
)


def log_deprecation(message: str, *, as_error: bool = False) -> None:
    """
    Record a deprecation warning on the ``exitpolicy.deprecation`` logger.

    Parameters:
        message (str): The warning text.
        as_error (bool): Raise instead of logging when deprecations are treated as errors.

    Raises:
        DeprecatedFeatureError: If ``as_error`` is set.
    """
    if as_error:
        raise DeprecatedFeatureError(message)
    deprecation_log.warning(message)


def notify_deprecation(message: str = DEPRECATION_WARNING, sink: DeprecationSink = log_deprecation) -> None:
    """Send ``message`` to ``sink``; a failing sink never reaches the caller."""
    try:
        sink(message)
    except Exception:
        # The exit code being resolved matters more than the notice.
        log.debug("Deprecation sink failed", exc_info=True)
