"""Public entry points that source mode and reboot state fresh on every call."""

from __future__ import annotations

import logging
from functools import partial
from typing import Callable, Optional

from exitpolicy.config import Settings, load_settings
from exitpolicy.domain.signals import signal_from
from exitpolicy.exit_status import validator
from exitpolicy.exit_status.deprecation import DeprecationSink, log_deprecation
from exitpolicy.system.reboot import is_reboot_pending

log = logging.getLogger(__name__)

SettingsLoader = Callable[[], Settings]
RebootProbe = Callable[[], bool]


def _deprecation_sink(settings: Settings) -> DeprecationSink:
    return partial(log_deprecation, as_error=settings.deprecations_as_errors)


def is_valid(
    code: Optional[int],
    *,
    settings: Settings | None = None,
    load: SettingsLoader = load_settings,
) -> bool:
    """
    Return whether ``code`` is an acceptable exit code under the current settings.

    Parameters:
        code (Optional[int]): Candidate exit code.
        settings (Settings | None): Settings to use; loaded fresh when omitted.
        load (SettingsLoader): Loader used when ``settings`` is omitted.
    """
    settings = settings if settings is not None else load()
    return validator.is_valid(code, settings.compatibility_mode, _deprecation_sink(settings))


def resolve_exit_code(
    value: object = None,
    *,
    settings: Settings | None = None,
    reboot_pending: bool | None = None,
    load: SettingsLoader = load_settings,
    probe: RebootProbe = is_reboot_pending,
) -> int:
    """
    Resolve the exit code a run should terminate with.

    Parameters:
        value: ``None``, an integer exit code, an exception raised by the run, or a ``Signal``.
        settings (Settings | None): Settings to use; loaded fresh when omitted.
        reboot_pending (bool | None): Reboot state; probed fresh when omitted.
        load (SettingsLoader): Loader used when ``settings`` is omitted.
        probe (RebootProbe): Probe used when ``reboot_pending`` is omitted.

    Returns:
        int: The exit code to terminate with.
    """
    settings = settings if settings is not None else load()
    signal = signal_from(value)
    if reboot_pending is None:
        reboot_pending = probe()
    mode = settings.compatibility_mode
    code = validator.resolve(signal, mode, reboot_pending, _deprecation_sink(settings))
    log.debug("Resolved %r to exit code %d (mode=%s, reboot_pending=%s)", signal, code, mode.value, reboot_pending)
    return code
