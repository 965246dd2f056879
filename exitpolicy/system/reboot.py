"""Detect whether the host is waiting for a reboot."""

from __future__ import annotations

import logging
from pathlib import Path

from exitpolicy import utils

log = logging.getLogger(__name__)

# Marker files written by update-notifier and friends on Debian/Ubuntu hosts.
REBOOT_REQUIRED_FILES = (
    Path("/var/run/reboot-required"),
    Path("/run/reboot-required"),
)

# (subkey, value name); a value name of None means the key's presence is enough.
WINDOWS_REBOOT_MARKERS: tuple[tuple[str, str | None], ...] = (
    (r"SYSTEM\CurrentControlSet\Control\Session Manager", "PendingFileRenameOperations"),
    (r"SOFTWARE\Microsoft\Windows\CurrentVersion\Component Based Servicing\RebootPending", None),
    (r"SOFTWARE\Microsoft\Windows\CurrentVersion\WindowsUpdate\Auto Update\RebootRequired", None),
)


def _windows_reboot_pending() -> bool:
    import winreg

    for subkey, value_name in WINDOWS_REBOOT_MARKERS:
        try:
            with winreg.OpenKey(winreg.HKEY_LOCAL_MACHINE, subkey) as key:
                if value_name is None:
                    return True
                value, _ = winreg.QueryValueEx(key, value_name)
                if value:
                    return True
        except OSError:
            continue
    return False


def _unix_reboot_pending(marker_files: tuple[Path, ...] = REBOOT_REQUIRED_FILES) -> bool:
    for marker in marker_files:
        try:
            if marker.exists():
                return True
        except OSError:
            log.debug("Could not stat %s", marker, exc_info=True)
    return False


def is_reboot_pending() -> bool:
    """
    Return whether the operating system reports a pending reboot.

    Probe failures are treated as "no reboot pending".
    """
    if utils.is_windows():
        return _windows_reboot_pending()
    return _unix_reboot_pending()
