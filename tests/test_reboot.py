"""Tests for host reboot-pending detection."""

from __future__ import annotations

from pathlib import Path

import pytest

from exitpolicy.system import reboot


def test_unix_probe_detects_marker_file(tmp_path: Path) -> None:
    """Verify an existing reboot-required marker means a reboot is pending."""
    marker = tmp_path / "reboot-required"
    marker.write_text("*** System restart required ***\n", encoding="utf-8")

    assert reboot._unix_reboot_pending((tmp_path / "absent", marker)) is True


def test_unix_probe_without_markers(tmp_path: Path) -> None:
    """Verify no marker files means no pending reboot."""
    assert reboot._unix_reboot_pending((tmp_path / "absent",)) is False


def test_is_reboot_pending_dispatches_by_platform(monkeypatch: pytest.MonkeyPatch) -> None:
    """Verify Windows hosts use the registry probe and others the marker files."""
    monkeypatch.setattr(reboot, "_windows_reboot_pending", lambda: True)
    monkeypatch.setattr(reboot, "_unix_reboot_pending", lambda: False)

    monkeypatch.setattr(reboot.utils, "is_windows", lambda: True)
    assert reboot.is_reboot_pending() is True

    monkeypatch.setattr(reboot.utils, "is_windows", lambda: False)
    assert reboot.is_reboot_pending() is False
