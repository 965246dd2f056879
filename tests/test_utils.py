"""Tests for generic utility helper functions."""

from __future__ import annotations

import pytest

from exitpolicy import utils


def test_is_windows_checks_platform(monkeypatch: pytest.MonkeyPatch) -> None:
    """Verify platform detection maps correctly for Windows and non-Windows."""
    monkeypatch.setattr(utils.sys, "platform", "win32")
    assert utils.is_windows() is True

    monkeypatch.setattr(utils.sys, "platform", "linux")
    assert utils.is_windows() is False
