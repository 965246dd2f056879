"""Tests for CLI callback validators."""

from __future__ import annotations

import click
import pytest

from exitpolicy.cli.validators import validate_code, validate_mode


def _ctx() -> click.Context:
    return click.Context(click.Command("exitpolicy"))


def test_validate_code_accepts_integers_and_names() -> None:
    """Verify numeric and symbolic codes are converted to integers."""
    assert validate_code(_ctx(), None, "151") == 151
    assert validate_code(_ctx(), None, "-1") == -1
    assert validate_code(_ctx(), None, "reboot_now") == 40
    assert validate_code(_ctx(), None, "DEPRECATED_FAILURE") == -1


def test_validate_code_passes_missing_value_through() -> None:
    """Verify an omitted optional code stays None."""
    assert validate_code(_ctx(), None, None) is None


def test_validate_code_rejects_unknown_names() -> None:
    """Verify unknown symbolic names raise a click validation error."""
    with pytest.raises(click.BadParameter, match="Unknown exit code"):
        validate_code(_ctx(), None, "kaboom")


def test_validate_mode_accepts_known_modes() -> None:
    """Verify supported modes and None pass through unchanged."""
    assert validate_mode(_ctx(), None, "enabled") == "enabled"
    assert validate_mode(_ctx(), None, None) is None


def test_validate_mode_rejects_unknown_modes() -> None:
    """Verify unsupported modes raise a click validation error."""
    with pytest.raises(click.BadParameter, match="Unsupported exit_status mode"):
        validate_mode(_ctx(), None, "sometimes")
