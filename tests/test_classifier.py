"""Tests for signal classification into candidate exit codes."""

from __future__ import annotations

import pytest

from exitpolicy.constants import CompatibilityMode
from exitpolicy.domain.signals import ABSENT, ErrorChain, ErrorKind, RawCode
from exitpolicy.exit_status.classifier import classify

NON_STRICT = (CompatibilityMode.LEGACY, CompatibilityMode.DISABLED)


@pytest.mark.parametrize("mode", list(CompatibilityMode))
def test_absent_signal_has_no_candidate(mode: CompatibilityMode) -> None:
    """Verify an absent signal always defers to the default code."""
    assert classify(ABSENT, mode, reboot_pending=True) is None


@pytest.mark.parametrize("mode", NON_STRICT)
def test_success_becomes_reboot_needed_when_reboot_pending(mode: CompatibilityMode) -> None:
    """Verify success is upgraded only when the host reports a pending reboot."""
    assert classify(RawCode(0), mode, reboot_pending=True) == 37
    assert classify(RawCode(0), mode, reboot_pending=False) == 0


def test_strict_mode_returns_raw_code_unchanged() -> None:
    """Verify strict mode does not special-case raw codes."""
    assert classify(RawCode(0), CompatibilityMode.STRICT, reboot_pending=True) == 0
    assert classify(RawCode(151), CompatibilityMode.STRICT, reboot_pending=False) == 151


@pytest.mark.parametrize("mode", NON_STRICT)
def test_other_raw_codes_pass_through(mode: CompatibilityMode) -> None:
    """Verify non-zero raw codes are never rewritten by the classifier."""
    assert classify(RawCode(1), mode, reboot_pending=True) == 1
    assert classify(RawCode(-151), mode, reboot_pending=True) == -151


@pytest.mark.parametrize("mode", NON_STRICT)
@pytest.mark.parametrize("kind", list(ErrorKind))
def test_non_strict_error_chains_collapse_to_generic_failure(
    mode: CompatibilityMode,
    kind: ErrorKind,
) -> None:
    """Verify legacy behavior ignores error classification."""
    assert classify(ErrorChain.of(kind), mode, reboot_pending=False) == 1


@pytest.mark.parametrize(
    ("kinds", "expected"),
    [
        ((ErrorKind.REBOOT,), 40),
        ((ErrorKind.REBOOT_FAILED,), 41),
        ((ErrorKind.AUDIT_FAILURE,), 42),
        ((ErrorKind.UNCLASSIFIED,), 1),
        ((ErrorKind.UNCLASSIFIED, ErrorKind.AUDIT_FAILURE), 42),
        ((ErrorKind.REBOOT_FAILED, ErrorKind.REBOOT), 41),
        ((ErrorKind.AUDIT_FAILURE, ErrorKind.REBOOT), 42),
        ((ErrorKind.UNCLASSIFIED, ErrorKind.UNCLASSIFIED), 1),
    ],
)
def test_strict_error_chains_take_first_classified_error(
    kinds: tuple[ErrorKind, ...],
    expected: int,
) -> None:
    """Verify strict mode scans outermost first and the first match wins."""
    chain = ErrorChain.of(*kinds)

    assert classify(chain, CompatibilityMode.STRICT, reboot_pending=True) == expected
