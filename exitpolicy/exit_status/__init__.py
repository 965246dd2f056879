"""Pure exit-status resolution core."""

from exitpolicy.exit_status.classifier import classify
from exitpolicy.exit_status.validator import default_exit_code, is_valid, resolve

__all__ = ["classify", "default_exit_code", "is_valid", "resolve"]
