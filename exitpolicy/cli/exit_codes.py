"""Exit codes for failures of the exitpolicy command itself."""

SUCCESS = 0
USER_ERROR = 2
VALIDATION_ERROR = 3
