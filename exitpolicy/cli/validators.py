import click

from exitpolicy.config import is_known_mode
from exitpolicy.exit_status.registry import lookup_code


def validate_code(ctx: click.Context, param, value):
    """
    Convert a CODE argument to an integer exit code.

    Accepts plain integers (including negative ones) and symbolic names such as
    ``REBOOT_NEEDED`` or ``deprecated_failure``.

    Parameters:
        ctx (click.Context): The Click context.
        param: The parameter definition.
        value: The raw argument string, or None.

    Returns:
        The integer code, or None when no code was given.
    """
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        pass
    try:
        return lookup_code(value)
    except KeyError:
        raise click.BadParameter(f"Unknown exit code: {value}")


def validate_mode(ctx: click.Context, param, value):
    """Reject ``--mode`` values that do not name a compatibility mode."""
    if value is None:
        return value
    if not is_known_mode(value):
        raise click.BadParameter(f"Unsupported exit_status mode: {value!r}")
    return value
