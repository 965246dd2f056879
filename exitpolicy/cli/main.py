import logging
from typing import Optional, Tuple

import click

from exitpolicy import __version__ as about
from exitpolicy.application.resolution import is_valid, resolve_exit_code
from exitpolicy.cli.config import setup_logging
from exitpolicy.cli.exit_codes import SUCCESS, USER_ERROR, VALIDATION_ERROR
from exitpolicy.cli.presenter import CliPresenter
from exitpolicy.cli.validators import validate_code, validate_mode
from exitpolicy.config import Settings, load_settings
from exitpolicy.domain.signals import ABSENT, ErrorChain, ErrorKind, RawCode, Signal
from exitpolicy.errors import ConfigurationError
from exitpolicy.system.reboot import is_reboot_pending

# Get a logger for this module.
log = logging.getLogger(__name__)

# Define an epilog message with examples.
EPILOG = f"""
Examples:

{click.style('• resolve a raw exit code under strict validation', fg="green")}

    $ exitpolicy resolve 151 --mode enabled

{click.style('• resolve a failed run whose outer error wraps a reboot request', fg="green")}

    $ exitpolicy resolve -e reboot_failed -e reboot --mode enabled

{click.style('• exit with the resolved code (use -- before negative codes)', fg="green")}

    $ exitpolicy resolve --exit -- -1
"""

ERROR_KINDS = [kind.value for kind in ErrorKind]


def _mode_option(func):
    return click.option(
        "--mode", "-m",
        metavar="<mode>",
        default=None,
        callback=validate_mode,
        help="Compatibility mode: legacy, enabled (strict) or disabled. Overrides configuration.",
    )(func)


def _config_option(func):
    return click.option(
        "--config", "-c",
        "config_file",
        type=click.Path(dir_okay=False),
        metavar="<file>",
        default=None,
        help="TOML file with an [exit_status] table",
        envvar="EXITPOLICY_CONFIG_FILE",
    )(func)


def _json_option(func):
    return click.option(
        "--json",
        "json_output",
        is_flag=True,
        default=False,
        help="Emit a JSON object instead of plain text",
    )(func)


def _load_settings(
    presenter: CliPresenter,
    *,
    mode: Optional[str],
    config_file: Optional[str],
    deprecations_as_errors: Optional[bool] = None,
) -> Settings:
    """Load settings or exit with ``USER_ERROR`` when they are unusable."""
    try:
        return load_settings(
            config_file=config_file,
            overrides={"mode": mode, "deprecations_as_errors": deprecations_as_errors},
        )
    except ConfigurationError as exc:
        presenter.emit_error(str(exc))
        raise click.exceptions.Exit(USER_ERROR)


def _build_signal(code: Optional[int], errors: Tuple[str, ...]) -> Signal:
    """Turn CLI arguments into a signal; ``errors`` are listed outermost first."""
    if code is not None and errors:
        raise click.UsageError("Pass either CODE or --error, not both.")
    if errors:
        return ErrorChain.of(*(ErrorKind(error.lower()) for error in errors))
    if code is not None:
        return RawCode(code)
    return ABSENT


@click.group(help=about.__description__, epilog=EPILOG)
@click.version_option(
    about.__version__,
    prog_name=about.__title__,
    message="%(prog)s, version %(version)s\nCheck {url} for more info".format(url=about.__url__),
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    default=False,
    help="Enable debug logging",
    envvar="EXITPOLICY_VERBOSE",
)
def main(verbose: bool):
    """Resolve and validate RFC 062 exit codes."""
    setup_logging(level=logging.DEBUG if verbose else logging.INFO)


@main.command(epilog=EPILOG)
@click.argument("code", required=False, callback=validate_code)
@click.option(
    "--error", "-e",
    "errors",
    multiple=True,
    type=click.Choice(ERROR_KINDS, case_sensitive=False),
    help="Error in the failed run's chain, outermost first. Repeatable.",
)
@_mode_option
@_config_option
@click.option(
    "--reboot-pending/--no-reboot-pending",
    default=None,
    help="Override reboot detection  [default: probe the host]",
)
@click.option(
    "--deprecations-as-errors/--no-deprecations-as-errors",
    default=None,
    help="Treat deprecation notices as errors (they are then suppressed)",
)
@_json_option
@click.option("--quiet", "-q", is_flag=True, default=False, help="Print nothing")
@click.option(
    "--exit", "exit_with_code",
    is_flag=True,
    default=False,
    help="Terminate with the resolved exit code",
)
@click.pass_context
def resolve(
        ctx: click.Context,
        code: Optional[int],
        errors: Tuple[str, ...],
        mode: Optional[str],
        config_file: Optional[str],
        reboot_pending: Optional[bool],
        deprecations_as_errors: Optional[bool],
        json_output: bool,
        quiet: bool,
        exit_with_code: bool,
):
    """
    Resolve the exit code for a run that ended with CODE or with the given errors.

    Without CODE or --error the run is treated as having reported nothing.

    Parameters:
        ctx (click.Context): Click context.
        code (Optional[int]): Raw exit code reported by the run.
        errors (Tuple[str, ...]): Error classifications, outermost first.
        mode (Optional[str]): Compatibility mode override.
        config_file (Optional[str]): Path to the TOML config file.
        reboot_pending (Optional[bool]): Reboot state override.
        deprecations_as_errors (Optional[bool]): Deprecation sink override.
        json_output (bool): Emit JSON.
        quiet (bool): Suppress output.
        exit_with_code (bool): Terminate with the resolved code.
    """
    presenter = CliPresenter(json_output=json_output, quiet=quiet)
    signal = _build_signal(code, errors)
    settings = _load_settings(
        presenter,
        mode=mode,
        config_file=config_file,
        deprecations_as_errors=deprecations_as_errors,
    )
    if reboot_pending is None:
        reboot_pending = is_reboot_pending()

    resolved = resolve_exit_code(signal, settings=settings, reboot_pending=reboot_pending)
    presenter.emit_resolution(
        code=resolved,
        mode=settings.compatibility_mode,
        reboot_pending=reboot_pending,
    )
    ctx.exit(resolved if exit_with_code else SUCCESS)


@main.command()
@click.argument("code", callback=validate_code)
@_mode_option
@_config_option
@_json_option
@click.pass_context
def validate(
        ctx: click.Context,
        code: int,
        mode: Optional[str],
        config_file: Optional[str],
        json_output: bool,
):
    """Check whether CODE is acceptable; exits non-zero when it is not."""
    presenter = CliPresenter(json_output=json_output, quiet=False)
    settings = _load_settings(presenter, mode=mode, config_file=config_file)
    valid = is_valid(code, settings=settings)
    presenter.emit_validation(code=code, valid=valid, mode=settings.compatibility_mode)
    ctx.exit(SUCCESS if valid else VALIDATION_ERROR)


@main.command()
@_json_option
def codes(json_output: bool):
    """List the sanctioned exit codes and the deprecated sentinel."""
    CliPresenter(json_output=json_output, quiet=False).emit_registry()


if __name__ == "__main__":
    main(prog_name=about.__title__)
