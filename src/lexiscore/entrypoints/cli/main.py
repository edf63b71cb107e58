"""LEXISCORE CLI entry point.

Defines the top-level ``lexiscore`` command (via Click-Extra) and registers
subcommands exposed by the project.

Currently available commands
- ``lexiscore score``: print the complexity score of one or more inputs.
- ``lexiscore rules``: list the active scoring rules in evaluation order.

Notes
- The CLI version is sourced from `lexiscore.__version__` and displayed
  automatically by Click-Extra (``--version``).
- The group callback bootstraps the application and stores the resulting
  `AppContainer` on ``ctx.obj`` for subcommands.

Examples
    $ lexiscore score 'Password!'
    $ printf 'a\\nB!\\n' | lexiscore score --json
"""

import logging
from typing import TYPE_CHECKING

import click
import click_extra as clickx

from lexiscore import __version__, config
from lexiscore.bootstrap import bootstrap
from lexiscore.interfaces.redactor import RedactorMode
from lexiscore.logging import config_console_handler, log_startup

from .helpers.log_level_parser import parse_log_level
from .score import rules as rules_command
from .score import score as score_command

if TYPE_CHECKING:
    from logging import Handler

logger = logging.getLogger(__name__)


HELP = """LEXISCORE command-line interface.

    LEXISCORE assigns a deterministic complexity score to strings such as
    candidate passwords. The score is the input length plus fixed bonuses for
    the presence of uppercase letters and special characters.
    """


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help=(
        "Increase the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help=(
        "Decrease the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Enable debug mode (enables extra developer diagnostics beyond -vv).",
    default=False,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    envvar=config.LOGGER_LEVELS_ENV,
    help=(
        "Set MINIMUM LEVEL for specific LOGGERS (NAME=LEVEL). Repeatable "
        "(e.g. -L click_extra=INFO -L lexiscore.domain=DEBUG) or via "
        f"{config.LOGGER_LEVELS_ENV} (comma/space list)."
    ),
    show_envvar=True,
)
@click.option(
    "--redactor-mode",
    "redactor_mode",
    type=click.Choice([m.value for m in RedactorMode], case_sensitive=False),
    help=(
        "Set how inputs are masked in logs and breakdown output. "
        "'lenient' (default) keeps the first character; "
        "'strict' replaces the whole input with a placeholder; "
        "'off' shows inputs verbatim. "
        f"When omitted, {config.REDACTOR_MODE_ENV} is used."
    ),
    default=None,
)
@clickx.pass_context
def lexiscore(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    logger_levels: dict[str, int],
    redactor_mode: str | None,
) -> None:
    """LEXISCORE command-line interface."""

    # 0) compute effective verbosity
    base_level = logging.WARNING
    level = base_level - (10 * verbose_count) + (10 * quiet_count)
    level = max(logging.DEBUG, min(logging.CRITICAL, level))

    handlers: list[Handler] = []

    # 1) configure console handler
    use_color = ctx.color is not False  # None or True => allow color
    handlers.append(
        config_console_handler(level=level, debug_mode=debug, color=use_color)
    )

    # 2) configure root logger
    logging.basicConfig(
        level=logging.DEBUG,  # capture all levels; handlers filter
        handlers=handlers,
        force=True,
    )

    # 3) set per-logger levels
    for name, lvl in logger_levels.items():
        logging.getLogger(name).setLevel(lvl)

    # 4) assemble the application; no --redactor-mode defers to the environment
    mode = RedactorMode(redactor_mode.lower()) if redactor_mode else None
    try:
        ctx.obj = bootstrap(mode)
    except config.InvalidSettingError as e:
        raise click.ClickException(str(e)) from e

    # 5) log startup info
    log_startup(
        logger,
        app_version=__version__,
        level=level,
        handlers=handlers,
        logger_levels=logger_levels,
        redactor_mode=ctx.obj.redactor.mode.value,
        rule_names=ctx.obj.engine.rule_names,
    )

    ctx.call_on_close(logging.shutdown)


lexiscore.add_command(score_command)
lexiscore.add_command(rules_command)
