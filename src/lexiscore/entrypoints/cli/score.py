"""LEXISCORE scoring commands.

Behavior
- Scores go to **stdout**, one line per input, in input order, so the output
  can be piped. Human notices (warnings, gate results) go to **stderr**.
- Inputs are shown only in redacted form (``--breakdown`` / ``--json``); the
  redaction mode is chosen on the top-level command.

Failure modes
- ``--min-score`` set and any input below it → exit status 1 after all scores
  have been printed.
- ``--min-score`` set and no inputs at all (e.g. empty stdin) → exit status 1.
- Stdin that is not valid UTF-8 is still scored; undecodable bytes count as
  special characters.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

import click

from .helpers import error, success, warn

if TYPE_CHECKING:
    from collections.abc import Iterable

    from lexiscore.bootstrap import AppContainer
    from lexiscore.domain.value_objects import ScoreBreakdown

logger = logging.getLogger(__name__)

STDIN_MARKER = "-"  # pragma: no mutate
INTERACTIVE_STDIN_MSG = "Reading inputs from stdin, one per line. Press Ctrl-D to finish."


def _read_inputs(texts: tuple[str, ...]) -> Iterable[str]:
    """Yield the inputs to score, from arguments or from stdin.

    Undecodable stdin bytes become lone surrogates (``surrogateescape``); they
    are scored as special characters instead of aborting the batch.
    """
    if texts and texts != (STDIN_MARKER,):
        yield from texts
        return
    stream = click.get_text_stream("stdin", errors="surrogateescape")
    if stream.isatty():
        warn(INTERACTIVE_STDIN_MSG)
    for line in stream:
        yield line.rstrip("\r\n")


def _displayable(text: str) -> str:
    # lone surrogates from stdin cannot be written to a UTF-8 stdout
    return text.encode("utf-8", "backslashreplace").decode("utf-8")


def _format_breakdown(result: ScoreBreakdown) -> str:
    parts = " ".join(f"{c.rule}={c.points}" for c in result.contributions)
    return f"{result.total}\t{parts}"


@click.command()
@click.argument("texts", nargs=-1)
@click.option(
    "--breakdown",
    is_flag=True,
    help="Print each rule's contribution after the score.",
)
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    help="Emit one JSON object per input (redacted input, score, breakdown).",
)
@click.option(
    "--min-score",
    type=click.IntRange(min=0),
    default=None,
    help="Exit with status 1 if any input scores below this value.",
)
@click.pass_context
def score(
    ctx: click.Context,
    texts: tuple[str, ...],
    breakdown: bool,
    as_json: bool,
    min_score: int | None,
) -> None:
    """Print the complexity score of each TEXT.

    With no TEXT, or a single '-', inputs are read from stdin one per line.
    """
    app: AppContainer = ctx.obj
    below = 0
    count = 0
    for text in _read_inputs(texts):
        result = app.engine.breakdown(text)
        masked = _displayable(app.redactor.mask(text))
        logger.debug("Scored %r -> %d", masked, result.total)
        count += 1
        if min_score is not None and result.total < min_score:
            below += 1

        if as_json:
            click.echo(
                json.dumps(
                    {
                        "input": masked,
                        "score": result.total,
                        "breakdown": result.as_dict(),
                    }
                )
            )
        elif breakdown:
            click.echo(f"{masked}\t{_format_breakdown(result)}")
        else:
            click.echo(str(result.total))

    logger.info("Scored %d input(s)", count)

    if min_score is None:
        return
    if not count:
        error(f"No inputs were scored; cannot check --min-score {min_score}.")
        ctx.exit(1)
    if below:
        error(f"{below} of {count} input(s) scored below {min_score}.")
        ctx.exit(1)
    success(f"All {count} input(s) scored at least {min_score}.")


@click.command()
@click.pass_obj
def rules(app: AppContainer) -> None:
    """List the active scoring rules in evaluation order."""
    for position, rule in enumerate(app.engine.rules, start=1):
        click.echo(f"{position}. {rule.name:<10} {rule.description}")
