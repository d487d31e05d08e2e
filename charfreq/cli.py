import logging
import os
import sys

import click

from charfreq.errors import DecodeError, InvalidOption
from charfreq.options import ERROR_HANDLERS, Options
from charfreq.pipeline import analyze, render

logger = logging.getLogger(__name__)


@click.command(context_settings={"auto_envvar_prefix": "CHARFREQ"})
@click.version_option()
@click.argument("text", nargs=-1)
@click.option(
    "-s",
    "--sort-by",
    type=click.Choice(["character", "char", "count"], case_sensitive=False),
    default="character",
    show_default=True,
    help="Sort by character or count",
)
@click.option(
    "-n", "--show-top-n", type=int, default=None, help="Show only the top N characters"
)
@click.option(
    "-p",
    "--as-percentage",
    "--show-percent-freq",
    "as_percentage",
    is_flag=True,
    help="Show the percentage of each character instead of its count",
)
@click.option(
    "--min-count", type=int, default=None, help="Hide characters seen fewer than N times"
)
@click.option(
    "--max-count", type=int, default=None, help="Hide characters seen more than N times"
)
@click.option(
    "-e",
    "--exact-count",
    type=int,
    default=None,
    help="Show only the characters that appear exactly N times",
)
@click.option(
    "-g",
    "--show-more-than-n",
    "more_than_count",
    type=int,
    default=None,
    help="Show only the characters that appear more than N times",
)
@click.option(
    "-l",
    "--show-less-than-n",
    "less_than_count",
    type=int,
    default=None,
    help="Show only the characters that appear less than N times",
)
@click.option(
    "--min-percentage",
    type=float,
    default=None,
    help="Hide characters below P percent of the total",
)
@click.option(
    "--max-percentage",
    type=float,
    default=None,
    help="Hide characters above P percent of the total",
)
@click.option(
    "-w",
    "--include-whitespace",
    is_flag=True,
    help="Count whitespace characters too. They are ignored by default",
)
@click.option(
    "--encoding",
    default="utf-8",
    show_default=True,
    help="Encoding of the input text",
)
@click.option(
    "--errors",
    type=click.Choice(ERROR_HANDLERS),
    default="strict",
    show_default=True,
    help="""How to treat malformed input. 'strict' fails, 'replace' counts each bad
    sequence as U+FFFD, 'ignore' skips it""",
)
@click.option(
    "--precision",
    type=int,
    default=2,
    show_default=True,
    help="Decimal places for percentages",
)
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr")
@click.pass_context
def cli(
    ctx: click.Context,
    text: tuple,
    sort_by: str,
    show_top_n: int,
    as_percentage: bool,
    min_count: int,
    max_count: int,
    exact_count: int,
    more_than_count: int,
    less_than_count: int,
    min_percentage: float,
    max_percentage: float,
    include_whitespace: bool,
    encoding: str,
    errors: str,
    precision: int,
    verbose: bool,
):
    """count character frequencies in TEXT, or in standard input if no TEXT is given

    Characters are counted by Unicode code point, so a character that takes several
    bytes to encode still counts once. Every option may also be set through an
    environment variable prefixed with CHARFREQ_, e.g. CHARFREQ_SORT_BY=count.

        $ echo "hello world" | charfreq --sort-by count --show-top-n 2
        l: 3
        o: 2
    """
    if verbose:
        logging.getLogger("charfreq").setLevel(logging.DEBUG)

    try:
        options = Options(
            sort_by=sort_by,
            show_top_n=show_top_n,
            as_percentage=as_percentage,
            min_count=min_count,
            max_count=max_count,
            exact_count=exact_count,
            more_than_count=more_than_count,
            less_than_count=less_than_count,
            min_percentage=min_percentage,
            max_percentage=max_percentage,
            include_whitespace=include_whitespace,
            encoding=encoding,
            errors=errors,
            precision=precision,
        )
    except InvalidOption as e:
        raise click.UsageError(str(e), ctx=ctx) from e
    logger.debug("options: %s", options)

    if text:
        # back to the bytes the shell handed over, so arguments decode like stdin
        data = os.fsencode(" ".join(text))
    else:
        data = sys.stdin.buffer.read()
        logger.debug("read %d bytes from stdin", len(data))

    try:
        results = analyze(data, options)
    except DecodeError as e:
        raise click.ClickException(str(e)) from e
    except InvalidOption as e:
        raise click.UsageError(str(e), ctx=ctx) from e

    for line in render(results, options.as_percentage, options.precision):
        click.echo(line)
