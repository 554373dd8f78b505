"""Command-line interface for lineup using Click."""

import logging
import sys

import click

from lineup import __version__
from lineup.config import Config
from lineup.core import read, write
from lineup.exceptions import FormatError, LineupError


# Setup logging - default to WARNING so nothing but output reaches the terminal
# INFO and DEBUG logs are only shown when --verbose is used
logging.basicConfig(
    level=logging.WARNING,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@click.command()
@click.option('--in-separator', default=',', show_default=True,
              help='IN format: item separator; N (digits only) = N bytes per item, '
                   'no explicit separator, N must be > 0 and fall on a UTF-8 '
                   'character boundary for each item; anything else = separator string')
@click.option('--in-line-n', default=0, type=click.IntRange(min=0), show_default=True,
              help='IN format, line: number of items per line; 0 = all items on a single line')
@click.option('--in-line-separator', default='\\n', show_default=True,
              help='IN format, line: separator string between lines')
@click.option('--in-empty', default='stop', show_default=True,
              type=click.Choice(['stop', 'skip', 'keep'], case_sensitive=False),
              help='IN format: what to do with an empty item')
@click.option('--out-span', default=0, type=click.IntRange(min=0), show_default=True,
              help='OUT format, span: characters an item occupies; shorter items are '
                   'padded with --out-pad and anchored as per --out-anchor; 0 = no padding')
@click.option('--out-pad', default=' ', show_default=True,
              help='OUT format, span: pad character')
@click.option('--out-anchor', default='left', show_default=True,
              type=click.Choice(['left', 'right'], case_sensitive=False),
              help='OUT format, span: anchor items to the left or right when padding')
@click.option('--out-separator', default=' ', show_default=True,
              help='OUT format: separator string for items within a line')
@click.option('--out-line-n', default=0, type=click.IntRange(min=0), show_default=True,
              help='OUT format, line: number of items per line; 0 = all items on a single line')
@click.option('--out-line-separator', default='\\n', show_default=True,
              help='OUT format, line: separator string between lines')
@click.option('--encoding', default='utf-8', show_default=True,
              help='Encoding of standard input')
@click.option('--verbose', is_flag=True, help='Enable verbose logging')
@click.option('--version', '-v', is_flag=True, help='Show version and exit')
@click.pass_context
def cli(
    ctx,
    in_separator: str,
    in_line_n: int,
    in_line_separator: str,
    in_empty: str,
    out_span: int,
    out_pad: str,
    out_anchor: str,
    out_separator: str,
    out_line_n: int,
    out_line_separator: str,
    encoding: str,
    verbose: bool,
    version: bool,
):
    """lineup - Re-tokenize items read from stdin and write them to stdout.

    Separator options accept the escape sequences \\n, \\t, \\r, \\0 and \\\\.

    Example:
        printf '001,01,1' | lineup --out-span 4 --out-pad _ --out-anchor right \\
            --out-separator '|' --out-line-n 2 --out-line-separator ';'
    """
    if version:
        click.echo(f"lineup version {__version__}")
        ctx.exit()

    if verbose:
        logging.getLogger().setLevel(logging.INFO)

    try:
        config = Config(
            in_separator=in_separator,
            in_line_n=in_line_n,
            in_line_separator=in_line_separator,
            in_empty=in_empty,
            out_span=out_span,
            out_pad=out_pad,
            out_anchor=out_anchor,
            out_separator=out_separator,
            out_line_n=out_line_n,
            out_line_separator=out_line_separator,
            encoding=encoding,
        )
    except FormatError as e:
        raise click.UsageError(str(e), ctx=ctx)

    raw = click.get_binary_stream('stdin').read()
    try:
        text = raw.decode(config.encoding)
    except (LookupError, UnicodeDecodeError) as e:
        click.echo(f"Error: cannot decode input as {config.encoding}: {e}", err=True)
        sys.exit(1)

    logger.info(f"Read {len(raw)} bytes from stdin")

    stdout = click.get_binary_stream('stdout')
    try:
        write(read(text, config.in_format()), stdout, config.out_format())
    except LineupError as e:
        stdout.flush()
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    stdout.flush()


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == '__main__':
    main()
