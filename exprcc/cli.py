"""
Command line interface for exprcc.

    exprcc '1+2*3' > out.s
    exprcc --emit ast '(1+2)*3'
    exprcc -f expr.txt -o out.s

Syntax errors are printed to stderr with a caret under the failing token
and the command exits with status 1.
"""

import logging
from typing import Optional

import click

from ._version import __version__
from .driver import EMIT_FORMATS, compile_string
from .lexer import LexerError
from .parser import ParseError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@click.command()
@click.argument("expression", required=False)
@click.option("-f", "--file", "source_file", type=click.Path(exists=True, dir_okay=False),
              help="Read the expression from a file instead of the command line.")
@click.option("-o", "--output", type=click.File("w"), default="-",
              help="Where to write the result (default: stdout).")
@click.option("--emit", type=click.Choice(EMIT_FORMATS), default="asm", show_default=True,
              help="What to produce.")
@click.option("--log-level", type=click.Choice(LOG_LEVELS, case_sensitive=False),
              default="WARNING", show_default=True, envvar="EXPRCC_LOG_LEVEL",
              help="Logging verbosity.")
@click.version_option(__version__, prog_name="exprcc")
@click.pass_context
def main(ctx: click.Context, expression: Optional[str], source_file: Optional[str],
         output, emit: str, log_level: str):
    """Compile an integer EXPRESSION to x86-64 assembly."""
    logging.basicConfig(level=log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    if expression is not None and source_file is not None:
        raise click.UsageError("give either EXPRESSION or --file, not both")
    if expression is None and source_file is None:
        raise click.UsageError("missing EXPRESSION or --file")

    if source_file is not None:
        with open(source_file, "r", encoding="utf-8") as f:
            source = f.read()
        filename = source_file
    else:
        source = expression
        filename = "<command-line>"

    try:
        result = compile_string(source, filename, emit)
    except (LexerError, ParseError) as e:
        click.echo(e.diagnostic.render(source), err=True, nl=False)
        ctx.exit(1)

    output.write(result)


if __name__ == "__main__":
    main()
