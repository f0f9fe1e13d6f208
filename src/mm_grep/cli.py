"""mm-grep command line: search files for a literal string.

Options may appear before, after, or between the pattern and paths;
``--`` ends option parsing so a pattern such as ``-i`` can be searched for.
"""

from typing import Annotated

import click
import typer
from typer.core import TyperCommand

from .log import setup_logging
from .models import SearchOptions, SearchRequest
from .runner import run_search
from .utils import show_version


class SearchCommand(TyperCommand):
    """TyperCommand that classifies option tokens left to right before Click parses them.

    Up to ``--`` the first ``-h``/``--help`` prints help and exits 0, and any
    ``-``-prefixed token that isn't exactly a declared option is a usage error.
    So ``-h -x`` shows help, while ``-in`` is rejected instead of read as ``-i -n``.
    """

    def option_strings(self, ctx: click.Context) -> set[str]:
        """Every spelling of every declared option, help included."""
        names: set[str] = set()
        for param in self.get_params(ctx):
            if isinstance(param, click.Option):
                names.update(param.opts)
                names.update(param.secondary_opts)
        return names

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        """Handle help and unknown flags in command-line order, then defer to Click."""
        known = self.option_strings(ctx)
        for token in args:
            if token == "--":
                break
            if token in ctx.help_option_names:
                click.echo(ctx.get_help(), color=ctx.color)
                ctx.exit()
            if token.startswith("-") and token not in known:
                raise click.NoSuchOption(token, ctx=ctx)
        return super().parse_args(ctx, args)


app = typer.Typer(add_completion=False, pretty_exceptions_enable=False)


@app.command(cls=SearchCommand, context_settings={"help_option_names": ["-h", "--help"]})
def main(
    pattern: Annotated[str, typer.Argument(help="Literal text to search for.", show_default=False)],
    paths: Annotated[list[str], typer.Argument(help="Files, or directories with -r.", show_default=False)],
    ignore_case: Annotated[bool, typer.Option("--ignore-case", "-i", help="Case-insensitive search.")] = False,
    line_number: Annotated[bool, typer.Option("--line-number", "-n", help="Prefix lines with their line number.")] = False,
    invert_match: Annotated[bool, typer.Option("--invert-match", "-v", help="Print lines that do not match.")] = False,
    recursive: Annotated[bool, typer.Option("--recursive", "-r", help="Search directories recursively.")] = False,
    with_filename: Annotated[bool, typer.Option("--with-filename", "-f", help="Prefix lines with the file name.")] = False,
    color: Annotated[bool, typer.Option("--color", "-c", help="Highlight matches in red.")] = False,
    debug: Annotated[bool, typer.Option("--debug", help="Log debug information to stderr.")] = False,
    _version: Annotated[
        bool | None,
        typer.Option("--version", "-V", callback=show_version, is_eager=True, help="Show version and exit."),
    ] = None,
) -> None:
    """Print lines of PATHS that contain PATTERN."""
    setup_logging(debug=debug)
    options = SearchOptions(
        case_insensitive=ignore_case,
        invert_match=invert_match,
        show_line_numbers=line_number,
        recursive=recursive,
        show_filename=with_filename,
        colorize=color,
    )
    request = SearchRequest(pattern=pattern, paths=tuple(paths), options=options)
    if not run_search(request):
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
