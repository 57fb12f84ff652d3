"""CLI entry point for msc-text."""

import json
import logging
import sys

import click

from msc_text import dialect_from_name
from msc_text.errors import MscSyntaxError
from msc_text.parsers import parse
from msc_text.renderers.text import TextRenderer

log = logging.getLogger(__name__)


@click.command()
@click.argument("input", required=False, type=click.Path(exists=True))
@click.option("--minify", "-m", "minify", is_flag=True, help="Write the most compact text")
@click.option(
    "--dialect",
    "-d",
    "dialect",
    type=click.Choice(["xu", "mscgen"], case_sensitive=False),
    default="xu",
    help="Target dialect",
)
@click.option("--json", "-j", "as_json", is_flag=True, help="Write the syntax tree as JSON instead of text")
@click.option("--output", "-o", "output", type=str, default=None, help="Write output to this file instead of stdout")
@click.option("--debug", is_flag=True, help="Enable debug logging")
def main(input: str | None, minify: bool, dialect: str, as_json: bool, output: str | None, debug: bool) -> None:
    """MSC (mscgen / xù) chart to canonical or minified MSC text."""
    logging.basicConfig(level=logging.DEBUG if debug else logging.WARNING, handlers=[logging.StreamHandler()])

    if input:
        try:
            with open(input, encoding="utf-8") as f:
                text = f.read()
        except OSError as e:
            click.echo(f"error: cannot read '{input}': {e}", err=True)
            sys.exit(1)
    else:
        text = sys.stdin.read()

    try:
        chart = parse(text)
    except MscSyntaxError as e:
        click.echo(f"parse error:\n{e}", err=True)
        sys.exit(1)

    if as_json:
        rendered = json.dumps(chart.to_dict(), indent=2) + "\n"
    else:
        renderer = TextRenderer(minify=minify, dialect=dialect_from_name(dialect))
        rendered = renderer.render(chart) + "\n"
    log.debug("rendered %d character(s)", len(rendered))

    if output:
        try:
            with open(output, "w", encoding="utf-8") as f:
                f.write(rendered)
        except OSError as e:
            click.echo(f"error: cannot write '{output}': {e}", err=True)
            sys.exit(1)
    else:
        click.echo(rendered, nl=False)


if __name__ == "__main__":
    main()
