import json
import logging
import sys

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from .. import __version__
from ..config import Settings
from ..renderer import (
    FrameConsole,
    LavaboardError,
    demo_board,
    draw_board,
    host_document,
    render_report,
)

console = Console(stderr=True)


def _configure_logging(level_name):
    level = getattr(logging, level_name.upper(), None)
    if not isinstance(level, int):
        raise click.BadParameter(f"unknown log level '{level_name}'", param_hint="--log-level")
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _load_json(path):
    with open(path, 'r', encoding='utf-8') as f:
        return json.load(f)


@click.group()
@click.version_option(version=__version__, prog_name="lavaboard")
@click.option('--log-level', default=None, help="Logging level (default: LAVABOARD_LOG_LEVEL or WARNING)")
@click.pass_context
def cli(ctx, log_level):
    """lavaboard - box-drawn debug consoles and character canvases"""
    try:
        settings = Settings.from_env()
    except LavaboardError as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        sys.exit(1)
    _configure_logging(log_level or settings.log_level)
    ctx.obj = settings


@cli.command()
@click.argument('file', type=click.Path(exists=True, dir_okay=False), required=False)
@click.option('--width', type=click.IntRange(min=0), default=None, help="Requested console width")
@click.pass_obj
def report(settings, file, width):
    """Render a report document, or the host report when FILE is omitted"""
    width = settings.console_width if width is None else width
    try:
        document = _load_json(file) if file else host_document(width)
        render_report(document, FrameConsole(sys.stdout), default_width=width)
    except (LavaboardError, OSError, json.JSONDecodeError) as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        sys.exit(1)


@cli.command()
@click.argument('file', type=click.Path(exists=True, dir_okay=False))
@click.option('--width', type=click.IntRange(min=0), default=None, help="Override the board width")
@click.option('--height', type=click.IntRange(min=0), default=None, help="Override the board height")
@click.pass_obj
def board(settings, file, width, height):
    """Draw a board document and print it"""
    try:
        document = _load_json(file)
        if not isinstance(document, dict):
            raise LavaboardError("board document must be a JSON object")
        if width is not None:
            document["width"] = width
        if height is not None:
            document["height"] = height
        canvas = draw_board(document, default_width=settings.canvas_width)
        canvas.flush(sys.stdout)
    except (LavaboardError, OSError, json.JSONDecodeError) as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        sys.exit(1)


@cli.command()
@click.pass_obj
def demo(settings):
    """Show the built-in board and the host report"""
    draw_board(demo_board()).flush(sys.stdout)
    click.echo()
    render_report(host_document(settings.console_width), FrameConsole(sys.stdout))


if __name__ == "__main__":
    cli()
