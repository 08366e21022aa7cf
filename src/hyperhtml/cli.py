"""
hyperhtml CLI - render documents from the command line.

Usage:
    hyperhtml render site.pages:home [-o home.html] [--config DIR]
    hyperhtml tags
"""

from __future__ import annotations

import importlib
import logging
import sys
from pathlib import Path

import click

from .config import load_settings
from .core import render
from .elements import TAGS

logger = logging.getLogger(__name__)


def import_target(target: str):
    """Resolve 'package.module:attribute' to the object it names."""
    module_name, _, attribute = target.partition(":")
    if not module_name or not attribute:
        raise click.BadParameter(f"expected 'module:attribute', got '{target}'", param_hint="TARGET")

    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise click.BadParameter(f"cannot import '{module_name}': {exc}", param_hint="TARGET") from exc

    obj = module
    for part in attribute.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as exc:
            raise click.BadParameter(
                f"'{module_name}' has no attribute '{attribute}'", param_hint="TARGET"
            ) from exc

    if not callable(obj):
        raise click.BadParameter(f"'{target}' is not renderable", param_hint="TARGET")
    return obj


@click.group()
@click.version_option(package_name="hyperhtml")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool):
    """hyperhtml - render lazily composed HTML documents."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)


@cli.command("render")
@click.argument("target")
@click.option("--output", "-o", type=click.Path(dir_okay=False, path_type=Path), help="Write to file")
@click.option(
    "--config",
    "config_dir",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Directory holding a pyproject.toml with [tool.hyperhtml]",
)
@click.option("--app-dir", default=".", show_default=True, help="Added to sys.path before import")
def render_command(target: str, output: Path | None, config_dir: Path | None, app_dir: str):
    """Render TARGET (module:attribute) to stdout or a file."""
    if config_dir is not None:
        load_settings(config_dir)

    added = app_dir not in sys.path
    if added:
        sys.path.insert(0, app_dir)
    try:
        thunk = import_target(target)
    finally:
        if added:
            sys.path.remove(app_dir)

    logger.info(f"rendering {target}")
    content = render(thunk)

    if output is None:
        click.echo(content)
        return

    output.write_text(content + "\n")
    click.echo(f"✓ Wrote {output}", err=True)


@cli.command()
def tags():
    """List the tag catalog."""
    for name in TAGS:
        click.echo(name)


def main():
    cli()


if __name__ == "__main__":
    main()
