from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import TextIO

import click

from tsconfig.core import CONFIG_FILENAME, ConfigNotFoundError, find, load, load_async, resolve
from tsconfig.parsing import sanitize

logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")
logger = logging.getLogger("tsconfig")

_cwd_option = click.option(
    "--cwd",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=".",
    show_default=True,
    help="Directory to resolve from.",
)
_project_option = click.option(
    "--project",
    "-p",
    "project",
    default=None,
    help="Config file, or directory containing one. Searches upwards when omitted.",
)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log every lookup step.")
@click.option(
    "--config-filename",
    default=CONFIG_FILENAME,
    show_default=True,
    help="Name of the config file to look for.",
)
@click.pass_context
def main(ctx: click.Context, verbose: bool, config_filename: str) -> None:
    """Locate and load tsconfig-style JSON files."""
    if verbose:
        logger.setLevel(logging.DEBUG)
    ctx.obj = {"config_filename": config_filename}


@main.command("find")
@click.argument("directory", type=click.Path(file_okay=False, path_type=Path), default=".")
@click.pass_context
def find_command(ctx: click.Context, directory: Path) -> None:
    """Print the nearest config file at or above DIRECTORY."""
    obj = ctx.obj
    path = find(directory, config_filename=obj["config_filename"])
    if path is None:
        click.echo(f"No {obj['config_filename']} found above {directory.resolve()}", err=True)
        ctx.exit(1)
    click.echo(str(path))


@main.command("resolve")
@_project_option
@_cwd_option
@click.pass_context
def resolve_command(ctx: click.Context, project: str | None, cwd: Path) -> None:
    """Print the config file that would be loaded."""
    obj = ctx.obj
    try:
        path = resolve(cwd, project, config_filename=obj["config_filename"])
    except ConfigNotFoundError as e:
        raise click.ClickException(str(e)) from e

    if path is None:
        click.echo(f"No {obj['config_filename']} found above {cwd.resolve()}", err=True)
        ctx.exit(1)
    click.echo(str(path))


@main.command("show")
@_project_option
@_cwd_option
@click.option("--indent", type=int, default=2, show_default=True, help="JSON indentation.")
@click.option("--async", "use_async", is_flag=True, default=False, help="Use the asyncio loader.")
@click.pass_obj
def show_command(obj: dict, project: str | None, cwd: Path, indent: int, use_async: bool) -> None:
    """Load the config file and print it as strict JSON."""
    config_filename = obj["config_filename"]
    try:
        if use_async:
            result = asyncio.run(load_async(cwd, project, config_filename=config_filename))
        else:
            result = load(cwd, project, config_filename=config_filename)
    except ConfigNotFoundError as e:
        raise click.ClickException(str(e)) from e
    except json.JSONDecodeError as e:
        raise click.ClickException(f"Invalid JSON in {project or config_filename}: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise click.ClickException(f"Cannot read {project or config_filename}: {e}") from e

    logger.debug("show: path=%s", result.path)
    click.echo(json.dumps(result.config, indent=indent))


@main.command("sanitize")
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
def sanitize_command(source: TextIO) -> None:
    """Print SOURCE with comments and dangling commas removed."""
    click.echo(sanitize(source.read()), nl=False)


if __name__ == "__main__":
    main()
