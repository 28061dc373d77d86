"""
Component Rendering CLI

Renders component actions from the command line, mainly to debug template
lookup outside of a running application.

Commands:
    render - Call a component action and print the rendered output
    locate - Show which template a component would render for a name

Examples:\n

    componentry render myapp.components:UsersComponent details --arg user_id=7

    componentry render myapp.components:UsersComponent details -p vendor/components

    componentry locate myapp.components:AdminUsersComponent details
"""

import importlib
import sys
from pathlib import Path
from typing import List, Optional

import typer
from loguru import logger
from typing_extensions import Annotated

from componentry.base import Component
from componentry.contexts.rendering.logger import (
    _log_error,
    _log_success,
    setup_rendering_logger,
)
from componentry.contexts.templating.exceptions import ComponentryError

app = typer.Typer(
    help="Render components and inspect template lookup",
    add_completion=False,
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def load_component_class(target: str) -> type:
    """
    Import a component class from a 'module.path:ClassName' target.

    Raises:
        typer.BadParameter: If the target is malformed or not a Component subclass
    """
    module_name, _, class_name = target.partition(":")
    if not module_name or not class_name:
        raise typer.BadParameter(f"Expected 'module:ClassName', got '{target}'")

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise typer.BadParameter(f"Cannot import module '{module_name}': {e}") from e

    component_class = getattr(module, class_name, None)
    if not (isinstance(component_class, type) and issubclass(component_class, Component)):
        raise typer.BadParameter(f"'{target}' is not a Component subclass")

    return component_class


def parse_action_args(args: List[str]) -> dict:
    """
    Parse repeated key=value options into keyword arguments.

    Example:
        >>> parse_action_args(["user_id=7", "mode=full"])
        {'user_id': '7', 'mode': 'full'}
    """
    kwargs = {}
    for arg in args:
        key, sep, value = arg.partition("=")
        if not sep or not key:
            raise typer.BadParameter(f"Expected key=value, got '{arg}'")
        kwargs[key] = value
    return kwargs


def _configure_logging(log_dir: Optional[Path], target: str, verbose: bool) -> None:
    console_level = "DEBUG" if verbose else "WARNING"
    if log_dir is not None:
        setup_rendering_logger(log_dir, component=target, console_level=console_level)
    else:
        logger.remove()
        logger.add(sys.stderr, format="<level>{level: <7}</level> | {message}", level=console_level)


def _register_view_paths(component_class: type, view_paths: List[Path]) -> None:
    for path in view_paths:
        if path not in component_class.view_paths:
            component_class.view_paths.append(path)


@app.command("render")
def render_command(
    target: Annotated[
        str,
        typer.Argument(help="Component class as 'module.path:ClassName'"),
    ],
    action_name: Annotated[
        str,
        typer.Argument(metavar="ACTION", help="Action method to call"),
    ],
    args: Annotated[
        Optional[List[str]],
        typer.Option("--arg", "-a", help="Keyword argument for the action as key=value"),
    ] = None,
    view_paths: Annotated[
        Optional[List[Path]],
        typer.Option("--view-path", "-p", help="Extra template search root (repeatable)"),
    ] = None,
    log_dir: Annotated[
        Optional[Path],
        typer.Option("--log-dir", help="Write a render.log session log to this directory"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show template lookup on the console"),
    ] = False,
):
    """
    Call a component action and print what it renders.

    Examples:\n

        $ componentry render myapp.components:UsersComponent details -a user_id=7
    """
    _configure_logging(log_dir, target, verbose)

    component_class = load_component_class(target)
    _register_view_paths(component_class, view_paths or [])
    kwargs = parse_action_args(args or [])

    component = component_class()
    method = getattr(component, action_name, None)
    if not callable(method):
        typer.secho(f"Error: {target} has no action '{action_name}'", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    try:
        output = method(**kwargs)
    except ComponentryError as e:
        _log_error(f"{target}.{action_name} failed with {type(e).__name__}")
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    _log_success(f"{target}.{action_name} rendered")
    typer.echo(output, nl=False)


@app.command("locate")
def locate_command(
    target: Annotated[
        str,
        typer.Argument(help="Component class as 'module.path:ClassName'"),
    ],
    name: Annotated[
        str,
        typer.Argument(help="Template name, bare or slash-qualified"),
    ],
    view_paths: Annotated[
        Optional[List[Path]],
        typer.Option("--view-path", "-p", help="Extra template search root (repeatable)"),
    ] = None,
):
    """
    Show the canonical template path a component would render for a name.

    Examples:\n

        $ componentry locate myapp.components:AdminUsersComponent details
    """
    _configure_logging(None, target, verbose=False)

    component_class = load_component_class(target)
    _register_view_paths(component_class, view_paths or [])

    try:
        template_path = component_class().template_path_for(name)
    except ComponentryError as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    typer.echo(template_path)


if __name__ == "__main__":
    app()
