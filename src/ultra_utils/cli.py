# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""
``ultra-utils`` command line.

Any registered function can be called by name, with its arguments converted
according to the function's type hints::

    $ ultra-utils slugify "Hello World"
    hello-world
    $ ultra-utils chunk "[1, 2, 3, 4]" 2
    [[1, 2], [3, 4]]

Informational commands::

    $ ultra-utils help            # overview and categories
    $ ultra-utils help string     # functions of one category
    $ ultra-utils list            # every function

Dicts, lists and records are printed as indented JSON; other values are
printed as text. Unknown functions and failing calls exit with status 1.
"""

from __future__ import annotations

import dataclasses
import inspect
import json
import logging
from collections.abc import Callable, Sequence
from datetime import date, datetime
from pathlib import Path
from typing import Any

import click

from . import __version__, registry
from .coercion import ArgumentError, bind_arguments
from .config import load_settings
from .logging import configure_logging, verbosity_level

__all__ = [
    "FunctionNotFound",
    "FunctionFailed",
    "format_result",
    "call_function",
    "cli",
    "main",
]

logger = logging.getLogger(__name__)

PROG_NAME = "ultra-utils"


# -----------------------------------------------------------------------------
# Errors
# -----------------------------------------------------------------------------


class FunctionNotFound(click.ClickException):
    """No registered function has the requested name."""

    def __init__(self, name: str):
        lines = [f"Function '{name}' not found"]
        suggestions = registry.suggest(name)
        if suggestions:
            lines.append("Did you mean: " + ", ".join(suggestions))
        lines.append(f'Use "{PROG_NAME} list" to see all available functions')
        super().__init__("\n".join(lines))
        self.name = name
        self.suggestions = suggestions


class FunctionFailed(click.ClickException):
    """The called function raised, or its arguments could not be converted."""

    def __init__(self, name: str, error: BaseException | str):
        lines = [f"Error executing {name}: {error}"]
        category = registry.find_category(name)
        if category is not None:
            lines.append(f"This function is in the {category.title} category")
            lines.append(f'Use "{PROG_NAME} help {category.key}" for more info')
        super().__init__("\n".join(lines))
        self.name = name
        self.error = error


# -----------------------------------------------------------------------------
# Output
# -----------------------------------------------------------------------------


def _json_default(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, (set, frozenset)):
        return list(value)
    if isinstance(value, bytes):
        return value.decode("latin-1")
    return repr(value)


def format_result(result: Any, indent: int | None = 2) -> str:
    """
    Render a call result for the terminal.

    Examples:
        >>> format_result({"a": [1, 2]}, indent=None)
        '{"a": [1, 2]}'
        >>> format_result(True)
        'true'
        >>> format_result("hello-world")
        'hello-world'
    """
    if isinstance(result, str):
        return result
    if isinstance(result, (datetime, date)):
        return result.isoformat()
    if isinstance(result, (bool, type(None))):
        return json.dumps(result)
    if isinstance(result, (dict, list, tuple, set, frozenset)) or (
        dataclasses.is_dataclass(result) and not isinstance(result, type)
    ):
        return json.dumps(result, indent=indent, default=_json_default, ensure_ascii=False)
    return str(result)


def _signature(name: str, func: Callable[..., Any]) -> str:
    prefixes = {
        inspect.Parameter.VAR_POSITIONAL: "*",
        inspect.Parameter.VAR_KEYWORD: "**",
    }
    params = [
        prefixes.get(param.kind, "") + param.name
        for param in inspect.signature(func).parameters.values()
    ]
    return f"{name}({', '.join(params)})"


# -----------------------------------------------------------------------------
# Function commands
# -----------------------------------------------------------------------------


def call_function(name: str, args: Sequence[str]) -> Any:
    """
    Look up ``name``, convert ``args`` and call the function.

    Raises:
        FunctionNotFound: If ``name`` is not registered.
        FunctionFailed: If the arguments do not fit or the function raises.
    """
    func = registry.find_function(name)
    if func is None:
        raise FunctionNotFound(name)
    try:
        values = bind_arguments(func, args)
    except ArgumentError as exc:
        raise FunctionFailed(name, f"{exc}. Usage: {_signature(name, func)}") from exc

    logger.info("Calling %s(%s)", name, ", ".join(args))
    try:
        return func(*values)
    except Exception as exc:
        logger.debug("%s raised", name, exc_info=True)
        raise FunctionFailed(name, exc) from exc


def _function_command(name: str, func: Callable[..., Any]) -> click.Command:
    doc = inspect.getdoc(func) or ""
    summary = doc.strip().splitlines()[0] if doc.strip() else ""

    @click.command(
        name=name,
        help=summary or None,
        context_settings={"ignore_unknown_options": True, "allow_interspersed_args": False},
    )
    @click.argument("args", nargs=-1, type=click.UNPROCESSED)
    @click.pass_context
    def run(ctx: click.Context, args: tuple[str, ...]) -> None:
        result = call_function(name, args)
        indent = ctx.obj.output_indent if ctx.obj is not None else 2
        # 0 means compact, single-line JSON
        click.echo(format_result(result, indent=indent or None))

    return run


class FunctionGroup(click.Group):
    """Group resolving unknown command names against the function registry."""

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        command = super().get_command(ctx, cmd_name)
        if command is not None:
            return command
        func = registry.find_function(cmd_name)
        if func is None:
            return None
        return _function_command(cmd_name, func)

    def resolve_command(
        self, ctx: click.Context, args: list[str]
    ) -> tuple[str | None, click.Command | None, list[str]]:
        name = args[0]
        command = self.get_command(ctx, name)
        if command is None and not ctx.resilient_parsing and not name.startswith("-"):
            raise FunctionNotFound(name)
        return super().resolve_command(ctx, args)


# -----------------------------------------------------------------------------
# Help and list
# -----------------------------------------------------------------------------


def _heading(text: str, underline: str = "=") -> None:
    click.echo(click.style(f"\n{text}", fg="cyan", bold=True))
    click.echo(click.style(underline * len(text), fg="blue"))


def show_overview() -> None:
    _heading("Ultra Utils CLI")
    click.echo(click.style("\nUsage:", fg="yellow"))
    click.echo(f"  {PROG_NAME} <function> [arguments...]")
    click.echo(f"  {PROG_NAME} help [category]")
    click.echo(f"  {PROG_NAME} list")

    click.echo(click.style("\nExamples:", fg="yellow"))
    for example in (
        'slugify "Hello World"',
        'camelCase "hello-world"',
        "randomColor",
        'sha256 "password"',
        "help string",
    ):
        click.echo(f"  {PROG_NAME} {example}")

    click.echo(click.style("\nCategories:", fg="yellow"))
    for key, category in registry.CATEGORIES.items():
        click.echo(
            f"  {click.style(key.ljust(10), fg='green')} "
            f"{category.title} ({len(category)} functions)"
        )
    click.echo(click.style("\nFor detailed help on a category:", fg="yellow"))
    click.echo(f"  {PROG_NAME} help <category>\n")


def show_category(key: str) -> None:
    category = registry.CATEGORIES.get(key)
    if category is None:
        available = ", ".join(registry.CATEGORIES)
        raise click.ClickException(
            f"Unknown category: {key}\nAvailable categories: {available}"
        )
    _heading(category.title)
    for name, func in category.functions.items():
        doc = inspect.getdoc(func) or ""
        summary = doc.strip().splitlines()[0] if doc.strip() else ""
        line = f"  {click.style(name.ljust(24), fg='green')}"
        click.echo(f"{line} {summary}".rstrip())
    click.echo(click.style(f"\nTotal: {len(category)} functions", fg="yellow"))
    first = next(iter(category.functions))
    click.echo(click.style("\nUsage example:", fg="yellow"))
    click.echo(f"  {PROG_NAME} {first} [arguments...]\n")


def show_all() -> None:
    _heading("All Available Functions")
    total = 0
    for category in registry.CATEGORIES.values():
        click.echo(click.style(f"\n{category.title}", fg="magenta"))
        click.echo(click.style("-" * len(category.title), fg="blue"))
        names = list(category.functions)
        for start in range(0, len(names), 3):
            row = " ".join(
                click.style(name.ljust(24), fg="green") for name in names[start : start + 3]
            )
            click.echo(f"  {row}".rstrip())
        total += len(category)
    click.echo(click.style(f"\nTotal: {total} utility functions available\n", fg="cyan"))


# -----------------------------------------------------------------------------
# Entry point
# -----------------------------------------------------------------------------


def _check_indent(value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise click.ClickException(
            f"Cannot load settings: output_indent must be a non-negative integer, "
            f"got {value!r}"
        )


@click.group(
    name=PROG_NAME,
    cls=FunctionGroup,
    invoke_without_command=True,
    help="Call any ultra-utils function from the command line.",
)
@click.version_option(__version__, prog_name=PROG_NAME)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help="Increase the default WARNING verbosity by one level per repetition.",
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help="Decrease the default WARNING verbosity by one level per repetition.",
)
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    envvar="ULTRA_UTILS_CONFIG",
    help="Settings file (.toml, .json, .ini, .yaml).",
)
@click.option("--indent", type=click.IntRange(min=0), help="JSON indentation for results.")
@click.option("--color/--no-color", default=None, help="Force or disable colored output.")
@click.pass_context
def cli(
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    config_file: Path | None,
    indent: int | None,
    color: bool | None,
) -> None:
    try:
        settings = load_settings(
            config_file, overrides={"output_indent": indent, "output_color": color}
        )
    except (OSError, ValueError, ImportError) as exc:
        raise click.ClickException(f"Cannot load settings: {exc}") from exc
    _check_indent(settings.output_indent)

    if color is not None or not settings.output_color:
        ctx.color = bool(settings.output_color)

    base_level = settings.log_level or logging.WARNING
    level = verbosity_level(base_level, verbose_count, quiet_count)
    configure_logging(level=level, color=ctx.color is not False)
    logger.debug("Settings: %s", settings.as_dict())
    ctx.call_on_close(logging.shutdown)

    ctx.obj = settings
    if ctx.invoked_subcommand is None:
        show_overview()


@cli.command("help")
@click.argument("category", required=False)
def help_command(category: str | None) -> None:
    """Show the overview, or the functions of CATEGORY."""
    if category:
        show_category(category)
    else:
        show_overview()


@cli.command("list")
def list_command() -> None:
    """List every available function."""
    show_all()


def main() -> None:
    cli(prog_name=PROG_NAME)
