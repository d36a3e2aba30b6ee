"""
Hill CLI
=========

Click-based command-line interface for the Hill cipher tool. Provides
subcommands to encrypt, decrypt, inspect a key, and run the complete
classroom walkthrough (key setup, encryption, decryption).

Usage::

    python -m hill encrypt "Help me" --key HILL --dimension 2
    python -m hill decrypt DRPA --key HILL --dimension 2
    python -m hill inspect-key GYBNQKURP --dimension 3
    python -m hill demo                      # prompts for everything

References:
    - Click Documentation. https://click.palletsprojects.com/
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import click

from shared.config import HillCoreConfig
from shared.console import HillConsole
from shared.logger import HillLogger

from hill import __version__
from hill.core.engine import HillEngine
from hill.core.models import CipherTrace, RoundTripResult
from hill.errors import HillError
from hill.output.console import HillConsoleOutput
from hill.output.report import HillReportGenerator, HillResult


# ===================================================================== #
#  CLI Group
# ===================================================================== #

@click.group()
@click.version_option(__version__, prog_name="hillcore")
@click.option(
    "--config", "-c",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to HillCore configuration file (TOML).",
)
@click.option(
    "--output", "-o",
    type=click.Choice(["console", "json"]),
    default="console",
    help="Output format.",
)
@click.option(
    "--output-file", "-f",
    type=click.Path(dir_okay=False),
    default=None,
    help="Output file path (for JSON output).",
)
@click.option(
    "--quiet", "-q",
    is_flag=True,
    default=False,
    help="Print only the resulting text.",
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    default=False,
    help="Log engine activity to stderr.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[str],
    output: str,
    output_file: Optional[str],
    quiet: bool,
    verbose: bool,
) -> None:
    """HillCore -- Hill cipher encryption and decryption.

    Keys are strings of n*n letters laid out row-major in an n x n
    matrix. Messages are reduced to the letters A-Z before encryption.
    """
    ctx.ensure_object(dict)

    hill_config = HillCoreConfig.load(config)
    settings = hill_config.global_settings
    if verbose:
        settings.log_level = "DEBUG" if settings.debug else "INFO"

    logger = HillLogger(
        "hill.engine",
        log_level=settings.log_level,
        log_file=settings.log_file or None,
        json_logs=settings.log_json,
        console_output=not quiet,
    )

    console = HillConsole(quiet=quiet)
    ctx.obj["config"] = hill_config
    ctx.obj["output_format"] = output
    ctx.obj["output_file"] = output_file
    ctx.obj["quiet"] = quiet
    ctx.obj["console"] = console
    ctx.obj["engine"] = HillEngine(hill_config, logger=logger)
    ctx.obj["display"] = HillConsoleOutput(console)
    ctx.obj["reporter"] = HillReportGenerator(version=__version__)

    if not quiet and output == "console":
        console.banner(version=__version__)


# ===================================================================== #
#  Helpers
# ===================================================================== #

def _fail(ctx: click.Context, exc: HillError) -> None:
    """Render *exc* and exit with status 1."""
    console: HillConsole = ctx.obj["console"]
    if ctx.obj["quiet"]:
        click.echo(f"Error: {exc}", err=True)
    else:
        console.error(str(exc))
    ctx.exit(1)


def _resolve_dimension(ctx: click.Context, dimension: Optional[str], prompt: bool) -> str:
    if dimension is not None:
        return dimension
    if prompt:
        return click.prompt(
            "Enter the key matrix dimension (e.g., 2 for a 2x2 matrix)",
            type=str,
        )
    config: HillCoreConfig = ctx.obj["config"]
    return str(config.hill.default_dimension)


def _setup(ctx: click.Context, key: Optional[str], dimension: Optional[str], *, prompt: bool = False):
    engine: HillEngine = ctx.obj["engine"]
    dim = _resolve_dimension(ctx, dimension, prompt)
    if key is None:
        key = click.prompt("Enter the key value", type=str)
    try:
        return engine.setup(key, dim)
    except HillError as exc:
        _fail(ctx, exc)


def _show_steps(ctx: click.Context, no_steps: bool) -> bool:
    config: HillCoreConfig = ctx.obj["config"]
    return config.hill.show_steps and not no_steps


def _handle_output(ctx: click.Context, result: HillResult) -> None:
    """Write *result* as JSON to the output file or stdout."""
    output_file = ctx.obj["output_file"]
    reporter: HillReportGenerator = ctx.obj["reporter"]
    console: HillConsole = ctx.obj["console"]

    if output_file:
        path = reporter.generate_json(result, Path(output_file))
        console.success(f"JSON report saved to: {path}")
    else:
        click.echo(reporter.to_json(result))


def _emit_trace(ctx: click.Context, trace: CipherTrace, no_steps: bool) -> None:
    if ctx.obj["output_format"] == "json":
        _handle_output(ctx, trace)
    elif ctx.obj["quiet"]:
        click.echo(trace.output_text)
    else:
        display: HillConsoleOutput = ctx.obj["display"]
        show = _show_steps(ctx, no_steps)
        if show:
            display.display_key_setup(ctx.obj["engine"].key_setup)
        display.display_trace(trace, show_steps=show)


_key_option = click.option(
    "--key", "-k",
    default=None,
    help="Key letters (dimension * dimension of them). Prompted if omitted.",
)
_dimension_option = click.option(
    "--dimension", "-d",
    default=None,
    help="Key matrix dimension n (defaults to hill.default_dimension).",
)
_steps_option = click.option(
    "--no-steps",
    is_flag=True,
    default=False,
    help="Hide the key setup and the per-block vectors.",
)


# ===================================================================== #
#  Subcommands
# ===================================================================== #

@cli.command()
@click.argument("message", required=False)
@_key_option
@_dimension_option
@_steps_option
@click.pass_context
def encrypt(
    ctx: click.Context,
    message: Optional[str],
    key: Optional[str],
    dimension: Optional[str],
    no_steps: bool,
) -> None:
    """Encrypt MESSAGE (non-letters are dropped, 'X' pads the last block)."""
    _setup(ctx, key, dimension)
    if message is None:
        message = click.prompt("Enter the message to encrypt", type=str)
    try:
        trace = ctx.obj["engine"].encrypt(message)
    except HillError as exc:
        _fail(ctx, exc)
        return
    _emit_trace(ctx, trace, no_steps)


@cli.command()
@click.argument("ciphertext", required=False)
@_key_option
@_dimension_option
@_steps_option
@click.pass_context
def decrypt(
    ctx: click.Context,
    ciphertext: Optional[str],
    key: Optional[str],
    dimension: Optional[str],
    no_steps: bool,
) -> None:
    """Decrypt CIPHERTEXT. Padding letters from encryption are kept."""
    _setup(ctx, key, dimension)
    if ciphertext is None:
        ciphertext = click.prompt("Enter the message to decrypt", type=str)
    try:
        trace = ctx.obj["engine"].decrypt(ciphertext)
    except HillError as exc:
        _fail(ctx, exc)
        return
    _emit_trace(ctx, trace, no_steps)


@cli.command("inspect-key")
@click.argument("key")
@_dimension_option
@click.option("--adjugate", is_flag=True, default=False, help="Also show adj(K).")
@click.pass_context
def inspect_key(
    ctx: click.Context,
    key: str,
    dimension: Optional[str],
    adjugate: bool,
) -> None:
    """Show the key matrix, its determinant and its inverse mod 26."""
    setup = _setup(ctx, key, dimension)
    if ctx.obj["output_format"] == "json":
        _handle_output(ctx, setup)
    elif ctx.obj["quiet"]:
        click.echo(" ".join(str(v) for row in setup.inverse_matrix for v in row))
    else:
        ctx.obj["display"].display_key_setup(setup, show_adjugate=adjugate)
        ctx.obj["console"].success(f"Key '{setup.key}' is invertible mod 26.")


@cli.command()
@click.argument("message", required=False)
@_key_option
@_dimension_option
@_steps_option
@click.pass_context
def demo(
    ctx: click.Context,
    message: Optional[str],
    key: Optional[str],
    dimension: Optional[str],
    no_steps: bool,
) -> None:
    """Full walkthrough: key setup, encryption, then decryption.

    Prompts for the dimension, key, and message when they are not given.
    """
    _setup(ctx, key, dimension, prompt=True)
    if message is None:
        message = click.prompt("Enter the message to encrypt", type=str)
    try:
        result: RoundTripResult = ctx.obj["engine"].round_trip(message)
    except HillError as exc:
        _fail(ctx, exc)
        return

    if ctx.obj["output_format"] == "json":
        _handle_output(ctx, result)
    elif ctx.obj["quiet"]:
        click.echo(result.encryption.output_text)
        click.echo(result.decryption.output_text)
    else:
        ctx.obj["display"].display_round_trip(result, show_steps=_show_steps(ctx, no_steps))


# ===================================================================== #
#  Entry Point
# ===================================================================== #

def main() -> None:
    """Main entry point for the Hill CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
