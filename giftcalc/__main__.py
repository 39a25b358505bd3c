"""CLI for gift-calc.

Usage:
    gift-calc [options]              # Calculate a gift amount
    gift-calc -b 100 -f 8 -n 9       # Base 100, good friend, nice person
    gift-calc --name "Alice" --max   # Fixed maximum for Alice
    gift-calc --version              # Show version
    gift-calc -h                     # Full help

Tokens are passed untouched to giftcalc.parser.parse_arguments; typer only
provides the entry point, so -h, --version and friends are handled there.
"""

from __future__ import annotations

import logging
import random
from typing import Callable, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from giftcalc import __version__
from giftcalc.calculator import UniformSource, compute_final_amount
from giftcalc.environment import load_defaults, load_seed, log_level
from giftcalc.formatting import format_output, get_help_text
from giftcalc.models import Command, ParsedConfig
from giftcalc.parser import ArgumentError, parse_arguments

app = typer.Typer(
    name="gift-calc",
    help="Suggest a gift amount from a base value, scores and random variation",
    add_completion=False,
)
console = Console(stderr=True)
out = Console()

# Receives one record per calculated result unless --no-log is given.
history_logger = logging.getLogger("giftcalc.history")


def _setup_logging() -> None:
    logging.basicConfig(
        level=log_level(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
    )


def _print_plain(text: str) -> None:
    """Print user-facing text to stdout without markup or wrapping."""
    out.print(text, markup=False, highlight=False, soft_wrap=True)


def _show_help(config: ParsedConfig) -> None:
    _print_plain(get_help_text())


def _show_version(config: ParsedConfig) -> None:
    _print_plain(f"gift-calc version {__version__}")


def _unavailable(feature: str, hint: str) -> Callable[[ParsedConfig], None]:
    def handler(config: ParsedConfig) -> None:
        console.print(f"[yellow]{feature} is not available in this build.[/yellow]")
        console.print(hint, markup=False)

    return handler


_COMMAND_HANDLERS: dict[Command, Callable[[ParsedConfig], None]] = {
    Command.VERSION: _show_version,
    Command.INIT_CONFIG: _unavailable(
        "Configuration setup",
        "Set GIFT_CALC_* environment variables to change defaults.",
    ),
    Command.UPDATE_CONFIG: _unavailable(
        "Configuration update",
        "Set GIFT_CALC_* environment variables to change defaults.",
    ),
    Command.LOG: _unavailable(
        "Log viewing",
        "Set GIFT_CALC_LOG_LEVEL=INFO to see calculations on stderr.",
    ),
}


def _calculate(config: ParsedConfig, source: Optional[UniformSource]) -> None:
    amount = compute_final_amount(config.to_parameters(), source=source)
    line = format_output(amount, config.currency, config.recipient_name)
    _print_plain(line)

    if config.copy_to_clipboard:
        console.print("[yellow]Clipboard copy is not available in this build.[/yellow]")
    if config.log_to_file:
        history_logger.info("%s", line)


@app.command(
    context_settings={
        "allow_extra_args": True,
        "ignore_unknown_options": True,
        "help_option_names": [],
    },
)
def cmd_calculate(ctx: typer.Context) -> None:
    """Calculate a gift amount (run with -h for all options)."""
    _setup_logging()

    try:
        config = parse_arguments(ctx.args, load_defaults())
    except ArgumentError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False, soft_wrap=True)
        raise typer.Exit(1)

    if config.show_help:
        _show_help(config)
        return
    if config.command:
        _COMMAND_HANDLERS[config.command](config)
        return

    seed = load_seed()
    source = random.Random(seed) if seed is not None else None
    _calculate(config, source)


if __name__ == "__main__":
    app()
