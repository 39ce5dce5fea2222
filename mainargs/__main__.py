"""
MainArgs Switch Toolkit

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging
import os
import sys
from pathlib import Path
from typing import Sequence

from rich.markup import escape
from rich.table import Table
from rich.text import Text

from mainargs.config import loader
from mainargs.console import console, error_console
from mainargs.exceptions import MainArgsError
from mainargs.options_manager import OptionsManager
from mainargs.parser import Assimilator, HelpFormatter, ParseResult, SwitchRegistry
from mainargs.utils import setup_logging


def find_mainargs_config() -> Path | None:
    candidates = [
        Path(os.environ["MAINARGS_CONFIG"]) if "MAINARGS_CONFIG" in os.environ else None,
        Path.cwd() / "mainargs.yaml",
        Path.cwd() / "mainargs.yml",
        Path.cwd() / "mainargs.toml",
    ]
    return next((p for p in candidates if p and p.is_file()), None)


def build_demo_registry() -> SwitchRegistry:
    registry = SwitchRegistry()
    registry.define_switch("help", argless=True, summary="Show this help text.")
    registry.define_switch("verbose", argless=True, summary="Enable debug logging.")
    output = registry.define_switch(
        "output", min_args=1, max_args=1, summary="Write the result to a file."
    )
    registry.get(output).add_parameter("path", "path")
    include = registry.define_switch(
        "include",
        min_args=1,
        summary="Add patterns to the selection.",
        remarks="Takes every following value up to the next switch.",
    )
    registry.get(include).add_variadic_parameter("patterns")
    registry.define_switch(
        "dry-run", None, argless=True, summary="Show what would happen."
    )
    return registry


def render_result(result: ParseResult) -> None:
    table = Table(title="switches", show_lines=False)
    table.add_column("switch", style="bold")
    table.add_column("arguments")
    for switch in result.used_switches:
        values = ", ".join(
            f"{value.raw} ({value.kind})" for value in switch.smart_arguments
        )
        table.add_row(Text(switch.get_flags()[0]), Text(values or "-"))
    console.print(table)
    console.print(
        f"[bold]leading:[/bold] {escape(str(result.leading_standalone))}",
        highlight=False,
    )
    console.print(
        f"[bold]trailing:[/bold] {escape(str(result.trailing_standalone))}",
        highlight=False,
    )


def report_error(error: Exception) -> int:
    error_console.print(
        f"[bold red]error:[/bold red] {escape(str(error))}", highlight=False
    )
    return 1


def main(argv: Sequence[str] | None = None) -> int:
    tokens = list(sys.argv[1:] if argv is None else argv)
    config_path = find_mainargs_config()
    try:
        registry = loader(config_path) if config_path else build_demo_registry()
    except (MainArgsError, ValueError) as error:
        return report_error(error)

    verbose = registry.find_long("verbose")
    if verbose is not None and any(
        registry.resolve_switch(token) == verbose.handle
        for token in tokens
        if registry.is_switch_token(token)
    ):
        setup_logging(log_filename=None, console_log_level=logging.DEBUG)

    assimilator = Assimilator(registry)
    try:
        result = assimilator.assimilate(tokens)
    except MainArgsError as error:
        return report_error(error)

    if result.is_used("help"):
        HelpFormatter(registry, tool_name="mainargs").render_help()
        return 0

    options = OptionsManager()
    options.from_parse_result(result)
    render_result(result)
    console.print(
        f"[bold]options:[/bold] {escape(str(options.get_namespace_dict('switches')))}",
        highlight=False,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
