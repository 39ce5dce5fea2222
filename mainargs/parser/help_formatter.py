# MainArgs Switch Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Help text for the switches of a `SwitchRegistry`.

`HelpFormatter` lists every switch in registry order with its flags, arity bounds,
documented parameters, summary and remarks. Switches named `settings`, `copyright`
and `help` (or passed explicitly) are left out of the usage list and announced in
their own sections at the end.

`build_help()` returns plain text; `render_help()` prints the same content through
the shared Rich console.
"""
from __future__ import annotations

from rich.console import Console
from rich.markup import escape

from mainargs.console import console
from mainargs.parser.registry import SwitchRegistry
from mainargs.parser.switch import SwitchDefinition, SwitchHandle
from mainargs.utils import get_program_invocation

RULE = "=" * 35
SEPARATOR = "-" * 35


class HelpFormatter:
    """Builds and renders help text for a registry."""

    def __init__(
        self,
        registry: SwitchRegistry,
        tool_name: str | None = None,
        description: str = "",
        copyright_text: str = "",
        settings_switch: SwitchHandle | None = None,
        copyright_switch: SwitchHandle | None = None,
        help_switch: SwitchHandle | None = None,
        console: Console = console,
    ) -> None:
        self.registry: SwitchRegistry = registry
        self.tool_name: str = tool_name or get_program_invocation()
        self.description: str = description
        self.copyright_text: str = copyright_text
        self.console: Console = console
        self.settings_switch = self._find_reserved(settings_switch, "settings")
        self.copyright_switch = self._find_reserved(copyright_switch, "copyright")
        self.help_switch = self._find_reserved(help_switch, "help")

    def _find_reserved(
        self, handle: SwitchHandle | None, long_name: str
    ) -> SwitchDefinition | None:
        if handle is not None:
            return self.registry.get(handle)
        return self.registry.find_long(long_name)

    def _is_reserved(self, switch: SwitchDefinition) -> bool:
        return any(
            reserved is not None and reserved.handle == switch.handle
            for reserved in (self.settings_switch, self.copyright_switch, self.help_switch)
        )

    def get_usage(self, switch: SwitchDefinition) -> str:
        """Return a usage line such as `tool --copy {string:source} ... {string:dest}`."""
        parts = [self.tool_name, switch.get_flags()[0]]
        parts.extend(parameter.get_signature_text() for parameter in switch.parameters)
        return " ".join(parts)

    def _switch_lines(self, switch: SwitchDefinition, plain_text: bool) -> list[str]:
        def text(value: str) -> str:
            return value if plain_text else escape(value)

        def label(value: str) -> str:
            return value if plain_text else f"[bold]{value}[/bold]"

        lines = [f"  {text(', '.join(switch.get_flags()))}"]
        if switch.min_args != 0:
            lines.append(f"    {label('minimum arguments required:')} {switch.min_args}")
        if switch.max_args is not None:
            lines.append(f"    {label('maximum arguments accepted:')} {switch.max_args}")
        lines.append(f"    {label('usage:')} {text(self.get_usage(switch))}")
        if switch.summary:
            lines.append(f"    {label('summary:')}")
            lines.extend(f"      {text(line)}" for line in switch.summary.splitlines())
        if switch.remarks:
            lines.append(f"    {label('remarks:')}")
            lines.extend(f"      {text(line)}" for line in switch.remarks.splitlines())
        return lines

    def get_help_lines(self, plain_text: bool = False) -> list[str]:
        def text(value: str) -> str:
            return value if plain_text else escape(value)

        def header(value: str) -> str:
            return value if plain_text else f"[bold]{value}[/bold]"

        lines = [RULE, header(f"=== HELP: {text(self.tool_name)}"), RULE]
        if self.description:
            lines.append(header("DESCRIPTION:"))
            lines.extend(text(line) for line in self.description.splitlines())
            lines.append(SEPARATOR)

        lines.append(header("USAGES:"))
        usable = [switch for switch in self.registry if not self._is_reserved(switch)]
        for index, switch in enumerate(usable):
            lines.extend(self._switch_lines(switch, plain_text))
            if index != len(usable) - 1:
                lines.append("")

        if self.settings_switch is not None:
            lines.append(SEPARATOR)
            lines.append(header("SETTINGS:"))
            lines.extend(self._switch_lines(self.settings_switch, plain_text))

        if self.copyright_switch is not None or self.copyright_text:
            lines.append(SEPARATOR)
            lines.append(header("COPYRIGHT:"))
            if self.copyright_switch is not None:
                lines.extend(self._switch_lines(self.copyright_switch, plain_text))
            if self.copyright_text:
                lines.extend(text(line) for line in self.copyright_text.splitlines())

        if self.help_switch is not None:
            lines.append(SEPARATOR)
            lines.append(header("HELP:"))
            lines.extend(self._switch_lines(self.help_switch, plain_text))

        return lines

    def build_help(self) -> str:
        """Return the help text as plain text."""
        return "\n".join(self.get_help_lines(plain_text=True)) + "\n"

    def render_help(self) -> None:
        """Print the help text using Rich output."""
        for line in self.get_help_lines():
            self.console.print(line, highlight=False)
