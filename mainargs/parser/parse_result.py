# MainArgs Switch Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""Result of assimilating a token vector."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from mainargs.parser.name_format import LONG_PREFIX, split_prefix
from mainargs.parser.smart_value import SmartValue, infer_value
from mainargs.parser.switch import SwitchDefinition


@dataclass
class ParseResult:
    """
    Classification of a token vector.

    Attributes:
        leading_standalone (list[str]): Tokens before the first switch.
        trailing_standalone (list[str]): Tokens after the last switch's values.
        used_switches (list[SwitchDefinition]): Used switches, in registry order.
        combined_standalone (list[str]): Leading then trailing tokens. Snapshot taken
            when the result is built; later changes to either list do not show up here.
    """

    leading_standalone: list[str] = field(default_factory=list)
    trailing_standalone: list[str] = field(default_factory=list)
    used_switches: list[SwitchDefinition] = field(default_factory=list)
    combined_standalone: list[str] = field(init=False)

    def __post_init__(self) -> None:
        self.combined_standalone = [*self.leading_standalone, *self.trailing_standalone]

    @property
    def leading_smart(self) -> list[SmartValue]:
        return [infer_value(token) for token in self.leading_standalone]

    @property
    def trailing_smart(self) -> list[SmartValue]:
        return [infer_value(token) for token in self.trailing_standalone]

    @property
    def combined_smart(self) -> list[SmartValue]:
        return [infer_value(token) for token in self.combined_standalone]

    def get(self, name: str) -> SwitchDefinition | None:
        """Return the used switch named by `name` (`--long`, `-s`, `/s`, `long`, `s`)."""
        prefix, bare = split_prefix(name)
        for switch in self.used_switches:
            if prefix == LONG_PREFIX:
                matched = switch.long_name == bare
            elif prefix:
                matched = not switch.is_long_only and switch.short_name == bare
            else:
                matched = bare in (switch.long_name, switch.short_name)
            if matched:
                return switch
        return None

    def is_used(self, name: str) -> bool:
        return self.get(name) is not None

    def to_dict(self) -> dict[str, Any]:
        return {
            "leading_standalone": list(self.leading_standalone),
            "trailing_standalone": list(self.trailing_standalone),
            "combined_standalone": list(self.combined_standalone),
            "used_switches": {
                switch.long_name: list(switch.collected_arguments)
                for switch in self.used_switches
            },
        }
