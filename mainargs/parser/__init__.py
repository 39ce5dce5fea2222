"""
MainArgs Switch Toolkit

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .assimilator import Assimilator, AssimilatorState, parse_args
from .help_formatter import HelpFormatter
from .parse_result import ParseResult
from .registry import SwitchRegistry
from .smart_value import SmartValue, ValueKind, infer_value
from .switch import SwitchDefinition, SwitchHandle, SwitchParameter

__all__ = [
    "Assimilator",
    "AssimilatorState",
    "HelpFormatter",
    "ParseResult",
    "SmartValue",
    "SwitchDefinition",
    "SwitchHandle",
    "SwitchParameter",
    "SwitchRegistry",
    "ValueKind",
    "infer_value",
    "parse_args",
]
