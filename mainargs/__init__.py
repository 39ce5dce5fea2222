"""
MainArgs Switch Toolkit

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .exceptions import (
    ArityNotSatisfiedError,
    DuplicateSwitchUseError,
    MainArgsError,
    SwitchDefinitionError,
    SwitchParseError,
)
from .parser import (
    Assimilator,
    ParseResult,
    SwitchDefinition,
    SwitchHandle,
    SwitchRegistry,
    parse_args,
)

logger = logging.getLogger("mainargs")

__version__ = "0.1.0"

__all__ = [
    "Assimilator",
    "ParseResult",
    "SwitchDefinition",
    "SwitchHandle",
    "SwitchRegistry",
    "parse_args",
    "MainArgsError",
    "SwitchDefinitionError",
    "SwitchParseError",
    "DuplicateSwitchUseError",
    "ArityNotSatisfiedError",
]
