# MainArgs Switch Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by MainArgs.

Definition errors are raised synchronously by `SwitchRegistry.define_switch()` while
the program configures its switches, before any parsing begins. Parse errors are
raised by the `Assimilator` and carry the offending token, the switch involved and
the rule that was violated, so the caller decides whether to abort or continue.

All exceptions inherit from `MainArgsError`, the base exception for the package.

Exception Hierarchy:
- MainArgsError
    ├── SwitchDefinitionError
    │     ├── InvalidArityError
    │     ├── InvalidNameError
    │     ├── InvalidCharacterError
    │     ├── InvalidFormatError
    │     ├── NameConflictError
    │     └── ParameterDocumentationError
    ├── SwitchParseError
    │     ├── DuplicateSwitchUseError
    │     └── ArityNotSatisfiedError
    ├── ValueKindError
    └── SmartValueDivisionError
"""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mainargs.parser.switch import SwitchHandle


class MainArgsError(Exception):
    """Base exception for MainArgs."""


class SwitchDefinitionError(MainArgsError):
    """Exception raised when a switch cannot be defined."""

    def __init__(
        self, message: str, long_name: str = "", short_name: str | None = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.long_name = long_name
        self.short_name = short_name


class InvalidArityError(SwitchDefinitionError):
    """Exception raised when min_args or max_args is negative."""


class InvalidNameError(SwitchDefinitionError):
    """Exception raised when a switch name has the wrong length."""


class InvalidCharacterError(SwitchDefinitionError):
    """Exception raised when a switch name contains a reserved character."""


class InvalidFormatError(SwitchDefinitionError):
    """Exception raised when neither switch name follows the switch grammar."""


class NameConflictError(SwitchDefinitionError):
    """Exception raised when a switch name is already used by a defined switch."""


class ParameterDocumentationError(SwitchDefinitionError):
    """Exception raised when a parameter is documented after a variadic one."""


class SwitchParseError(MainArgsError):
    """Exception raised when the token vector violates a switch rule."""

    rule: str = ""

    def __init__(
        self, message: str, token: str, switch: SwitchHandle | None = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.token = token
        self.switch = switch


class DuplicateSwitchUseError(SwitchParseError):
    """Exception raised when a switch appears more than once in the token vector."""

    rule = "duplicate-switch-use"


class ArityNotSatisfiedError(SwitchParseError):
    """Exception raised when a switch does not receive its minimum arguments."""

    rule = "arity-not-satisfied"

    def __init__(
        self,
        message: str,
        token: str,
        switch: SwitchHandle | None = None,
        expected: int = 0,
        received: int = 0,
    ) -> None:
        super().__init__(message, token, switch)
        self.expected = expected
        self.received = received


class ValueKindError(MainArgsError, TypeError):
    """Exception raised when a smart value is used as the wrong kind."""


class SmartValueDivisionError(MainArgsError, ZeroDivisionError):
    """Exception raised when a smart value is divided by zero."""

    def __init__(self, message: str, left: str, right: str) -> None:
        super().__init__(message)
        self.message = message
        self.left = left
        self.right = right
