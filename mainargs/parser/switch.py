# MainArgs Switch Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `SwitchDefinition` dataclass and its identity handle.

A `SwitchDefinition` is created by `SwitchRegistry.define_switch()` and describes one
command-line switch: its long and short names, its arity bounds, optional help text,
and the per-parse state written by the `Assimilator` (`used`, `collected_arguments`).

Key Attributes:
- `handle`: Immutable `SwitchHandle` (registry index, long name, short name)
- `min_args` / `max_args`: Arity bounds; `max_args=None` means unbounded
- `used`: True once the switch appeared in the parsed token vector
- `collected_arguments`: Values collected for the switch, in token order
- `summary` / `remarks`: Free text for help output
- `parameters`: Documented value parameters for help output

Used By:
- `SwitchRegistry`
- `Assimilator`
- `HelpFormatter`
"""
from __future__ import annotations

from dataclasses import dataclass, field

from mainargs.exceptions import ParameterDocumentationError
from mainargs.parser.smart_value import SmartValue, infer_value


@dataclass(frozen=True)
class SwitchHandle:
    """
    Immutable identity of a defined switch.

    Two handles are equal when they point at the same registry slot with the same
    names, so identity never depends on object identity.
    """

    index: int
    long_name: str
    short_name: str | None = None

    @property
    def is_long_only(self) -> bool:
        return not self.short_name

    def __str__(self) -> str:
        if self.is_long_only:
            return f"--{self.long_name}"
        return f"--{self.long_name} (-{self.short_name})"


@dataclass(frozen=True)
class SwitchParameter:
    """Documents one value parameter of a switch for help output."""

    name: str
    type_name: str = "string"
    variadic: bool = False

    def get_signature_text(self) -> str:
        prefix = "... " if self.variadic else ""
        return f"{prefix}{{{self.type_name}:{self.name}}}"


@dataclass
class SwitchDefinition:
    """
    Represents a defined command-line switch.

    Attributes:
        handle (SwitchHandle): Identity of the switch inside its registry.
        min_args (int): Minimum number of values the switch requires.
        max_args (int | None): Maximum number of values accepted, None for unbounded.
        summary (str): Short description for help output.
        remarks (str): Additional notes for help output.
        parameters (list[SwitchParameter]): Documented value parameters.
        used (bool): True if the switch appeared in the last parsed token vector.
        collected_arguments (list[str]): Values collected for the switch.
    """

    handle: SwitchHandle
    min_args: int = 0
    max_args: int | None = None
    summary: str = ""
    remarks: str = ""
    parameters: list[SwitchParameter] = field(default_factory=list)
    used: bool = False
    collected_arguments: list[str] = field(default_factory=list)

    @property
    def long_name(self) -> str:
        return self.handle.long_name

    @property
    def short_name(self) -> str | None:
        return self.handle.short_name

    @property
    def is_long_only(self) -> bool:
        return self.handle.is_long_only

    @property
    def is_argless(self) -> bool:
        return self.max_args == 0

    @property
    def dest(self) -> str:
        """Attribute-friendly form of the long name (`dry-run` -> `dry_run`)."""
        return self.long_name.replace("-", "_")

    @property
    def smart_arguments(self) -> list[SmartValue]:
        return [infer_value(argument) for argument in self.collected_arguments]

    def min_met(self) -> bool:
        return len(self.collected_arguments) >= self.min_args

    def max_met(self) -> bool:
        if self.max_args is None:
            return False
        return len(self.collected_arguments) >= self.max_args

    def reset(self) -> None:
        """Clear the state written by the last parse."""
        self.used = False
        self.collected_arguments.clear()

    def add_summary(self, summary: str) -> None:
        self.summary = summary

    def add_remarks(self, remarks: str) -> None:
        self.remarks = remarks

    def _ensure_not_variadic(self) -> None:
        if any(parameter.variadic for parameter in self.parameters):
            raise ParameterDocumentationError(
                f"Switch '{self.long_name}' already documents a variadic parameter; "
                "no further parameters can be added",
                self.long_name,
                self.short_name,
            )

    def add_parameter(self, name: str, type_name: str = "string") -> SwitchParameter:
        """Document a single value parameter."""
        self._ensure_not_variadic()
        parameter = SwitchParameter(name=name, type_name=type_name)
        self.parameters.append(parameter)
        return parameter

    def add_variadic_parameter(
        self, name: str, type_name: str = "string"
    ) -> SwitchParameter:
        """Document a parameter that takes all remaining values; must be the last one."""
        self._ensure_not_variadic()
        parameter = SwitchParameter(name=name, type_name=type_name, variadic=True)
        self.parameters.append(parameter)
        return parameter

    def get_arity_text(self) -> str:
        if self.max_args is None:
            return f"{self.min_args}.."
        if self.min_args == self.max_args:
            return str(self.min_args)
        return f"{self.min_args}..{self.max_args}"

    def get_flags(self) -> tuple[str, ...]:
        if self.is_long_only:
            return (f"--{self.long_name}",)
        return (f"--{self.long_name}", f"-{self.short_name}", f"/{self.short_name}")

    def __str__(self) -> str:
        return (
            f"SwitchDefinition({', '.join(self.get_flags())}, "
            f"arity={self.get_arity_text()}, used={self.used}, "
            f"args={self.collected_arguments!r})"
        )
