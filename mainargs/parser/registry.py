# MainArgs Switch Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `SwitchRegistry`, the ordered collection of switches a program
accepts on its command line.

Switches are defined once at startup through `define_switch()`, which validates
names and arity and enforces uniqueness before the switch is appended. Insertion
order is preserved and only affects help output.

Uniqueness:
- no two switches share a long name
- no two switches with short names share a short name
- long-only switches (`short_name=None`) are exempt from short-name checks

Example Usage:
    registry = SwitchRegistry()
    verbose = registry.define_switch("verbose", argless=True)
    output = registry.define_switch("output", min_args=1, max_args=1)

    registry.resolve_switch("-v") == verbose        # True
    registry.resolve_switch("--output") == output   # True
    registry.is_switch_token("/o")                  # True
"""
from __future__ import annotations

from typing import Iterator

from mainargs.exceptions import (
    InvalidArityError,
    InvalidCharacterError,
    InvalidFormatError,
    InvalidNameError,
    NameConflictError,
    SwitchDefinitionError,
)
from mainargs.logger import logger
from mainargs.parser.name_format import (
    LONG_PREFIX,
    first_grapheme,
    grapheme_length,
    is_name_of_switch,
    is_prefixed_name_of_switch,
    is_switch_format,
    split_prefix,
)
from mainargs.parser.switch import SwitchDefinition, SwitchHandle


class SwitchRegistry:
    """
    Ordered registry of switch definitions.

    A registry is an explicit value owned by the caller; independent registries never
    share state, so separate parses can each use their own.
    """

    def __init__(self) -> None:
        self._switches: list[SwitchDefinition] = []
        self._long_map: dict[str, SwitchDefinition] = {}
        self._short_map: dict[str, SwitchDefinition] = {}

    def _validate_arity(
        self, long_name: str, min_args: int, max_args: int | None, argless: bool
    ) -> tuple[int, int | None]:
        if min_args < 0:
            raise InvalidArityError(
                f"min_args must not be negative, got {min_args}", long_name
            )
        if max_args is not None and max_args < 0:
            raise InvalidArityError(
                f"max_args must not be negative, got {max_args}", long_name
            )
        if max_args is not None and max_args < min_args:
            logger.debug("Raising max_args from %d to min_args %d", max_args, min_args)
            max_args = min_args
        if argless:
            return 0, 0
        return min_args, max_args

    def _validate_long_name(self, long_name: str, short_name: str | None) -> None:
        if not long_name or grapheme_length(long_name) < 2:
            raise InvalidNameError(
                f"Switch long name must be at least 2 characters long, got '{long_name}'",
                long_name,
                short_name,
            )
        if "/" in long_name:
            raise InvalidCharacterError(
                f"Switch long name must not contain '/', got '{long_name}'",
                long_name,
                short_name,
            )

    def _validate_short_name(self, long_name: str, short_name: str | None) -> None:
        if short_name is None:
            return
        if grapheme_length(short_name) != 1:
            raise InvalidNameError(
                f"Switch short name must be exactly 1 character, got '{short_name}'",
                long_name,
                short_name,
            )
        if "-" in short_name or "/" in short_name:
            raise InvalidCharacterError(
                f"Switch short name must not contain '-' or '/', got '{short_name}'",
                long_name,
                short_name,
            )

    def _validate_format(self, long_name: str, short_name: str | None) -> None:
        if is_switch_format(long_name):
            return
        if short_name is not None and is_switch_format(short_name):
            return
        raise InvalidFormatError(
            f"Switch names '{long_name}' / '{short_name}' are not of switch form "
            "(dash-joined words without '/', whitespace or leading/trailing dashes)",
            long_name,
            short_name,
        )

    def _validate_unique(self, long_name: str, short_name: str | None) -> None:
        if long_name in self._long_map:
            raise NameConflictError(
                f"Switch long name '{long_name}' is already defined",
                long_name,
                short_name,
            )
        if short_name is not None and short_name in self._short_map:
            existing = self._short_map[short_name]
            raise NameConflictError(
                f"Switch short name '{short_name}' is already used by "
                f"'{existing.long_name}'",
                long_name,
                short_name,
            )

    def define_switch(
        self,
        long_name: str,
        short_name: str | None = "",
        min_args: int = 0,
        max_args: int | None = None,
        argless: bool = False,
        summary: str = "",
        remarks: str = "",
    ) -> SwitchHandle:
        """
        Define a new switch.

        Args:
            long_name (str): Multi-character name, used as `--long-name`.
            short_name (str | None): Single-character name, used as `-s` or `/s`.
                An empty string derives it from the first character of `long_name`;
                `None` defines a long-only switch.
            min_args (int): Minimum number of values required.
            max_args (int | None): Maximum number of values accepted (None: unbounded).
                Raised to `min_args` if smaller.
            argless (bool): Force `min_args=max_args=0`.
            summary (str): Short description for help output.
            remarks (str): Additional notes for help output.

        Returns:
            SwitchHandle: Immutable identity of the new switch.

        Raises:
            InvalidArityError: If `min_args` or `max_args` is negative.
            InvalidNameError: If a name has the wrong length.
            InvalidCharacterError: If a name contains `/` (or `-` for short names).
            InvalidFormatError: If neither name follows the switch grammar.
            NameConflictError: If a name is already used by another switch.
        """
        min_args, max_args = self._validate_arity(
            long_name, min_args, max_args, argless
        )

        if short_name == "" and long_name:
            short_name = first_grapheme(long_name)

        long_name = (long_name or "").lower()
        short_name = short_name.lower() if short_name is not None else None

        try:
            self._validate_long_name(long_name, short_name)
            self._validate_short_name(long_name, short_name)
            self._validate_format(long_name, short_name)
            self._validate_unique(long_name, short_name)
        except SwitchDefinitionError as error:
            logger.debug("Rejected switch '%s' / '%s': %s", long_name, short_name, error)
            raise

        handle = SwitchHandle(
            index=len(self._switches), long_name=long_name, short_name=short_name
        )
        switch = SwitchDefinition(
            handle=handle,
            min_args=min_args,
            max_args=max_args,
            summary=summary,
            remarks=remarks,
        )
        self._switches.append(switch)
        self._long_map[long_name] = switch
        if short_name is not None:
            self._short_map[short_name] = switch
        logger.debug("Defined %s", switch)
        return handle

    def get(self, handle: SwitchHandle) -> SwitchDefinition:
        """Return the definition behind `handle`."""
        try:
            switch = self._switches[handle.index]
        except IndexError:
            raise KeyError(f"Unknown switch handle: {handle}") from None
        if switch.handle != handle:
            raise KeyError(f"Switch handle does not belong to this registry: {handle}")
        return switch

    def find_long(self, name: str) -> SwitchDefinition | None:
        return self._long_map.get(name.lower())

    def find_short(self, name: str) -> SwitchDefinition | None:
        if not name:
            return None
        return self._short_map.get(name.lower())

    def find(self, name: str) -> SwitchDefinition | None:
        """Find a switch by either of its unprefixed names."""
        return self.find_short(name) or self.find_long(name)

    def lookup(self, token: str) -> SwitchDefinition | None:
        """
        Find the switch a token refers to.

        `--name` matches long names, `-n` and `/n` match short names, and a token
        without prefix matches either.
        """
        prefix, name = split_prefix(token)
        if prefix == LONG_PREFIX:
            return self.find_long(name)
        if prefix:
            return self.find_short(name)
        return self.find(name)

    def resolve_switch(self, token: str) -> SwitchHandle | None:
        switch = self.lookup(token)
        return switch.handle if switch else None

    def is_switch_token(self, token: str) -> bool:
        """Check that `token` is a prefixed name (`--name`, `-n`, `/n`) of a switch."""
        return is_prefixed_name_of_switch(token, self)

    def is_switch_name(self, name: str) -> bool:
        """Check that `name` is an unprefixed name of a switch."""
        return is_name_of_switch(name, self)

    def get_used_switches(self) -> list[SwitchDefinition]:
        return [switch for switch in self._switches if switch.used]

    def reset(self) -> None:
        """Clear the `used` flag and collected arguments of every switch."""
        for switch in self._switches:
            switch.reset()

    def __iter__(self) -> Iterator[SwitchDefinition]:
        return iter(self._switches)

    def __len__(self) -> int:
        return len(self._switches)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, SwitchHandle):
            return 0 <= item.index < len(self._switches) and (
                self._switches[item.index].handle == item
            )
        if isinstance(item, str):
            return self.lookup(item) is not None
        return False

    def __str__(self) -> str:
        return f"SwitchRegistry(switches={[s.long_name for s in self._switches]})"

    def __repr__(self) -> str:
        return str(self)
