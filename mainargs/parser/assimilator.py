# MainArgs Switch Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements the `Assimilator`, a single left-to-right pass that classifies
a raw token vector against a `SwitchRegistry`.

Each token is one of:
- a switch token (`--name`, `-n`, `/n` of a defined switch), which selects the switch
  that receives the following values,
- a leading stand-alone token, before the first switch token,
- a value collected by the current switch, while its `max_args` is not reached,
- a trailing stand-alone token, once the last switch of the vector is full,
- an overflow token of a switch that is not the last one, which is dropped.

The last switch is found by a right-to-left pre-scan before the pass starts.

Example Usage:
    registry = SwitchRegistry()
    registry.define_switch("all", argless=True)

    result = Assimilator(registry).assimilate(["x", "y", "--all", "z", "w"])

    # result.leading_standalone == ["x", "y"]
    # result.trailing_standalone == ["z", "w"]

Parse errors are raised, never turned into a process exit:
- `DuplicateSwitchUseError`: a switch appears twice and is not the last switch
- `ArityNotSatisfiedError`: a switch does not receive its `min_args` values, checked
  when the next switch token is reached (except for the last switch, which may
  come back) and for every used switch once the vector ends
"""
from __future__ import annotations

from enum import Enum
from typing import Sequence

from mainargs.exceptions import ArityNotSatisfiedError, DuplicateSwitchUseError
from mainargs.logger import logger
from mainargs.parser.parse_result import ParseResult
from mainargs.parser.registry import SwitchRegistry
from mainargs.parser.switch import SwitchDefinition, SwitchHandle


class AssimilatorState(Enum):
    """States of the classification pass."""

    COLLECTING_LEADING = "collecting_leading"
    COLLECTING_FOR_SWITCH = "collecting_for_switch"


class Assimilator:
    """
    Classifies token vectors against a registry.

    The stand-alone lists and the per-switch state in the registry persist across
    calls to `assimilate()`. Call `reset()` before parsing a new vector, otherwise
    values and `used` flags from the previous vector are still present.
    """

    def __init__(self, registry: SwitchRegistry) -> None:
        self.registry: SwitchRegistry = registry
        self.leading_standalone: list[str] = []
        self.trailing_standalone: list[str] = []
        self.state: AssimilatorState = AssimilatorState.COLLECTING_LEADING
        self.current: SwitchDefinition | None = None
        self.last_switch: SwitchDefinition | None = None
        self.selected_by: dict[SwitchHandle, str] = {}

    def reset(self) -> None:
        """Clear switch usage, collected arguments and both stand-alone lists."""
        self.registry.reset()
        self.leading_standalone.clear()
        self.trailing_standalone.clear()
        self._reset_pass()

    def _reset_pass(self) -> None:
        self.state = AssimilatorState.COLLECTING_LEADING
        self.current = None
        self.last_switch = None
        self.selected_by = {}

    def find_last_switch(self, tokens: Sequence[str]) -> SwitchDefinition | None:
        """Return the switch named by the rightmost switch token, if any."""
        for token in reversed(tokens):
            if self.registry.is_switch_token(token):
                return self.registry.lookup(token)
        return None

    def _check_min_args(self, switch: SwitchDefinition) -> None:
        if switch.min_met():
            return
        token = self.selected_by.get(switch.handle, f"--{switch.long_name}")
        received = len(switch.collected_arguments)
        raise ArityNotSatisfiedError(
            f"Switch '{token}' requires at least {switch.min_args} "
            f"argument(s), got {received}",
            token=token,
            switch=switch.handle,
            expected=switch.min_args,
            received=received,
        )

    def _select_switch(self, token: str) -> None:
        candidate = self.registry.lookup(token)
        assert candidate is not None, "switch token must resolve: shouldn't happen"
        assert self.last_switch is not None, "last switch must be known: shouldn't happen"

        if candidate.used and candidate.handle != self.last_switch.handle:
            raise DuplicateSwitchUseError(
                f"Switch '{token}' has already been used in the command line",
                token=token,
                switch=candidate.handle,
            )

        # The last switch may come back and collect its values later.
        current = self.current
        if current is not None and current.handle != self.last_switch.handle:
            self._check_min_args(current)
        candidate.used = True
        self.selected_by.setdefault(candidate.handle, token)
        self.current = candidate
        self.state = AssimilatorState.COLLECTING_FOR_SWITCH

    def _collect(self, token: str) -> None:
        current = self.current
        assert current is not None, "current switch must be set: shouldn't happen"
        assert self.last_switch is not None, "last switch must be known: shouldn't happen"

        if not current.min_met() or not current.max_met():
            current.collected_arguments.append(token)
        elif current.handle == self.last_switch.handle:
            self.trailing_standalone.append(token)
        else:
            logger.debug(
                "Dropping '%s': switch '%s' already has %d argument(s)",
                token,
                current.long_name,
                len(current.collected_arguments),
            )

    def assimilate(self, tokens: Sequence[str] | None) -> ParseResult:
        """
        Classify `tokens` and record switch usage in the registry.

        Args:
            tokens (Sequence[str] | None): Raw command-line tokens, without the
                program name.

        Returns:
            ParseResult: Stand-alone tokens and used switches.

        Raises:
            DuplicateSwitchUseError: If a switch other than the last one is repeated.
            ArityNotSatisfiedError: If a switch gets fewer than `min_args` values.
        """
        tokens = list(tokens or [])
        self._reset_pass()
        self.last_switch = self.find_last_switch(tokens)
        logger.debug(
            "Assimilating %d token(s), last switch: %s",
            len(tokens),
            self.last_switch.long_name if self.last_switch else None,
        )

        if self.last_switch is None:
            self.leading_standalone.extend(tokens)
            return self._build_result()

        for token in tokens:
            if self.registry.is_switch_token(token):
                self._select_switch(token)
            elif self.state is AssimilatorState.COLLECTING_LEADING:
                self.leading_standalone.append(token)
            else:
                self._collect(token)

        for switch in self.registry.get_used_switches():
            self._check_min_args(switch)
        return self._build_result()

    def _build_result(self) -> ParseResult:
        result = ParseResult(
            leading_standalone=list(self.leading_standalone),
            trailing_standalone=list(self.trailing_standalone),
            used_switches=self.registry.get_used_switches(),
        )
        logger.debug(
            "Assimilated: leading=%s trailing=%s used=%s",
            result.leading_standalone,
            result.trailing_standalone,
            [switch.long_name for switch in result.used_switches],
        )
        return result

    def __str__(self) -> str:
        return (
            f"Assimilator(state={self.state.value}, switches={len(self.registry)}, "
            f"leading={len(self.leading_standalone)}, "
            f"trailing={len(self.trailing_standalone)})"
        )


def parse_args(registry: SwitchRegistry, tokens: Sequence[str] | None) -> ParseResult:
    """Reset `registry` and classify `tokens` with a fresh `Assimilator`."""
    assimilator = Assimilator(registry)
    assimilator.reset()
    return assimilator.assimilate(tokens)
