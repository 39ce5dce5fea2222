# MainArgs Switch Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Name-format predicates for switch names and switch tokens.

A switch name is one or more runs of characters other than `-`, `/` and whitespace,
joined by single dashes (`help`, `dry-run`, `é`). On the command line a switch is
written with a prefix:

- `--name` selects a switch by its long name (`--dry-run`)
- `-n` or `/n` selects a switch by its single-grapheme short name

Every length check counts extended grapheme clusters, so an emoji or a letter
followed by combining marks is a single unit.

Functions:
- grapheme_length / first_grapheme: grapheme-aware length helpers
- is_switch_format: bare name grammar check
- is_switch_prefix_format: prefixed token grammar check (whole-string match)
- split_prefix: separate `--`, `-` or `/` from the name
- is_name_of_switch / is_prefixed_name_of_switch: grammar check plus registry lookup
"""
from __future__ import annotations

from typing import TYPE_CHECKING

import regex

if TYPE_CHECKING:
    from mainargs.parser.registry import SwitchRegistry

LONG_PREFIX = "--"
SHORT_PREFIXES = ("-", "/")

SWITCH_NAME_PATTERN = regex.compile(r"[^-/\s]+(?:-[^-/\s]+)*")
PREFIXED_SWITCH_PATTERN = regex.compile(
    r"(?:--[^-/\s]+(?:-[^-/\s]+)*|[-/](?![-/\s])\X)"
)
GRAPHEME_PATTERN = regex.compile(r"\X")


def grapheme_length(text: str) -> int:
    """Return the number of user-perceived characters in `text`."""
    return len(GRAPHEME_PATTERN.findall(text))


def first_grapheme(text: str) -> str:
    """Return the first user-perceived character of `text`, or "" if empty."""
    match = GRAPHEME_PATTERN.match(text)
    return match.group() if match else ""


def _has_switch_length(value: str) -> bool:
    short_form = value.replace("-", "").replace("/", "")
    long_form = value.replace(LONG_PREFIX, "")
    return grapheme_length(short_form) == 1 or grapheme_length(long_form) >= 2


def _matches(value: str, pattern: regex.Pattern) -> bool:
    value = value.lower()
    if not pattern.fullmatch(value):
        return False
    return _has_switch_length(value)


def is_switch_format(value: str) -> bool:
    """Check that `value` is a valid unprefixed switch name (`help`, `dry-run`, `h`)."""
    return _matches(value, SWITCH_NAME_PATTERN)


def is_switch_prefix_format(value: str) -> bool:
    """
    Check that `value` is a prefixed switch token (`--help`, `-h`, `/h`).

    The whole token must match, so `-a-x`, `/a/ba` and `--bo--bo` are rejected.
    """
    return _matches(value, PREFIXED_SWITCH_PATTERN)


def split_prefix(token: str) -> tuple[str, str]:
    """Split a token into its switch prefix (possibly empty) and the lowercased name."""
    token = token.lower()
    if token.startswith(LONG_PREFIX):
        return LONG_PREFIX, token[len(LONG_PREFIX) :]
    if token.startswith(SHORT_PREFIXES):
        return token[0], token[1:]
    return "", token


def is_name_of_switch(name: str, registry: SwitchRegistry) -> bool:
    """Check that `name` is an unprefixed long or short name of a defined switch."""
    if not is_switch_format(name):
        return False
    return registry.find(name.lower()) is not None


def is_prefixed_name_of_switch(token: str, registry: SwitchRegistry) -> bool:
    """Check that `token` is a prefixed long or short name of a defined switch."""
    if not is_switch_prefix_format(token):
        return False
    prefix, name = split_prefix(token)
    if prefix == LONG_PREFIX:
        return registry.find_long(name) is not None
    return registry.find_short(name) is not None
