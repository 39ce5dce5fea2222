import pytest

from mainargs.parser import SwitchRegistry
from mainargs.parser.name_format import (
    first_grapheme,
    grapheme_length,
    is_name_of_switch,
    is_prefixed_name_of_switch,
    is_switch_format,
    is_switch_prefix_format,
    split_prefix,
)


@pytest.fixture
def registry():
    registry = SwitchRegistry()
    registry.define_switch("foo", "f")
    registry.define_switch("bar", None)
    registry.define_switch("dry-run", "n")
    return registry


@pytest.mark.parametrize(
    "text,expected",
    [("", 0), ("abc", 3), ("\u00e9", 1), ("e\u0301", 1), ("e\u0301x", 2)],
)
def test_grapheme_length(text, expected):
    assert grapheme_length(text) == expected


def test_first_grapheme():
    assert first_grapheme("e\u0301x") == "e\u0301"
    assert first_grapheme("") == ""


@pytest.mark.parametrize(
    "value,expected",
    [
        ("help", True),
        ("HELP", True),
        ("dry-run", True),
        ("a-b-c", True),
        ("h", True),
        ("", False),
        ("-help", False),
        ("help-", False),
        ("a--b", False),
        ("a b", False),
        ("a/b", False),
        ("help\n", False),
    ],
)
def test_is_switch_format(value, expected):
    assert is_switch_format(value) is expected


@pytest.mark.parametrize(
    "value,expected",
    [
        ("--help", True),
        ("--HELP", True),
        ("--dry-run", True),
        ("-h", True),
        ("/h", True),
        ("-\u00e9", True),
        ("-e\u0301", True),
        ("help", False),
        ("-", False),
        ("--", False),
        ("-ab", False),
        ("-a-x", False),
        ("/a/ba", False),
        ("--bo--bo", False),
        ("---help", False),
        ("--help-", False),
        ("--he lp", False),
        ("- ", False),
        ("//", False),
    ],
)
def test_is_switch_prefix_format(value, expected):
    assert is_switch_prefix_format(value) is expected


@pytest.mark.parametrize(
    "token,expected",
    [
        ("--Foo", ("--", "foo")),
        ("-F", ("-", "f")),
        ("/f", ("/", "f")),
        ("foo", ("", "foo")),
    ],
)
def test_split_prefix(token, expected):
    assert split_prefix(token) == expected


@pytest.mark.parametrize(
    "token,expected",
    [
        ("--foo", True),
        ("-f", True),
        ("/F", True),
        ("--bar", True),
        ("--dry-run", True),
        ("-n", True),
        ("--f", False),
        ("-b", False),
        ("/b", False),
        ("foo", False),
        ("--baz", False),
        ("-x", False),
    ],
)
def test_is_prefixed_name_of_switch(registry, token, expected):
    assert is_prefixed_name_of_switch(token, registry) is expected
    assert registry.is_switch_token(token) is expected


@pytest.mark.parametrize(
    "name,expected",
    [
        ("foo", True),
        ("f", True),
        ("bar", True),
        ("dry-run", True),
        ("b", False),
        ("--foo", False),
        ("baz", False),
    ],
)
def test_is_name_of_switch(registry, name, expected):
    assert is_name_of_switch(name, registry) is expected
    assert registry.is_switch_name(name) is expected


@pytest.mark.parametrize("token", ["--foo", "-f", "/f", "foo", "f", "--FOO", "-F"])
def test_resolve_switch_forms(registry, token):
    assert registry.resolve_switch(token) == registry.resolve_switch("--foo")
    assert registry.resolve_switch(token).long_name == "foo"


@pytest.mark.parametrize("token", ["--f", "-b", "/b", "--baz", "b"])
def test_resolve_switch_unknown(registry, token):
    assert registry.resolve_switch(token) is None
