import pytest

from mainargs.exceptions import (
    InvalidArityError,
    InvalidCharacterError,
    InvalidFormatError,
    InvalidNameError,
    NameConflictError,
    ParameterDocumentationError,
    SwitchDefinitionError,
)
from mainargs.parser import SwitchHandle, SwitchRegistry


@pytest.fixture
def registry():
    return SwitchRegistry()


def test_short_name_derived_from_long_name(registry):
    handle = registry.define_switch("verbose")
    assert handle.long_name == "verbose"
    assert handle.short_name == "v"


def test_explicit_short_name(registry):
    handle = registry.define_switch("verbose", "x")
    assert handle.short_name == "x"


def test_names_are_lowercased(registry):
    handle = registry.define_switch("Verbose", "V")
    assert handle == SwitchHandle(index=0, long_name="verbose", short_name="v")


def test_short_name_derived_from_first_grapheme(registry):
    handle = registry.define_switch("e\u0301clair")
    assert handle.short_name == "e\u0301"


def test_long_only_switch(registry):
    handle = registry.define_switch("dry-run", None)
    assert handle.short_name is None
    assert handle.is_long_only
    assert registry.get(handle).get_flags() == ("--dry-run",)


def test_max_args_raised_to_min_args(registry):
    switch = registry.get(registry.define_switch("copy", min_args=3, max_args=1))
    assert switch.min_args == 3
    assert switch.max_args == 3


def test_max_args_unbounded_by_default(registry):
    switch = registry.get(registry.define_switch("include"))
    assert switch.min_args == 0
    assert switch.max_args is None
    assert switch.get_arity_text() == "0.."


def test_argless_forces_zero_arity(registry):
    switch = registry.get(
        registry.define_switch("all", min_args=2, max_args=5, argless=True)
    )
    assert switch.min_args == 0
    assert switch.max_args == 0
    assert switch.is_argless


@pytest.mark.parametrize("min_args,max_args", [(-1, None), (0, -1), (-2, -3)])
def test_negative_arity(registry, min_args, max_args):
    with pytest.raises(InvalidArityError):
        registry.define_switch("count", min_args=min_args, max_args=max_args)


@pytest.mark.parametrize(
    "long_name,short_name,error",
    [
        ("", "", InvalidNameError),
        ("a", "", InvalidNameError),
        ("\u00e9", "", InvalidNameError),
        ("e\u0301", "", InvalidNameError),
        ("a/b", "", InvalidCharacterError),
        ("path", "pa", InvalidNameError),
        ("path", "", None),
        ("path", "-", InvalidCharacterError),
        ("path", "/", InvalidCharacterError),
        ("-path", None, InvalidFormatError),
        ("path-", None, InvalidFormatError),
        ("pa--th", None, InvalidFormatError),
        ("pa th", None, InvalidFormatError),
    ],
)
def test_name_validation(registry, long_name, short_name, error):
    if error is None:
        registry.define_switch(long_name, short_name)
        assert len(registry) == 1
        return
    with pytest.raises(error):
        registry.define_switch(long_name, short_name)
    assert len(registry) == 0


def test_one_valid_name_is_enough(registry):
    handle = registry.define_switch("pa th", "p")
    assert handle.long_name == "pa th"
    assert registry.resolve_switch("-p") == handle


def test_long_name_conflict(registry):
    registry.define_switch("verbose", "v")
    with pytest.raises(NameConflictError):
        registry.define_switch("VERBOSE", "x")


def test_short_name_conflict(registry):
    registry.define_switch("verbose")
    with pytest.raises(NameConflictError) as excinfo:
        registry.define_switch("version")
    assert excinfo.value.long_name == "version"
    assert excinfo.value.short_name == "v"
    assert "verbose" in str(excinfo.value)


def test_short_name_conflict_with_long_only_switch(registry):
    registry.define_switch("apple", None)
    registry.define_switch("arrow")
    registry.define_switch("anchor", None)
    assert [switch.long_name for switch in registry] == ["apple", "arrow", "anchor"]


def test_long_only_switch_still_checks_long_name(registry):
    registry.define_switch("apple")
    with pytest.raises(NameConflictError):
        registry.define_switch("apple", None)


def test_definition_errors_share_base(registry):
    with pytest.raises(SwitchDefinitionError):
        registry.define_switch("x")


def test_handles_follow_insertion_order(registry):
    first = registry.define_switch("alpha")
    second = registry.define_switch("bravo")
    assert (first.index, second.index) == (0, 1)
    assert registry.get(second).long_name == "bravo"
    assert first in registry
    assert SwitchHandle(index=1, long_name="alpha", short_name="a") not in registry


def test_handle_from_other_registry_is_rejected(registry):
    registry.define_switch("alpha")
    other = SwitchRegistry()
    handle = other.define_switch("zulu")
    with pytest.raises(KeyError):
        registry.get(handle)


def test_summary_and_remarks(registry):
    switch = registry.get(registry.define_switch("alpha", summary="First."))
    assert switch.summary == "First."
    switch.add_summary("Changed.")
    switch.add_remarks("Some notes.")
    assert (switch.summary, switch.remarks) == ("Changed.", "Some notes.")


def test_parameters(registry):
    switch = registry.get(registry.define_switch("copy", min_args=2))
    switch.add_parameter("source", "path")
    switch.add_variadic_parameter("targets", "path")
    assert [p.get_signature_text() for p in switch.parameters] == [
        "{path:source}",
        "... {path:targets}",
    ]


def test_no_parameter_after_variadic(registry):
    switch = registry.get(registry.define_switch("copy"))
    switch.add_variadic_parameter("files")
    with pytest.raises(ParameterDocumentationError):
        switch.add_parameter("extra")
    with pytest.raises(ParameterDocumentationError):
        switch.add_variadic_parameter("more")
