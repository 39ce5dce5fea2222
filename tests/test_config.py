import pytest

from mainargs.config import RawSwitch, SwitchesConfig, loader
from mainargs.exceptions import InvalidNameError, ParameterDocumentationError
from mainargs.parser import SwitchRegistry

YAML_CONFIG = """\
switches:
  - name: verbose
    argless: true
    summary: Print more output.
  - name: output
    short_name: o
    min_args: 1
    max_args: 1
    parameters:
      - name: path
        type: path
  - name: dry-run
    long_only: true
    argless: true
"""

TOML_CONFIG = """\
[[switches]]
name = "include"
min_args = 1
remarks = "Takes every following value."

[[switches.parameters]]
name = "patterns"
variadic = true

[[switches]]
name = "quiet"
short_name = "s"
argless = true
"""


def test_load_yaml(tmp_path):
    path = tmp_path / "switches.yaml"
    path.write_text(YAML_CONFIG, encoding="UTF-8")
    registry = loader(path)

    assert [switch.long_name for switch in registry] == ["verbose", "output", "dry-run"]
    verbose = registry.find_long("verbose")
    assert verbose.short_name == "v"
    assert verbose.is_argless
    assert verbose.summary == "Print more output."

    output = registry.find_short("o")
    assert (output.min_args, output.max_args) == (1, 1)
    assert output.parameters[0].get_signature_text() == "{path:path}"

    dry_run = registry.find_long("dry-run")
    assert dry_run.is_long_only


def test_load_toml(tmp_path):
    path = tmp_path / "switches.toml"
    path.write_text(TOML_CONFIG, encoding="UTF-8")
    registry = loader(str(path))

    include = registry.find_long("include")
    assert include.max_args is None
    assert include.remarks == "Takes every following value."
    assert include.parameters[0].variadic
    assert registry.find_short("s").long_name == "quiet"


def test_load_into_existing_registry(tmp_path):
    path = tmp_path / "switches.yml"
    path.write_text(YAML_CONFIG, encoding="UTF-8")
    registry = SwitchRegistry()
    registry.define_switch("help", argless=True)
    assert loader(path, registry) is registry
    assert len(registry) == 4


def test_loader_rejects_non_path():
    with pytest.raises(TypeError):
        loader(42)


def test_loader_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        loader(tmp_path / "missing.yaml")


def test_loader_unsupported_suffix(tmp_path):
    path = tmp_path / "switches.json"
    path.write_text("{}", encoding="UTF-8")
    with pytest.raises(ValueError, match="Unsupported config format"):
        loader(path)


def test_loader_requires_switches_key(tmp_path):
    path = tmp_path / "switches.yaml"
    path.write_text("commands: []\n", encoding="UTF-8")
    with pytest.raises(ValueError, match="list of switches"):
        loader(path)


def test_loader_invalid_switch_name(tmp_path):
    path = tmp_path / "switches.yaml"
    path.write_text("switches:\n  - name: v\n", encoding="UTF-8")
    with pytest.raises(InvalidNameError):
        loader(path)


def test_loader_rejects_bad_field_types(tmp_path):
    path = tmp_path / "switches.yaml"
    path.write_text("switches:\n  - name: verbose\n    min_args: many\n", encoding="UTF-8")
    with pytest.raises(ValueError):
        loader(path)


def test_long_only_with_short_name():
    with pytest.raises(ValueError, match="long_only"):
        RawSwitch(name="dry-run", short_name="d", long_only=True)


def test_parameter_after_variadic():
    config = SwitchesConfig(
        switches=[
            {
                "name": "include",
                "parameters": [{"name": "rest", "variadic": True}, {"name": "last"}],
            }
        ]
    )
    with pytest.raises(ParameterDocumentationError):
        config.to_registry()
