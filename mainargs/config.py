# MainArgs Switch Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Configuration loader for MainArgs switch definitions.

Example YAML:

    switches:
      - name: verbose
        argless: true
        summary: Print more output.
      - name: output
        min_args: 1
        max_args: 1
        parameters:
          - name: path
            type: path
      - name: dry-run
        long_only: true
"""
from __future__ import annotations

from pathlib import Path
from typing import Any

import toml
import yaml
from pydantic import BaseModel, Field, field_validator, model_validator

from mainargs.logger import logger
from mainargs.parser.registry import SwitchRegistry


class RawParameter(BaseModel):
    """Raw parameter documentation for a switch."""

    name: str
    type: str = "string"
    variadic: bool = False


class RawSwitch(BaseModel):
    """Raw switch model for MainArgs configuration."""

    name: str
    short_name: str | None = ""
    long_only: bool = False
    min_args: int = 0
    max_args: int | None = None
    argless: bool = False
    summary: str = ""
    remarks: str = ""
    parameters: list[RawParameter] = Field(default_factory=list)

    @field_validator("parameters", mode="before")
    @classmethod
    def validate_parameters(cls, value: Any) -> Any:
        if value is None:
            return []
        if not isinstance(value, list):
            raise ValueError("parameters must be a list.")
        return value

    @model_validator(mode="after")
    def validate_long_only(self) -> RawSwitch:
        if self.long_only and self.short_name:
            raise ValueError("long_only switches cannot have a short_name")
        return self

    def define(self, registry: SwitchRegistry) -> None:
        handle = registry.define_switch(
            self.name,
            None if self.long_only else self.short_name,
            min_args=self.min_args,
            max_args=self.max_args,
            argless=self.argless,
            summary=self.summary,
            remarks=self.remarks,
        )
        switch = registry.get(handle)
        for parameter in self.parameters:
            if parameter.variadic:
                switch.add_variadic_parameter(parameter.name, parameter.type)
            else:
                switch.add_parameter(parameter.name, parameter.type)


class SwitchesConfig(BaseModel):
    """MainArgs switch configuration model."""

    switches: list[RawSwitch] = Field(default_factory=list)

    def to_registry(self, registry: SwitchRegistry | None = None) -> SwitchRegistry:
        registry = registry or SwitchRegistry()
        for raw_switch in self.switches:
            raw_switch.define(registry)
        return registry


def loader(
    file_path: Path | str, registry: SwitchRegistry | None = None
) -> SwitchRegistry:
    """
    Load switch definitions from a YAML or TOML file.

    The file should contain a dictionary with a `switches` list. Each switch is a
    dictionary with at least a `name` (the long name).

    Args:
        file_path (Path | str): Path to the config file (YAML or TOML).
        registry (SwitchRegistry | None): Registry to extend; a new one by default.

    Returns:
        SwitchRegistry: The registry holding the loaded switches.

    Raises:
        ValueError: If the file format is unsupported or file cannot be parsed.
        SwitchDefinitionError: If an entry is not a valid switch.
    """
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise FileNotFoundError(f"No such config file: {file_path}")

    suffix = path.suffix
    with path.open("r", encoding="UTF-8") as config_file:
        if suffix in (".yaml", ".yml"):
            raw_config = yaml.safe_load(config_file)
        elif suffix == ".toml":
            raw_config = toml.load(config_file)
        else:
            raise ValueError(f"Unsupported config format: {suffix}")

    if not isinstance(raw_config, dict) or "switches" not in raw_config:
        raise ValueError(
            "Configuration file must contain a dictionary with a list of switches.\n"
            "Example:\n"
            "switches:\n"
            "  - name: 'verbose'\n"
            "    argless: true"
        )

    config = SwitchesConfig(switches=raw_config["switches"])
    logger.debug("Loaded %d switch(es) from '%s'", len(config.switches), path)
    return config.to_registry(registry)
