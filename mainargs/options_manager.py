# MainArgs Switch Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Manages parsed switch values as options across namespaces.

The `OptionsManager` provides a centralized interface for retrieving, setting, toggling,
and introspecting options stored in `argparse.Namespace` objects. A `ParseResult` is
turned into a namespace by `from_parse_result()`: each used switch becomes an
attribute named after its long name (dashes become underscores) holding its
collected arguments, and `standalone` holds the combined stand-alone tokens.

Typical Usage:
    options = OptionsManager()
    options.from_parse_result(result)
    if options.has_option("verbose"):
        ...
    output = options.get("output", [])
"""

from argparse import Namespace
from collections import defaultdict
from typing import Any

from mainargs.logger import logger
from mainargs.parser.parse_result import ParseResult


class OptionsManager:
    """
    Manages option state across multiple argparse namespaces.

    Supports named namespaces (e.g., "switches", "user_config").
    """

    def __init__(self, namespaces: list[tuple[str, Namespace]] | None = None) -> None:
        self.options: defaultdict = defaultdict(Namespace)
        if namespaces:
            for namespace_name, namespace in namespaces:
                self.from_namespace(namespace, namespace_name)

    def from_namespace(
        self, namespace: Namespace, namespace_name: str = "switches"
    ) -> None:
        self.options[namespace_name] = namespace

    def from_parse_result(
        self, result: ParseResult, namespace_name: str = "switches"
    ) -> Namespace:
        """Store the used switches and stand-alone tokens of `result` as options."""
        namespace = Namespace(standalone=list(result.combined_standalone))
        for switch in result.used_switches:
            setattr(namespace, switch.dest, list(switch.collected_arguments))
        self.from_namespace(namespace, namespace_name)
        logger.debug("Stored options in '%s': %s", namespace_name, vars(namespace))
        return namespace

    def get(
        self, option_name: str, default: Any = None, namespace_name: str = "switches"
    ) -> Any:
        """Get the value of an option."""
        return getattr(self.options[namespace_name], option_name, default)

    def set(self, option_name: str, value: Any, namespace_name: str = "switches") -> None:
        """Set the value of an option."""
        setattr(self.options[namespace_name], option_name, value)

    def has_option(self, option_name: str, namespace_name: str = "switches") -> bool:
        """Check if an option exists in the namespace."""
        return hasattr(self.options[namespace_name], option_name)

    def toggle(self, option_name: str, namespace_name: str = "switches") -> None:
        """Toggle a boolean option."""
        current = self.get(option_name, namespace_name=namespace_name)
        if not isinstance(current, bool):
            raise TypeError(
                f"Cannot toggle non-boolean option: '{option_name}' in '{namespace_name}'"
            )
        self.set(option_name, not current, namespace_name=namespace_name)
        logger.debug(
            "Toggled '%s' in '%s' to %s", option_name, namespace_name, not current
        )

    def get_namespace_dict(self, namespace_name: str) -> dict[str, Any]:
        """Return all options in a namespace as a dictionary."""
        if namespace_name not in self.options:
            raise ValueError(f"Namespace '{namespace_name}' not found.")
        return vars(self.options[namespace_name])
