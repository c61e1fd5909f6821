# rcconfig — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `OptionSpec` and `Schema`, the declarative description of the options a
program accepts.

An `OptionSpec` describes one long option (`--name`): whether it is a presence flag
or takes a value, whether it is required, and whether repeated occurrences are all
kept or the last one wins. A `Schema` groups the options of one application together
with the name, version and about text shown in usage output.

Both are plain data. Schemas are usually assembled once at startup from module-level
constants, so construction validates eagerly and raises `SchemaError` on mistakes
such as duplicate option names.

Example:
    HOST = OptionSpec("host", default="localhost", help="Host to bind to.")
    VERBOSE = OptionSpec("verbose", takes_argument=False, help="Chatty output.")

    schema = Schema.build("my-tool", "1.0", "Does things.", [HOST, VERBOSE])
"""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Mapping

from rcconfig.exceptions import SchemaError


@dataclass(frozen=True, eq=False)
class OptionSpec:
    """
    Represents one accepted command-line option.

    Attributes:
        name (str): Option name without leading dashes, matched as `--name`.
        default (str | None): Value used when the option never appears. Ignored for
            options that do not take an argument.
        required (bool): True if the option must appear.
        takes_argument (bool): True if the option takes a value, False for a flag.
        repeatable (bool): True if every occurrence is kept, False if the last wins.
        help (str): Short help text for usage output.
        documentation (str): Longer text for generated documentation.
    """

    name: str
    default: str | None = None
    required: bool = False
    takes_argument: bool = True
    repeatable: bool = False
    help: str = ""
    documentation: str = ""

    @property
    def flag(self) -> str:
        return f"--{self.name}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OptionSpec):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)


def _validate_name(name: str) -> None:
    if not isinstance(name, str) or not name:
        raise SchemaError(f"Option name must be a non-empty string, got {name!r}")
    if name.startswith("-"):
        raise SchemaError(f"Option name '{name}' must not start with '-'")
    if any(char.isspace() or char == "=" for char in name):
        raise SchemaError(f"Option name '{name}' must not contain whitespace or '='")


@dataclass(frozen=True)
class Schema:
    """
    The full set of options a program accepts.

    `options` is keyed by option name and preserves declaration order, which is also
    the order options are listed in usage output.
    """

    name: str
    version: str = ""
    about: str = ""
    options: Mapping[str, OptionSpec] = field(default_factory=dict)

    @classmethod
    def build(
        cls,
        name: str,
        version: str = "",
        about: str = "",
        options: Iterable[OptionSpec] = (),
    ) -> Schema:
        """
        Assemble a schema from a sequence of options.

        Raises:
            SchemaError: If an option name is invalid or appears more than once.
        """
        collected: dict[str, OptionSpec] = {}
        for option in options:
            if not isinstance(option, OptionSpec):
                raise SchemaError(
                    f"Expected OptionSpec, got {type(option).__name__}: {option!r}"
                )
            _validate_name(option.name)
            if option.name in collected:
                raise SchemaError(f"Duplicate option name: '{option.name}'")
            collected[option.name] = option
        return cls(
            name=name,
            version=version,
            about=about,
            options=MappingProxyType(collected),
        )

    def with_options(self, options: Iterable[OptionSpec]) -> Schema:
        """Return a new schema with `options` appended to this schema's options."""
        return Schema.build(
            self.name,
            self.version,
            self.about,
            [*self.options.values(), *options],
        )

    def __iter__(self):
        return iter(self.options.values())

    def __len__(self) -> int:
        return len(self.options)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, OptionSpec):
            return item.name in self.options
        return item in self.options
