# rcconfig — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Resolved option values.

Every option of a schema resolves to exactly one `ResolvedValue`:

- `ABSENT`: the option did not appear and has no default.
- `FLAG`: a flag (an option that takes no argument) appeared at least once.
- `VALUES`: one or more values, in the order they appeared. Non-repeatable options
  always hold exactly one value, the last occurrence.

`ResolvedConfig` maps every option name of the schema to its value. It can be indexed
by name or by `OptionSpec`.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterator, Mapping

from rcconfig.schema import OptionSpec, Schema


class ValueKind(Enum):
    ABSENT = "absent"
    FLAG = "flag"
    VALUES = "values"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ResolvedValue:
    """The resolved state of one option."""

    kind: ValueKind
    values: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if self.kind is ValueKind.VALUES and not self.values:
            raise ValueError("VALUES requires at least one value")
        if self.kind is not ValueKind.VALUES and self.values:
            raise ValueError(f"{self.kind} cannot carry values")

    @classmethod
    def of(cls, values: Any) -> ResolvedValue:
        return cls(ValueKind.VALUES, tuple(str(value) for value in values))

    @property
    def present(self) -> bool:
        return self.kind is not ValueKind.ABSENT

    def to_python(self) -> None | bool | str | list[str]:
        """Return None, True, a single string or a list of strings."""
        if self.kind is ValueKind.ABSENT:
            return None
        if self.kind is ValueKind.FLAG:
            return True
        if len(self.values) == 1:
            return self.values[0]
        return list(self.values)

    def __str__(self) -> str:
        if self.kind is ValueKind.VALUES:
            return ", ".join(self.values)
        return str(self.kind)


ABSENT = ResolvedValue(ValueKind.ABSENT)
PRESENT_FLAG = ResolvedValue(ValueKind.FLAG)


def _key(option: OptionSpec | str) -> str:
    if isinstance(option, OptionSpec):
        return option.name
    return option


class ResolvedConfig(Mapping[str, ResolvedValue]):
    """
    Read-only mapping of every schema option to its resolved value.

    Typical Usage:
        config = resolve(schema, sys.argv, "MYAPP_CONFIG")
        if config.is_present(VERBOSE):
            ...
        host = config.single(HOST)
    """

    def __init__(self, schema: Schema, values: Mapping[str, ResolvedValue]) -> None:
        missing = [name for name in schema.options if name not in values]
        if missing:
            raise ValueError(f"No resolved value for options: {', '.join(missing)}")
        self.schema = schema
        self._values: dict[str, ResolvedValue] = {
            name: values[name] for name in schema.options
        }

    def __getitem__(self, option: OptionSpec | str) -> ResolvedValue:
        return self._values[_key(option)]

    def __contains__(self, option: object) -> bool:
        if isinstance(option, OptionSpec):
            return option.name in self._values
        return option in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ResolvedConfig):
            return self._values == other._values
        return super().__eq__(other)

    def __repr__(self) -> str:
        return f"ResolvedConfig({self._values!r})"

    def is_present(self, option: OptionSpec | str) -> bool:
        """Return True if the option resolved to a flag or to values."""
        return self[option].present

    def values_of(self, option: OptionSpec | str) -> tuple[str, ...]:
        """Return the values of an option, empty for absent options and flags."""
        return self[option].values

    def single(self, option: OptionSpec | str) -> str:
        """
        Return the one value of an option.

        Raises:
            ValueError: If the option is absent, a flag, or holds several values.
        """
        value = self[option]
        if value.kind is not ValueKind.VALUES:
            raise ValueError(f"Option '{_key(option)}' has no value ({value.kind})")
        if len(value.values) != 1:
            raise ValueError(
                f"Option '{_key(option)}' has {len(value.values)} values, expected 1"
            )
        return value.values[0]

    def get_value(self, option: OptionSpec | str, default: str | None = None):
        """Return the last value of an option, or `default` if it has none."""
        values = self.values_of(option)
        return values[-1] if values else default

    def as_dict(self) -> dict[str, None | bool | str | list[str]]:
        return {name: value.to_python() for name, value in self._values.items()}
