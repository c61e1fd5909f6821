# rcconfig — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Environment sources used to look up the config file path.

The loader never reads `os.environ` directly. It is handed an `EnvironmentSource`,
which lets tests pass a fixed snapshot instead of mutating the process environment.

Protocols:
- EnvironmentSource: anything with `get(name) -> str | None`.

Implementations:
- ProcessEnvironment: reads the real process environment.
- MappingEnvironment: reads from a plain mapping.
"""
from __future__ import annotations

import os
from typing import Mapping, Protocol, runtime_checkable


@runtime_checkable
class EnvironmentSource(Protocol):
    def get(self, name: str) -> str | None: ...


class ProcessEnvironment:
    """Environment source backed by `os.environ`."""

    def get(self, name: str) -> str | None:
        return os.environ.get(name)

    def __repr__(self) -> str:
        return "ProcessEnvironment()"


class MappingEnvironment:
    """Environment source backed by a fixed mapping."""

    def __init__(self, values: Mapping[str, str] | None = None) -> None:
        self.values: dict[str, str] = dict(values or {})

    def get(self, name: str) -> str | None:
        return self.values.get(name)

    def __repr__(self) -> str:
        return f"MappingEnvironment({self.values!r})"
