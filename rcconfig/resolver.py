# rcconfig — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Resolves the effective configuration of a program from its command line and an
optional rc file.

Resolution runs in fixed phases:

1. Build a `Matcher` from the schema.
2. Match the invocation tokens alone, which also tells whether the bypass flag
   (`--no-config` by default) was given.
3. Unless bypassed, load the rc file named by the environment variable. If it
   yields tokens, insert them after the program name and match again. The second
   match is authoritative. If it yields nothing, the first match is reused.
4. Extract one `ResolvedValue` per option into a `ResolvedConfig`.

Command-line arguments always win over file arguments for non-repeatable options,
because they come later in the merged token list. Repeatable options list file
values first.

A failed match raises `MatchError` and nothing is extracted. If the invocation
alone fails only because a required option is missing, the error is held until it
is known whether the rc file supplies it. Any other error in the invocation is
raised before the file is read.

Public Interface:
- `resolve(schema, argv, env_var)`: Return a `ResolvedConfig`.
- `build(owner, argv, env_var)`: Resolve a `Configurable` and return its typed config.
- `ConfigResolver`: The engine, returning a `Resolution` with diagnostics.
"""
from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Protocol, Sequence, TypeVar, runtime_checkable

from rcconfig import loader
from rcconfig.environment import EnvironmentSource
from rcconfig.exceptions import MatchError
from rcconfig.loader import LoadResult
from rcconfig.logger import logger
from rcconfig.matcher import DEFAULT_BYPASS_FLAG, Match, Matcher
from rcconfig.merge import merge_tokens
from rcconfig.schema import Schema
from rcconfig.values import ABSENT, PRESENT_FLAG, ResolvedConfig, ResolvedValue

T = TypeVar("T", covariant=True)


@runtime_checkable
class Configurable(Protocol[T]):
    """
    Anything that can describe its options and turn resolved values into a
    typed configuration object.
    """

    def describe(self) -> Schema: ...

    def materialize(self, config: ResolvedConfig) -> T: ...


@dataclass
class Resolution:
    """The resolved config together with how it was produced."""

    config: ResolvedConfig
    tokens: tuple[str, ...]
    bypassed: bool = False
    load_result: LoadResult = field(default_factory=LoadResult)


def extract(schema: Schema, match: Match) -> ResolvedConfig:
    """Build the resolved value of every schema option from a successful match."""
    values: dict[str, ResolvedValue] = {}
    for option in schema:
        if not option.takes_argument:
            values[option.name] = PRESENT_FLAG if match.occurrences(option) else ABSENT
            continue
        found = match.values_of(option)
        values[option.name] = ResolvedValue.of(found) if found else ABSENT
    return ResolvedConfig(schema, values)


class ConfigResolver:
    """
    Resolves invocation tokens and rc file tokens against one schema.

    Args:
        schema (Schema): The accepted options.
        env_var (str): Environment variable holding the rc file path.
        environment (EnvironmentSource | None): Where to look up `env_var`.
            Defaults to the process environment.
        bypass_flag (str): Name of the flag that disables file loading.
        encoding (str): Encoding of the rc file.
    """

    def __init__(
        self,
        schema: Schema,
        env_var: str,
        environment: EnvironmentSource | None = None,
        bypass_flag: str = DEFAULT_BYPASS_FLAG,
        encoding: str = "utf-8",
    ) -> None:
        self.schema = schema
        self.env_var = env_var
        self.environment = environment
        self.encoding = encoding
        self.matcher = Matcher(schema, bypass_flag=bypass_flag)

    def _load(self, bypassed: bool) -> LoadResult:
        if bypassed:
            logger.debug(
                "--%s given, not loading config file from $%s",
                self.matcher.bypass_flag,
                self.env_var,
            )
            return LoadResult()
        result = loader.load(self.env_var, self.environment, encoding=self.encoding)
        loader.report(result)
        return result

    def resolve(self, argv: Sequence[str] | None = None) -> Resolution:
        """
        Resolve `argv` (defaults to `sys.argv`) and the rc file.

        Raises:
            MatchError: If the final token list does not match the schema.
            ValueError: If `argv` is empty.
        """
        invocation = list(sys.argv if argv is None else argv)
        if not invocation:
            raise ValueError("argv must contain at least the program name")

        first: Match | None = None
        held_error: MatchError | None = None
        try:
            first = self.matcher.match(invocation)
            bypassed = first.bypass
        except MatchError as error:
            held_error = error
            try:
                bypassed = self.matcher.match_optional(invocation).bypass
            except MatchError:
                raise error from None

        load_result = self._load(bypassed)
        if not load_result.tokens:
            if held_error is not None:
                raise held_error
            assert first is not None
            return Resolution(
                config=extract(self.schema, first),
                tokens=first.tokens,
                bypassed=bypassed,
                load_result=load_result,
            )

        merged = merge_tokens(invocation, load_result.tokens)
        final = self.matcher.match(merged)
        logger.debug("Resolved %s from %d tokens", self.schema.name, len(merged))
        return Resolution(
            config=extract(self.schema, final),
            tokens=final.tokens,
            bypassed=bypassed,
            load_result=load_result,
        )


def resolve(
    schema: Schema,
    argv: Sequence[str] | None,
    env_var: str,
    environment: EnvironmentSource | None = None,
    bypass_flag: str = DEFAULT_BYPASS_FLAG,
) -> ResolvedConfig:
    """Resolve `argv` and the rc file named by `env_var` against `schema`."""
    resolver = ConfigResolver(
        schema, env_var, environment=environment, bypass_flag=bypass_flag
    )
    return resolver.resolve(argv).config


def build(
    owner: Configurable[T],
    argv: Sequence[str] | None,
    env_var: str,
    environment: EnvironmentSource | None = None,
    bypass_flag: str = DEFAULT_BYPASS_FLAG,
) -> T:
    """Resolve the options described by `owner` and return its materialized config."""
    schema = owner.describe()
    config = resolve(
        schema, argv, env_var, environment=environment, bypass_flag=bypass_flag
    )
    return owner.materialize(config)
