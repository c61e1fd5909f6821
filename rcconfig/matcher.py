# rcconfig — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Builds `argparse` parsers from a `Schema` and matches token lists against them.

`argparse` does the actual matching. This module only translates each `OptionSpec`
into one long option:

- flags use the `count` action, so presence can be told apart from absence;
- non-repeatable value options use `store`, where the last occurrence wins;
- repeatable value options use `append`, keeping every occurrence in order.

Defaults are applied here after matching rather than through `argparse`, because an
`append` action would otherwise add real occurrences on top of the default list.

A reserved flag (by default `--no-config`) is added to every parser. When it is
present the config file is not loaded.

Parser errors never exit the process. They are raised as `MatchError` carrying the
parser's usage line, and the caller decides how to report them.
"""
from __future__ import annotations

from argparse import ArgumentParser, Namespace, RawDescriptionHelpFormatter
from dataclasses import dataclass, field
from typing import Mapping, NoReturn, Sequence

from rcconfig.exceptions import MatchError, SchemaError
from rcconfig.schema import OptionSpec, Schema

DEFAULT_BYPASS_FLAG = "no-config"
# Option names cannot contain whitespace, so this never shares a slot with an option.
BYPASS_DEST = "rcconfig bypass"


class SchemaArgumentParser(ArgumentParser):
    """ArgumentParser that raises `MatchError` instead of exiting."""

    def error(self, message: str) -> NoReturn:
        raise MatchError(message, usage=self.format_usage())


@dataclass(frozen=True)
class Match:
    """
    The result of matching one token list.

    Attributes:
        tokens (tuple[str, ...]): The matched tokens, program name included.
        bypass (bool): True if the bypass flag was present.
        counts (Mapping[str, int]): Occurrences of each flag.
        values (Mapping[str, tuple[str, ...]]): Values of each value option, with
            defaults applied for options that never appeared.
    """

    tokens: tuple[str, ...]
    bypass: bool = False
    counts: Mapping[str, int] = field(default_factory=dict)
    values: Mapping[str, tuple[str, ...]] = field(default_factory=dict)

    def occurrences(self, option: OptionSpec | str) -> int:
        name = option.name if isinstance(option, OptionSpec) else option
        return self.counts.get(name, 0)

    def values_of(self, option: OptionSpec | str) -> tuple[str, ...]:
        name = option.name if isinstance(option, OptionSpec) else option
        return self.values.get(name, ())


def _help_for(option: OptionSpec) -> str:
    help_text = option.help.replace("%", "%%")
    if option.takes_argument and option.default is not None:
        default = option.default.replace("%", "%%")
        help_text = f"{help_text} (default: {default})".strip()
    if option.takes_argument and option.repeatable:
        help_text = f"{help_text} (may be given multiple times)".strip()
    return help_text


def _metavar(option: OptionSpec) -> str:
    return option.name.upper().replace("-", "_")


class Matcher:
    """
    Matches invocation tokens against a schema.

    The first token of every token list is the program name and is never matched.

    Example:
        matcher = Matcher(schema)
        result = matcher.match(["prog", "--host", "example.org"])
        result.values_of("host")  # ("example.org",)
    """

    def __init__(self, schema: Schema, bypass_flag: str = DEFAULT_BYPASS_FLAG) -> None:
        if bypass_flag in schema.options:
            raise SchemaError(
                f"Option '{bypass_flag}' is reserved for disabling the config file"
            )
        self.schema = schema
        self.bypass_flag = bypass_flag
        self.parser = self._build_parser()
        self.lenient_parser = self._build_parser(enforce_required=False)

    def _build_parser(self, enforce_required: bool = True) -> SchemaArgumentParser:
        parser = SchemaArgumentParser(
            prog=self.schema.name,
            description=self.schema.about or None,
            formatter_class=RawDescriptionHelpFormatter,
            add_help="help" not in self.schema.options,
            allow_abbrev=False,
        )
        if self.schema.version and "version" not in self.schema.options:
            parser.add_argument(
                "--version",
                action="version",
                version=f"%(prog)s {self.schema.version.replace('%', '%%')}",
            )
        parser.add_argument(
            f"--{self.bypass_flag}",
            dest=BYPASS_DEST,
            action="store_true",
            help="Do not load arguments from the config file.",
        )
        for option in self.schema:
            self._add_option(parser, option, enforce_required)
        return parser

    def _add_option(
        self, parser: ArgumentParser, option: OptionSpec, enforce_required: bool
    ) -> None:
        required = option.required and enforce_required
        if not option.takes_argument:
            parser.add_argument(
                option.flag,
                dest=option.name,
                action="count",
                default=None,
                required=required,
                help=option.help.replace("%", "%%"),
            )
        elif option.repeatable:
            parser.add_argument(
                option.flag,
                dest=option.name,
                action="append",
                default=None,
                required=required,
                metavar=_metavar(option),
                help=_help_for(option),
            )
        else:
            parser.add_argument(
                option.flag,
                dest=option.name,
                action="store",
                default=None,
                required=required,
                metavar=_metavar(option),
                help=_help_for(option),
            )

    def _to_match(self, tokens: Sequence[str], namespace: Namespace) -> Match:
        parsed = vars(namespace)
        counts: dict[str, int] = {}
        values: dict[str, tuple[str, ...]] = {}
        for option in self.schema:
            raw = parsed.get(option.name)
            if not option.takes_argument:
                counts[option.name] = raw or 0
                continue
            if raw is None:
                found: tuple[str, ...] = ()
            elif isinstance(raw, list):
                found = tuple(raw)
            else:
                found = (raw,)
            counts[option.name] = len(found)
            if not found and option.default is not None:
                found = (option.default,)
            values[option.name] = found
        return Match(
            tokens=tuple(tokens),
            bypass=bool(parsed.get(BYPASS_DEST)),
            counts=counts,
            values=values,
        )

    def match(self, tokens: Sequence[str]) -> Match:
        """
        Match a full token list, program name first.

        Raises:
            MatchError: On unknown options, missing values or missing required options.
        """
        namespace = self.parser.parse_args(list(tokens[1:]))
        return self._to_match(tokens, namespace)

    def match_optional(self, tokens: Sequence[str]) -> Match:
        """
        Match like `match`, but without enforcing required options.

        Raises:
            MatchError: On unknown options or missing values.
        """
        namespace = self.lenient_parser.parse_args(list(tokens[1:]))
        return self._to_match(tokens, namespace)

    def format_help(self) -> str:
        return self.parser.format_help()

    def format_usage(self) -> str:
        return self.parser.format_usage()
