# rcconfig — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Reads rc-style config files into argument tokens.

An rc file holds one command-line argument per line, read top to bottom:

    # Bind on all interfaces
    --host
    0.0.0.0
    --verbose

Each line is trimmed; blank lines and lines starting with `#` are skipped. Every other
line is exactly one token. Lines are never split into words and no quoting or
escaping is applied, so `--name=some value` is a single token.

The path to the file comes from an environment variable. An unset or empty variable
means no file is configured and yields no tokens. A file that cannot be opened is a
`FileAccessError`; a line that is not valid text is a `LineDecodeError`, which is
collected while the rest of the file is still read.

Public Interface:
- `parse_reader(reader)`: Parse an open binary stream.
- `parse(path)`: Parse a file by path, raising `FileAccessError` if unopenable.
- `load(env_var, environment)`: Resolve the path and parse, capturing all errors.
- `args(env_var, environment)`: Like `load`, but logs diagnostics and returns tokens.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path
from typing import BinaryIO

from rcconfig.environment import EnvironmentSource, ProcessEnvironment
from rcconfig.exceptions import FileAccessError, LineDecodeError
from rcconfig.logger import logger

COMMENT_PREFIX = b"#"


@dataclass
class LoadResult:
    """Outcome of loading the config file named by an environment variable."""

    path: Path | None = None
    tokens: list[str] = field(default_factory=list)
    line_errors: list[LineDecodeError] = field(default_factory=list)
    error: FileAccessError | None = None

    @property
    def configured(self) -> bool:
        """True if the environment variable pointed at a file."""
        return self.path is not None

    @property
    def ok(self) -> bool:
        return self.error is None and not self.line_errors


def _decode_line(line: bytes, encoding: str) -> str:
    token = line.decode(encoding).strip()
    if "\x00" in token:
        raise ValueError("embedded null byte")
    return token


def parse_reader(
    reader: BinaryIO, encoding: str = "utf-8"
) -> tuple[list[str], list[LineDecodeError]]:
    """
    Parse rc lines from a binary stream.

    Returns:
        tuple[list[str], list[LineDecodeError]]: Tokens in file order and one error
        per line that could not be decoded.
    """
    tokens: list[str] = []
    errors: list[LineDecodeError] = []
    for line_number, raw_line in enumerate(reader, start=1):
        if raw_line.lstrip().startswith(COMMENT_PREFIX):
            continue
        try:
            token = _decode_line(raw_line, encoding)
        except (UnicodeDecodeError, ValueError) as error:
            errors.append(LineDecodeError(line_number, error))
            continue
        if token and not token.startswith("#"):
            tokens.append(token)
    return tokens, errors


def parse(
    path: str | PathLike[str], encoding: str = "utf-8"
) -> tuple[list[str], list[LineDecodeError]]:
    """
    Parse a single rc file.

    Raises:
        FileAccessError: If the file cannot be opened or read.
    """
    try:
        with open(path, "rb") as config_file:
            return parse_reader(config_file, encoding=encoding)
    except OSError as error:
        raise FileAccessError(str(path), error) from error


def resolve_path(
    env_var: str, environment: EnvironmentSource | None = None
) -> Path | None:
    """Return the config file path named by `env_var`, or None if unset or empty."""
    if environment is None:
        environment = ProcessEnvironment()
    value = environment.get(env_var)
    if not value:
        return None
    return Path(value)


def load(
    env_var: str,
    environment: EnvironmentSource | None = None,
    encoding: str = "utf-8",
) -> LoadResult:
    """
    Load tokens from the file named by `env_var`.

    Never raises for file problems: an unopenable file is returned as
    `LoadResult.error` with no tokens, and undecodable lines as
    `LoadResult.line_errors` alongside the tokens that did parse.
    """
    path = resolve_path(env_var, environment)
    if path is None:
        return LoadResult()
    try:
        tokens, line_errors = parse(path, encoding=encoding)
    except FileAccessError as error:
        return LoadResult(path=path, error=error)
    return LoadResult(path=path, tokens=tokens, line_errors=line_errors)


def report(result: LoadResult) -> None:
    """Log the diagnostics of a load result."""
    if result.error is not None:
        logger.error("Could not read config file %s", result.error)
        return
    for line_error in result.line_errors:
        logger.warning("%s:%s", result.path, line_error)
    if result.configured:
        logger.debug(
            "%s: arguments loaded from config file: %s", result.path, result.tokens
        )


def args(
    env_var: str,
    environment: EnvironmentSource | None = None,
    encoding: str = "utf-8",
) -> list[str]:
    """Return the tokens from the file named by `env_var`, logging any problems."""
    result = load(env_var, environment, encoding=encoding)
    report(result)
    return result.tokens
