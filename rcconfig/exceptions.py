# rcconfig — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by rcconfig.

Exception Hierarchy:
- RcConfigError
    ├── SchemaError
    ├── FileAccessError
    ├── LineDecodeError
    └── MatchError

`SchemaError` and `MatchError` propagate to the caller, which is expected to print
a message and terminate. `FileAccessError` and `LineDecodeError` are recovered at the
loader boundary and reported as diagnostics.
"""
from __future__ import annotations


class RcConfigError(Exception):
    """Base exception for rcconfig."""


class SchemaError(RcConfigError):
    """Exception raised when an option schema is malformed."""


class FileAccessError(RcConfigError):
    """Exception raised when a config file is set but cannot be opened."""

    def __init__(self, path: str, cause: BaseException):
        self.path = path
        self.cause = cause
        super().__init__(f"{path}: {cause}")


class LineDecodeError(RcConfigError):
    """Exception describing a single config file line that is not valid text."""

    def __init__(self, line_number: int, cause: BaseException):
        self.line_number = line_number
        self.cause = cause
        super().__init__(f"{line_number}: {cause}")


class MatchError(RcConfigError):
    """Exception raised when the argument tokens do not match the schema."""

    def __init__(self, message: str, usage: str = ""):
        self.message = message
        self.usage = usage
        super().__init__(message)
