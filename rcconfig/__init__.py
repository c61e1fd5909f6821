"""
rcconfig

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .environment import EnvironmentSource, MappingEnvironment, ProcessEnvironment
from .exceptions import (
    FileAccessError,
    LineDecodeError,
    MatchError,
    RcConfigError,
    SchemaError,
)
from .resolver import Configurable, ConfigResolver, Resolution, build, resolve
from .schema import OptionSpec, Schema
from .values import ABSENT, PRESENT_FLAG, ResolvedConfig, ResolvedValue, ValueKind

logger = logging.getLogger("rcconfig")


__all__ = [
    "ABSENT",
    "PRESENT_FLAG",
    "ConfigResolver",
    "Configurable",
    "EnvironmentSource",
    "FileAccessError",
    "LineDecodeError",
    "MappingEnvironment",
    "MatchError",
    "OptionSpec",
    "ProcessEnvironment",
    "RcConfigError",
    "Resolution",
    "ResolvedConfig",
    "ResolvedValue",
    "Schema",
    "SchemaError",
    "ValueKind",
    "build",
    "resolve",
]
