# rcconfig — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Loads option schemas from YAML or TOML files.

Example `schema.yaml`:

    name: my-tool
    version: "1.0"
    about: Does things.
    options:
      - name: host
        default: localhost
        help: Host to bind to.
      - name: verbose
        takes_argument: false
      - name: include
        repeatable: true

The same structure is accepted in TOML using `[[options]]` tables.
"""
from __future__ import annotations

from pathlib import Path
from typing import Any

import toml
import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from rcconfig.exceptions import SchemaError
from rcconfig.schema import OptionSpec, Schema


class RawOption(BaseModel):
    """Raw option model for schema files."""

    model_config = ConfigDict(extra="forbid")

    name: str
    default: str | None = None
    required: bool = False
    takes_argument: bool = True
    repeatable: bool = False
    help: str = ""
    documentation: str = ""

    @model_validator(mode="before")
    @classmethod
    def stringify_default(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("default") is not None:
            data = {**data, "default": str(data["default"])}
        return data

    def to_option(self) -> OptionSpec:
        return OptionSpec(**self.model_dump())


class RawSchema(BaseModel):
    """Raw schema model for schema files."""

    model_config = ConfigDict(extra="forbid")

    name: str
    version: str = ""
    about: str = ""
    options: list[RawOption] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def stringify_version(cls, data: Any) -> Any:
        if isinstance(data, dict) and isinstance(data.get("version"), (int, float)):
            data = {**data, "version": str(data["version"])}
        return data

    def to_schema(self) -> Schema:
        return Schema.build(
            self.name,
            self.version,
            self.about,
            [option.to_option() for option in self.options],
        )


def load_schema(file_path: Path | str) -> Schema:
    """
    Load a schema from a YAML or TOML file.

    Args:
        file_path (Path | str): Path to a `.yaml`, `.yml` or `.toml` file.

    Returns:
        Schema: The validated schema.

    Raises:
        FileNotFoundError: If the file does not exist.
        SchemaError: If the file format is unsupported or the content is invalid.
    """
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise FileNotFoundError(f"No such schema file: {file_path}")

    suffix = path.suffix
    with path.open("r", encoding="UTF-8") as schema_file:
        try:
            if suffix in (".yaml", ".yml"):
                raw_schema = yaml.safe_load(schema_file)
            elif suffix == ".toml":
                raw_schema = toml.load(schema_file)
            else:
                raise SchemaError(f"Unsupported schema format: {suffix}")
        except (yaml.YAMLError, toml.TomlDecodeError) as error:
            raise SchemaError(f"Could not parse {path}: {error}") from error

    if not isinstance(raw_schema, dict):
        raise SchemaError(
            "Schema file must contain a mapping with a list of options.\n"
            "Example:\n"
            "name: 'my-tool'\n"
            "options:\n"
            "  - name: 'host'\n"
            "    default: 'localhost'"
        )

    try:
        return RawSchema.model_validate(raw_schema).to_schema()
    except ValidationError as error:
        raise SchemaError(f"Invalid schema in {path}:\n{error}") from error
