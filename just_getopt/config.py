# Just Getopt — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Loader for option specifications stored in YAML or TOML files.

A specification file declares options, parser flags and limits:

    flags: [options_everywhere]
    limits:
      other_args: 10
    options:
      - id: help
        names: [h, help]
      - id: file
        names: [f, file]
        value: required_non_empty

Each option entry declares every name in `names` with the same identifier and
value policy. `value` defaults to `none`.
"""
from __future__ import annotations

from pathlib import Path
from typing import Any

import toml
import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from just_getopt.exceptions import InvalidSpecError, SpecFileError
from just_getopt.logger import logger
from just_getopt.parser.opt_specs import OptSpecs
from just_getopt.parser.parser_types import Limit, OptFlag, OptValue


class RawOption(BaseModel):
    """One option entry of a specification file."""

    id: str
    names: list[str] = Field(min_length=1)
    value: OptValue = OptValue.NONE

    @field_validator("names", mode="before")
    @classmethod
    def validate_names(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [value]
        return value

    @field_validator("value", mode="before")
    @classmethod
    def validate_value(cls, value: Any) -> OptValue:
        return OptValue(value)


class SpecConfig(BaseModel):
    """Specification file model."""

    options: list[RawOption] = Field(default_factory=list)
    flags: list[OptFlag] = Field(default_factory=list)
    limits: dict[Limit, int] = Field(default_factory=dict)

    @field_validator("flags", mode="before")
    @classmethod
    def validate_flags(cls, value: Any) -> Any:
        if isinstance(value, str):
            value = [value]
        if not isinstance(value, list):
            raise ValueError("flags must be a list.")
        return [OptFlag(flag) for flag in value]

    @field_validator("limits", mode="before")
    @classmethod
    def validate_limits(cls, value: Any) -> dict[Limit, Any]:
        if not isinstance(value, dict):
            raise ValueError("limits must be a mapping of category to count.")
        return {Limit(category): limit for category, limit in value.items()}

    def to_specs(self) -> OptSpecs:
        specs = OptSpecs()
        for option in self.options:
            specs.add_options(option.id, option.names, option.value)
        for flag in self.flags:
            specs.set_flag(flag)
        for category, limit in self.limits.items():
            specs.set_limit(category, limit)
        return specs


def read_config_file(path: Path) -> Any:
    suffix = path.suffix
    with path.open("r", encoding="UTF-8") as config_file:
        if suffix in (".yaml", ".yml"):
            return yaml.safe_load(config_file)
        elif suffix == ".toml":
            return toml.load(config_file)
    raise SpecFileError(f"Unsupported specification format: {suffix}")


def loader(file_path: Path | str) -> OptSpecs:
    """
    Load an option specification from a YAML or TOML file.

    Args:
        file_path (Path | str): Path to the specification file.

    Returns:
        OptSpecs: A builder holding the declared options, flags and limits.

    Raises:
        TypeError: If `file_path` is not a string or Path.
        SpecFileError: If the file is missing, cannot be parsed, or declares
            invalid options.
    """
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise SpecFileError(f"No such specification file: {file_path}")

    try:
        raw_config = read_config_file(path)
    except (yaml.YAMLError, toml.TomlDecodeError) as error:
        raise SpecFileError(f"Could not parse '{path}': {error}") from error

    if raw_config is None:
        raw_config = {}
    if not isinstance(raw_config, dict):
        raise SpecFileError(
            f"Specification file '{path}' must contain a mapping.\n"
            "Example:\n"
            "options:\n"
            "  - id: 'help'\n"
            "    names: ['h', 'help']"
        )

    try:
        specs = SpecConfig.model_validate(raw_config).to_specs()
    except ValidationError as error:
        raise SpecFileError(f"Invalid specification in '{path}':\n{error}") from error
    except InvalidSpecError as error:
        raise SpecFileError(f"Invalid specification in '{path}': {error}") from error

    logger.debug("Loaded %s from '%s'", specs, path)
    return specs
