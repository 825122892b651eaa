# Just Getopt — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Enums and constants shared by the option registry and the parsing engine.

Contents:
- `OptValue`: Value policy of a declared option (none, optional, required and
  their non-empty variants).
- `OptFlag`: Behavior flags for the parser (`options_everywhere`,
  `prefix_match_long_options`).
- `Limit`: Result categories that can be capped with `OptSpecs.set_limit()`.
- `UNLIMITED`: The default value of every limit.

All three enums accept their string values, and a few aliases, when called with
a string. This keeps specification files and programmatic declarations equally
terse:

    OptValue("required-non-empty") → OptValue.REQUIRED_NON_EMPTY
    OptFlag("everywhere")          → OptFlag.OPTIONS_EVERYWHERE
    Limit("other")                 → Limit.OTHER_ARGS
"""
from __future__ import annotations

import sys
from enum import Enum

UNLIMITED = sys.maxsize


class _AliasedEnum(Enum):
    """Enum base that resolves strings case-insensitively, with aliases."""

    @classmethod
    def choices(cls) -> list:
        return list(cls)

    @classmethod
    def _get_alias(cls, value: str) -> str:
        return value

    @classmethod
    def _missing_(cls, value: object):
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().lower().replace("-", "_")
        alias = cls._get_alias(normalized)
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    def __str__(self) -> str:
        return self.value


class OptValue(_AliasedEnum):
    """
    Whether an option takes a value, and how it is resolved.

    Members:
        NONE: The option does not accept a value. `--foo=bar` is unknown.
        OPTIONAL: The value must be attached (`-fVALUE`, `--foo=VALUE`).
        OPTIONAL_NON_EMPTY: Like OPTIONAL, but an empty value counts as absent.
        REQUIRED: The value is attached or taken from the next argument.
        REQUIRED_NON_EMPTY: Like REQUIRED, but an empty value counts as missing.

    Aliases:
        - "no" / "flag" → "none"
        - "optional_nonempty" → "optional_non_empty"
        - "required_nonempty" → "required_non_empty"
    """

    NONE = "none"
    OPTIONAL = "optional"
    OPTIONAL_NON_EMPTY = "optional_non_empty"
    REQUIRED = "required"
    REQUIRED_NON_EMPTY = "required_non_empty"

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "no": "none",
            "flag": "none",
            "optional_nonempty": "optional_non_empty",
            "required_nonempty": "required_non_empty",
        }
        return aliases.get(value, value)

    @property
    def takes_value(self) -> bool:
        return self is not OptValue.NONE

    @property
    def is_required(self) -> bool:
        return self in (OptValue.REQUIRED, OptValue.REQUIRED_NON_EMPTY)

    @property
    def is_non_empty(self) -> bool:
        return self in (OptValue.OPTIONAL_NON_EMPTY, OptValue.REQUIRED_NON_EMPTY)


class OptFlag(_AliasedEnum):
    """
    Flags that change the parser's behavior.

    Members:
        OPTIONS_EVERYWHERE: Options and other arguments may be mixed. By
            default the first non-option argument stops option parsing.
        PREFIX_MATCH_LONG_OPTIONS: Long options may be shortened to any
            unique prefix of a declared long name.
    """

    OPTIONS_EVERYWHERE = "options_everywhere"
    PREFIX_MATCH_LONG_OPTIONS = "prefix_match_long_options"

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "everywhere": "options_everywhere",
            "prefix_match": "prefix_match_long_options",
        }
        return aliases.get(value, value)


class Limit(_AliasedEnum):
    """Result categories with an independent collection limit."""

    OPTIONS = "options"
    OTHER_ARGS = "other_args"
    UNKNOWN_OPTIONS = "unknown_options"

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "other": "other_args",
            "unknown": "unknown_options",
        }
        return aliases.get(value, value)
