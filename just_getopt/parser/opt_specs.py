# Just Getopt — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `OptSpecs`, the builder used to declare valid
command-line options, and `OptionRegistry`, the frozen snapshot that the
parsing engine reads.

Declarations are validated eagerly. A bad identifier, an invalid or duplicate
name, an unknown flag or a negative limit raises `InvalidSpecError` from the
builder call that introduced it, so mistakes surface in the program's own
tests instead of at the user's command line.

Public Interface:
- `add_option(id, name, value_type)`: Declare one option name.
- `set_flag(flag)`: Enable a parser flag. Idempotent.
- `set_limit(category, n)`: Cap one result category. Last write wins.
- `build()`: Freeze the declarations into an `OptionRegistry`.
- `getopt(args)`: Build and parse in one step.

Example Usage:
    specs = (
        OptSpecs()
        .add_option("help", "h")
        .add_option("help", "help")
        .add_option("file", "f", OptValue.REQUIRED)
        .add_option("file", "file", OptValue.REQUIRED)
        .set_flag(OptFlag.OPTIONS_EVERYWHERE)
    )
    args = specs.getopt(["-h", "--file=123", "foo"])
"""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Iterable, Mapping

from just_getopt.exceptions import InvalidSpecError
from just_getopt.logger import logger
from just_getopt.parser.lexer import (
    INVALID_LONG_OPTION_CHARS,
    is_valid_long_option_name,
    is_valid_short_option_name,
)
from just_getopt.parser.option_spec import OptSpec
from just_getopt.parser.parser_types import UNLIMITED, Limit, OptFlag, OptValue

if TYPE_CHECKING:
    from just_getopt.parser.args import Args


def _default_limits() -> Mapping[Limit, int]:
    return MappingProxyType({limit: UNLIMITED for limit in Limit})


@dataclass(frozen=True)
class OptionRegistry:
    """
    Read-only option specification consumed by the parsing engine.

    Instances are created with `OptSpecs.build()`. They hold no parse state,
    so one registry can be shared by any number of parses, including
    concurrent ones.

    Attributes:
        options (tuple[OptSpec, ...]): Declared options in declaration order.
        flags (frozenset[OptFlag]): Enabled parser flags.
        limits (Mapping[Limit, int]): Collection limit for each category.
    """

    options: tuple[OptSpec, ...] = ()
    flags: frozenset[OptFlag] = frozenset()
    limits: Mapping[Limit, int] = field(default_factory=_default_limits, hash=False)

    def is_flag(self, flag: OptFlag | str) -> bool:
        return OptFlag(flag) in self.flags

    def get_limit(self, category: Limit | str) -> int:
        return self.limits.get(Limit(category), UNLIMITED)

    def lookup_short(self, name: str) -> OptSpec | None:
        """Return the short option with exactly this name, if declared."""
        if len(name) != 1:
            return None
        return next((spec for spec in self.options if spec.name == name), None)

    def lookup_long(self, name: str) -> OptSpec | None:
        """Return the long option with exactly this name, if declared."""
        if len(name) < 2:
            return None
        return next((spec for spec in self.options if spec.name == name), None)

    def long_prefix_matches(self, name: str) -> list[OptSpec]:
        """Return every long option whose name starts with `name`."""
        if len(name) < 2:
            return []
        return [
            spec
            for spec in self.options
            if spec.is_long and spec.name.startswith(name)
        ]

    def lookup_long_prefix(self, name: str) -> OptSpec | None:
        """
        Return the long option uniquely identified by the prefix `name`.

        No match and an ambiguous prefix both return None.
        """
        matches = self.long_prefix_matches(name)
        if len(matches) == 1:
            return matches[0]
        if len(matches) > 1:
            logger.debug(
                "Ambiguous long option prefix '%s': %s",
                name,
                ", ".join(spec.name for spec in matches),
            )
        return None

    def resolve_long(self, name: str) -> OptSpec | None:
        """Look up a long option the way the `prefix_match_long_options` flag asks."""
        if OptFlag.PREFIX_MATCH_LONG_OPTIONS in self.flags:
            return self.lookup_long_prefix(name)
        return self.lookup_long(name)

    def ids(self) -> list[str]:
        """Return the distinct option identifiers in declaration order."""
        return list(dict.fromkeys(spec.id for spec in self.options))

    def names_for(self, id: str) -> list[OptSpec]:
        """Return every declared option sharing the identifier `id`."""
        return [spec for spec in self.options if spec.id == id]


class OptSpecs:
    """
    Builder for a command-line option specification.

    Every mutating method returns the builder itself so declarations can be
    chained. Call `build()` to obtain the immutable `OptionRegistry` used for
    parsing; later changes to the builder never leak into a built registry.
    """

    def __init__(self) -> None:
        self._options: list[OptSpec] = []
        self._names: set[str] = set()
        self._flags: set[OptFlag] = set()
        self._limits: dict[Limit, int] = {limit: UNLIMITED for limit in Limit}

    @property
    def options(self) -> tuple[OptSpec, ...]:
        return tuple(self._options)

    @property
    def flags(self) -> frozenset[OptFlag]:
        return frozenset(self._flags)

    @property
    def limits(self) -> Mapping[Limit, int]:
        return MappingProxyType(self._limits)

    def is_flag(self, flag: OptFlag | str) -> bool:
        return OptFlag(flag) in self._flags

    def _validate_name(self, name: str) -> None:
        if not isinstance(name, str) or not name:
            raise InvalidSpecError("Option name must be at least 1 character long")
        if len(name) == 1:
            if (
                not is_valid_short_option_name(name)
                or name in INVALID_LONG_OPTION_CHARS
            ):
                raise InvalidSpecError(f"Not a valid short option name: '{name}'")
        elif not is_valid_long_option_name(name):
            raise InvalidSpecError(f"Not a valid long option name: '{name}'")
        if name in self._names:
            raise InvalidSpecError(f"Option name '{name}' is already declared")

    def add_option(
        self,
        id: str,
        name: str,
        value_type: OptValue | str = OptValue.NONE,
    ) -> OptSpecs:
        """
        Declare a command-line option.

        Args:
            id (str): Identifier for the option. Several options may share one
                identifier to act as aliases.
            name (str): Command-line name without prefix. A single character
                declares a short option, longer names declare a long option.
            value_type (OptValue | str): Value policy of the option.

        Returns:
            OptSpecs: The builder itself.

        Raises:
            InvalidSpecError: If the identifier is empty, the name is empty,
                invalid or already declared, or the value policy is unknown.
        """
        if not isinstance(id, str) or not id:
            raise InvalidSpecError("Option id must be at least 1 character long")
        self._validate_name(name)
        try:
            value_type = OptValue(value_type)
        except ValueError as error:
            raise InvalidSpecError(str(error)) from error

        self._options.append(OptSpec(id=id, name=name, value_type=value_type))
        self._names.add(name)
        return self

    def add_options(
        self,
        id: str,
        names: Iterable[str],
        value_type: OptValue | str = OptValue.NONE,
    ) -> OptSpecs:
        """Declare several names sharing one identifier and value policy."""
        for name in names:
            self.add_option(id, name, value_type)
        return self

    def set_flag(self, flag: OptFlag | str) -> OptSpecs:
        """Enable a parser flag. Setting the same flag again has no effect."""
        try:
            self._flags.add(OptFlag(flag))
        except ValueError as error:
            raise InvalidSpecError(str(error)) from error
        return self

    def set_limit(self, category: Limit | str, limit: int) -> OptSpecs:
        """
        Cap how many results of one category are collected.

        Args:
            category (Limit | str): `options`, `other_args` or `unknown_options`.
            limit (int): Maximum number of collected results, zero or more.

        Raises:
            InvalidSpecError: If the category is unknown or the limit is not a
                non-negative integer.
        """
        try:
            category = Limit(category)
        except ValueError as error:
            raise InvalidSpecError(str(error)) from error
        if isinstance(limit, bool) or not isinstance(limit, int) or limit < 0:
            raise InvalidSpecError(
                f"Limit for '{category}' must be a non-negative integer, got {limit!r}"
            )
        self._limits[category] = min(limit, UNLIMITED)
        return self

    def build(self) -> OptionRegistry:
        """Freeze the current declarations into an `OptionRegistry`."""
        return OptionRegistry(
            options=tuple(self._options),
            flags=frozenset(self._flags),
            limits=MappingProxyType(dict(self._limits)),
        )

    def getopt(self, args: Iterable) -> Args:
        """Parse `args` against the current declarations."""
        from just_getopt.parser.option_parser import parse

        return parse(self.build(), args)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OptSpecs):
            return False
        return (
            self._options == other._options
            and self._flags == other._flags
            and self._limits == other._limits
        )

    def __str__(self) -> str:
        short = sum(spec.is_short for spec in self._options)
        return (
            f"OptSpecs(options={len(self._options)}, short={short}, "
            f"long={len(self._options) - short}, flags={len(self._flags)})"
        )

    def __repr__(self) -> str:
        return str(self)
