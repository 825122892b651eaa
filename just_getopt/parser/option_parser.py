# Just Getopt — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `parse`, the getopt_long-style parsing engine.

The engine walks the command line once with a single forward iterator and
classifies every token as a recognized option, an option value, an unknown
option or an other (positional) argument. It never raises for user input and
never prints; irregularities are recorded in the returned `Args`.

Parsing Rules:
- `--` stops option parsing. It is consumed and the rest of the command line
  becomes other arguments, even if it looks like options.
- `--name` and `--name=value` are long options. A value is taken from `=`, or,
  for options requiring a value, from the next argument, whatever it is.
- `-abc` is a cluster of short options. The first option in the cluster that
  takes a value swallows the rest of the cluster as its value. If nothing is
  left and the value is required, the next argument is the value.
- By default the first other argument stops option parsing (POSIX). With the
  `options_everywhere` flag options and other arguments may be mixed.
- Collection limits drop results beyond the limit and set
  `arg_limit_exceeded`. Values are consumed whether or not their option is
  recorded, so the position in the command line does not depend on limits.
  Once every limit is full, scanning stops and the rest is dropped; a `--`
  at that point is still consumed as the terminator.

Example Usage:
    registry = OptSpecs().add_option("debug", "d", OptValue.OPTIONAL).build()
    args = parse(registry, ["-abcd", "-adbc"])

    # args.unknown == ("a", "b", "c")
    # [opt.value for opt in args.options] == [None, "bc"]
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator

from just_getopt.logger import logger
from just_getopt.parser.args import Args, Opt
from just_getopt.parser.lexer import (
    get_short_option_series,
    is_long_option_prefix,
    is_option_terminator,
    is_short_option_prefix,
    is_valid_long_option_name,
    is_valid_short_option_name,
    split_long_option,
)
from just_getopt.parser.opt_specs import OptionRegistry, OptSpecs
from just_getopt.parser.parser_types import Limit, OptFlag, OptValue


@dataclass
class ParseState:
    """Mutable collections of one parse call, with limit bookkeeping."""

    registry: OptionRegistry
    options: list[Opt] = field(default_factory=list)
    other: list[str] = field(default_factory=list)
    unknown: list[str] = field(default_factory=list)
    limit_exceeded: bool = False

    def __post_init__(self) -> None:
        self.options_limit = self.registry.get_limit(Limit.OPTIONS)
        self.other_limit = self.registry.get_limit(Limit.OTHER_ARGS)
        self.unknown_limit = self.registry.get_limit(Limit.UNKNOWN_OPTIONS)

    def _exceed(self, category: Limit, token: str) -> None:
        if not self.limit_exceeded:
            logger.debug("Limit for '%s' reached, dropping '%s'", category, token)
        self.limit_exceeded = True

    def add_option(self, opt: Opt) -> None:
        if len(self.options) < self.options_limit:
            self.options.append(opt)
        else:
            self._exceed(Limit.OPTIONS, opt.name)

    def add_other(self, token: str) -> None:
        if len(self.other) < self.other_limit:
            self.other.append(token)
        else:
            self._exceed(Limit.OTHER_ARGS, token)

    def add_unknown(self, name: str) -> None:
        if name in self.unknown:
            return
        if len(self.unknown) < self.unknown_limit:
            self.unknown.append(name)
        else:
            self._exceed(Limit.UNKNOWN_OPTIONS, name)

    def is_saturated(self) -> bool:
        """Return True when no category can take another result."""
        return (
            len(self.options) >= self.options_limit
            and len(self.other) >= self.other_limit
            and len(self.unknown) >= self.unknown_limit
        )

    def to_args(self) -> Args:
        return Args(
            options=tuple(self.options),
            other=tuple(self.other),
            unknown=tuple(self.unknown),
            arg_limit_exceeded=self.limit_exceeded,
        )


def resolve_value(
    value_type: OptValue, inline: str | None, cursor: Iterator[str]
) -> str | None:
    """
    Resolve the value of an option that takes one.

    Args:
        value_type (OptValue): Policy of the matched option.
        inline (str | None): Value attached to the option token (`=value` of a
            long option, rest of a short option cluster), None if there is none.
        cursor (Iterator[str]): The parse iterator. Options requiring a value
            consume the next argument from it when there is no inline value.

    Returns:
        str | None: The value, None when absent. Empty values of the non-empty
            policies are returned as None.
    """
    value = inline
    if value is None and value_type.is_required:
        value = next(cursor, None)
    if value_type.is_non_empty and not value:
        return None
    return value


def _handle_long_option(token: str, cursor: Iterator[str], state: ParseState) -> None:
    name, equal_value = split_long_option(token)

    spec = None
    if len(name) >= 2 and is_valid_long_option_name(name):
        spec = state.registry.resolve_long(name)

    if spec is None:
        state.add_unknown(name)
        return

    if not spec.value_type.takes_value:
        if equal_value is not None:
            state.add_unknown(f"{name}=")
        else:
            state.add_option(Opt(id=spec.id, name=name))
        return

    value = resolve_value(spec.value_type, equal_value, cursor)
    state.add_option(
        Opt(
            id=spec.id,
            name=name,
            value_required=spec.value_type.is_required,
            value=value,
        )
    )


def _handle_short_options(
    token: str, cursor: Iterator[str], state: ParseState
) -> None:
    series = get_short_option_series(token)

    for index, name in enumerate(series):
        spec = None
        if is_valid_short_option_name(name):
            spec = state.registry.lookup_short(name)

        if spec is None:
            state.add_unknown(name)
            continue

        if not spec.value_type.takes_value:
            state.add_option(Opt(id=spec.id, name=name))
            continue

        remainder = series[index + 1 :] or None
        value = resolve_value(spec.value_type, remainder, cursor)
        state.add_option(
            Opt(
                id=spec.id,
                name=name,
                value_required=spec.value_type.is_required,
                value=value,
            )
        )
        break


def parse(registry: OptionRegistry | OptSpecs, args: Iterable) -> Args:
    """
    Parse a command line against an option specification.

    Args:
        registry (OptionRegistry | OptSpecs): The option specification. A
            builder is frozen with `build()` first.
        args (Iterable): Command-line arguments without the program name. Any
            iterable works; every element is converted with `str()`.

    Returns:
        Args: The classified command line.

    Raises:
        TypeError: If `args` is a single string instead of an iterable of
            arguments.
    """
    if isinstance(registry, OptSpecs):
        registry = registry.build()
    if isinstance(args, str):
        raise TypeError("args must be an iterable of arguments, not a string")

    cursor: Iterator[str] = (str(arg) for arg in args)
    state = ParseState(registry)
    options_everywhere = registry.is_flag(OptFlag.OPTIONS_EVERYWHERE)

    while True:
        token = next(cursor, None)
        if token is None or is_option_terminator(token):
            break

        if state.is_saturated():
            state.add_other(token)
            break
        elif is_long_option_prefix(token):
            _handle_long_option(token, cursor, state)
        elif is_short_option_prefix(token):
            _handle_short_options(token, cursor, state)
        else:
            state.add_other(token)
            if not options_everywhere:
                break

    for token in cursor:
        state.add_other(token)

    args_result = state.to_args()
    logger.debug(
        "Parsed %d option(s), %d other argument(s), %d unknown option(s)%s",
        len(args_result.options),
        len(args_result.other),
        len(args_result.unknown),
        " (limit exceeded)" if args_result.arg_limit_exceeded else "",
    )
    return args_result
