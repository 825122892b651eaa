# Just Getopt — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the parse result types: `Opt`, one recognized option occurrence, and
`Args`, the classified command line.

`Args` keeps three ordered collections:
- `options`: recognized options in the order they occurred, never deduplicated.
- `other`: positional (non-option) arguments in input order.
- `unknown`: unrecognized option names, deduplicated, first occurrence first.

`arg_limit_exceeded` is True when a configured limit caused something to be
dropped. The query methods are pure and never modify the result.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class Opt:
    """
    A recognized option found in the command line.

    Attributes:
        id (str): Identifier of the matching declaration.
        name (str): Name actually used in the command line. Differs between
            aliases, and is the typed prefix when prefix matching is enabled.
        value_required (bool): True if the declaration requires a value.
        value (str | None): The value, or None when no value was given.
    """

    id: str
    name: str
    value_required: bool = False
    value: str | None = None

    @property
    def value_missing(self) -> bool:
        return self.value_required and self.value is None


@dataclass(frozen=True)
class Args:
    """Parsed command line."""

    options: tuple[Opt, ...] = ()
    other: tuple[str, ...] = ()
    unknown: tuple[str, ...] = ()
    arg_limit_exceeded: bool = False

    def required_value_missing(self) -> list[Opt]:
        """Return options that require a value but did not get one."""
        return [opt for opt in self.options if opt.value_missing]

    def options_all(self, id: str) -> list[Opt]:
        return [opt for opt in self.options if opt.id == id]

    def options_first(self, id: str) -> Opt | None:
        return next((opt for opt in self.options if opt.id == id), None)

    def options_last(self, id: str) -> Opt | None:
        return next((opt for opt in reversed(self.options) if opt.id == id), None)

    def option_exists(self, id: str) -> bool:
        return any(opt.id == id for opt in self.options)

    def options_value_all(self, id: str) -> list[str]:
        """Return every value given to the option, skipping occurrences without one."""
        return [
            opt.value for opt in self.options if opt.id == id and opt.value is not None
        ]

    def options_value_first(self, id: str) -> str | None:
        values = self.options_value_all(id)
        return values[0] if values else None

    def options_value_last(self, id: str) -> str | None:
        values = self.options_value_all(id)
        return values[-1] if values else None

    def to_dict(self) -> dict[str, Any]:
        """Return the result as plain lists and dicts, ready for JSON."""
        data = asdict(self)
        data["options"] = [asdict(opt) for opt in self.options]
        data["other"] = list(self.other)
        data["unknown"] = list(self.unknown)
        return data

    def __str__(self) -> str:
        return (
            f"Args(options={len(self.options)}, other={len(self.other)}, "
            f"unknown={len(self.unknown)}, "
            f"arg_limit_exceeded={self.arg_limit_exceeded})"
        )
