"""
Just Getopt

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .args import Args, Opt
from .opt_specs import OptionRegistry, OptSpecs
from .option_parser import parse
from .option_spec import OptSpec
from .parser_types import UNLIMITED, Limit, OptFlag, OptValue

__all__ = [
    "Args",
    "Limit",
    "Opt",
    "OptFlag",
    "OptSpec",
    "OptSpecs",
    "OptValue",
    "OptionRegistry",
    "UNLIMITED",
    "parse",
]
