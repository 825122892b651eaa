"""
Just Getopt

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .exceptions import InvalidSpecError, JustGetoptError, SpecFileError
from .parser import (
    UNLIMITED,
    Args,
    Limit,
    Opt,
    OptFlag,
    OptionRegistry,
    OptSpec,
    OptSpecs,
    OptValue,
    parse,
)
from .version import __version__

logger = logging.getLogger("just_getopt")


__all__ = [
    "Args",
    "InvalidSpecError",
    "JustGetoptError",
    "Limit",
    "Opt",
    "OptFlag",
    "OptSpec",
    "OptSpecs",
    "OptValue",
    "OptionRegistry",
    "SpecFileError",
    "UNLIMITED",
    "__version__",
    "parse",
]
