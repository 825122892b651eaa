# Just Getopt — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by Just Getopt.

Only programmer-facing problems are exceptions. Irregular user input (unknown
options, missing values, ambiguous prefixes) is never raised; it is reported
in the parse result instead.

Exception Hierarchy:
- JustGetoptError
    ├── InvalidSpecError
    └── SpecFileError
"""


class JustGetoptError(Exception):
    """Base exception for Just Getopt."""


class InvalidSpecError(JustGetoptError):
    """Exception raised when an option specification is declared incorrectly."""


class SpecFileError(JustGetoptError):
    """Exception raised when a specification file cannot be loaded."""
