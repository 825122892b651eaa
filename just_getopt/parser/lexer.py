# Just Getopt — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Lexical helpers that classify raw command-line tokens.

These functions only look at the text of one token. They do not know which
options are declared; the parsing engine combines them with registry lookups.
Python strings are indexed by code point, so slicing here never splits a
multi-byte character and every length is a character count.

Grammar:
- `--` alone is the option terminator.
- `--name`, `--name=value` is a long option when the third character exists
  and is not `-`. The name ends at the first `=`.
- `-abc` is a short option cluster when the second character is a valid short
  option character (anything but space and `-`).
"""

OPTION_TERMINATOR = "--"
LONG_OPTION_PREFIX = "--"
SHORT_OPTION_PREFIX = "-"
INVALID_SHORT_OPTION_CHARS = " -"
INVALID_LONG_OPTION_CHARS = " ="


def is_option_terminator(token: str) -> bool:
    return token == OPTION_TERMINATOR


def is_long_option_prefix(token: str) -> bool:
    """Return True if the token has the form of a long option (`--x...`)."""
    length = len(LONG_OPTION_PREFIX)
    if len(token) < length + 1:
        return False
    return token.startswith(LONG_OPTION_PREFIX) and token[length] != "-"


def get_long_option(token: str) -> str:
    """
    Return everything after the `--` prefix of a long option token.

    Raises:
        ValueError: If the token is not a long option.
    """
    if not is_long_option_prefix(token):
        raise ValueError(f"Not a valid long option: {token!r}")
    return token[len(LONG_OPTION_PREFIX) :]


def get_long_option_name(token: str) -> str:
    """Return the long option name, which ends at the first `=`."""
    return get_long_option(token).partition("=")[0]


def is_long_option_equal_sign(token: str) -> bool:
    """Return True if a `=value` part follows a name of at least two characters."""
    return "=" in get_long_option(token)[2:]


def get_long_option_equal_value(token: str) -> str:
    """Return the text after the first `=`, or an empty string if there is none."""
    return get_long_option(token).partition("=")[2]


def split_long_option(token: str) -> tuple[str, str | None]:
    """
    Split a long option token into its name and `=` value.

    The value is None when the token has no `=value` part, and may be an empty
    string for `--name=`.
    """
    name = get_long_option_name(token)
    if is_long_option_equal_sign(token):
        return name, get_long_option_equal_value(token)
    return name, None


def is_valid_long_option_name(name: str) -> bool:
    """Return True if the text may be used as a long option name."""
    if name.startswith("-"):
        return False
    return not any(char in name for char in INVALID_LONG_OPTION_CHARS)


def is_valid_short_option_name(name: str) -> bool:
    """Return True if the text is a single character usable as a short option."""
    if len(name) != 1:
        return False
    return name not in INVALID_SHORT_OPTION_CHARS


def is_short_option_prefix(token: str) -> bool:
    """Return True if the token has the form of a short option cluster (`-x...`)."""
    length = len(SHORT_OPTION_PREFIX)
    if len(token) < length + 1:
        return False
    return token.startswith(SHORT_OPTION_PREFIX) and is_valid_short_option_name(
        token[length]
    )


def get_short_option_series(token: str) -> str:
    """Return the cluster of short option characters after the `-` prefix."""
    return token[len(SHORT_OPTION_PREFIX) :]
