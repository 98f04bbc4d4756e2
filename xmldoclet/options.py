"""Command-line option table and option matrix accessors.

The host tool hands the doclet an *option matrix*: a list of entries where
each entry is ``[name, value...]``. ``option_length`` tells the host how many
tokens each option occupies (the option name included) so it can build the
matrix; the accessors below read values back out of it.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence

OptionMatrix = Sequence[Sequence[str]]

OPTION_LENGTHS: Dict[str, int] = {
    # shared with the standard doclet
    "-d": 2,
    "-docencoding": 2,
    # specific to xmldoclet
    "-multiple": 1,
    "-filename": 2,
    "-implements": 2,
    "-extends": 2,
    "-annotated": 2,
    "-tag": 2,
    "-taglet": 2,
    "-subfolders": 1,
}


class OptionError(ValueError):
    """Raised when a raw argument list contains an option xmldoclet does not know."""


def option_length(option: str) -> int:
    """Return the number of tokens used by ``option``, or 0 when it is not recognised."""
    return OPTION_LENGTHS.get(option, 0)


def has(options: OptionMatrix, name: str) -> bool:
    """Return True when any entry in the matrix is named ``name``."""
    return any(option and option[0] == name for option in options)


def get(options: OptionMatrix, name: str) -> Optional[str]:
    """Return the value of the first entry named ``name``.

    Later entries with the same name are ignored. ``None`` is returned when
    the option is absent or its first entry carries no value.
    """
    for option in options:
        if option and option[0] == name:
            return option[1] if len(option) > 1 else None
    return None


def get_all(options: OptionMatrix, name: str) -> List[str]:
    """Return the value of every entry named ``name`` in matrix order.

    Entries without a value are skipped. Only meaningful for repeatable
    options such as ``-tag``.
    """
    values: List[str] = []
    for option in options:
        if option and option[0] == name and len(option) > 1:
            values.append(option[1])
    return values


def split_options(argv: Sequence[str]) -> List[List[str]]:
    """Group a flat argument list into an option matrix using ``option_length``.

    An option whose value is cut off by the end of ``argv`` is kept as a
    short entry so validation can report the missing value.
    """
    matrix: List[List[str]] = []
    index = 0
    while index < len(argv):
        name = argv[index]
        length = option_length(name)
        if length == 0:
            raise OptionError(f"Invalid flag: {name}")
        matrix.append(list(argv[index : index + length]))
        index += length
    return matrix


__all__ = [
    "OPTION_LENGTHS",
    "OptionError",
    "OptionMatrix",
    "get",
    "get_all",
    "has",
    "option_length",
    "split_options",
]
