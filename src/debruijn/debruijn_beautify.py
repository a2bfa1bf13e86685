"""Fresh name generation for printed binders."""

import re
from typing import Collection, Tuple

_SUFFIX_PATTERN = re.compile(r'^(.*?)(\d+)$')


def split_suffix(name: str) -> Tuple[str, int | None]:
    """
    Split a name into its base and trailing decimal suffix.

    Args:
        name: Name to split, e.g. "x12"

    Returns:
        Tuple of base and suffix, e.g. ("x", 12).  The suffix is None if the
        name does not end in digits or consists only of digits.
    """
    match = _SUFFIX_PATTERN.match(name)
    if not match or not match.group(1):
        return name, None

    return match.group(1), int(match.group(2))


def refresh(name: str, excluded: Collection[str]) -> str:
    """
    Find a variant of name that is not in excluded.

    The name is returned unchanged if it is free.  Otherwise its numeric suffix
    is incremented (x becomes x1, x1 becomes x2, ...) until an unused name is found.

    Args:
        name: Preferred name
        excluded: Names that must not be returned

    Returns:
        A name not contained in excluded
    """
    if name not in excluded:
        return name

    base, suffix = split_suffix(name)
    counter = 1 if suffix is None else suffix + 1
    while f"{base}{counter}" in excluded:
        counter += 1

    return f"{base}{counter}"
