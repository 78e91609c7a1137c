# ABOUTME: Unicode major category lookup used to classify characters for slugs.
# ABOUTME: Wraps unicodedata so the slug fold only deals with one-letter groups.

import unicodedata
from enum import Enum


class MajorCategory(Enum):
    """The seven Unicode General Category major groups."""

    L = "L"
    """Letter (Lu, Ll, Lt, Lm, Lo)."""

    M = "M"
    """Mark (Mn, Mc, Me)."""

    N = "N"
    """Number (Nd, Nl, No)."""

    P = "P"
    """Punctuation (Pc, Pd, Ps, Pe, Pi, Pf, Po)."""

    S = "S"
    """Symbol (Sm, Sc, Sk, So)."""

    Z = "Z"
    """Separator (Zs, Zl, Zp)."""

    C = "C"
    """Other (Cc, Cf, Cs, Co, Cn)."""


KEPT_LOWERCASED: frozenset[MajorCategory] = frozenset({MajorCategory.L})
KEPT_VERBATIM: frozenset[MajorCategory] = frozenset({MajorCategory.M, MajorCategory.N, MajorCategory.S})
HYPHENATED: frozenset[MajorCategory] = frozenset({MajorCategory.P, MajorCategory.Z, MajorCategory.C})


def major_category(char: str) -> MajorCategory:
    """Return the major General Category of a single code point.

    Unassigned code points report ``Cn`` and therefore classify as ``C``.

    Args:
        char: A string of exactly one code point.

    Returns:
        The MajorCategory the code point belongs to.

    Raises:
        TypeError: If char is not exactly one code point long.

    Examples:
        >>> major_category("a")
        <MajorCategory.L: 'L'>
        >>> major_category("1")
        <MajorCategory.N: 'N'>
        >>> major_category("!")
        <MajorCategory.P: 'P'>
    """
    return MajorCategory(unicodedata.category(char)[0])


def lowercase_mapping(char: str) -> str:
    """Return the full lowercase mapping of one code point, which may expand.

    Examples:
        >>> lowercase_mapping("A")
        'a'
        >>> len(lowercase_mapping("İ"))
        2
    """
    return char.lower()
