"""ABOUTME: Text normalization utilities for URL path slugs.
ABOUTME: Provides slugify, which keeps non-ASCII text and collapses separators to hyphens."""

import logging
import unicodedata

from slugintl.categories import (
    KEPT_LOWERCASED,
    KEPT_VERBATIM,
    lowercase_mapping,
    major_category,
)
from slugintl.config import DEFAULT_OPTIONS, SlugOptions

logger = logging.getLogger(__name__)

HYPHEN = "-"


def slugify(text: str) -> str:
    """Convert text to a slug suitable for use as a URL path component.

    Handles:
    - Unicode normalization to NFC
    - Lowercasing of letters (full mapping, may expand)
    - Punctuation, whitespace and control characters to a single hyphen
    - Leading/trailing hyphen removal

    Non-ASCII text is kept as is. Percent-encoding is left to the caller.

    The only observable effect besides the return value is a diagnostic
    DEBUG record on the ``slugintl.normalize`` logger when non-empty input
    yields an empty slug. It never changes the result.

    Args:
        text: Input text to slugify.

    Returns:
        Slug string, possibly empty.

    Examples:
        >>> slugify("Hello World!")
        'hello-world'
        >>> slugify("/?&#Hello\\n\\r\\n\\r   --World!!!")
        'hello-world'
        >>> slugify("¡¡1≈3∞5=¶£9!!")
        '1≈3∞5=-£9'
    """
    return slugify_with_options(text, DEFAULT_OPTIONS)


def slugify_with_options(text: str, options: SlugOptions) -> str:  # noqa: ARG001
    """Convert text to a slug using explicit options.

    The length bounds in ``options`` are not applied; the result is the same
    as ``slugify(text)``, including the diagnostic DEBUG record.

    Args:
        text: Input text to slugify.
        options: Slug options.

    Returns:
        Slug string, possibly empty.
    """
    buffer: list[str] = []
    # Starts True so leading separators are dropped
    previous_was_hyphen = True

    for char in unicodedata.normalize("NFC", text):
        category = major_category(char)
        if category in KEPT_LOWERCASED:
            buffer.append(lowercase_mapping(char))
            previous_was_hyphen = False
        elif category in KEPT_VERBATIM:
            buffer.append(char)
            previous_was_hyphen = False
        elif not previous_was_hyphen:
            buffer.append(HYPHEN)
            previous_was_hyphen = True

    # At most one trailing hyphen can remain
    if buffer and buffer[-1] == HYPHEN:
        buffer.pop()

    slug = "".join(buffer)

    if text and not slug:
        logger.debug("Input of %d characters produced an empty slug", len(text))

    return slug
