"""ABOUTME: slugintl turns arbitrary text into URL path slugs that keep non-ASCII text.
ABOUTME: Exposes slugify, slugify_with_options and the SlugOptions model."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("slugintl")
except PackageNotFoundError:  # pragma: no cover - during source-only use
    __version__ = "unknown"

from slugintl.categories import MajorCategory, major_category  # noqa: E402
from slugintl.config import SlugOptions  # noqa: E402
from slugintl.normalize import slugify, slugify_with_options  # noqa: E402

__all__ = [
    "MajorCategory",
    "SlugOptions",
    "__version__",
    "major_category",
    "slugify",
    "slugify_with_options",
]
