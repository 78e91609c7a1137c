"""ABOUTME: Slug options model and loader for YAML option files.
ABOUTME: Declares the length bounds accepted by slugify_with_options."""

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, model_validator

from slugintl.settings import settings

logger = logging.getLogger(__name__)


class SlugOptions(BaseModel):
    """Options accepted by slugify_with_options.

    The length bounds are declared for callers that want to record their
    intent, but the transformation does not apply them: a slug is never
    truncated, padded, or rejected because of its length.
    """

    minimum_length: int = Field(default=3, ge=0)
    """Desired minimum slug length."""

    maximum_length: int = Field(default=30, ge=0)
    """Desired maximum slug length."""

    model_config = {
        "frozen": True,
    }

    @model_validator(mode="after")
    def _check_bounds_order(self) -> "SlugOptions":
        if self.minimum_length > self.maximum_length:
            raise ValueError(
                f"minimum_length ({self.minimum_length}) must not exceed maximum_length ({self.maximum_length})"
            )
        return self


DEFAULT_OPTIONS = SlugOptions()


def load_slug_options(config_path: Path | None = None) -> SlugOptions:
    """Load slug options from a YAML file.

    Args:
        config_path: Path to the options file. Defaults to settings.slug_options_path.

    Returns:
        Validated SlugOptions. An empty file yields the defaults.

    Raises:
        FileNotFoundError: If the options file doesn't exist.
        ValueError: If the file does not contain a mapping.
        pydantic.ValidationError: If a bound is out of range.
    """
    if config_path is None:
        config_path = settings.slug_options_path

    if not config_path.exists():
        raise FileNotFoundError(f"Slug options not found: {config_path}")

    with config_path.open(encoding="utf-8") as f:
        raw_options = yaml.safe_load(f)

    if raw_options is None:
        logger.debug("Slug options file %s is empty, using defaults", config_path)
        return SlugOptions()

    if not isinstance(raw_options, dict):
        raise ValueError(f"Slug options in {config_path} must be a mapping, got {type(raw_options).__name__}")

    options = SlugOptions.model_validate(raw_options)
    logger.debug("Loaded slug options from %s: %s", config_path, options)
    return options
