"""ABOUTME: Configuration logic and path settings for the project.
ABOUTME: Provides paths for the bundled config directory and the files it holds."""

from pathlib import Path

from pydantic import computed_field
from pydantic_settings import BaseSettings

from slugintl import __version__

_PACKAGE_DIR = Path(__file__).resolve().parent


class Settings(BaseSettings):
    """Contains settings for this project."""

    VERSION: str = __version__
    """Project version."""

    PACKAGE_DIR: Path = _PACKAGE_DIR
    """Directory of the installed slugintl package."""

    @computed_field  # type: ignore[prop-decorator]
    @property
    def configs_dir(self) -> Path:
        """Directory containing the config files shipped with the package."""
        return self.PACKAGE_DIR / "configs"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def logging_config_path(self) -> Path:
        """Path to the logging.yml dictConfig file."""
        return self.configs_dir / "logging.yml"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def slug_options_path(self) -> Path:
        """Path to the slug_options.yml file."""
        return self.configs_dir / "slug_options.yml"


settings = Settings()
