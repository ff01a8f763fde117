"""
Resolution of the named data files of the viewer.

The data directory holds one YAML file per data source. The factory checks
which files exist on construction and hands out their contents as config
sections, so it can be passed anywhere a ConfigSource is expected.

Usage:
    factory = DataFactory("data")
    if not factory.is_valid():
        ...  # settings are missing, cannot continue
    catalog = FluorophoreCatalog()
    catalog.load(factory)
    if factory.exists("cytometers"):
        instruments = InstrumentReader()
        instruments.load(factory)
"""

from __future__ import annotations

import logging
from pathlib import Path

from fluor_data.config.source import ConfigGroup, load_yaml_mapping
from fluor_data.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

# Default data files, relative to the data directory
DEFAULT_FILES = {
    "settings": "settings.yaml",
    "cytometers": "cytometers.yaml",
    "fluorophores": "fluorophores.yaml",
}

# Sources without which the application cannot run
ESSENTIAL_SOURCES = ("settings",)


class DataFactory:
    """Checks data file availability and loads data sources."""

    def __init__(self, data_dir: Path | str = "data", files: dict[str, str] | None = None):
        """
        Args:
            data_dir: Directory containing the data files
            files: Optional overrides of the file name per source
        """
        self.data_dir = Path(data_dir)
        self.files = {**DEFAULT_FILES, **(files or {})}
        self._paths = {name: self.data_dir / file for name, file in self.files.items()}
        self._valid = {name: path.is_file() for name, path in self._paths.items()}

        for name, exists in self._valid.items():
            if not exists:
                logger.warning("Cannot find %s data file: %s", name, self._paths[name])

    def path(self, name: str) -> Path:
        """
        Absolute path of a data source file.

        Raises:
            ConfigurationError: If the source name is unknown
        """
        if name not in self._paths:
            raise ConfigurationError(f"Unknown data source: {name}")
        return self._paths[name].resolve()

    def exists(self, name: str) -> bool:
        return self._valid.get(name, False)

    def is_valid(self) -> bool:
        """Whether all essential sources (settings) are present."""
        return all(self.exists(name) for name in ESSENTIAL_SOURCES if name in self._paths)

    def is_warning(self) -> bool:
        """Whether any non-essential source is missing."""
        return any(
            not exists for name, exists in self._valid.items() if name not in ESSENTIAL_SOURCES
        )

    def messages(self) -> list[str]:
        """Human-readable descriptions of the missing data files."""
        return [
            f"{name.capitalize()} data could not be found."
            for name, exists in self._valid.items()
            if not exists
        ]

    def get(self, section: str) -> ConfigGroup:
        """
        Load a data source.

        Args:
            section: Data source name, e.g. 'fluorophores'

        Returns:
            The file contents as a ConfigGroup

        Raises:
            ConfigurationError: If the source is unknown or its file is missing
        """
        if section not in self._paths:
            raise ConfigurationError(f"Unknown data source: {section}")
        if not self._valid[section]:
            raise ConfigurationError(
                f"Requested unavailable data source {section!r}: {self._paths[section]}"
            )
        return ConfigGroup(load_yaml_mapping(self._paths[section]), name=section)
