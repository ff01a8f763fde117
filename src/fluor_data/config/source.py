"""
Read interface of the grouped key/value configuration store.

A config source hands out named sections as `ConfigGroup` objects. A group is
a hierarchical mapping: nested mappings are child groups, everything else is
a value readable with a default.

Supports:
- In-memory sources (MappingConfigSource)
- YAML files (YamlConfigSource)
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterator, Mapping, Protocol, runtime_checkable

import yaml

from fluor_data.exceptions import ConfigurationError

_TRUE_STRINGS = {"true", "1", "yes", "on"}
_FALSE_STRINGS = {"false", "0", "no", "off"}


class ConfigGroup:
    """A read-only group of config values and child groups."""

    def __init__(self, data: Mapping[str, Any] | None = None, name: str = ""):
        self.name = name
        # YAML turns numeric keys into ints; groups are always addressed by str
        self._data: dict[str, Any] = {str(key): value for key, value in (data or {}).items()}

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"ConfigGroup(name={self.name!r}, keys={list(self._data)!r})"

    def keys(self) -> list[str]:
        return list(self._data)

    def child_groups(self) -> list[str]:
        """Names of the nested groups, in source order."""
        return [key for key, value in self._data.items() if isinstance(value, Mapping)]

    def group(self, name: str) -> "ConfigGroup":
        """Get a child group; an absent or non-group key yields an empty group."""
        value = self._data.get(name)
        if not isinstance(value, Mapping):
            value = {}
        return ConfigGroup(value, name=name)

    def group_list(self, key: str) -> list["ConfigGroup"]:
        """Read a list of nested groups; entries that are not mappings are skipped."""
        value = self._data.get(key)
        if not isinstance(value, (list, tuple)):
            return []
        return [
            ConfigGroup(item, name=f"{key}[{index}]")
            for index, item in enumerate(value)
            if isinstance(item, Mapping)
        ]

    def value(self, key: str, default: Any = None) -> Any:
        """Raw value of a key, or default if absent."""
        return self._data.get(key, default)

    def value_bool(self, key: str, default: bool) -> bool:
        """Read a boolean. Accepts bools, numbers and true/false style strings."""
        value = self._data.get(key)
        if value is None:
            return default
        if isinstance(value, bool):
            return value
        if isinstance(value, (int, float)):
            return value != 0
        text = str(value).strip().lower()
        if text in _TRUE_STRINGS:
            return True
        if text in _FALSE_STRINGS:
            return False
        return default

    def value_int(self, key: str, default: int) -> int:
        """Read an integer, falling back to default if absent or unparsable."""
        value = self._data.get(key)
        if value is None or isinstance(value, bool):
            return default
        try:
            return int(float(value))
        except (TypeError, ValueError):
            return default

    def value_float(self, key: str, default: float) -> float:
        """Read a float, falling back to default if absent or unparsable."""
        value = self._data.get(key)
        if value is None or isinstance(value, bool):
            return default
        try:
            return float(value)
        except (TypeError, ValueError):
            return default

    def value_list(self, key: str, default: list[str] | None = None) -> list[str]:
        """Read a list of strings.

        A scalar string is split on commas, as INI-style list values are
        written. An empty string is an empty list.
        """
        value = self._data.get(key)
        if value is None:
            return list(default) if default is not None else []
        if isinstance(value, str):
            if not value.strip():
                return []
            return [item.strip() for item in value.split(",")]
        if isinstance(value, (list, tuple)):
            return [str(item) for item in value]
        return [str(value)]


@runtime_checkable
class ConfigSource(Protocol):
    """Anything that can hand out named config sections."""

    def get(self, section: str) -> ConfigGroup:
        ...


class MappingConfigSource:
    """Config source backed by an in-memory mapping of sections."""

    def __init__(self, data: Mapping[str, Mapping[str, Any]]):
        self._data = data

    def get(self, section: str) -> ConfigGroup:
        """
        Get a section.

        Raises:
            ConfigurationError: If the section does not exist
        """
        if section not in self._data:
            raise ConfigurationError(f"Unknown config section: {section}")
        return ConfigGroup(self._data[section], name=section)


def load_yaml_mapping(path: Path | str) -> dict[str, Any]:
    """
    Load a YAML file whose top level is a mapping.

    An empty file loads as an empty mapping.

    Raises:
        ConfigurationError: If the file is missing, unparsable or not a mapping
    """
    path = Path(path)
    if not path.exists():
        raise ConfigurationError(f"Config file not found: {path}")

    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Top level of {path} must be a mapping")
    return data


class YamlConfigSource:
    """Config source backed by a single YAML file.

    Each top-level key of the document is a section. The file is read lazily
    on first access and then kept.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path)
        self._data: dict[str, Any] | None = None

    def get(self, section: str) -> ConfigGroup:
        """
        Get a section.

        Raises:
            ConfigurationError: If the file cannot be read or lacks the section
        """
        if self._data is None:
            self._data = load_yaml_mapping(self.path)
        value = self._data.get(section)
        if not isinstance(value, Mapping):
            raise ConfigurationError(f"Section {section!r} not found in {self.path}")
        return ConfigGroup(value, name=section)
