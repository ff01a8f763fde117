"""Config source interface, data file resolution and value parsing."""

from fluor_data.config.source import (
    ConfigGroup,
    ConfigSource,
    MappingConfigSource,
    YamlConfigSource,
    load_yaml_mapping,
)
from fluor_data.config.parsing import parse_numeric_list, parse_numeric_list_checked
from fluor_data.config.factory import DataFactory, DEFAULT_FILES

__all__ = [
    "ConfigGroup",
    "ConfigSource",
    "MappingConfigSource",
    "YamlConfigSource",
    "load_yaml_mapping",
    "parse_numeric_list",
    "parse_numeric_list_checked",
    "DataFactory",
    "DEFAULT_FILES",
]
