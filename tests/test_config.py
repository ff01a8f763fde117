"""Tests for config sources, value parsing and the data factory."""

import logging

import numpy as np
import pytest

from fluor_data.config.factory import DataFactory
from fluor_data.config.parsing import parse_numeric_list, parse_numeric_list_checked
from fluor_data.config.source import (
    ConfigGroup,
    ConfigSource,
    MappingConfigSource,
    YamlConfigSource,
    load_yaml_mapping,
)
from fluor_data.data.fluorophores import FluorophoreCatalog
from fluor_data.exceptions import ConfigurationError


class TestConfigGroup:
    """Tests for reading values from a ConfigGroup."""

    def test_child_groups_in_order(self):
        group = ConfigGroup({"B": {}, "value": 1, "A": {"x": 1}})
        assert group.child_groups() == ["B", "A"]

    def test_missing_group_is_empty(self):
        child = ConfigGroup({}).group("missing")
        assert len(child) == 0
        assert child.name == "missing"

    def test_numeric_keys_addressed_as_strings(self):
        group = ConfigGroup({488: {"power": 20}})
        assert group.child_groups() == ["488"]
        assert group.group("488").value("power") == 20

    def test_value_default(self):
        group = ConfigGroup({"a": 1})
        assert group.value("a") == 1
        assert group.value("b", "fallback") == "fallback"
        assert "a" in group

    @pytest.mark.parametrize(
        "raw, expected",
        [(True, True), (False, False), ("true", True), ("False", False),
         ("yes", True), ("0", False), (1, True), (0, False)],
    )
    def test_value_bool(self, raw, expected):
        assert ConfigGroup({"enable": raw}).value_bool("enable", not expected) is expected

    def test_value_bool_falls_back(self):
        assert ConfigGroup({}).value_bool("enable", True) is True
        assert ConfigGroup({"enable": "maybe"}).value_bool("enable", False) is False

    def test_value_int(self):
        group = ConfigGroup({"a": "490", "b": 520.7, "c": "abc", "d": True})
        assert group.value_int("a", 0) == 490
        assert group.value_int("b", 0) == 520
        assert group.value_int("c", 7) == 7
        assert group.value_int("d", 7) == 7
        assert group.value_int("missing", 3) == 3

    def test_value_float(self):
        group = ConfigGroup({"a": "405.5", "b": 488, "c": "abc", "d": False})
        assert group.value_float("a", 0.0) == 405.5
        assert group.value_float("b", 0.0) == 488.0
        assert group.value_float("c", 1.5) == 1.5
        assert group.value_float("d", 1.5) == 1.5
        assert group.value_float("missing", 2.0) == 2.0

    def test_group_list(self):
        group = ConfigGroup({"lines": [{"a": 1}, "skip", {"b": 2}], "scalar": 5})
        lines = group.group_list("lines")
        assert [line.keys() for line in lines] == [["a"], ["b"]]
        assert group.group_list("scalar") == []
        assert group.group_list("missing") == []

    def test_value_list(self):
        group = ConfigGroup({
            "list": ["a", "b"],
            "numbers": [400, 410.5],
            "csv": "a, b,c",
            "empty": "",
            "scalar": 5,
        })
        assert group.value_list("list") == ["a", "b"]
        assert group.value_list("numbers") == ["400", "410.5"]
        assert group.value_list("csv") == ["a", "b", "c"]
        assert group.value_list("empty") == []
        assert group.value_list("scalar") == ["5"]
        assert group.value_list("missing") == []
        assert group.value_list("missing", ["0.0"]) == ["0.0"]

    def test_value_list_default_not_shared(self):
        default = ["0.0"]
        ConfigGroup({}).value_list("missing", default).append("1.0")
        assert default == ["0.0"]


class TestNumericParsing:
    """Tests for numeric list parsing."""

    def test_parse_strings_and_numbers(self):
        parsed = parse_numeric_list(["1", " 2.5 ", 3, 4.25])
        np.testing.assert_array_equal(parsed, [1.0, 2.5, 3.0, 4.25])
        assert parsed.dtype == np.float64

    def test_unparsable_becomes_zero(self):
        np.testing.assert_array_equal(parse_numeric_list(["1", "x", ""]), [1.0, 0.0, 0.0])

    def test_checked_reports_failures(self):
        """Parse failures stay distinguishable from measured zeros."""
        parsed, failed = parse_numeric_list_checked(["0.0", "oops", "2", None])
        np.testing.assert_array_equal(parsed, [0.0, 0.0, 2.0, 0.0])
        assert failed == [1, 3]

    def test_failures_logged_at_debug(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="fluor_data.config.parsing"):
            parse_numeric_list(["a", "b"])
        assert "2 value(s)" in caplog.text

    def test_empty(self):
        assert len(parse_numeric_list([])) == 0


class TestConfigSources:
    """Tests for the concrete config sources."""

    def test_mapping_source(self):
        source = MappingConfigSource({"fluorophores": {"PE": {}}})
        assert isinstance(source, ConfigSource)
        assert source.get("fluorophores").child_groups() == ["PE"]

    def test_mapping_source_unknown_section(self):
        with pytest.raises(ConfigurationError, match="Unknown config section"):
            MappingConfigSource({}).get("fluorophores")

    def test_yaml_source(self, tmp_path):
        path = tmp_path / "data.yaml"
        path.write_text(
            "fluorophores:\n"
            "  PE:\n"
            "    alternative_name: [R-PE]\n"
            "    excitation_max: 565\n"
        )
        source = YamlConfigSource(path)
        assert isinstance(source, ConfigSource)

        catalog = FluorophoreCatalog()
        catalog.load(source)
        assert catalog.get_fluor_names() == ["PE", "R-PE"]

    def test_yaml_source_missing_section(self, tmp_path):
        path = tmp_path / "data.yaml"
        path.write_text("settings:\n  theme: dark\n")
        with pytest.raises(ConfigurationError, match="not found"):
            YamlConfigSource(path).get("fluorophores")

    def test_yaml_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="not found"):
            load_yaml_mapping(tmp_path / "missing.yaml")

    def test_yaml_not_a_mapping(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigurationError, match="must be a mapping"):
            load_yaml_mapping(path)

    def test_yaml_invalid(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("a: [unclosed\n")
        with pytest.raises(ConfigurationError, match="Invalid YAML"):
            load_yaml_mapping(path)

    def test_yaml_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_yaml_mapping(path) == {}


class TestDataFactory:
    """Tests for data file resolution."""

    def test_available_sources(self, data_dir):
        factory = DataFactory(data_dir)
        assert factory.is_valid()
        assert factory.exists("fluorophores")
        assert not factory.exists("cytometers")
        assert factory.path("fluorophores") == (data_dir / "fluorophores.yaml").resolve()

    def test_missing_optional_sources_warn(self, data_dir, caplog):
        with caplog.at_level(logging.WARNING):
            factory = DataFactory(data_dir)
        assert factory.is_warning()
        assert "Cytometers data could not be found." in factory.messages()
        assert "cytometers" in caplog.text

    def test_missing_settings_is_fatal(self, tmp_path):
        factory = DataFactory(tmp_path)
        assert not factory.is_valid()
        assert "Settings data could not be found." in factory.messages()

    def test_custom_file_names(self, tmp_path):
        (tmp_path / "dyes.yml").write_text("PE: {}\n")
        factory = DataFactory(tmp_path, files={"fluorophores": "dyes.yml"})
        assert factory.get("fluorophores").child_groups() == ["PE"]

    def test_get_unavailable_source(self, data_dir):
        factory = DataFactory(data_dir)
        with pytest.raises(ConfigurationError, match="unavailable"):
            factory.get("cytometers")

    def test_unknown_source(self, data_dir):
        factory = DataFactory(data_dir)
        with pytest.raises(ConfigurationError, match="Unknown data source"):
            factory.get("lasers")
        with pytest.raises(ConfigurationError):
            factory.path("lasers")

    def test_factory_is_a_config_source(self, data_dir, config_source):
        """A catalog loads from the factory as from any other source."""
        factory = DataFactory(data_dir)
        assert isinstance(factory, ConfigSource)

        from_file = FluorophoreCatalog()
        from_file.load(factory)
        in_memory = FluorophoreCatalog()
        in_memory.load(config_source)

        assert from_file.get_fluor_names() == in_memory.get_fluor_names()
        spectrum = from_file.get_spectrum(factory, "DYE1")
        assert spectrum.is_valid()
        assert spectrum.excitation_max() == 490.0
