"""Pytest fixtures for fluor_data tests."""

import pytest
import numpy as np
import yaml

from fluor_data.config.source import MappingConfigSource
from fluor_data.data.fluorophores import FluorophoreCatalog
from fluor_data.models.spectrum import Spectrum


@pytest.fixture
def step_spectrum():
    """Small spectrum for step-function lookup checks."""
    return Spectrum(
        fluor_id="STEP",
        excitation_wavelength=[400, 410, 420],
        excitation_intensity=[10, 20, 30],
        emission_wavelength=[500, 510, 520, 530],
        emission_intensity=[5, 20, 20, 3],
    )


@pytest.fixture
def gaussian_spectrum():
    """FITC-like spectrum sampled every nm (ex peak 495, em peak 520)."""
    excitation_wavelength = np.arange(400, 560)
    emission_wavelength = np.arange(470, 650)
    return Spectrum(
        fluor_id="FITC",
        excitation_wavelength=excitation_wavelength,
        excitation_intensity=np.exp(-((excitation_wavelength - 495) ** 2) / (2 * 20 ** 2)),
        emission_wavelength=emission_wavelength,
        emission_intensity=np.exp(-((emission_wavelength - 520) ** 2) / (2 * 25 ** 2)),
    )


@pytest.fixture
def fluorophore_data():
    """Raw 'fluorophores' section with aliases, defaults and broken entries."""
    return {
        "DEFAULT": {
            "enable": True,
            "excitation_max": 0,
            "emission_max": 0,
        },
        "DYE1": {
            "alternative_name": ["Other1", "Other2"],
            "excitation_max": 490,
            "emission_max": 520,
            "excitation_wavelength": ["480", "490", "500"],
            "excitation_intensity": ["0.5", "1.0", "0.5"],
            "emission_wavelength": ["510", "520", "530"],
            "emission_intensity": ["0.4", "1.0", "0.3"],
        },
        "PE": {
            "excitation_max": 565,
            "emission_max": 575,
            "excitation_wavelength": ["550", "565", "580"],
            "excitation_intensity": ["0.7", "1.0", "0.6"],
            "emission_wavelength": ["560", "575", "590"],
            "emission_intensity": ["0.3", "1.0", "0.5"],
        },
        "apc": {
            "emission_wavelength": ["640", "660"],
            "emission_intensity": ["0.5", "1.0"],
            "absorption_wavelength": ["600", "650"],
            "absorption_intensity": ["0.4", "1.0"],
        },
        "HIDDEN": {
            "enable": False,
            "alternative_name": ["Secret"],
            "excitation_max": 400,
        },
        "BROKEN": {
            "excitation_wavelength": ["400", "410"],
            "excitation_intensity": ["1.0"],
            "emission_wavelength": ["500", "510"],
            "emission_intensity": ["1.0", "0.5"],
        },
    }


@pytest.fixture
def config_source(fluorophore_data):
    """In-memory config source with the fluorophores section."""
    return MappingConfigSource({"fluorophores": fluorophore_data})


@pytest.fixture
def catalog(config_source):
    """Loaded fluorophore catalog."""
    loaded = FluorophoreCatalog()
    loaded.load(config_source)
    return loaded


@pytest.fixture
def data_dir(tmp_path, fluorophore_data):
    """Data directory with settings and fluorophores YAML files."""
    (tmp_path / "settings.yaml").write_text(yaml.safe_dump({"settings": {"theme": "light"}}))
    (tmp_path / "fluorophores.yaml").write_text(yaml.safe_dump(fluorophore_data))
    return tmp_path


@pytest.fixture
def instrument_data():
    """Raw 'cytometers' section: one unsorted two-line instrument and broken entries."""
    return {
        "canto": {
            "name": "BD FACSCanto II",
            "laserlines": [
                {
                    "lasers": [{"wavelength": 633, "name": "Red"}],
                    "filters": [
                        {"type": "LP", "wavelength": 735, "name": "APC-Cy7"},
                        {"type": "BP", "wavelength": 660, "fwhm": 20, "name": "APC"},
                    ],
                },
                {
                    "lasers": [{"wavelength": 488, "name": "Blue"}],
                    "filters": [
                        {"type": "BP", "wavelength": 530, "fwhm": 30, "name": "FITC"},
                        {"type": "XX", "wavelength": 600},
                        {"type": "SP", "wavelength": 510},
                    ],
                },
            ],
        },
        "aria": {
            "laserlines": [{"lasers": [{"wavelength": 405}]}],
        },
        "broken": {
            "name": "Missing fwhm",
            "laserlines": [
                {
                    "lasers": [{"wavelength": 488}],
                    "filters": [{"type": "BP", "wavelength": 530}],
                },
            ],
        },
    }


@pytest.fixture
def instrument_source(instrument_data):
    """In-memory config source with the cytometers section."""
    return MappingConfigSource({"cytometers": instrument_data})
