"""Fluorophore catalog and instrument reader."""

from fluor_data.data.fluorophores import (
    FluorophoreCatalog,
    FLUOROPHORES_SECTION,
    DEFAULT_GROUP,
)
from fluor_data.data.instruments import InstrumentReader, INSTRUMENTS_SECTION

__all__ = [
    "FluorophoreCatalog",
    "FLUOROPHORES_SECTION",
    "DEFAULT_GROUP",
    "InstrumentReader",
    "INSTRUMENTS_SECTION",
]
