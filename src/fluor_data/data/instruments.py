"""
Instrument reader for the 'cytometers' config section.

One group per instrument, keyed by its id:

    cytometers:
      canto:
        name: BD FACSCanto II
        laserlines:
          - lasers:
              - {wavelength: 488, name: Blue}
            filters:
              - {type: BP, wavelength: 530, fwhm: 30, name: FITC}
              - {type: LP, wavelength: 670, name: PerCP}

Filter types are BP (band pass), LP (long pass) and SP (short pass).
"""

from __future__ import annotations

import logging
from typing import Optional

from fluor_data.config.source import ConfigGroup, ConfigSource
from fluor_data.models.instrument import (
    Filter,
    FilterType,
    Instrument,
    InstrumentID,
    Laser,
    LaserLine,
)

logger = logging.getLogger(__name__)

INSTRUMENTS_SECTION = "cytometers"


class InstrumentReader:
    """Lists the available instruments and reads their optics on demand."""

    def __init__(self):
        self._ids: list[InstrumentID] = []
        self._loaded = False

    def __len__(self) -> int:
        return len(self._ids)

    def load(self, source: ConfigSource) -> None:
        """Read the instrument ids and names, sorted by name (case-insensitive)."""
        instruments = source.get(INSTRUMENTS_SECTION)
        ids = [
            InstrumentID(key, str(instruments.group(key).value("name", key)))
            for key in instruments.child_groups()
        ]
        self._ids = sorted(ids, key=lambda instrument_id: instrument_id.name.lower())
        self._loaded = True
        logger.debug("Loaded %d instruments", len(self._ids))

    def unload(self) -> None:
        self._ids = []
        self._loaded = False

    def is_valid(self) -> bool:
        """Whether instrument data has been loaded."""
        return self._loaded

    def get_instrument_ids(self) -> list[InstrumentID]:
        return list(self._ids)

    def get_instrument(self, source: ConfigSource, instrument_id: str) -> Instrument:
        """Read the optics of an instrument.

        Args:
            source: Config source providing the 'cytometers' section.
            instrument_id: Key of the instrument.

        Returns:
            The instrument with laser lines sorted by wavelength, or an empty
            Instrument if the id is unknown or its optics are invalid.
        """
        instruments = source.get(INSTRUMENTS_SECTION)
        if instrument_id not in instruments.child_groups():
            logger.warning("Instrument of id %r could not be found", instrument_id)
            return Instrument()

        group = instruments.group(instrument_id)
        instrument = Instrument(
            id=instrument_id,
            name=str(group.value("name", instrument_id)),
            optics=[_read_laser_line(line) for line in group.group_list("laserlines")],
        )

        if not instrument.is_valid():
            logger.warning("Instrument of id %r is invalid", instrument_id)
            return Instrument()

        instrument.sort()
        return instrument


def _read_laser_line(group: ConfigGroup) -> LaserLine:
    lasers = [
        Laser(laser.value_float("wavelength", 0.0), str(laser.value("name", "")))
        for laser in group.group_list("lasers")
    ]
    filters = [
        filter_
        for filter_ in (_read_filter(data) for data in group.group_list("filters"))
        if filter_ is not None
    ]
    return LaserLine(lasers=lasers, filters=filters)


def _read_filter(group: ConfigGroup) -> Optional[Filter]:
    try:
        filter_type = FilterType(str(group.value("type", "")).upper())
    except ValueError:
        logger.warning("Skipping filter of unknown type %r", group.value("type"))
        return None

    # fwhm only applies to band pass filters
    fwhm = group.value_float("fwhm", 0.0) if filter_type is FilterType.BAND_PASS else 0.0
    return Filter(
        type=filter_type,
        wavelength=group.value_float("wavelength", 0.0),
        fwhm=fwhm,
        name=str(group.value("name", "")),
    )
