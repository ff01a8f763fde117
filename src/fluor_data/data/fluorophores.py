"""
Fluorophore catalog built from the 'fluorophores' config section.

The section contains one group per fluorophore, keyed by its canonical id,
plus a reserved DEFAULT group with catalog-wide fallbacks:

    fluorophores:
      DEFAULT:
        enable: true
        excitation_max: 0
        emission_max: 0
      FITC:
        alternative_name: [Fluorescein]
        excitation_max: 495
        emission_max: 519
        absorption_max: 490   # used when only absorption data is given
        excitation_wavelength: ["400", "401", ...]
        excitation_intensity: ["0.05", "0.06", ...]
        emission_wavelength: [...]
        emission_intensity: [...]

`load()` reads the names and metadata once; spectra are read from the source
on demand by `get_spectrum()` and are not cached.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from types import MappingProxyType
from typing import Mapping, Optional

from fluor_data.config.parsing import parse_numeric_list
from fluor_data.config.source import ConfigGroup, ConfigSource
from fluor_data.exceptions import CatalogNotLoadedError
from fluor_data.models.cache import CacheSpectrum
from fluor_data.models.spectrum import Meta, Spectrum

logger = logging.getLogger(__name__)

FLUOROPHORES_SECTION = "fluorophores"
DEFAULT_GROUP = "DEFAULT"

# Used for any curve key missing from a fluorophore group
_ZERO_CURVE = ["0.0"]


class FluorophoreCatalog:
    """Name, alias and metadata indices of the available fluorophores.

    Built once by `load()` and read-only afterwards. To pick up changed
    data, `unload()` (or discard) the catalog and load again.
    """

    def __init__(self):
        self._names: tuple[str, ...] = ()
        self._ids: dict[str, str] = {}
        self._multinames: dict[str, tuple[str, ...]] = {}
        self._id_names: dict[str, tuple[str, ...]] = {}
        self._meta: dict[str, Meta] = {}
        self._loaded = False

    def __len__(self) -> int:
        return len(self._names)

    def __contains__(self, name: object) -> bool:
        return name in self._ids

    def __repr__(self) -> str:
        return f"FluorophoreCatalog(loaded={self._loaded}, names={len(self._names)})"

    def load(self, source: ConfigSource) -> None:
        """Build all indices from the fluorophores section of a config source.

        Disabled fluorophores are left out of every index. Calling load on a
        loaded catalog rebuilds it from scratch.

        Args:
            source: Config source providing the 'fluorophores' section.
        """
        fluorophores = source.get(FLUOROPHORES_SECTION)

        defaults = fluorophores.group(DEFAULT_GROUP)
        default_enable = defaults.value_bool("enable", True)
        default_excitation_max = defaults.value_int("excitation_max", 0)
        default_emission_max = defaults.value_int("emission_max", 0)

        ids: dict[str, str] = {}
        id_names: dict[str, list[str]] = {}
        meta: dict[str, Meta] = {}
        skipped = 0

        for fluor_id in fluorophores.child_groups():
            if fluor_id == DEFAULT_GROUP:
                continue

            group = fluorophores.group(fluor_id)
            if not group.value_bool("enable", default_enable):
                skipped += 1
                continue

            meta[fluor_id] = Meta(
                excitation_max=group.value_int("excitation_max", default_excitation_max),
                emission_max=group.value_int("emission_max", default_emission_max),
            )

            # The canonical id is always one of the display names
            alias_set = list(dict.fromkeys(group.value_list("alternative_name") + [fluor_id]))

            for name in alias_set:
                previous = ids.get(name)
                if previous is not None and previous != fluor_id:
                    logger.warning(
                        "Fluorophore name %r of %r is already used by %r, reassigned to %r",
                        name, fluor_id, previous, fluor_id,
                    )
                    id_names[previous].remove(name)
                ids[name] = fluor_id
            id_names[fluor_id] = alias_set

        multinames: dict[str, tuple[str, ...]] = {}
        for alias_set in id_names.values():
            for name in alias_set:
                multinames[name] = tuple(other for other in alias_set if other != name)

        self._ids = ids
        self._multinames = multinames
        self._id_names = {fluor_id: tuple(names) for fluor_id, names in id_names.items()}
        self._meta = meta
        self._names = tuple(sorted(ids))
        self._loaded = True

        logger.debug(
            "Loaded %d fluorophores (%d disabled) with %d display names",
            len(meta), skipped, len(self._names),
        )

    def unload(self) -> None:
        """Release all indices and mark the catalog as not loaded."""
        self._names = ()
        self._ids = {}
        self._multinames = {}
        self._id_names = {}
        self._meta = {}
        self._loaded = False

    def is_valid(self) -> bool:
        """Whether the catalog has been loaded."""
        return self._loaded

    def get_fluor_names(self) -> list[str]:
        """All display names, sorted ascending (case-sensitive)."""
        return list(self._names)

    def get_fluor_ids(self) -> Mapping[str, str]:
        """Display name -> canonical id."""
        return MappingProxyType(self._ids)

    def get_fluor_multinames(self) -> Mapping[str, list[str]]:
        """Display name -> the other display names of the same fluorophore."""
        return MappingProxyType({name: list(others) for name, others in self._multinames.items()})

    def get_fluor_meta(self) -> Mapping[str, Meta]:
        """Canonical id -> metadata."""
        return MappingProxyType(self._meta)

    def _require_loaded(self) -> None:
        if not self._loaded:
            raise CatalogNotLoadedError("FluorophoreCatalog is not loaded, call load() first")

    def resolve(self, name: str) -> Optional[str]:
        """Canonical id of a display name, None if unknown."""
        self._require_loaded()
        return self._ids.get(name)

    def aliases(self, name: str) -> list[str]:
        """Other display names of the fluorophore a name belongs to."""
        self._require_loaded()
        return list(self._multinames.get(name, ()))

    def meta(self, fluor_id: str) -> Optional[Meta]:
        """Metadata of a canonical id, None if unknown."""
        self._require_loaded()
        return self._meta.get(fluor_id)

    @staticmethod
    def _read_curves(group: ConfigGroup) -> tuple[list[str], list[str], bool]:
        """Raw excitation curve of a group, falling back to absorption data."""
        wavelength = group.value_list("excitation_wavelength")
        intensity = group.value_list("excitation_intensity")
        if (not wavelength or not intensity) and (
            "absorption_wavelength" in group and "absorption_intensity" in group
        ):
            return (
                group.value_list("absorption_wavelength", _ZERO_CURVE),
                group.value_list("absorption_intensity", _ZERO_CURVE),
                True,
            )
        return (
            group.value_list("excitation_wavelength", _ZERO_CURVE),
            group.value_list("excitation_intensity", _ZERO_CURVE),
            False,
        )

    def get_spectrum(self, source: ConfigSource, fluor_id: str) -> Spectrum:
        """Read the spectrum of a fluorophore.

        Args:
            source: Config source providing the 'fluorophores' section.
            fluor_id: Canonical id of the fluorophore.

        Returns:
            The Spectrum. Missing curve keys read as a single 0.0 sample, so an
            id without a group (or a group without curves) gives a valid
            spectrum of matched one-sample zero curves; a WARNING is logged
            for the unknown id. If the data is mismatched an all-zero
            fallback spectrum with `is_fallback` set is returned instead; it
            answers every query with 0 and reports `is_valid() == False`.
        """
        fluorophores = source.get(FLUOROPHORES_SECTION)
        if fluor_id not in fluorophores.child_groups():
            logger.warning("Spectrum of fluorophore id %r could not be found", fluor_id)
        group = fluorophores.group(fluor_id)

        excitation_wavelength, excitation_intensity, is_absorption = self._read_curves(group)

        spectrum = Spectrum(
            fluor_id=fluor_id,
            excitation_wavelength=parse_numeric_list(excitation_wavelength),
            excitation_intensity=parse_numeric_list(excitation_intensity),
            emission_wavelength=parse_numeric_list(
                group.value_list("emission_wavelength", _ZERO_CURVE)
            ),
            emission_intensity=parse_numeric_list(
                group.value_list("emission_intensity", _ZERO_CURVE)
            ),
            is_absorption=is_absorption,
        )

        if spectrum.is_valid():
            return spectrum

        logger.warning("Spectrum of fluorophore id %r is invalid, using zero fallback", fluor_id)
        return Spectrum(
            fluor_id=fluor_id,
            excitation_wavelength=[0.0],
            excitation_intensity=[0.0],
            emission_wavelength=[0.0],
            emission_intensity=[0.0],
            is_fallback=True,
        )

    def get_cache_spectrum(
        self,
        source: ConfigSource,
        fluor_id: str,
        index: int,
        name: Optional[str] = None,
    ) -> CacheSpectrum:
        """Read a spectrum and wrap it as a cache entry with catalog metadata.

        If the excitation curve is an absorption curve, the excitation peak
        of the entry's metadata is the group's `absorption_max` (0 if absent).

        Args:
            source: Config source providing the 'fluorophores' section.
            fluor_id: Canonical id of the fluorophore.
            index: Build order of the cache entry.
            name: Display name the fluorophore was selected by.
        """
        spectrum = self.get_spectrum(source, fluor_id)
        meta = self._meta.get(fluor_id)
        if spectrum.is_absorption:
            group = source.get(FLUOROPHORES_SECTION).group(fluor_id)
            meta = replace(
                meta or Meta(),
                excitation_max=group.value_int("absorption_max", 0),
            )

        return CacheSpectrum(
            index=index,
            spectrum=spectrum,
            name=name,
            names=list(self._id_names.get(fluor_id, ())),
            meta=meta,
        )
